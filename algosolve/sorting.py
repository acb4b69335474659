"""Sorting tasks: generated test data, radix sort, maximum gap and inversion counts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate

_WORD_BITS = 32
_MASK = (1 << _WORD_BITS) - 1
_HASH_START = 998244353
_DIGIT_BITS = 16
_DIGIT_MASK = (1 << _DIGIT_BITS) - 1
_BUCKET_BITS = 26


def xorshift(x: int) -> int:
    """One step of the 32-bit xorshift generator (shifts 13, 17, 5)."""
    x &= _MASK
    x ^= (x << 13) & _MASK
    x ^= x >> 17
    x ^= (x << 5) & _MASK
    return x


def generate_data(n: int, k: int, seed: int) -> list[int]:
    """``n`` pseudo-random ``k``-bit values drawn from the xorshift stream of ``seed``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if not 1 <= k <= _WORD_BITS:
        raise ValueError("k must be between 1 and 32")
    values = []
    for _ in range(n):
        seed = xorshift(seed)
        values.append(seed >> (_WORD_BITS - k))
    return values


def array_hash(values: Iterable[int]) -> int:
    """Order-sensitive 32-bit checksum of a sequence of values."""
    x = _HASH_START
    result = 0
    for value in values:
        result ^= (value + x) & _MASK
        x = xorshift(x)
    return result


def _check_words(values: Sequence[int], bits: int = _WORD_BITS) -> None:
    limit = 1 << bits
    for value in values:
        if not 0 <= value < limit:
            raise ValueError(f"value {value} is not a {bits}-bit unsigned integer")


def _counting_pass(values: list[int], shift: int) -> list[int]:
    counts = [0] * (_DIGIT_MASK + 1)
    for value in values:
        counts[(value >> shift) & _DIGIT_MASK] += 1
    ends = list(accumulate(counts))
    placed = [0] * len(values)
    for value in reversed(values):
        digit = (value >> shift) & _DIGIT_MASK
        ends[digit] -= 1
        placed[ends[digit]] = value
    return placed


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort 32-bit unsigned integers with two stable 16-bit counting passes."""
    items = list(values)
    _check_words(items)
    low = _counting_pass(items, 0)
    return _counting_pass(low, _DIGIT_BITS)


def max_gap(values: Sequence[int], k: int) -> int:
    """Largest difference between neighbouring values in sorted order.

    Values must be ``k``-bit unsigned integers; they are grouped into at most
    2**26 buckets by their high bits, and only gaps between buckets count.
    """
    if not 1 <= k <= _WORD_BITS:
        raise ValueError("k must be between 1 and 32")
    _check_words(values, k)
    shift = max(k - _BUCKET_BITS, 0)
    buckets: dict[int, list[int]] = {}
    for value in values:
        bounds = buckets.get(value >> shift)
        if bounds is None:
            buckets[value >> shift] = [value, value]
        elif value < bounds[0]:
            bounds[0] = value
        elif value > bounds[1]:
            bounds[1] = value

    best = 0
    previous_high: int | None = None
    for key in sorted(buckets):
        low, high = buckets[key]
        if previous_high is not None:
            best = max(best, low - previous_high)
        previous_high = high
    return best


def _sort_and_count(seq: list[int]) -> tuple[list[int], int]:
    if len(seq) <= 1:
        return seq, 0
    mid = len(seq) // 2
    left, left_count = _sort_and_count(seq[:mid])
    right, right_count = _sort_and_count(seq[mid:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            count += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(values: Iterable[int]) -> int:
    """Number of pairs ``i < j`` with ``values[i] >= values[j]``."""
    return _sort_and_count(list(values))[1]