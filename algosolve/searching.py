"""Binary searches and searches over ranges and permutations."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import deque
from collections.abc import Sequence


def upper_bound(a: Sequence[int], x: int) -> int:
    """Index of the first element of sorted ``a`` greater than ``x``."""
    return bisect_right(a, x)


def lower_bound(a: Sequence[int], x: int) -> int:
    """Index of the first element of sorted ``a`` not less than ``x``."""
    return bisect_left(a, x)


def _fits(values: Sequence[int], limit: int, parts: int) -> bool:
    pieces = 0
    current = 0
    for value in values:
        if value > limit:
            return False
        if current + value > limit:
            pieces += 1
            current = 0
            if pieces > parts:
                return False
        current += value
    if current:
        pieces += 1
    return pieces <= parts


def min_max_partition(values: Sequence[int], parts: int) -> int:
    """Least possible largest sum when splitting values into ``parts`` contiguous runs.

    The answer is never below 1.
    """
    if parts < 1:
        raise ValueError("parts must be at least 1")
    if any(v < 0 for v in values):
        raise ValueError("values must not be negative")
    lo, hi = 1, max(sum(values), 1)
    while lo < hi:
        mid = (lo + hi) // 2
        if _fits(values, mid, parts):
            hi = mid
        else:
            lo = mid + 1
    return hi


def count_bounded_ranges(values: Sequence[int], d: int) -> int:
    """Number of contiguous runs of length at least 2 whose max minus min is at most ``d``."""
    if d < 0:
        return 0
    highs: deque[int] = deque()
    lows: deque[int] = deque()
    start = 0
    total = 0
    for end, value in enumerate(values):
        while highs and values[highs[-1]] <= value:
            highs.pop()
        highs.append(end)
        while lows and values[lows[-1]] >= value:
            lows.pop()
        lows.append(end)
        while values[highs[0]] - values[lows[0]] > d:
            start += 1
            if highs[0] < start:
                highs.popleft()
            if lows[0] < start:
                lows.popleft()
        total += end - start
    return total


def lcs_of_permutations(a: Sequence[int], b: Sequence[int]) -> int:
    """Length of the longest common subsequence of two permutations of the same values."""
    position = {value: i for i, value in enumerate(b)}
    if len(position) != len(b) or len(a) != len(b) or set(a) != position.keys():
        raise ValueError("a and b must be permutations of the same distinct values")
    tails: list[int] = []
    for value in a:
        rank = position[value]
        slot = bisect_left(tails, rank)
        if slot == len(tails):
            tails.append(rank)
        else:
            tails[slot] = rank
    return len(tails)