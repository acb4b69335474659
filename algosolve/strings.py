"""String algorithms: matching, palindromes, hashing, tries and subsequence counts."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

_PRODUCT_MOD = 1_000_000_007
_SUBSEQUENCE_MOD = 23333
_TEXT_BASE = 137
_TEXT_MOD = 1_000_000_007
_GRID_BASE = 233
_GRID_MODS = (1_000_000_007, 1_000_000_009)
_WORD_BITS = 32


def _failure_table(pattern: str) -> list[int]:
    """``fail[k]`` is the length of the longest proper border of ``pattern[:k]``."""
    fail = [0] * (len(pattern) + 1)
    k = 0
    for j in range(1, len(pattern)):
        while k and pattern[j] != pattern[k]:
            k = fail[k]
        if pattern[j] == pattern[k]:
            k += 1
        fail[j + 1] = k
    return fail


def kmp_match(text: str, pattern: str) -> list[int]:
    """Start indices of every (possibly overlapping) occurrence of pattern in text."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    fail = _failure_table(pattern)
    size = len(pattern)
    matches = []
    k = 0
    for i, ch in enumerate(text):
        while k and ch != pattern[k]:
            k = fail[k]
        if ch == pattern[k]:
            k += 1
        if k == size:
            matches.append(i - size + 1)
            k = fail[k]
    return matches


def prefix_suffix_product(s: str) -> int:
    """Product over all prefixes of (non-overlapping borders + 1), modulo 1e9+7.

    A border of a prefix counts when it is non-empty and at most half as long
    as the prefix.
    """
    fail = _failure_table(s)
    depth = [0] * (len(s) + 1)
    for length in range(1, len(s) + 1):
        depth[length] = depth[fail[length]] + 1

    result = 1
    k = 0
    for j in range(1, len(s)):
        while k and s[j] != s[k]:
            k = fail[k]
        if s[j] == s[k]:
            k += 1
        while 2 * k > j + 1:
            k = fail[k]
        result = result * (depth[k] + 1) % _PRODUCT_MOD
    return result


_LEFT, _SEPARATOR, _RIGHT = object(), object(), object()


def count_palindromes(s: str) -> int:
    """Number of palindromic substrings of s, counted by position."""
    expanded: list[object] = [_LEFT, _SEPARATOR]
    for ch in s:
        expanded.extend((ch, _SEPARATOR))
    expanded.append(_RIGHT)

    radius = [0] * len(expanded)
    center = right = 0
    total = 0
    for i in range(1, len(expanded) - 1):
        r = min(right - i, radius[2 * center - i]) if i < right else 0
        while expanded[i + r + 1] == expanded[i - r - 1]:
            r += 1
        radius[i] = r
        if i + r > right:
            center, right = i, i + r
        total += (r + 1) // 2
    return total


def _prefix_hashes(s: str) -> list[int]:
    hashes = [0]
    for ch in s:
        hashes.append((hashes[-1] * _TEXT_BASE + ord(ch)) % _TEXT_MOD)
    return hashes


def count_approximate_matches(pattern: str, text: str, k: int) -> int:
    """Number of windows of text that differ from pattern in at most k positions."""
    if k < 0:
        raise ValueError("k must not be negative")
    plen, tlen = len(pattern), len(text)
    if tlen < plen:
        return 0
    if plen <= k:
        return tlen - plen + 1

    seg_count = max(1, min(plen, 2 * k))
    seg_len = plen // seg_count
    tail = seg_count * seg_len
    shift = pow(_TEXT_BASE, seg_len, _TEXT_MOD)
    p_hash = _prefix_hashes(pattern)
    t_hash = _prefix_hashes(text)

    def segment(hashes: list[int], start: int) -> int:
        return (hashes[start + seg_len] - hashes[start] * shift) % _TEXT_MOD

    pattern_segments = [segment(p_hash, i * seg_len) for i in range(seg_count)]

    count = 0
    for start in range(tlen - plen + 1):
        differing = [
            i
            for i, expected in enumerate(pattern_segments)
            if segment(t_hash, start + i * seg_len) != expected
        ]
        diff = len(differing) + sum(
            a != b for a, b in zip(pattern[tail:], text[start + tail : start + plen])
        )
        if diff > k:
            continue
        for i in differing:
            lo = i * seg_len
            window = text[start + lo : start + lo + seg_len]
            diff += sum(a != b for a, b in zip(pattern[lo : lo + seg_len], window)) - 1
            if diff > k:
                break
        if diff <= k:
            count += 1
    return count


def _window_hashes(values: Sequence[int], width: int, mod: int) -> list[int]:
    top = pow(_GRID_BASE, width, mod)
    h = 0
    hashes = []
    for i, value in enumerate(values):
        h = (h * _GRID_BASE + value) % mod
        if i >= width:
            h = (h - values[i - width] * top) % mod
        if i >= width - 1:
            hashes.append(h)
    return hashes


def _grid_hashes(grid: Sequence[Sequence[int]], height: int, width: int, mod: int) -> list[list[int]]:
    rows = [_window_hashes(row, width, mod) for row in grid]
    columns = [_window_hashes(column, height, mod) for column in zip(*rows)]
    return [list(row) for row in zip(*columns)]


def _dimensions(grid: Sequence[Sequence[int]], name: str) -> tuple[int, int]:
    widths = {len(row) for row in grid}
    if len(widths) > 1:
        raise ValueError(f"{name} must be rectangular")
    return len(grid), widths.pop() if widths else 0


def find_submatrix(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Top-left (row, column) positions, 0-based and row-major, where b occurs in a."""
    n, m = _dimensions(a, "a")
    p, q = _dimensions(b, "b")
    if p == 0 or q == 0:
        raise ValueError("b must not be empty")
    if p > n or q > m:
        return []

    found: set[tuple[int, int]] | None = None
    for mod in _GRID_MODS:
        target = _grid_hashes(b, p, q, mod)[0][0]
        hashes = _grid_hashes(a, p, q, mod)
        hits = {
            (i, j)
            for i, row in enumerate(hashes)
            for j, value in enumerate(row)
            if value == target
        }
        found = hits if found is None else found & hits
    return sorted(found or ())


def count_distinct_subsequences(s: str) -> int:
    """Number of distinct non-empty subsequences of s, modulo 23333."""
    history = [0]
    last_seen: dict[str, int] = {}
    for position, ch in enumerate(s, start=1):
        previous = last_seen.get(ch)
        if previous is None:
            value = history[-1] * 2 + 1
        else:
            value = history[-1] * 2 - history[previous - 1]
        history.append(value % _SUBSEQUENCE_MOD)
        last_seen[ch] = position
    return history[-1]


def alignment_score(a: str, b: str) -> int:
    """Best alignment score: 4 per match, 2 per mismatch, 1 per gap."""
    row = list(range(len(b) + 1))
    for ch in a:
        current = [row[0] + 1]
        for j, other in enumerate(b, start=1):
            diagonal = row[j - 1] + (4 if ch == other else 2)
            current.append(max(current[j - 1] + 1, row[j] + 1, diagonal))
        row = current
    return row[-1]


class _Node:
    __slots__ = ("children", "count", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.count = 0
        self.terminal = False


class PrefixCounter:
    """Counts how many added words start with a given prefix."""

    def __init__(self) -> None:
        self._root = _Node()

    def add(self, word: str) -> None:
        node = self._root
        node.count += 1
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.count += 1

    def count(self, prefix: str) -> int:
        node = self._root
        for ch in prefix:
            child = node.children.get(ch)
            if child is None:
                return 0
            node = child
        return node.count


class Dictionary:
    """Set of words answering longest-word-prefix queries."""

    def __init__(self) -> None:
        self._root = _Node()

    def add(self, word: str) -> None:
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.terminal = True

    def longest_prefix(self, text: str) -> int:
        """Length of the longest added word that is a prefix of text, or 0."""
        node = self._root
        best = 0
        for depth, ch in enumerate(text, start=1):
            child = node.children.get(ch)
            if child is None:
                break
            node = child
            if node.terminal:
                best = depth
        return best


class MaxXorIndex:
    """Answers ``max(x ^ y)`` over a fixed set of 32-bit unsigned values."""

    def __init__(self, values: Iterable[int]) -> None:
        ordered = sorted(values)
        if not ordered:
            raise ValueError("values must not be empty")
        if ordered[0] < 0 or ordered[-1] >= 1 << _WORD_BITS:
            raise ValueError("values must be 32-bit unsigned integers")
        self._values = ordered

    def query(self, y: int) -> int:
        if not 0 <= y < 1 << _WORD_BITS:
            raise ValueError("query must be a 32-bit unsigned integer")
        values = self._values
        lo, hi = 0, len(values)
        prefix = 0
        for shift in reversed(range(_WORD_BITS)):
            bit = 1 << shift
            mid = bisect_left(values, prefix | bit, lo, hi)
            if mid == lo:
                prefix |= bit
            elif mid == hi:
                continue
            elif y & bit:
                hi = mid
            else:
                prefix |= bit
                lo = mid
        return values[lo] ^ y