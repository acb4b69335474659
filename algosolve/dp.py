"""Dynamic-programming problems: colourings, jumps, grouping, bridges and queries."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Iterable, Sequence
from functools import lru_cache

_COLORING_MOD = 23333


def count_colorings(counts: Iterable[int]) -> int:
    """Ways to paint a row of cars so no neighbours share a colour, modulo 23333.

    ``counts[i]`` (between 1 and 5) is how many cars paint ``i`` covers; all
    paint must be used.
    """
    groups = [0] * 6
    for amount in counts:
        if not 1 <= amount <= 5:
            raise ValueError("each paint must cover between 1 and 5 cars")
        groups[amount] += 1

    @lru_cache(maxsize=None)
    def ways(a: int, b: int, c: int, d: int, e: int, last: int) -> int:
        # a..e: paints with 1..5 cars left; last: how many the previous paint had before use.
        if a + b + c + d + e == 0:
            return 1
        total = 0
        if a:
            total += ways(a - 1, b, c, d, e, 1) * (a - int(last == 2))
        if b:
            total += ways(a + 1, b - 1, c, d, e, 2) * (b - int(last == 3))
        if c:
            total += ways(a, b + 1, c - 1, d, e, 3) * (c - int(last == 4))
        if d:
            total += ways(a, b, c + 1, d - 1, e, 4) * (d - int(last == 5))
        if e:
            total += ways(a, b, c, d + 1, e - 1, 5) * e
        return total % _COLORING_MOD

    return ways(*groups[1:], 0)


def _best_one_way(points: list[tuple[int, int]]) -> int:
    best = 0
    jump_lengths: list[list[int]] = []
    jump_scores: list[list[int]] = []
    for i, (position, score) in enumerate(points):
        lengths = [0]
        scores = [score]
        for (prev_position, _), prev_lengths, prev_scores in zip(
            reversed(points[:i]), reversed(jump_lengths), reversed(jump_scores)
        ):
            distance = abs(position - prev_position)
            slot = bisect_right(prev_lengths, distance) - 1
            candidate = prev_scores[slot] + score
            if candidate > scores[-1]:
                lengths.append(distance)
                scores.append(candidate)
                best = max(best, candidate)
        jump_lengths.append(lengths)
        jump_scores.append(scores)
    return best


def max_jump_score(points: Iterable[tuple[int, int]]) -> int:
    """Best score of a one-directional route with non-decreasing jump lengths.

    Points are ``(position, score)``; a route needs at least one jump, else 0.
    """
    ordered = sorted(points)
    return max(_best_one_way(ordered), _best_one_way(ordered[::-1]))


def min_grass_loss(start: int, positions: Sequence[int]) -> int:
    """Least total waiting time of all grass when eaten walking from ``start``."""
    if not positions:
        raise ValueError("positions must not be empty")
    x = sorted(positions)
    n = len(x)
    at_left = [abs(v - start) * n for v in x]
    at_right = at_left[:]
    for length in range(1, n):
        remaining = n - length
        next_left, next_right = [], []
        for left in range(n - length):
            right = left + length
            next_left.append(
                min(
                    at_left[left + 1] + remaining * (x[left + 1] - x[left]),
                    at_right[left + 1] + remaining * (x[right] - x[left]),
                )
            )
            next_right.append(
                min(
                    at_right[left] + remaining * (x[right] - x[right - 1]),
                    at_left[left] + remaining * (x[right] - x[left]),
                )
            )
        at_left, at_right = next_left, next_right
    return min(at_left[0], at_right[0])


def min_total_distance(positions: Iterable[int], groups: int) -> int:
    """Least total distance from each position to the median of its group.

    Positions are split into at most ``groups`` contiguous groups after sorting.
    """
    if groups < 1:
        raise ValueError("groups must be at least 1")
    x = sorted(positions)
    n = len(x)
    if groups >= n:
        return 0

    prefix = [0]
    for v in x:
        prefix.append(prefix[-1] + v)

    def cost(lo: int, hi: int) -> int:
        mid = lo + (hi - lo - 1) // 2
        median = x[mid]
        upper = prefix[hi] - prefix[mid] - median * (hi - mid)
        lower = median * (mid - lo) - (prefix[mid] - prefix[lo])
        return upper + lower

    previous = [cost(0, i) for i in range(n + 1)]
    previous_opt = [0] * (n + 1)
    for layer in range(2, groups + 1):
        current = [0] * (n + 1)
        current_opt = [0] * (n + 2)
        current_opt[n + 1] = n - 1
        for i in range(n, layer - 1, -1):
            lo = max(previous_opt[i], layer - 1)
            hi = min(current_opt[i + 1], i - 1)
            if lo > hi:
                lo, hi = layer - 1, i - 1
            best, best_j = math.inf, lo
            for j in range(lo, hi + 1):
                value = previous[j] + cost(j, i)
                if value < best:
                    best, best_j = value, j
            current[i] = best
            current_opt[i] = best_j
        previous, previous_opt = current, current_opt
    return previous[n]


def max_bridge_value(
    north: Sequence[tuple[str, int]], south: Sequence[tuple[str, int]]
) -> tuple[int, int]:
    """Best total value of non-crossing bridges joining cities of equal OS.

    Cities are ``(os, value)`` in bank order. Returns ``(value, bridges)``,
    preferring fewer bridges among routes of equal value.
    """
    names = {os for os, _ in north}
    south = [(os, value) for os, value in south if os in names]
    values = [0] * (len(south) + 1)
    bridges = [0] * (len(south) + 1)
    for north_os, north_value in north:
        row_values, row_bridges = [0], [0]
        for j, (south_os, south_value) in enumerate(south, start=1):
            left_v, left_b = row_values[j - 1], row_bridges[j - 1]
            up_v, up_b = values[j], bridges[j]
            if left_v > up_v:
                best, count = left_v, left_b
            elif up_v > left_v:
                best, count = up_v, up_b
            else:
                best, count = up_v, min(up_b, left_b)
            if north_os == south_os:
                joined = values[j - 1] + north_value + south_value
                if joined > best:
                    best, count = joined, bridges[j - 1] + 1
            row_values.append(best)
            row_bridges.append(count)
        values, bridges = row_values, row_bridges
    return values[-1], bridges[-1]


def min_questions(features: int, objects: Iterable[str]) -> int:
    """Fewest yes/no feature questions needed, worst case, to single out any object.

    Each object is a string of ``features`` characters '0' or '1'.
    """
    if features < 0:
        raise ValueError("features must not be negative")
    masks = []
    for obj in objects:
        if len(obj) != features or set(obj) - {"0", "1"}:
            raise ValueError(f"object {obj!r} is not a {features}-bit string")
        masks.append(sum(1 << j for j, ch in enumerate(obj) if ch == "1"))

    @lru_cache(maxsize=None)
    def search(asked: int, answers: int) -> int:
        if sum(1 for m in masks if m & asked == answers) <= 1:
            return 0
        best = features + 1
        for bit in (1 << i for i in range(features)):
            if not asked & bit:
                worst = max(search(asked | bit, answers), search(asked | bit, answers | bit))
                best = min(best, 1 + worst)
        return best

    return search(0, 0)


def max_submatrix_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Largest sum of a non-empty rectangular block of the matrix."""
    widths = {len(row) for row in matrix}
    if not matrix or widths == {0}:
        raise ValueError("matrix must not be empty")
    if len(widths) > 1:
        raise ValueError("matrix must be rectangular")
    width = widths.pop()

    best = -math.inf
    for top in range(len(matrix)):
        column_sums = [0] * width
        for row in matrix[top:]:
            column_sums = [s + v for s, v in zip(column_sums, row)]
            run = None
            for s in column_sums:
                run = s if run is None or run < 0 else run + s
                best = max(best, run)
    return int(best)