"""Point-set problems: closest pairs and right-angle counting."""

from __future__ import annotations

import heapq
import math
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from functools import cmp_to_key

from sortedcontainers import SortedList

from algosolve.geometry import cross

Point = tuple[int, int]


def _closest(points: list[Point]) -> tuple[float, list[Point]]:
    """Closest distance within x-sorted points, and the points sorted by y."""
    if len(points) == 1:
        return math.inf, points
    if len(points) == 2:
        return math.dist(*points), sorted(points, key=lambda p: p[1])

    mid = (len(points) - 1) // 2
    mid_x = points[mid][0]
    left_best, left = _closest(points[: mid + 1])
    right_best, right = _closest(points[mid + 1 :])
    best = min(left_best, right_best)

    merged = list(heapq.merge(left, right, key=lambda p: p[1]))
    window: deque[Point] = deque()
    for p in merged:
        if abs(p[0] - mid_x) > best:
            continue
        while window and p[1] - window[0][1] > best:
            window.popleft()
        for q in window:
            best = min(best, math.dist(p, q))
        window.append(p)
    return best, merged


def closest_pair_distance(points: Iterable[Point]) -> float:
    """Smallest distance between two of the points; ``math.inf`` for fewer than two."""
    ordered = sorted((p[0], p[1]) for p in points)
    if len(ordered) < 2:
        return math.inf
    return _closest(ordered)[0]


def _direction(dx: int, dy: int) -> Point:
    if dx == 0:
        return (0, 1)
    if dy == 0:
        return (1, 0)
    g = math.gcd(dx, dy)
    return (dx // g, dy // g)


def count_right_triangles(points: Sequence[Point]) -> int:
    """Number of right triangles with vertices among the points, by direction counting."""
    total = 0
    for cx, cy in points:
        seen: Counter[Point] = Counter()
        for x, y in points:
            dx, dy = x - cx, y - cy
            if dx == 0 and dy == 0:
                continue
            d = _direction(dx, dy)
            total += seen[(-d[1], d[0])] + seen[(d[1], -d[0])]
            seen[d] += 1
    return total


def _angle_order(a: Point, b: Point) -> int:
    turn = cross(a, b)
    if turn > 0:
        return -1
    if turn < 0:
        return 1
    return 0


def _dot(a: Point, b: Point) -> int:
    return a[0] * b[0] + a[1] * b[1]


def count_right_triangles_sorted(points: Sequence[Point]) -> int:
    """Number of right triangles with vertices among the points, by angular sweep."""
    total = 0
    for cx, cy in points:
        lines: list[Point] = []
        for x, y in points:
            dx, dy = x - cx, y - cy
            if dx == 0 and dy == 0:
                continue
            if dx == 0:
                lines.append((0, 1))
            elif dx < 0:
                lines.append((-dx, -dy))
            else:
                lines.append((dx, dy))
        lines.sort(key=cmp_to_key(_angle_order))

        scan = 1
        count = 0
        previous: Point | None = None
        for line in lines:
            if previous is not None and cross(line, previous) == 0:
                total += count
                previous = line
                continue
            previous = line
            count = 0
            while scan < len(lines) and _dot(line, lines[scan]) > 0:
                scan += 1
            while scan < len(lines) and _dot(line, lines[scan]) == 0:
                count += 1
                scan += 1
            total += count
    return total


def _dist_sq(p: Point, q: Point) -> int:
    return (p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2


def closest_bichromatic_distance_sq(points: Iterable[tuple[int, int, int]]) -> int:
    """Smallest squared distance between a colour-0 point and a point of another colour.

    Points are ``(x, y, colour)``; returns 0 when either side is empty.
    """
    zeros: list[Point] = []
    others: list[Point] = []
    for x, y, colour in points:
        (zeros if colour == 0 else others).append((x, y))
    zeros.sort()
    others.sort()
    if not zeros or not others:
        return 0

    best = min(
        _dist_sq(p, q) for p in (zeros[0], zeros[-1]) for q in (others[0], others[-1])
    )
    window = SortedList()
    added = [False] * len(others)
    left = right = 0
    for px, py in zeros:
        while left < right:
            qx, qy = others[left]
            if not (qx < px and (qx - px) ** 2 > best):
                break
            if added[left]:
                window.remove((qy, qx))
                added[left] = False
            left += 1
        while right < len(others):
            qx, qy = others[right]
            if (qx - px) ** 2 <= best:
                window.add((qy, qx))
                added[right] = True
            elif qx > px:
                break
            right += 1

        reach = math.isqrt(best) + 1
        for qy, qx in window.irange((py - reach, -math.inf), (py + reach, math.inf)):
            best = min(best, (qx - px) ** 2 + (qy - py) ** 2)
        if best == 0:
            return 0
    return best