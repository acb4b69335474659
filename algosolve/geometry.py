"""Plane geometry: cross products, convex hulls and segment intersection."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

Vector = Sequence[float]


def cross(a: Vector, b: Vector) -> float:
    """Cross product ``a.x * b.y - a.y * b.x`` of two plane vectors."""
    return a[0] * b[1] - a[1] * b[0]


def _dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _sub(a: Vector, b: Vector) -> tuple[float, float]:
    return (a[0] - b[0], a[1] - b[1])


def _turns_left(origin: Vector, a: Vector, b: Vector) -> bool:
    return cross(_sub(a, origin), _sub(b, origin)) > 0


def _chain(ordered: list) -> list:
    """Monotone chain over points sorted by (x, y); the closing point is repeated."""
    hull: list = []
    for point in ordered:
        while len(hull) > 1 and _turns_left(hull[-2], hull[-1], point):
            hull.pop()
        hull.append(point)
    base = len(hull)
    for point in reversed(ordered[:-1]):
        while len(hull) > base and _turns_left(hull[-2], hull[-1], point):
            hull.pop()
        hull.append(point)
    return hull


def convex_hull(points: Iterable[Vector]) -> list[tuple[float, float]]:
    """Convex hull in clockwise order, starting from the smallest (x, y) point.

    Points lying on the hull boundary between two corners may be kept.
    """
    ordered = sorted((p[0], p[1]) for p in points)
    return _chain(ordered)[:-1]


def hull_signature(points: Sequence[Vector]) -> int:
    """Checksum of the hull: its size times the 1-based input indices of its points, mod n + 1."""
    indexed = sorted((p[0], p[1], i) for i, p in enumerate(points, start=1))
    hull = _chain(indexed)[:-1]
    modulus = len(points) + 1
    signature = len(hull)
    for _, _, index in hull:
        signature = signature * index % modulus
    return signature


def rounded_rect_hull_perimeter(
    a: float, b: float, r: float, rects: Iterable[tuple[float, float, float]]
) -> float:
    """Length of the shortest loop around equal rounded rectangles.

    Each rectangle is ``(center_x, center_y, angle)`` with the angle in radians;
    all share length ``a``, width ``b`` and corner radius ``r``.
    """
    corners = (
        (a / 2 - r, b / 2 - r),
        (-a / 2 + r, b / 2 - r),
        (-a / 2 + r, -b / 2 + r),
        (a / 2 - r, -b / 2 + r),
    )
    points = []
    for cx, cy, angle in rects:
        cos_t, sin_t = math.cos(angle), math.sin(angle)
        for x, y in corners:
            points.append((x * cos_t - y * sin_t + cx, x * sin_t + y * cos_t + cy))
    if not points:
        raise ValueError("at least one rectangle is required")
    hull = _chain(sorted(points))
    outline = sum(math.dist(p, q) for p, q in zip(hull, hull[1:]))
    return outline + 2 * math.pi * r


def segment_intersection(
    p1: Vector, q1: Vector, p2: Vector, q2: Vector
) -> tuple[float, float] | float | None:
    """Intersection of segments p1-q1 and p2-q2.

    Returns the single common point, ``math.inf`` when the segments overlap
    along a stretch, or None when they do not meet.
    """
    line = _sub(q1, p1)
    to_p = _sub(p2, p1)
    to_q = _sub(q2, p1)
    side_p = cross(line, to_p)
    side_q = cross(line, to_q)

    if side_p == 0 and side_q == 0:
        length_sq = _dot(line, line)
        near, far = sorted((_dot(line, to_p), _dot(line, to_q)))
        if length_sq == near:
            return (float(q1[0]), float(q1[1]))
        if far == 0:
            return (float(p1[0]), float(p1[1]))
        if length_sq < near or far < 0:
            return None
        return math.inf

    other = _sub(q2, p2)
    side_a = cross(other, _sub(p1, p2))
    side_b = cross(other, _sub(q1, p2))
    if side_a * side_b > 0 or side_p * side_q > 0:
        return None
    if side_a == 0:
        return (float(p1[0]), float(p1[1]))
    part_p, part_q = abs(side_p), abs(side_q)
    ratio = part_p / (part_p + part_q)
    return (p2[0] + other[0] * ratio, p2[1] + other[1] * ratio)