import math
import random

import pytest

from algosolve.geometry import (
    convex_hull,
    cross,
    hull_signature,
    rounded_rect_hull_perimeter,
    segment_intersection,
)


def _random_points(seed, count=30, span=50):
    rng = random.Random(seed)
    return [(rng.randint(-span, span), rng.randint(-span, span)) for _ in range(count)]


def test_cross_is_antisymmetric():
    a, b = (3, 7), (-2, 5)
    assert cross(a, b) == -cross(b, a)
    assert cross(a, a) == 0


def test_hull_of_square_with_interior_point():
    corners = {(0, 0), (0, 2), (2, 0), (2, 2)}
    hull = convex_hull([(0, 0), (0, 2), (2, 0), (2, 2), (1, 1)])
    assert set(hull) == corners
    assert len(hull) == 4


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_hull_encloses_every_point(seed):
    points = _random_points(seed)
    hull = convex_hull(points)
    assert hull[0] == min(points)
    for start, end in zip(hull, hull[1:] + hull[:1]):
        edge = (end[0] - start[0], end[1] - start[1])
        for p in points:
            assert cross(edge, (p[0] - start[0], p[1] - start[1])) <= 0


@pytest.mark.parametrize("seed", [5, 6])
def test_hull_does_not_depend_on_input_order(seed):
    points = _random_points(seed)
    shuffled = list(points)
    random.Random(seed).shuffle(shuffled)
    assert convex_hull(shuffled) == convex_hull(points)
    assert set(convex_hull(points)) <= set(points)


def test_hull_of_single_point_is_empty():
    assert convex_hull([(4, 4)]) == []
    assert hull_signature([(4, 4)]) == 0


def test_hull_signature_of_triangle():
    assert hull_signature([(0, 0), (1, 0), (0, 1)]) == 2


@pytest.mark.parametrize("seed", [7, 8])
def test_hull_signature_is_reduced(seed):
    points = _random_points(seed)
    assert 0 <= hull_signature(points) <= len(points)


def test_sharp_rectangle_perimeter():
    assert rounded_rect_hull_perimeter(4, 2, 0, [(0, 0, 0)]) == pytest.approx(12.0)


def test_fully_rounded_rectangle_is_a_circle():
    r = 1.5
    assert rounded_rect_hull_perimeter(2 * r, 2 * r, r, [(3, -1, 0.7)]) == pytest.approx(
        2 * math.pi * r
    )


def test_perimeter_invariant_under_rotation_and_translation():
    base = rounded_rect_hull_perimeter(5, 3, 0.5, [(0, 0, 0), (10, 0, 0)])
    moved = rounded_rect_hull_perimeter(5, 3, 0.5, [(2, 7, 0), (12, 7, 0)])
    assert moved == pytest.approx(base)
    single = rounded_rect_hull_perimeter(5, 3, 0.5, [(0, 0, 0)])
    turned = rounded_rect_hull_perimeter(5, 3, 0.5, [(0, 0, 1.1)])
    assert turned == pytest.approx(single)


def test_perimeter_requires_rectangles():
    with pytest.raises(ValueError):
        rounded_rect_hull_perimeter(1, 1, 0, [])


def test_crossing_segments_meet_on_both_lines():
    p1, q1, p2, q2 = (0, 0), (2, 2), (0, 2), (2, 0)
    point = segment_intersection(p1, q1, p2, q2)
    for start, end in ((p1, q1), (p2, q2)):
        direction = (end[0] - start[0], end[1] - start[1])
        offset = (point[0] - start[0], point[1] - start[1])
        assert cross(direction, offset) == pytest.approx(0)
    swapped = segment_intersection(p2, q2, p1, q1)
    assert swapped == pytest.approx(point)


def test_t_junction():
    assert segment_intersection((0, 0), (2, 0), (1, 0), (1, 5)) == pytest.approx((1.0, 0.0))


def test_shared_endpoint_returns_that_point():
    assert segment_intersection((0, 0), (2, 0), (0, 0), (0, 3)) == (0.0, 0.0)


def test_parallel_segments_do_not_meet():
    assert segment_intersection((0, 0), (2, 0), (0, 1), (2, 1)) is None


def test_collinear_disjoint_segments_do_not_meet():
    assert segment_intersection((0, 0), (1, 0), (3, 0), (4, 0)) is None


def test_collinear_overlap_is_infinite():
    assert segment_intersection((0, 0), (4, 0), (2, 0), (6, 0)) == math.inf


def test_collinear_touching_at_end():
    assert segment_intersection((0, 0), (1, 0), (1, 0), (2, 0)) == (1.0, 0.0)