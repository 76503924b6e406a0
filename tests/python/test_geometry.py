from __future__ import annotations

import pytest
from pygame.math import Vector2

from nodenet.sim.utils.geometry import orientation, point_in_convex_polygon, segments_intersect

SQUARE = [Vector2(0, 0), Vector2(100, 0), Vector2(100, 100), Vector2(0, 100)]


def _v(x: float, y: float) -> Vector2:
    return Vector2(x, y)


def test_orientation_signs():
    assert orientation(_v(0, 0), _v(1, 0), _v(1, 1)) == 1
    assert orientation(_v(0, 0), _v(1, 0), _v(1, -1)) == -1
    assert orientation(_v(0, 0), _v(1, 1), _v(3, 3)) == 0


def test_orientation_flips_when_first_points_swap():
    a, b, c = _v(2, 1), _v(7, 4), _v(3, 9)
    assert orientation(a, b, c) == -orientation(b, a, c)


SEGMENT_CASES = [
    # (p1, p2, q1, q2, expected)
    ((0, 0), (10, 10), (0, 10), (10, 0), True),
    ((0, 0), (10, 0), (0, 5), (10, 5), False),
    ((0, 0), (1, 0), (2, 0), (3, 0), False),
    ((0, 0), (2, 0), (1, 0), (3, 0), True),
    ((0, 0), (10, 0), (5, 0), (5, 5), True),
    ((0, 0), (1, 0), (1, 0), (1, 1), True),
    ((0, 0), (4, 0), (5, -1), (5, 1), False),
    ((0, 0), (4, 4), (1, 1), (3, 3), True),
    ((0, 0), (4, 4), (5, 5), (6, 6), False),
]


@pytest.mark.parametrize("p1, p2, q1, q2, expected", SEGMENT_CASES)
def test_segments_intersect_cases(p1, p2, q1, q2, expected):
    assert segments_intersect(_v(*p1), _v(*p2), _v(*q1), _v(*q2)) is expected


@pytest.mark.parametrize("p1, p2, q1, q2, expected", SEGMENT_CASES)
def test_segments_intersect_is_symmetric(p1, p2, q1, q2, expected):
    p1, p2, q1, q2 = _v(*p1), _v(*p2), _v(*q1), _v(*q2)
    results = {
        segments_intersect(p1, p2, q1, q2),
        segments_intersect(q1, q2, p1, p2),
        segments_intersect(p2, p1, q1, q2),
        segments_intersect(p1, p2, q2, q1),
        segments_intersect(q2, q1, p2, p1),
    }
    assert results == {expected}


def test_point_inside_square():
    assert point_in_convex_polygon(_v(50, 50), SQUARE)
    assert point_in_convex_polygon(_v(1, 99), SQUARE)


@pytest.mark.parametrize("point", [(150, 50), (-50, 50), (50, 150), (50, -20)])
def test_point_outside_square(point):
    assert not point_in_convex_polygon(_v(*point), SQUARE)


def test_point_inside_triangle():
    triangle = [_v(0, 0), _v(10, 0), _v(5, 10)]
    assert point_in_convex_polygon(_v(5, 3), triangle)
    assert not point_in_convex_polygon(_v(9, 8), triangle)


@pytest.mark.parametrize("polygon", [[], [Vector2(0, 0)], [Vector2(0, 0), Vector2(10, 10)]])
def test_degenerate_polygon_contains_nothing(polygon):
    for point in [_v(0, 0), _v(5, 5), _v(-3, 7)]:
        assert not point_in_convex_polygon(point, polygon)
