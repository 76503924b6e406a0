"""Segment and polygon predicates shared by containment and untangling."""

from __future__ import annotations

from typing import Sequence

from pygame.math import Vector2

# Far endpoint of the horizontal ray cast by point_in_convex_polygon.
RAY_EXTENT = 1_000_000.0


def orientation(a: Vector2, b: Vector2, c: Vector2) -> int:
    """Sign of the cross product of (b - a) and (c - b).

    Returns 1 for a counter-clockwise turn, -1 for clockwise and 0 when the
    three points are collinear.
    """
    value = (b.x - a.x) * (c.y - b.y) - (b.y - a.y) * (c.x - b.x)
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def _within_bounds(point: Vector2, start: Vector2, end: Vector2) -> bool:
    return (
        min(start.x, end.x) <= point.x <= max(start.x, end.x)
        and min(start.y, end.y) <= point.y <= max(start.y, end.y)
    )


def segments_intersect(p1: Vector2, p2: Vector2, q1: Vector2, q2: Vector2) -> bool:
    """True when segment p1-p2 crosses or touches segment q1-q2.

    Collinear endpoints lying within the other segment's bounding box count
    as intersections, so touching and overlapping segments are reported.
    """
    dir1 = orientation(p1, p2, q1)
    dir2 = orientation(p1, p2, q2)
    dir3 = orientation(q1, q2, p1)
    dir4 = orientation(q1, q2, p2)
    if dir1 != dir2 and dir3 != dir4:
        return True
    if dir1 == 0 and _within_bounds(q1, p1, p2):
        return True
    if dir2 == 0 and _within_bounds(q2, p1, p2):
        return True
    if dir3 == 0 and _within_bounds(p1, q1, q2):
        return True
    if dir4 == 0 and _within_bounds(p2, q1, q2):
        return True
    return False


def point_in_convex_polygon(point: Vector2, polygon: Sequence[Vector2]) -> bool:
    """Ray-casting parity test; polygons with fewer than 3 vertices contain nothing.

    A ray passing exactly through a vertex is counted once per edge sharing
    that vertex, so points level with a vertex may be misclassified.
    """
    count = len(polygon)
    if count < 3:
        return False
    extreme = Vector2(RAY_EXTENT, point.y)
    crossings = 0
    for index in range(count):
        start = polygon[index]
        end = polygon[(index + 1) % count]
        if segments_intersect(start, end, point, extreme):
            crossings += 1
    return crossings % 2 == 1
