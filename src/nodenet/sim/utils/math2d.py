from __future__ import annotations

import math
from typing import Sequence

from pygame.math import Vector2


def _set_magnitude(vector: Vector2, magnitude: float) -> Vector2:
    return _set_magnitude_xy(vector.x, vector.y, magnitude)


def _set_magnitude_xy(x: float, y: float, magnitude: float) -> Vector2:
    magnitude_sq = x * x + y * y
    if magnitude_sq == 0.0 or magnitude <= 0.0:
        return Vector2()
    scale = magnitude / math.sqrt(magnitude_sq)
    return Vector2(x * scale, y * scale)


def _clamp_length(vector: Vector2, max_length: float) -> Vector2:
    if max_length <= 0:
        return Vector2()
    magnitude_sq = vector.length_squared()
    if magnitude_sq <= max_length * max_length:
        return Vector2(vector)
    return vector.normalize() * max_length


def _centroid(points: Sequence[Vector2]) -> Vector2:
    if not points:
        return Vector2()
    sum_x = 0.0
    sum_y = 0.0
    for point in points:
        sum_x += point.x
        sum_y += point.y
    inv = 1.0 / len(points)
    return Vector2(sum_x * inv, sum_y * inv)


def _average_nonzero(vectors: Sequence[Vector2]) -> Vector2 | None:
    sum_x = 0.0
    sum_y = 0.0
    count = 0
    for vector in vectors:
        if vector.length_squared() > 0.0:
            sum_x += vector.x
            sum_y += vector.y
            count += 1
    if count == 0:
        return None
    inv = 1.0 / count
    return Vector2(sum_x * inv, sum_y * inv)
