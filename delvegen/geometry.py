"""Distance measures and line drawing on the tile grid."""

from __future__ import annotations

import math

Point = tuple[int, int]


def distance_pythagoras(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def distance_pythagoras_squared(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return float(dx * dx + dy * dy)


def distance_manhattan(a: Point, b: Point) -> float:
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def distance_chebyshev(a: Point, b: Point) -> float:
    return float(max(abs(a[0] - b[0]), abs(a[1] - b[1])))


def line2d(start: Point, end: Point) -> list[Point]:
    """Bresenham line from ``start`` to ``end``, both ends included."""
    x, y = start
    x_end, y_end = end
    dx = abs(x_end - x)
    dy = -abs(y_end - y)
    step_x = 1 if x < x_end else -1
    step_y = 1 if y < y_end else -1
    error = dx + dy
    points = [(x, y)]
    while (x, y) != (x_end, y_end):
        doubled = 2 * error
        if doubled >= dy:
            error += dy
            x += step_x
        if doubled <= dx:
            error += dx
            y += step_y
        points.append((x, y))
    return points