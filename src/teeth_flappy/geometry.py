"""
geometry.py: Point, segment and triangle tests used for tooth collisions.

Points are (x, y) tuples in screen coordinates.
"""

import math
from typing import Tuple

Point = Tuple[float, float]


def point_in_triangle(p: Point, a: Point, b: Point, c: Point) -> bool:
    """
    Sign-based barycentric containment test.

    Works for either winding: the sign of D (twice the signed area) picks
    which set of inequalities applies. Points on an edge count as inside.
    """
    dx = p[0] - c[0]
    dy = p[1] - c[1]
    dx21 = c[0] - b[0]
    dy12 = b[1] - c[1]
    d = dy12 * (a[0] - c[0]) + dx21 * (a[1] - c[1])
    s = dy12 * dx + dx21 * dy
    t = (c[1] - a[1]) * dx + (a[0] - c[0]) * dy
    if d < 0:
        return s <= 0 and t <= 0 and s + t >= d
    return s >= 0 and t >= 0 and s + t <= d


def distance_point_to_segment(p: Point, a: Point, b: Point) -> float:
    """Distance from p to the closest point of segment ab."""
    vx = b[0] - a[0]
    vy = b[1] - a[1]
    wx = p[0] - a[0]
    wy = p[1] - a[1]
    vv = vx * vx + vy * vy
    # Zero-length segment: measure to the single point a.
    t = 0.0 if vv == 0 else (wx * vx + wy * vy) / vv
    t = max(0.0, min(1.0, t))
    return math.hypot(p[0] - (a[0] + t * vx), p[1] - (a[1] + t * vy))


def circle_intersects_triangle(center: Point, radius: float, a: Point, b: Point, c: Point) -> bool:
    """Exact circle/triangle overlap test."""
    if point_in_triangle(center, a, b, c):
        return True
    for start, end in ((a, b), (b, c), (c, a)):
        if distance_point_to_segment(center, start, end) <= radius:
            return True
    return any(math.dist(center, v) <= radius for v in (a, b, c))
