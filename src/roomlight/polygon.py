"""Polygon measures and validation for room outlines and lit regions."""

import numpy as np
from .geometry import Point2, Segment, segments_intersect, cross, subtract


def _as_points(vertices) -> list[Point2]:
    return [Point2.from_any(v) for v in vertices]


def signed_area(vertices) -> float:
    """Shoelace area: positive for counter-clockwise, negative for clockwise."""
    verts = _as_points(vertices)
    n = len(verts)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        x0, y0 = verts[i]
        x1, y1 = verts[(i + 1) % n]
        area += x0 * y1 - x1 * y0
    return area / 2.0


def polygon_area(vertices) -> float:
    """Area enclosed by the vertex loop, independent of winding."""
    return abs(signed_area(vertices))


def ensure_ccw(vertices) -> list[Point2]:
    """Return the vertices in counter-clockwise order."""
    verts = _as_points(vertices)
    if signed_area(verts) < 0:
        verts = verts[::-1]
    return verts


def point_in_polygon(point, vertices) -> bool:
    """Odd-even crossing test. Always False for fewer than 3 vertices."""
    verts = _as_points(vertices)
    n = len(verts)
    if n < 3:
        return False
    x, y = Point2.from_any(point)
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = verts[i]
        xj, yj = verts[j]
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside


def points_in_polygon(points: np.ndarray, vertices) -> np.ndarray:
    """
    Vectorized point_in_polygon.

    Args:
        points: Array of shape (N, 2) with x, y coordinates

    Returns:
        Boolean array of shape (N,)
    """
    points = np.asarray(points, dtype=float)
    if points.ndim == 1:
        points = points.reshape(1, -1)
    inside = np.zeros(len(points), dtype=bool)

    verts = np.array([tuple(v) for v in _as_points(vertices)], dtype=float)
    n = len(verts)
    if n < 3:
        return inside

    x, y = points[:, 0], points[:, 1]
    j = n - 1
    for i in range(n):
        xi, yi = verts[i]
        xj, yj = verts[j]
        cond1 = (yi > y) != (yj > y)
        with np.errstate(divide="ignore", invalid="ignore"):
            x_intersect = (xj - xi) * (y - yi) / (yj - yi) + xi
        inside ^= cond1 & (x < x_intersect)
        j = i
    return inside


def is_self_intersecting(walls) -> bool:
    """
    True if any two non-adjacent walls properly cross.

    Walls are assumed to be ordered so that wall i ends where wall i + 1
    starts; the first and last walls count as adjacent.
    """
    walls = list(walls)
    n = len(walls)
    if n < 4:
        return False
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            a, b = walls[i], walls[j]
            if segments_intersect(a.start, a.end, b.start, b.end):
                return True
    return False


def is_convex(vertices) -> bool:
    verts = _as_points(vertices)
    n = len(verts)
    if n < 3:
        return False
    sign = 0
    for i in range(n):
        d1 = subtract(verts[(i + 1) % n], verts[i])
        d2 = subtract(verts[(i + 2) % n], verts[(i + 1) % n])
        c = cross(d1, d2)
        if abs(c) > 1e-10:
            s = 1 if c > 0 else -1
            if sign == 0:
                sign = s
            elif s != sign:
                return False
    return True


def is_valid_outline(walls) -> bool:
    """At least three walls and no self-intersection."""
    walls = list(walls)
    return len(walls) >= 3 and not is_self_intersecting(walls)


def edges_of(vertices, prefix=None) -> list[Segment]:
    """Closed loop of segments through the vertices."""
    verts = _as_points(vertices)
    n = len(verts)
    return [
        Segment(verts[i], verts[(i + 1) % n], None if prefix is None else f"{prefix}-{i}")
        for i in range(n)
    ]
