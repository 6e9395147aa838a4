"""Planar geometry primitives: points, segments, bounding boxes and ray casts."""

from dataclasses import dataclass
import math
import numpy as np


@dataclass(frozen=True, slots=True)
class Point2:
    """A point (or vector) in the floor plane."""

    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    @classmethod
    def from_any(cls, arg) -> "Point2":
        """Accept a Point2, an (x, y) pair or a {'x':, 'y':} mapping."""
        if isinstance(arg, cls):
            return arg
        if isinstance(arg, dict):
            return cls(float(arg["x"]), float(arg["y"]))
        x, y = arg
        return cls(float(x), float(y))

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


# ---------------------------- vector helpers ----------------------------


def add(a: Point2, b: Point2) -> Point2:
    return Point2(a.x + b.x, a.y + b.y)


def subtract(a: Point2, b: Point2) -> Point2:
    return Point2(a.x - b.x, a.y - b.y)


def scale(v: Point2, factor: float) -> Point2:
    return Point2(v.x * factor, v.y * factor)


def dot(a: Point2, b: Point2) -> float:
    return a.x * b.x + a.y * b.y


def cross(a: Point2, b: Point2) -> float:
    """z-component of the 3D cross product of two planar vectors."""
    return a.x * b.y - a.y * b.x


def length(v: Point2) -> float:
    return math.hypot(v.x, v.y)


def distance(a: Point2, b: Point2) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def normalize(v: Point2) -> Point2:
    """Unit vector along v; the zero vector is returned unchanged."""
    n = length(v)
    if n == 0:
        return Point2(0.0, 0.0)
    return Point2(v.x / n, v.y / n)


def perpendicular(v: Point2) -> Point2:
    """v rotated 90 degrees counter-clockwise."""
    return Point2(-v.y, v.x)


# ------------------------------- segments -------------------------------


@dataclass(frozen=True, slots=True)
class Segment:
    """A directed wall segment from `start` to `end`."""

    start: Point2
    end: Point2
    id: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "start", Point2.from_any(self.start))
        object.__setattr__(self, "end", Point2.from_any(self.end))

    @property
    def direction(self) -> Point2:
        return subtract(self.end, self.start)

    @property
    def length(self) -> float:
        return length(self.direction)

    @property
    def midpoint(self) -> Point2:
        return Point2((self.start.x + self.end.x) / 2, (self.start.y + self.end.y) / 2)

    def is_degenerate(self, tol: float = 0.0) -> bool:
        return self.length <= tol

    def point_at(self, dist: float) -> Point2:
        """Point `dist` along the segment from its start."""
        return add(self.start, scale(normalize(self.direction), dist))

    def with_id(self, seg_id) -> "Segment":
        return Segment(self.start, self.end, seg_id)

    def to_dict(self) -> dict:
        data = {"start": self.start.to_dict(), "end": self.end.to_dict()}
        if self.id is not None:
            data["id"] = self.id
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Segment":
        return cls(data["start"], data["end"], data.get("id"))


@dataclass(frozen=True, slots=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                f"Invalid bounding box: ({self.min_x}, {self.min_y}) "
                f"must not exceed ({self.max_x}, {self.max_y})"
            )

    @classmethod
    def from_points(cls, points, padding: float = 0.0) -> "BoundingBox":
        points = [Point2.from_any(p) for p in points]
        if not points:
            raise ValueError("Cannot bound an empty set of points")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(
            min(xs) - padding, min(ys) - padding, max(xs) + padding, max(ys) + padding
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def corners(self) -> tuple[Point2, Point2, Point2, Point2]:
        """Corners counter-clockwise from (min_x, min_y)."""
        return (
            Point2(self.min_x, self.min_y),
            Point2(self.max_x, self.min_y),
            Point2(self.max_x, self.max_y),
            Point2(self.min_x, self.max_y),
        )

    @property
    def segments(self) -> tuple[Segment, ...]:
        c = self.corners
        return tuple(Segment(c[i], c[(i + 1) % 4], f"b{i + 1}") for i in range(4))

    def contains(self, point: Point2) -> bool:
        return (
            self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y
        )


# ------------------------------ intersection ------------------------------


def ray_segment_intersect(
    origin: Point2,
    direction: Point2,
    seg_start: Point2,
    seg_end: Point2,
    min_t: float = 1e-3,
    parallel_tol: float = 1e-10,
):
    """
    Intersect the ray origin + t * direction with the segment seg_start-seg_end.

    Returns (t, point) or None when the ray is parallel to the segment, misses
    it, or only touches it within `min_t` of the origin.
    """
    seg_dir = subtract(seg_end, seg_start)
    det = cross(direction, seg_dir)
    if abs(det) < parallel_tol:
        return None

    d = subtract(seg_start, origin)
    t = cross(d, seg_dir) / det
    u = cross(d, direction) / det
    if u < 0 or u > 1 or t <= min_t:
        return None
    return t, add(origin, scale(direction, t))


def segments_intersect(a1: Point2, a2: Point2, b1: Point2, b2: Point2) -> bool:
    """True when segments a1-a2 and b1-b2 cross at a point interior to both."""
    d1 = subtract(a2, a1)
    d2 = subtract(b2, b1)
    d3 = subtract(b1, a1)

    det = cross(d1, d2)
    if abs(det) < 1e-10:
        return False

    t = cross(d3, d2) / det
    u = cross(d3, d1) / det
    return 0 < t < 1 and 0 < u < 1


def distance_point_to_segment(point: Point2, seg_start: Point2, seg_end: Point2) -> float:
    dx, dy = seg_end.x - seg_start.x, seg_end.y - seg_start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return distance(point, seg_start)
    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return distance(point, Point2(seg_start.x + t * dx, seg_start.y + t * dy))


def cast_rays(origin, angles, starts, ends, min_t=1e-3, parallel_tol=1e-10):
    """
    Nearest hit of many rays against many segments.

    Args:
        origin: (2,) ray origin
        angles: (N,) ray angles in radians
        starts, ends: (S, 2) segment endpoints

    Returns:
        t: (N,) distance to the nearest hit, np.inf where nothing was hit
        points: (N, 2) hit points, nan where nothing was hit
    """
    o = np.asarray(origin, dtype=float)  # (2,)
    angles = np.asarray(angles, dtype=float)  # (N,)
    a = np.asarray(starts, dtype=float).reshape(-1, 2)  # (S,2)
    b = np.asarray(ends, dtype=float).reshape(-1, 2)  # (S,2)

    rx, ry = np.cos(angles)[:, None], np.sin(angles)[:, None]  # (N,1)
    sx, sy = (b - a).T  # (S,)
    dx, dy = (a - o).T  # (S,)

    det = rx * sy - ry * sx  # (N,S)
    ok = np.abs(det) >= parallel_tol
    safe = np.where(ok, det, 1.0)
    t = (dx * sy - dy * sx) / safe  # (N,S)
    u = (dx * ry - dy * rx) / safe  # (N,S)

    hit = ok & (u >= 0) & (u <= 1) & (t > min_t)
    t = np.where(hit, t, np.inf)
    t_min = t.min(axis=1) if t.shape[1] else np.full(len(angles), np.inf)

    points = np.full((len(angles), 2), np.nan)
    found = np.isfinite(t_min)
    points[found, 0] = o[0] + rx[found, 0] * t_min[found]
    points[found, 1] = o[1] + ry[found, 0] * t_min[found]
    return t_min, points
