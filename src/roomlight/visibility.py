"""
Radial-sweep visibility polygon.

For each target point the sweep casts three rays from the light: one straight
at the point and one either side of it by `Tolerances.angle_offset`. With
straight-segment occluders the lit boundary only changes direction at segment
endpoints, so the nearest hits of these rays, ordered by angle, trace the
visibility polygon exactly. The offset rays catch the wall that continues
past a corner on either side.

Each ray is tested against every blocking segment, which costs
O(targets * segments) per light. That is fine for rooms with tens of walls;
an angular event sweep with an active-segment structure would be needed for
much larger scenes.
"""

from dataclasses import dataclass, field
import math
import numpy as np
from .geometry import Point2, BoundingBox, cast_rays
from .polygon import polygon_area, point_in_polygon, points_in_polygon
from .occluders import assemble_occluders
from .scene import RoomState, LightSource
from .tolerances import Tolerances, DEFAULT_TOLERANCES


@dataclass(frozen=True)
class VisibilityResult:
    """Floor region with an unobstructed line of sight to one light."""

    light: Point2
    polygon: tuple[Point2, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return len(self.polygon) < 3

    @property
    def area(self) -> float:
        return polygon_area(self.polygon)

    def contains(self, point) -> bool:
        return point_in_polygon(point, self.polygon)

    def contains_points(self, points) -> np.ndarray:
        return points_in_polygon(points, self.polygon)

    def as_array(self) -> np.ndarray:
        """(N, 2) array of polygon vertices."""
        if not self.polygon:
            return np.empty((0, 2))
        return np.array([tuple(p) for p in self.polygon])


def _wrap_angle(angle):
    """Map angles onto [-pi, pi)."""
    return (angle + math.pi) % (2 * math.pi) - math.pi


def _is_duplicate(prev: Point2, point: Point2, tol: float) -> bool:
    # per-axis box so the three hits around a corner collapse to one vertex
    return abs(point.x - prev.x) <= tol and abs(point.y - prev.y) <= tol


def compute_visibility_polygon(
    light,
    blocking,
    targets,
    bounds: BoundingBox | None = None,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
) -> list[Point2]:
    """
    Ordered vertices of the region visible from `light`.

    `blocking` is the full occluder set and `targets` the points that seed the
    sweep angles. If `bounds` is given its edges and corners are added so
    every ray ends inside the viewport. Returns an empty list when fewer than
    three distinct vertices survive, which callers treat as nothing lit.
    """
    light = Point2.from_any(light)
    segments = list(blocking)
    points = [Point2.from_any(p) for p in targets]
    if bounds is not None:
        segments.extend(bounds.segments)
        points.extend(bounds.corners)
    if not segments or not points:
        return []

    base = np.array([math.atan2(p.y - light.y, p.x - light.x) for p in points])
    offsets = np.array([-tolerances.angle_offset, 0.0, tolerances.angle_offset])
    angles = _wrap_angle((base[:, None] + offsets[None, :]).ravel())

    starts = np.array([tuple(s.start) for s in segments])
    ends = np.array([tuple(s.end) for s in segments])
    t, hits = cast_rays(
        (light.x, light.y),
        angles,
        starts,
        ends,
        min_t=tolerances.min_t,
        parallel_tol=tolerances.parallel_tol,
    )

    found = np.isfinite(t)
    angles, hits = angles[found], hits[found]
    order = np.argsort(angles, kind="stable")

    polygon: list[Point2] = []
    for x, y in hits[order]:
        point = Point2(float(x), float(y))
        if polygon and _is_duplicate(polygon[-1], point, tolerances.merge_distance):
            continue
        polygon.append(point)

    if len(polygon) < 3:
        return []
    return polygon


def compute_visibility(
    room: RoomState,
    light,
    bounds: BoundingBox | None = None,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
) -> VisibilityResult:
    """Assemble the room's occluders and sweep them from one light."""
    position = light.position if isinstance(light, LightSource) else Point2.from_any(light)
    occluders = assemble_occluders(room, bounds, tolerances)
    polygon = compute_visibility_polygon(
        position, occluders.blocking, occluders.targets, tolerances=tolerances
    )
    return VisibilityResult(light=position, polygon=tuple(polygon))
