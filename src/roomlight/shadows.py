"""
Hard shadows of obstacles shorter than the ceiling.

A point light on the ceiling at height H sees the top edge of an obstacle of
height h, at planar distance d, along a line that reaches the floor a further

    D = h * d / (H - h)

beyond the obstacle (similar triangles). Projecting both endpoints of each
edge facing away from the light gives a trapezoid on the floor.
"""

from dataclasses import dataclass
import warnings
from .geometry import Point2, add, scale, subtract, normalize, dot, distance
from .polygon import ensure_ccw, polygon_area
from .scene import RoomState, Obstacle, LightSource
from .tolerances import Tolerances, DEFAULT_TOLERANCES


@dataclass(frozen=True, slots=True)
class ShadowTrapezoid:
    """
    Floor footprint of the shadow cast by one obstacle edge.

    vertices:   [edge end, edge start, projected start, projected end]
    strength:   obstacle height over ceiling height, in (0, 1)
    obstacle_id: id of the casting obstacle
    edge_index: index of the casting edge in counter-clockwise order
    """

    vertices: tuple[Point2, Point2, Point2, Point2]
    strength: float
    obstacle_id: str | None = None
    edge_index: int | None = None

    @property
    def area(self) -> float:
        return polygon_area(self.vertices)


def shadow_extension(height: float, distance: float, ceiling_height: float) -> float:
    """Length of floor shadow beyond an obstacle edge at `distance` from the light."""
    if height <= 0 or height >= ceiling_height:
        raise ValueError(
            f"Obstacle height must lie in (0, {ceiling_height}), got {height}"
        )
    return height * distance / (ceiling_height - height)


def _extend(light: Point2, endpoint: Point2, height, ceiling_height, min_dist):
    d = distance(light, endpoint)
    if d < min_dist:
        return None
    reach = shadow_extension(height, d, ceiling_height)
    return add(endpoint, scale(normalize(subtract(endpoint, light)), reach))


def project_obstacle_shadows(
    obstacle: Obstacle,
    light,
    ceiling_height: float,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
) -> list[ShadowTrapezoid]:
    """
    Shadow trapezoids cast by one partial-height obstacle.

    Only edges whose outward side faces away from the light cast a shadow.
    An obstacle at or above the ceiling, or with no height, casts nothing;
    an edge with an endpoint on top of the light is skipped.
    """
    h, H = obstacle.height, ceiling_height
    if h <= 0 or h >= H:
        return []
    light = light.position if isinstance(light, LightSource) else Point2.from_any(light)

    tol = tolerances.degenerate_length
    verts = ensure_ccw(
        [w.start for w in obstacle.walls if not w.is_degenerate(tol)]
    )
    n = len(verts)
    if n < 3:
        msg = f"Obstacle {obstacle.id!r} has fewer than 3 edges; no shadow cast."
        warnings.warn(msg, stacklevel=2)
        return []

    strength = h / H
    shadows = []
    for i in range(n):
        start, end = verts[i], verts[(i + 1) % n]
        edge = subtract(end, start)
        normal = Point2(-edge.y, edge.x)
        mid = Point2((start.x + end.x) / 2, (start.y + end.y) / 2)
        if dot(normal, subtract(mid, light)) >= 0:
            continue

        ext_start = _extend(light, start, h, H, tolerances.min_shadow_distance)
        ext_end = _extend(light, end, h, H, tolerances.min_shadow_distance)
        if ext_start is None or ext_end is None:
            continue

        shadows.append(
            ShadowTrapezoid(
                vertices=(end, start, ext_start, ext_end),
                strength=strength,
                obstacle_id=obstacle.id,
                edge_index=i,
            )
        )
    return shadows


def project_shadows(
    room: RoomState,
    light,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
) -> list[ShadowTrapezoid]:
    """Shadows of every partial-height obstacle in the room from one light."""
    shadows = []
    for obstacle in room.partial_height_obstacles:
        shadows.extend(
            project_obstacle_shadows(obstacle, light, room.ceiling_height, tolerances)
        )
    return shadows
