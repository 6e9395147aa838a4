"""Collect the segments that block light and the points the sweep aims at."""

from dataclasses import dataclass
import warnings
from .geometry import Point2, Segment, BoundingBox, dot, normalize, subtract
from .scene import RoomState, Door, Obstacle
from .tolerances import Tolerances, DEFAULT_TOLERANCES


@dataclass(frozen=True, slots=True)
class OccluderSet:
    """
    Output of occluder assembly for one room snapshot.

    blocking:          segments every sweep ray is tested against
    targets:           points whose angles seed the sweep
    partial_obstacles: obstacles below the ceiling, left for the shadow projector
    door_gaps:         the openings cut into their parent walls
    """

    blocking: tuple[Segment, ...]
    targets: tuple[Point2, ...]
    partial_obstacles: tuple[Obstacle, ...]
    door_gaps: tuple[Segment, ...]


def door_gap_segment(door: Door, wall: Segment) -> Segment:
    """The opening `door` cuts into `wall`, running in the wall's direction."""
    start, end = door.endpoints(wall)
    return Segment(start, end, door.id)


def _offset_along(wall: Segment, point: Point2) -> float:
    return dot(subtract(point, wall.start), normalize(wall.direction))


def _split_wall(wall: Segment, gaps: list[Segment], tol: float) -> list[Segment]:
    """Pieces of `wall` left standing once every gap is removed."""
    if not gaps:
        return [wall]
    spans = sorted(
        tuple(sorted((_offset_along(wall, g.start), _offset_along(wall, g.end))))
        for g in gaps
    )
    pieces = []
    cursor = 0.0
    for lo, hi in spans:
        if lo > cursor:
            pieces.append(Segment(wall.point_at(cursor), wall.point_at(lo)))
        cursor = max(cursor, hi)
    if cursor < wall.length:
        pieces.append(Segment(wall.point_at(cursor), wall.end))

    pieces = [p for p in pieces if not p.is_degenerate(tol)]
    return [p.with_id(f"{wall.id}:{i}") for i, p in enumerate(pieces)]


def assemble_occluders(
    room: RoomState,
    bounds: BoundingBox | None = None,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
) -> OccluderSet:
    """
    Merge room walls, door openings, obstacles and the bounding box into one
    blocking set and one set of sweep targets.

    Obstacles reaching the ceiling block like walls; shorter ones are
    returned untouched in `partial_obstacles`. Doors remove their opening
    from the parent wall so light passes through, and the jambs become
    sweep targets. Zero-length walls and edges are dropped.
    """
    tol = tolerances.degenerate_length
    bounds = room.bounds() if bounds is None else bounds

    gaps_by_wall: dict[str, list[Segment]] = {}
    door_gaps = []
    for door in room.doors:
        wall = room.wall(door.wall_id)
        if wall is None:
            msg = f"Door {door.id!r} refers to unknown wall {door.wall_id!r}; skipped."
            warnings.warn(msg, stacklevel=2)
            continue
        if wall.is_degenerate(tol):
            msg = f"Door {door.id!r} sits on zero-length wall {wall.id!r}; skipped."
            warnings.warn(msg, stacklevel=2)
            continue
        gap = door_gap_segment(door, wall)
        door_gaps.append(gap)
        gaps_by_wall.setdefault(wall.id, []).append(gap)

    blocking = []
    for wall in room.walls:
        if wall.is_degenerate(tol):
            continue
        blocking.extend(_split_wall(wall, gaps_by_wall.get(wall.id, []), tol))

    for obstacle in room.full_height_obstacles:
        blocking.extend(w for w in obstacle.walls if not w.is_degenerate(tol))

    blocking.extend(bounds.segments)

    targets = [p for seg in blocking for p in (seg.start, seg.end)]
    targets.extend(p for gap in door_gaps for p in (gap.start, gap.end))
    targets.extend(bounds.corners)

    return OccluderSet(
        blocking=tuple(blocking),
        targets=tuple(targets),
        partial_obstacles=room.partial_height_obstacles,
        door_gaps=tuple(door_gaps),
    )
