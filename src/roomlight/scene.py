"""Immutable room snapshot: walls, doors, obstacles and lights."""

from dataclasses import dataclass, field
from .geometry import Point2, Segment, BoundingBox
from .polygon import polygon_area, is_valid_outline
from ._serialization import init_from_dict

# viewport used when there are no walls to bound
EMPTY_ROOM_BOUNDS = BoundingBox(-10.0, -10.0, 10.0, 10.0)
BOUNDS_PADDING = 2.0


@dataclass(frozen=True, slots=True)
class LightSource:
    position: Point2
    id: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "position", Point2.from_any(self.position))

    def to_dict(self) -> dict:
        return {"position": self.position.to_dict(), "id": self.id}

    @classmethod
    def from_dict(cls, data: dict) -> "LightSource":
        return init_from_dict(cls, data)


@dataclass(frozen=True, slots=True)
class Door:
    """
    An opening in a wall.

    `position` is the distance from the parent wall's start to the centre of
    the door, `width` the opening width, both in room units.
    """

    wall_id: str
    position: float
    width: float
    id: str | None = None

    def __post_init__(self):
        if self.width < 0:
            raise ValueError(f"Door width must be non-negative, got {self.width}")

    def endpoints(self, wall: Segment) -> tuple[Point2, Point2]:
        """Start and end of the opening on `wall`, clamped to the wall's extent."""
        half = self.width / 2
        lo = min(max(self.position - half, 0.0), wall.length)
        hi = min(max(self.position + half, 0.0), wall.length)
        return wall.point_at(lo), wall.point_at(hi)

    def to_dict(self) -> dict:
        return {
            "wall_id": self.wall_id,
            "position": self.position,
            "width": self.width,
            "id": self.id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Door":
        return init_from_dict(cls, data)


@dataclass(frozen=True, slots=True)
class Obstacle:
    """A closed polygon of walls standing `height` above the floor."""

    walls: tuple[Segment, ...]
    height: float
    id: str | None = None
    label: str | None = None

    def __post_init__(self):
        walls = tuple(
            w if isinstance(w, Segment) else Segment.from_dict(w) for w in self.walls
        )
        object.__setattr__(self, "walls", walls)

    @classmethod
    def from_vertices(cls, vertices, height, id=None, label=None) -> "Obstacle":
        pts = [Point2.from_any(v) for v in vertices]
        n = len(pts)
        walls = tuple(Segment(pts[i], pts[(i + 1) % n]) for i in range(n))
        return cls(walls=walls, height=height, id=id, label=label)

    @property
    def vertices(self) -> list[Point2]:
        return [w.start for w in self.walls]

    def is_full_height(self, ceiling_height: float) -> bool:
        return self.height >= ceiling_height

    def to_dict(self) -> dict:
        return {
            "walls": [w.to_dict() for w in self.walls],
            "height": self.height,
            "id": self.id,
            "label": self.label,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Obstacle":
        return init_from_dict(cls, data)


@dataclass(frozen=True, slots=True)
class RoomState:
    """
    Snapshot of a room as seen by the lighting core.

    Walls are kept in drawing order; the outline may be open while the room
    is still being drafted. Walls without an id are given `wall-<index>` so
    that doors can refer to them.
    """

    ceiling_height: float
    walls: tuple[Segment, ...] = field(default_factory=tuple)
    doors: tuple[Door, ...] = field(default_factory=tuple)
    obstacles: tuple[Obstacle, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.ceiling_height <= 0:
            raise ValueError(
                f"Ceiling height must be positive, got {self.ceiling_height}"
            )
        walls = []
        for i, w in enumerate(self.walls):
            if not isinstance(w, Segment):
                w = Segment.from_dict(w)
            walls.append(w if w.id is not None else w.with_id(f"wall-{i}"))
        object.__setattr__(self, "walls", tuple(walls))
        object.__setattr__(
            self,
            "doors",
            tuple(d if isinstance(d, Door) else Door.from_dict(d) for d in self.doors),
        )
        object.__setattr__(
            self,
            "obstacles",
            tuple(
                o if isinstance(o, Obstacle) else Obstacle.from_dict(o)
                for o in self.obstacles
            ),
        )

    @classmethod
    def from_vertices(cls, vertices, ceiling_height, doors=(), obstacles=()) -> "RoomState":
        """Closed room whose walls run through `vertices` in order."""
        pts = [Point2.from_any(v) for v in vertices]
        n = len(pts)
        walls = tuple(Segment(pts[i], pts[(i + 1) % n]) for i in range(n))
        return cls(ceiling_height, walls, tuple(doors), tuple(obstacles))

    def wall(self, wall_id) -> Segment | None:
        for w in self.walls:
            if w.id == wall_id:
                return w
        return None

    @property
    def full_height_obstacles(self) -> tuple[Obstacle, ...]:
        return tuple(o for o in self.obstacles if o.is_full_height(self.ceiling_height))

    @property
    def partial_height_obstacles(self) -> tuple[Obstacle, ...]:
        return tuple(
            o for o in self.obstacles if not o.is_full_height(self.ceiling_height)
        )

    @property
    def outline(self) -> list[Point2]:
        return [w.start for w in self.walls]

    @property
    def is_closed(self) -> bool:
        """Walls form a valid loop: each wall ends where the next begins."""
        n = len(self.walls)
        if n < 3 or not is_valid_outline(self.walls):
            return False
        return all(self.walls[i].end == self.walls[(i + 1) % n].start for i in range(n))

    @property
    def area(self) -> float:
        return polygon_area(self.outline)

    def bounds(self, padding: float = BOUNDS_PADDING) -> BoundingBox:
        """Padded extent of the walls, or a default viewport for an empty room."""
        if not self.walls:
            return EMPTY_ROOM_BOUNDS
        points = [p for w in self.walls for p in (w.start, w.end)]
        return BoundingBox.from_points(points, padding=padding)

    def to_dict(self) -> dict:
        return {
            "ceiling_height": self.ceiling_height,
            "walls": [w.to_dict() for w in self.walls],
            "doors": [d.to_dict() for d in self.doors],
            "obstacles": [o.to_dict() for o in self.obstacles],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RoomState":
        return init_from_dict(cls, data)
