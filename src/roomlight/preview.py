from dataclasses import dataclass, field
import warnings
from .geometry import BoundingBox
from .scene import RoomState, LightSource
from .occluders import assemble_occluders
from .visibility import VisibilityResult, compute_visibility_polygon
from .shadows import ShadowTrapezoid, project_obstacle_shadows
from .tolerances import Tolerances


@dataclass(frozen=True)
class LightPreview:
    """Everything the renderer needs to draw one light."""

    light: LightSource
    visibility: VisibilityResult
    shadows: list[ShadowTrapezoid] = field(default_factory=list)
    coverage: float = 0.0


def _unique_id(base: str, taken) -> str:
    if base not in taken:
        return base
    prefix = base + "-"
    max_suffix = 1  # 1 corresponds to plain `base` being present
    for key in taken:
        if key.startswith(prefix):
            rest = key[len(prefix) :]
            if rest.isdigit():
                max_suffix = max(max_suffix, int(rest))
    return f"{base}-{max_suffix + 1}"


def _init_lights(lights) -> list[LightSource]:
    out = []
    taken = set()
    for i, obj in enumerate(lights):
        if isinstance(obj, LightSource):
            light = obj
        elif isinstance(obj, dict):
            light = LightSource.from_dict(obj)
        else:
            light = LightSource(obj)
        key = light.id or f"light-{i}"
        if key in taken:
            new_key = _unique_id(key, taken)
            msg = f"Light id {key!r} is already in use; renamed to {new_key!r}."
            warnings.warn(msg, stacklevel=3)
            key = new_key
        if key != light.id:
            light = LightSource(light.position, key)
        taken.add(key)
        out.append(light)
    return out


def compute_lighting_preview(
    room: RoomState,
    lights,
    bounds: BoundingBox | None = None,
    tolerances: Tolerances | None = None,
    units=None,
) -> dict[str, LightPreview]:
    """
    Visibility polygon and obstacle shadows for every light in one pass.

    Lights may be LightSource objects, (x, y) pairs or dicts; lights without
    an id are keyed `light-<index>`, and a repeated id gets a numeric suffix
    (`a`, `a-2`, ...) with a warning. When `tolerances` is not given, the
    defaults are rescaled to `units` (feet when neither is given). Occluders
    are assembled once and shared by all lights.
    """
    if tolerances is None:
        tolerances = Tolerances.for_units(units)
    occluders = assemble_occluders(room, bounds, tolerances)
    room_area = room.area if room.is_closed else 0.0

    previews = {}
    for light in _init_lights(lights):
        polygon = compute_visibility_polygon(
            light.position, occluders.blocking, occluders.targets, tolerances=tolerances
        )
        visibility = VisibilityResult(light=light.position, polygon=tuple(polygon))

        shadows = []
        for obstacle in occluders.partial_obstacles:
            shadows.extend(
                project_obstacle_shadows(
                    obstacle, light.position, room.ceiling_height, tolerances
                )
            )

        coverage = 0.0
        if room_area > 0:
            coverage = min(max(visibility.area / room_area, 0.0), 1.0)

        previews[light.id] = LightPreview(
            light=light, visibility=visibility, shadows=shadows, coverage=coverage
        )
    return previews
