from .geometry import (
    Point2,
    Segment,
    BoundingBox,
    ray_segment_intersect,
    segments_intersect,
    distance_point_to_segment,
)
from .polygon import (
    point_in_polygon,
    polygon_area,
    is_self_intersecting,
    is_convex,
    is_valid_outline,
)
from .scene import RoomState, Door, Obstacle, LightSource
from .occluders import OccluderSet, assemble_occluders, door_gap_segment
from .visibility import VisibilityResult, compute_visibility_polygon, compute_visibility
from .shadows import (
    ShadowTrapezoid,
    shadow_extension,
    project_obstacle_shadows,
    project_shadows,
)
from .preview import LightPreview, compute_lighting_preview
from .tolerances import Tolerances
from .units import LengthUnits, convert_length
from .plotting import plot_preview
from ._version import __version__

__all__ = [
    "Point2",
    "Segment",
    "BoundingBox",
    "ray_segment_intersect",
    "segments_intersect",
    "distance_point_to_segment",
    "point_in_polygon",
    "polygon_area",
    "is_self_intersecting",
    "is_convex",
    "is_valid_outline",
    "RoomState",
    "Door",
    "Obstacle",
    "LightSource",
    "OccluderSet",
    "assemble_occluders",
    "door_gap_segment",
    "VisibilityResult",
    "compute_visibility_polygon",
    "compute_visibility",
    "ShadowTrapezoid",
    "shadow_extension",
    "project_obstacle_shadows",
    "project_shadows",
    "LightPreview",
    "compute_lighting_preview",
    "Tolerances",
    "LengthUnits",
    "convert_length",
    "plot_preview",
]

__version__ = __version__
