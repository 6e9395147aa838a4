"""Numerical tolerances used by the visibility and shadow routines."""

from dataclasses import dataclass, replace
from .units import LengthUnits, convert_length


@dataclass(frozen=True, slots=True)
class Tolerances:
    """
    Empirical epsilons for the sweep and the shadow projector.

    Defaults are calibrated for a floor plan drawn in feet. Length-valued
    fields are in the room's length units; `angle_offset` is in radians and
    `parallel_tol` is a bare determinant threshold, so neither is rescaled.

    angle_offset:        angular perturbation applied either side of each target
    min_t:               rays ignore hits closer than this to the light
    merge_distance:      consecutive polygon vertices closer than this are merged
    min_shadow_distance: shadow endpoints this close to the light are skipped
    parallel_tol:        |cross| below this counts as parallel
    degenerate_length:   segments no longer than this are not occluders
    """

    angle_offset: float = 1e-4
    min_t: float = 1e-3
    merge_distance: float = 1e-3
    min_shadow_distance: float = 1e-4
    parallel_tol: float = 1e-10
    degenerate_length: float = 1e-9

    @classmethod
    def for_units(cls, units) -> "Tolerances":
        """Default tolerances rescaled from feet to `units`."""
        return cls().rescale(LengthUnits.FEET, units)

    def rescale(self, src, dst) -> "Tolerances":
        """Return a copy with the length-valued fields converted src -> dst."""
        min_t, merge, shadow, degenerate = convert_length(
            src,
            dst,
            self.min_t,
            self.merge_distance,
            self.min_shadow_distance,
            self.degenerate_length,
            sigfigs=None,
        )
        return replace(
            self,
            min_t=min_t,
            merge_distance=merge,
            min_shadow_distance=shadow,
            degenerate_length=degenerate,
        )


DEFAULT_TOLERANCES = Tolerances()
