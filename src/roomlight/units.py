from enum import StrEnum


class LengthUnits(StrEnum):
    """Floor-plan length units, each carrying its size in meters and its aliases."""

    FEET = ("feet", 0.3048, ("ft", "foot"))
    INCHES = ("inches", 0.0254, ("in", "inch"))
    METERS = ("meters", 1.0, ("m", "meter"))
    CENTIMETERS = ("centimeters", 0.01, ("cm", "centimeter"))
    YARDS = ("yards", 0.9144, ("yard", "yd"))

    def __new__(cls, token: str, meters: float, aliases=()):
        obj = str.__new__(cls, token)
        obj._value_ = token
        obj.meters = float(meters)
        obj.aliases = tuple(aliases)
        return obj

    @classmethod
    def labels(cls) -> list:
        return [u.value for u in cls]

    @classmethod
    def from_any(cls, arg) -> "LengthUnits":
        """Resolve a member, a name or an alias; `None` means feet."""
        if arg is None:
            # floor plans are drawn in feet
            return cls.FEET
        if isinstance(arg, cls):
            return arg
        token = str(arg).strip().lower()
        for unit in cls:
            if token == unit.value or token in unit.aliases:
                return unit
        raise ValueError(f"Unknown unit {arg!r}. Valid units are {cls.labels()}")

    def per(self, other) -> float:
        """How many `other` units make up one of these."""
        return self.meters / LengthUnits.from_any(other).meters


def convert_length(src, dst, *args, sigfigs: int | None = 12):
    """
    Convert one or more lengths from `src` units to `dst` units.

    Returns a single value when one is passed, otherwise a tuple. `None`
    entries pass through untouched.
    """
    s = LengthUnits.from_any(src)
    d = LengthUnits.from_any(dst)
    if s == d:
        return args[0] if len(args) == 1 else args

    factor = s.per(d)
    out = tuple(None if a is None else a * factor for a in args)
    if sigfigs is not None:
        out = tuple(None if a is None else round(a, sigfigs) for a in out)
    return out[0] if len(out) == 1 else out
