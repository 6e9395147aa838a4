import inspect
from collections.abc import Mapping

# camelCase keys written by the floor-plan editor's JSON export
_KEY_ALIASES = {
    "ceilingHeight": "ceiling_height",
    "wallId": "wall_id",
}


def init_from_dict(cls, data: dict):
    """Construct cls from dict, filtering to valid __init__ params."""
    if not isinstance(data, Mapping):
        raise TypeError(f"Expected a mapping for {cls.__name__}, not {type(data).__name__}")
    data = migrate_keys(data)
    keys = list(inspect.signature(cls.__init__).parameters.keys())[1:]
    return cls(**{k: v for k, v in data.items() if k in keys})


def migrate_keys(data: dict) -> dict:
    """Rename editor-style keys to their snake_case equivalents."""
    data = dict(data)
    for old, new in _KEY_ALIASES.items():
        if old in data and new not in data:
            data[new] = data.pop(old)
    return data
