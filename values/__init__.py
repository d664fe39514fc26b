"""Value views for nested data."""

from values.freezer import FrozenMapping, to_value

__all__ = [
    "FrozenMapping",
    "to_value",
]
