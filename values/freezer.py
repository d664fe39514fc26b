"""
Value views of nested data.

to_value() declares that a structure *is* a value: mappings, sequences and
sets are rebuilt as immutable counterparts that compare and hash by content.

This is not a defensive copy of arbitrary objects. Leaf objects are shared,
not copied, so only call it on data composed of immutable leaves (such as
decoded JSON).
"""

from collections.abc import Mapping, Set
from typing import Any, Iterator


class FrozenMapping(Mapping):
    """
    Immutable mapping with attribute access to its keys.

    Equal to any mapping with the same content, and hashable when its
    values are hashable.

    Keys named like mapping methods (keys, items, values, get, to_dict) or
    starting with an underscore are not available as attributes; read them
    with v["values"].
    """

    __slots__ = ("_properties", "_hash")

    def __init__(self, properties: Mapping):
        object.__setattr__(self, "_properties", dict(properties))
        object.__setattr__(self, "_hash", None)

    def __getitem__(self, key: Any) -> Any:
        return self._properties[key]

    def __iter__(self) -> Iterator:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._properties[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return self._properties == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, "_hash", hash(frozenset(self._properties.items())))
        return self._hash

    def __repr__(self) -> str:
        return repr(self._properties)

    def __copy__(self) -> "FrozenMapping":
        return self

    def __deepcopy__(self, memo: dict) -> "FrozenMapping":
        return self

    def __reduce__(self):
        return (type(self), (self._properties,))

    def to_dict(self) -> dict:
        """Shallow plain-dict copy of the content."""
        return dict(self._properties)


def to_value(obj: Any) -> Any:
    """
    Recursively convert obj into a value view.

    - Mappings become FrozenMapping
    - Lists and tuples become tuples
    - Sets become frozensets
    - Strings, bytes and other objects are returned unchanged

    Args:
        obj: Data to convert

    Returns:
        The value view of obj
    """
    if isinstance(obj, FrozenMapping):
        return obj
    if isinstance(obj, Mapping):
        return FrozenMapping({key: to_value(value) for key, value in obj.items()})
    if isinstance(obj, (list, tuple)):
        return tuple(to_value(item) for item in obj)
    if isinstance(obj, Set):
        return frozenset(to_value(item) for item in obj)
    return obj
