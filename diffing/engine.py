"""
Flat mapping comparison.

Compares an "old" and a "new" mapping and produces an ordered sequence of
Removal/Addition records that turns old into new:
1. Keys are visited in first-seen order: old's keys, then new's keys
2. A key only in old yields a Removal
3. A key only in new yields an Addition
4. A key in both with unequal values yields a Removal followed by an Addition
5. A key in both with equal values yields nothing

Values are equal when they are the same object or compare equal with ==.
Two distinct NaN objects (such as NaN loaded from two separate JSON
documents) are not equal and are reported as a change.

The result is computed once, on first access, and cached for the lifetime of
the engine.
"""

import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional
import structlog

from diffing.differences import Addition, Difference, Removal

logger = structlog.get_logger()


class DiffEngine:
    """
    Computes and caches the differences between two mappings.

    Both mappings are copied at construction, so mutating the caller's
    objects afterwards has no effect on the result. Values are copied
    shallowly; pass values through values.to_value for a deep snapshot.

    The first call to differences() (or has_differences/render) runs the
    comparison under a lock; every later call returns the same tuple.
    """

    def __init__(self, old: Mapping, new: Mapping):
        """
        Initialize the engine.

        Args:
            old: Mapping describing the previous state
            new: Mapping describing the current state
        """
        self._old = dict(old)
        self._new = dict(new)
        self._differences: Optional[tuple[Difference, ...]] = None
        self._lock = threading.Lock()

    @property
    def old(self) -> Mapping:
        return MappingProxyType(self._old)

    @property
    def new(self) -> Mapping:
        return MappingProxyType(self._new)

    @property
    def computed(self) -> bool:
        """True once the comparison has run."""
        return self._differences is not None

    def differences(self) -> tuple[Difference, ...]:
        """
        Get the ordered differences between old and new.

        Returns:
            Tuple of Removal/Addition records, identical on every call
        """
        if self._differences is None:
            with self._lock:
                if self._differences is None:
                    self._differences = self._compare()
        return self._differences

    def has_differences(self) -> bool:
        return len(self.differences()) != 0

    def render(self) -> str:
        """
        Render the differences one per line.

        Removals read "- key: value" and additions "+ key: value", with keys
        and values in their repr form. No differences renders as "".
        """
        return "\n".join(str(difference) for difference in self.differences())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        state = f"{len(self._differences)} differences" if self.computed else "uncomputed"
        return f"<DiffEngine {state}>"

    def _compare(self) -> tuple[Difference, ...]:
        differences: list[Difference] = []

        for key in self._diffable_keys():
            differences.extend(self._differences_for_key(key))

        logger.debug(
            "Mappings compared",
            old_keys=len(self._old),
            new_keys=len(self._new),
            differences=len(differences)
        )

        return tuple(differences)

    def _diffable_keys(self) -> list[Any]:
        # dict.fromkeys keeps the first occurrence of each key in order
        return list(dict.fromkeys([*self._old, *self._new]))

    def _differences_for_key(self, key: Any) -> list[Difference]:
        in_old = key in self._old
        in_new = key in self._new

        if in_old and not in_new:
            return [Removal(key, self._old[key])]

        if in_new and not in_old:
            return [Addition(key, self._new[key])]

        old_value = self._old[key]
        new_value = self._new[key]

        # Identity first, as dict equality does, so a value equals itself
        if old_value is not new_value and old_value != new_value:
            return [Removal(key, old_value), Addition(key, new_value)]

        return []
