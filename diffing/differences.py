"""
Difference records produced by the diff engine.

A difference is one atomic change between two mappings:
- Removal: the key/value pair is gone from the new mapping (or superseded)
- Addition: the key/value pair is new in the new mapping (or supersedes one)
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Difference:
    """Base record for a single change. Use Removal or Addition."""
    key: Any
    value: Any

    kind = ""
    marker = ""

    def __str__(self) -> str:
        if not self.marker:
            raise NotImplementedError("Difference subclasses must define a marker")
        return f"{self.marker} {self.key!r}: {self.value!r}"

    def to_dict(self) -> dict:
        """Plain representation for JSON output."""
        return {"kind": self.kind, "key": self.key, "value": self.value}


@dataclass(frozen=True)
class Removal(Difference):
    """Key existed in the old mapping with this value."""
    kind = "removal"
    marker = "-"


@dataclass(frozen=True)
class Addition(Difference):
    """Key exists in the new mapping with this value."""
    kind = "addition"
    marker = "+"
