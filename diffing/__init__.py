"""Diffing module for mapping comparison."""

from diffing.differences import Difference, Removal, Addition
from diffing.engine import DiffEngine
from diffing.loader import DocumentError, load_document

__all__ = [
    "Difference",
    "Removal",
    "Addition",
    "DiffEngine",
    "DocumentError",
    "load_document",
]
