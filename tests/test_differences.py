"""
Tests for difference records.
"""

import dataclasses
import pytest

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class TestDifferenceEquality:
    """Tests for structural equality of differences."""

    def test_same_kind_key_and_value_are_equal(self):
        """Test equality by content rather than identity."""
        from diffing.differences import Removal

        assert Removal("key", ["value"]) == Removal("key", ["value"])

    def test_different_kinds_are_not_equal(self):
        """Test a removal never equals an addition with the same fields."""
        from diffing.differences import Addition, Removal

        assert Removal("key", "value") != Addition("key", "value")

    def test_different_values_are_not_equal(self):
        """Test value participates in equality."""
        from diffing.differences import Addition

        assert Addition("key", "a") != Addition("key", "b")
        assert Addition("a", "value") != Addition("b", "value")

    def test_hashable_with_hashable_fields(self):
        """Test differences can be collected into sets."""
        from diffing.differences import Addition, Removal

        collected = {Removal("a", 1), Removal("a", 1), Addition("a", 1)}

        assert len(collected) == 2


class TestDifferenceImmutability:
    """Tests for immutability of differences."""

    def test_fields_cannot_be_reassigned(self):
        """Test differences are frozen."""
        from diffing.differences import Removal

        removal = Removal("key", "value")

        with pytest.raises(dataclasses.FrozenInstanceError):
            removal.value = "other"


class TestDifferenceRendering:
    """Tests for per-record rendering."""

    def test_removal_line(self):
        """Test a removal renders with a minus marker."""
        from diffing.differences import Removal

        assert str(Removal("removed", "value")) == "- 'removed': 'value'"

    def test_addition_line(self):
        """Test an addition renders with a plus marker."""
        from diffing.differences import Addition

        assert str(Addition("added", 42)) == "+ 'added': 42"

    def test_base_difference_cannot_render(self):
        """Test the abstract base has no rendering."""
        from diffing.differences import Difference

        with pytest.raises(NotImplementedError):
            str(Difference("key", "value"))

    def test_to_dict(self):
        """Test the plain representation used for JSON output."""
        from diffing.differences import Addition, Removal

        assert Removal("a", 1).to_dict() == {"kind": "removal", "key": "a", "value": 1}
        assert Addition("a", 2).to_dict() == {"kind": "addition", "key": "a", "value": 2}
