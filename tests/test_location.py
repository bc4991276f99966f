"""
Tests for location value types.
"""

import dataclasses
import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from locscan.core.location import Compactable, Location, SourceLocation, TextLocation


def make_location(line=3, column=7, path="Sample.kt"):
    return Location(
        source=SourceLocation(line, column),
        text=TextLocation(40, 52),
        display_text="run",
        file_path=path,
    )


class TestSourceLocation:
    """Tests for line/column positions."""

    def test_string_form(self):
        """Test that a position renders as line:column."""
        assert str(SourceLocation(12, 4)) == "12:4"

    def test_value_equality(self):
        """Test that equal positions compare and hash equal."""
        assert SourceLocation(1, 2) == SourceLocation(1, 2)
        assert hash(SourceLocation(1, 2)) == hash(SourceLocation(1, 2))
        assert SourceLocation(1, 2) != SourceLocation(2, 1)

    def test_unknown_sentinel(self):
        """Test the -1:-1 sentinel."""
        assert SourceLocation.UNKNOWN == SourceLocation(-1, -1)
        assert SourceLocation.UNKNOWN.is_unknown
        assert str(SourceLocation.UNKNOWN) == "-1:-1"
        assert not SourceLocation(1, 1).is_unknown

    def test_ordering(self):
        """Test that positions sort by line, then column."""
        positions = [SourceLocation(3, 1), SourceLocation(1, 9), SourceLocation(1, 2)]
        assert sorted(positions) == [
            SourceLocation(1, 2),
            SourceLocation(1, 9),
            SourceLocation(3, 1),
        ]

    def test_frozen(self):
        """Test that positions cannot be modified."""
        position = SourceLocation(1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            position.line = 2


class TestTextLocation:
    """Tests for character ranges."""

    def test_string_form(self):
        assert str(TextLocation(10, 25)) == "10:25"

    def test_degenerate_range_allowed(self):
        """Test that start > end is kept as given."""
        location = TextLocation(9, 3)
        assert location.start == 9
        assert location.end == 3
        assert str(location) == "9:3"


class TestLocation:
    """Tests for the full location value."""

    def test_compact(self):
        """Test compact file:line:column form."""
        assert make_location().compact() == "Sample.kt:3:7"

    def test_compact_unknown_position(self):
        """Test that unknown positions still render."""
        location = make_location(-1, -1)
        assert location.compact() == "Sample.kt:-1:-1"

    def test_compact_with_signature_defaults_to_compact(self):
        location = make_location()
        assert isinstance(location, Compactable)
        assert location.compact_with_signature() == location.compact()

    def test_value_equality(self):
        assert make_location() == make_location()
        assert make_location() != make_location(path="Other.kt")

    def test_to_dict(self):
        """Test converting a location to a dictionary."""
        data = make_location().to_dict()

        assert data == {
            "file_path": "Sample.kt",
            "line": 3,
            "column": 7,
            "start": 40,
            "end": 52,
            "display_text": "run",
        }

    def test_frozen(self):
        location = make_location()
        with pytest.raises(dataclasses.FrozenInstanceError):
            location.file_path = "Changed.kt"
