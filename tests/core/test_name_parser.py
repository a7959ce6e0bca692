"""Tests for file name parsing.

This test suite covers:
- Name and dimension token recovery from conforming file names
- The name-only fallback and the short-input cut-off
- Dimension token parsing, formatting and caption text
"""

import pytest

from mediaindex.core.name_parser import (
    display_name,
    format_dimensions,
    parse_dimensions,
    parse_name,
)
from mediaindex.models.core import Dimensions


class TestParseName:
    """Tests for parse_name."""

    @pytest.mark.parametrize(
        "path, name, token",
        [
            ("/media/sunset-1920x1080.jpg", "sunset", "1920x1080"),
            ("/media/my-photo-1280x720.jpg", "my-photo", "1280x720"),
            ("sunset-1920x1080.jpg", "sunset", "1920x1080"),
            ("/a/b/cabin-2-10x10.png", "cabin-2", "10x10"),
            ("/media/clip-1280x72000.mp4", "clip", "1280x72000"),
        ],
    )
    def test_name_and_dimensions(self, path: str, name: str, token: str) -> None:
        parsed = parse_name(path)
        assert parsed.display_name == name
        assert parsed.raw_dimension_token == token
        assert parsed.matched

    def test_name_only_fallback(self) -> None:
        parsed = parse_name("/media/mountain-lake.jpg")
        assert parsed.display_name == "mountain-lake"
        assert parsed.raw_dimension_token is None

    def test_name_only_needs_five_characters(self) -> None:
        parsed = parse_name("/media/deep/lake.jpg")
        assert parsed.display_name is None
        assert parsed.raw_dimension_token is None

    def test_short_input_is_no_match(self) -> None:
        """Anything under 13 characters is never parsed."""
        assert len("/m/abcde.jpg") == 12
        parsed = parse_name("/m/abcde.jpg")
        assert parsed.display_name is None
        assert parsed.raw_dimension_token is None
        assert not parsed.matched

    def test_non_conforming_names(self) -> None:
        """Upper case and underscores break the naming convention."""
        assert parse_name("/media/IMG_1234-800x600.jpg").display_name is None
        assert parse_name("/media/holiday_photo.jpg").display_name is None

    def test_only_final_segment_is_parsed(self) -> None:
        parsed = parse_name("/media/album-1920x1080.d/IMG_1.jpg")
        assert parsed.display_name is None

    def test_dimension_token_limits(self) -> None:
        """Widths are 2-4 digits; a 5-digit width falls back to name only."""
        parsed = parse_name("/media/panorama-12345x600.jpg")
        assert parsed.raw_dimension_token is None
        assert parsed.display_name == "panorama-12345x600"


class TestDimensions:
    """Tests for dimension token parsing and formatting."""

    def test_parse(self) -> None:
        assert parse_dimensions("1280x720") == Dimensions(width=1280, height=720)

    @pytest.mark.parametrize("token", [None, "", "x", "12x", "axb12", "10x10x10", "00x10", "5x0"])
    def test_malformed(self, token) -> None:
        assert parse_dimensions(token) is None

    @pytest.mark.parametrize(
        "width, height",
        [(1, 1), (5, 5), (9, 99), (10, 10), (800, 600), (1920, 1080), (9999, 99999)],
    )
    def test_format_then_parse_is_identity(self, width: int, height: int) -> None:
        dimensions = Dimensions(width=width, height=height)
        assert parse_dimensions(format_dimensions(dimensions)) == dimensions
        assert format_dimensions(dimensions) == str(dimensions)


class TestDisplayName:
    """Tests for caption text."""

    def test_dashes_and_case(self) -> None:
        assert display_name("my-photo") == "MY PHOTO"

    def test_short_or_missing_names(self) -> None:
        assert display_name(None) == ""
        assert display_name("ab") == ""
        assert display_name(None, missing="n/a") == "n/a"
