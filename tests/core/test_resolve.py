"""Tests for ordered-default resolution."""

from mediaindex.core.resolve import (
    resolve_dimensions,
    resolve_first,
    resolve_image_class,
)
from mediaindex.models.core import Dimensions
from mediaindex.settings import GalleryConfig


def test_resolve_first() -> None:
    assert resolve_first(None, "", "b", "c", default="d") == "b"
    assert resolve_first(None, "", default="d") == "d"
    assert resolve_first(0, default=5) == 0


def test_explicit_dimensions_win() -> None:
    config = GalleryConfig(image_width=640, image_height=480)
    assert resolve_dimensions("1920x1080", config) == Dimensions(width=1920, height=1080)


def test_default_dimensions() -> None:
    assert resolve_dimensions(None, GalleryConfig()) == Dimensions(width=800, height=600)


def test_malformed_token_uses_defaults() -> None:
    assert resolve_dimensions("12x", GalleryConfig()) == Dimensions(width=800, height=600)


def test_override_dimensions() -> None:
    config = GalleryConfig(image_width=640, image_height=480)
    assert resolve_dimensions(None, config) == Dimensions(width=640, height=480)


def test_axes_resolve_independently() -> None:
    config = GalleryConfig(image_height=400)
    assert resolve_dimensions(None, config) == Dimensions(width=800, height=400)


def test_image_class() -> None:
    assert resolve_image_class(GalleryConfig()) == "generic"
    assert resolve_image_class(GalleryConfig(image_class="photo")) == "photo"
    assert resolve_image_class(GalleryConfig(image_class="")) == "generic"
