"""Ordered-default resolution for rendered attributes.

Each attribute that can come from several places (the file name, the host
settings, a computed default) is resolved by one small function so the
precedence can be tested without rendering anything.
"""

from typing import Any, Optional

from mediaindex.core.name_parser import parse_dimensions
from mediaindex.models.core import Dimensions
from mediaindex.settings import GalleryConfig

DEFAULT_IMAGE_CLASS = "generic"


def resolve_first(*candidates: Any, default: Any) -> Any:
    """Return the first candidate that is neither None nor empty."""
    for candidate in candidates:
        if candidate is not None and candidate != "":
            return candidate
    return default


def resolve_dimensions(token: Optional[str], config: GalleryConfig) -> Dimensions:
    """Resolve the dimensions of an item.

    Precedence: the dimension token of the file name, then the configured
    width/height overrides, then the configured defaults.
    """
    explicit = parse_dimensions(token)
    if explicit is not None:
        return explicit
    return Dimensions(
        width=resolve_first(config.image_width, default=config.default_width),
        height=resolve_first(config.image_height, default=config.default_height),
    )


def resolve_image_class(config: GalleryConfig) -> str:
    """Resolve the CSS class applied to images."""
    return resolve_first(config.image_class, default=DEFAULT_IMAGE_CLASS)
