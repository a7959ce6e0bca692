"""Recover a display name and dimensions from a media file name.

File names double as a small metadata channel: ``my-photo-1280x720.jpg``
carries the name ``my-photo`` and the dimensions 1280x720. The strict
character classes also act as a naming-convention check; a file that does not
conform renders with a blank name and default dimensions instead of failing.
"""

import logging
import re
from typing import Optional

from mediaindex.models.core import Dimensions, ParsedName

logger = logging.getLogger(__name__)

# No conforming name fits in fewer characters.
MIN_PARSE_LENGTH = 13

# Name of 3-150 lowercase letters, digits or dashes, a dash, a WxH token and
# the dot that starts the extension. Anchored to the final path segment.
NAME_DIM_PATTERN = re.compile(r"(?:^|/)([a-z0-9-]{3,150})-(\d{2,4}x\d{2,5})\.[^/]*$")

# Name only: 5-150 lowercase letters, digits or dashes followed by a dot.
NAME_ONLY_PATTERN = re.compile(r"(?:^|/)([a-z0-9-]{5,150})\.[^/]*$")

_NO_MATCH = ParsedName()


def parse_name(path: str) -> ParsedName:
    """Parse the display name and dimension token out of *path*.

    Args:
        path: A source path or file name, e.g. ``/media/sunset-1920x1080.jpg``.

    Returns:
        ParsedName with both fields set, only the name set, or neither set
        when the path does not follow the naming convention.
    """
    if len(path) < MIN_PARSE_LENGTH:
        return _NO_MATCH

    match = NAME_DIM_PATTERN.search(path)
    if match:
        return ParsedName(
            display_name=match.group(1), raw_dimension_token=match.group(2)
        )

    match = NAME_ONLY_PATTERN.search(path)
    if match:
        return ParsedName(display_name=match.group(1))

    logger.debug("No name match for %s", path)
    return _NO_MATCH


def parse_dimensions(token: Optional[str]) -> Optional[Dimensions]:
    """Split a ``WxH`` token into dimensions.

    Args:
        token: Dimension token, e.g. ``"1280x720"``.

    Returns:
        The dimensions, or None when the token is absent or malformed.
    """
    if not token:
        return None
    parts = token.split("x")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        return None
    width, height = (int(part) for part in parts)
    if width == 0 or height == 0:
        return None
    return Dimensions(width=width, height=height)


def format_dimensions(dimensions: Dimensions) -> str:
    """Format dimensions back into a ``WxH`` token."""
    return f"{dimensions.width}x{dimensions.height}"


def display_name(name: Optional[str], missing: str = "") -> str:
    """Turn a parsed name into caption text.

    ``my-photo`` becomes ``MY PHOTO``. Names of two characters or fewer
    yield *missing*.
    """
    if name and len(name) > 2:
        return name.replace("-", " ").upper()
    return missing
