"""Directory scanner for gallery media files.

This module builds the glob pattern for a registered subtype and enumerates
the matching files of a single directory (no recursion), capped at a maximum
number of items.
"""

import glob
import logging
from itertools import islice
from pathlib import Path
from typing import Iterator, Optional, Union

# Logger for this module
logger = logging.getLogger(__name__)

DEFAULT_MAX_ITEMS = 12

# Patterns of this length or shorter come from a degenerate base path (for
# example an empty one) and are never scanned.
MIN_PATTERN_LENGTH = 10


def build_match_pattern(
    base_path: Union[str, Path], extension: str
) -> Optional[str]:
    """Build the glob pattern matching *extension* files in *base_path*.

    Args:
        base_path: Directory to scan.
        extension: Registered subtype, without the dot (e.g. ``"jpg"``).

    Returns:
        The pattern, or None when it is too short to be a real directory.
    """
    base = str(base_path).rstrip("/")
    pattern = f"{glob.escape(base)}/*.{glob.escape(extension)}"
    if len(pattern) > MIN_PATTERN_LENGTH:
        return pattern
    logger.debug("Rejected degenerate pattern %r", pattern)
    return None


def scan(
    base_path: Union[str, Path],
    extension: str,
    max_items: int = DEFAULT_MAX_ITEMS,
) -> Iterator[Path]:
    """Yield files in *base_path* with the given extension, sorted by name.

    Args:
        base_path: Directory to scan.
        extension: Registered subtype, without the dot.
        max_items: Stop after this many files.

    Yields:
        Absolute paths of matching regular files.
    """
    pattern = build_match_pattern(base_path, extension)
    if pattern is None or max_items <= 0:
        return
    matches = (Path(p).absolute() for p in sorted(glob.glob(pattern)))
    files = (p for p in matches if p.is_file())
    yield from islice(files, max_items)
