"""Core domain models for mediaindex.

This module defines the value objects that flow through a single gallery
render: the classification of a file, the metadata recovered from its name,
its resolved dimensions and the request that drives the pass.
- All models are request-scoped; none of them outlive one render call.
- Models are frozen once built so a request can never be overwritten halfway
  through a pass.

Design:
- MediaType is a str enum so it can be used directly in CSS class names and
  JSON output.
- FileEntry keeps both the absolute path (for stat) and the root-relative
  source path (for markup).
- GalleryScan mirrors the shape of a scan result: the items found, per-type
  counts and the errors recorded along the way.
"""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MediaType(str, Enum):
    """Broad media category of a registered subtype.

    Used to select the markup variant and as a CSS class on the gallery.
    """

    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"


class Classification(BaseModel):
    """Declared type of a registered file extension."""

    model_config = ConfigDict(frozen=True)

    type: MediaType
    """The media category (image, audio, video)."""

    supertype: str = "media"
    """Shared category of every registered subtype."""


class ParsedName(BaseModel):
    """Display name and dimension token recovered from a file name.

    Both fields are absent when the name does not follow the naming
    convention; downstream code resolves them to defaults.
    """

    model_config = ConfigDict(frozen=True)

    display_name: Optional[str] = None
    """Name segment of the file, e.g. ``my-photo``."""

    raw_dimension_token: Optional[str] = None
    """Dimension token of the file, e.g. ``1280x720``."""

    @property
    def matched(self: "ParsedName") -> bool:
        """True when the file name followed the naming convention."""
        return self.display_name is not None


class Dimensions(BaseModel):
    """Resolved width and height of a media item, in pixels."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)

    def __str__(self: "Dimensions") -> str:
        return f"{self.width}x{self.height}"


class FileEntry(BaseModel):
    """A discovered media file.

    Carries the absolute path used for filesystem access and the source path
    used in markup.
    """

    model_config = ConfigDict(frozen=True)

    absolute_path: Path
    """Absolute path to the file on disk."""

    source_path: str
    """Path relative to the site root, always starting with a single slash."""

    @classmethod
    def from_path(
        cls: type["FileEntry"], path: Path, site_path: Optional[Path] = None
    ) -> "FileEntry":
        """Build an entry, stripping *site_path* to obtain the source path.

        Args:
            path: Absolute path to the discovered file.
            site_path: Root of the site; removed from the front of *path*.

        Returns:
            The file entry.
        """
        relative = path.as_posix()
        if site_path is not None:
            try:
                relative = path.relative_to(site_path).as_posix()
            except ValueError:
                # Outside the site root; keep the full path as the source.
                pass
        return cls(absolute_path=path, source_path="/" + relative.lstrip("/"))

    @model_validator(mode="after")
    def validate_paths(self: "FileEntry") -> "FileEntry":
        """Ensure the path is absolute and the source path is slash-normalized.

        Raises:
            ValueError: If either path breaks its invariant.
        """
        if not self.absolute_path.is_absolute():
            raise ValueError(f"Path must be absolute: {self.absolute_path}")
        if not self.source_path.startswith("/") or self.source_path.startswith(
            "//"
        ):
            raise ValueError(
                f"Source path must start with a single slash: {self.source_path}"
            )
        return self


class RenderRequest(BaseModel):
    """Parameters of one top-level gallery render."""

    model_config = ConfigDict(frozen=True)

    base_path: Path
    """Directory that is scanned for media files."""

    directory: str = "/media"
    """Requested media directory, relative to the content root."""

    max_items: int = 12
    """Maximum number of items rendered per subtype."""

    wrap_in_page: bool = False
    """Whether the gallery is wrapped in full page chrome."""

    self_mode: bool = False
    """Whether the gallery scans its own directory."""


class MediaItem(BaseModel):
    """A discovered file with everything needed to render it."""

    model_config = ConfigDict(frozen=True)

    subtype: str
    entry: FileEntry
    parsed: ParsedName
    dimensions: Dimensions
    classification: Classification


class GalleryScan(BaseModel):
    """Result of collecting the items of a gallery without rendering them."""

    request: RenderRequest
    """The request that produced this scan."""

    items: List[MediaItem] = Field(default_factory=list)
    """Items in render order (registry order, then file name)."""

    by_media_type: Dict[MediaType, int] = Field(default_factory=dict)
    """Count of items per media type."""

    errors: List[str] = Field(default_factory=list)
    """Errors recorded for files that were skipped."""

    scan_time: datetime = Field(default_factory=datetime.now)
    """When the scan was run."""
