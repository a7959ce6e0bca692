"""Domain models for the mediaindex application."""

from mediaindex.models.core import (
    Classification,
    Dimensions,
    FileEntry,
    GalleryScan,
    MediaItem,
    MediaType,
    ParsedName,
    RenderRequest,
)

__all__ = [
    "Classification",
    "Dimensions",
    "FileEntry",
    "GalleryScan",
    "MediaItem",
    "MediaType",
    "ParsedName",
    "RenderRequest",
]
