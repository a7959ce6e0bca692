"""Core functionality for mediaindex.

This package exposes the gallery assembler and the pieces it is built from:
- parse_name: recovers a display name and dimension token from a file name.
- classify: maps a registered extension to its media type.
- scan: enumerates the files of one subtype in a directory.
- render_media_item: renders the markup fragment of one file.
- GalleryAssembler: runs a full render pass.
"""

from mediaindex.core.classifier import DEFAULT_REGISTRY, classify
from mediaindex.core.gallery import ERROR_SENTINEL, GalleryAssembler, GallerySetupError
from mediaindex.core.name_parser import parse_dimensions, parse_name
from mediaindex.core.renderer import render_media_item
from mediaindex.core.scanner import scan

__all__ = [
    "DEFAULT_REGISTRY",
    "ERROR_SENTINEL",
    "GalleryAssembler",
    "GallerySetupError",
    "classify",
    "parse_dimensions",
    "parse_name",
    "render_media_item",
    "scan",
]
