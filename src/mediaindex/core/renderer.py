"""Markup for a single media item.

Each media type has its own render function; ``render_media_item`` picks one
from the classification. An absent classification or a type without a render
function falls back to image markup.
"""

import logging
from typing import Callable, Dict, Optional

from mediaindex.core.name_parser import display_name
from mediaindex.core.resolve import resolve_first, resolve_image_class
from mediaindex.models.core import (
    Classification,
    Dimensions,
    FileEntry,
    MediaType,
    ParsedName,
)
from mediaindex.settings import GalleryConfig
from mediaindex.templates import render_template

logger = logging.getLogger(__name__)


def get_media_size(entry: FileEntry) -> str:
    """Return the human-readable size of the file, e.g. ``204.8 kB``.

    Raises:
        OSError: If the file cannot be stat'ed.
    """
    size = entry.absolute_path.stat().st_size
    return f"{size / 1000:,.1f} kB"


def get_image_alt(entry: FileEntry, config: GalleryConfig) -> str:
    """Alt text: the last segment of the source path."""
    last_segment = entry.source_path.rstrip("/").rsplit("/", 1)[-1]
    return resolve_first(last_segment, default=config.missing_text)


def render_image(
    entry: FileEntry,
    parsed: ParsedName,
    dimensions: Dimensions,
    config: GalleryConfig,
) -> str:
    return render_template(
        "image.html.j2",
        src=entry.source_path,
        css_class=resolve_image_class(config),
        alt=get_image_alt(entry, config),
        width=dimensions.width,
        height=dimensions.height,
        name=display_name(parsed.display_name, config.missing_text),
        size=get_media_size(entry),
    )


def render_audio(
    entry: FileEntry,
    parsed: ParsedName,
    dimensions: Dimensions,
    config: GalleryConfig,
) -> str:
    return render_template(
        "audio.html.j2",
        src=entry.source_path,
        name=display_name(parsed.display_name, config.missing_text),
        size=get_media_size(entry),
    )


def render_video(
    entry: FileEntry,
    parsed: ParsedName,
    dimensions: Dimensions,
    config: GalleryConfig,
) -> str:
    return render_template(
        "video.html.j2",
        src=entry.source_path,
        width=dimensions.width,
        height=dimensions.height,
        name=display_name(parsed.display_name, config.missing_text),
        size=get_media_size(entry),
    )


RenderFunc = Callable[[FileEntry, ParsedName, Dimensions, GalleryConfig], str]

RENDERERS: Dict[MediaType, RenderFunc] = {
    MediaType.IMAGE: render_image,
    MediaType.AUDIO: render_audio,
    MediaType.VIDEO: render_video,
}


def render_media_item(
    entry: FileEntry,
    parsed: ParsedName,
    dimensions: Dimensions,
    classification: Optional[Classification],
    *,
    config: GalleryConfig,
) -> str:
    """Render the markup fragment of one media item.

    Args:
        entry: The discovered file.
        parsed: Name metadata recovered from the source path.
        dimensions: Resolved dimensions of the item.
        classification: Type of the item's extension.
        config: Gallery configuration.

    Returns:
        The HTML fragment.

    Raises:
        OSError: If the file size cannot be read.
    """
    if classification is None or classification.type not in RENDERERS:
        logger.debug("No renderer for %s, rendering as image", entry.source_path)
        render = render_image
    else:
        render = RENDERERS[classification.type]
    return render(entry, parsed, dimensions, config)
