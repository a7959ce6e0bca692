"""Host entry point for embedding a gallery in a page.

A host that supports shortcodes registers :func:`media_index` under
``SHORTCODE_TAG`` (``[media-index dir="/media/cabin"]``) and splices the
returned markup into its page.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError

from mediaindex.core.gallery import ERROR_SENTINEL, GalleryAssembler
from mediaindex.settings import GalleryConfig, HostSettings, merge_config

logger = logging.getLogger(__name__)

SHORTCODE_TAG = "media-index"

MISSING_DIRECTORY_COMMENT = (
    '<!-- Missing the image directory to process. [media-index dir=""]-->'
)


def media_index(args: Any, config: Optional[GalleryConfig] = None) -> str:
    """Render the gallery described by the shortcode attributes *args*.

    Args:
        args: Shortcode attributes (``dir``, ``max``, ``self``).
        config: Gallery configuration; built from the host environment when
            omitted.

    Returns:
        The gallery markup, an HTML comment when *args* is not a mapping, or
        ``ERROR_SENTINEL`` when the host settings are invalid.
    """
    if not isinstance(args, Mapping):
        return MISSING_DIRECTORY_COMMENT
    if config is None:
        try:
            config = merge_config(HostSettings())
        except ValidationError as e:
            logger.error("Invalid host settings: %s", e)
            return ERROR_SENTINEL
    return GalleryAssembler(config).render(args)
