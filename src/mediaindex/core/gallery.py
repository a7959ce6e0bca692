"""Gallery assembly.

This module ties the pieces together for one render pass:

1. ``build_request`` applies the directory switch: with no ``dir`` the
   gallery scans its own directory and is wrapped in page chrome; with a
   ``dir`` it scans that directory under the content root and returns a bare
   fragment.
2. ``collect`` walks the registry in declaration order, scans each subtype
   and derives the name, dimensions and classification of every file.
3. ``assemble`` renders each item and concatenates the fragments inside an
   ``<article>`` container.

A setup failure is not raised to the host: ``render`` returns the
``ERROR_SENTINEL`` string instead, so a broken shortcode never breaks the
surrounding page.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from markupsafe import Markup

from mediaindex.core.classifier import DEFAULT_REGISTRY, gallery_css_class
from mediaindex.core.name_parser import parse_name
from mediaindex.core.renderer import render_media_item
from mediaindex.core.resolve import resolve_dimensions
from mediaindex.core.scanner import scan
from mediaindex.models.core import (
    Classification,
    FileEntry,
    GalleryScan,
    MediaItem,
    RenderRequest,
)
from mediaindex.settings import GalleryConfig
from mediaindex.templates import render_template

logger = logging.getLogger(__name__)

ERROR_SENTINEL = "Error."
DEFAULT_MEDIA_DIR = "/media"


class GallerySetupError(Exception):
    """Raised when the directory switch of a request cannot be established."""


class GalleryAssembler:
    """Render galleries for one configuration and registry."""

    def __init__(
        self,
        config: GalleryConfig,
        registry: Mapping[str, Classification] = DEFAULT_REGISTRY,
    ) -> None:
        self.config = config
        self.registry = registry

    def build_request(self, options: Optional[Mapping[str, Any]] = None) -> RenderRequest:
        """Build the request for *options* (``dir``, ``max``, ``self``).

        Raises:
            GallerySetupError: If ``max`` is not an integer, no root is
                configured for a ``dir`` gallery, or ``dir`` escapes the root.
        """
        options = options or {}
        directory = options.get("dir") or None
        self_mode = directory is None or bool(options.get("self"))

        raw_max = options.get("max")
        try:
            max_items = self.config.max_items if raw_max is None else int(raw_max)
        except (TypeError, ValueError) as e:
            raise GallerySetupError(f"Invalid max: {raw_max!r}") from e

        if self_mode:
            base_path = self.config.self_path
        else:
            root = self.config.content_path or self.config.site_path
            if root is None:
                raise GallerySetupError(
                    f"No content root configured for directory {directory!r}"
                )
            base_path = root / str(directory).strip("/")
            if not base_path.resolve().is_relative_to(root.resolve()):
                raise GallerySetupError(
                    f"Directory {directory!r} is outside the content root"
                )

        return RenderRequest(
            base_path=base_path,
            directory=directory or DEFAULT_MEDIA_DIR,
            max_items=max_items,
            wrap_in_page=directory is None,
            self_mode=self_mode,
        )

    def _make_item(
        self, subtype: str, path: Path, url_root: Optional[Path]
    ) -> MediaItem:
        entry = FileEntry.from_path(path, url_root)
        parsed = parse_name(entry.source_path)
        return MediaItem(
            subtype=subtype,
            entry=entry,
            parsed=parsed,
            dimensions=resolve_dimensions(parsed.raw_dimension_token, self.config),
            classification=self.registry[subtype],
        )

    def collect(self, request: RenderRequest) -> GalleryScan:
        """Discover and classify the items of a gallery without rendering."""
        result = GalleryScan(request=request)
        url_root = self.config.site_path
        if url_root is None and request.self_mode:
            # A standalone index links to files beside it.
            url_root = request.base_path.absolute()
        for subtype, classification in self.registry.items():
            for path in scan(request.base_path, subtype, request.max_items):
                result.items.append(self._make_item(subtype, path, url_root))
                result.by_media_type[classification.type] = (
                    result.by_media_type.get(classification.type, 0) + 1
                )
        logger.debug(
            "Collected %d items from %s", len(result.items), request.base_path
        )
        return result

    def assemble(self, request: RenderRequest) -> str:
        """Render the gallery markup for *request*."""
        gallery = self.collect(request)
        fragments = []
        for item in gallery.items:
            try:
                fragments.append(
                    render_media_item(
                        item.entry,
                        item.parsed,
                        item.dimensions,
                        item.classification,
                        config=self.config,
                    )
                )
            except OSError as e:
                # Skip the file, keep the rest of the gallery.
                logger.warning("Skipping %s: %s", item.entry.absolute_path, e)
                gallery.errors.append(f"Error accessing {item.entry.absolute_path}: {e}")

        css_class = gallery_css_class(self.registry)
        html = f'<article class="{css_class}">\n' + "".join(fragments) + "</article>\n"
        if request.wrap_in_page:
            html = self.render_page(html, css_class)
        return html

    def render(self, options: Optional[Mapping[str, Any]] = None) -> str:
        """Build the request for *options* and render it.

        Returns:
            The gallery markup, or ``ERROR_SENTINEL`` if setup failed.
        """
        try:
            request = self.build_request(options)
        except GallerySetupError as e:
            logger.error("Gallery setup failed: %s", e)
            return ERROR_SENTINEL
        return self.assemble(request)

    def render_page(self, body: str, page_class: str = "media") -> str:
        """Wrap *body* in full page chrome."""
        return render_template(
            "page.html.j2",
            body=Markup(body),
            page_class=page_class,
            lang=self.config.lang,
            title=self.config.page_title,
            stylesheet=self.config.stylesheet,
        )
