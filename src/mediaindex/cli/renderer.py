"""Renderer for CLI output.

This module renders gallery scans and name-parse results as Rich tables.
"""

from typing import Iterable

from rich.console import Console
from rich.table import Table

from mediaindex.core.name_parser import parse_dimensions, parse_name
from mediaindex.models.core import GalleryScan, MediaType

# Reason: one colour per media type keeps mixed galleries readable.
TYPE_STYLES = {
    MediaType.IMAGE: "green",
    MediaType.VIDEO: "magenta",
    MediaType.AUDIO: "cyan",
}


def render_gallery_table(gallery: GalleryScan, console: Console | None = None) -> None:
    """Render the items of a gallery scan as a table.

    Args:
        gallery: The collected gallery.
        console: Optional Console instance to use for rendering.
    """
    console = console or Console()

    table = Table(title=f"Gallery: {gallery.request.base_path}")
    table.add_column("Type", style="bold")
    table.add_column("Source", style="cyan")
    table.add_column("Name")
    table.add_column("Dimensions", justify="right")

    for item in gallery.items:
        table.add_row(
            item.classification.type.value,
            item.entry.source_path,
            item.parsed.display_name or "",
            str(item.dimensions),
            style=TYPE_STYLES.get(item.classification.type, "white"),
        )

    console.print(table)

    counts = " | ".join(
        f"{media_type.value}: {count}"
        for media_type, count in gallery.by_media_type.items()
    )
    console.print(f"Total: {len(gallery.items)}" + (f" | {counts}" if counts else ""))

    for message in gallery.errors:
        console.print(message, style="red")


def render_parse_table(names: Iterable[str], console: Console | None = None) -> None:
    """Render how each file name in *names* parses."""
    console = console or Console()

    table = Table(title="Parsed names")
    table.add_column("Input", style="cyan")
    table.add_column("Name")
    table.add_column("Token")
    table.add_column("Dimensions", justify="right")

    for name in names:
        parsed = parse_name(name)
        dimensions = parse_dimensions(parsed.raw_dimension_token)
        table.add_row(
            name,
            parsed.display_name or "-",
            parsed.raw_dimension_token or "-",
            str(dimensions) if dimensions else "default",
            style=None if parsed.matched else "yellow",
        )

    console.print(table)
