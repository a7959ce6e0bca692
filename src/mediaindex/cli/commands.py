"""CLI commands for mediaindex.

This module implements all user-facing CLI commands for mediaindex: index,
render, scan, parse, config and version.
- Uses Typer for declarative CLI structure and option parsing.
- Status output is routed through Rich Console; generated HTML is written to
  stdout or to the --output file untouched.

Design:
- Annotated is used for CLI argument/option definitions to provide type safety
  and rich help text.
- Every command builds an explicit GalleryConfig (host settings, config.toml,
  CLI options) before creating the assembler; the assembler never reads the
  environment itself.
- Exit codes are defined as an Enum for clarity and maintainability.
"""

import json
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, List, Optional

import typer
from pydantic import ValidationError

from mediaindex.cli.console import ConsoleManager
from mediaindex.cli.renderer import render_gallery_table, render_parse_table
from mediaindex.core.gallery import ERROR_SENTINEL, GalleryAssembler
from mediaindex.settings import GalleryConfig, HostSettings, merge_config
from mediaindex.utils import config as cfg
from mediaindex.utils.debug import setup_logger

app = typer.Typer(
    name="mediaindex",
    help="Render a directory of images, audio and video as an HTML gallery.",
    add_completion=True,
)
config_app = typer.Typer(help="Inspect or change persistent settings.")
app.add_typer(config_app, name="config")


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1


GALLERY_PATH = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
        resolve_path=True,
        help="Directory to render (defaults to the current directory)",
    ),
]

MAX_ITEMS = Annotated[
    Optional[int],
    typer.Option(
        "--max",
        "-m",
        min=0,
        help="Maximum number of items per file type",
    ),
]

SITE_ROOT = Annotated[
    Optional[Path],
    typer.Option(
        "--site-root",
        file_okay=False,
        resolve_path=True,
        help="Site root stripped from file paths to build URLs "
        "(defaults to SITE_PATH or DOCUMENT_ROOT)",
    ),
]

CONTENT_ROOT = Annotated[
    Optional[Path],
    typer.Option(
        "--content-root",
        file_okay=False,
        resolve_path=True,
        help="Root that --dir is resolved against (defaults to SITE_CDN_PATH)",
    ),
]

OUTPUT = Annotated[
    Optional[Path],
    typer.Option(
        "--output",
        "-o",
        dir_okay=False,
        help="Write the HTML to this file instead of stdout",
    ),
]


@app.callback()
def callback(
    no_rich: bool = typer.Option(
        False,
        "--no-rich",
        help=(
            "Disable Rich coloured output. "
            "Can also be set with the MEDIAINDEX_NO_RICH environment variable."
        ),
    ),
) -> None:
    """Top-level CLI callback adding global options."""
    if no_rich:
        import os

        os.environ["MEDIAINDEX_NO_RICH"] = "1"
    setup_logger()


def build_config(
    *,
    self_path: Optional[Path] = None,
    site_root: Optional[Path] = None,
    content_root: Optional[Path] = None,
    max_items: Optional[int] = None,
) -> GalleryConfig:
    """Merge host settings, persistent settings and CLI options.

    Raises:
        typer.Exit: If a host or persistent setting is out of range.
    """
    defaults = GalleryConfig()
    try:
        return merge_config(
            HostSettings(),
            self_path=self_path,
            site_path=site_root,
            content_path=content_root,
            max_items=cfg.resolve_setting(
                "gallery.max_items", default=defaults.max_items, cli_value=max_items
            ),
            page_title=cfg.resolve_setting(
                "gallery.page_title", default=defaults.page_title
            ),
            stylesheet=cfg.resolve_setting(
                "gallery.stylesheet", default=defaults.stylesheet
            ),
        )
    except ValidationError as e:
        with ConsoleManager(stderr=True) as console:
            console.print(f"[red]Error: Invalid settings: {e}[/red]")
        raise typer.Exit(ExitCode.ERROR)


def _emit(html: str, output: Optional[Path]) -> None:
    """Write *html* to *output*, or to stdout when no file is given."""
    if html == ERROR_SENTINEL:
        with ConsoleManager(stderr=True) as console:
            console.print("[red]Error: The gallery could not be set up.[/red]")
        raise typer.Exit(ExitCode.ERROR)
    if output is None:
        sys.stdout.write(html)
        return
    try:
        output.write_text(html, encoding="utf-8")
    except OSError as e:
        with ConsoleManager(stderr=True) as console:
            console.print(f"[red]Error: Cannot write {output}: {e}[/red]")
        raise typer.Exit(ExitCode.ERROR)
    with ConsoleManager(stderr=True) as console:
        console.print(f"Wrote [bold]{output}[/bold]")


@app.command()
def index(
    path: GALLERY_PATH = Path("."),
    max_items: MAX_ITEMS = None,
    site_root: SITE_ROOT = None,
    output: OUTPUT = None,
) -> None:
    """Render a directory as a standalone HTML index page."""
    config = build_config(self_path=path, site_root=site_root, max_items=max_items)
    _emit(GalleryAssembler(config).render(), output)


@app.command()
def render(
    directory: Annotated[
        str,
        typer.Option(
            "--dir",
            "-d",
            help="Media directory relative to the content root, e.g. /media",
        ),
    ],
    max_items: MAX_ITEMS = None,
    use_self: Annotated[
        bool,
        typer.Option(
            "--self",
            help="Scan the current directory instead of the content root",
        ),
    ] = False,
    content_root: CONTENT_ROOT = None,
    site_root: SITE_ROOT = None,
    output: OUTPUT = None,
) -> None:
    """Render an embeddable gallery fragment (no page chrome)."""
    config = build_config(
        site_root=site_root, content_root=content_root, max_items=max_items
    )
    options: dict[str, Any] = {"dir": directory}
    if use_self:
        options["self"] = True
    _emit(GalleryAssembler(config).render(options), output)


@app.command()
def scan(
    path: GALLERY_PATH = Path("."),
    max_items: MAX_ITEMS = None,
    site_root: SITE_ROOT = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output results in JSON format"),
    ] = False,
) -> None:
    """List the files a gallery of PATH would contain."""
    config = build_config(self_path=path, site_root=site_root, max_items=max_items)
    assembler = GalleryAssembler(config)
    gallery = assembler.collect(assembler.build_request())
    if json_output:
        sys.stdout.write(gallery.model_dump_json(indent=2) + "\n")
        return
    with ConsoleManager() as console:
        if not gallery.items:
            console.print("[yellow]No media files found.[/yellow]")
            return
        render_gallery_table(gallery, console=console)


@app.command()
def parse(
    names: Annotated[
        List[str],
        typer.Argument(help="File names or paths to parse"),
    ],
) -> None:
    """Show the name and dimensions recovered from each file name."""
    with ConsoleManager() as console:
        render_parse_table(names, console=console)


@config_app.command("show")
def config_show() -> None:
    """Print the persistent settings."""
    with ConsoleManager() as console:
        console.print(f"Config file: [bold]{cfg.CONFIG_FILE}[/bold]")
        console.print_json(json.dumps(cfg.read_settings()))


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Dotted key, e.g. gallery.max_items")],
    value: Annotated[str, typer.Argument(help="Value to store")],
) -> None:
    """Store a persistent setting in config.toml."""
    stored: Any = int(value) if value.isdigit() else value
    cfg.set_setting(key, stored)
    with ConsoleManager() as console:
        console.print(f"Set [bold]{key}[/bold] = {stored!r}")


@app.command()
def version() -> None:
    """Show the version of mediaindex."""
    from mediaindex.__about__ import __version__

    with ConsoleManager() as console:
        console.print(f"mediaindex version: [bold]{__version__}[/bold]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
