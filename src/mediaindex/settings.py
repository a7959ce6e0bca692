"""Gallery configuration and the host settings it is built from.

The host environment provides a handful of constants that shape the gallery:

- SITE_PATH: root of the site, stripped from file paths to build source URLs.
- DOCUMENT_ROOT: web server document root, used when SITE_PATH is unset.
- SITE_CDN_PATH: content root that embedded galleries are resolved against.
- SITE_IMAGE_WIDTH / SITE_IMAGE_HEIGHT: dimensions used for files whose
  names carry no dimension token.
- SITE_IMAGE_CLASS: CSS class applied to every image.

They are read once, into :class:`HostSettings`, and merged into an explicit
:class:`GalleryConfig` that is handed to the assembler at construction time.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class HostSettings(BaseSettings):
    """Host-provided constants, loaded from environment variables or .env."""

    SITE_PATH: Optional[Path] = None
    DOCUMENT_ROOT: Optional[Path] = None
    SITE_CDN_PATH: Optional[Path] = None
    SITE_IMAGE_WIDTH: Optional[PositiveInt] = None
    SITE_IMAGE_HEIGHT: Optional[PositiveInt] = None
    SITE_IMAGE_CLASS: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class GalleryConfig(BaseModel):
    """Explicit configuration of a gallery assembler."""

    model_config = ConfigDict(frozen=True)

    site_path: Optional[Path] = None
    """Root stripped from file paths to produce source URLs."""

    content_path: Optional[Path] = None
    """Root that embedded (``dir``) galleries are resolved against."""

    self_path: Path = Field(default_factory=Path.cwd)
    """Directory scanned in self mode."""

    max_items: NonNegativeInt = 12
    default_width: PositiveInt = 800
    default_height: PositiveInt = 600

    image_width: Optional[PositiveInt] = None
    """Width override for items without a dimension token."""

    image_height: Optional[PositiveInt] = None
    """Height override for items without a dimension token."""

    image_class: Optional[str] = None
    missing_text: str = ""
    page_title: str = "Media Index"
    stylesheet: str = "/0/theme/css/style.css"
    lang: str = "en-CA"


def merge_config(host: Optional[HostSettings] = None, **overrides: Any) -> GalleryConfig:
    """Merge defaults, host settings and explicit overrides into a config.

    Precedence is overrides > host settings > defaults. ``None`` values never
    override anything, so callers can forward optional CLI values as-is.

    Args:
        host: Host settings, or None to use the defaults only.
        **overrides: GalleryConfig field values.

    Returns:
        The merged configuration.
    """
    values: dict[str, Any] = {}
    if host is not None:
        from_host = {
            "site_path": host.SITE_PATH or host.DOCUMENT_ROOT,
            "content_path": host.SITE_CDN_PATH,
            "image_width": host.SITE_IMAGE_WIDTH,
            "image_height": host.SITE_IMAGE_HEIGHT,
            "image_class": host.SITE_IMAGE_CLASS,
        }
        values.update({k: v for k, v in from_host.items() if v is not None})
    values.update({k: v for k, v in overrides.items() if v is not None})
    return GalleryConfig(**values)
