"""Configure pytest.

Puts ``src/`` on the import path and isolates every test from the host
settings and persistent config of the machine running the suite.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = str(Path(__file__).parent / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

HOST_ENV_VARS = (
    "SITE_PATH",
    "DOCUMENT_ROOT",
    "SITE_CDN_PATH",
    "SITE_IMAGE_WIDTH",
    "SITE_IMAGE_HEIGHT",
    "SITE_IMAGE_CLASS",
    "MEDIAINDEX_GALLERY_MAX_ITEMS",
    "MEDIAINDEX_GALLERY_PAGE_TITLE",
    "MEDIAINDEX_GALLERY_STYLESHEET",
    "MEDIAINDEX_NO_RICH",
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear host settings and point the config file at a temp directory."""
    for name in HOST_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    from mediaindex.utils import config as cfg

    config_dir = tmp_path / "xdg-config" / "mediaindex"
    monkeypatch.setattr(cfg, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(cfg, "CONFIG_FILE", config_dir / "config.toml")
