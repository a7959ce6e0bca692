"""Tests for the host shortcode entry point."""

from pathlib import Path

import pytest

from mediaindex.core.gallery import ERROR_SENTINEL
from mediaindex.settings import GalleryConfig
from mediaindex.shortcode import MISSING_DIRECTORY_COMMENT, SHORTCODE_TAG, media_index


@pytest.fixture
def site(tmp_path: Path) -> Path:
    media = tmp_path / "media"
    media.mkdir()
    (media / "sunset-1920x1080.jpg").write_bytes(b"\0" * 2048)
    return tmp_path


def test_tag() -> None:
    assert SHORTCODE_TAG == "media-index"


@pytest.mark.parametrize("args", ["", None, ["dir"]])
def test_non_mapping_arguments(args) -> None:
    assert media_index(args) == MISSING_DIRECTORY_COMMENT


def test_with_explicit_config(site: Path) -> None:
    config = GalleryConfig(site_path=site, content_path=site)
    html = media_index({"dir": "/media"}, config=config)
    assert "SUNSET" in html
    assert "<!DOCTYPE" not in html


def test_config_from_host_environment(site: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SITE_PATH", str(site))
    monkeypatch.setenv("SITE_CDN_PATH", str(site))
    monkeypatch.setenv("SITE_IMAGE_CLASS", "photo")
    html = media_index({"dir": "/media"})
    assert 'class="photo"' in html
    assert 'src="/media/sunset-1920x1080.jpg"' in html


def test_no_root_returns_sentinel(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    assert media_index({"dir": "/media"}) == ERROR_SENTINEL


@pytest.mark.parametrize("name, value", [("SITE_IMAGE_WIDTH", "0"), ("SITE_IMAGE_HEIGHT", "-5")])
def test_invalid_host_dimensions_return_sentinel(
    site: Path, monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv("SITE_PATH", str(site))
    monkeypatch.setenv(name, value)
    assert media_index({"dir": "/media"}) == ERROR_SENTINEL
