"""Config utility for persistent mediaindex settings.

Provides functions to resolve and write settings stored in
~/.config/mediaindex/config.toml. Uses tomli/tomli-w for TOML parsing and writing.
"""

from pathlib import Path
from typing import TypeVar, Any, cast
import os
import contextlib

import tomli
import tomli_w

# Determine config directory respecting XDG_CONFIG_HOME if set.
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
# Path like ~/.config/mediaindex or $XDG_CONFIG_HOME/mediaindex
CONFIG_DIR = _xdg_config_home / "mediaindex"
CONFIG_FILE = CONFIG_DIR / "config.toml"

_TRUTHY = {"1", "true", "yes", "on"}

T = TypeVar("T")


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""

    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve a nested value from *data* given a dotted key path.

    Example: dotted_key="gallery.max_items" will attempt
    ``data["gallery"]["max_items"]`` returning None if any level is missing.
    """

    keys = dotted_key.split(".")
    current: Any = data
    for part in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = "MEDIAINDEX_") -> str:
    """Convert a dotted key path to an uppercase ENV var name.

    Example: "gallery.max_items" -> "MEDIAINDEX_GALLERY_MAX_ITEMS".
    """

    return prefix + dotted_key.replace(".", "_").upper()


def _coerce(raw: Any, default: T) -> T:
    """Coerce *raw* to the type of *default*, returning *default* on failure."""

    if isinstance(default, bool):
        if isinstance(raw, bool):
            return cast(T, raw)
        if isinstance(raw, str):
            return cast(T, raw.lower() in _TRUTHY)
        return default
    if isinstance(default, int):
        if isinstance(raw, int) and not isinstance(raw, bool):
            return cast(T, raw)
        if isinstance(raw, str):
            with contextlib.suppress(ValueError):
                return cast(T, int(raw))
        return default
    if isinstance(default, float):
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return cast(T, float(raw))
        if isinstance(raw, str):
            with contextlib.suppress(ValueError):
                return cast(T, float(raw))
        return default
    if default is None and isinstance(raw, str):
        # Type unknown: try int, then float, then keep the string.
        if raw.isdigit():
            return cast(T, int(raw))
        with contextlib.suppress(ValueError):
            return cast(T, float(raw))
    return cast(T, raw)


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: T | None = None,
) -> T:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"gallery.max_items"`` or ``"foo"``.
        default: Value to fall back to when no overrides found.
        cli_value: Value passed from CLI option (may be ``None`` when not provided).

    Returns:
        The resolved value with type matching *default* (or *cli_value*).
    """

    # 1. CLI value wins if provided (and not ``None`` to mimic Typer semantics).
    if cli_value is not None:
        return cli_value

    # 2. Environment variable
    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return _coerce(os.environ[env_var], default)

    # 3. Config file lookup
    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return _coerce(file_val, default)

    # 4. Default
    return default


def set_setting(key: str, value: Any) -> None:
    """Write a dotted *key* to config.toml, creating tables as needed.

    Args:
        key: Dotted key path, e.g. ``"gallery.page_title"``.
        value: TOML-serialisable value to store.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    data = _read_config_file()
    *tables, leaf = key.split(".")
    current = data
    for table in tables:
        if not isinstance(current.get(table), dict):
            current[table] = {}
        current = current[table]
    current[leaf] = value
    with CONFIG_FILE.open("wb") as f:
        tomli_w.dump(data, f)


def read_settings() -> dict[str, Any]:
    """Return the full contents of config.toml (empty when missing)."""
    return _read_config_file()
