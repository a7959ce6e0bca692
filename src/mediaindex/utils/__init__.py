"""Utility modules for mediaindex."""

from mediaindex.utils.config import read_settings, resolve_setting, set_setting
from mediaindex.utils.debug import setup_logger

__all__ = [
    "read_settings",
    "resolve_setting",
    "set_setting",
    "setup_logger",
]
