"""Shared utilities module."""

from __future__ import annotations

from fof9_editor.utils.logger import (
    DEBUG,
    NORMAL,
    QUIET,
    VERBOSE,
    configure_logging,
    get_logger,
    level_names,
    resolve_level,
)

__all__ = [
    "DEBUG",
    "NORMAL",
    "QUIET",
    "VERBOSE",
    "configure_logging",
    "get_logger",
    "level_names",
    "resolve_level",
]
