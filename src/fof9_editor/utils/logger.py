"""Logging setup for the editor core and CLI.

Every module logs through ``logging.getLogger(__name__)``, so all records
land under the ``fof9_editor`` logger.  `configure_logging` installs a
single handler on that logger and stops propagation, leaving the host
application's root logger alone.

Verbosity names accepted by `configure_logging` and ``--log-level``:

    ========  ============  =====
    Name      Python level  Value
    ========  ============  =====
    QUIET     WARNING        30
    NORMAL    INFO           20
    VERBOSE   VERBOSE        15
    DEBUG     DEBUG          10
    ========  ============  =====

VERBOSE sits between INFO and DEBUG and carries one line per file read or
written (``read 1696 records from data/players.csv``).

The name may also come from the ``FOF9_EDITOR_LOG_LEVEL`` environment
variable; an explicit argument wins over the variable, which wins over
``NORMAL``.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

VERBOSE: int = 15
"""Per-file read/write detail, between INFO and DEBUG."""

logging.addLevelName(VERBOSE, "VERBOSE")

QUIET: int = logging.WARNING
NORMAL: int = logging.INFO
DEBUG: int = logging.DEBUG

_LEVELS: dict[str, int] = {
    "QUIET": QUIET,
    "NORMAL": NORMAL,
    "VERBOSE": VERBOSE,
    "DEBUG": DEBUG,
}

PACKAGE_LOGGER: str = "fof9_editor"
ENV_VAR: str = "FOF9_EDITOR_LOG_LEVEL"

_CONSOLE_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"


def level_names() -> list[str]:
    """Accepted verbosity names, quietest first."""
    return sorted(_LEVELS, key=_LEVELS.__getitem__, reverse=True)


def resolve_level(level: str | None = None) -> int:
    """Turn a verbosity name (or the environment default) into a log level.

    Raises:
        ValueError: If the name is not one of `level_names`.
    """
    name = level if level is not None else os.environ.get(ENV_VAR, "NORMAL")
    try:
        return _LEVELS[name.strip().upper()]
    except KeyError:
        msg = f"Unknown log level {name!r}. Valid levels: {', '.join(level_names())}"
        raise ValueError(msg) from None


def configure_logging(level: str | None = None, *, log_file: Path | None = None) -> None:
    """Install the editor's log handler, replacing any previous one.

    Args:
        level: Verbosity name (case-insensitive). ``None`` falls back to
            ``FOF9_EDITOR_LOG_LEVEL`` and then to ``NORMAL``.
        log_file: Append to this file instead of writing to stderr.  Useful
            when the editor runs without a terminal.

    Raises:
        ValueError: If the level name is not recognised.
    """
    numeric = resolve_level(level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in package_logger.handlers[:]:
        package_logger.removeHandler(old)
        old.close()

    handler: logging.Handler
    if log_file is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    handler.setLevel(numeric)

    package_logger.setLevel(numeric)
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return ``fof9_editor.<name>``, e.g. ``get_logger("state")``."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
