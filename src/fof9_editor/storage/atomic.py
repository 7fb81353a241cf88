"""Crash-safe whole-file replacement.

Data is written to a ``<name>.tmp`` sibling, flushed and fsynced, then
renamed over the destination with `os.replace`.  Readers therefore see
either the old file or the complete new one.  The temporary file never
survives a call, whether it succeeds or fails.
"""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from fof9_editor.storage.errors import AtomicWriteError
from fof9_editor.utils.logger import VERBOSE

logger = logging.getLogger(__name__)


def temp_path_for(path: Path) -> Path:
    """Return the temporary sibling used while writing *path*."""
    return path.with_name(path.name + ".tmp")


def _discard(tmp_path: Path) -> None:
    with contextlib.suppress(OSError):
        tmp_path.unlink(missing_ok=True)


def atomic_write_bytes(path: Path, payload: bytes) -> None:
    """Atomically replace *path* with *payload*.

    Missing parent directories are created.

    Raises:
        AtomicWriteError: Any filesystem step failed.  The destination is
            left untouched and the temporary file has been removed.
    """
    tmp_path = temp_path_for(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp_path.open("wb") as fh:
            fh.write(payload)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_path, path)
    except OSError as exc:
        _discard(tmp_path)
        logger.warning("atomic write of %s failed: %s", path, exc)
        raise AtomicWriteError(path, f"write failed: {exc}") from exc
    except BaseException:
        _discard(tmp_path)
        raise
    logger.log(VERBOSE, "wrote %d bytes to %s", len(payload), path)


def atomic_write_text(path: Path, text: str, encoding: str = "utf-8") -> None:
    """Encode *text* and hand it to `atomic_write_bytes`."""
    atomic_write_bytes(path, text.encode(encoding))
