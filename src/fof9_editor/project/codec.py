"""Saving and loading project descriptors.

The descriptor is written as indented JSON with a stable key order, through
the same temp-file-then-rename path as the CSV files.  Loading separates
two failure modes: a file that is not a valid descriptor document
(`ProjectFormatError`) and a valid document that lacks one of the keys
every project needs (`ProjectIncompleteError`).
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from fof9_editor.project.descriptor import Project
from fof9_editor.storage.atomic import atomic_write_text
from fof9_editor.storage.errors import AtomicWriteError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------


class ProjectError(Exception):
    """Base exception for project descriptor errors."""


class ProjectSaveError(ProjectError):
    """The descriptor could not be written."""


class ProjectLoadError(ProjectError):
    """The descriptor file could not be read (missing, permissions, ...)."""


class ProjectFormatError(ProjectError):
    """The file is not a well-formed descriptor document."""


class ProjectIncompleteError(ProjectError):
    """The document parsed but lacks required keys.

    Attributes:
        missing: JSON keys that were absent or empty.
    """

    def __init__(self, path: Path, missing: list[str]) -> None:
        self.path = path
        self.missing = missing
        super().__init__(f"{path}: project file is incomplete, missing {', '.join(missing)}")


# Python attribute -> JSON key for the fields every project must carry.
_REQUIRED_KEYS: tuple[tuple[str, str], ...] = (
    ("version", "version"),
    ("league_name", "leagueName"),
    ("identifier", "identifier"),
)


def save_project(project: Project | None, path: Path) -> None:
    """Write *project* to *path* as indented JSON.

    Raises:
        ProjectSaveError: *project* is ``None`` or the file could not be
            written.  No partial file or temporary file is left behind.
    """
    if project is None:
        msg = "project is None"
        raise ProjectSaveError(msg)
    text = project.model_dump_json(by_alias=True, indent=2)
    try:
        atomic_write_text(path, text + "\n")
    except AtomicWriteError as exc:
        msg = f"failed to save project: {exc}"
        raise ProjectSaveError(msg) from exc
    logger.info("saved project %r to %s", project.identifier, path)


def load_project(path: Path) -> Project:
    """Read and validate a project descriptor.

    Raises:
        ProjectLoadError: The file cannot be read.
        ProjectFormatError: The content is not valid UTF-8, not valid JSON,
            or has values of the wrong type.
        ProjectIncompleteError: ``version``, ``leagueName`` or
            ``identifier`` is missing or empty.
    """
    try:
        payload = path.read_bytes()
    except OSError as exc:
        msg = f"failed to read project file {path}: {exc}"
        raise ProjectLoadError(msg) from exc

    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        msg = f"{path}: project file is not valid UTF-8: {exc}"
        raise ProjectFormatError(msg) from exc

    try:
        project = Project.model_validate_json(text)
    except ValidationError as exc:
        msg = f"{path}: not a valid project file: {exc}"
        raise ProjectFormatError(msg) from exc

    missing = [key for attr, key in _REQUIRED_KEYS if not getattr(project, attr)]
    if missing:
        logger.warning("project file %s is missing %s", path, ", ".join(missing))
        raise ProjectIncompleteError(path, missing)

    logger.info("loaded project %r (%s) from %s", project.identifier, project.league_name, path)
    return project
