"""Project descriptor model and codec."""

from __future__ import annotations

from fof9_editor.project.codec import (
    ProjectError,
    ProjectFormatError,
    ProjectIncompleteError,
    ProjectLoadError,
    ProjectSaveError,
    load_project,
    save_project,
)
from fof9_editor.project.descriptor import (
    PROJECT_FILE_SUFFIX,
    PROJECT_FORMAT_VERSION,
    Project,
    new_project,
)

__all__ = [
    "PROJECT_FILE_SUFFIX",
    "PROJECT_FORMAT_VERSION",
    "Project",
    "ProjectError",
    "ProjectFormatError",
    "ProjectIncompleteError",
    "ProjectLoadError",
    "ProjectSaveError",
    "load_project",
    "new_project",
    "save_project",
]
