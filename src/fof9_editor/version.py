"""Version information for the editor."""

from __future__ import annotations

import platform
import subprocess
import sys
from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "fof9-editor"


def get_version() -> str:
    """Return the installed package version, or ``"dev"`` from a source tree."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "dev"


def get_commit_hash() -> str:
    """Return the short git hash of HEAD, or ``"unknown"`` on failure."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip() or "unknown"
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown"


def get_short_version() -> str:
    """Return the version for window titles; dev builds carry the commit hash."""
    current = get_version()
    if current == "dev":
        commit = get_commit_hash()
        if commit != "unknown":
            return f"{current} ({commit[:7]})"
    return current


def get_version_info() -> str:
    """Return the multi-line version report printed by ``--version``."""
    return (
        f"FOF9 Editor v{get_version()}\n"
        f"Commit: {get_commit_hash()}\n"
        f"Python: {sys.version.split()[0]} {platform.system().lower()}/{platform.machine()}"
    )
