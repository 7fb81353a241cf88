"""FOF9 league file editor core: record mapping, CSV storage, validation and projects."""

from __future__ import annotations

from fof9_editor.version import get_version

__version__ = get_version()

__all__ = ["__version__"]
