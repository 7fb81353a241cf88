"""Shared application state for the editor."""

from __future__ import annotations

from fof9_editor.state.app_state import (
    SECTION_COACHES,
    SECTION_LEAGUE,
    SECTION_PLAYERS,
    SECTION_TEAMS,
    AppState,
    StateError,
)

__all__ = [
    "SECTION_COACHES",
    "SECTION_LEAGUE",
    "SECTION_PLAYERS",
    "SECTION_TEAMS",
    "AppState",
    "StateError",
]
