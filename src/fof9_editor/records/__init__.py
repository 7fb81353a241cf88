"""Typed league records and the flat-row schema mapper."""

from __future__ import annotations

from fof9_editor.records.mapper import (
    DecodeError,
    EncodeError,
    FieldKind,
    FieldSpec,
    RecordError,
    decode,
    decode_all,
    encode,
    encode_all,
    field_specs,
    header_list,
)
from fof9_editor.records.reference import Position, ReferenceData, default_positions
from fof9_editor.records.schema import Coach, LeagueInfo, Player, Team, new_default_league_info

__all__ = [
    "Coach",
    "DecodeError",
    "EncodeError",
    "FieldKind",
    "FieldSpec",
    "LeagueInfo",
    "Player",
    "Position",
    "RecordError",
    "ReferenceData",
    "Team",
    "decode",
    "decode_all",
    "default_positions",
    "encode",
    "encode_all",
    "field_specs",
    "header_list",
    "new_default_league_info",
]
