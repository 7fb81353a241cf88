"""Unit tests for the project descriptor model and codec."""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from fof9_editor.project import (
    PROJECT_FORMAT_VERSION,
    Project,
    ProjectError,
    ProjectFormatError,
    ProjectIncompleteError,
    ProjectLoadError,
    ProjectSaveError,
    load_project,
    new_project,
    save_project,
)
from fof9_editor.storage.atomic import temp_path_for

# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


class TestNewProject:
    @pytest.mark.smoke
    def test_defaults(self) -> None:
        project = new_project("My League", "myleague", 2025)
        assert project.version == PROJECT_FORMAT_VERSION
        assert project.league_name == "My League"
        assert project.identifier == "myleague"
        assert project.base_year == 2025
        assert project.data_path == "./data/"
        assert project.reference_path == "./reference/"
        assert project.user_preferences == {}
        assert project.created is not None
        assert project.created == project.last_modified

    def test_manifest(self) -> None:
        project = new_project("My League", "myleague", 2025)
        assert project.csv_files == {
            "info": "data/myleague_info.csv",
            "players": "data/myleague_players.csv",
            "coaches": "data/myleague_coaches.csv",
            "teams": "data/team_info.csv",
            "teamColors": "data/team_colors.csv",
        }

    def test_csv_path(self) -> None:
        project = new_project("L", "abc", 2025)
        assert project.csv_path("players") == "data/abc_players.csv"
        assert project.csv_path("draft") == ""

    def test_resolve_csv(self, tmp_path: Path) -> None:
        project = new_project("L", "abc", 2025)
        assert project.resolve_csv("teams", tmp_path) == tmp_path / "data" / "team_info.csv"
        assert project.resolve_csv("draft", tmp_path) is None

    def test_touch_moves_last_modified_forward(self) -> None:
        project = new_project("L", "abc", 2025)
        project.last_modified = datetime(2000, 1, 1, tzinfo=timezone.utc)
        project.touch()
        assert project.last_modified is not None
        assert project.last_modified.year > 2000


class TestJsonShape:
    def test_keys_are_camel_case(self) -> None:
        data = json.loads(new_project("L", "abc", 2025).model_dump_json(by_alias=True))
        assert list(data) == [
            "version",
            "leagueName",
            "identifier",
            "created",
            "lastModified",
            "baseYear",
            "dataPath",
            "referencePath",
            "csvFiles",
            "userPreferences",
        ]

    def test_null_maps_read_as_empty(self) -> None:
        project = Project.model_validate({"csvFiles": None, "userPreferences": None})
        assert project.csv_files == {}
        assert project.user_preferences == {}


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------


class TestSaveLoad:
    @pytest.mark.smoke
    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "league.fof9proj"
        project = new_project("Round Trip League", "rtl", 2030)
        project.user_preferences = {"theme": "dark", "recent": [1, 2], "zoom": 1.5}
        save_project(project, path)
        loaded = load_project(path)
        assert loaded == project
        assert not temp_path_for(path).exists()

    def test_output_is_indented(self, tmp_path: Path) -> None:
        path = tmp_path / "league.fof9proj"
        save_project(new_project("L", "abc", 2025), path)
        text = path.read_text()
        assert text.startswith("{\n  \"version\": \"1.0\",")
        assert text.endswith("}\n")

    def test_save_none(self, tmp_path: Path) -> None:
        with pytest.raises(ProjectSaveError, match="project is None"):
            save_project(None, tmp_path / "x.fof9proj")

    def test_save_failure_wraps_storage_error(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "league.fof9proj"

        def _fail(src: object, dst: object) -> None:
            raise PermissionError("read-only")

        monkeypatch.setattr(os, "replace", _fail)
        with pytest.raises(ProjectSaveError, match="read-only"):
            save_project(new_project("L", "abc", 2025), path)
        assert not path.exists()
        assert not temp_path_for(path).exists()

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ProjectLoadError):
            load_project(tmp_path / "nope.fof9proj")

    @pytest.mark.parametrize("text", ["", "{not json", "[1, 2]", '{"baseYear": "soon"}', '{"csvFiles": [1]}'])
    def test_load_malformed(self, tmp_path: Path, text: str) -> None:
        path = tmp_path / "bad.fof9proj"
        path.write_text(text)
        with pytest.raises(ProjectFormatError):
            load_project(path)

    def test_load_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.fof9proj"
        path.write_bytes(b'{"version": "1.0", "leagueName": "\xff\xfe", "identifier": "x"}')
        with pytest.raises(ProjectFormatError, match="not valid UTF-8"):
            load_project(path)

    @pytest.mark.parametrize(
        ("document", "missing"),
        [
            ({"leagueName": "L", "identifier": "id"}, ["version"]),
            ({"version": "1.0", "identifier": "id"}, ["leagueName"]),
            ({"version": "1.0", "leagueName": "L", "identifier": ""}, ["identifier"]),
            ({}, ["version", "leagueName", "identifier"]),
        ],
    )
    def test_load_incomplete(self, tmp_path: Path, document: dict[str, str], missing: list[str]) -> None:
        path = tmp_path / "partial.fof9proj"
        path.write_text(json.dumps(document))
        with pytest.raises(ProjectIncompleteError) as exc_info:
            load_project(path)
        assert exc_info.value.missing == missing
        assert "incomplete" in str(exc_info.value)

    def test_incomplete_is_not_a_format_error(self, tmp_path: Path) -> None:
        path = tmp_path / "partial.fof9proj"
        path.write_text("{}")
        with pytest.raises(ProjectError) as exc_info:
            load_project(path)
        assert not isinstance(exc_info.value, ProjectFormatError)

    def test_load_minimal_document(self, tmp_path: Path) -> None:
        path = tmp_path / "min.fof9proj"
        path.write_text(json.dumps({"version": "1.0", "leagueName": "L", "identifier": "x"}))
        project = load_project(path)
        assert project.csv_files == {}
        assert project.created is None
        assert project.base_year == 0

    def test_unknown_keys_are_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "extra.fof9proj"
        path.write_text(json.dumps({"version": "1.0", "leagueName": "L", "identifier": "x", "theme": "dark"}))
        assert load_project(path).identifier == "x"
