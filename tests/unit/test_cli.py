"""Tests for the ``fof9-editor`` Typer CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from fof9_editor.cli.main import app
from fof9_editor.project import load_project, new_project, save_project
from fof9_editor.records.schema import Coach, Player, Team
from fof9_editor.state import AppState
from fof9_editor.storage.repository import CsvRepository, load_teams

runner = CliRunner()


@pytest.fixture
def project_path(tmp_path: Path, valid_player: Player, valid_coach: Coach, valid_team: Team) -> Path:
    """A project with one valid record of each kind."""
    project = new_project("CLI League", "cli", 2025)
    path = tmp_path / "cli.fof9proj"
    save_project(project, path)
    repo = CsvRepository(tmp_path, project.csv_files)
    repo.save_players([valid_player])
    repo.save_coaches([valid_coach])
    repo.save_teams([valid_team])
    return path


class TestVersion:
    @pytest.mark.smoke
    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "FOF9 Editor v" in result.output
        assert "Python:" in result.output


class TestValidate:
    @pytest.mark.smoke
    def test_valid_project(self, project_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(project_path)])
        assert result.exit_code == 0, result.output
        assert "All records are valid" in result.output

    def test_reports_violations(self, project_path: Path, valid_team: Team) -> None:
        project = load_project(project_path)
        repo = CsvRepository(project_path.parent, project.csv_files)
        repo.save_teams([valid_team.model_copy(update={"attendance": 80000})])

        result = runner.invoke(app, ["validate", str(project_path)])
        assert result.exit_code == 1
        assert "Attendance" in result.output
        assert "1 violation(s) found" in result.output

    def test_missing_project(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "nope.fof9proj")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_incomplete_project(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.fof9proj"
        path.write_text(json.dumps({"version": "1.0"}))
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "incomplete" in result.output

    def test_non_utf8_project(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.fof9proj"
        path.write_bytes(b'{"version": "1.0", "leagueName": "Caf\xe9", "identifier": "x"}')
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Error" in result.output

    def test_bad_log_level(self, project_path: Path) -> None:
        result = runner.invoke(app, ["--log-level", "LOUD", "validate", str(project_path)])
        assert result.exit_code == 1
        assert "Unknown log level" in result.output


class TestInfo:
    def test_summary(self, project_path: Path) -> None:
        result = runner.invoke(app, ["--log-level", "QUIET", "info", str(project_path)])
        assert result.exit_code == 0, result.output
        assert "CLI League" in result.output
        assert "data/cli_players.csv" in result.output
        assert "Teams" in result.output

    def test_missing_descriptor_after_load_exits(self, project_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(AppState, "get_project", lambda self: None)
        result = runner.invoke(app, ["info", str(project_path)])
        assert result.exit_code == 1
        assert "no project loaded" in result.output


class TestNew:
    def test_creates_project_and_empty_files(self, tmp_path: Path) -> None:
        args = ["new", "Fresh League", "--id", "fresh", "--base-year", "2030", "--dir", str(tmp_path)]
        result = runner.invoke(app, args)
        assert result.exit_code == 0, result.output

        project = load_project(tmp_path / "fresh.fof9proj")
        assert project.league_name == "Fresh League"
        assert project.base_year == 2030
        assert load_teams(tmp_path / "data" / "team_info.csv") == []

    def test_refuses_to_overwrite(self, project_path: Path) -> None:
        result = runner.invoke(app, ["new", "Again", "--id", "cli", "--dir", str(project_path.parent)])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_blank_identifier(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["new", "X", "--id", " ", "--dir", str(tmp_path)])
        assert result.exit_code == 1
