"""CLI tests with an in-memory repository in place of the HTTP client."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cli import main as cli_main
from conftest import InMemoryRepository
from core.config import write_user_env_vars
from core.errors import NetworkError

runner = CliRunner()


@pytest.fixture
def repository(monkeypatch, user_config_dir: Path, staff) -> InMemoryRepository:
    repo = InMemoryRepository(staff)
    monkeypatch.setattr(cli_main, "build_repository", lambda settings: repo)
    return repo


def test_list_shows_every_employee(repository) -> None:
    result = runner.invoke(cli_main.app, ["list"])
    assert result.exit_code == 0, result.output
    for name in ("Ana", "Anabel", "Beto"):
        assert name in result.output


def test_list_search(repository) -> None:
    result = runner.invoke(cli_main.app, ["list", "--search", "bet"])
    assert result.exit_code == 0
    assert "Beto" in result.output
    assert "Anabel" not in result.output


def test_list_exports_json(repository, tmp_path: Path) -> None:
    target = tmp_path / "out" / "staff.json"
    result = runner.invoke(cli_main.app, ["list", "--json", str(target)])
    assert result.exit_code == 0
    data = json.loads(target.read_text(encoding="utf-8"))
    assert [row["name"] for row in data] == ["Ana", "Anabel", "Beto"]


def test_add_creates_employee(repository) -> None:
    result = runner.invoke(
        cli_main.app,
        ["add", "--name", "Carla", "--age", "28", "--position", "Design", "--phone", "+34"],
    )
    assert result.exit_code == 0, result.output
    assert "Employee created." in result.output
    assert repository.records["4"].name == "Carla"


def test_add_rejects_non_numeric_age(repository) -> None:
    result = runner.invoke(
        cli_main.app,
        ["add", "--name", "Carla", "--age", "old", "--position", "Design", "--phone", "+34"],
    )
    assert result.exit_code == 1
    assert "are required" in result.output
    assert "4" not in repository.records


def test_edit_keeps_omitted_fields(repository) -> None:
    result = runner.invoke(cli_main.app, ["edit", "1", "--position", "Lead"])
    assert result.exit_code == 0, result.output
    assert repository.records["1"].position == "Lead"
    assert repository.records["1"].phone == "+1"


def test_delete_with_confirmation(repository) -> None:
    result = runner.invoke(cli_main.app, ["delete", "3"], input="y\n")
    assert result.exit_code == 0, result.output
    assert "Employee deleted." in result.output
    assert "3" not in repository.records


def test_delete_aborted(repository) -> None:
    result = runner.invoke(cli_main.app, ["delete", "3"], input="n\n")
    assert result.exit_code == 0
    assert "Nothing was deleted." in result.output
    assert "3" in repository.records


def test_delete_missing_is_reported_distinctly(repository) -> None:
    result = runner.invoke(cli_main.app, ["delete", "99", "--yes"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_delete_invalid_id(repository) -> None:
    result = runner.invoke(cli_main.app, ["delete", "undefined", "--yes"])
    assert result.exit_code == 1
    assert "Invalid employee id" in result.output


def test_spanish_messages(repository) -> None:
    result = runner.invoke(cli_main.app, ["--lang", "es", "delete", "99", "--yes"])
    assert result.exit_code == 1
    assert "no encontrado" in result.output


def test_network_error_message(repository, monkeypatch) -> None:
    async def offline(search_term=None):
        raise NetworkError()

    monkeypatch.setattr(repository, "list_employees", offline)
    result = runner.invoke(cli_main.app, ["list"])
    assert result.exit_code == 1
    assert "Check your internet connection" in result.output


def test_user_config_is_read_from_the_current_config_dir(repository, user_config_dir: Path) -> None:
    write_user_env_vars({"EMPLOYEE_DESK_DEFAULT_LANGUAGE": "es"}, user_config_dir / ".env")
    result = runner.invoke(cli_main.app, ["delete", "99", "--yes"])
    assert result.exit_code == 1
    assert "no encontrado" in result.output


def test_language_flag_overrides_user_config(repository, user_config_dir: Path) -> None:
    write_user_env_vars({"EMPLOYEE_DESK_DEFAULT_LANGUAGE": "es"}, user_config_dir / ".env")
    result = runner.invoke(cli_main.app, ["--lang", "en", "delete", "99", "--yes"])
    assert "not found" in result.output
