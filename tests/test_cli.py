#!filepath: tests/test_cli.py
import pytest
import yaml
from typer.testing import CliRunner

from eventsearch import __version__
from eventsearch.cli import app, load_roster
from eventsearch.utils.errors import UserInputError

runner = CliRunner()


@pytest.fixture
def write_roster(tmp_path):
    def _write(members, enemies=()):
        path = tmp_path / "roster.yml"
        path.write_text(
            yaml.safe_dump({"members": list(members), "enemies": [list(p) for p in enemies]}),
            encoding="utf-8",
        )
        return path

    return _write


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_teams_lists_every_partition(write_roster):
    path = write_roster(["A", "B", "C"])

    result = runner.invoke(app, ["teams", str(path)])

    assert result.exit_code == 0, result.stdout
    assert "5 league(s) for 3 member(s)" in result.stdout
    assert "{A, B, C}" in result.stdout


def test_teams_n_teams_filter(write_roster):
    path = write_roster(["A", "B", "C"])

    result = runner.invoke(app, ["teams", str(path), "--n-teams", "2"])

    assert result.exit_code == 0, result.stdout
    assert "3 league(s)" in result.stdout


def test_teams_respects_enemies(write_roster):
    path = write_roster(["A", "B"], enemies=[("A", "B")])

    result = runner.invoke(app, ["teams", str(path)])

    assert result.exit_code == 0, result.stdout
    assert "1 league(s)" in result.stdout
    assert "{A}  {B}" in result.stdout


def test_teams_unknown_enemy_is_user_error(write_roster):
    path = write_roster(["A", "B"], enemies=[("A", "Z")])

    result = runner.invoke(app, ["teams", str(path)])

    assert result.exit_code == 1
    assert "unknown member" in result.stdout


def test_teams_empty_roster_fails(write_roster):
    path = write_roster([])

    result = runner.invoke(app, ["teams", str(path)])

    assert result.exit_code == 1
    assert "no teams found" in result.stdout


def test_load_roster_symmetric_enemies(write_roster):
    members, are_enemies = load_roster(write_roster(["A", "B", "C"], enemies=[("B", "A")]))

    assert members == ["A", "B", "C"]
    assert are_enemies("A", "B")
    assert are_enemies("B", "A")
    assert not are_enemies("A", "C")


def test_load_roster_rejects_duplicates(write_roster):
    with pytest.raises(UserInputError):
        load_roster(write_roster(["A", "A"]))


def test_load_roster_missing_file(tmp_path):
    with pytest.raises(UserInputError):
        load_roster(tmp_path / "missing.yml")
