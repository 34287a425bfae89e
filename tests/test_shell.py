"""Tests for catalog/shell.py"""

import io

import pytest

from catalog.query import list_all, list_year
from catalog.shell import CommandShell
from catalog.watchlist import Watchlist


@pytest.fixture()
def run(catalog):
    """Run the shell over the given command lines; return (status, output)."""
    def _run(*commands: str):
        out = io.StringIO()
        shell = CommandShell(catalog, Watchlist(catalog), out)
        status = shell.run(line + "\n" for line in commands)
        return status, out.getvalue()
    return _run


class TestCommands:
    def test_database(self, run, catalog):
        status, output = run("database")
        assert status == 0
        assert output == "cmd> database\n" + list_all(catalog).render() + "\n\ncmd> "

    def test_year(self, run, catalog):
        _, output = run("year 1990 2000")
        assert output.startswith("cmd> year 1990 2000\n" + list_year(catalog, 1990, 2000).render())

    def test_year_no_matches(self, run):
        _, output = run("year 2010 2020")
        assert output == "cmd> year 2010 2020\nNo matching movies\n\ncmd> "

    def test_title(self, run):
        _, output = run("title Club")
        lines = output.split("\n")
        assert lines[0] == "cmd> title Club"
        assert lines[2].endswith("Fight Club 1999 139")

    def test_genre_lists_everything(self, run, catalog):
        _, output = run("genre comedy")
        assert output == "cmd> genre comedy\n" + list_all(catalog).render() + "\n\ncmd> "

    def test_watchlist_flow(self, run):
        _, output = run("add 8", "add 8", "add 999", "remove 41", "list", "remove 8", "list")
        assert output.split("\n") == [
            "cmd> add 8",
            "",
            "cmd> add 8",
            "Movie 8 is already on the watch list",
            "",
            "cmd> add 999",
            "Movie ID is not in the database",
            "",
            "cmd> remove 41",
            "Movie 41 is not on the watch list",
            "",
            "cmd> list",
            "    ID                                  Title Year Len",
            "     8                             Fight Club 1999 139",
            "",
            "cmd> remove 8",
            "",
            "cmd> list",
            "List is empty",
            "",
            "cmd> ",
        ]

    def test_quit_stops_processing(self, run):
        status, output = run("quit", "database")
        assert status == 0
        assert output == "cmd> quit\n"

    def test_blank_lines_skipped(self, run):
        _, output = run("", "   ", "list")
        assert output == "cmd> list\nList is empty\n\ncmd> "


class TestInvalidCommands:
    @pytest.mark.parametrize("command", [
        "bogus",
        "year 1990",
        "year abc 2000",
        "year 2000 1990",
        "title",
        "title two words",
        "add",
        "add eight",
        "remove 1 2",
        "database extra",
        "list now",
    ])
    def test_invalid(self, run, command):
        _, output = run(command)
        assert output == f"cmd> {command}\nInvalid command\n\ncmd> "

    def test_invalid_does_not_stop_loop(self, run):
        _, output = run("bogus", "list")
        assert "Invalid command" in output
        assert "List is empty" in output
