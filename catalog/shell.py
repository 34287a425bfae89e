"""Interactive command loop over a loaded catalog and its watchlist."""

from __future__ import annotations

import logging
import sys
from typing import Iterable, TextIO

from catalog.query import list_all, run_query
from catalog.store import RecordStore
from catalog.watchlist import Watchlist

logger = logging.getLogger(__name__)

PROMPT = "cmd> "
INVALID = "Invalid command"


def _parse_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


class CommandShell:
    """Reads one command per line, echoes it, and prints the result.

    Commands: database, year <min> <max>, title <text>, genre <name>,
    add <id>, remove <id>, list, quit.
    """

    def __init__(self, catalog: RecordStore, watchlist: Watchlist, out: TextIO | None = None):
        self.catalog = catalog
        self.watchlist = watchlist
        self.out = out or sys.stdout
        self._handlers = {
            "database": self._database,
            "year": self._year,
            "title": self._title,
            "genre": self._genre,
            "add": self._add,
            "remove": self._remove,
            "list": self._list,
        }

    def _print(self, text: str):
        self.out.write(text + "\n")

    def run(self, lines: Iterable[str]) -> int:
        """Process commands until quit or end of input. Returns an exit status."""
        for line in lines:
            tokens = line.split()
            if not tokens:
                continue
            self._print(PROMPT + " ".join(tokens))
            cmd, args = tokens[0], tokens[1:]
            if cmd == "quit":
                return 0
            handler = self._handlers.get(cmd)
            if handler is None or not handler(args):
                self._print(INVALID)
            self._print("")
        self.out.write(PROMPT)
        return 0

    # Handlers return False when the arguments are invalid.

    def _database(self, args: list[str]) -> bool:
        if args:
            return False
        self._print(list_all(self.catalog).render())
        return True

    def _year(self, args: list[str]) -> bool:
        if len(args) != 2:
            return False
        min_year, max_year = _parse_int(args[0]), _parse_int(args[1])
        if min_year is None or max_year is None or max_year < min_year:
            return False
        self._print(run_query(self.catalog, "year", min_year, max_year).render())
        return True

    def _title(self, args: list[str]) -> bool:
        if len(args) != 1:
            return False
        self._print(run_query(self.catalog, "title", args[0]).render())
        return True

    def _genre(self, args: list[str]) -> bool:
        logger.info("Genre filtering is not supported; listing all movies")
        self._print(list_all(self.catalog).render())
        return True

    def _add(self, args: list[str]) -> bool:
        movie_id = _parse_int(args[0]) if len(args) == 1 else None
        if movie_id is None:
            return False
        advisory = self.watchlist.add(movie_id)
        if advisory is not None:
            self._print(advisory.message(movie_id))
        return True

    def _remove(self, args: list[str]) -> bool:
        movie_id = _parse_int(args[0]) if len(args) == 1 else None
        if movie_id is None:
            return False
        advisory = self.watchlist.remove(movie_id)
        if advisory is not None:
            self._print(advisory.message(movie_id))
        return True

    def _list(self, args: list[str]) -> bool:
        if args:
            return False
        self._print(self.watchlist.render())
        return True
