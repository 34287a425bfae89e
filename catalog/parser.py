"""Movie list parser — one delimited line per movie, loaded into a RecordStore.

Line layout (fields separated by a single delimiter, tab by default):

    <id> <d> <title> <d> <year> <d> <length>

Any malformed line or duplicate id fails the whole file; the store is rolled
back to the state it had before the file was read.
"""

import logging
import re
from typing import Iterable

from catalog.errors import DuplicateMovieId, CatalogFileError, InvalidMovieList, LoadError
from catalog.line_reader import LineReader
from catalog.movie import ELLIPSIS, INT32_MAX, INT32_MIN, TITLE_LENGTH, Movie
from catalog.store import RecordStore

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "\t"

INT_PATTERN = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def _read_int(line: str, pos: int, filename: str) -> tuple[int, int]:
    """Parse a 32-bit signed integer at pos. Returns (value, next position)."""
    match = INT_PATTERN.match(line, pos)
    if not match:
        raise InvalidMovieList(filename)
    value = int(match.group(1))
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidMovieList(filename)
    return value, match.end()


def _expect_delimiter(line: str, pos: int, delimiter: str, filename: str) -> int:
    if not line.startswith(delimiter, pos):
        raise InvalidMovieList(filename)
    return pos + len(delimiter)


def _read_title(line: str, pos: int, delimiter: str, filename: str) -> tuple[str, int]:
    """Copy the title up to the delimiter, truncating past TITLE_LENGTH chars."""
    chars: list[str] = []
    while True:
        if pos >= len(line):
            raise InvalidMovieList(filename)
        c = line[pos]
        if c == delimiter:
            return "".join(chars), pos + 1
        if len(chars) == TITLE_LENGTH:
            # Too long: keep 36 chars plus the ellipsis, skip to the delimiter
            chars[-len(ELLIPSIS):] = ELLIPSIS
            end = line.find(delimiter, pos)
            if end < 0:
                raise InvalidMovieList(filename)
            return "".join(chars), end + 1
        chars.append(c)
        pos += 1


def parse_movie(line: str, filename: str, existing: Iterable[Movie] = (),
                delimiter: str = DEFAULT_DELIMITER) -> Movie:
    """Parse one movie list line into a Movie.

    ``existing`` is scanned linearly for the parsed id right after the id is
    read, so a duplicate is reported even if the rest of the line is malformed.

    Raises:
        InvalidMovieList: if the line does not follow the field layout.
        DuplicateMovieId: if the id is already among ``existing``.
    """
    movie_id, pos = _read_int(line, 0, filename)
    pos = _expect_delimiter(line, pos, delimiter, filename)

    for movie in existing:
        if movie.id == movie_id:
            raise DuplicateMovieId(movie_id, filename)

    title, pos = _read_title(line, pos, delimiter, filename)

    year, pos = _read_int(line, pos, filename)
    pos = _expect_delimiter(line, pos, delimiter, filename)

    # Anything after the length is ignored
    length, _ = _read_int(line, pos, filename)

    return Movie(id=movie_id, title=title, year=year, length=length)


def read_database(store: RecordStore, filename: str, delimiter: str = DEFAULT_DELIMITER,
                  encoding: str = "utf-8") -> int:
    """Append every movie in ``filename`` to ``store``. Returns the number added.

    Raises:
        CatalogFileError: if the file cannot be opened.
        InvalidMovieList: on a malformed line (or undecodable bytes).
        DuplicateMovieId: if an id repeats within the file or the store.
    """
    try:
        f = open(filename, "rb")
    except OSError as ex:
        raise CatalogFileError(filename) from ex

    mark = len(store)
    try:
        with f:
            reader = LineReader(f, encoding=encoding)
            for line in reader:
                store.append(parse_movie(line, filename, store, delimiter))
    except UnicodeDecodeError as ex:
        store.truncate(mark)
        raise InvalidMovieList(filename) from ex
    except LoadError:
        store.truncate(mark)
        raise

    added = len(store) - mark
    logger.info("Loaded %d movies from %s", added, filename)
    return added


def load_catalog(filenames: Iterable[str], delimiter: str = DEFAULT_DELIMITER,
                 encoding: str = "utf-8", initial_capacity: int | None = None) -> RecordStore:
    """Load all movie lists, in order, into one new catalog.

    Duplicate ids are detected across every file. If any file fails, the
    error propagates and no catalog is returned.
    """
    store = RecordStore() if initial_capacity is None else RecordStore(initial_capacity)
    for filename in filenames:
        read_database(store, filename, delimiter=delimiter, encoding=encoding)
    logger.debug("Catalog holds %d movies (capacity %d)", len(store), store.capacity)
    return store
