"""Query engine — predicates, orderings, and the fixed-column listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

from catalog.errors import Advisory, QueryError
from catalog.movie import TITLE_LENGTH, Movie
from catalog.store import RecordStore

Predicate = Callable[[Movie], bool]
Ordering = Callable[[Movie], tuple]

HEADER = f"{'ID':>6} {'Title':>{TITLE_LENGTH}} Year Len"


def match_all() -> Predicate:
    return lambda movie: True


def match_year(min_year: int, max_year: int) -> Predicate:
    """True if the movie's year is within [min_year, max_year]."""
    return lambda movie: min_year <= movie.year <= max_year


def match_title(substring: str) -> Predicate:
    """True if substring occurs in the title (case-sensitive)."""
    return lambda movie: substring in movie.title


def by_id(movie: Movie) -> tuple:
    return (movie.id,)


def by_year(movie: Movie) -> tuple:
    return (movie.year, movie.id)


def format_row(movie: Movie) -> str:
    return f"{movie.id:>6} {movie.title:>{TITLE_LENGTH}} {movie.year:>4} {movie.length:>3}"


def render_movies(movies: Iterable[Movie]) -> str:
    """Header plus one fixed-width row per movie, in the given order."""
    lines = [HEADER]
    lines.extend(format_row(m) for m in movies)
    return "\n".join(lines)


@dataclass
class Listing:
    """Result of a query: matched movies in display order."""

    movies: list[Movie] = field(default_factory=list)

    def render(self) -> str:
        if not self.movies:
            return Advisory.NO_MATCHES.message()
        return render_movies(self.movies)


def list_database(store: RecordStore, predicate: Predicate, ordering: Ordering) -> Listing:
    """Collect the movies matching predicate and sort the copy by ordering.

    The store itself is only read; its order never changes.
    """
    matched = [movie for movie in store if predicate(movie)]
    matched.sort(key=ordering)
    return Listing(movies=matched)


def list_all(store: RecordStore) -> Listing:
    return list_database(store, match_all(), by_id)


def list_year(store: RecordStore, min_year: int, max_year: int) -> Listing:
    if max_year < min_year:
        raise QueryError(f"year range is empty: {min_year} > {max_year}")
    return list_database(store, match_year(min_year, max_year), by_year)


def list_title(store: RecordStore, substring: str) -> Listing:
    return list_database(store, match_title(substring), by_id)


def list_genre(store: RecordStore, genre: str) -> None:
    """Genre listing is not supported by the record format; does nothing."""
    return None


QUERIES = {
    "all": (list_all, 0),
    "year": (list_year, 2),
    "title": (list_title, 1),
    "genre": (list_genre, 1),
}


def run_query(store: RecordStore, kind: str, *args) -> Listing | None:
    """Dispatch a query by kind tag with already-typed arguments."""
    try:
        query, arity = QUERIES[kind]
    except KeyError:
        raise QueryError(f"unknown query kind: {kind!r}") from None
    if len(args) != arity:
        raise QueryError(f"{kind} query takes {arity} argument(s), got {len(args)}")
    return query(store, *args)
