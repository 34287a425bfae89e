"""Load errors and advisory outcomes for the movie catalog."""

from __future__ import annotations

from enum import Enum


class CatalogError(Exception):
    """Base error for this package."""


class LoadError(CatalogError):
    """Raised when a movie list cannot be loaded. The whole load fails."""

    def __init__(self, message: str, filename: str):
        super().__init__(message)
        self.filename = filename


class CatalogFileError(LoadError):
    """Raised when a movie list file cannot be opened."""

    def __init__(self, filename: str):
        super().__init__(f"Can't open file: {filename}", filename)


class InvalidMovieList(LoadError):
    """Raised when a line does not match the movie list format."""

    def __init__(self, filename: str):
        super().__init__(f"Invalid movie list: {filename}", filename)


class DuplicateMovieId(LoadError):
    """Raised when a movie id is already present in the catalog."""

    def __init__(self, movie_id: int, filename: str):
        super().__init__(f"Duplicate movie id: {movie_id} ({filename})", filename)
        self.movie_id = movie_id


class QueryError(CatalogError):
    """Raised when a query is given an unknown kind or bad arguments."""


class Advisory(Enum):
    """Non-error outcomes reported to the user."""

    NO_MATCHES = "No matching movies"
    LIST_EMPTY = "List is empty"
    ALREADY_ON_WATCHLIST = "Movie {id} is already on the watch list"
    NOT_ON_WATCHLIST = "Movie {id} is not on the watch list"
    NOT_IN_DATABASE = "Movie ID is not in the database"

    def message(self, movie_id: int | None = None) -> str:
        return self.value.format(id=movie_id)
