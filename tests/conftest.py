"""Shared pytest fixtures for the movie catalog test suite."""

from __future__ import annotations

import os

import pytest

from catalog.movie import Movie
from catalog.store import RecordStore

LISTS_DIR = os.path.join(os.path.dirname(__file__), "..", "lists")


@pytest.fixture()
def movies() -> list[Movie]:
    """A handful of movies, deliberately not in id or year order."""
    return [
        Movie(id=12, title="Pulp Fiction", year=1994, length=154),
        Movie(id=3, title="The Godfather", year=1972, length=175),
        Movie(id=8, title="Fight Club", year=1999, length=139),
        Movie(id=5, title="The Matrix", year=1999, length=136),
        Movie(id=41, title="Toy Story", year=1995, length=81),
    ]


@pytest.fixture()
def catalog(movies) -> RecordStore:
    store = RecordStore()
    for movie in movies:
        store.append(movie)
    return store


@pytest.fixture()
def write_list(tmp_path):
    """Write a movie list file from raw text and return its path."""
    def _write(name: str, text: str) -> str:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return str(path)
    return _write


@pytest.fixture()
def sample_list():
    def _path(name: str) -> str:
        return os.path.join(LISTS_DIR, name)
    return _path
