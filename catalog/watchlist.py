"""Watchlist — handles into the catalog, kept in the order they were added."""

from __future__ import annotations

import logging

from catalog.errors import Advisory
from catalog.movie import Movie
from catalog.query import render_movies
from catalog.store import INITIAL_CAPACITY, RecordStore

logger = logging.getLogger(__name__)


class Watchlist:
    """Subset of catalog movies, stored as catalog slot indices.

    The catalog only ever grows by append, so a slot index handed out here
    stays valid for the catalog's lifetime. Movies are never copied.
    """

    def __init__(self, catalog: RecordStore, initial_capacity: int = INITIAL_CAPACITY):
        self._catalog = catalog
        self._handles: RecordStore[int] = RecordStore(initial_capacity)

    @property
    def count(self) -> int:
        return len(self._handles)

    @property
    def capacity(self) -> int:
        return self._handles.capacity

    def __len__(self) -> int:
        return len(self._handles)

    def movies(self) -> list[Movie]:
        """Watchlist movies in insertion order."""
        return [self._catalog[handle] for handle in self._handles]

    def __contains__(self, movie_id: int) -> bool:
        return self._handles.index_of(lambda h: self._catalog[h].id == movie_id) is not None

    def add(self, movie_id: int) -> Advisory | None:
        """Add the catalog movie with this id. Returns an Advisory if nothing was added."""
        handle = self._catalog.index_of(lambda m: m.id == movie_id)
        if handle is None:
            logger.debug("Movie %d not in catalog", movie_id)
            return Advisory.NOT_IN_DATABASE
        if movie_id in self:
            return Advisory.ALREADY_ON_WATCHLIST
        self._handles.append(handle)
        logger.debug("Added movie %d to watchlist (%d entries)", movie_id, len(self._handles))
        return None

    def remove(self, movie_id: int) -> Advisory | None:
        """Remove every entry with this id. Returns an Advisory if none was present."""
        removed = self._handles.remove_if(lambda h: self._catalog[h].id == movie_id)
        if not removed:
            return Advisory.NOT_ON_WATCHLIST
        logger.debug("Removed movie %d from watchlist (%d entries)", movie_id, len(self._handles))
        return None

    def render(self) -> str:
        if not self._handles:
            return Advisory.LIST_EMPTY.message()
        return render_movies(self.movies())
