"""Growable record store — doubling slot array with in-place compaction."""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, TypeVar

logger = logging.getLogger(__name__)

INITIAL_CAPACITY = 5
GROWTH_FACTOR = 2

T = TypeVar("T")


class RecordStore(Generic[T]):
    """Ordered collection of entries backed by a slot list that doubles on demand.

    Entries keep insertion order. Queries read the store and never reorder it;
    the only way to shrink it is ``remove_if`` (compaction) or ``truncate``.
    """

    def __init__(self, initial_capacity: int = INITIAL_CAPACITY):
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be >= 1, got {initial_capacity}")
        self._slots: list[T | None] = [None] * initial_capacity
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for i in range(self._count):
            yield self._slots[i]

    def __getitem__(self, index: int) -> T:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError(f"store index {index} out of range")
        return self._slots[index]

    def append(self, entry: T) -> int:
        """Add an entry at the end, growing capacity if full. Returns its slot index."""
        if self._count >= len(self._slots):
            self._grow()
        self._slots[self._count] = entry
        self._count += 1
        return self._count - 1

    def remove_if(self, predicate: Callable[[T], bool]) -> int:
        """Drop every entry matching predicate, shifting survivors left.

        Returns the number of entries removed.
        """
        kept = 0
        for i in range(self._count):
            entry = self._slots[i]
            if predicate(entry):
                continue
            self._slots[kept] = entry
            kept += 1
        removed = self._count - kept
        for i in range(kept, self._count):
            self._slots[i] = None
        self._count = kept
        return removed

    def truncate(self, count: int):
        """Discard entries past the first ``count``."""
        if not 0 <= count <= self._count:
            raise ValueError(f"cannot truncate store of {self._count} entries to {count}")
        for i in range(count, self._count):
            self._slots[i] = None
        self._count = count

    def index_of(self, predicate: Callable[[T], bool]) -> int | None:
        """Linear scan in store order; slot index of the first match or None."""
        for i in range(self._count):
            if predicate(self._slots[i]):
                return i
        return None

    def _grow(self):
        new_capacity = len(self._slots) * GROWTH_FACTOR
        self._slots.extend([None] * (new_capacity - len(self._slots)))
        logger.debug("Grew record store to %d slots", new_capacity)
