"""Movie record — frozen dataclass plus field limits."""

from dataclasses import dataclass

TITLE_LENGTH = 38
ELLIPSIS = ".."

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class Movie:
    id: int
    title: str
    year: int
    length: int
