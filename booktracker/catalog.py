"""A catalogue of books loaded from comma-separated text.

Each line of a catalogue file reads ``id,title,author`` and must hold exactly
two commas. The id is parsed leniently (leading digits only). Title and
author are kept as written, surrounding spaces included. At most
``MAX_CONSULT`` lines are examined.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Union

from booktracker.convert import atoi
from booktracker.split import split

__all__ = [
    "MAX_CONSULT",
    "InvalidLineError",
    "Book",
    "Catalog",
    "has_valid_commas",
    "parse_line",
    "load_catalog",
    "load_catalog_file",
]

MAX_CONSULT = 1000


class InvalidLineError(ValueError):
    """A catalogue line that does not read ``id,title,author``."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Invalid line: {line}")
        self.line = line


@dataclass(frozen=True)
class Book:
    """One catalogue entry."""

    id: int
    title: str
    author: str


class Catalog:
    """Books in the order they were added."""

    def __init__(self) -> None:
        self._books: list[Book] = []

    def add(self, book: Book) -> Book:
        """Append ``book`` and return it."""
        self._books.append(book)
        return book

    def clear(self) -> None:
        """Remove every book."""
        self._books.clear()

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def __repr__(self) -> str:
        return f"Catalog({self._books!r})"


def has_valid_commas(line: str) -> bool:
    """True when ``line`` holds exactly two commas."""
    return line.count(",") == 2


def parse_line(line: str) -> Book:
    """Build a Book from one ``id,title,author`` line.

    A trailing newline is ignored. Raises InvalidLineError when the line
    does not hold exactly two commas or one of its fields is empty.
    """
    if not has_valid_commas(line):
        raise InvalidLineError(line)
    fields = split(line.removesuffix("\n"), ",")
    if len(fields) != 3:
        raise InvalidLineError(line)
    raw_id, title, author = fields
    return Book(atoi(raw_id), title, author)


def load_catalog(
    stream: Iterable[str],
    catalog: Catalog,
    limit: int = MAX_CONSULT,
) -> list[str]:
    """Add the books read from the lines of ``stream`` to ``catalog``.

    At most ``limit`` lines are read, invalid ones included. Returns the
    lines that were rejected, in order.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    rejected = []
    for line in islice(stream, limit):
        try:
            catalog.add(parse_line(line))
        except InvalidLineError:
            rejected.append(line)
    return rejected


def load_catalog_file(path: Union[str, os.PathLike]) -> tuple[Catalog, list[str]]:
    """Load a catalogue file; return the catalogue and the rejected lines.

    Raises OSError when the file cannot be opened.
    """
    catalog = Catalog()
    with open(path, encoding="utf-8", errors="replace") as stream:
        rejected = load_catalog(stream, catalog)
    return catalog, rejected