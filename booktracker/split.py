"""Splitting text into words.

``split`` cuts a string at a single separator character. The other
functions work with a fixed set of separators: the whitespace characters
tab through carriage return, space, comma and slash. In every case empty
pieces are dropped.
"""

from __future__ import annotations

from itertools import groupby
from typing import Iterator, Union

__all__ = [
    "WORD_SEPARATORS",
    "split",
    "is_word_char",
    "count_words",
    "word_length",
    "dup_word",
    "charset_split",
]

WORD_SEPARATORS = frozenset("\t\n\v\f\r ,/")


def _as_char(c: Union[str, int]) -> str:
    """Turn a one-character string or a char code into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def split(s: str, sep: Union[str, int]) -> list[str]:
    """Split ``s`` at every ``sep``, leaving out empty pieces."""
    return [piece for piece in s.split(_as_char(sep)) if piece]


def is_word_char(c: Union[str, int]) -> bool:
    """True unless ``c`` is whitespace, a comma or a slash."""
    return _as_char(c) not in WORD_SEPARATORS


def _words(s: str) -> Iterator[str]:
    for is_word, run in groupby(s, key=is_word_char):
        if is_word:
            yield "".join(run)


def count_words(s: str) -> int:
    """Number of words in ``s``."""
    return sum(1 for _ in _words(s))


def word_length(s: str) -> int:
    """Length of the word at the start of ``s``; zero if it starts with a separator."""
    for index, ch in enumerate(s):
        if not is_word_char(ch):
            return index
    return len(s)


def dup_word(s: str) -> str:
    """The word at the start of ``s``."""
    return s[:word_length(s)]


def charset_split(s: str) -> list[str]:
    """All words of ``s`` in order."""
    return list(_words(s))