"""Writing characters, strings and numbers to a text stream.

Each function writes to ``out`` (standard output by default) and returns
the number of characters it wrote.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from booktracker.convert import itoa

__all__ = ["write_char", "write_str", "write_line", "write_number"]


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def write_char(c: Union[str, int], out: Optional[TextIO] = None) -> int:
    """Write one character, given as a string or a char code (truncated to a byte)."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    else:
        ch = chr(c & 0xFF)
    _stream(out).write(ch)
    return 1


def write_str(s: Optional[str], out: Optional[TextIO] = None) -> int:
    """Write a string; ``None`` is written as ``null``."""
    text = "null" if s is None else s
    _stream(out).write(text)
    return len(text)


def write_line(s: Optional[str], out: Optional[TextIO] = None) -> int:
    """Write a string followed by a newline."""
    count = write_str(s, out)
    _stream(out).write("\n")
    return count + 1


def write_number(n: int, out: Optional[TextIO] = None) -> int:
    """Write a signed 32-bit integer in decimal.

    Raises OverflowError for values outside the 32-bit range.
    """
    return write_str(itoa(n), out)