"""String helpers with C-string semantics.

Searching and comparing functions work on Python strings and give positions
as indices, with ``None`` where nothing is found. The size-limited copy
functions ``strlcpy`` and ``strlcat`` work on ``bytearray`` buffers that hold
NUL-terminated data.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest
from typing import Any, Optional, Union

__all__ = [
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "substr",
    "strjoin",
    "strtrim",
    "strmapi",
    "striteri",
    "strlcpy",
    "strlcat",
]

_NUL = "\0"


def _as_char(c: Union[str, int]) -> str:
    """Turn a one-character string or a char code into a character.

    An integer is truncated to a byte, as a C ``char`` would be.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``.

    Searching for NUL gives the position of the terminator, ``len(s)``.
    """
    ch = _as_char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``.

    Searching for NUL gives the position of the terminator, ``len(s)``.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch.

    The end of a string counts as a NUL, so a shorter string sorts first.
    """
    _check_size(n, "n")
    pairs = zip_longest(s1, s2, fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _check_size(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return index if index >= 0 else None


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` starting at ``start``.

    A start past the end gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to each character."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def _is_terminator(item: Any) -> bool:
    return item == 0 or item == _NUL


def striteri(buf: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` on each item of ``buf`` up to the first NUL.

    When ``f`` returns something other than ``None`` the item is replaced
    with it, so the buffer is changed in place.
    """
    for i, item in enumerate(list(buf)):
        if _is_terminator(item):
            break
        replacement = f(i, item)
        if replacement is not None:
            buf[i] = replacement


def _c_bytes(data: Union[bytes, bytearray, memoryview]) -> bytes:
    """The bytes of ``data`` before its first NUL."""
    return bytes(data).split(b"\0", 1)[0]


def strlcpy(dst: bytearray, src: Union[bytes, bytearray], size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes with the NUL.

    Returns the length of ``src``; a result of ``size`` or more means the
    copy was truncated. Raises ValueError if ``dst`` is too small.
    """
    _check_size(size, "size")
    source = _c_bytes(src)
    if size == 0:
        return len(source)
    count = min(len(source), size - 1)
    if count + 1 > len(dst):
        raise ValueError(f"destination holds {len(dst)} bytes, {count + 1} needed")
    dst[:count] = source[:count]
    dst[count] = 0
    return len(source)


def strlcat(dst: bytearray, src: Union[bytes, bytearray], size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst`` within ``size`` bytes.

    Returns the length the whole string would have had; a result of ``size``
    or more means the result was truncated. When ``dst`` already fills
    ``size``, nothing is written and ``len(src) + size`` is returned.
    Raises ValueError if ``dst`` is too small.
    """
    _check_size(size, "size")
    source = _c_bytes(src)
    dst_len = len(_c_bytes(dst))
    if dst_len >= size:
        return len(source) + size
    count = min(len(source), size - dst_len - 1)
    end = dst_len + count
    if end + 1 > len(dst):
        raise ValueError(f"destination holds {len(dst)} bytes, {end + 1} needed")
    dst[dst_len:end] = source[:count]
    dst[end] = 0
    return dst_len + len(source)