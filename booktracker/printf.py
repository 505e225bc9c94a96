"""Formatted output with a small set of conversions.

Supported conversions are ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%x``,
``%X``, ``%p`` and ``%%``. An unknown conversion character is consumed and
produces no output, and a lone ``%`` at the end of the format is dropped.
There are no flags, widths or precisions.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

from booktracker.convert import itoa

__all__ = [
    "hex_lower",
    "hex_upper",
    "format_pointer",
    "format_unsigned",
    "sprintf",
    "printf",
]

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} needs an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def hex_lower(n: int) -> str:
    """Lower-case hexadecimal of ``n`` taken as an unsigned 32-bit value."""
    return format(_require_int(n, "x") & _UINT_MASK, "x")


def hex_upper(n: int) -> str:
    """Upper-case hexadecimal of ``n`` taken as an unsigned 32-bit value."""
    return format(_require_int(n, "X") & _UINT_MASK, "X")


def format_pointer(p: int) -> str:
    """An address as ``0x`` and lower-case hex, or ``(nil)`` for zero."""
    address = _require_int(p, "p") & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def format_unsigned(u: int) -> str:
    """Decimal of ``u`` taken as an unsigned 32-bit value."""
    return str(_require_int(u, "u") & _UINT_MASK)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str or None, got {type(value).__name__}")
    return value


def _format_signed(value: Any) -> str:
    return itoa(_to_int32(_require_int(value, "d")))


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "d": _format_signed,
    "i": _format_signed,
    "u": format_unsigned,
    "x": hex_lower,
    "X": hex_upper,
    "p": format_pointer,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _CONVERSIONS.get(spec)
    if handler is None:
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    return handler(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted arguments.

    Raises TypeError when the arguments run out or have the wrong type.
    """
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, out: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``out`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if out is None else out).write(text)
    return len(text)