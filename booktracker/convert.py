"""Conversions between text and numbers.

Parsing is lenient: leading whitespace (space and tab through carriage
return) is skipped, one optional sign is accepted, and parsing stops at the
first character that does not fit. Text without digits yields zero.
"""

from __future__ import annotations

__all__ = ["INT_MIN", "INT_MAX", "LONG_MIN", "LONG_MAX", "atoi", "atol", "atodouble", "itoa"]

INT_MIN = -2147483648
INT_MAX = 2147483647
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _sign_and_rest(text: str) -> tuple[int, str]:
    """Skip leading whitespace and an optional sign."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    return sign, rest


def _leading_digits(text: str) -> str:
    end = 0
    for ch in text:
        if ch not in _DIGITS:
            break
        end += 1
    return text[:end]


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a signed two's-complement integer of the given width."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse_integer(text: str, bits: int) -> int:
    sign, rest = _sign_and_rest(text)
    digits = _leading_digits(rest)
    value = int(digits) if digits else 0
    return _wrap(sign * value, bits)


def atoi(text: str) -> int:
    """Parse a leading integer, wrapping to a signed 32-bit value."""
    return _parse_integer(text, 32)


def atol(text: str) -> int:
    """Parse a leading integer, wrapping to a signed 64-bit value."""
    return _parse_integer(text, 64)


def atodouble(text: str) -> float:
    """Parse a leading decimal number with an optional fractional part.

    No exponent is recognised; "1e5" reads as 1.0.
    """
    sign, rest = _sign_and_rest(text)
    whole_digits = _leading_digits(rest)
    result = 0.0
    for ch in whole_digits:
        result = result * 10.0 + (ord(ch) - ord("0"))
    rest = rest[len(whole_digits):]
    decimal = 0.0
    if rest.startswith("."):
        div = 10.0
        for ch in _leading_digits(rest[1:]):
            decimal += (ord(ch) - ord("0")) / div
            div *= 10.0
    return float(sign) * (result + decimal)


def itoa(n: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)