import io

import pytest

from booktracker.printf import (
    format_pointer,
    format_unsigned,
    hex_lower,
    hex_upper,
    printf,
    sprintf,
)


def test_null_string_is_written_as_null():
    assert sprintf("%s", None) == "(null)"


def test_zero_pointer_is_nil():
    assert format_pointer(0) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"


def test_int_min_is_rendered():
    assert sprintf("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 0xDEADBEEF, 0xFFFFFFFF])
def test_hex_round_trip(n):
    assert int(hex_lower(n), 16) == n
    assert int(hex_upper(n), 16) == n
    assert hex_upper(n) == hex_lower(n).upper()
    assert hex_lower(n) == hex_lower(n).lower()


def test_hex_uses_unsigned_32_bit_view():
    assert int(hex_lower(-1), 16) == 0xFFFFFFFF
    assert hex_lower(1 << 32) == hex_lower(0)


def test_pointer_round_trip():
    text = format_pointer(0x7FFE1234)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x7FFE1234


def test_unsigned_wraps_negative():
    assert int(format_unsigned(-1)) == 0xFFFFFFFF
    assert format_unsigned(123) == "123"


def test_plain_text_passes_through():
    assert sprintf("hello world") == "hello world"


def test_percent_literal():
    assert sprintf("100%%") == "100%"


def test_mixed_conversions():
    result = sprintf("%s-%d-%c-%i", "ab", 42, "z", -7)
    assert result == "ab-42-z--7"


def test_char_from_code():
    assert sprintf("%c", ord("Q")) == "Q"


def test_signed_wraps_to_32_bits():
    assert sprintf("%d", 2**32 + 5) == "5"
    assert sprintf("%d", 2**31) == "-2147483648"


def test_unknown_conversion_consumes_nothing():
    assert sprintf("a%qb%d", 3) == "ab3"


def test_trailing_percent_is_dropped():
    assert sprintf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "five")
    with pytest.raises(TypeError):
        sprintf("%s", 5)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s=%x\n", "key", 255, out=out)
    assert out.getvalue() == sprintf("%s=%x\n", "key", 255)
    assert count == len(out.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%u", 7)
    captured = capsys.readouterr()
    assert captured.out == "7"
    assert count == 1