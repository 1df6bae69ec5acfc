import io

import pytest

from solong.printf import format_hex, format_message, format_pointer, print_message


@pytest.mark.parametrize("n", [0, 1, 9, 10, 15, 16, 255, 4096, 2**32 - 1, 2**64 - 1])
def test_format_hex_round_trip(n):
    assert int(format_hex(n), 16) == n
    assert int(format_hex(n, True), 16) == n


def test_format_hex_case():
    n = 0xABCDEF
    assert format_hex(n, True) == format_hex(n).upper()
    assert format_hex(n) == format_hex(n).lower()


def test_format_hex_negative_rejected():
    with pytest.raises(ValueError):
        format_hex(-1)


def test_format_pointer_null():
    assert format_pointer(0) == "0x0"


@pytest.mark.parametrize("n", [1, 0x7FFE1234, 2**48 + 5])
def test_format_pointer_prefix_and_value(n):
    text = format_pointer(n)
    assert text.startswith("0x")
    assert int(text[2:], 16) == n


def test_null_string():
    assert format_message("%s", None) == "(null)"


def test_percent_literal():
    assert format_message("%%") == "%"


def test_plain_text_unchanged():
    assert format_message("no conversions here\n") == "no conversions here\n"


def test_char_and_string():
    assert format_message("%c-%s", "x", "word") == "x-word"


def test_char_from_code():
    assert format_message("%c", ord("Q")) == "Q"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, 2**31 - 1])
def test_decimal_round_trip(n):
    assert int(format_message("%d", n)) == n
    assert int(format_message("%i", n)) == n


def test_int_min():
    assert format_message("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert int(format_message("%d", 2**31)) == -(2**31)


def test_unsigned_wraps():
    assert int(format_message("%u", -1)) == 2**32 - 1


def test_hex_conversions_wrap_to_32_bits():
    assert int(format_message("%x", 2**40 + 0xBEEF), 16) == 0xBEEF
    assert format_message("%X", 0xBEEF) == format_message("%x", 0xBEEF).upper()


def test_unknown_conversion_consumes_nothing():
    assert format_message("%q%d", 5) == format_message("%d", 5)


def test_trailing_percent_dropped():
    assert format_message("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_message("%d")


def test_wrong_argument_type():
    with pytest.raises(TypeError):
        format_message("%d", "seven")


def test_print_message_returns_length():
    out = io.StringIO()
    count = print_message("You won in %d moves!\n", 12, stream=out)
    assert out.getvalue() == format_message("You won in %d moves!\n", 12)
    assert count == len(out.getvalue())


def test_print_message_default_stdout(capsys):
    count = print_message("%s", "hello")
    assert capsys.readouterr().out == "hello"
    assert count == len("hello")