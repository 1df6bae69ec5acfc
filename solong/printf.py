"""Minimal printf-style formatting with the conversions %c %s %p %d %i %u %x %X %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from solong.chars import itoa

NULL_TEXT = "(null)"
NULL_POINTER = "0x0"

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an integer, got {value!r}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def format_hex(n: int, uppercase: bool = False) -> str:
    """Render a non-negative integer in hexadecimal without a prefix."""
    n = _as_int(n, "x")
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    digits = _UPPER_DIGITS if uppercase else _LOWER_DIGITS
    out = []
    while True:
        n, digit = divmod(n, 16)
        out.append(digits[digit])
        if n == 0:
            break
    return "".join(reversed(out))


def format_pointer(n: int) -> str:
    """Render an address as ``0x`` followed by lower-case hex; zero gives ``0x0``."""
    n = _as_int(n, "p") & _UINT64
    if n == 0:
        return NULL_POINTER
    return "0x" + format_hex(n)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {value!r}")
    return value


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _format_char(value)
    if conversion == "s":
        return _format_string(value)
    if conversion == "p":
        return format_pointer(value)
    number = _as_int(value, conversion)
    if conversion in "di":
        return itoa(_to_int32(number))
    if conversion == "u":
        return itoa(number & _UINT32)
    return format_hex(number & _UINT32, uppercase=conversion == "X")


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conversion = next(chars, None)
        if conversion is None:
            return
        yield _convert(conversion, remaining)


def format_message(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the end is dropped.
    """
    return "".join(_pieces(fmt, args))


def print_message(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expanded message and return the number of characters written."""
    text = format_message(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)