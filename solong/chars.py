"""Character classification, integer/text conversion and small output helpers."""

from __future__ import annotations

import sys
from typing import TextIO, Union

Char = Union[str, int]

_WHITESPACE = frozenset(chr(code) for code in range(9, 14)) | {" "}


def _code(c: Char) -> int:
    """Return the code point of a one-character string or an integer code."""
    if isinstance(c, int):
        return c
    if isinstance(c, str) and len(c) == 1:
        return ord(c)
    raise ValueError(f"expected a single character or an integer code, got {c!r}")


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; other input is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; other input is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then at most one sign, then digits up to
    the first non-digit. Text without digits yields 0.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] == "+":
        stripped = stripped[1:]
    elif stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {n!r}")
    if n < 0:
        return "-" + itoa(-n)
    digits = []
    while True:
        n, digit = divmod(n, 10)
        digits.append(chr(ord("0") + digit))
        if n == 0:
            break
    return "".join(reversed(digits))


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string."""
    _target(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(itoa(n))