"""String helpers: splitting, searching, slicing, trimming and bounded copies."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple

_TERMINATOR = "\0"


def _single_char(c: str, what: str = "character") -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single {what}, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(s: str, sep: str) -> list[str]:
    """Split on a separator character, dropping empty pieces."""
    _single_char(sep, "separator character")
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first occurrence of a character, or None.

    Searching for the NUL character finds the end of the string.
    """
    _single_char(c)
    index = s.find(c)
    if index >= 0:
        return index
    if c == _TERMINATOR:
        return len(s)
    return None


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last occurrence of a character, or None.

    Searching for the NUL character finds the end of the string.
    """
    _single_char(c)
    if c == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first needle lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings; neither may be None."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return first + second


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        raise TypeError("both the string and the character set are required")
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each element of a mutable character sequence.

    A return value other than None replaces the element in place.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing code points (a missing
    character counts as 0), or 0 when the compared parts are equal.
    """
    _non_negative(n, "n")
    for index in range(min(n, max(len(first), len(second)))):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
    return 0


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination holding ``size`` slots including the terminator.

    Returns the new destination and the full length of ``src``. With a size of
    0 the destination is left unchanged.
    """
    _non_negative(size, "size")
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within ``size`` slots including the terminator.

    Returns the new destination and the length the full result would have had.
    When ``size`` does not exceed the length of ``dst`` nothing is appended
    and the returned length is ``len(src) + size``.
    """
    _non_negative(size, "size")
    dest_len = len(dst)
    src_len = len(src)
    if size <= dest_len:
        return dst, src_len + size
    room = size - 1 - dest_len
    return dst + src[:room], dest_len + src_len