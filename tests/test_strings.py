import pytest

from solong.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_source_example():
    assert split(" waauyfr acerusfs bbfuerb ", " ") == ["waauyfr", "acerusfs", "bbfuerb"]


def test_split_drops_empty_pieces():
    assert split(",,a,,b,", ",") == ["a", "b"]
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_join_round_trip():
    words = ["map", "wall", "exit"]
    assert split("#".join(words), "#") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strchr_first_and_missing():
    assert strchr("hello", "l") == 2
    assert strchr("hello", "z") is None


def test_strchr_terminator_is_end():
    assert strchr("hello", "\0") == len("hello")


def test_strrchr_last_and_missing():
    assert strrchr("hello", "l") == 3
    assert strrchr("hello", "q") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strnstr_found_within_limit():
    hay = "find the needle here"
    assert strnstr(hay, "needle", len(hay)) == hay.index("needle")


def test_strnstr_not_within_limit():
    hay = "find the needle here"
    start = hay.index("needle")
    assert strnstr(hay, "needle", start + len("needle") - 1) is None
    assert strnstr(hay, "needle", start + len("needle")) == start


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_substr_cases():
    assert substr("abcdef", 2, 3) == "cde"
    assert substr("abcdef", 4, 100) == "ef"
    assert substr("abcdef", 6, 2) == ""
    assert substr("abcdef", 10, 2) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_and_none():
    assert strjoin("so", "long") == "solong"
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_both_ends():
    assert strtrim("xx--hi--xx", "x-") == "hi"
    assert strtrim("abc", "") == "abc"
    assert strtrim("aaaa", "a") == ""


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"
    assert len(result) == len("abcd")


def test_striteri_mutates_in_place():
    chars = list("abc")
    seen = []

    def visit(index, ch):
        seen.append(index)
        return ch.upper() if index == 1 else None

    assert striteri(chars, visit) is None
    assert chars == ["a", "B", "c"]
    assert seen == [0, 1, 2]


def test_strncmp_sign_and_limit():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_antisymmetric():
    assert strncmp("map", "mop", 3) == -strncmp("mop", "map", 3)


def test_strlcpy_truncates_and_reports_length():
    src = "hello world"
    copied, length = strlcpy("", src, 6)
    assert copied == src[:5]
    assert length == len(src)


def test_strlcpy_fits_and_zero_size():
    assert strlcpy("old", "hi", 10) == ("hi", 2)
    assert strlcpy("old", "hi", 0) == ("old", 2)


def test_strlcat_appends_within_size():
    result, length = strlcat("ab", "cdef", 5)
    assert result == "abcd"
    assert length == len("ab") + len("cdef")


def test_strlcat_size_not_larger_than_dst():
    result, length = strlcat("abcd", "xyz", 3)
    assert result == "abcd"
    assert length == len("xyz") + 3


def test_strlcat_full_fit():
    result, length = strlcat("so", "long", 100)
    assert result == "solong"
    assert length == len(result)