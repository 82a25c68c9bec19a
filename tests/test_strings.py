import pytest

from minishell.strings import (
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_counts_characters():
    assert strlen("hello") == len("hello")
    assert strlen("") == 0


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == len("ab")


def test_strlen_rejects_none():
    with pytest.raises(TypeError):
        strlen(None)


def test_strchr_finds_first():
    text = "hello"
    assert strchr(text, "l") == text.index("l")
    assert strchr(text, ord("h")) == 0


def test_strchr_nul_returns_terminator_index():
    assert strchr("hello", "\0") == len("hello")


def test_strchr_missing_and_none():
    assert strchr("hello", "z") is None
    assert strchr(None, "a") is None


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("hello", "he")


def test_strrchr_finds_last():
    text = "hello"
    assert strrchr(text, "l") == text.rindex("l")
    assert strrchr(text, "\0") == len(text)
    assert strrchr(text, "q") is None
    assert strrchr(None, "l") is None


@pytest.mark.parametrize("word", ["abc", "", "minishell"])
def test_strncmp_equal_is_zero(word):
    assert strncmp(word, word, len(word) + 5) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) < 0


def test_strncmp_limited_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("x", "y", 0) == 0


def test_strnstr_found_within_length():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", len(big)) == big.index("Bar")


def test_strnstr_match_must_fit():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", big.index("Bar") + 2) is None
    assert strnstr(big, "Bar", big.index("Bar") + 3) == big.index("Bar")


def test_strnstr_empty_needle_and_missing():
    assert strnstr("anything", "", 0) == 0
    assert strnstr("Foo", "zzz", 3) is None


def test_strlcpy_truncates():
    result = strlcpy("hello", 3)
    assert result.text == "he"
    assert result.length == len("hello")


def test_strlcpy_full_copy_and_zero_size():
    assert strlcpy("hello", 10) == ("hello", 5)
    assert strlcpy("hello", 0).length == len("hello")


def test_strlcat_appends_when_room():
    result = strlcat("ab", "cd", 10)
    assert result.text == "abcd"
    assert result.length == len("abcd")


def test_strlcat_truncates_to_size():
    result = strlcat("ab", "cdef", 4)
    assert len(result.text) == 4 - 1
    assert result.text.startswith("ab")
    assert result.length == len("ab") + len("cdef")


def test_strlcat_size_not_beyond_dest():
    result = strlcat("abc", "de", 2)
    assert result.text == "abc"
    assert result.length == 2 + len("de")


def test_strdup_copies():
    assert strdup("minishell") == "minishell"
    assert strdup("") == ""
    assert strdup("ab\0cd") == "ab"


def test_strdup_rejects_none():
    with pytest.raises(TypeError):
        strdup(None)