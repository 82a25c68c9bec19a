import pytest

from minishell.text import split, strjoin, strmapi, striteri, strtrim, substr


def test_split_drops_empty_pieces():
    assert split("  hello   world  ", " ") == ["hello", "world"]


def test_split_none_is_empty():
    assert split(None, " ") == []


def test_split_only_separators():
    assert split(",,,,", ",") == []


def test_split_without_separator_returns_whole():
    assert split("word", " ") == ["word"]


def test_split_stops_at_nul():
    assert split("a,b\0,c", ",") == ["a", "b"]


def test_split_accepts_int_separator():
    assert split("a:b", ord(":")) == ["a", "b"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_split_pieces_contain_no_separator():
    pieces = split("x-y--z-", "-")
    assert all("-" not in p and p for p in pieces)
    assert "".join(pieces) == "x-y--z-".replace("-", "")


def test_strjoin():
    assert strjoin("abc", "def") == "abc" + "def"


def test_strjoin_none():
    assert strjoin(None, "x") is None
    assert strjoin("x", None) is None


def test_strtrim_both_ends():
    assert strtrim("xyxhelloyx", "xy") == "hello"


def test_strtrim_everything_trimmed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_input():
    assert strtrim("", "x") == ""


def test_strtrim_empty_charset_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_none():
    assert strtrim(None, "x") is None
    assert strtrim("x", None) is None


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end():
    assert substr("hello", 10, 2) == ""


def test_substr_length_clipped():
    assert substr("hello", 2, 100) == "llo"


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_substr_none():
    assert substr(None, 0, 1) is None


def test_striteri_replaces_in_place():
    chars = list("abc")
    striteri(chars, lambda i, ch: ch.upper())
    assert "".join(chars) == "abc".upper()


def test_striteri_passes_indices_and_none_keeps():
    chars = list("abc")
    seen = []
    striteri(chars, lambda i, ch: seen.append(i))
    assert seen == list(range(len("abc")))
    assert chars == list("abc")


def test_striteri_stops_at_nul():
    chars = list("ab\0c")
    seen = []
    striteri(chars, lambda i, ch: seen.append(ch))
    assert seen == ["a", "b"]


def test_strmapi_upper():
    assert strmapi("shell", lambda i, ch: ch.upper()) == "shell".upper()


def test_strmapi_uses_index():
    assert strmapi("aaa", lambda i, ch: str(i)) == "012"


def test_strmapi_none():
    assert strmapi(None, lambda i, ch: ch) is None
    assert strmapi("abc", None) is None