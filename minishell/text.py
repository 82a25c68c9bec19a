"""Splitting, joining, trimming and mapping strings.

Strings follow NUL-terminated semantics: anything after the first
``"\\0"`` character is ignored.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

from minishell.strings import strdup

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def split(s: Optional[str], c: CharLike) -> list[str]:
    """Split ``s`` on the separator ``c``, dropping empty pieces.

    ``None`` yields an empty list.
    """
    if s is None:
        return []
    sep = _char(c)
    text = strdup(s)
    if sep == "\0":
        return [text] if text else []
    return [part for part in text.split(sep) if part]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; ``None`` if either is missing."""
    if s1 is None or s2 is None:
        return None
    return strdup(s1) + strdup(s2)


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s``.

    Returns ``None`` if either argument is missing.
    """
    if s is None or charset is None:
        return None
    return strdup(s).strip(strdup(charset))


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end of ``s`` yields an empty string.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``func(index, char)`` for each character of ``chars`` in place.

    Iteration stops at the first NUL. When ``func`` returns a character,
    it replaces the one at that index; ``None`` leaves it unchanged.
    """
    if chars is None or func is None:
        return
    for index, ch in enumerate(list(chars)):
        if ch == "\0":
            break
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strmapi(
    s: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new string from ``func(index, char)`` for each character of ``s``."""
    if s is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(strdup(s)))