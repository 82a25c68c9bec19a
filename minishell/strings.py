"""Searching, comparing and bounded copying of strings.

Lengths follow NUL-terminated semantics: a string ends at its first
``"\\0"`` character, if it has one.
"""

from __future__ import annotations

from typing import NamedTuple, Union

CharLike = Union[str, int]


class BoundedCopy(NamedTuple):
    """The resulting text and the length the full operation would have produced."""

    text: str
    length: int


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _terminated(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL (or the whole length)."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return len(_terminated(s))


def strchr(s: str | None, c: CharLike) -> int | None:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for NUL yields the index of the terminator, ``strlen(s)``.
    """
    if s is None:
        return None
    ch = _char(c)
    text = _terminated(s)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str | None, c: CharLike) -> int | None:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for NUL yields the index of the terminator, ``strlen(s)``.
    """
    if s is None:
        return None
    ch = _char(c)
    text = _terminated(s)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first pair of character codes that
    differ, or 0 when the compared parts are equal.
    """
    a = _terminated(s1)
    b = _terminated(s2)
    limit = min(n, max(len(a), len(b)))
    for i in range(limit):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb:
            return ca - cb
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. ``None`` means no match lies
    entirely inside the searched region.
    """
    needle = _terminated(little)
    if not needle:
        return 0
    haystack = _terminated(big)[: max(length, 0)]
    index = haystack.find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> BoundedCopy:
    """Copy at most ``size - 1`` characters of ``src``.

    The returned length is always ``strlen(src)``, so truncation happened
    when it is not smaller than ``size``.
    """
    text = _terminated(src)
    if size <= 0:
        return BoundedCopy("", len(text))
    return BoundedCopy(text[: size - 1], len(text))


def strlcat(dest: str, src: str, size: int) -> BoundedCopy:
    """Append ``src`` to ``dest`` so the result holds at most ``size - 1`` characters.

    When ``size`` does not exceed ``strlen(dest)``, ``dest`` is unchanged and
    the length reported is ``size + strlen(src)``; otherwise it is
    ``strlen(dest) + strlen(src)``.
    """
    head = _terminated(dest)
    tail = _terminated(src)
    if size <= len(head):
        return BoundedCopy(head, size + len(tail))
    room = size - len(head) - 1
    return BoundedCopy(head + tail[:room], len(head) + len(tail))


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return "".join(_terminated(s))