"""Writing characters, strings and numbers to file descriptors.

Write failures are not reported as errors; each function returns how
many bytes reached the descriptor.
"""

from __future__ import annotations

import os
from typing import Union

_ENCODING = "utf-8"


def _write(fd: int, data: bytes) -> int:
    try:
        return os.write(fd, data)
    except OSError:
        return 0


def putchar_fd(c: Union[str, int], fd: int) -> int:
    """Write one character (or one byte given as an int) to ``fd``."""
    if isinstance(c, int):
        data = bytes([c & 0xFF])
    elif isinstance(c, str) and len(c) == 1:
        data = c.encode(_ENCODING)
    else:
        raise ValueError(f"expected a single character, got {c!r}")
    return _write(fd, data)


def putstr_fd(s: str | None, fd: int) -> int:
    """Write ``s`` to ``fd``; nothing is written for ``None`` or descriptor 0."""
    if s is None or not fd:
        return 0
    return _write(fd, s.encode(_ENCODING))


def putendl_fd(s: str | None, fd: int) -> int:
    """Write ``s`` followed by a newline; nothing for ``None`` or descriptor 0."""
    if s is None or not fd:
        return 0
    return _write(fd, s.encode(_ENCODING)) + _write(fd, b"\n")


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of ``n`` to ``fd``."""
    return sum(putchar_fd(ch, fd) for ch in str(n))