"""Integer parsing and formatting with C ``int``/``long`` limits."""

from __future__ import annotations

from typing import NamedTuple

from minishell.chars import is_space

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class StrtolResult(NamedTuple):
    """The parsed value and the index of the first character not consumed."""

    value: int
    end: int


def absolute(num: int) -> int:
    """Return the absolute value of ``num``."""
    return -num if num < 0 else num


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the 32-bit signed range, wrapping on overflow."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    return pos


def _read_sign(text: str, pos: int) -> tuple[int, int]:
    if pos < len(text) and text[pos] in "+-":
        return (-1 if text[pos] == "-" else 1), pos + 1
    return 1, pos


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a 32-bit ``int``.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Input with no digits yields 0. Values outside the
    32-bit range wrap around.
    """
    pos = _skip_space(text, 0)
    sign, pos = _read_sign(text, pos)
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def _digit_value(c: str, base: int) -> int | None:
    if not (c.isascii() and c.isalnum()):
        return None
    value = _DIGITS.index(c.lower())
    return value if value < base else None


def _resolve_base(text: str, pos: int, base: int) -> tuple[int, int]:
    """Return the effective base and the position where digits begin.

    An unusable base yields 0. For bases 0, 8 and 16 a leading ``0x``/``0X``
    selects hexadecimal, a leading ``0`` octal, and anything else decimal.
    """
    if base < 0 or base > 36 or base == 1:
        return 0, pos
    if base in (0, 8, 16):
        if text[pos] == "0":
            following = text[pos + 1] if pos + 1 < len(text) else ""
            if following in ("x", "X"):
                return 16, pos + 2
            return 8, pos + 1
        return 10, pos
    return base, pos


def _parse_digits(text: str, pos: int, base: int, sign: int) -> StrtolResult:
    result = 0
    while pos < len(text):
        digit = _digit_value(text[pos], base)
        if digit is None:
            break
        pos += 1
        if result > (LONG_MAX - digit) // base:
            return StrtolResult(LONG_MAX if sign == 1 else LONG_MIN, pos)
        result = result * base + digit
    if result == LONG_MAX and sign == -1:
        return StrtolResult(0, pos)
    return StrtolResult(result * sign, pos)


def strtol(text: str, base: int = 10) -> StrtolResult:
    """Parse a leading integer in ``base`` with 64-bit ``long`` saturation.

    Returns the value together with the index just past the consumed part.
    When nothing follows the whitespace and sign, the index points at the
    last character consumed. An unusable base yields 0 with the index after
    the sign.
    """
    pos = _skip_space(text, 0)
    sign, pos = _read_sign(text, pos)
    if pos >= len(text):
        return StrtolResult(0, max(pos - 1, 0))
    base, pos = _resolve_base(text, pos, base)
    if base == 0:
        return StrtolResult(0, pos)
    return _parse_digits(text, pos, base, sign)


def is_valid_integer(text: str | None, base: int = 10) -> bool:
    """True when all of ``text`` parses to a value in the 32-bit range."""
    if text is None:
        return False
    value, end = strtol(text, base)
    if end != len(text):
        return False
    return INT_MIN <= value <= INT_MAX


def is_valid_integer_str(text: str | None, base: int = 10) -> bool:
    """Like :func:`is_valid_integer`, but empty input is rejected as well."""
    if text is None:
        return False
    value, end = strtol(text, base)
    if end != len(text) or end == 0:
        return False
    return INT_MIN <= value <= INT_MAX