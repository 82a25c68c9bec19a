"""Splitting a command line into words, pipes and redirections."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from minishell.strings import strdup

PROMPT = "weneedtherapy% "

_QUOTES = "'\""
_WHITESPACE = " \t\n"
_SPECIAL = "|<>"


class TokenType(IntEnum):
    """Kinds of token produced by the tokenizer."""

    WORD = 0
    PIPE = 1
    REDIR_IN = 2
    REDIR_OUT = 3
    APPEND = 4
    HEREDOC = 5
    EOF = 6
    ERROR = 7


class CommandType(IntEnum):
    """Roles a piece of a command line can play."""

    EXE = 0
    FILENAME = 1
    SINGLE_RD_IN = 2
    DOUBLE_RD_IN = 3
    SINGLE_RD_OUT = 4
    HEREDOC = 5
    PIPE = 6
    DOUBLE_QUOTE = 7
    SINGLE_QUOTE = 8
    DOLLAR_SIGN = 9


@dataclass(frozen=True)
class Token:
    """One token: its text (``None`` for end of input) and its kind."""

    value: Optional[str]
    type: TokenType


class UnclosedQuoteError(ValueError):
    """Raised when a quoted section is not closed before the input ends."""

    def __init__(self, quote: str, position: int) -> None:
        super().__init__(f"unclosed quotes: {quote} opened at position {position}")
        self.quote = quote
        self.position = position


def is_whitespace(c: str) -> bool:
    """True for a space, tab or newline."""
    return len(c) == 1 and c in _WHITESPACE


def is_special(c: str) -> bool:
    """True for a pipe or a redirection character."""
    return len(c) == 1 and c in _SPECIAL


def _is_word_char(c: str) -> bool:
    return not (is_whitespace(c) or is_special(c) or c in _QUOTES)


class Tokenizer:
    """Reads tokens one at a time from a command line.

    Input ends at its first NUL character, if it has one.
    """

    def __init__(self, text: str) -> None:
        self.input = strdup(text)
        self.position = 0

    def _peek(self, offset: int = 0) -> str:
        index = self.position + offset
        return self.input[index] if index < len(self.input) else ""

    def skip_whitespace(self) -> None:
        """Advance past spaces, tabs and newlines."""
        while self._peek() and is_whitespace(self._peek()):
            self.position += 1

    def handle_quote(self) -> str:
        """Read a quoted section, quotes included.

        Raises :class:`UnclosedQuoteError` if the closing quote is missing.
        """
        start = self.position
        quote = self.input[start]
        end = self.input.find(quote, start + 1)
        if end < 0:
            self.position = len(self.input)
            raise UnclosedQuoteError(quote, start)
        self.position = end + 1
        return self.input[start : end + 1]

    def handle_special(self) -> Token:
        """Read a pipe or redirection operator."""
        c = self._peek()
        following = self._peek(1)
        if c == "|":
            kind = TokenType.PIPE
        elif c == "<" and following == "<":
            kind = TokenType.HEREDOC
        elif c == ">" and following == ">":
            kind = TokenType.APPEND
        elif c == "<":
            kind = TokenType.REDIR_IN
        elif c == ">":
            kind = TokenType.REDIR_OUT
        else:
            kind = TokenType.ERROR
        value = c * 2 if kind in (TokenType.HEREDOC, TokenType.APPEND) else c
        self.position += len(value) if value else 1
        return Token(value, kind)

    def next_token(self) -> Token:
        """Return the next token, or an ``EOF`` token at the end of input."""
        self.skip_whitespace()
        c = self._peek()
        if not c:
            return Token(None, TokenType.EOF)
        if c in _QUOTES:
            return Token(self.handle_quote(), TokenType.WORD)
        if is_special(c):
            return self.handle_special()
        start = self.position
        while self._peek() and _is_word_char(self._peek()):
            self.position += 1
        return Token(self.input[start : self.position], TokenType.WORD)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token.type is TokenType.EOF:
                return
            yield token


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, without the final ``EOF``.

    Raises :class:`UnclosedQuoteError` for an unterminated quote.
    """
    return list(Tokenizer(text))