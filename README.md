# minishell

This package holds the building blocks of a small shell:

- `minishell.tokens` splits a command line into words, pipes and redirections.
- `minishell.chars` classifies ASCII characters and changes their case.
- `minishell.strings` searches and compares strings and copies them with a size limit.
- `minishell.text` splits, joins, trims and maps strings.
- `minishell.numbers` parses and formats integers with C `int`/`long` limits.
- `minishell.memory` works on `bytearray` buffers.
- `minishell.output` writes characters, strings and numbers to file descriptors.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Tokenizing a command line

```python
from minishell.tokens import tokenize, TokenType, UnclosedQuoteError

for token in tokenize("cat < in.txt | grep 'a b' >> out.txt"):
    print(token.type, token.value)
```

The input is split on spaces, tabs and newlines. Each word becomes a `Token`,
and so does each `|`, `<`, `>`, `>>` and `<<`. Every token has a `TokenType`.
A quoted section becomes a single `WORD` token, and its quote characters are
kept. A quote that is never closed raises `UnclosedQuoteError`. That error is
a `ValueError`, and it has `quote` and `position` attributes.

To take one step at a time, make a `Tokenizer(text)` and call `next_token()`
until it returns a token of type `TokenType.EOF`. A `Tokenizer` can also be
iterated directly, and the iteration stops before `EOF`. `is_whitespace` and
`is_special` report which characters separate words and which characters
start an operator.

## Numbers

```python
from minishell.numbers import strtol, atoi, is_valid_integer_str

strtol("0x1A", 0)              # StrtolResult(value=26, end=4)
atoi("  -42abc")               # -42
is_valid_integer_str("99999999999")  # False: outside the 32-bit range
```

`strtol(text, base)` follows C `strtol` rules:

- Base 0 works out the base from the prefix. `0x` means hexadecimal, a
  leading `0` means octal, and anything else means decimal.
- The result is clamped to the 64-bit signed range.
- The result also gives the index just past the characters that were parsed.

`atoi` wraps its result to 32 bits.

## Strings, buffers and output

The string functions treat a `"\0"` character as the end of the string.
Searches return an index, or `None` when nothing is found. `strlcpy` and
`strlcat` return a `BoundedCopy`, which holds the resulting text and the
length that the full copy would have had.

The `memory` functions change the buffer they are given in place. A count
that runs past the end of a buffer raises `ValueError`.

The `output` functions write through `os.write` and return the number of
bytes written.

## What this package does not do

This package has no interactive prompt and no command to start. It tokenizes
command lines but does not run them. It does no parsing into commands, no
variable or quote expansion, no redirection, no pipelines, no built-in
commands, no here-documents and no signal handling.