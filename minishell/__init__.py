"""Command-line tokenizer and C-style character, string, number, memory and output helpers for a small shell."""

__version__ = "0.1.0"