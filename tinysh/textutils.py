"""Character classes, word splitting and number parsing used by the shell."""

from __future__ import annotations

from collections.abc import Iterable


def is_alpha(char: str) -> bool:
    """Return True for a single ASCII letter."""
    return len(char) == 1 and ("a" <= char <= "z" or "A" <= char <= "Z")


def is_digit(char: str) -> bool:
    """Return True for a single ASCII digit."""
    return len(char) == 1 and "0" <= char <= "9"


def is_alphanum(char: str) -> bool:
    """Return True for a single ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_identifier(text: str) -> bool:
    """Return True when every character is a letter, a digit or '_'."""
    return all(is_alphanum(char) or char == "_" for char in text)


def split_words(text: str | None, sep: str) -> list[str]:
    """Split on ``sep`` and tabs, dropping empty words."""
    if text is None:
        return []
    return [word for word in text.replace("\t", sep).split(sep) if word]


def join_words(words: Iterable[str]) -> str:
    """Join words with single spaces."""
    return " ".join(words)


def parse_number(text: str | None) -> int:
    """Parse an unsigned decimal number.

    A missing or empty text gives 0; any non-digit character gives -1.
    """
    if not text:
        return 0
    if not (text.isascii() and text.isdigit()):
        return -1
    return int(text)