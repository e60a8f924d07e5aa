"""Splitting a command line into arguments, honouring quotes."""

from __future__ import annotations

from collections.abc import Iterator

_QUOTES = "\"'"


class UnmatchedQuoteError(ValueError):
    """A quote in the command line is never closed."""

    def __init__(self) -> None:
        super().__init__("Unmatched '\"'.")


def _check_balanced(command: str) -> None:
    single = double = False
    for char in command:
        if char == '"' and not single:
            double = not double
        elif char == "'" and not double:
            single = not single
    if single or double:
        raise UnmatchedQuoteError()


def _words(command: str, sep: str) -> Iterator[str]:
    blanks = {sep, "\t"}
    length = len(command)
    pos = 0
    while pos < length:
        while pos < length and command[pos] in blanks:
            pos += 1
        in_quotes = False
        chars: list[str] = []
        while pos < length and (in_quotes or command[pos] not in blanks):
            char = command[pos]
            if char in _QUOTES:
                in_quotes = not in_quotes
            if in_quotes or char not in " \t":
                chars.append(char)
            pos += 1
        if chars:
            yield "".join(chars)
        pos += 1


def _clear_quotes(word: str) -> str:
    return "".join(char for char in word if char not in _QUOTES)


def crop_strings(command: str | None, sep: str = " ") -> list[str]:
    """Split ``command`` on ``sep`` and tabs, keeping quoted text together.

    Words that begin with a quote lose all their quote characters.
    Raises UnmatchedQuoteError when a quote is left open.
    """
    if command is None:
        return []
    _check_balanced(command)
    return [
        _clear_quotes(word) if word[0] in _QUOTES else word
        for word in _words(command, sep)
    ]