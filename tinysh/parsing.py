"""Splitting a request into commands and separators, and checking their order."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from enum import Enum
from itertools import zip_longest

from tinysh.textutils import join_words, split_words


class Separator(str, Enum):
    """Tokens that separate or redirect commands."""

    SEMICOLON = ";"
    PIPE = "|"
    AND_AND = "&&"
    RIGHT_ARROW = ">"
    LEFT_ARROW = "<"
    DOUBLE_RIGHT_ARROW = ">>"
    DOUBLE_LEFT_ARROW = "<<"


_SEPARATORS = frozenset(separator.value for separator in Separator)
_ARROWS = frozenset({
    Separator.RIGHT_ARROW.value,
    Separator.LEFT_ARROW.value,
    Separator.DOUBLE_RIGHT_ARROW.value,
    Separator.DOUBLE_LEFT_ARROW.value,
})
_REDIR_CHARS = frozenset("><;|&")
_CHUNK = re.compile(r"[><;|&]+|[^><;|&]+")

_AMBIGUOUS = "Ambiguous output redirect.\n"
_MISSING_NAME = "Missing name for redirect.\n"
_INVALID_NULL = "Invalid null command.\n"


def _complain(message: str) -> bool:
    sys.stderr.write(message)
    sys.stderr.flush()
    return False


def is_char_redir(char: str) -> bool:
    """Return True for a character that starts a separator."""
    return char in _REDIR_CHARS


def has_redirection(text: str | None) -> bool:
    """Return True when ``text`` holds any separator character."""
    if text is None:
        return False
    return any(is_char_redir(char) for char in text)


def is_and_redir(token: str | None) -> bool:
    """Return True when ``token`` is made only of '&'."""
    if token is None:
        return False
    return all(char == "&" for char in token)


def is_pipe(token: str | None) -> bool:
    """Return True for a pipe token."""
    return token == Separator.PIPE.value


def is_semicolon(token: str | None) -> bool:
    """Return True for a single semicolon."""
    return token == Separator.SEMICOLON.value


def is_multiple_semicolon(token: str | None) -> bool:
    """Return True when ``token`` is made only of semicolons."""
    if token is None:
        return False
    return all(char == ";" for char in token)


def is_right_arrow(token: str | None) -> bool:
    """Return True for '>'."""
    return token == Separator.RIGHT_ARROW.value


def is_left_arrow(token: str | None) -> bool:
    """Return True for '<'."""
    return token == Separator.LEFT_ARROW.value


def is_arrow_redirection(token: str | None) -> bool:
    """Return True for '>', '<', '>>' or '<<'."""
    return token in _ARROWS


def is_redirection(token: str | None) -> bool:
    """Return True for any known separator token."""
    return token in _SEPARATORS


def is_final_command(token: str | None) -> bool:
    """Return True at the end of a command list or at a run of semicolons."""
    return token is None or is_multiple_semicolon(token)


def prev_is_command(index: int, text: str) -> bool:
    """Return True when a word lies between ``index`` and the previous separator.

    Position 0 itself is never looked at.
    """
    for position in range(index, 0, -1):
        char = text[position]
        if is_char_redir(char):
            return False
        if char != " ":
            return True
    return False


def count_commands(request: str | None) -> int:
    """Count the commands and separators that ``request`` holds."""
    if request is None:
        return 0
    size = 0
    pairs = zip_longest(request, request[1:], fillvalue="")
    for index, (char, following) in enumerate(pairs):
        here = is_char_redir(char)
        there = is_char_redir(following)
        if not here and there and prev_is_command(index, request):
            size += 1
        if here and not there:
            size += 1
        if not here and not following and char != " ":
            size += 1
    return size


def divide_commands(request: str | None) -> list[str] | None:
    """Split a request into commands and separator tokens.

    Whitespace is collapsed, each command is stripped, and runs of separator
    characters form one token. Returns None when there is nothing to divide.
    """
    if request is None:
        return None
    cleared = join_words(split_words(request, " "))
    if not cleared:
        return None
    chunks = (chunk.strip(" ") for chunk in _CHUNK.findall(cleared))
    return [chunk for chunk in chunks if chunk]


def _at(commands: Sequence[str], index: int) -> str | None:
    return commands[index] if 0 <= index < len(commands) else None


def is_not_ambiguous(commands: Sequence[str]) -> bool:
    """Reject an arrow followed by another arrow or a pipe, and a pipe
    followed directly by a separator."""
    last_sep: str | None = None
    for index, token in enumerate(commands):
        if is_arrow_redirection(last_sep) and (
            is_arrow_redirection(token) or is_pipe(token)
        ):
            return _complain(_AMBIGUOUS)
        if is_redirection(token):
            last_sep = token
        if is_pipe(token) and is_redirection(_at(commands, index + 1)):
            return _complain(_INVALID_NULL)
    return True


def is_in_right_order(commands: Sequence[str]) -> bool:
    """Check that separators and commands alternate sensibly.

    Problems are reported on standard error and give False.
    """
    commands = list(commands)
    if not commands:
        return _complain(_INVALID_NULL)
    first = commands[0]
    second = _at(commands, 1)
    if is_arrow_redirection(first) and (
        is_redirection(second) or second is None
    ):
        return _complain(_MISSING_NAME)
    if is_redirection(first) and not is_final_command(first):
        return _complain(_INVALID_NULL)
    for index in range(1, len(commands)):
        if not is_redirection(commands[index]):
            continue
        before = commands[index - 1]
        after = _at(commands, index + 1)
        if (is_redirection(before) and not is_semicolon(before)) or (
            is_redirection(after) and not is_semicolon(after)
        ):
            return _complain(_INVALID_NULL)
    last = commands[-1]
    if is_arrow_redirection(last):
        return _complain(_MISSING_NAME)
    if is_pipe(last):
        return _complain(_INVALID_NULL)
    return is_not_ambiguous(commands)