"""Command aliases read from a startup file."""

from __future__ import annotations

import contextlib
import os

from tinysh.textutils import split_words

DEFAULT_RC_FILE = ".zshrc"


def _read_rc(rc_file: str | os.PathLike[str]) -> str | None:
    try:
        fd = os.open(rc_file, os.O_CREAT | os.O_RDONLY, 0o644)
    except OSError:
        return None
    try:
        handle = os.fdopen(fd, "rb")
    except OSError:
        with contextlib.suppress(OSError):
            os.close(fd)
        return None
    try:
        with handle:
            data = handle.read()
    except OSError:
        return None
    return data.decode("utf-8", errors="replace")


def resolve_alias(command: str,
                  rc_file: str | os.PathLike[str] = DEFAULT_RC_FILE) -> str:
    """Replace ``command`` by its alias from ``rc_file``.

    Aliases are lines of the form ``name = replacement``; the first one whose
    name is the whole command wins. The file is created empty when missing.
    Without a readable file or a matching line the command is returned as is.
    """
    content = _read_rc(rc_file)
    if content is None:
        return command
    prefix = f"{command} = "
    for line in split_words(content, "\n"):
        if line.startswith(prefix):
            return line[len(prefix):]
    return command