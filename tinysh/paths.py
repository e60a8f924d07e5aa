"""Locating executables through PATH."""

from __future__ import annotations

import os
from collections.abc import Sequence

from tinysh.environment import Environment
from tinysh.textutils import split_words


def is_path(name: str | None) -> bool:
    """Return True when ``name`` starts with ``PATH``."""
    return name is not None and name.startswith("PATH")


def get_paths(env: Environment | None) -> list[str] | None:
    """Directories listed in the first PATH-like variable, or None."""
    if env is None:
        return None
    for name in env:
        if is_path(name):
            value = env.get(name)
            if value is None:
                return None
            return split_words(value, ":")
    return None


def get_path_command(command: str | None,
                     paths: Sequence[str] | None) -> str | None:
    """Resolve ``command`` to an existing path, or None."""
    if paths is None or command is None:
        return None
    if os.access(command, os.F_OK):
        return command
    for directory in paths:
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None


def is_a_binary(command: str | None) -> bool:
    """Return True for an explicit relative path such as ``./x`` or ``../x``."""
    if command is None:
        return False
    return (len(command) > 2 and command.startswith("./")) or (
        len(command) > 3 and command.startswith("../")
    )


def is_in_current_dir(command: str | None) -> bool:
    """Return True when ``command`` names something in the current directory."""
    if command is None:
        return False
    return is_a_binary(command) or "/" not in command