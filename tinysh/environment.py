"""The shell's environment: an ordered mapping of variable names to values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def size_first_word(word: str | None, sep: str) -> int:
    """Length of ``word`` up to the first ``sep`` (or its whole length)."""
    if word is None:
        return 0
    if not sep or sep == "\0" or sep not in word:
        return len(word)
    return word.index(sep)


def divide_line(line: str, sep: str) -> tuple[str, str]:
    """Split ``line`` at the first ``sep`` into a name and the rest."""
    name, _, rest = line.partition(sep)
    return name, rest


class Environment:
    """Ordered environment variables; a value may be None when unset."""

    def __init__(self) -> None:
        self._vars: dict[str, str | None] = {}

    @classmethod
    def from_strings(cls, entries: Iterable[str] | None) -> "Environment":
        """Build an environment from ``NAME=value`` strings."""
        env = cls()
        for line in entries or ():
            env.add_line(line)
        return env

    def add_line(self, line: str) -> None:
        """Add one ``NAME=value`` line; an earlier entry of the same name wins."""
        name, value = divide_line(line, "=")
        self._vars.setdefault(name, value)

    def get(self, name: str) -> str | None:
        """Value of ``name``, or None when it is absent or has no value."""
        return self._vars.get(name)

    def set(self, name: str, value: str | None) -> None:
        """Set ``name``, keeping its position if it already exists."""
        self._vars[name] = value

    def unset(self, name: str) -> None:
        """Remove ``name`` if present."""
        self._vars.pop(name, None)

    def to_strings(self) -> list[str]:
        """Render as ``NAME=value`` strings, in order."""
        return [f"{name}={value or ''}" for name, value in self._vars.items()]

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"Environment({self._vars!r})"