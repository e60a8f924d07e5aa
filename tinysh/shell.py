"""The interactive read-execute loop."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from datetime import datetime
from typing import TextIO

from tinysh.environment import Environment
from tinysh.errors import CHILD_LEAVING, ERROR, LEAVING, SUCCESS
from tinysh.executor import execute
from tinysh.lineedit import edit_input
from tinysh.paths import get_paths
from tinysh.textutils import split_words


def delete_backspace(line: str | None) -> str | None:
    """Cut ``line`` at its first newline; lines without one are unchanged."""
    if line is None:
        return None
    head, newline, _ = line.partition("\n")
    return head if newline else line


def format_prompt(error: int, cwd: str | None, now: datetime) -> str:
    """Build the prompt: date, last directory name, and a status arrow."""
    parts = split_words(cwd, "/")
    where = parts[-1] if parts else "/"
    arrow = "\033[0;32m" if error == SUCCESS else "\033[0;31m"
    return (f"\033[0;36m[\033[0;32m{now:%d-%m-%Y} \033[0;36m| {where}]"
            f"{arrow} ➜  \033[0m")


def _getcwd() -> str | None:
    try:
        return os.getcwd()
    except OSError:
        return None


def _read(stdin: TextIO, interactive: bool) -> str | None:
    if interactive and stdin is sys.stdin:
        return edit_input()
    line = stdin.readline()
    return line if line else None


def run_shell(environ: Iterable[str] | None, stdin: TextIO | None = None) -> int:
    """Read and run lines until end of input or ``exit``; return the status."""
    stdin = sys.stdin if stdin is None else stdin
    env = Environment.from_strings(environ)
    paths = get_paths(env)
    error = SUCCESS
    interactive = stdin.isatty()
    try:
        while True:
            if interactive:
                sys.stdout.write(format_prompt(error, _getcwd(), datetime.now()))
                sys.stdout.flush()
            line = _read(stdin, interactive)
            if line is None:
                if interactive:
                    sys.stdout.write("exit\n")
                error += LEAVING
                break
            if interactive:
                sys.stdout.write("\n")
                sys.stdout.flush()
            line = delete_backspace(line)
            if line:
                error = execute(line, env, paths, error)
            if error == CHILD_LEAVING or error >= LEAVING:
                break
    except SystemExit as exc:
        code = exc.code
        error = code if isinstance(code, int) else SUCCESS
    sys.stdout.write("\033[0m")
    sys.stdout.flush()
    return error - LEAVING if error >= LEAVING else error


def main(argv: list[str] | None = None) -> int:
    """Start the shell; it takes no arguments."""
    argv = sys.argv[1:] if argv is None else argv
    if argv:
        return ERROR
    return run_shell([f"{k}={v}" for k, v in os.environ.items()], sys.stdin)