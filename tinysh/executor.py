"""Running command lines: built-ins, programs, pipes and redirections."""

from __future__ import annotations

import io
import subprocess
import sys
from collections.abc import Sequence
from contextlib import ExitStack, redirect_stdout
from typing import IO

from tinysh.alias import resolve_alias
from tinysh.builtins import CD_CMD, ECHO_CMD, execute_cd, handle_echo, handle_env
from tinysh.environment import Environment
from tinysh.errors import (
    COMMON_COMMAND,
    SHELL_ERROR,
    SUCCESS,
    error_in_command,
    exec_error_status,
    wait_status,
)
from tinysh.parsing import (
    Separator,
    divide_commands,
    has_redirection,
    is_and_redir,
    is_arrow_redirection,
    is_in_right_order,
    is_multiple_semicolon,
    is_pipe,
    is_redirection,
)
from tinysh.paths import get_path_command
from tinysh.quoting import UnmatchedQuoteError, crop_strings
from tinysh.textutils import parse_number

EXIT_CMD = "exit"
_HEREDOC_PROMPT = "-> "


def _say(message: str) -> None:
    sys.stdout.write(message)
    sys.stdout.flush()


def _split(command: str) -> list[str] | None:
    try:
        return crop_strings(command, " ")
    except UnmatchedQuoteError as exc:
        _say(f"{exc}\n")
        return None


def _env_dict(env: Environment) -> dict[str, str]:
    return {name: env.get(name) or "" for name in env}


def special_command(command: Sequence[str], env: Environment,
                    error: int) -> int:
    """Run a built-in; COMMON_COMMAND means ``command`` is not one.

    ``exit`` raises SystemExit with its numeric argument.
    """
    name = command[0]
    if name == CD_CMD:
        return execute_cd(command, env)
    if name == EXIT_CMD:
        raise SystemExit(parse_number(command[1] if len(command) > 1 else None))
    if name == ECHO_CMD:
        return handle_echo(command, error, env)
    return handle_env(command, env)


def _external(command: str, paths: Sequence[str] | None, env: Environment,
              data: bytes | None, stdout: object) -> tuple[int, bytes]:
    try:
        args = crop_strings(resolve_alias(command), " ")
    except UnmatchedQuoteError as exc:
        _say(f"{exc}\n")
        return SHELL_ERROR, b""
    if not args:
        return SHELL_ERROR, b""
    path = get_path_command(args[0], paths)
    if error_in_command(args[0], path) != SUCCESS:
        return SHELL_ERROR, b""
    sys.stdout.flush()
    extra = {"input": data} if data is not None else {}
    try:
        proc = subprocess.run(args, executable=path, env=_env_dict(env),
                              stdout=stdout, check=False, **extra)
    except OSError as exc:
        exec_error_status(args[0], exc)
        return SHELL_ERROR, b""
    status = wait_status(-proc.returncode) if proc.returncode < 0 else SUCCESS
    return status, proc.stdout or b""


def common_command(command: str, paths: Sequence[str] | None,
                   env: Environment) -> int:
    """Run ``command`` as a program found through ``paths``."""
    return _external(command, paths, env, None, None)[0]


def execute_command(command: str, paths: Sequence[str] | None,
                    env: Environment, prev_err: int) -> int:
    """Run one simple command, built-in or program."""
    args = _split(command)
    if not args:
        return SUCCESS
    status = special_command(args, env, prev_err)
    if status != COMMON_COMMAND:
        return status
    return common_command(command, paths, env)


def _run_stage(command: str, paths: Sequence[str] | None, env: Environment,
               prev_err: int, data: bytes | None,
               sink: IO[bytes] | None, capture: bool) -> tuple[int, bytes]:
    args = _split(command)
    if not args:
        return SUCCESS, b""
    if sink is None and not capture:
        if data is None:
            return execute_command(command, paths, env, prev_err), b""
        status = special_command(args, env, prev_err)
        if status != COMMON_COMMAND:
            return status, b""
        return _external(command, paths, env, data, None)
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        status = special_command(args, env, prev_err)
    if status != COMMON_COMMAND:
        output = buffer.getvalue().encode()
    elif capture:
        status, output = _external(command, paths, env, data, subprocess.PIPE)
    else:
        assert sink is not None
        sink.flush()
        status, _ = _external(command, paths, env, data, sink)
        return status, b""
    if capture:
        return status, output
    assert sink is not None
    sink.write(output)
    return status, b""


def _read_here_document(stop: str) -> bytes:
    lines: list[str] = []
    _say(_HEREDOC_PROMPT)
    for line in iter(sys.stdin.readline, ""):
        if line == f"{stop}\n":
            break
        lines.append(line)
        _say(_HEREDOC_PROMPT)
    return "".join(lines).encode()


def _run_piece(command: str, redirects: list[tuple[str, str]],
               connector: str | None, paths: Sequence[str] | None,
               env: Environment, prev_err: int,
               data: bytes | None) -> tuple[int, bytes | None]:
    with ExitStack() as stack:
        sink: IO[bytes] | None = None
        try:
            for op, target in redirects:
                if op == Separator.LEFT_ARROW.value:
                    with open(target, "rb") as handle:
                        data = handle.read()
                elif op == Separator.DOUBLE_LEFT_ARROW.value:
                    data = _read_here_document(target)
                elif op == Separator.RIGHT_ARROW.value:
                    sink = stack.enter_context(open(target, "wb"))
                elif op == Separator.DOUBLE_RIGHT_ARROW.value:
                    sink = stack.enter_context(open(target, "ab"))
        except OSError:
            return SHELL_ERROR, None
        capture = is_pipe(connector)
        status, output = _run_stage(command, paths, env, prev_err, data,
                                    sink, capture)
    return status, (output if capture else None)


def _run_sequence(tokens: Sequence[str], paths: Sequence[str] | None,
                  env: Environment, prev_err: int) -> int:
    status = prev_err
    data: bytes | None = None
    skip = False
    count = len(tokens)
    index = 0
    while index < count:
        command = tokens[index]
        index += 1
        if is_redirection(command) or is_multiple_semicolon(command):
            continue
        redirects: list[tuple[str, str]] = []
        while index + 1 < count and is_arrow_redirection(tokens[index]):
            redirects.append((tokens[index], tokens[index + 1]))
            index += 2
        connector = tokens[index] if index < count else None
        index += 1
        if skip:
            skip = False
            data = None
            continue
        status, data = _run_piece(command, redirects, connector, paths, env,
                                  status, data)
        if connector is not None and is_and_redir(connector) \
                and status != SUCCESS:
            skip = True
    return status


def execute(command: str, env: Environment, paths: Sequence[str] | None,
            prev_err: int) -> int:
    """Run a whole input line and return its status."""
    if not has_redirection(command):
        return execute_command(command, paths, env, prev_err)
    if all(char in " \t;" for char in command):
        return SUCCESS
    tokens = divide_commands(command)
    if tokens is None:
        return SHELL_ERROR
    if not is_in_right_order(tokens):
        return SHELL_ERROR
    return _run_sequence(tokens, paths, env, prev_err)