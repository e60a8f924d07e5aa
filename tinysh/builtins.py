"""Built-in commands: cd, echo, env, setenv and unsetenv."""

from __future__ import annotations

import errno
import os
import sys
from collections.abc import Sequence

from tinysh.environment import Environment
from tinysh.errors import (
    COMMON_COMMAND,
    SHELL_ERROR,
    SUCCESS,
    wrong_number_of_arguments,
)
from tinysh.textutils import is_alpha, is_identifier

CD_CMD = "cd"
ENV_CMD = "env"
ECHO_CMD = "echo"
SETENV_CMD = "setenv"
UNSETENV_CMD = "unsetenv"


def _report(message: str) -> None:
    sys.stderr.write(message)
    sys.stderr.flush()


def _say(message: str) -> None:
    sys.stdout.write(message)
    sys.stdout.flush()


def _getcwd() -> str | None:
    try:
        return os.getcwd()
    except OSError:
        return None


def _chdir(path: str) -> int:
    """Change directory; 0 on success, otherwise the error number."""
    try:
        os.chdir(path)
    except OSError as exc:
        return exc.errno or errno.ENOENT
    return 0


def _swap_oldpwd(env: Environment | None) -> str | None:
    """Store the current directory in OLDPWD and return its former value.

    An empty or missing environment is left alone. When OLDPWD is absent it
    is created and None is returned.
    """
    if env is None or len(env) == 0:
        return None
    previous = env.get("OLDPWD") if "OLDPWD" in env else None
    env.set("OLDPWD", _getcwd())
    return previous


def _cd_failure(err: int, destination: str | None) -> int:
    if err == errno.ENOENT and destination not in (None, "~", "-"):
        _report(f"{destination}: No such file or directory.\n")
    if err == errno.ENOTDIR:
        _report(f"{destination}: Not a directory.\n")
    if err == errno.EACCES:
        _report(f"{destination}: Permission denied.\n")
    return SHELL_ERROR


def execute_cd(command: Sequence[str] | None, env: Environment | None) -> int:
    """Change the working directory; ``~`` or no argument goes home, ``-``
    goes back to OLDPWD."""
    if command is None:
        return SHELL_ERROR
    size = len(command)
    if size > 2:
        _report("cd: Too many arguments.\n")
        return SHELL_ERROR
    if size < 1:
        return SHELL_ERROR
    destination = command[1] if size == 2 else None
    if destination is None or destination == "~":
        _swap_oldpwd(env)
        if env is None or "HOME" not in env:
            _report("cd: No home directory.\n")
            return SHELL_ERROR
        home = env.get("HOME")
        if home is None:
            return SHELL_ERROR
        return SUCCESS if _chdir(home) == 0 else SHELL_ERROR
    if destination == "-":
        previous = _swap_oldpwd(env)
        if previous is None:
            _report(": No such file or directory.\n")
            return SHELL_ERROR
        err = _chdir(previous)
    else:
        _swap_oldpwd(env)
        err = _chdir(destination)
    if err == 0:
        return SUCCESS
    return _cd_failure(err, destination)


def execute_env(env: Environment | None,
                command: Sequence[str] | None = None) -> int:
    """Print the environment; fails when given any argument."""
    if command is not None and len(command) > 1:
        return SHELL_ERROR
    if env is not None:
        _say("".join(f"{line}\n" for line in env.to_strings()))
    return SUCCESS


def contain_error(name: str) -> bool:
    """Report and return True when ``name`` is not a valid variable name."""
    if not is_alpha(name[:1]):
        _say("setenv: Variable name must begin with a letter.\n")
        return True
    if not is_identifier(name):
        _say("setenv: Variable name must contain alphanumeric characters.\n")
        return True
    return False


def execute_setenv(env: Environment, name: str | None,
                   value: str | None = None) -> int:
    """Set ``name`` to ``value`` after checking the name."""
    if name is None or contain_error(name):
        return SHELL_ERROR
    env.set(name, value)
    return SUCCESS


def execute_unsetenv(env: Environment | None, args: Sequence[str]) -> int:
    """Remove every variable named after the command word.

    A ``*`` among the names makes the whole command do nothing.
    """
    names = list(args[1:])
    if "*" in names:
        return SUCCESS
    if env is not None:
        for name in names:
            env.unset(name)
    return SUCCESS


def handle_env(command: Sequence[str], env: Environment) -> int:
    """Run env, setenv or unsetenv; other commands give COMMON_COMMAND."""
    count = len(command)
    name = command[0]
    if name == ENV_CMD:
        return execute_env(env, command)
    if name == SETENV_CMD:
        if count in (2, 3):
            value = command[2] if count == 3 else None
            return execute_setenv(env, command[1], value)
        if count == 1:
            return execute_env(env, None)
        return wrong_number_of_arguments(name, count, 3)
    if name == UNSETENV_CMD:
        if count >= 2:
            return execute_unsetenv(env, command)
        return wrong_number_of_arguments(name, count, 2)
    return COMMON_COMMAND


def handle_echo(command: Sequence[str], error: int,
                env: Environment | None) -> int:
    """Handle ``echo $?`` and ``echo $VAR``; anything else is left to the
    system's echo by returning COMMON_COMMAND."""
    if len(command) < 2:
        return COMMON_COMMAND
    argument = command[1]
    if argument == "$?":
        _say(f"{error}\n")
        return SUCCESS
    if argument.startswith("$") and env is not None:
        name = argument[1:]
        if name in env:
            _say(f"{env.get(name) or ''}\n")
            return SUCCESS
    return COMMON_COMMAND