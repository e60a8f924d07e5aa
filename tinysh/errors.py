"""Status codes and error reporting for command execution."""

from __future__ import annotations

import errno
import os
import signal
import sys

from tinysh.paths import is_a_binary, is_in_current_dir

SUCCESS = 0
SHELL_ERROR = 1
NOT_FOUND = -1
ERROR = 84
CHILD_LEAVING = 84
COMMON_COMMAND = 257
LEAVING = 2312

_RED = "\033[0;31m"
_RESET = "\033[0m"


def _report(message: str) -> None:
    sys.stderr.write(message)
    sys.stderr.flush()


def command_not_found(command: str) -> int:
    """Report an unknown command."""
    _report(f"{_RED}{command}: Command not found.{_RESET}\n")
    return SHELL_ERROR


def permission_denied(command: str) -> int:
    """Report a command that cannot be executed."""
    _report(f"{_RED}{command}: Permission denied.{_RESET}\n")
    return SHELL_ERROR


def wrong_architecture(command: str) -> int:
    """Report a file that is not a valid executable."""
    _report(f"{_RED}{command}: Exec format error. Wrong Architecture.\n")
    return SHELL_ERROR


def wrong_number_of_arguments(function: str, length: int, required: int) -> int:
    """Check an argument count; report and return 1 when it is wrong."""
    if length == required:
        return SUCCESS
    if length < required:
        _report(f"{_RED}{function}: Too few arguments.{_RESET}\n")
    else:
        _report(f"{_RED}{function}: Too many arguments.{_RESET}\n")
    return SHELL_ERROR


def error_in_command(command: str | None, path_command: str | None) -> int:
    """Check that a resolved command can be run; report why not."""
    if command is None:
        return SHELL_ERROR
    if path_command is None:
        return command_not_found(command)
    if not os.access(path_command, os.F_OK) or (
        not is_a_binary(path_command) and is_in_current_dir(path_command)
    ):
        return command_not_found(command)
    if not os.access(path_command, os.X_OK) and is_a_binary(command):
        return permission_denied(command)
    return SUCCESS


def exec_error_status(command: str, error: OSError) -> int:
    """Report a failed program start and return the child's leaving code."""
    if error.errno in (errno.EACCES, errno.EISDIR):
        permission_denied(command)
    elif error.errno == errno.ENOEXEC:
        wrong_architecture(command)
    return CHILD_LEAVING


def _segfault_text() -> str:
    try:
        return signal.strsignal(signal.SIGSEGV) or "Segmentation fault"
    except (AttributeError, ValueError):
        return "Segmentation fault"


def wait_status(status: int) -> int:
    """Turn a raw wait status into the shell's error code.

    Normal exits give 0; a segfault or floating-point fault is reported and
    gives 128 plus the status; any other signal gives 1.
    """
    if not os.WIFSIGNALED(status):
        return SUCCESS
    sig = os.WTERMSIG(status)
    if sig == signal.SIGSEGV:
        if os.WCOREDUMP(status):
            _report(f"{_RED}Segmentation fault (core dumped){_RESET}\n")
        else:
            sys.stdout.write(f"{_segfault_text()}\n")
            sys.stdout.flush()
        return status + 128 if status < 128 else status
    if sig == signal.SIGFPE:
        _report(f"{_RED}Floating exception (core dumped){_RESET}\n")
        return status + 128 if status < 128 else status
    return SHELL_ERROR