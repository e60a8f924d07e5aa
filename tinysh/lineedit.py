"""Interactive line editing in raw terminal mode."""

from __future__ import annotations

import codecs
import os
import sys
import termios
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

ESCAPE = "\033"
RIGHT = "\033[C"
LEFT = "\033[D"
BACK_DEL = "\x7f"
FORWARD_DEL = "~"
END_OF_TRANSMISSION = "\x04"


@dataclass
class LineBuffer:
    """The line being typed and the cursor within it.

    Every editing method returns the text to send to the terminal.
    """

    chars: list[str] = field(default_factory=list)
    cursor: int = 0

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def insert(self, char: str) -> str:
        """Insert ``char`` at the cursor; newlines and tabs are ignored."""
        if char in ("", "\n", "\t"):
            return ""
        if self.cursor == len(self.chars):
            self.chars.append(char)
            self.cursor += 1
            return char
        self.chars.insert(self.cursor, char)
        tail = "".join(self.chars[self.cursor:])
        echo = tail + LEFT * (len(self.chars) - self.cursor - 1)
        self.cursor += 1
        return echo

    def move_left(self) -> str:
        if self.cursor <= 0:
            return ""
        self.cursor -= 1
        return LEFT

    def move_right(self) -> str:
        if self.cursor >= len(self.chars):
            return ""
        self.cursor += 1
        return RIGHT

    def delete_forward(self) -> str:
        """Delete the character under the cursor."""
        if self.cursor >= len(self.chars):
            return ""
        del self.chars[self.cursor]
        tail = "".join(self.chars[self.cursor:])
        return tail + " " + LEFT * (len(tail) + 1)

    def delete_backward(self) -> str:
        """Delete the character before the cursor."""
        if self.cursor <= 0:
            return ""
        self.cursor -= 1
        del self.chars[self.cursor]
        return ("\b" + LEFT * self.cursor + self.text + " "
                + LEFT * (len(self.chars) + 1 - self.cursor))

    def end_of_line(self) -> str:
        """Move the terminal cursor to the end of the line."""
        return RIGHT * (len(self.chars) - self.cursor)


@contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """Turn off canonical mode and echo on ``fd`` for the duration."""
    original = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    raw[6][termios.VMIN] = 1
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, original)


def read_line(read_char: Callable[[], str],
              write: Callable[[str], object]) -> str | None:
    """Read one edited line, without its newline.

    ``read_char`` returns one character, or "" at end of input. Returns None
    on Ctrl-D or end of input.
    """
    buffer = LineBuffer()
    while True:
        char = read_char()
        if not char or char == END_OF_TRANSMISSION:
            return None
        if char == ESCAPE:
            read_char()
            key = read_char()
            if key == "C":
                echo = buffer.move_right()
            elif key == "D":
                echo = buffer.move_left()
            else:
                echo = ""
        elif char == FORWARD_DEL:
            echo = buffer.delete_forward()
        elif char == BACK_DEL:
            echo = buffer.delete_backward()
        else:
            echo = buffer.insert(char)
        if echo:
            write(echo)
        if char == "\n":
            break
    tail = buffer.end_of_line()
    if tail:
        write(tail)
    return buffer.text


def edit_input() -> str | None:
    """Read an edited line from the terminal on standard input."""
    fd = sys.stdin.fileno()
    decoder = codecs.getincrementaldecoder("utf-8")("replace")

    def read_char() -> str:
        while True:
            data = os.read(fd, 1)
            if not data:
                return ""
            text = decoder.decode(data)
            if text:
                return text

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    with raw_mode(fd):
        return read_line(read_char, write)