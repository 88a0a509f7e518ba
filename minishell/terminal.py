"""Raw-mode terminal line reading: key decoding, cursor queries and echo."""

from __future__ import annotations

import enum
import os
import re
import sys
import termios
from typing import TextIO

from minishell.history import History
from minishell.strutil import is_print

GREEN = "\033[1;32m"
RESET = "\033[0m"
PROMPT_TEXT = "minishell$ "
CURSOR_QUERY = b"\033[6n"
_READ_SIZE = 6
_REPLY_SIZE = 19
_CURSOR_REPLY = re.compile(r"(\d+)[^;]*;\D*(\d+)")


class Key(enum.Enum):
    """Special keys recognised by the line reader, by the bytes they send."""

    UP = b"\x1b[A"
    DOWN = b"\x1b[B"
    ENTER = b"\n"
    BACKSPACE = b"\x7f"
    CTRL_C = b"\x03"
    CTRL_D = b"\x04"


_KEYS = {key.value: key for key in Key}


def decode_key(data: bytes) -> Key | str | None:
    """Decode one read from the terminal.

    Returns a Key for a special key, the character for a single printable
    byte, and None for anything else.
    """
    data = bytes(data)
    key = _KEYS.get(data)
    if key is not None:
        return key
    if len(data) == 1 and is_print(data[0]):
        return chr(data[0])
    return None


def parse_cursor_report(reply: bytes | str) -> tuple[int, int]:
    """Parse a ``ESC [ row ; col R`` cursor report into ``(row, col)``."""
    text = reply.decode("latin-1") if isinstance(reply, bytes) else reply
    match = _CURSOR_REPLY.search(text)
    if match is None:
        raise ValueError(f"not a cursor position report: {text!r}")
    return int(match.group(1)), int(match.group(2))


def prompt() -> str:
    """The coloured shell prompt."""
    return f"{GREEN}{PROMPT_TEXT}{RESET}"


class RawMode:
    """Context manager turning off echo, canonical input and signal keys on a terminal."""

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._saved: list | None = None

    def __enter__(self) -> RawMode:
        self._saved = termios.tcgetattr(self.fd)
        attrs = termios.tcgetattr(self.fd)
        attrs[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG)
        termios.tcsetattr(self.fd, termios.TCSANOW, attrs)
        return self

    def __exit__(self, *exc_info: object) -> bool:
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSANOW, self._saved)
            self._saved = None
        return False


class LineReader:
    """Reads one line at a time from a terminal, with history and echo.

    ``status`` becomes 1 when a line is interrupted and 127 when input ends.
    """

    def __init__(
        self,
        history: History | None = None,
        output: TextIO | None = None,
        fd: int | None = None,
    ) -> None:
        self.history = history if history is not None else History()
        self.output = output if output is not None else sys.stdout
        self.fd = fd
        self.status = 0
        self.cursor = (1, 1)
        self.last_line: str | None = None
        self._editing = False

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def _redraw(self) -> None:
        row, col = self.cursor
        self._write(f"\033[{row};{col}H\033[J{self.history.current_text()}")

    def _stop(self) -> None:
        self._editing = False

    def feed(self, data: bytes) -> bool:
        """Handle one read from the terminal.

        Returns True once the line is finished; the line, or None for an empty
        or interrupted one, is then in ``last_line``. Raises EOFError when
        end of input is typed on an empty line.
        """
        if not self._editing:
            self.history.start_line()
            self._editing = True
            self.last_line = None
        key = decode_key(data)
        if key is Key.UP:
            self.history.up()
            self._redraw()
        elif key is Key.DOWN:
            self.history.down()
            self._redraw()
        elif key is Key.ENTER:
            self.last_line = self.history.submit()
            self._stop()
            self._write("\n")
            return True
        elif key is Key.BACKSPACE:
            if self.history.current_text():
                self.history.backspace()
                self._redraw()
        elif key is Key.CTRL_C:
            self.history.cancel()
            self._stop()
            self.last_line = None
            self.status = 1
            self._write("\n")
            return True
        elif key is Key.CTRL_D:
            if not self.history.current_text():
                self.history.cancel()
                self._stop()
                self.status = 127
                self._write("exit")
                raise EOFError("exit")
        elif isinstance(key, str):
            self.history.type_char(key)
            self._redraw()
        return False

    def _query_cursor(self, fd: int) -> tuple[int, int]:
        os.write(fd, CURSOR_QUERY)
        reply = os.read(fd, _REPLY_SIZE)
        try:
            return parse_cursor_report(reply)
        except ValueError:
            return self.cursor

    def read_line(self) -> str | None:
        """Read one line from the terminal in raw mode.

        Returns the line, or None for an empty or interrupted one. Raises
        EOFError when input ends.
        """
        fd = self.fd
        owned = fd is None
        if owned:
            fd = os.open(os.ttyname(sys.stdout.fileno()), os.O_RDWR)
        try:
            with RawMode(fd):
                self.cursor = self._query_cursor(fd)
                while True:
                    data = os.read(fd, _READ_SIZE)
                    if not data:
                        if self._editing:
                            self.history.cancel()
                            self._stop()
                        raise EOFError("end of input")
                    if self.feed(data):
                        return self.last_line
        finally:
            if owned:
                os.close(fd)