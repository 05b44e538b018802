# SPDX-License-Identifier: MIT

import os
import sys
import time
from types import TracebackType
from typing import Any, Optional, TextIO

from rich.console import Console
from rich.control import Control, ControlType

from justdoit.view.frame import Frame

if sys.platform != "win32":
    import select
    import termios
    import tty

ESCAPE = "\x1b"
# Bytes following an Esc within this many seconds belong to one key
ESCAPE_SEQUENCE_TIMEOUT = 0.05
DRAIN_CHUNK = 64
# ctrl+c is not listed: cbreak mode keeps signals on, so it arrives as KeyboardInterrupt
QUIT_KEYS = frozenset({"q", "Q", ESCAPE})


class KeyReader:
    """
    Reads single key presses from the terminal without waiting for Enter.

    While entered, a POSIX terminal on stdin is switched to cbreak mode and
    restored on exit. When stdin is not a terminal, `wait` only sleeps.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._saved_attributes: Optional[list[Any]] = None

    def __enter__(self) -> "KeyReader":
        if self.is_interactive():
            fd = self._stream.fileno()
            self._saved_attributes = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        if self._saved_attributes is not None:
            termios.tcsetattr(
                self._stream.fileno(), termios.TCSADRAIN, self._saved_attributes
            )
            self._saved_attributes = None

    def is_interactive(self) -> bool:
        if sys.platform == "win32":
            return False
        try:
            return self._stream.isatty()
        except ValueError:
            # Closed or detached stream
            return False

    def wait(self, timeout: float) -> Optional[str]:
        """
        Block for up to `timeout` seconds and return the key pressed, if any.

        Keys that send escape sequences (arrows, function keys, mouse reports)
        are read in full and discarded, so only a lone Esc comes back as ESCAPE.
        """
        timeout = max(timeout, 0.0)
        if self._saved_attributes is None:
            time.sleep(timeout)
            return None

        fd = self._stream.fileno()
        if not self.__ready(fd, timeout):
            return None
        data = os.read(fd, 1)
        if not data:
            return None

        key = data.decode("utf-8", errors="replace")
        if key == ESCAPE and self.__ready(fd, ESCAPE_SEQUENCE_TIMEOUT):
            self.__drain(fd)
            return None
        return key

    def __ready(self, fd: int, timeout: float) -> bool:
        ready, _, _ = select.select([fd], [], [], timeout)
        return bool(ready)

    def __drain(self, fd: int) -> None:
        while self.__ready(fd, ESCAPE_SEQUENCE_TIMEOUT):
            if not os.read(fd, DRAIN_CHUNK):
                return


class FrameWriter:
    """Draws frames in place from the top-left corner of the screen."""

    def __init__(self, console: Console) -> None:
        self.console = console
        self._rows_drawn = 0

    def draw(self, frame: Frame) -> None:
        for row, line in enumerate(frame.lines):
            self.console.control(Control.move_to(0, row), _erase_line())
            self.console.print(line, style=frame.background or "", end="", soft_wrap=True)

        # Clear what is left of a taller previous frame
        for row in range(frame.cursor_row, self._rows_drawn):
            self.console.control(Control.move_to(0, row), _erase_line())

        self.console.control(Control.move_to(0, frame.cursor_row))
        self._rows_drawn = frame.cursor_row

    def print_final(self, frame: Frame) -> None:
        """Print a frame to the normal screen so it stays in the scrollback."""
        for line in frame.lines:
            self.console.print(line, style=frame.background or "", soft_wrap=True)


def _erase_line() -> Control:
    return Control((ControlType.ERASE_IN_LINE, 2))
