# SPDX-License-Identifier: MIT

from typing import Optional

from rich.text import Text


class Frame:
    """The styled lines of one rendered tick, top to bottom."""

    def __init__(self, lines: list[Text], background: Optional[str] = None) -> None:
        self.lines = lines
        self.background = background

    @property
    def cursor_row(self) -> int:
        """Row directly below the last rendered line."""
        return len(self.lines)

    def plain(self) -> list[str]:
        return [line.plain for line in self.lines]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return self.lines == other.lines and self.background == other.background

    def __repr__(self) -> str:
        return f"Frame(rows={self.cursor_row}, background={self.background!r})"
