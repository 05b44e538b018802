# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Optional

from rich.text import Text

from justdoit.model.progress import Progress
from justdoit.rounding import round_half_up
from justdoit.view.frame import Frame

FILLED_GLYPH = "█"
EMPTY_GLYPH = "░"


class Theme(ABC):
    name: str = ""
    background: Optional[str] = None
    # Animated themes are redrawn between ticks by the session loop
    animated: bool = False

    def __init__(self, show_quit_hint: bool = True) -> None:
        self.show_quit_hint = show_quit_hint

    def render(
        self,
        progress: Progress,
        title: Optional[str],
        width: int,
        clock: float = 0.0,
    ) -> Frame:
        """
        Render one frame for the given progress snapshot.

        Args:
            progress: The snapshot to draw
            title: Optional session title
            width: Terminal width in cells, sampled by the caller for this frame
            clock: Seconds since the session started, used by animated themes

        Returns:
            A frame whose lines are each at most `width` cells wide
        """
        width = max(width, 0)
        lines = self.build_lines(progress, title, width, clock)
        for line in lines:
            line.truncate(width)
        return Frame(lines, background=self.background)

    @abstractmethod
    def build_lines(
        self,
        progress: Progress,
        title: Optional[str],
        width: int,
        clock: float,
    ) -> list[Text]: ...


def filled_cells(ratio: float, width: int) -> int:
    return min(max(round_half_up(ratio * width), 0), width)


def build_bar(ratio: float, width: int) -> str:
    """A bar of exactly `width` glyphs, filled in proportion to `ratio`."""
    width = max(width, 0)
    filled = filled_cells(ratio, width)
    return FILLED_GLYPH * filled + EMPTY_GLYPH * (width - filled)


def spread(left: str, right: str, width: int) -> str:
    """Left-align `left` and right-align `right` in exactly `width` cells."""
    gap = max(width - len(left) - len(right), 1)
    return (left + " " * gap + right)[:width].ljust(width)
