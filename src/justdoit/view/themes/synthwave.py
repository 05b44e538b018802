# SPDX-License-Identifier: MIT

from typing import Optional

from rich.cells import cell_len
from rich.text import Text

from justdoit.color import (
    SYNTHWAVE_ACCENT_COLOR,
    SYNTHWAVE_BACKGROUND_COLOR,
    SYNTHWAVE_BAR_COLOR,
    SYNTHWAVE_BORDER_COLOR,
    SYNTHWAVE_TEXT_COLOR,
)
from justdoit.model.progress import Progress
from justdoit.view.themes.base import Theme, build_bar

BACKGROUND = f"on {SYNTHWAVE_BACKGROUND_COLOR}"
VERTICAL = "║"
HORIZONTAL = "═"
# Borders and spacing around the bar: "║ " + start + "  " + bar + "  " + end + " ║"
BAR_ROW_CHROME = 8
QUIT_HINT = "q quit · ctrl+c abort"


class SynthwaveTheme(Theme):
    name = "synthwave"
    background = BACKGROUND

    def build_lines(
        self,
        progress: Progress,
        title: Optional[str],
        width: int,
        clock: float,
    ) -> list[Text]:
        start = progress.timespan.format_start()
        end = progress.timespan.format_end()
        lines: list[Text] = []

        if title is not None:
            lines.append(
                self._full_width(
                    Text.assemble(
                        (HORIZONTAL, SYNTHWAVE_BORDER_COLOR),
                        " ",
                        (title.upper(), f"bold {SYNTHWAVE_TEXT_COLOR}"),
                        " ",
                        (HORIZONTAL, SYNTHWAVE_BORDER_COLOR),
                        style=BACKGROUND,
                    ),
                    width,
                )
            )
        lines.append(self._border("╔", "╗", width))
        lines.append(self._bar_row(progress, start, end, width))
        lines.append(self._info_row(progress, start, width))
        lines.append(self._border("╚", "╝", width))
        lines.append(self._message(progress, width))
        if self.show_quit_hint:
            lines.append(self._centered(Text(QUIT_HINT, style=BACKGROUND), width))
        return lines

    def _border(self, left: str, right: str, width: int) -> Text:
        return Text(
            left + HORIZONTAL * max(width - 2, 0) + right,
            style=f"{SYNTHWAVE_BORDER_COLOR} {BACKGROUND}",
        )

    def _bar_row(self, progress: Progress, start: str, end: str, width: int) -> Text:
        bar_width = max(width - cell_len(start) - cell_len(end) - BAR_ROW_CHROME, 0)
        return Text.assemble(
            (VERTICAL, SYNTHWAVE_BORDER_COLOR),
            " ",
            (start, f"bold {SYNTHWAVE_TEXT_COLOR}"),
            "  ",
            (build_bar(progress.ratio, bar_width), SYNTHWAVE_BAR_COLOR),
            "  ",
            (end, f"bold {SYNTHWAVE_TEXT_COLOR}"),
            " ",
            (VERTICAL, SYNTHWAVE_BORDER_COLOR),
            style=BACKGROUND,
        )

    def _info_row(self, progress: Progress, start: str, width: int) -> Text:
        # Indent so the info starts in the same column as the bar
        left = 1 + cell_len(start) + 2
        info = (
            f"{progress.percent}% | {progress.format_elapsed()} elapsed"
            f" | {progress.format_remaining()} remaining"
        )
        right = max(width - 2 - left - cell_len(info), 0)
        return Text.assemble(
            (VERTICAL, SYNTHWAVE_BORDER_COLOR),
            " " * left,
            (info, SYNTHWAVE_TEXT_COLOR),
            " " * right,
            (VERTICAL, SYNTHWAVE_BORDER_COLOR),
            style=BACKGROUND,
        )

    def _message(self, progress: Progress, width: int) -> Text:
        if progress.is_complete():
            symbol, message = "✔", "COMPLETED"
        else:
            symbol, message = "⚡", "KEEP THE ENERGY FLOWING"
        return self._centered(
            Text.assemble(
                (symbol, SYNTHWAVE_ACCENT_COLOR),
                " ",
                (message, f"bold {SYNTHWAVE_ACCENT_COLOR}"),
                " ",
                (symbol, SYNTHWAVE_ACCENT_COLOR),
                style=BACKGROUND,
            ),
            width,
        )

    def _centered(self, content: Text, width: int) -> Text:
        left = max(width - content.cell_len, 0) // 2
        line = Text(" " * left, style=BACKGROUND)
        line.append_text(content)
        return self._full_width(line, width)

    def _full_width(self, line: Text, width: int) -> Text:
        line.align("left", width)
        return line
