# SPDX-License-Identifier: MIT

from typing import Optional

from rich.text import Text

from justdoit.color import (
    COMPLETED_COLOR,
    DEFAULT_BAR_COLOR,
    DEFAULT_BORDER_COLOR,
    DEFAULT_LABEL_COLOR,
    DEFAULT_TITLE_COLOR,
    HINT_COLOR,
)
from justdoit.model.progress import Progress
from justdoit.view.themes.base import Theme, build_bar, spread

BAR_ROWS = 3
# Two border characters plus one padding space on each side
BOX_CHROME = 4
QUIT_HINT = "(q) quit  (ctrl+c) abort"


class DefaultTheme(Theme):
    name = "default"

    def build_lines(
        self,
        progress: Progress,
        title: Optional[str],
        width: int,
        clock: float,
    ) -> list[Text]:
        lines: list[Text] = []

        if title is not None:
            lines.append(Text(title, style=f"bold {DEFAULT_TITLE_COLOR}"))
        lines.append(Text("─" * width, style=HINT_COLOR))

        bar = build_bar(progress.ratio, width)
        for _ in range(BAR_ROWS):
            lines.append(Text(bar, style=DEFAULT_BAR_COLOR))

        lines.extend(self._build_box(progress, width))

        if progress.is_complete():
            lines.append(Text("Completed", style=f"bold {COMPLETED_COLOR}"))
        else:
            lines.append(Text(f"{progress.format_remaining()} remaining"))

        if self.show_quit_hint:
            lines.append(Text(QUIT_HINT, style=HINT_COLOR))
        return lines

    def _build_box(self, progress: Progress, width: int) -> list[Text]:
        inner_width = max(width - BOX_CHROME, 0)
        horizontal = "─" * max(width - 2, 0)
        timespan = progress.timespan

        if progress.is_complete():
            summary = "Completed"
        else:
            summary = f"{progress.format_elapsed()} / {timespan.format_total()}"

        return [
            Text("┌" + horizontal + "┐", style=DEFAULT_BORDER_COLOR),
            self._box_row(spread("Start", timespan.format_start(), inner_width)),
            self._box_row(spread("End", timespan.format_end(), inner_width)),
            self._box_row("─" * inner_width, DEFAULT_BORDER_COLOR),
            self._box_row(spread(f"{progress.percent}%", summary, inner_width)),
            Text("└" + horizontal + "┘", style=DEFAULT_BORDER_COLOR),
        ]

    def _box_row(self, content: str, style: str = DEFAULT_LABEL_COLOR) -> Text:
        return Text.assemble(
            ("│ ", DEFAULT_BORDER_COLOR),
            (content, style),
            (" │", DEFAULT_BORDER_COLOR),
        )
