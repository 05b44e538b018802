# SPDX-License-Identifier: MIT

from typing import Optional

from rich.text import Text

from justdoit.color import HINT_COLOR, RETRO_RULE_COLOR, RETRO_TEXT_COLOR
from justdoit.model.progress import Progress
from justdoit.view.themes.base import Theme, build_bar

BOUNDARY_FORMAT = "YYYY-MM-DD HH:mm:ss"
LABEL_WIDTH = 12
QUIT_HINT = "(Q) QUIT | (CTRL+C) ABORT"

# (highest percent in bucket, message), checked in order
STATUS_MESSAGES: list[tuple[int, str]] = [
    (10, "MISSION INITIATED. LOCK AND LOAD, SOLDIER!"),
    (25, "ENGAGING TARGET. MAINTAIN FOCUS AND DISCIPLINE."),
    (50, "BATTLE IN PROGRESS. HOLD YOUR POSITION, WARRIOR!"),
    (75, "VICTORY IS WITHIN REACH. PUSH FORWARD!"),
    (90, "ALMOST THERE, SOLDIER! HOLD YOUR POSITION."),
    (99, "FINAL ASSAULT! BREAK THROUGH THE ENEMY LINES!"),
]
ACCOMPLISHED_MESSAGE = "MISSION ACCOMPLISHED! EXCELLENT WORK, SOLDIER!"


def status_message(percent: int) -> str:
    for upper, message in STATUS_MESSAGES:
        if percent <= upper:
            return message
    return ACCOMPLISHED_MESSAGE


class RetroTheme(Theme):
    name = "retro"

    def build_lines(
        self,
        progress: Progress,
        title: Optional[str],
        width: int,
        clock: float,
    ) -> list[Text]:
        timespan = progress.timespan
        rule = "=" * width
        lines: list[Text] = []

        if title is not None:
            lines.append(
                Text(
                    f"[{title.upper()}] FOCUS SESSION INITIATED",
                    style=f"bold {RETRO_TEXT_COLOR}",
                )
            )
        lines.append(Text(rule, style=RETRO_RULE_COLOR))
        lines.append(self._labelled("[START]", timespan.format_start(BOUNDARY_FORMAT)))
        lines.append(self._labelled("[END]", timespan.format_end(BOUNDARY_FORMAT)))
        lines.append(
            self._labelled(
                "[ELAPSED]", f"{progress.percent}% | {progress.format_elapsed()}"
            )
        )
        lines.append(self._labelled("[REMAINING]", progress.format_remaining()))
        lines.append(Text(""))
        lines.append(Text("[PROGRESS]", style=RETRO_TEXT_COLOR))
        lines.append(
            Text(
                "[" + build_bar(progress.ratio, width - 2) + "]",
                style=RETRO_TEXT_COLOR,
            )
        )
        lines.append(Text(rule, style=RETRO_RULE_COLOR))
        lines.append(
            Text(
                f"STATUS: > {status_message(progress.percent)}",
                style=f"bold {RETRO_TEXT_COLOR}",
            )
        )
        lines.append(Text(rule, style=RETRO_RULE_COLOR))

        if self.show_quit_hint:
            lines.append(Text(QUIT_HINT, style=HINT_COLOR))
        return lines

    def _labelled(self, label: str, value: str) -> Text:
        return Text(f"{label:<{LABEL_WIDTH}}{value}", style=RETRO_TEXT_COLOR)
