# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

from rich.text import Text

from justdoit.color import (
    HINT_COLOR,
    HOURGLASS_DROPLET_COLOR,
    HOURGLASS_EMPTY_COLOR,
    HOURGLASS_FRAME_COLOR,
    HOURGLASS_SAND_COLOR,
)
from justdoit.model.progress import Progress
from justdoit.rounding import round_half_up
from justdoit.view.themes.base import EMPTY_GLYPH, FILLED_GLYPH, Theme

# Geometry
INNER_WIDTH = 9
TOP_RESERVOIR_ROWS = 5
BOTTOM_RESERVOIR_ROWS = 4
TOP_FUNNEL_WIDTHS = (7, 5, 3, 1)
BOTTOM_FUNNEL_WIDTHS = (3, 5, 7, 9)
NECK_INDENT = 4
CENTER_COLUMN = 1 + INNER_WIDTH // 2

# Sections of the glass, top to bottom
TOP_RESERVOIR = "top_reservoir"
TOP_FUNNEL = "top_funnel"
NECK = "neck"
BOTTOM_FUNNEL = "bottom_funnel"
BOTTOM_RESERVOIR = "bottom_reservoir"

SECTION_WIDTHS: dict[str, tuple[int, ...]] = {
    TOP_RESERVOIR: (INNER_WIDTH,) * TOP_RESERVOIR_ROWS,
    TOP_FUNNEL: TOP_FUNNEL_WIDTHS,
    NECK: (1,),
    BOTTOM_FUNNEL: BOTTOM_FUNNEL_WIDTHS,
    BOTTOM_RESERVOIR: (INNER_WIDTH,) * BOTTOM_RESERVOIR_ROWS,
}
TOP_SECTIONS = (TOP_RESERVOIR, TOP_FUNNEL)
BOTTOM_SECTIONS = (NECK, BOTTOM_FUNNEL, BOTTOM_RESERVOIR)

# Glyphs
SAND = FILLED_GLYPH
EMPTY = EMPTY_GLYPH
DROPLET = "┋"
TRAIL = "┊"
BORDER_TOP = ("┏", "━", "┓")
BORDER_BOTTOM = ("┗", "━", "┛")
BORDER_SIDE = "┃"

DROPLET_STEP_MS = 500
QUIT_HINT = "(q) quit  (ctrl+c) abort"
DIVIDER = "|"

# (section, row, column)
Cell = tuple[str, int, int]
Grid = dict[str, list[list[str]]]


def center_out(width: int) -> list[int]:
    """Column indices of a row ordered from the center outward, left first."""
    middle = width // 2
    order = [middle]
    for offset in range(1, middle + 1):
        order.append(middle - offset)
        if middle + offset < width:
            order.append(middle + offset)
    return order


def _cells(section: str, rows: Iterable[int]) -> list[Cell]:
    return [
        (section, row, column)
        for row in rows
        for column in center_out(SECTION_WIDTHS[section][row])
    ]


def bottom_fill_order() -> list[Cell]:
    """Reservoir from the floor up, then the funnel toward the neck, then the neck."""
    return (
        _cells(BOTTOM_RESERVOIR, reversed(range(BOTTOM_RESERVOIR_ROWS)))
        + _cells(BOTTOM_FUNNEL, reversed(range(len(BOTTOM_FUNNEL_WIDTHS))))
        + _cells(NECK, [0])
    )


def top_empty_order() -> list[Cell]:
    """Reservoir from the top down, then the funnel toward the neck."""
    return _cells(TOP_RESERVOIR, range(TOP_RESERVOIR_ROWS)) + _cells(
        TOP_FUNNEL, range(len(TOP_FUNNEL_WIDTHS))
    )


BOTTOM_FILL_ORDER = bottom_fill_order()
TOP_EMPTY_ORDER = top_empty_order()
# Both halves hold the same amount of sand
CAPACITY = len(TOP_EMPTY_ORDER)

# Center cells the droplet falls through, from the neck down
DROPLET_PATH: list[tuple[str, int]] = (
    [(NECK, 0)]
    + [(BOTTOM_FUNNEL, row) for row in range(len(BOTTOM_FUNNEL_WIDTHS))]
    + [(BOTTOM_RESERVOIR, row) for row in range(BOTTOM_RESERVOIR_ROWS)]
)


def sand_to_move(ratio: float) -> int:
    return min(max(round_half_up(ratio * CAPACITY), 0), CAPACITY)


def build_grid(filled: int) -> Grid:
    """
    Lay out the sand after `filled` cells have fallen.

    The same count empties the top half and fills the bottom half, so the
    amount of sand in the glass is conserved.
    """
    grid: Grid = {}
    for section, widths in SECTION_WIDTHS.items():
        glyph = SAND if section in TOP_SECTIONS else EMPTY
        grid[section] = [[glyph] * width for width in widths]

    for section, row, column in BOTTOM_FILL_ORDER[:filled]:
        grid[section][row][column] = SAND
    for section, row, column in TOP_EMPTY_ORDER[:filled]:
        grid[section][row][column] = EMPTY
    return grid


def overlay_droplet(grid: Grid, clock: float) -> None:
    """
    Draw the falling droplet into the empty center cells above the sand.

    The droplet position advances every DROPLET_STEP_MS of wall-clock time,
    independent of the ratio, so it keeps moving between ratio changes.
    """
    path: list[Cell] = []
    for section, row in DROPLET_PATH:
        cells = grid[section][row]
        center = len(cells) // 2
        if cells[center] == SAND:
            break
        path.append((section, row, center))

    if not path:
        return

    step = (int(max(clock, 0.0) * 1000) // DROPLET_STEP_MS) % len(path)
    for index, (section, row, column) in enumerate(path):
        grid[section][row][column] = DROPLET if index == step else TRAIL


def glass_rows(grid: Grid) -> list[str]:
    """The hourglass drawing, one string per row, centered on CENTER_COLUMN."""
    rows: list[str] = []
    left, horizontal, right = BORDER_TOP
    rows.append(left + horizontal * INNER_WIDTH + right)

    for cells in grid[TOP_RESERVOIR]:
        rows.append(_boxed(cells, 0))
    for index, cells in enumerate(grid[TOP_FUNNEL]):
        rows.append(_boxed(cells, 1 + index))
    rows.append(_boxed(grid[NECK][0], NECK_INDENT))
    for index, cells in enumerate(grid[BOTTOM_FUNNEL]):
        rows.append(_boxed(cells, len(BOTTOM_FUNNEL_WIDTHS) - 1 - index))
    for cells in grid[BOTTOM_RESERVOIR]:
        rows.append(_boxed(cells, 0))

    left, horizontal, right = BORDER_BOTTOM
    rows.append(left + horizontal * INNER_WIDTH + right)
    return rows


def _boxed(cells: list[str], indent: int) -> str:
    return " " * indent + BORDER_SIDE + "".join(cells) + BORDER_SIDE


def _glyph_style(glyph: str) -> Optional[str]:
    if glyph == SAND:
        return HOURGLASS_SAND_COLOR
    if glyph == EMPTY:
        return HOURGLASS_EMPTY_COLOR
    if glyph in (DROPLET, TRAIL):
        return HOURGLASS_DROPLET_COLOR
    if glyph == " ":
        return None
    return HOURGLASS_FRAME_COLOR


class HourglassTheme(Theme):
    name = "hourglass"
    animated = True

    def build_lines(
        self,
        progress: Progress,
        title: Optional[str],
        width: int,
        clock: float,
    ) -> list[Text]:
        timespan = progress.timespan
        lines: list[Text] = []

        if title is not None:
            lines.append(Text(title, style="bold"))

        space = " " * 3
        lines.append(
            Text(
                f"{timespan.format_start()} → {timespan.format_end()}"
                f"{space}{DIVIDER}{space}{progress.percent}%"
            )
        )

        footer = (
            f"elapsed: {progress.format_elapsed()}{space}{DIVIDER}{space}"
            f"remaining: {progress.format_remaining()}"
        )
        # Line the neck up with the footer's divider
        padding = " " * max(footer.index(DIVIDER) - CENTER_COLUMN, 0)

        grid = build_grid(sand_to_move(progress.ratio))
        if not progress.is_complete():
            overlay_droplet(grid, clock)
        for row in glass_rows(grid):
            line = Text(padding)
            for glyph in row:
                line.append(glyph, style=_glyph_style(glyph))
            lines.append(line)

        lines.append(Text(footer))
        if self.show_quit_hint:
            lines.append(Text(QUIT_HINT, style=HINT_COLOR))
        return lines
