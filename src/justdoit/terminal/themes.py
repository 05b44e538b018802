# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from justdoit.model.theme_type import ThemeType
from justdoit.model.timespan import Timespan
from justdoit.repository.configuration import CONFIGURATION_REPO
from justdoit.time import naive_datetime
from justdoit.view.theme_dispatch import get_theme

THEME_DESCRIPTIONS: dict[ThemeType, str] = {
    ThemeType.DEFAULT: "Boxed summary under a wide progress bar",
    ThemeType.RETRO: "Green terminal mission log with status messages",
    ThemeType.SYNTHWAVE: "Neon bar on a dark violet background",
    ThemeType.HOURGLASS: "Animated hourglass with falling sand",
}

PREVIEW_WIDTH = 60
PREVIEW_TIMESPAN = Timespan(
    naive_datetime(2024, 1, 1, 9, 0), naive_datetime(2024, 1, 1, 10, 0)
)
PREVIEW_TIME = naive_datetime(2024, 1, 1, 9, 30)


def themes(
    preview: Annotated[
        bool,
        typer.Option("--preview", "-p", help="Render a sample frame of every theme"),
    ] = False,
) -> None:
    """List the available themes."""
    config = CONFIGURATION_REPO.get_config()
    default_theme = ThemeType.from_name(config["default_theme"])

    console = Console()
    table = Table()
    table.add_column("Theme", style="cyan")
    table.add_column("Description", style="magenta")
    table.add_column("Default", justify="center")

    for theme_type in ThemeType:
        table.add_row(
            theme_type.value,
            THEME_DESCRIPTIONS[theme_type],
            "✓" if theme_type == default_theme else "",
        )
    console.print(table)

    if not preview:
        return

    progress = PREVIEW_TIMESPAN.progress(PREVIEW_TIME)
    width = min(console.width, PREVIEW_WIDTH)
    for theme_type in ThemeType:
        frame = get_theme(theme_type, show_quit_hint=False).render(
            progress, "Preview", width
        )
        console.print()
        console.print(f"[bold]{theme_type.value}[/bold]")
        for line in frame.lines:
            console.print(line, style=frame.background or "", soft_wrap=True)
