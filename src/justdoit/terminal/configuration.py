# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from justdoit import configuration
from justdoit.model.theme_type import ThemeType
from justdoit.repository.configuration import CONFIGURATION_REPO
from justdoit.terminal.completion import complete_log_level, complete_theme
from justdoit.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __config_table(config: configuration.Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("default_theme", str(config["default_theme"]))
    table.add_row("interval", f"{config['interval']} s")
    table.add_row(
        "show_quit_hint",
        "✓ Enabled" if config["show_quit_hint"] else "✗ Disabled",
    )
    table.add_row("log_level", str(config["log_level"]))
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(__config_table(config))
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")
    console.print(f"Log file: {configuration.APP_LOG_PATH}")


@app.command("set, s")
def set(
    theme: Annotated[
        Optional[str],
        typer.Option(
            "--theme",
            help="Theme used when start is given no --theme",
            autocompletion=complete_theme,
        ),
    ] = None,
    interval: Annotated[
        Optional[int],
        typer.Option(
            "--interval",
            min=configuration.MIN_INTERVAL,
            max=configuration.MAX_INTERVAL,
            help="Default seconds between refreshes",
        ),
    ] = None,
    show_quit_hint: Annotated[
        Optional[bool],
        typer.Option(
            "--quit-hint/--no-quit-hint",
            help="Show/hide the quit key hint under the display",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help="DEBUG, INFO, WARNING, ERROR or CRITICAL",
            autocompletion=complete_log_level,
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if theme is not None:
        theme = theme.strip().lower()
        if theme not in ThemeType.names():
            raise typer.BadParameter(
                f"Unknown theme {theme!r}, expected one of {', '.join(ThemeType.names())}"
            )
    if log_level is not None:
        log_level = log_level.strip().upper()
        if log_level not in configuration.LOG_LEVELS:
            raise typer.BadParameter(
                f"Unknown log level {log_level!r}, expected one of {', '.join(configuration.LOG_LEVELS)}"
            )

    CONFIGURATION_REPO.update_config(
        default_theme=theme,
        interval=interval,
        show_quit_hint=show_quit_hint,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(__config_table(config, title="Updated Configuration"))
