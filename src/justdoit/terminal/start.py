# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from justdoit.configuration import MAX_INTERVAL, MIN_INTERVAL, get_default_configuration
from justdoit.model.theme_type import ThemeType
from justdoit.model.timespan import InvalidWindowError, Timespan
from justdoit.repository.configuration import CONFIGURATION_REPO
from justdoit.terminal.completion import complete_theme
from justdoit.terminal.parse import (
    DATETIME_HELP,
    parse_duration,
    parse_end_time,
    parse_start_time,
)
from justdoit.terminal.session import run_session
from justdoit.time import now_local
from justdoit.view.theme_dispatch import get_theme

logger = logging.getLogger(__name__)


def start(
    start_time: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--start",
            "-s",
            parser=parse_start_time,
            help=f"Window start, defaults to now. {DATETIME_HELP}",
        ),
    ] = None,
    end_time: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--end",
            "-e",
            parser=parse_end_time,
            help=f"Window end. {DATETIME_HELP}",
        ),
    ] = None,
    duration: Annotated[
        Optional[pendulum.Duration],
        typer.Option(
            "--duration",
            "-d",
            parser=parse_duration,
            help="Window length instead of an end, e.g. 90s, 25m, 2h, 3d",
        ),
    ] = None,
    interval: Annotated[
        Optional[int],
        typer.Option(
            "--interval",
            "-i",
            min=MIN_INTERVAL,
            max=MAX_INTERVAL,
            help="Seconds between refreshes",
        ),
    ] = None,
    title: Annotated[
        Optional[str], typer.Option("--title", "-t", help="Shown above the display")
    ] = None,
    theme: Annotated[
        Optional[str],
        typer.Option(
            "--theme",
            help="default, retro, synthwave or hourglass",
            autocompletion=complete_theme,
        ),
    ] = None,
) -> None:
    """
    Show the progress of a time window until it ends.
    """
    if end_time is not None and duration is not None:
        raise typer.BadParameter("Use either --end or --duration, not both")
    if end_time is None and duration is None:
        raise typer.BadParameter("One of --end or --duration is required")

    if start_time is None:
        start_time = now_local()
    if end_time is None and duration is not None:
        end_time = start_time + duration

    console = Console()
    try:
        timespan = Timespan(start_time, end_time)  # type: ignore[arg-type]
    except InvalidWindowError as e:
        logger.warning("Rejected window: %s", e)
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    config = CONFIGURATION_REPO.get_config()
    theme_type = ThemeType.from_name(theme if theme is not None else config["default_theme"])
    if interval is None:
        interval = configured_interval(config["interval"])

    run_session(
        timespan,
        get_theme(theme_type, show_quit_hint=config["show_quit_hint"]),
        title,
        interval,
        console=console,
    )


def configured_interval(value: object) -> int:
    """The configured refresh interval, clamped to range. Non-numbers use the default."""
    try:
        interval = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        logger.warning("Ignoring configured interval %r", value)
        return get_default_configuration()["interval"]
    return min(max(interval, MIN_INTERVAL), MAX_INTERVAL)
