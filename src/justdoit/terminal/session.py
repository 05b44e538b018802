# SPDX-License-Identifier: MIT

import logging
import time
from typing import Callable, Optional

import pendulum
from rich.console import Console

from justdoit.model.progress import Progress
from justdoit.model.timespan import Timespan
from justdoit.terminal.screen import QUIT_KEYS, FrameWriter, KeyReader
from justdoit.time import datetime_to_display_str, now_local
from justdoit.view.frame import Frame
from justdoit.view.themes.base import Theme

logger = logging.getLogger(__name__)

# Redraw period for animated themes, in seconds
ANIMATION_INTERVAL = 0.5


def run_session(
    timespan: Timespan,
    theme: Theme,
    title: Optional[str],
    interval: int,
    console: Optional[Console] = None,
    key_reader: Optional[KeyReader] = None,
    clock: Callable[[], float] = time.monotonic,
    now: Callable[[], pendulum.DateTime] = now_local,
) -> Optional[Progress]:
    """
    Show the live progress display until the window ends or the user quits.

    Each tick samples the current time and the console width, renders one frame
    and draws it over the previous one on the alternate screen. The wait between
    ticks listens for a quit key.

    Returns:
        The last progress snapshot drawn, or None if nothing was drawn
    """
    console = console if console is not None else Console()
    key_reader = key_reader if key_reader is not None else KeyReader()
    writer = FrameWriter(console)
    tick = min(float(interval), ANIMATION_INTERVAL) if theme.animated else float(interval)

    logger.info(
        "Session started: %s to %s, theme=%s, interval=%ss",
        datetime_to_display_str(timespan.start),
        datetime_to_display_str(timespan.end),
        theme.name,
        interval,
    )

    started = clock()
    progress: Optional[Progress] = None
    frame: Optional[Frame] = None

    try:
        with console.screen(hide_cursor=True), key_reader:
            while True:
                progress = timespan.progress(now())
                frame = theme.render(progress, title, console.width, clock() - started)
                writer.draw(frame)
                logger.debug("Tick: %r", progress)

                if progress.is_complete():
                    logger.info("Session complete")
                    break

                # Never sleep past the end of the window
                key = key_reader.wait(min(tick, progress.remaining.total_seconds()))
                if key is not None and key in QUIT_KEYS:
                    logger.info("Session stopped by key %r", key)
                    break
    except KeyboardInterrupt:
        logger.info("Session aborted")

    if frame is not None:
        writer.print_final(frame)
    return progress
