# SPDX-License-Identifier: MIT

import typer

from justdoit.terminal import configuration
from justdoit.terminal.custom_typer import OrderedAliasedTyperGroup
from justdoit.terminal.start import start
from justdoit.terminal.themes import themes
from justdoit.terminal.version import version

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="justdoit - Watch a window of time run out in the terminal",
    no_args_is_help=True,
)
app.command(name="start, s")(start)
app.command(name="themes, th")(themes)
app.add_typer(configuration.app, name="config, c", help="View or change settings")
app.command(name="version, ve")(version)


def run() -> None:
    app()
