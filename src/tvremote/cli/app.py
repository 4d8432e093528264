from __future__ import annotations

from typing import Annotated

import typer

from tvremote.utils.logging import setup_logging

from .commands import config as config_cmd
from .commands import devices as devices_cmd
from .commands.control import control
from .commands.control import register as register_control
from .commands.scan import register as register_scan

app = typer.Typer(help="tvremote - discover and control Samsung TVs from the terminal")

app.add_typer(config_cmd.app, name="config")
app.add_typer(devices_cmd.app, name="devices")

register_control(app)
register_scan(app)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
) -> None:
    """Without a command, discover TVs and start a control session."""
    setup_logging()

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"tvremote version {get_version('tvremote')}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        control(window=None)
