from __future__ import annotations

import asyncio
import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

from tvremote.cli.helpers import build_cache, load_settings_or_exit
from tvremote.config import token_dir_from_settings
from tvremote.core import (
    ControlSession,
    SamsungRemote,
    SelectionCancelled,
    select_device,
)
from tvremote.services import discover_and_cache
from tvremote.utils.terminal import TerminalError, raw_terminal

logger = logging.getLogger(__name__)


def control(
    window: float | None = typer.Option(
        None,
        "--window",
        "-w",
        min=0.001,
        help="Discovery window in seconds. Uses config default if omitted.",
    ),
) -> None:
    """Discover TVs, pick one and drive it from the keyboard."""
    console = Console()

    settings = load_settings_or_exit()
    cache = build_cache(settings)

    logger.debug("Device cache: %s", cache.path)
    devices = asyncio.run(discover_and_cache(cache, settings.discovery, window))
    if not devices:
        console.print("[red]Couldn't find any Samsung device[/red]")
        raise typer.Exit(1)

    try:
        with raw_terminal(sys.stdin) as read:
            try:
                device = select_device(devices, read, console)
            except SelectionCancelled:
                raise typer.Exit(1) from None

            console.print(f"Selected {escape(device.describe())}", highlight=False)
            remote = SamsungRemote(
                device, settings.remote, token_dir_from_settings(settings)
            )
            try:
                ControlSession(device, remote, read, console).run()
            finally:
                remote.close()
    except TerminalError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from None


def register(app: typer.Typer) -> None:
    app.command()(control)
