from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console

from tvremote.cli.helpers import build_cache, device_table, load_settings_or_exit
from tvremote.core import NameResolver, discover
from tvremote.storage import merge

logger = logging.getLogger(__name__)


def scan(
    window: float | None = typer.Option(
        None,
        "--window",
        "-w",
        min=0.001,
        help="Discovery window in seconds. Uses config default if omitted.",
    ),
    save: bool = typer.Option(True, help="Merge results into the device cache"),
) -> None:
    """Search the network for Samsung TVs."""
    console = Console()

    settings = load_settings_or_exit()
    cache = build_cache(settings)
    window = window if window is not None else settings.discovery.window

    console.print("Searching for Samsung TVs...")
    logger.info(
        "Discovery settings: window=%.2fs, resolve_timeout=%.2fs",
        window,
        settings.discovery.resolve_timeout,
    )
    resolver = NameResolver(timeout=settings.discovery.resolve_timeout)
    devices = asyncio.run(discover(window, resolver=resolver))

    if not devices:
        console.print("No Samsung TVs found.")
        return

    console.print(device_table(devices))
    console.print(f"\n[green]Found {len(devices)} device(s)[/green]")

    if save:
        cache.save(merge(cache.load(), devices))
        console.print(f"[green]✓[/green] Saved devices to {cache.path}")


def register(app: typer.Typer) -> None:
    app.command()(scan)
