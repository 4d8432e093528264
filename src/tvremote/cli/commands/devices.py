from __future__ import annotations

import typer
from rich.console import Console

from tvremote.cli.helpers import build_cache, device_table, load_settings_or_exit
from tvremote.storage import values

app = typer.Typer(no_args_is_help=True, help="Inspect the device cache.")


@app.command("list")
def list_devices() -> None:
    """List cached TVs."""
    settings = load_settings_or_exit()
    cache = build_cache(settings)
    devices = values(cache.load())

    console = Console()

    if not devices:
        console.print("No devices cached.")
        console.print("Use 'tvremote scan' to search the network")
        return

    console.print(device_table(devices))


@app.command("forget")
def forget_device(mac: str = typer.Argument(..., help="MAC address of the TV")) -> None:
    """Remove a TV from the device cache."""
    settings = load_settings_or_exit()
    cache = build_cache(settings)

    console = Console()
    if cache.forget(mac):
        console.print(f"[green]✓[/green] Forgot device {mac}")
    else:
        console.print(f"[yellow]![/yellow] Device {mac} not cached")
        raise typer.Exit(1)
