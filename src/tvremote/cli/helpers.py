from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from tvremote.config import (
    Settings,
    cache_path_from_settings,
    get_settings,
    resolve_config_path,
)
from tvremote.models import DeviceRecord
from tvremote.storage import DeviceCache


def load_settings_or_exit() -> Settings:
    try:
        return get_settings()
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def resolve_config_path_or_exit(allow_missing: bool = False) -> tuple[Path, bool]:
    try:
        return resolve_config_path(allow_missing=allow_missing)
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def build_cache(settings: Settings) -> DeviceCache:
    return DeviceCache(cache_path_from_settings(settings))


def device_table(devices: list[DeviceRecord]) -> Table:
    table = Table()
    table.add_column("#", justify="right")
    table.add_column("Name", style="green")
    table.add_column("IP", style="cyan")
    table.add_column("MAC Address")

    for index, device in enumerate(devices):
        table.add_row(str(index), escape(device.friendly_name), device.ip, device.mac)
    return table
