"""Device settings commands."""

from datetime import datetime
from pathlib import Path
from typing import Optional

import click

from awtrixctl.cli.context import CliState, load_wire_file, pass_state
from awtrixctl.models import Settings
from awtrixctl.settings_keys import (
    format_settings,
    get_setting,
    list_settings,
    parse_setting,
    set_setting,
    setting_key,
)
from awtrixctl.utils import PydanticPersistence


@click.group(name="settings")
def settings_group():
    """Read and change device settings."""
    pass


@settings_group.command(name="get")
@click.argument("key", required=False)
@pass_state
def get(cli_state: CliState, key: Optional[str]):
    """Show one setting, or every setting the device reports."""
    if key is not None:
        setting_key(key)

    settings = cli_state.client.get_settings()
    if key is None:
        if cli_state.json_output:
            cli_state.emit(settings)
            return
        click.echo("Device Settings:")
        for name, value in format_settings(settings):
            click.echo(f"  {name}: {value}")
        return

    value = get_setting(settings, key)
    cli_state.emit({key: value}, f"{key}: {value if value is not None else '(not set)'}")


@settings_group.command(name="set")
@click.argument("key")
@click.argument("value")
@pass_state
def set_(cli_state: CliState, key: str, value: str):
    """Set KEY to VALUE (see 'settings list' for keys)."""
    parse_setting(key, value)

    current = cli_state.client.get_settings()
    updated = set_setting(current, key, value)
    cli_state.client.update_settings(updated)
    cli_state.emit({key: get_setting(updated, key)}, f"Setting '{key}' updated to: {value}")


@settings_group.command(name="import")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@pass_state
def import_(cli_state: CliState, file_path: Path):
    """Send settings from a JSON file to the device."""
    settings = load_wire_file(file_path, Settings)
    cli_state.client.update_settings(settings)
    cli_state.emit({"imported": str(file_path)}, f"Settings imported from: {file_path}")


@settings_group.command(name="export")
@click.option(
    "--output",
    "-o",
    type=str,
    default=None,
    help="Output file, or '-' for stdout (default: awtrix3_settings_<timestamp>.json)",
)
@pass_state
def export(cli_state: CliState, output: Optional[str]):
    """Save the device settings to a JSON file."""
    settings = cli_state.client.get_settings()

    if output == "-":
        click.echo(settings.to_json(indent=2))
        return

    if output is None:
        output = f"awtrix3_settings_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
    path = Path(output)
    PydanticPersistence.save_json(
        settings, path, backup=False, dump=lambda model: model.to_json(indent=2)
    )
    cli_state.emit({"exported": str(path)}, f"Settings exported to: {path}")


@settings_group.command(name="list")
@pass_state
def list_keys(cli_state: CliState):
    """List the setting keys that 'get' and 'set' accept."""
    entries = list_settings()
    if cli_state.json_output:
        cli_state.emit({entry.key: entry.description for entry in entries})
        return

    click.echo("Available settings:")
    width = max(len(entry.key) for entry in entries)
    for entry in entries:
        click.echo(f"  {entry.key.ljust(width)}  {entry.description}")
