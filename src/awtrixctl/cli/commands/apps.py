"""App loop and custom app commands."""

import logging
import time
from pathlib import Path
from typing import Optional

import click

from awtrixctl.cli.context import CliState, color_option_value, load_wire_file, pass_state
from awtrixctl.exceptions import AwtrixError
from awtrixctl.models import CustomApp

logger = logging.getLogger(__name__)


@click.group(name="app")
def app_group():
    """Navigate the app loop."""
    pass


@app_group.command(name="list")
@pass_state
def list_apps(cli_state: CliState):
    """Show the apps in the loop and the current app."""
    loop_info = cli_state.client.get_apps()
    if cli_state.json_output:
        cli_state.emit(loop_info)
        return

    click.echo("App Loop Status:")
    click.echo(f"  Current App: {loop_info.current or 'None'}")
    if not loop_info.apps:
        click.echo("\nNo apps in loop")
        return

    click.echo("\nAvailable Apps:")
    for app in loop_info.apps:
        status = "enabled" if app.enabled is not False else "disabled"
        click.echo(f"  - {app.name} ({status})")


@app_group.command(name="next")
@pass_state
def next_app(cli_state: CliState):
    """Switch to the next app."""
    cli_state.client.next_app()
    cli_state.emit({"switched": "next"}, "Switched to next app")


@app_group.command(name="previous")
@pass_state
def previous_app(cli_state: CliState):
    """Switch to the previous app."""
    cli_state.client.previous_app()
    cli_state.emit({"switched": "previous"}, "Switched to previous app")


@app_group.command(name="switch")
@click.argument("name")
@pass_state
def switch_app(cli_state: CliState, name: str):
    """Switch to the app NAME."""
    cli_state.client.switch_app(name)
    cli_state.emit({"switched": name}, f"Switched to app: {name}")


@click.group(name="custom")
def custom_group():
    """Create and delete custom apps."""
    pass


@custom_group.command(name="create")
@click.argument("name")
@click.option("--text", "-t", help="Text to display")
@click.option("--icon", "-i", type=click.IntRange(min=0), help="Icon ID")
@click.option("--color", "-c", help="Text color (hex, r,g,b or name)")
@click.option("--duration", type=click.IntRange(min=0), help="Display duration in seconds")
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Create the app from a JSON file",
)
@pass_state
def create_custom(
    cli_state: CliState,
    name: str,
    text: Optional[str],
    icon: Optional[int],
    color: Optional[str],
    duration: Optional[int],
    file_path: Optional[Path],
):
    """Create or replace the custom app NAME."""
    if file_path is not None:
        app = load_wire_file(file_path, CustomApp)
    elif text is None and icon is None and color is None and duration is None:
        # An empty body deletes the app on the device
        raise click.UsageError(
            "Provide at least one of --text/--icon/--color/--duration, or --file"
        )
    else:
        parsed_color = color_option_value(color)
        builder = CustomApp.builder()
        if text is not None:
            builder.text(text)
        if icon is not None:
            builder.icon(icon)
        if parsed_color is not None:
            builder.color(parsed_color)
        if duration is not None:
            builder.duration(duration)
        app = builder.build()

    cli_state.client.create_custom_app(name, app)
    cli_state.emit({"name": name, "app": app.to_payload()}, f"Custom app '{name}' created")


@custom_group.command(name="delete")
@click.argument("name")
@pass_state
def delete_custom(cli_state: CliState, name: str):
    """Delete the custom app NAME."""
    cli_state.client.delete_custom_app(name)
    cli_state.emit({"deleted": name}, f"Custom app '{name}' deleted")


@custom_group.command(name="watch")
@click.argument("name")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--interval", "-i", type=click.IntRange(min=1), default=60, show_default=True,
    help="Seconds between updates",
)
@click.option(
    "--cycles", type=click.IntRange(min=1), default=None,
    help="Stop after this many updates (default: run until interrupted)",
)
@pass_state
def watch_custom(
    cli_state: CliState, name: str, file_path: Path, interval: int, cycles: Optional[int]
):
    """
    Re-send the custom app NAME from FILE_PATH every --interval seconds.

    A cycle that fails to read, decode or send the file is reported and the
    next cycle runs anyway. Stop with Ctrl+C.
    """
    client = cli_state.client
    click.echo(f"Watching '{file_path}' for app '{name}' (interval: {interval}s)")
    click.echo("Press Ctrl+C to stop watching...")

    completed = 0
    try:
        while True:
            try:
                client.create_custom_app(name, load_wire_file(file_path, CustomApp))
                click.echo(f"Updated app '{name}' from file")
            except OSError as e:
                logger.warning(f"Could not read {file_path}: {e}")
                click.echo(f"Failed to read file: {e}", err=True)
            except AwtrixError as e:
                logger.warning(f"Watch cycle for '{name}' failed: {e}")
                click.echo(f"Failed to update app: {e}", err=True)

            completed += 1
            if cycles is not None and completed >= cycles:
                break
            time.sleep(interval)
    except KeyboardInterrupt:
        click.echo("\nStopped watching")
