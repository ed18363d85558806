"""Read-only device information commands."""

import click

from awtrixctl.cli.context import CliState, pass_state


@click.group(name="info")
def info_group():
    """Query firmware information."""
    pass


@info_group.command(name="version")
@pass_state
def version(cli_state: CliState):
    """Show the firmware version."""
    firmware = cli_state.client.get_version()
    cli_state.emit({"version": firmware}, f"Firmware version: {firmware}")


def _print_names(cli_state: CliState, title: str, names: list[str]) -> None:
    if cli_state.json_output:
        cli_state.emit(names)
        return
    click.echo(f"{title} ({len(names)}):")
    for name in names:
        click.echo(f"  - {name}")


@info_group.command(name="effects")
@pass_state
def effects(cli_state: CliState):
    """List the background effects the device supports."""
    _print_names(cli_state, "Available effects", cli_state.client.get_effects())


@info_group.command(name="transitions")
@pass_state
def transitions(cli_state: CliState):
    """List the app transitions the device supports."""
    _print_names(cli_state, "Available transitions", cli_state.client.get_transitions())
