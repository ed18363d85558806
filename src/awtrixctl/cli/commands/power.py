"""Power and sleep commands."""

import click

from awtrixctl.cli.context import CliState, pass_state
from awtrixctl.models import PowerState


@click.command(name="power")
@click.argument("state", type=click.Choice([s.value for s in PowerState], case_sensitive=False))
@pass_state
def power(cli_state: CliState, state: str):
    """Turn the matrix on or off."""
    power_state = PowerState(state.lower())
    cli_state.client.set_power(power_state.is_on)
    cli_state.emit({"power": power_state.is_on}, f"Matrix turned {power_state.value}")


@click.command(name="sleep")
@click.option(
    "--duration",
    "-t",
    type=click.IntRange(min=0),
    required=True,
    help="Sleep duration in seconds",
)
@pass_state
def sleep(cli_state: CliState, duration: int):
    """Put the device into deep sleep."""
    cli_state.client.set_sleep(duration)
    cli_state.emit({"sleep": duration}, f"Device sleeping for {duration} seconds")
