"""Mood light and indicator commands."""

from typing import Optional

import click

from awtrixctl.cli.context import CliState, color_option_value, pass_state


@click.group(name="display")
def display_group():
    """Control device-wide lighting."""
    pass


@display_group.command(name="mood")
@click.option("--color", "-c", help="Mood light color (hex, r,g,b or name)")
@click.option("--kelvin", "-k", type=int, help="Color temperature (2000-6500)")
@click.option("--brightness", "-b", type=int, help="Brightness (0-255)")
@pass_state
def mood(
    cli_state: CliState,
    color: Optional[str],
    kelvin: Optional[int],
    brightness: Optional[int],
):
    """Set the mood light by color or color temperature."""
    parsed_color = color_option_value(color)
    cli_state.client.set_mood_light(brightness=brightness, color=parsed_color, kelvin=kelvin)

    payload = {"brightness": brightness, "kelvin": kelvin}
    if parsed_color is not None:
        payload["color"] = parsed_color.to_hex()
    cli_state.emit(
        {key: value for key, value in payload.items() if value is not None}, "Mood light set"
    )


@click.command(name="indicator")
@click.argument("which", type=click.Choice(["1", "2", "3", "all"]))
@click.option("--color", "-c", help="Indicator color (hex, r,g,b or name)")
@click.option("--off", is_flag=True, help="Turn the indicator off")
@pass_state
def indicator(cli_state: CliState, which: str, color: Optional[str], off: bool):
    """Light or clear indicator 1, 2, 3 or all of them."""
    if off == (color is not None):
        raise click.UsageError("Give exactly one of --color or --off")

    parsed_color = None if off else color_option_value(color)
    numbers = [1, 2, 3] if which == "all" else [int(which)]
    for number in numbers:
        cli_state.client.set_indicator(number, parsed_color)

    state = "off" if parsed_color is None else parsed_color.to_hex()
    cli_state.emit(
        {"indicators": numbers, "color": None if parsed_color is None else state},
        f"Indicator {which} set to {state}",
    )
