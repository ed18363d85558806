"""Sound commands."""

import click

from awtrixctl.cli.context import CliState, pass_state


@click.group(name="sound")
def sound_group():
    """Play sounds on the device buzzer."""
    pass


@sound_group.command(name="play")
@click.argument("name")
@click.option("--loop", "loop_sound", is_flag=True, help="Repeat the sound")
@pass_state
def play(cli_state: CliState, name: str, loop_sound: bool):
    """Play the sound file NAME stored on the device."""
    cli_state.client.play_sound(name, loop=loop_sound)
    suffix = " (looped)" if loop_sound else ""
    cli_state.emit({"sound": name, "loop": loop_sound}, f"Playing sound: {name}{suffix}")


@sound_group.command(name="rtttl")
@click.argument("melody")
@pass_state
def rtttl(cli_state: CliState, melody: str):
    """Play an RTTTL melody string."""
    cli_state.client.play_rtttl(melody)
    cli_state.emit({"rtttl": melody}, "Playing RTTTL melody")


@sound_group.command(name="r2d2")
@pass_state
def r2d2(cli_state: CliState):
    """Play a random R2D2-style sound."""
    cli_state.client.play_r2d2()
    cli_state.emit({"sound": "r2d2"}, "Playing R2D2 sound")
