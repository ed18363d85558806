"""Notification command."""

from pathlib import Path
from typing import Optional

import click

from awtrixctl.cli.context import CliState, color_option_value, load_wire_file, pass_state
from awtrixctl.models import Effect, Notification


def _build_notification(
    text: str,
    icon: Optional[int],
    color: Optional[str],
    duration: Optional[int],
    sound: Optional[str],
    progress: Optional[int],
    hold: bool,
    wakeup: bool,
    stack: bool,
    no_scroll: bool,
    effect: Optional[str],
) -> Notification:
    # Parse everything that can fail before touching the builder
    parsed_color = color_option_value(color)

    builder = Notification.builder().text(text)
    if icon is not None:
        builder.icon(icon)
    if parsed_color is not None:
        builder.color(parsed_color)
    if duration is not None:
        builder.duration(duration)
    if sound:
        builder.sound(sound)
    if progress is not None:
        builder.progress(progress)
    if hold:
        builder.hold()
    if wakeup:
        builder.wakeup()
    if stack:
        builder.stack()
    if no_scroll:
        builder.no_scroll()
    if effect:
        builder.effect(Effect(effect).value)
    return builder.build()


@click.command(name="notify")
@click.argument("text", required=False)
@click.option("--icon", "-i", type=click.IntRange(min=0), help="Icon ID")
@click.option("--color", "-c", help="Text color (hex, r,g,b or name)")
@click.option("--duration", type=click.IntRange(min=0), help="Duration in seconds")
@click.option("--sound", "-s", help="Sound file to play")
@click.option("--progress", "-p", type=int, help="Progress bar value (clamped to 0-100)")
@click.option("--hold", is_flag=True, help="Keep the notification until dismissed")
@click.option("--wakeup", is_flag=True, help="Wake the matrix if it is off")
@click.option("--stack", is_flag=True, help="Queue behind other notifications")
@click.option("--no-scroll", is_flag=True, help="Do not scroll the text")
@click.option(
    "--effect",
    "-e",
    type=click.Choice([e.value for e in Effect]),
    help="Background effect",
)
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Send a notification defined in a JSON file",
)
@click.option("--dismiss", is_flag=True, help="Dismiss the notification on screen")
@pass_state
def notify(
    cli_state: CliState,
    text: Optional[str],
    icon: Optional[int],
    color: Optional[str],
    duration: Optional[int],
    sound: Optional[str],
    progress: Optional[int],
    hold: bool,
    wakeup: bool,
    stack: bool,
    no_scroll: bool,
    effect: Optional[str],
    file_path: Optional[Path],
    dismiss: bool,
):
    """
    Show a notification over the app loop.

    \b
    Examples:
      awtrixctl notify "Hello" --color red --icon 1234
      awtrixctl notify "Build" --progress 40 --hold
      awtrixctl notify --file alert.json
      awtrixctl notify --dismiss
    """
    if dismiss:
        cli_state.client.dismiss_notification()
        cli_state.emit({"dismissed": True}, "Notification dismissed")
        return

    if file_path is not None:
        notification = load_wire_file(file_path, Notification)
    elif text is not None:
        notification = _build_notification(
            text, icon, color, duration, sound, progress, hold, wakeup, stack, no_scroll, effect
        )
    else:
        raise click.UsageError("Provide TEXT, --file or --dismiss")

    cli_state.client.notify(notification)
    cli_state.emit(notification, "Notification sent")
