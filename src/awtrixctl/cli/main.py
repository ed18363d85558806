"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from awtrixctl import __version__
from awtrixctl.exceptions import AwtrixError, format_error_for_display
from awtrixctl.models import AppConfig
from awtrixctl.models.config import CONFIG_ENV_VAR

from .commands import (
    app_group,
    custom_group,
    device_group,
    display_group,
    indicator,
    info_group,
    notify,
    power,
    settings_group,
    sleep,
    sound_group,
    system_group,
)
from .context import CliState

logger = logging.getLogger(__name__)

HANDLER_NAME = "awtrixctl-file"


def setup_logging(
    verbose: int, debug: bool, log_file: Optional[Path], log_dir: Optional[Path] = None
) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG to ./awtrixctl-debug.log
        log_file: Custom log file path (optional)
        log_dir: Directory for the default log file (defaults to ~/.awtrixctl/logs)

    Returns:
        The path of the log file in use
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        log_path = log_file
    elif debug:
        log_path = Path.cwd() / "awtrixctl-debug.log"
    else:
        if log_dir is None:
            log_dir = Path.home() / ".awtrixctl" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "awtrixctl.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.set_name(HANDLER_NAME)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


class AwtrixGroup(click.Group):
    """Root group that turns AwtrixError into a one-line message and exit code 1."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except AwtrixError as e:
            logger.error(f"Command failed: {e.technical_message}")
            message, hint = format_error_for_display(e)
            click.echo(f"Error: {message}", err=True)
            if hint:
                click.echo(f"Suggestion: {hint}", err=True)
            ctx.exit(1)


@click.group(cls=AwtrixGroup)
@click.pass_context
@click.version_option(version=__version__, prog_name="awtrixctl")
@click.option(
    '--device',
    '-d',
    type=str,
    default=None,
    help='Configured device name, hostname or IP (default: $AWTRIX_DEVICE, then the default device)'
)
@click.option(
    '--json',
    '-j',
    'json_output',
    is_flag=True,
    help='Print machine-readable JSON'
)
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=CONFIG_ENV_VAR,
    default=None,
    help='Config file path (default: ~/.awtrixctl/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./awtrixctl-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
def cli(
    ctx,
    device: Optional[str],
    json_output: bool,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
):
    """
    awtrixctl - control AWTRIX3 LED matrix displays over HTTP.

    \b
    Examples:
      # Register a device and make it the default
      awtrixctl device add living 192.168.1.100 --default

      # Show a notification
      awtrixctl notify "Hello" --color red --icon 1234

      # Talk to another device once
      awtrixctl -d 192.168.1.101 system stats

      # Change a nested setting
      awtrixctl settings set time_app.format 2
    """
    if config_path is None:
        config_path = AppConfig.default_path()
    setup_logging(verbose, debug, log_file, log_dir=config_path.parent / "logs")

    state = CliState(device, json_output, config_path)
    ctx.obj = state
    ctx.call_on_close(state.close)


cli.add_command(power)
cli.add_command(sleep)
cli.add_command(notify)
cli.add_command(app_group)
cli.add_command(custom_group)
cli.add_command(display_group)
cli.add_command(indicator)
cli.add_command(sound_group)
cli.add_command(info_group)
cli.add_command(system_group)
cli.add_command(settings_group)
cli.add_command(device_group)

if __name__ == "__main__":
    cli()
