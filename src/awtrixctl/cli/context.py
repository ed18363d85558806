"""State shared by all CLI commands."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

import click

from awtrixctl.client import DeviceClient
from awtrixctl.models import AppConfig, Color, WireModel, parse_color

M = TypeVar("M", bound=WireModel)

logger = logging.getLogger(__name__)


class CliState:
    """
    Per-invocation state: global options, the loaded config and a lazily
    created device client.

    Nothing touches the config file or the network until a command asks for
    it, so ``device`` commands and ``--help`` work without a reachable device.
    """

    def __init__(self, device: str | None, json_output: bool, config_path: Path):
        self.device = device
        self.json_output = json_output
        self.config_path = config_path
        self._config: AppConfig | None = None
        self._client: DeviceClient | None = None

    @property
    def config(self) -> AppConfig:
        if self._config is None:
            self._config = AppConfig.load_or_default(self.config_path)
        return self._config

    def save_config(self) -> None:
        self.config.save(self.config_path)

    @property
    def client(self) -> DeviceClient:
        if self._client is None:
            self._client = DeviceClient.for_device(self.config, self.device)
            logger.info(f"Using {self._client!r}")
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def emit(self, data: Any, text: str | None = None) -> None:
        """Print ``data`` as JSON with --json, otherwise print ``text``."""
        if self.json_output:
            echo_json(data)
        elif text is not None:
            click.echo(text)


pass_state = click.make_pass_decorator(CliState)


def echo_json(data: Any) -> None:
    if isinstance(data, WireModel):
        data = data.to_payload()
    click.echo(json.dumps(data, indent=2))


def load_wire_file(path: Path, model_type: type[M]) -> M:
    """Decode a notification, custom app or settings file in wire form.

    Raises:
        SerializationError: If the file is not valid JSON for ``model_type``
    """
    return model_type.from_json(path.read_text(encoding="utf-8"), source=str(path))


def color_option_value(value: str | None) -> Color | None:
    """Parse a --color option; color errors propagate before any request."""
    return parse_color(value) if value is not None else None


def confirm_destructive(action: str, assume_yes: bool) -> bool:
    """Ask before an irreversible device operation unless --yes was given."""
    if assume_yes:
        return True
    click.echo(f"WARNING: This will {action}")
    return click.confirm("Are you sure you want to continue?", default=False)
