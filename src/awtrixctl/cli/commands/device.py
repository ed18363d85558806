"""Local device registry commands."""

import logging
import time
from typing import Optional

import click

from awtrixctl.cli.context import CliState, pass_state
from awtrixctl.client import DeviceClient
from awtrixctl.exceptions import AwtrixError

logger = logging.getLogger(__name__)


def _online_version(host: str, timeout: float) -> Optional[str]:
    """Firmware version of ``host``, or None if it cannot be reached."""
    try:
        with DeviceClient(host, timeout=timeout) as client:
            return client.get_version()
    except AwtrixError as e:
        logger.info(f"{host} is not reachable: {e}")
        return None


@click.group(name="device")
def device_group():
    """Manage configured devices."""
    pass


@device_group.command(name="add")
@click.argument("name")
@click.argument("host")
@click.option("--default", "set_default", is_flag=True, help="Make this the default device")
@click.option("--display-name", help="Human-readable device name")
@click.option("--no-check", is_flag=True, help="Add the device without testing the connection")
@pass_state
def add(
    cli_state: CliState,
    name: str,
    host: str,
    set_default: bool,
    display_name: Optional[str],
    no_check: bool,
):
    """Register HOST under the short name NAME.

    The device must answer /version unless --no-check is given; nothing is
    saved when it does not.
    """
    version = None
    if not no_check:
        if not cli_state.json_output:
            click.echo(f"Testing connection to {host}...")
        with DeviceClient(host) as client:
            version = client.get_version()
        if not cli_state.json_output:
            click.echo(f"Connected successfully - Version: {version}")

    config = cli_state.config
    device = config.add_device(name, host, display_name=display_name, set_default=set_default)
    cli_state.save_config()

    if cli_state.json_output:
        cli_state.emit({name: device.model_dump(), "version": version})
        return
    click.echo(f"Device '{name}' added ({device.host})")
    if config.default_device == name:
        click.echo(f"Set '{name}' as default device")


@device_group.command(name="remove")
@click.argument("name")
@pass_state
def remove(cli_state: CliState, name: str):
    """Forget the device NAME."""
    cli_state.config.remove_device(name)
    cli_state.save_config()
    cli_state.emit({"removed": name}, f"Device '{name}' removed")


@device_group.command(name="list")
@click.option("--no-check", is_flag=True, help="Do not contact the devices")
@pass_state
def list_devices(cli_state: CliState, no_check: bool):
    """List configured devices and whether each one is online."""
    config = cli_state.config
    versions = {
        name: None if no_check else _online_version(device.host, device.timeout)
        for name, device in config.devices.items()
    }

    if cli_state.json_output:
        data = config.model_dump(include={"default_device", "devices"})
        if not no_check:
            data["versions"] = versions
        cli_state.emit(data)
        return

    if not config.devices:
        click.echo("No devices configured")
        click.echo("Add one with: awtrixctl device add <name> <host>")
        return

    click.echo("Configured devices:")
    for name, device in config.devices.items():
        marker = " (default)" if name == config.default_device else ""
        click.echo(f"  {name}: {device.name} at {device.host}{marker}")
        if no_check:
            continue
        version = versions[name]
        status = f"Online - Version: {version}" if version else "Offline or unreachable"
        click.echo(f"    Status: {status}")


@device_group.command(name="test")
@click.argument("device", required=False)
@pass_state
def check_device(cli_state: CliState, device: Optional[str]):
    """Time the version and stats calls against DEVICE (default: the resolved device)."""
    config = cli_state.config
    device = device or cli_state.device

    with DeviceClient.for_device(config, device) as client:
        click.echo(f"Testing device: {device or client.base_url}")
        click.echo(f"Host: {client.base_url}\n")

        start = time.perf_counter()
        version = client.get_version()
        version_ms = (time.perf_counter() - start) * 1000
        click.echo(f"Version API: {version} ({version_ms:.0f}ms)")

        stats_start = time.perf_counter()
        try:
            client.get_stats()
            stats_ms = (time.perf_counter() - stats_start) * 1000
            click.echo(f"Stats API: OK ({stats_ms:.0f}ms)")
        except AwtrixError as e:
            click.echo(f"Stats API failed: {e}", err=True)

    total_ms = (time.perf_counter() - start) * 1000
    click.echo("\nDevice test completed")
    click.echo(f"Total response time: {total_ms:.0f}ms")
