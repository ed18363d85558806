"""System commands: statistics, backup, reboot, resets."""

from datetime import datetime
from pathlib import Path
from typing import Optional

import click

from awtrixctl.cli.context import CliState, confirm_destructive, pass_state
from awtrixctl.models import DeviceBackup, Stats
from awtrixctl.utils import PydanticPersistence


def _on_off(value: bool) -> str:
    return "ON" if value else "OFF"


def format_stats(stats: Stats) -> list[str]:
    """Human-readable lines for a Stats snapshot; absent sensors are skipped."""
    lines = [
        "Device Statistics:",
        f"  Uptime: {stats.uptime} seconds ({stats.uptime / 3600:.1f} hours)",
        f"  WiFi Signal: {stats.wifi_signal} dBm",
        f"  Free Memory: {stats.heap} bytes",
        f"  Matrix: {_on_off(stats.matrix)}",
    ]
    if stats.current_app is not None:
        lines.append(f"  Current App: {stats.current_app}")
    if stats.temperature is not None:
        lines.append(f"  Temperature: {stats.temperature:.1f}°C")
    if stats.humidity is not None:
        lines.append(f"  Humidity: {stats.humidity:.1f}%")
    if stats.ldr is not None:
        lines.append(f"  Light Sensor (LDR): {stats.ldr}")
    if stats.lux is not None:
        lines.append(f"  Light Level: {stats.lux:.1f} lux")
    if stats.battery is not None:
        lines.append(f"  Battery: {stats.battery}%")
    if stats.indicators is not None:
        lines.append("  Indicators:")
        for number, state in enumerate(stats.indicators.as_tuple(), start=1):
            lines.append(f"    {number}: {_on_off(state)}")
    return lines


@click.group(name="system")
def system_group():
    """Device statistics and maintenance."""
    pass


@system_group.command(name="stats")
@pass_state
def stats(cli_state: CliState):
    """Show device statistics."""
    snapshot = cli_state.client.get_stats()
    cli_state.emit(snapshot, "\n".join(format_stats(snapshot)))


@system_group.command(name="reboot")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@pass_state
def reboot(cli_state: CliState, yes: bool):
    """Reboot the device."""
    if not confirm_destructive("reboot the device", yes):
        click.echo("Reboot cancelled")
        return
    cli_state.client.reboot()
    cli_state.emit({"rebooting": True}, "Device reboot initiated")


@system_group.command(name="factory-reset")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@pass_state
def factory_reset(cli_state: CliState, yes: bool):
    """Erase ALL settings and data on the device."""
    if not confirm_destructive(
        "perform FACTORY RESET (this will erase ALL settings and data)", yes
    ):
        click.echo("Factory reset cancelled")
        return
    cli_state.client.factory_reset()
    cli_state.emit(
        {"factory_reset": True},
        "Factory reset initiated - device will restart with default settings",
    )


@system_group.command(name="reset-settings")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@pass_state
def reset_settings(cli_state: CliState, yes: bool):
    """Reset device settings to their defaults."""
    if not confirm_destructive("reset settings to defaults", yes):
        click.echo("Settings reset cancelled")
        return
    cli_state.client.reset_settings()
    cli_state.emit({"reset_settings": True}, "Settings reset to defaults")


@system_group.command(name="save")
@pass_state
def save(cli_state: CliState):
    """Persist the device configuration to flash."""
    cli_state.client.save_config()
    cli_state.emit({"saved": True}, "Configuration saved")


@system_group.command(name="backup")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (default: awtrix3_backup_<timestamp>.json)",
)
@pass_state
def backup(cli_state: CliState, output: Optional[Path]):
    """Save the firmware version, statistics and settings to a JSON file."""
    client = cli_state.client
    now = datetime.now()
    snapshot = DeviceBackup(
        created_at=now,
        host=client.base_url,
        version=client.get_version(),
        stats=client.get_stats(),
        settings=client.get_settings(),
    )

    if output is None:
        output = Path(f"awtrix3_backup_{now.strftime('%Y%m%d_%H%M%S')}.json")
    PydanticPersistence.save_json(
        snapshot, output, backup=False, dump=lambda model: model.to_json(indent=2)
    )
    cli_state.emit({"backup": str(output)}, f"Backup saved to: {output}")
