"""Read-only snapshots returned by the device."""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, Field, model_validator

from .app import AppInfo
from .base import WireModel
from .settings import Settings


class IndicatorStates(WireModel):
    """On/off state of the three indicator LEDs."""

    indicator1: bool
    indicator2: bool
    indicator3: bool

    def as_tuple(self) -> tuple[bool, bool, bool]:
        return (self.indicator1, self.indicator2, self.indicator3)


class Stats(WireModel):
    """Device statistics from /api/stats."""

    uptime: int = Field(description="Uptime in seconds")
    wifi_signal: int = Field(
        validation_alias=AliasChoices("wifiSignal", "wifi_signal"),
        description="WiFi signal strength (dBm)",
    )
    heap: int = Field(
        validation_alias=AliasChoices("heap", "ram"), description="Free heap memory in bytes"
    )
    matrix: bool = Field(description="Matrix on/off")
    temperature: float | None = Field(default=None, alias="temp", description="Temperature")
    humidity: float | None = Field(default=None, alias="hum", description="Humidity percentage")
    ldr: int | None = Field(default=None, alias="ldr_raw", description="Raw light sensor value")
    lux: float | None = Field(default=None, description="Ambient light")
    battery: int | None = Field(default=None, alias="bat", description="Battery percentage")
    current_app: str | None = Field(
        default=None,
        validation_alias=AliasChoices("app", "currentApp", "current_app"),
        serialization_alias="app",
        description="Current app name",
    )
    indicators: IndicatorStates | None = None

    @model_validator(mode="before")
    @classmethod
    def collect_indicators(cls, data: Any) -> Any:
        """Fold flat ``indicator1..3`` keys into ``indicators``."""
        if isinstance(data, dict) and "indicators" not in data:
            keys = ("indicator1", "indicator2", "indicator3")
            if all(key in data for key in keys):
                data = dict(data)
                data["indicators"] = {key: data[key] for key in keys}
        return data


class LoopInfo(WireModel):
    """The device's app loop from /api/loop."""

    apps: list[AppInfo] = Field(default_factory=list)
    current: str | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_position_map(cls, data: Any) -> Any:
        """Accept the firmware's ``{name: position}`` mapping."""
        if isinstance(data, dict) and "apps" not in data and data:
            if all(isinstance(pos, int) and not isinstance(pos, bool) for pos in data.values()):
                ordered = sorted(data.items(), key=lambda item: item[1])
                return {"apps": [{"name": name} for name, _ in ordered]}
        return data

    @property
    def names(self) -> list[str]:
        return [app.name for app in self.apps]


class DeviceBackup(WireModel):
    """Snapshot written by ``system backup``: firmware version, stats and settings."""

    created_at: datetime = Field(description="When the snapshot was taken")
    host: str = Field(description="Device the snapshot was taken from")
    version: str = Field(description="Firmware version")
    stats: Stats
    settings: Settings
