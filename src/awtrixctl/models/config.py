"""Local configuration: known devices, default device and preferences."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field

from awtrixctl.exceptions import DeviceNotFoundError, NoDeviceError
from awtrixctl.utils.persistence import PydanticPersistence

logger = logging.getLogger(__name__)

DEVICE_ENV_VAR = "AWTRIX_DEVICE"
CONFIG_ENV_VAR = "AWTRIX_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".awtrixctl" / "config.json"


class DeviceConfig(BaseModel):
    """A device the user has registered under a short name."""

    host: str = Field(description="Device hostname or IP address")
    name: str = Field(description="Human-readable device name")
    timeout: int = Field(default=30, ge=1, description="Request timeout in seconds")
    retries: int = Field(
        default=3, ge=0, description="Retry attempts (informational; requests are never retried)"
    )


class Preferences(BaseModel):
    """CLI preferences."""

    default_format: str = Field(default="table", description="Default output format")
    colored_output: bool = Field(default=True, description="Enable colored output")
    log_level: str = Field(default="info", description="Log level")


class AppConfig(BaseModel):
    """Application configuration and settings."""

    default_device: str | None = Field(default=None, description="Device used when none is given")
    devices: dict[str, DeviceConfig] = Field(default_factory=dict, description="Known devices")
    preferences: Preferences = Field(default_factory=Preferences, description="CLI preferences")

    def resolve_host(
        self, device: str | None = None, env: Mapping[str, str] | None = None
    ) -> str:
        """
        Turn a user-supplied device identifier into a host.

        Precedence:
            1. ``device``: a configured device name, else a literal host/IP
            2. the AWTRIX_DEVICE environment variable
            3. the configured default device

        Args:
            device: Identifier from the command line (optional)
            env: Environment mapping (defaults to os.environ)

        Raises:
            DeviceNotFoundError: If the default device is not in ``devices``
            NoDeviceError: If nothing resolves
        """
        if env is None:
            env = os.environ

        if device:
            known = self.devices.get(device)
            if known is not None:
                logger.debug(f"Resolved device '{device}' to {known.host}")
                return known.host
            return device

        env_host = env.get(DEVICE_ENV_VAR)
        if env_host:
            logger.debug(f"Using device from {DEVICE_ENV_VAR}: {env_host}")
            return env_host

        if self.default_device:
            known = self.devices.get(self.default_device)
            if known is None:
                raise DeviceNotFoundError(self.default_device, is_default=True)
            return known.host

        raise NoDeviceError(DEVICE_ENV_VAR)

    def timeout_for(
        self, device: str | None, env: Mapping[str, str] | None = None
    ) -> int | None:
        """Configured timeout of the device ``resolve_host`` would pick, if it is a known device.

        A host taken from AWTRIX_DEVICE has no configured timeout.
        """
        if env is None:
            env = os.environ

        if device:
            name = device
        elif env.get(DEVICE_ENV_VAR):
            return None
        else:
            name = self.default_device
        known = self.devices.get(name) if name else None
        return known.timeout if known else None

    def add_device(
        self, name: str, host: str, display_name: str | None = None, set_default: bool = False
    ) -> DeviceConfig:
        """Register a device; the first device added becomes the default."""
        device = DeviceConfig(host=host, name=display_name or name)
        self.devices[name] = device
        if set_default or self.default_device is None:
            self.default_device = name
        return device

    def remove_device(self, name: str) -> None:
        """Forget a device, clearing the default if it pointed at it.

        Raises:
            DeviceNotFoundError: If no device has that name
        """
        if name not in self.devices:
            raise DeviceNotFoundError(name)
        del self.devices[name]
        if self.default_device == name:
            self.default_device = None

    @staticmethod
    def default_path(env: Mapping[str, str] | None = None) -> Path:
        """Config file location, honouring AWTRIX_CONFIG."""
        if env is None:
            env = os.environ
        override = env.get(CONFIG_ENV_VAR)
        return Path(override).expanduser() if override else DEFAULT_CONFIG_PATH

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = cls.default_path()
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = self.default_path()
        PydanticPersistence.save_json(self, path)
