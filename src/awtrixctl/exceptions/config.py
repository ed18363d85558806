"""Configuration-related exceptions.

This module defines exceptions for configuration errors:
- ConfigurationError: Base class for configuration errors
- ConfigFileInvalidError: Config file has invalid syntax
- ConfigValidationError: Config values fail validation
- DeviceNotFoundError: A device name is not in the configured device map
- NoDeviceError: No device could be resolved for a command
"""

from .base import AwtrixError


class ConfigurationError(AwtrixError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid config file
            parse_error: The parsing error message
        """
        user_msg = f"{file_path} has invalid JSON syntax"
        recovery = "Check for common JSON errors:\n"
        recovery += "  - Trailing commas (remove commas after last item)\n"
        recovery += "  - Missing quotes around strings\n"
        recovery += "  - Unclosed braces or brackets\n"
        recovery += f"  - Edit: {file_path}"

        if "trailing comma" in parse_error.lower():
            user_msg = f"{file_path} has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )
        elif "empty" in parse_error.lower():
            user_msg = f"{file_path} is empty"

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: object, error_msg: str, file_path: str | None = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the file (optional)
        """
        user_msg = f"Invalid value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value"
        if file_path:
            recovery += f"\nFile: {file_path}"

        if "color" in field.lower():
            recovery += "\nColors are [r, g, b] arrays or hex strings like \"#FF0000\""
        elif field.lower().startswith("devices"):
            recovery += "\nRun 'awtrixctl device list' to see configured devices"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.field = field
        self.value = value
        self.file_path = file_path


class DeviceNotFoundError(ConfigurationError):
    """Named device is not present in the configuration."""

    def __init__(self, name: str, is_default: bool = False):
        what = "Default device" if is_default else "Device"
        super().__init__(
            user_message=f"{what} '{name}' not found in config",
            recoverable=True,
            recovery_hint=f"Run 'awtrixctl device add {name} <host>' or pick another device",
        )
        self.name = name
        self.is_default = is_default


class NoDeviceError(ConfigurationError):
    """No device was given and none could be resolved."""

    def __init__(self, env_var: str):
        super().__init__(
            user_message=(
                f"No device specified. Use --device, set {env_var} env var, "
                "or configure a default device"
            ),
            recoverable=True,
            recovery_hint="Run 'awtrixctl device add <name> <host> --default'",
        )
        self.env_var = env_var
