"""
Centralized error conversion utilities.

Each layer translates errors to be more useful at the next level up:

```
┌─────────────────────────────────────┐
│  CLI                                │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
│  - Logs technical_message           │
└─────────────────────────────────────┘
                  ↑
                  │ AwtrixError
                  │
┌─────────────────────────────────────┐
│  CLIENT / PERSISTENCE               │
│  - Catches requests/pydantic errors │
│  - Converts to AwtrixError          │
└─────────────────────────────────────┘
                  ↑
                  │ requests.RequestException, pydantic.ValidationError
                  │
┌─────────────────────────────────────┐
│  LIBRARIES                          │
└─────────────────────────────────────┘
```

## Quick Reference

| Scenario | Use This |
|----------|----------|
| Pydantic rejected a JSON file | `raise wrap_pydantic_error(e, str(path)) from e` |
| `requests` failed to get a response | `raise wrap_request_error(e, url, timeout) from e` |
| Show an error in the CLI | `message, hint = format_error_for_display(e)` |
"""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from .base import AwtrixError
from .config import ConfigFileInvalidError, ConfigValidationError
from .device import DeviceTimeoutError, DeviceTransportError


logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: Exception, file_path: str) -> AwtrixError:
    """
    Convert Pydantic validation errors to awtrixctl exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path (or other source label) of the data that failed

    Returns:
        A ConfigurationError with appropriate type and message
    """
    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',))) or "value"
            return ConfigValidationError(
                field=field,
                value=first_error.get('input'),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',))) or "value"
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def wrap_request_error(
    error: requests.RequestException, url: str, timeout: Optional[float] = None
) -> AwtrixError:
    """
    Convert a `requests` transport failure to an awtrixctl exception.

    Args:
        error: The exception raised by requests
        url: The URL that was being requested
        timeout: The timeout that applied to the request

    Returns:
        DeviceTimeoutError for timeouts, DeviceTransportError otherwise
    """
    if isinstance(error, requests.Timeout):
        return DeviceTimeoutError(url, timeout, original_error=str(error))
    return DeviceTransportError(url, f"{type(error).__name__}: {error}")


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, AwtrixError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
