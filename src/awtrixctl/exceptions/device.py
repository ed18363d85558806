"""Device communication exceptions.

This module defines exceptions for talking to the device:
- DeviceError: Base class for device errors
- ApiError: Device answered with a non-success status
- DeviceTransportError: Request never got a response (connection, TLS, DNS)
- DeviceTimeoutError: Request timed out
- UrlError: Host or endpoint could not be turned into a URL
"""

from .base import AwtrixError


class DeviceError(AwtrixError):
    """Communication with the device failed."""

    def __init__(self, user_message: str, url: str | None = None, **kwargs):
        """
        Initialize device error.

        Args:
            user_message: User-friendly error message
            url: The request URL involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.url = url


class ApiError(DeviceError):
    """Device returned a non-success HTTP status."""

    def __init__(self, message: str, code: int, url: str | None = None):
        """
        Initialize API error.

        Args:
            message: Response body returned by the device
            code: HTTP status code
            url: The request URL
        """
        super().__init__(
            user_message=f"API error: {message} (code: {code})",
            technical_message=f"{url or 'request'} returned HTTP {code}: {message}",
            url=url,
        )
        self.message = message
        self.code = code


class DeviceTransportError(DeviceError):
    """Request failed before a response was received."""

    def __init__(self, url: str, original_error: str):
        super().__init__(
            user_message=f"Could not reach device at {url}",
            technical_message=f"Transport error for {url}: {original_error}",
            url=url,
            recoverable=True,
            recovery_hint="Check that the device is powered on and reachable on the network",
        )
        self.original_error = original_error


class DeviceTimeoutError(DeviceTransportError):
    """Request exceeded its timeout."""

    def __init__(self, url: str, timeout: float | None = None, original_error: str = "timed out"):
        super().__init__(url, original_error)
        self.user_message = f"Request to {url} timed out"
        if timeout is not None:
            self.user_message += f" after {timeout:g}s"
        self.timeout = timeout


class UrlError(DeviceError):
    """Host or endpoint is not a valid URL."""

    def __init__(self, value: str, reason: str):
        super().__init__(
            user_message=f"Invalid URL {value!r}: {reason}",
            url=value,
        )
        self.value = value
        self.reason = reason
