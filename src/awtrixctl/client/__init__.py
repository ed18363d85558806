"""HTTP client for AWTRIX3 devices."""

from .device import DeviceClient
from .transport import DEFAULT_TIMEOUT, create_session

__all__ = ["DEFAULT_TIMEOUT", "DeviceClient", "create_session"]
