"""awtrixctl: control AWTRIX3 LED matrix displays over their HTTP API."""

__version__ = "1.0.0"

from .client import DeviceClient, create_session
from .models import Color, CustomApp, Notification, Settings, parse_color

__all__ = [
    "Color",
    "CustomApp",
    "DeviceClient",
    "Notification",
    "Settings",
    "create_session",
    "parse_color",
]
