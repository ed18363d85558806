"""Data models for the AWTRIX3 API."""

from .app import AppInfo, CustomApp, CustomAppBuilder
from .base import WireModel
from .color import NAMED_COLORS, Color, parse_color
from .config import AppConfig, DeviceConfig, Preferences
from .enums import Effect, PowerState, Transition
from .message import EffectSettings
from .notification import Notification, NotificationBuilder
from .response import DeviceBackup, IndicatorStates, LoopInfo, Stats
from .settings import DateAppSettings, Settings, TimeAppSettings

__all__ = [
    "NAMED_COLORS",
    "AppConfig",
    "AppInfo",
    # Models
    "Color",
    "CustomApp",
    "CustomAppBuilder",
    "DateAppSettings",
    "DeviceBackup",
    "DeviceConfig",
    # Enums
    "Effect",
    "EffectSettings",
    "IndicatorStates",
    "LoopInfo",
    "Notification",
    "NotificationBuilder",
    "PowerState",
    "Preferences",
    "Settings",
    "Stats",
    "TimeAppSettings",
    "Transition",
    "WireModel",
    "parse_color",
]
