"""CLI commands for awtrixctl."""

from .apps import app_group, custom_group
from .device import device_group
from .display import display_group, indicator
from .info import info_group
from .notify import notify
from .power import power, sleep
from .settings import settings_group
from .sound import sound_group
from .system import system_group

__all__ = [
    "app_group",
    "custom_group",
    "device_group",
    "display_group",
    "indicator",
    "info_group",
    "notify",
    "power",
    "settings_group",
    "sleep",
    "sound_group",
    "system_group",
]
