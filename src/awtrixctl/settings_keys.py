"""Get and set Settings fields by key.

Keys are a fixed, enumerated set. Dotted keys such as ``time_app.format``
address one level of nesting; writing one creates the nested group on first
use, with its other fields left absent.

Example:
    ```python
    settings = set_setting(Settings(), "time_app.format", "2")
    get_setting(settings, "time_app.format")   # "2"
    get_setting(settings, "brightness")        # None (not set)
    ```
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from awtrixctl.exceptions import (
    InvalidColorError,
    InvalidSettingValueError,
    UnknownColorError,
    UnknownSettingError,
)
from awtrixctl.models.color import Color, parse_color
from awtrixctl.models.enums import Transition
from awtrixctl.models.settings import DateAppSettings, Settings, TimeAppSettings

Parser = Callable[[str, str], Any]


def parse_bool(key: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise InvalidSettingValueError(key, value, "Use 'true' or 'false'")


def uint_parser(maximum: int | None = None) -> Parser:
    """Build a parser for a non-negative integer, optionally bounded."""
    expected = f"Must be 0-{maximum}" if maximum is not None else "Must be a non-negative number"

    def parse(key: str, value: str) -> int:
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidSettingValueError(key, value, expected)
        number = int(text)
        if maximum is not None and number > maximum:
            raise InvalidSettingValueError(key, value, expected)
        return number

    return parse


def parse_text(key: str, value: str) -> str:
    return value


def parse_color_value(key: str, value: str) -> Color:
    try:
        return parse_color(value)
    except (InvalidColorError, UnknownColorError) as e:
        raise InvalidSettingValueError(
            key, value, "Use hex (#FF0000), r,g,b (255,0,0) or a color name (red)"
        ) from e


def render_value(value: Any) -> str:
    """Render a field value the way the CLI prints it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Color):
        return value.to_hex()
    return str(value)


@dataclass(frozen=True)
class SettingKey:
    """One addressable settings field."""

    key: str
    field: str
    parse: Parser
    description: str
    group: str | None = None


GROUP_MODELS: dict[str, type[BaseModel]] = {
    "time_app": TimeAppSettings,
    "date_app": DateAppSettings,
}

SETTING_KEYS: dict[str, SettingKey] = {
    entry.key: entry
    for entry in (
        SettingKey("brightness", "brightness", uint_parser(255), "Matrix brightness (0-255)"),
        SettingKey("auto_brightness", "auto_brightness", parse_bool,
                   "Automatic brightness control (true/false)"),
        SettingKey("text_color", "text_color", parse_color_value,
                   "Global text color (hex: #FF0000, rgb: 255,0,0, or name: red)"),
        SettingKey("auto_transition", "auto_transition", parse_bool,
                   "Automatic app switching (true/false)"),
        SettingKey("app_time", "app_time", uint_parser(), "App display duration in seconds"),
        SettingKey("transition", "transition", parse_text,
                   "Transition effect name ("
                   + ", ".join(t.value for t in Transition if t is not Transition.NONE) + ")"),
        SettingKey("transition_time", "transition_time", uint_parser(),
                   "Transition duration in milliseconds"),
        SettingKey("time_app.format", "format", uint_parser(5), "Time format (0-5)",
                   group="time_app"),
        SettingKey("time_app.show_weekday", "show_weekday", parse_bool,
                   "Show weekday (true/false)", group="time_app"),
        SettingKey("time_app.cal_header_color", "cal_header_color", parse_color_value,
                   "Calendar header color", group="time_app"),
        SettingKey("time_app.cal_body_color", "cal_body_color", parse_color_value,
                   "Calendar body color", group="time_app"),
        SettingKey("time_app.cal_text_color", "cal_text_color", parse_color_value,
                   "Calendar text color", group="time_app"),
        SettingKey("date_app.enabled", "enabled", parse_bool, "Enable date app (true/false)",
                   group="date_app"),
        SettingKey("date_app.format", "format", parse_text, "Date format string",
                   group="date_app"),
        SettingKey("scroll_speed", "scroll_speed", uint_parser(), "Scroll speed percentage"),
        SettingKey("temp_unit", "temp_unit", parse_text, "Temperature unit (C/F)"),
    )
}


def setting_key(key: str) -> SettingKey:
    """Registry entry for ``key``; raises UnknownSettingError if there is none."""
    entry = SETTING_KEYS.get(key)
    if entry is None:
        raise UnknownSettingError(key)
    return entry


def _raw_value(settings: Settings, entry: SettingKey) -> Any:
    if entry.group is None:
        return getattr(settings, entry.field)
    group = getattr(settings, entry.group)
    if group is None:
        return None
    return getattr(group, entry.field)


def parse_setting(key: str, value: str) -> Any:
    """Parse ``value`` for ``key`` without touching any Settings."""
    return setting_key(key).parse(key, value)


def get_setting(settings: Settings, key: str) -> str | None:
    """
    Read one setting as text.

    Returns:
        The rendered value (colors as hex), or None if the field is not set

    Raises:
        UnknownSettingError: If the key is not recognized
    """
    value = _raw_value(settings, setting_key(key))
    return None if value is None else render_value(value)


def set_setting(settings: Settings, key: str, value: str) -> Settings:
    """
    Return a copy of ``settings`` with one field parsed from text.

    Raises:
        UnknownSettingError: If the key is not recognized
        InvalidSettingValueError: If the value does not parse for that key
    """
    entry = setting_key(key)
    parsed = entry.parse(key, value)

    if entry.group is None:
        return settings.model_copy(update={entry.field: parsed})

    group = getattr(settings, entry.group)
    if group is None:
        group = GROUP_MODELS[entry.group]()
    return settings.model_copy(
        update={entry.group: group.model_copy(update={entry.field: parsed})}
    )


def list_settings() -> list[SettingKey]:
    """All recognized keys, in documentation order."""
    return list(SETTING_KEYS.values())


def format_settings(settings: Settings) -> list[tuple[str, str]]:
    """(key, text) pairs for every field that is set."""
    pairs = []
    for entry in SETTING_KEYS.values():
        value = _raw_value(settings, entry)
        if value is not None:
            pairs.append((entry.key, render_value(value)))
    return pairs
