"""Device settings models.

Every field is optional. A missing field means "not sent / leave as is" on
the device, which is not the same as a default value.
"""

from pydantic import Field

from .base import WireModel
from .color import Color


class TimeAppSettings(WireModel):
    """Settings of the built-in time app."""

    format: int | None = Field(default=None, ge=0, le=5, description="Time format (0-5)")
    show_weekday: bool | None = Field(default=None, description="Show weekday")
    cal_header_color: Color | None = Field(default=None, description="Calendar header color")
    cal_body_color: Color | None = Field(default=None, description="Calendar body color")
    cal_text_color: Color | None = Field(default=None, description="Calendar text color")


class DateAppSettings(WireModel):
    """Settings of the built-in date app."""

    enabled: bool | None = Field(default=None, description="Enable date app")
    format: str | None = Field(default=None, description="Date format string")


class Settings(WireModel):
    """Device-wide configuration as read from and written to /api/settings."""

    brightness: int | None = Field(default=None, ge=0, le=255, description="Matrix brightness (0-255)")
    auto_brightness: bool | None = Field(default=None, description="Automatic brightness control")
    auto_transition: bool | None = Field(default=None, description="Automatic app switching")
    app_time: int | None = Field(default=None, ge=0, description="App display duration in seconds")
    transition: str | None = Field(default=None, description="Transition effect name")
    transition_time: int | None = Field(
        default=None, ge=0, description="Transition duration in milliseconds"
    )
    text_color: Color | None = Field(default=None, description="Global text color")
    time_app: TimeAppSettings | None = Field(default=None, description="Time app settings")
    date_app: DateAppSettings | None = Field(default=None, description="Date app settings")
    temp_unit: str | None = Field(default=None, description="Temperature unit (C/F)")
    scroll_speed: int | None = Field(default=None, ge=0, description="Scroll speed percentage")
