"""Fields shared by notifications and custom apps."""

from typing import Any, Generic, Self, TypeVar

from pydantic import Field, field_validator

from .base import WireModel
from .color import Color


class EffectSettings(WireModel):
    """Tuning for a background effect."""

    speed: int | None = Field(default=None, ge=0, description="Effect speed")
    palette: str | None = Field(default=None, description="Color palette name")
    blend: bool | None = Field(default=None, description="Blend between palette colors")


class DisplayMessage(WireModel):
    """Content shown on the matrix, either as a notification or as a custom app.

    Every field is optional; absent fields are not sent.
    """

    text: str | None = Field(default=None, description="Text to display")
    icon: int | None = Field(default=None, ge=0, description="Icon ID")
    color: Color | None = Field(default=None, description="Text color")
    duration: int | None = Field(default=None, ge=0, description="Duration in seconds")
    sound: str | None = Field(default=None, description="Sound file to play")
    rtttl: str | None = Field(default=None, description="RTTTL melody to play")
    loop_sound: bool | None = Field(default=None, description="Loop the sound")
    progress: int | None = Field(default=None, description="Progress bar (0-100)")
    progress_c: Color | None = Field(default=None, description="Progress bar color")
    progress_bc: Color | None = Field(
        default=None, alias="progressBC", description="Progress bar background color"
    )
    rainbow: bool | None = Field(default=None, description="Rainbow text")
    stack: bool | None = Field(default=None, description="Stack behind other notifications")
    hold: bool | None = Field(default=None, description="Hold until dismissed")
    wakeup: bool | None = Field(default=None, description="Wake the matrix if it is off")
    no_scroll: bool | None = Field(default=None, description="Disable text scrolling")
    effect: str | None = Field(default=None, description="Background effect name")
    effect_settings: EffectSettings | None = Field(default=None, description="Effect tuning")

    @field_validator("progress")
    @classmethod
    def clamp_progress(cls, v: int | None) -> int | None:
        """Clamp progress into 0-100 instead of rejecting it."""
        return None if v is None else clamp_progress(v)


def clamp_progress(value: int) -> int:
    """Clamp a progress value into 0-100."""
    return max(0, min(100, value))


MessageType = TypeVar("MessageType", bound=DisplayMessage)


class DisplayMessageBuilder(Generic[MessageType]):
    """Fluent setters shared by the notification and custom app builders.

    Setters only store values; progress is clamped to 0-100. Anything that
    can fail (parsing colors, checking icon IDs) must happen before the
    builder is used, so ``build()`` never raises.
    """

    model_type: type[MessageType]

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> Self:
        self._fields[name] = value
        return self

    def text(self, text: str) -> Self:
        return self._set("text", text)

    def icon(self, icon: int) -> Self:
        return self._set("icon", icon)

    def color(self, color: Color) -> Self:
        return self._set("color", color)

    def duration(self, seconds: int) -> Self:
        return self._set("duration", seconds)

    def sound(self, sound: str) -> Self:
        return self._set("sound", sound)

    def rtttl(self, rtttl: str) -> Self:
        return self._set("rtttl", rtttl)

    def loop_sound(self, loop: bool = True) -> Self:
        return self._set("loop_sound", loop)

    def progress(self, progress: int) -> Self:
        return self._set("progress", clamp_progress(progress))

    def progress_color(self, color: Color) -> Self:
        return self._set("progress_c", color)

    def progress_background(self, color: Color) -> Self:
        return self._set("progress_bc", color)

    def rainbow(self, rainbow: bool = True) -> Self:
        return self._set("rainbow", rainbow)

    def stack(self, stack: bool = True) -> Self:
        return self._set("stack", stack)

    def hold(self, hold: bool = True) -> Self:
        return self._set("hold", hold)

    def wakeup(self, wakeup: bool = True) -> Self:
        return self._set("wakeup", wakeup)

    def no_scroll(self, no_scroll: bool = True) -> Self:
        return self._set("no_scroll", no_scroll)

    def effect(self, name: str, settings: EffectSettings | None = None) -> Self:
        self._set("effect", name)
        if settings is not None:
            self._set("effect_settings", settings)
        return self

    def build(self) -> MessageType:
        """Return the message; the builder stays usable afterwards."""
        return self.model_type.model_construct(**self._fields).model_copy(deep=True)
