"""Custom app and app-loop models."""

from pydantic import Field

from .base import WireModel
from .message import DisplayMessage, DisplayMessageBuilder


class CustomApp(DisplayMessage):
    """A persistent, named entry in the device's app loop."""

    lifetime: int | None = Field(
        default=None, ge=0, description="Remove the app if not updated within this many seconds"
    )
    save: bool | None = Field(default=None, description="Save the app to flash memory")
    pos: int | None = Field(default=None, ge=0, description="Position in the app loop")

    @classmethod
    def builder(cls) -> "CustomAppBuilder":
        """Start a fluent builder."""
        return CustomAppBuilder()


class CustomAppBuilder(DisplayMessageBuilder[CustomApp]):
    """Fluent builder for CustomApp."""

    model_type = CustomApp

    def lifetime(self, seconds: int) -> "CustomAppBuilder":
        return self._set("lifetime", seconds)

    def save(self, save: bool = True) -> "CustomAppBuilder":
        return self._set("save", save)

    def pos(self, position: int) -> "CustomAppBuilder":
        return self._set("pos", position)


class AppInfo(WireModel):
    """One app in the loop."""

    name: str
    icon: int | None = None
    enabled: bool | None = None
