"""Notification model and fluent builder."""

from pydantic import Field

from .message import DisplayMessage, DisplayMessageBuilder


class Notification(DisplayMessage):
    """A one-shot message shown over the app loop."""

    scroll_speed: int | None = Field(default=None, ge=0, description="Scroll speed percentage")

    @classmethod
    def builder(cls) -> "NotificationBuilder":
        """Start a fluent builder."""
        return NotificationBuilder()


class NotificationBuilder(DisplayMessageBuilder[Notification]):
    """Fluent builder for Notification.

    Example:
        >>> n = Notification.builder().text("Hi").progress(150).build()
        >>> n.progress
        100
    """

    model_type = Notification

    def scroll_speed(self, percent: int) -> "NotificationBuilder":
        return self._set("scroll_speed", percent)
