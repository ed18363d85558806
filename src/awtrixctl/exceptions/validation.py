"""Input validation exceptions.

These are raised while parsing user input, before any request is sent:
- ValidationError: Base class for rejected input
- InvalidColorError: Malformed hex string or RGB triple
- UnknownColorError: Color name not in the named-color table (not an InvalidColorError)
- InvalidIconError: Icon ID fails a range check
- UnknownSettingError: Settings key is not recognized
- InvalidSettingValueError: Settings value fails to parse or is out of range
"""

from .base import AwtrixError


class ValidationError(AwtrixError):
    """User input was rejected before reaching the device."""

    def __init__(self, user_message: str, **kwargs):
        kwargs.setdefault("recoverable", True)
        super().__init__(user_message, **kwargs)


class InvalidColorError(ValidationError):
    """Color string could not be parsed."""

    def __init__(self, value: str, reason: str | None = None):
        """
        Initialize invalid color error.

        Args:
            value: The offending input
            reason: Why the input was rejected (optional)
        """
        msg = f"Invalid color format: {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(
            msg,
            recovery_hint="Use hex (#FF0000 or FF0000), r,g,b (255,0,0) or a color name (red)",
        )
        self.value = value
        self.reason = reason


class UnknownColorError(ValidationError):
    """Color name is not in the named-color table."""

    def __init__(self, name: str, known: list[str] | None = None):
        hint = f"Known colors: {', '.join(known)}" if known else None
        super().__init__(f"Unknown color: {name!r}", recovery_hint=hint)
        self.name = name


class InvalidIconError(ValidationError):
    """Icon ID failed validation."""

    def __init__(self, icon: int, reason: str = "out of range"):
        super().__init__(f"Invalid icon ID: {icon} ({reason})")
        self.icon = icon


class UnknownSettingError(ValidationError):
    """Settings key is not one of the recognized keys."""

    def __init__(self, key: str):
        super().__init__(
            f"Unknown setting key: {key}",
            recovery_hint="Run 'awtrixctl settings list' to see available settings",
        )
        self.key = key


class InvalidSettingValueError(ValidationError):
    """Settings value could not be parsed for its key."""

    def __init__(self, key: str, value: str, expected: str):
        """
        Initialize invalid setting value error.

        Args:
            key: The settings key being written
            value: The raw string value supplied
            expected: Description of the accepted form
        """
        super().__init__(
            f"Invalid value for '{key}': {value!r}. {expected}",
            technical_message=f"Setting {key}={value!r} rejected: {expected}",
        )
        self.key = key
        self.value = value
        self.expected = expected
