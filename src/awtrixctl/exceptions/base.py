"""Base exception class for awtrixctl.

All custom exceptions inherit from AwtrixError to allow catching
all app-specific errors in one place. The base class provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue
"""

from typing import Optional


class AwtrixError(Exception):
    """
    Base exception for all awtrixctl errors.

    Attributes:
        user_message: Human-friendly message for display
        technical_message: Detailed message for logs
        recoverable: Whether the error can be recovered from
        recovery_hint: Optional hint for how to fix the issue
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
        *args,
        **kwargs
    ):
        """
        Initialize an awtrixctl error.

        Args:
            user_message: Message to show to users
            technical_message: Detailed message for logs (defaults to user_message)
            recoverable: True if operation can be retried/recovered
            recovery_hint: Suggestion for how to fix the issue
        """
        super().__init__(user_message, *args, **kwargs)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        """Return user-friendly message."""
        return self.user_message

    def get_full_message(self) -> str:
        """Get complete error message with recovery hint."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg


class SerializationError(AwtrixError):
    """JSON could not be encoded or decoded."""

    def __init__(self, what: str, detail: str, source: Optional[str] = None):
        """
        Initialize serialization error.

        Args:
            what: What was being (de)serialized, e.g. "settings response"
            detail: The underlying parser message
            source: File path or URL the data came from (optional)
        """
        where = f" from {source}" if source else ""
        super().__init__(
            user_message=f"Could not decode {what}{where}: {detail}",
            technical_message=f"Serialization of {what}{where} failed: {detail}",
        )
        self.what = what
        self.detail = detail
        self.source = source
