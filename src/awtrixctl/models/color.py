"""Color model and codecs for the AWTRIX3 API."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from awtrixctl.exceptions import InvalidColorError, UnknownColorError

_HEX_RE = re.compile(r"[0-9A-Fa-f]{6}")


class Color(BaseModel):
    """Standard 8-bit RGB color.

    On the wire a color is always sent as an ``[r, g, b]`` array. When
    decoding, the array form is tried first, then a hex string with or
    without a leading ``#``.

    The model is frozen so colors are hashable values.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @model_validator(mode="before")
    @classmethod
    def decode_wire_format(cls, data: Any) -> Any:
        """Accept ``[r, g, b]`` arrays and hex strings as well as field mappings."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise ValueError(f"Color array must have 3 elements, got {len(data)}")
            return {"r": data[0], "g": data[1], "b": data[2]}
        if isinstance(data, str):
            try:
                color = cls.from_hex(data)
            except InvalidColorError as e:
                raise ValueError(e.user_message) from e
            return {"r": color.r, "g": color.g, "b": color.b}
        return data

    @model_serializer
    def serialize_rgb_array(self) -> list[int]:
        """Serialize as the RGB array the device expects."""
        return [self.r, self.g, self.b]

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a color from ``#RRGGBB`` or ``RRGGBB``.

        Raises:
            InvalidColorError: If the remainder is not exactly 6 hex digits
        """
        hex_part = value[1:] if value.startswith("#") else value
        if len(hex_part) != 6:
            raise InvalidColorError(value, f"hex color must be 6 characters, got {len(hex_part)}")
        if not _HEX_RE.fullmatch(hex_part):
            raise InvalidColorError(value, "not a hexadecimal color")
        return cls(
            r=int(hex_part[0:2], 16),
            g=int(hex_part[2:4], 16),
            b=int(hex_part[4:6], 16),
        )

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Look up a named color (case-insensitive).

        Raises:
            UnknownColorError: If the name is not in NAMED_COLORS
        """
        rgb = NAMED_COLORS.get(name.strip().lower())
        if rgb is None:
            raise UnknownColorError(name, known=list(NAMED_COLORS))
        return cls(r=rgb[0], g=rgb[1], b=rgb[2])

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to hex color string (e.g., '#FF0000').

        Example:
            >>> Color(r=255, g=0, b=0).to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.to_hex()


NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "white": (255, 255, 255),
    "black": (0, 0, 0),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "orange": (255, 165, 0),
    "purple": (128, 0, 128),
}


def parse_color(text: str) -> Color:
    """Parse a color typed by a user.

    Accepted syntaxes, tried in order:

    - hex: ``#RRGGBB`` or bare ``RRGGBB``
    - decimal triple: ``r,g,b`` (whitespace around components is ignored)
    - a name from NAMED_COLORS (case-insensitive)

    Unlike wire decoding this is strict: every component must be within
    0-255 and a triple must have exactly three parts.

    Raises:
        InvalidColorError: Malformed hex or triple, or empty input
        UnknownColorError: Input looked like a name but is not a known color
    """
    value = text.strip()
    if not value:
        raise InvalidColorError(text, "empty color")

    if value.startswith("#") or _HEX_RE.fullmatch(value):
        return Color.from_hex(value)

    if "," in value:
        parts = [part.strip() for part in value.split(",")]
        if len(parts) != 3:
            raise InvalidColorError(text, f"expected 3 components, got {len(parts)}")
        channels = []
        for part in parts:
            if not (part.isascii() and part.isdigit()):
                raise InvalidColorError(text, f"component {part!r} is not a number")
            channel = int(part)
            if channel > 255:
                raise InvalidColorError(text, f"component {channel} is out of range 0-255")
            channels.append(channel)
        return Color(r=channels[0], g=channels[1], b=channels[2])

    return Color.from_name(value)
