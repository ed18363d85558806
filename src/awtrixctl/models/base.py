"""Base model for sparse AWTRIX3 wire payloads."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from awtrixctl.exceptions import SerializationError


class WireModel(BaseModel):
    """Pydantic model with the device's sparse camelCase encoding.

    Python attributes are snake_case; the wire uses camelCase. Both names are
    accepted when decoding. Fields left as ``None`` are omitted entirely when
    encoding, because the firmware treats a missing key differently from an
    explicit ``null``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Encode as the JSON-ready dict sent to the device."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        """Encode as the JSON string sent to the device."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @classmethod
    def from_payload(cls, data: Any, source: str | None = None) -> Self:
        """Decode an already-parsed JSON value.

        Raises:
            SerializationError: If the data does not match the schema
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SerializationError(cls.__name__, _first_error(e), source) from e

    @classmethod
    def from_json(cls, text: str | bytes, source: str | None = None) -> Self:
        """Decode a JSON document.

        Raises:
            SerializationError: If the text is not valid JSON or does not match the schema
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise SerializationError(cls.__name__, _first_error(e), source) from e


def _first_error(error: ValidationError) -> str:
    errors = error.errors()
    if not errors:
        return str(error)
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    msg = first.get("msg", "validation failed")
    suffix = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{loc}: {msg}{suffix}" if loc else f"{msg}{suffix}"
