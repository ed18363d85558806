"""Utility modules for awtrixctl."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
