"""Command-line interface for awtrixctl."""

from .main import cli

__all__ = ["cli"]
