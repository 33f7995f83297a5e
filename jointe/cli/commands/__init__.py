"""CLI commands module."""

from . import config, headers

__all__ = ["headers", "config"]
