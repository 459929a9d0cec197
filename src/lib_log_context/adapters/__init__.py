"""Adapters implementing the application ports."""

from __future__ import annotations

from .console.rich_console import RichConsoleSink

__all__ = ["RichConsoleSink"]
