"""Ports consumed by the application layer."""

from __future__ import annotations

from .sink import SinkPort

__all__ = ["SinkPort"]
