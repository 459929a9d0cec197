"""Application layer: the filtering logger and the ports it depends on."""

from __future__ import annotations

from .logger import Logger
from .ports import SinkPort

__all__ = ["Logger", "SinkPort"]
