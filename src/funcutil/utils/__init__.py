"""Utility functions and helpers."""

from .logging import get_logger, configure_logging
from .io import load_config
from .timers import Timer, format_duration

__all__ = ["get_logger", "configure_logging", "load_config", "Timer", "format_duration"]
