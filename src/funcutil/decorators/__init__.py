"""Timing decorators."""

from .timer import (
    HIDDEN,
    Hidden,
    Named,
    NameDisplay,
    new,
    new_with_func_name_in_log,
    timed,
)

__all__ = [
    "HIDDEN",
    "Hidden",
    "Named",
    "NameDisplay",
    "new",
    "new_with_func_name_in_log",
    "timed",
]
