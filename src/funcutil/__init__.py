"""
funcutil

Small function helpers: execution timing decorators, callable name
resolution and a generic ternary.
"""

__version__ = "1.0.0"

from .utils.logging import get_logger
from .funcs.names import name, NotCallableError
from .decorators.timer import (
    HIDDEN,
    Named,
    NameDisplay,
    new,
    new_with_func_name_in_log,
    timed,
)
from .ternary import ternary

__all__ = [
    "get_logger",
    "name",
    "NotCallableError",
    "HIDDEN",
    "Named",
    "NameDisplay",
    "new",
    "new_with_func_name_in_log",
    "timed",
    "ternary",
]
