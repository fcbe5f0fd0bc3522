"""Generic ternary selection."""

from typing import TypeVar

T = TypeVar("T")

def ternary(cond: bool, if_true: T, if_false: T) -> T:
    """Return ``if_true`` when ``cond`` holds, otherwise ``if_false``.

    Both branches are evaluated by the caller before the call.
    """
    if cond:
        return if_true
    return if_false
