"""Decorators that log how long a function takes to run.

``new`` times a no-argument function and logs the elapsed duration.
``new_with_func_name_in_log`` does the same and can put a function name in
the log line. To time a function that takes arguments or returns something,
pass a closure as the action and the real function as the name source::

    def is_palindrome(s):
        return s == s[::-1]

    s = "I love Python!"
    results = {}
    timer1 = new_with_func_name_in_log(
        Named(is_palindrome), lambda: results.update(a=is_palindrome(s))
    )
    timer2 = new_with_func_name_in_log(
        HIDDEN, lambda: results.update(b=is_palindrome(s))
    )
    timer1()
    timer2()

logs::

    2024/05/01 10:00:00 -- func is_palindrome executed in 1.208µs --
    2024/05/01 10:00:00 -- func executed in 583ns --

``timed`` is the plain decorator form of the same thing for functions
called with arguments.
"""

import functools
import logging
from typing import Any, Callable, Optional, TypeVar

from ..funcs.names import name, require_callable
from ..utils.logging import ROOT_LOGGER
from ..utils.timers import Timer

logger = logging.getLogger(f"{ROOT_LOGGER}.timer")

F = TypeVar("F", bound=Callable[..., Any])

class NameDisplay:
    """Whether, and from which callable, a timing log line shows a name."""

    def label(self) -> str:
        """Text placed between ``func`` and ``executed`` in the log line."""
        raise NotImplementedError

    @staticmethod
    def of(show_name: bool, source: Optional[Callable[..., Any]] = None) -> "NameDisplay":
        """Build a display from the flag/source pair.

        Args:
            show_name: Whether to show a name
            source: Callable whose name is shown; required when ``show_name``
                is true and must be None otherwise

        Returns:
            ``Named(source)`` or ``HIDDEN``
        """
        if show_name:
            if source is None:
                raise ValueError("show_name=True requires a name source")
            return Named(source)
        if source is not None:
            raise ValueError("show_name=False takes no name source")
        return HIDDEN

class Hidden(NameDisplay):
    """Log without a function name."""

    def label(self) -> str:
        return ""

    def __eq__(self, other):
        return isinstance(other, Hidden)

    def __hash__(self):
        return hash(Hidden)

    def __repr__(self):
        return "HIDDEN"

class Named(NameDisplay):
    """Log with the short name of ``source``."""

    def __init__(self, source: Callable[..., Any]):
        require_callable(source)
        self.source = source

    def label(self) -> str:
        return name(self.source) + " "

    def __eq__(self, other):
        return isinstance(other, Named) and other.source is self.source

    def __hash__(self):
        return hash((Named, id(self.source)))

    def __repr__(self):
        return f"Named({self.source!r})"

HIDDEN = Hidden()

def _log_elapsed(label: str, elapsed: str) -> None:
    logger.info(f"-- func {label}executed in {elapsed} --")

def new(action: Callable[[], Any]) -> Callable[[], None]:
    """Log the execution time of a no-argument function.

    Args:
        action: Function to run and time; its return value is discarded

    Returns:
        A function that runs ``action`` once per call and logs
        ``-- func executed in <duration> --``
    """
    return new_with_func_name_in_log(HIDDEN, action)

def new_with_func_name_in_log(
    display: NameDisplay,
    action: Callable[[], Any]
) -> Callable[[], None]:
    """Log the execution time of a no-argument function, optionally named.

    Args:
        display: ``HIDDEN`` or ``Named(function)``; the name is resolved
            from ``function``, which need not be ``action`` itself
        action: Function to run and time; its return value is discarded

    Returns:
        A function that runs ``action`` once per call and logs
        ``-- func <name> executed in <duration> --``. Exceptions raised by
        ``action`` propagate and nothing is logged for that call.
    """
    if not isinstance(display, NameDisplay):
        raise TypeError(f"display must be a NameDisplay, got {type(display).__name__}")
    require_callable(action)

    def wrapper() -> None:
        with Timer() as timer:
            action()
        _log_elapsed(display.label(), timer.elapsed)

    return wrapper

def timed(function: F) -> F:
    """Decorator logging the execution time of ``function`` under its name.

    Arguments and the return value pass straight through.
    """
    display = Named(function)

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        with Timer() as timer:
            result = function(*args, **kwargs)
        _log_elapsed(display.label(), timer.elapsed)
        return result

    return wrapper  # type: ignore[return-value]
