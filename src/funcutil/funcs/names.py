"""Resolve callables to their short declared names."""

import functools
from typing import Any, Callable

class NotCallableError(TypeError):
    """Raised when a name is requested for something that cannot be called."""

def require_callable(value: Any) -> None:
    """Raise ``NotCallableError`` unless ``value`` can be called."""
    if not callable(value):
        raise NotCallableError(
            f"funcname: argument must be a function, got {type(value).__name__}"
        )

def name(function: Callable[..., Any]) -> str:
    """Return the unqualified declared name of a callable.

    Module, class and ``<locals>`` qualification is stripped, so a method
    ``Stack.push`` gives ``push`` and ``os.path.join`` gives ``join``.

    Args:
        function: Function, method, class, partial or callable instance

    Returns:
        Last segment of the callable's qualified name

    Raises:
        NotCallableError: If ``function`` is not callable
    """
    require_callable(function)
    return _qualified_name(function).rsplit('.', 1)[-1]

def _qualified_name(function: Callable[..., Any]) -> str:
    while isinstance(function, functools.partial):
        function = function.func

    qualname = getattr(function, '__qualname__', None) or getattr(function, '__name__', None)
    if isinstance(qualname, str) and qualname:
        return qualname

    # Callable instance without a name of its own
    return type(function).__qualname__
