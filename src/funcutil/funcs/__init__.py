"""Function introspection helpers."""

from .names import name, require_callable, NotCallableError

__all__ = ["name", "require_callable", "NotCallableError"]
