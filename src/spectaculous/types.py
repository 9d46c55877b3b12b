"""Core type definitions for spectaculous.

Statements accept plain callables. The aliases below only document which
shape a statement expects; `Matcher` is the single structural protocol,
matching any object that exposes `matches(item) -> bool` (PyHamcrest
matchers included).
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

# () -> Any, may raise
Action = Callable[[], Any]

# (target) -> Any, may raise
TargetedAction = Callable[[Any], Any]

# (target) -> result, may raise
Operation = Callable[[Any], Any]

# (result) -> bool
Predicate = Callable[[Any], bool]

# () -> value
Supplier = Callable[[], Any]

# Exception class or tuple of exception classes, as accepted by `except`
ErrorKind = type[BaseException] | tuple[type[BaseException], ...]


@runtime_checkable
class Matcher(Protocol):
    """Protocol for third-party matchers."""

    def matches(self, item: Any) -> bool:
        """Return True when `item` satisfies this matcher."""
        ...


def accepts_argument(fn: Callable[..., Any]) -> bool:
    """Check whether `fn` can be called with a single positional argument.

    Callables whose signature cannot be inspected (some builtins) are
    assumed to take the target.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return True
    try:
        sig.bind(None)
    except TypeError:
        return False
    return True


def takes_no_arguments(fn: Callable[..., Any]) -> bool:
    """Check whether `fn` can be called without arguments."""
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return False
    try:
        sig.bind()
    except TypeError:
        return False
    return True


def is_matcher(value: Any) -> bool:
    """Check whether `value` is a matcher instance.

    Looks the attribute up dynamically, unlike `isinstance(value, Matcher)`,
    so matchers built on `__getattr__` (mocks, proxies) are recognized too.
    """
    return not inspect.isclass(value) and callable(getattr(value, "matches", None))


def is_error_kind(value: Any) -> bool:
    """Check whether `value` is an exception class or a tuple of them."""
    if isinstance(value, tuple):
        return len(value) > 0 and all(is_error_kind(v) for v in value)
    return inspect.isclass(value) and issubclass(value, BaseException)
