"""Guarded calls and error-kind matching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from spectaculous.types import ErrorKind, is_error_kind


@dataclass(frozen=True)
class Outcome:
    """Result of a guarded call: either a value or the error it raised."""

    value: Any = None
    error: BaseException | None = None

    @property
    def raised(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, value: Any = None) -> "Outcome":
        """The call returned `value`."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "Outcome":
        """The call raised `error`."""
        return cls(error=error)

    @classmethod
    def capture(
        cls,
        fn: Callable[..., Any],
        *args: Any,
        catch: ErrorKind = Exception,
    ) -> "Outcome":
        """Call `fn(*args)` and capture what it raised.

        Only errors matching `catch` are captured; anything else (by default
        KeyboardInterrupt, SystemExit and friends) propagates.
        """
        try:
            return cls.success(fn(*args))
        except catch as e:
            return cls.failure(e)

    def then(self, fn: Callable[[Any], Any], catch: ErrorKind = Exception) -> "Outcome":
        """Feed the value into `fn`, short-circuiting on a captured error."""
        if self.raised:
            return self
        return Outcome.capture(fn, self.value, catch=catch)


def error_matches(error: BaseException | None, kind: ErrorKind) -> bool:
    """Check whether `error` is an instance of `kind` (or one of its subclasses)."""
    return error is not None and isinstance(error, kind)


def check_error_kind(kind: Any) -> ErrorKind:
    """Validate an expected error kind, raising TypeError on misuse."""
    if not is_error_kind(kind):
        raise TypeError(
            f"expected an exception class or a tuple of exception classes, got {kind!r}"
        )
    return kind


def catch_for(kind: ErrorKind) -> tuple[type[BaseException], ...]:
    """Errors a statement expecting `kind` must capture."""
    kinds = kind if isinstance(kind, tuple) else (kind,)
    return (Exception, *kinds)
