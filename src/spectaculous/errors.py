"""Error taxonomy for spectaculous.

Every error raised by a chain derives from `SpectacularError`, which is an
`AssertionError` so test runners report it as a failed assertion.
"""

from __future__ import annotations


class SpectacularError(AssertionError):
    """Base class for all errors raised by a spec chain."""


class Failure(SpectacularError):
    """An expectation was not met.

    The message is the scenario alone, or `"scenario: reason"` when a reason
    was given. The error that triggered the failure, if any, is chained as
    `__cause__`.
    """

    def __init__(self, scenario: str, reason: str = ""):
        self.scenario = scenario
        self.reason = reason
        super().__init__(compose_message(scenario, reason))


class NoTargetError(SpectacularError):
    """The target was requested before any `given` call."""

    def __init__(self, message: str = "No object given"):
        super().__init__(message)


class WaitForError(SpectacularError):
    """An action run through `wait_for` raised."""

    @classmethod
    def wrap(cls, error: BaseException) -> "WaitForError":
        return cls(f"{type(error).__name__}: {error}")


def compose_message(scenario: str, reason: str = "") -> str:
    """Build a failure message from a scenario and an optional reason."""
    return f"{scenario}: {reason}" if reason else scenario
