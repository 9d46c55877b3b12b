"""Fluent statement chain.

Usage:
    describe("stack")
        .given(supplier=list)
        .expect(0).from_(len)
        .expect(IndexError).when(lambda stack: stack.pop())
        .because("a fresh stack accepts pushes")
        .then(lambda stack: stack.append(1)).will_succeed()

Every `given` / `because` returns a new `Spec`; statements (`expect...`,
`then...`, `wait_for`) evaluate immediately and return the node they ran on,
or raise `Failure`.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, NoReturn

from spectaculous.errors import Failure, NoTargetError, WaitForError, compose_message
from spectaculous.events.sink import EventSink, NullSink
from spectaculous.events.types import (
    Event,
    StatementFailedEvent,
    StatementKind,
    StatementPassedEvent,
)
from spectaculous.outcome import Outcome, catch_for, check_error_kind, error_matches
from spectaculous.types import (
    Action,
    ErrorKind,
    Operation,
    Predicate,
    Supplier,
    T,
    TargetedAction,
    accepts_argument,
    is_error_kind,
    is_matcher,
    takes_no_arguments,
)

logger = logging.getLogger(__name__)

_UNSET: Any = object()


def _no_target() -> NoReturn:
    raise NoTargetError()


@dataclass(frozen=True)
class Spec(Generic[T]):
    """An immutable node of a statement chain.

    Attributes:
        scenario: Description of the behavior under test.
        supplier: Zero-argument callable producing the target. Called fresh
            for every statement that needs the target.
        reason: Optional clause appended to failure messages.
        sink: Receives one event per evaluated statement.
    """

    scenario: str
    supplier: Supplier = _no_target
    reason: str = ""
    sink: EventSink = field(default_factory=NullSink, repr=False, compare=False)

    # -- state ---------------------------------------------------------------

    def target(self) -> T:
        """Produce the target object."""
        return self.supplier()

    @property
    def message(self) -> str:
        return compose_message(self.scenario, self.reason)

    def given(self, value: T = _UNSET, *, supplier: Supplier | None = None) -> Spec[T]:
        """Replace the target object.

        Args:
            value: The new target object.
            supplier: Zero-argument callable producing the target on each
                statement. Mutually exclusive with `value`.
        """
        if (value is _UNSET) == (supplier is None):
            raise TypeError("given() takes either a value or a supplier")
        if supplier is None:
            supplier = lambda: value  # noqa: E731
        return dataclasses.replace(self, supplier=supplier)

    def because(self, reason: str) -> Spec[T]:
        """Set the reason used by failure messages of the following statements."""
        return dataclasses.replace(self, reason=reason)

    # -- statement starters --------------------------------------------------

    def expect(self, expected: Any) -> StatementActionDefinition[T] | StatementOperationDefinition[T]:
        """Start a statement.

        Depending on `expected`:
            - exception class (or tuple of them): the action must raise it
            - matcher (has `matches`): the result must match
            - callable taking no arguments: the result must equal what it returns
            - any other callable: predicate the result must satisfy
            - anything else: the result must equal it
        """
        if is_error_kind(expected):
            return self.expect_error(expected)
        if is_matcher(expected):
            return self.expect_that(expected.matches)
        if callable(expected) and not inspect.isclass(expected):
            if takes_no_arguments(expected) and not accepts_argument(expected):
                return self.expect_supplied(expected)
            return self.expect_that(expected)
        return self.expect_value(expected)

    def expect_error(self, kind: ErrorKind) -> StatementActionDefinition[T]:
        """Start a statement defining an error that must be raised."""
        return StatementActionDefinition(self, check_error_kind(kind))

    def expect_that(self, predicate: Predicate) -> StatementOperationDefinition[T]:
        """Start a statement defining a predicate the result must satisfy."""
        return StatementOperationDefinition(self, predicate)

    def expect_value(self, value: Any) -> StatementOperationDefinition[T]:
        """Start a statement defining a value the result must equal."""
        return self.expect_that(lambda result: result == value)

    def expect_supplied(self, supplier: Supplier) -> StatementOperationDefinition[T]:
        """Start a statement whose expected value is produced by `supplier`."""
        return self.expect_that(lambda result: result == supplier())

    def then(self, action: Action | TargetedAction) -> OutcomeDefinition[T]:
        """Define an action whose outcome is declared next."""
        return OutcomeDefinition(self, action)

    def wait_for(self, action: Action | TargetedAction) -> Spec[T]:
        """Run `action` before continuing the chain.

        The action runs once, synchronously. Whatever it raises is re-raised
        as `WaitForError`.
        """
        outcome = self._run(action)
        if outcome.raised:
            error = WaitForError.wrap(outcome.error)
            self._emit(
                StatementFailedEvent(
                    scenario=self.scenario,
                    reason=self.reason,
                    statement=StatementKind.WAIT_FOR,
                    message=str(error),
                    error_type=type(outcome.error).__name__,
                )
            )
            raise error from outcome.error
        return self._pass(StatementKind.WAIT_FOR)

    # -- evaluation ----------------------------------------------------------

    def _call(self, action: Callable[..., Any]) -> Any:
        if accepts_argument(action):
            return action(self.target())
        return action()

    def _run(self, action: Callable[..., Any], catch: ErrorKind = Exception) -> Outcome:
        return Outcome.capture(self._call, action, catch=catch)

    def _expect_error(
        self, kind: ErrorKind, action: Callable[..., Any], statement: StatementKind
    ) -> Spec[T]:
        outcome = self._run(action, catch=catch_for(kind))
        if not outcome.raised:
            self._fail(statement)
        if not error_matches(outcome.error, kind):
            self._fail(statement, cause=outcome.error)
        return self._pass(statement)

    def _expect_value(self, predicate: Predicate, operation: Operation) -> Spec[T]:
        statement = StatementKind.EXPECT_VALUE
        result = Outcome.capture(self.target).then(operation)
        if result.raised:
            self._fail(statement, cause=result.error)
        check = result.then(lambda value: bool(predicate(value)))
        if check.raised:
            self._fail(statement, cause=check.error)
        if not check.value:
            logger.debug("%s: predicate rejected %r", self.scenario, result.value)
            self._fail(statement)
        return self._pass(statement)

    def _pass(self, statement: StatementKind) -> Spec[T]:
        logger.debug("%s: %s passed", self.message, statement.value)
        self._emit(
            StatementPassedEvent(
                scenario=self.scenario, reason=self.reason, statement=statement
            )
        )
        return self

    def _fail(self, statement: StatementKind, cause: BaseException | None = None) -> NoReturn:
        failure = Failure(self.scenario, self.reason)
        logger.debug("%s: %s failed (cause: %r)", self.message, statement.value, cause)
        self._emit(
            StatementFailedEvent(
                scenario=self.scenario,
                reason=self.reason,
                statement=statement,
                message=str(failure),
                error_type=type(cause).__name__ if cause is not None else None,
            )
        )
        raise failure from cause

    def _emit(self, event: Event) -> None:
        try:
            self.sink.emit(event)
        except Exception:
            logger.warning("event sink %r failed to emit", self.sink, exc_info=True)


@dataclass(frozen=True)
class StatementActionDefinition(Generic[T]):
    """Pending `expect(kind)` statement, completed by `when`."""

    spec: Spec[T]
    kind: ErrorKind

    def when(self, action: Action | TargetedAction) -> Spec[T]:
        """Run `action` (with the target if it takes one); it must raise `kind`."""
        return self.spec._expect_error(self.kind, action, StatementKind.EXPECT_ERROR)


@dataclass(frozen=True)
class StatementOperationDefinition(Generic[T]):
    """Pending value statement, completed by `from_`."""

    spec: Spec[T]
    predicate: Predicate

    def from_(self, operation: Operation) -> Spec[T]:
        """Apply `operation` to the target and test the result."""
        return self.spec._expect_value(self.predicate, operation)


@dataclass(frozen=True)
class OutcomeDefinition(Generic[T]):
    """Pending `then(action)` statement, completed by an outcome."""

    spec: Spec[T]
    action: Action | TargetedAction

    def will_throw(self, kind: ErrorKind) -> Spec[T]:
        """The action must raise `kind` or one of its subclasses."""
        return self.spec._expect_error(
            check_error_kind(kind), self.action, StatementKind.WILL_THROW
        )

    def will_fail(self) -> Spec[T]:
        """The action must raise something."""
        if not self.spec._run(self.action).raised:
            self.spec._fail(StatementKind.WILL_FAIL)
        return self.spec._pass(StatementKind.WILL_FAIL)

    def will_succeed(self) -> Spec[T]:
        """The action must not raise."""
        outcome = self.spec._run(self.action)
        if outcome.raised:
            self.spec._fail(StatementKind.WILL_SUCCEED, cause=outcome.error)
        return self.spec._pass(StatementKind.WILL_SUCCEED)


def describe(scenario: str | type, sink: EventSink | None = None) -> Spec:
    """Start a new spec.

    Args:
        scenario: Description of the behavior under test, or a class whose
            qualified name becomes the description.
        sink: Optional event sink shared by every node of the chain.
    """
    if inspect.isclass(scenario):
        scenario = f"{scenario.__module__}.{scenario.__qualname__}"
    return Spec(scenario=scenario, sink=sink if sink is not None else NullSink())
