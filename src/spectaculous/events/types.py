"""Pydantic event models for spectaculous.

One event is emitted per evaluated statement, whether it passed or failed.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StatementKind(str, Enum):
    """Statement that produced an event."""

    EXPECT_ERROR = "expect_error"  # expect(kind).when(action)
    WILL_THROW = "will_throw"  # then(action).will_throw(kind)
    WILL_FAIL = "will_fail"
    WILL_SUCCEED = "will_succeed"
    EXPECT_VALUE = "expect_value"  # expect(predicate).from_(operation)
    WAIT_FOR = "wait_for"


class BaseEvent(BaseModel):
    """Base class for all statement events."""

    timestamp: datetime = Field(default_factory=_utc_now)
    scenario: str = ""
    reason: str = ""
    statement: StatementKind

    model_config = {"extra": "allow"}


class StatementPassedEvent(BaseEvent):
    """Emitted when a statement's expectation holds."""

    type: Literal["statement_passed"] = "statement_passed"


class StatementFailedEvent(BaseEvent):
    """Emitted when a statement raises."""

    type: Literal["statement_failed"] = "statement_failed"
    message: str = ""
    error_type: str | None = None  # type name of the chained cause


Event = Annotated[
    Union[StatementPassedEvent, StatementFailedEvent],
    Field(discriminator="type"),
]

_event_adapter: TypeAdapter[Event] = TypeAdapter(Event)


def parse_event(data: dict) -> Event:
    """Parse a dict into the matching event model."""
    return _event_adapter.validate_python(data)
