"""Statement events for spectaculous."""

from spectaculous.events.sink import EventSink, ListSink, LoggingSink, MultiSink, NullSink
from spectaculous.events.types import (
    BaseEvent,
    Event,
    StatementFailedEvent,
    StatementKind,
    StatementPassedEvent,
    parse_event,
)

__all__ = [
    "BaseEvent",
    "Event",
    "StatementKind",
    "StatementPassedEvent",
    "StatementFailedEvent",
    "parse_event",
    "EventSink",
    "MultiSink",
    "NullSink",
    "ListSink",
    "LoggingSink",
]
