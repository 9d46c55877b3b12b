"""Event sink protocol and implementations for spectaculous.

A spec chain hands every statement event to its sink. Sinks observe; they
never change whether a statement passes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from spectaculous.events.types import Event

logger = logging.getLogger(__name__)


@runtime_checkable
class EventSink(Protocol):
    """Protocol for event sinks.

    Any class implementing this protocol can receive statement events.
    """

    def emit(self, event: Event) -> None:
        """Emit an event to this sink."""
        ...

    def close(self) -> None:
        """Release any resources held by the sink."""
        ...


class MultiSink:
    """Composite sink that broadcasts events to multiple sinks.

    Example:
        sink = MultiSink([ListSink(), LoggingSink()])
        describe("stack", sink=sink).given([]).expect(0).from_(len)
    """

    def __init__(self, sinks: list[EventSink] | None = None):
        """Initialize with a list of sinks.

        Args:
            sinks: Sinks to broadcast to. Can be empty.
        """
        self._sinks: list[EventSink] = list(sinks) if sinks else []

    def add(self, sink: EventSink) -> None:
        """Add a sink to the broadcast list.

        Args:
            sink: The sink to add.
        """
        self._sinks.append(sink)

    def remove(self, sink: EventSink) -> None:
        """Remove a sink from the broadcast list.

        Args:
            sink: The sink to remove. No error if not present.
        """
        try:
            self._sinks.remove(sink)
        except ValueError:
            pass

    def emit(self, event: Event) -> None:
        """Emit an event to all registered sinks.

        A failing sink is logged and skipped so the others still receive the
        event.

        Args:
            event: The statement event to emit.
        """
        for sink in self._sinks:
            try:
                sink.emit(event)
            except Exception:
                logger.warning("event sink %r failed to emit", sink, exc_info=True)

    def close(self) -> None:
        """Close all registered sinks.

        A sink that fails to close is logged and the rest are still closed.
        """
        for sink in self._sinks:
            try:
                sink.close()
            except Exception:
                logger.warning("event sink %r failed to close", sink, exc_info=True)

    def __len__(self) -> int:
        """Return the number of registered sinks."""
        return len(self._sinks)


class NullSink:
    """A sink that discards all events. Default for every chain."""

    def emit(self, event: Event) -> None:
        """Discard the event."""
        pass

    def close(self) -> None:
        """No-op close."""
        pass


class ListSink:
    """A sink that collects events into a list.

    Useful for testing and inspection.

    Example:
        sink = ListSink()
        describe("positive", sink=sink).given(5).expect(5).from_(abs)
        assert len(sink) == 1
    """

    def __init__(self) -> None:
        self.events: list[Event] = []

    def emit(self, event: Event) -> None:
        """Append the event to the internal list."""
        self.events.append(event)

    def close(self) -> None:
        """No-op close."""
        pass

    def clear(self) -> None:
        """Clear all collected events."""
        self.events.clear()

    @property
    def passed(self) -> list[Event]:
        """Events of statements that held."""
        return [e for e in self.events if e.type == "statement_passed"]

    @property
    def failed(self) -> list[Event]:
        """Events of statements that raised."""
        return [e for e in self.events if e.type == "statement_failed"]

    def __len__(self) -> int:
        """Return the number of collected events."""
        return len(self.events)


class LoggingSink:
    """A sink that writes events to a logger.

    Passed statements are logged at INFO, failed ones at WARNING.
    """

    def __init__(self, name: str = "spectaculous") -> None:
        """Initialize with a logger name.

        Args:
            name: Name of the logger events are written to.
        """
        self._logger = logging.getLogger(name)

    def emit(self, event: Event) -> None:
        """Log the event.

        Args:
            event: The statement event to log. Failed events carry the full
                failure message, which already starts with the scenario.
        """
        if event.type == "statement_failed":
            self._logger.warning("✗ %s [%s]", event.message, event.statement.value)
        else:
            label = f"{event.scenario}: {event.reason}" if event.reason else event.scenario
            self._logger.info("✓ %s [%s]", label, event.statement.value)

    def close(self) -> None:
        """No-op close."""
        pass
