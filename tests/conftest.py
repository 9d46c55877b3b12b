"""Shared test fixtures for spectaculous tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from spectaculous.events.sink import ListSink
from spectaculous.spec import Spec, describe


# =============================================================================
# Targets
# =============================================================================


@pytest.fixture
def value() -> object:
    """Opaque target object."""
    return object()


@pytest.fixture
def result() -> object:
    """Opaque result of an operation on the target."""
    return object()


@pytest.fixture
def supplier(value: object) -> MagicMock:
    """Zero-argument supplier returning `value`."""
    return MagicMock(return_value=value)


@pytest.fixture
def operation(value: object, result: object) -> MagicMock:
    """Operation mapping `value` to `result`."""
    return MagicMock(side_effect=lambda target: result if target is value else None)


# =============================================================================
# Chains
# =============================================================================


@pytest.fixture
def sink() -> ListSink:
    """Fresh ListSink collecting statement events."""
    return ListSink()


@pytest.fixture
def spec(sink: ListSink) -> Spec:
    """Root spec named "test" with a collecting sink and no target."""
    return describe("test", sink=sink)
