from spectaculous.errors import Failure, NoTargetError, SpectacularError, WaitForError
from spectaculous.events import EventSink, ListSink, LoggingSink, MultiSink, NullSink
from spectaculous.outcome import Outcome, error_matches
from spectaculous.spec import (
    OutcomeDefinition,
    Spec,
    StatementActionDefinition,
    StatementOperationDefinition,
    describe,
)
from spectaculous.types import Action, Matcher, Operation, Predicate, TargetedAction

__all__ = [
    "describe",
    "Spec",
    "StatementActionDefinition",
    "StatementOperationDefinition",
    "OutcomeDefinition",
    "SpectacularError",
    "Failure",
    "NoTargetError",
    "WaitForError",
    "Outcome",
    "error_matches",
    "Action",
    "TargetedAction",
    "Operation",
    "Predicate",
    "Matcher",
    "EventSink",
    "NullSink",
    "ListSink",
    "LoggingSink",
    "MultiSink",
]
