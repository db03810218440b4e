"""Session input store: raw per-panel values for the active editing session."""

from session_resolver.session.cache import SnapshotCache
from session_resolver.session.commands import ClearSession, SetField, reduce_session
from session_resolver.session.store import SessionInputStore
from session_resolver.session.types import MuscleTargeting, SessionField, SessionInputs

__all__ = [
    "ClearSession",
    "MuscleTargeting",
    "SessionField",
    "SessionInputStore",
    "SessionInputs",
    "SetField",
    "SnapshotCache",
    "reduce_session",
]
