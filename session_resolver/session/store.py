"""Session input store.

Owns the SessionInputs record for one editing session. Every update goes
through the reducer (so partial updates never drop sibling fields) and the full
snapshot is then written to the expiring cache for page-reload recovery.
"""

from typing import Any

from loguru import logger
from pydantic import ValidationError

from session_resolver.session.cache import SESSION_INPUTS_KEY, SnapshotCache
from session_resolver.session.commands import ClearSession, SessionCommand, SetField, reduce_session
from session_resolver.session.types import MuscleTargeting, SessionField, SessionInputs


class SessionInputStore:
    """Mutable holder for the current session inputs.

    Attributes:
        session_id: Identifier of the editing session (scopes the cache key)
    """

    def __init__(
        self,
        session_id: str,
        cache: SnapshotCache | None = None,
        initial: SessionInputs | None = None,
    ):
        self.session_id = session_id
        self._cache = cache
        self._inputs = initial or SessionInputs()

    @property
    def inputs(self) -> SessionInputs:
        return self._inputs

    @property
    def cache_key(self) -> str:
        return SESSION_INPUTS_KEY.format(session_id=self.session_id)

    @property
    def has_muscle_data(self) -> bool:
        return self._inputs.has_muscle_data

    def dispatch(self, command: SessionCommand) -> SessionInputs:
        """Apply a command and persist the resulting snapshot.

        Rejected updates leave the record and the cache untouched.
        """
        updated = reduce_session(self._inputs, command)
        if updated is self._inputs:
            return self._inputs

        self._inputs = updated
        self._persist()
        return self._inputs

    def set_field(self, field: SessionField | str, value: Any) -> SessionInputs:
        return self.dispatch(SetField(field=SessionField(field), value=value))

    def reset(self) -> None:
        """Drop every field and the cached snapshot."""
        self._inputs = reduce_session(self._inputs, ClearSession())
        if self._cache is not None:
            self._cache.clear(self.cache_key)
        logger.bind(session_id=self.session_id).info("Session inputs reset")

    def restore(self) -> bool:
        """Reload the cached snapshot, if one exists and has not expired.

        Returns:
            True if a snapshot was restored
        """
        if self._cache is None:
            return False

        data = self._cache.load(self.cache_key)
        if not data:
            return False

        try:
            self._inputs = SessionInputs.model_validate(data)
        except ValidationError as e:
            logger.bind(session_id=self.session_id, error=str(e)).warning("Discarding unreadable session snapshot")
            self._cache.clear(self.cache_key)
            return False

        logger.bind(session_id=self.session_id, fields=sorted(data)).info("Restored session inputs from cache")
        return True

    def _persist(self) -> None:
        if self._cache is None:
            return
        self._cache.save(self.cache_key, self._inputs.to_snapshot())

    # Convenience setters, one per panel field

    def set_todays_focus(self, focus: str) -> SessionInputs:
        return self.set_field(SessionField.TODAYS_FOCUS, focus)

    def set_daily_intensity_level(self, level: int) -> SessionInputs:
        return self.set_field(SessionField.DAILY_INTENSITY_LEVEL, level)

    def set_time_constraints_today(self, minutes: int) -> SessionInputs:
        return self.set_field(SessionField.TIME_CONSTRAINTS_TODAY, minutes)

    def set_equipment_available_today(self, equipment: list[str]) -> SessionInputs:
        return self.set_field(SessionField.EQUIPMENT_AVAILABLE_TODAY, equipment)

    def set_health_restrictions_today(self, restrictions: list[str]) -> SessionInputs:
        return self.set_field(SessionField.HEALTH_RESTRICTIONS_TODAY, restrictions)

    def set_location_today(self, location: str) -> SessionInputs:
        return self.set_field(SessionField.LOCATION_TODAY, location)

    def set_environment(self, environment: str) -> SessionInputs:
        return self.set_field(SessionField.ENVIRONMENT, environment)

    def set_energy_level(self, level: int) -> SessionInputs:
        return self.set_field(SessionField.ENERGY_LEVEL, level)

    def set_mood_level(self, level: int) -> SessionInputs:
        return self.set_field(SessionField.MOOD_LEVEL, level)

    def set_sleep_quality(self, level: int) -> SessionInputs:
        return self.set_field(SessionField.SLEEP_QUALITY, level)

    def set_workout_customization(self, text: str) -> SessionInputs:
        return self.set_field(SessionField.WORKOUT_CUSTOMIZATION, text)

    def set_focus_area(self, groups: list[str]) -> SessionInputs:
        return self.set_field(SessionField.FOCUS_AREA, groups)

    def set_muscle_targeting(self, targeting: MuscleTargeting | dict | None) -> SessionInputs:
        return self.set_field(SessionField.MUSCLE_TARGETING, targeting)
