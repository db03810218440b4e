"""Tests for SessionInputStore: setters, persistence, restore."""

import json

from session_resolver.session.store import SessionInputStore
from session_resolver.session.types import SessionField
from session_resolver.validation.validators import validate


class TestSetters:
    def test_setters_accumulate(self, session_store):
        session_store.set_todays_focus("strength")
        session_store.set_daily_intensity_level(5)
        session_store.set_time_constraints_today(20)
        session_store.set_mood_level(2)

        inputs = session_store.inputs
        assert inputs.todays_focus == "strength"
        assert inputs.daily_intensity_level == 5
        assert inputs.time_constraints_today == 20
        assert inputs.mood_level == 2

    def test_generic_setter_accepts_field_name(self, session_store):
        session_store.set_field("location_today", "gym")
        assert session_store.inputs.location_today == "gym"

    def test_has_muscle_data(self, session_store):
        assert session_store.has_muscle_data is False
        session_store.set_focus_area(["legs"])
        assert session_store.has_muscle_data is True

    def test_rejected_update_is_not_persisted(self, session_store, fake_redis):
        session_store.set_workout_customization("short")
        before = fake_redis.data[session_store.cache_key]

        session_store.set_workout_customization("y" * 501)

        assert session_store.inputs.workout_customization == "short"
        assert fake_redis.data[session_store.cache_key] == before

    def test_wrongly_typed_values_never_reach_the_record(self, session_store):
        session_store.set_time_constraints_today("30")
        session_store.set_field("workout_customization", 123)

        assert session_store.inputs.time_constraints_today == 30
        assert session_store.inputs.workout_customization is None
        assert validate(session_store.inputs).is_valid


class TestPersistence:
    def test_each_update_writes_snapshot_with_wire_names(self, session_store, fake_redis):
        session_store.set_todays_focus("endurance")
        session_store.set_equipment_available_today(["dumbbells"])

        envelope = json.loads(fake_redis.data["session_inputs:test-session"])
        assert envelope["data"] == {"todaysFocus": "endurance", "equipmentAvailableToday": ["dumbbells"]}
        assert fake_redis.ttls["session_inputs:test-session"] == 86400

    def test_restore_after_reload(self, session_store, snapshot_cache):
        session_store.set_todays_focus("strength")
        session_store.set_sleep_quality(3)

        reloaded = SessionInputStore("test-session", cache=snapshot_cache)
        assert reloaded.restore() is True
        assert reloaded.inputs == session_store.inputs

    def test_restore_without_snapshot(self, snapshot_cache):
        store = SessionInputStore("fresh", cache=snapshot_cache)
        assert store.restore() is False

    def test_restore_discards_unreadable_snapshot(self, snapshot_cache, fake_redis):
        snapshot_cache.save("session_inputs:bad", {"energyLevel": "not a number"})
        store = SessionInputStore("bad", cache=snapshot_cache)

        assert store.restore() is False
        assert "session_inputs:bad" not in fake_redis.data

    def test_reset_clears_record_and_cache(self, session_store, fake_redis):
        session_store.set_field(SessionField.MOOD_LEVEL, 4)
        session_store.reset()

        assert session_store.inputs.mood_level is None
        assert session_store.cache_key not in fake_redis.data

    def test_store_without_cache(self):
        store = SessionInputStore("no-cache")
        store.set_todays_focus("strength")
        assert store.restore() is False
        assert store.inputs.todays_focus == "strength"
