"""Tests for session and resolved-parameter validation and completion tracking."""

from session_resolver.resolution.resolver import resolve
from session_resolver.resolution.types import ExplicitFields
from session_resolver.session.types import MuscleTargeting, SessionInputs
from session_resolver.validation.validators import (
    completion,
    has_minimum_required_data,
    missing_required_fields,
    panel_status,
    validate,
    validate_resolved,
)

ALL_PANELS = SessionInputs(
    todays_focus="strength",
    daily_intensity_level=4,
    time_constraints_today=30,
    equipment_available_today=["dumbbells"],
    health_restrictions_today=["knee"],
    location_today="gym",
    energy_level=4,
    mood_level=3,
    sleep_quality=5,
    workout_customization="supersets please",
    muscle_targeting=MuscleTargeting(target_groups=["chest"], primary_focus="chest"),
)


class TestValidate:
    def test_populated_valid_inputs(self):
        result = validate(ALL_PANELS)

        assert result.is_valid is True
        assert result.errors == {}

    def test_empty_inputs_are_valid(self):
        assert validate(SessionInputs()).is_valid

    def test_range_errors(self):
        result = validate(SessionInputs(daily_intensity_level=7, energy_level=0, mood_level=3, sleep_quality=-1))

        assert result.is_valid is False
        assert set(result.errors) == {"daily_intensity_level", "energy_level", "sleep_quality"}
        assert result.errors["energy_level"] == "Energy level must be between 1 and 6"

    def test_duration_minimum(self):
        result = validate(SessionInputs(time_constraints_today=4))
        assert result.errors == {"time_constraints_today": "Duration must be at least 5 minutes"}

        assert validate(SessionInputs(time_constraints_today=5)).is_valid

    def test_membership_errors(self):
        result = validate(SessionInputs(todays_focus="yoga", location_today="moon", environment="home"))

        assert set(result.errors) == {"todays_focus", "location_today"}

    def test_customization_length(self):
        result = validate(SessionInputs(workout_customization="z" * 501))
        assert "workout_customization" in result.errors

    def test_focus_area_limits(self):
        assert "focus_area" in validate(SessionInputs(focus_area=["chest", "back", "legs", "arms"])).errors
        assert "focus_area" in validate(SessionInputs(focus_area=["wings"])).errors
        assert validate(SessionInputs(focus_area=["chest", "back"])).is_valid

    def test_focus_area_limit_is_configurable(self, monkeypatch):
        four_groups = SessionInputs(focus_area=["chest", "back", "legs", "arms"])

        assert validate(four_groups, max_groups=4).is_valid
        assert validate(four_groups, max_groups=2).errors["focus_area"] == "Maximum 2 muscle groups allowed"

        monkeypatch.setattr("session_resolver.validation.validators.settings.max_muscle_groups", 4)
        assert validate(four_groups).is_valid

    def test_validation_does_not_mutate(self):
        inputs = SessionInputs(energy_level=9)
        validate(inputs)
        assert inputs.energy_level == 9


class TestValidateResolved:
    def test_valid_resolution(self):
        resolved = resolve(SessionInputs(todays_focus="strength", time_constraints_today=20), None, None)
        assert validate_resolved(resolved).is_valid

    def test_missing_goal_and_short_duration(self):
        resolved = resolve(SessionInputs(time_constraints_today=3), None, None)
        result = validate_resolved(resolved)

        assert set(result.errors) == {"goals", "duration"}

    def test_out_of_range_intensity(self):
        resolved = resolve(SessionInputs(todays_focus="strength", daily_intensity_level=8), None, None)
        assert validate_resolved(resolved).errors == {"intensity_level": "Intensity level must be between 1 and 6"}


class TestCompletion:
    def test_zero_panels(self):
        assert completion(SessionInputs()) == 0

    def test_all_eleven_panels(self):
        assert completion(ALL_PANELS) == 100

    def test_partial(self):
        # 3 of 11 panels
        assert completion(SessionInputs(todays_focus="strength", mood_level=2, time_constraints_today=20)) == 27

    def test_explicit_fields_count(self):
        explicit = ExplicitFields(duration=30, goals="build-muscle")
        status = panel_status(SessionInputs(), explicit)

        assert status["has_duration"] is True
        assert status["has_focus"] is True
        assert status["has_sleep"] is False
        assert status["completion_percentage"] == 18

    def test_focus_area_counts_as_muscle_panel(self):
        assert panel_status(SessionInputs(focus_area=["legs"]))["has_muscle_targeting"] is True


class TestRequiredFields:
    def test_missing_duration_and_focus(self):
        assert missing_required_fields(SessionInputs()) == ["Workout Duration", "Fitness Goal"]
        assert has_minimum_required_data(SessionInputs()) is False

    def test_intensity_is_never_required(self):
        inputs = SessionInputs(todays_focus="endurance", time_constraints_today=25)

        assert missing_required_fields(inputs) == []
        assert has_minimum_required_data(inputs) is True

    def test_explicit_duration_satisfies_requirement(self):
        inputs = SessionInputs(todays_focus="endurance")
        assert missing_required_fields(inputs, ExplicitFields(duration=30)) == []
