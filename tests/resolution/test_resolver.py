"""Tests for resolve(): priority ordering, fallbacks, and the payload shape."""

import pytest

from session_resolver.muscles.types import MuscleSelectionData
from session_resolver.profile.integration import create_profile_context
from session_resolver.profile.types import UserProfile
from session_resolver.resolution.resolver import resolve, resolve_custom_notes, resolve_location
from session_resolver.resolution.types import ExplicitFields
from session_resolver.session.types import MuscleTargeting, SessionInputs


@pytest.fixture
def beginner_context():
    return create_profile_context(
        UserProfile(
            fitness_level="beginner",
            goals=["weight_loss"],
            available_equipment=["dumbbells"],
            workout_frequency="3-4",
            preferred_location="home",
        )
    )


class TestEndToEnd:
    def test_strength_session(self):
        session = SessionInputs(
            todays_focus="strength",
            daily_intensity_level=5,
            time_constraints_today=20,
            mood_level=2,
        )

        resolved = resolve(session, None, None)

        assert resolved.goals == "increase-strength"
        assert resolved.intensity_level == 5
        assert resolved.duration == 20
        assert resolved.stress_level == "high"

    def test_resolution_is_deterministic(self, beginner_context):
        session = SessionInputs(todays_focus="endurance", energy_level=4, sleep_quality=6, focus_area=["legs"])
        explicit = ExplicitFields(custom_notes="warm up well")

        first = resolve(session, beginner_context, None, explicit)
        second = resolve(session, beginner_context, None, explicit)

        assert first == second
        assert first.to_payload() == second.to_payload()


class TestPriority:
    def test_session_duration_wins_over_explicit(self):
        resolved = resolve(SessionInputs(time_constraints_today=30), None, None, ExplicitFields(duration=45))
        assert resolved.duration == 30

    def test_explicit_duration_used_without_session_value(self):
        resolved = resolve(SessionInputs(), None, None, ExplicitFields(duration=45))
        assert resolved.duration == 45

    def test_goals_fallback_to_explicit(self):
        assert resolve(SessionInputs(), None, None, ExplicitFields(goals="build-muscle")).goals == "build-muscle"
        assert resolve(SessionInputs(), None, None).goals is None

    def test_wellbeing_fallback_to_explicit_labels(self):
        explicit = ExplicitFields(stress_level="low", energy_level="high", sleep_quality="poor")

        resolved = resolve(SessionInputs(energy_level=1), None, None, explicit)

        assert resolved.stress_level == "low"
        assert resolved.energy_level == "very_low"
        assert resolved.sleep_quality == "poor"

    def test_fitness_level_comes_from_profile_only(self, beginner_context):
        resolved = resolve(SessionInputs(), beginner_context, None, ExplicitFields(intensity=5))

        assert resolved.fitness_level == "beginner"
        assert resolved.difficulty == "beginner"
        assert resolved.intensity_level == 5
        assert resolved.exercise_complexity == "basic"


class TestFallbacks:
    def test_no_profile_no_session_intensity(self):
        resolved = resolve(SessionInputs(), None, None)

        assert resolved.fitness_level == "intermediate"
        assert resolved.intensity_level == 3
        assert resolved.exercise_complexity == "moderate"
        assert resolved.location == "any"
        assert resolved.custom_notes == ""
        assert resolved.profile_context is None

    def test_beginner_profile_defaults(self, beginner_context):
        resolved = resolve(SessionInputs(), beginner_context, None)

        assert resolved.intensity_level == 2
        assert resolved.exercise_complexity == "basic"


class TestLocation:
    @pytest.mark.parametrize(
        ("session", "explicit", "expected"),
        [
            (SessionInputs(location_today="gym", environment="home"), ExplicitFields(location="outdoors"), "gym"),
            (SessionInputs(environment="travel"), ExplicitFields(location="outdoors"), "travel"),
            (SessionInputs(), ExplicitFields(location="outdoors"), "outdoors"),
            (SessionInputs(), ExplicitFields(), "any"),
            (SessionInputs(location_today="moon"), ExplicitFields(location="home"), "home"),
        ],
    )
    def test_location_chain(self, session, explicit, expected):
        assert resolve_location(session, explicit) == expected


class TestCustomNotes:
    def test_segments_joined_in_order(self):
        session = SessionInputs(workout_customization="no burpees")
        explicit = ExplicitFields(custom_notes="sore shoulders", preferences="short rests")

        assert resolve_custom_notes(session, explicit) == "sore shoulders; no burpees; short rests"

    def test_empty_segments_dropped(self):
        session = SessionInputs(workout_customization="")
        explicit = ExplicitFields(preferences="short rests")

        assert resolve_custom_notes(session, explicit) == "short rests"


class TestMuscleTargeting:
    def test_session_targeting_wins(self):
        targeting = MuscleTargeting(target_groups=["arms"], primary_focus="arms")
        selection = MuscleSelectionData(selected_groups=["legs"], selected_muscles={"legs": []})

        resolved = resolve(SessionInputs(muscle_targeting=targeting), None, selection)

        assert resolved.muscle_targeting == targeting
        assert resolved.primary_muscle_focus == "arms"

    def test_selection_projected_when_session_has_none(self):
        selection = MuscleSelectionData(selected_groups=["back", "chest"], selected_muscles={"back": ["Lats"]})

        resolved = resolve(SessionInputs(), None, selection)

        assert resolved.muscle_targeting.target_groups == ["back", "chest"]
        assert resolved.primary_muscle_focus == "back"

    def test_focus_area_fallback(self):
        resolved = resolve(SessionInputs(focus_area=["core", "legs"]), None, MuscleSelectionData())

        assert resolved.muscle_targeting.target_groups == ["core", "legs"]
        assert resolved.primary_muscle_focus == "core"
        assert resolved.session_context.focus.muscle_groups == ["core", "legs"]

    def test_explicit_primary_focus_wins(self):
        resolved = resolve(
            SessionInputs(focus_area=["core"]),
            None,
            None,
            ExplicitFields(primary_muscle_focus="shoulders"),
        )
        assert resolved.primary_muscle_focus == "shoulders"

    def test_no_muscle_data(self):
        resolved = resolve(SessionInputs(), None, None)

        assert resolved.muscle_targeting is None
        assert resolved.primary_muscle_focus is None


class TestPayload:
    def test_session_context_and_payload(self, beginner_context):
        session = SessionInputs(
            todays_focus="fat-burning",
            equipment_available_today=["kettlebells"],
            health_restrictions_today=["lower-back"],
            location_today="home",
            mood_level=5,
            energy_level=3,
            sleep_quality=4,
            workout_customization="quiet workout",
            focus_area=["core"],
        )

        resolved = resolve(session, beginner_context, None)
        context = resolved.session_context

        assert context.daily_state.stress == "low"
        assert context.daily_state.energy == "moderate"
        assert context.daily_state.sleep == "good"
        assert context.environment.location == "home"
        assert context.environment.equipment == ["kettlebells"]
        assert context.focus.primary_goal == "lose-weight"
        assert context.focus.restrictions == ["lower-back"]
        assert context.customization.notes == "quiet workout"
        assert context.customization.intensity_preference == 2

        payload = resolved.to_payload()
        assert payload["goals"] == "lose-weight"
        assert payload["difficulty"] == "beginner"
        assert payload["equipment"] == ["kettlebells"]
        assert payload["muscleTargeting"]["targetGroups"] == ["core"]
        assert payload["profile_fitness_level"] == "beginner"
        assert payload["profile_goals"] == ["lose-weight"]
        assert "profile_context" not in payload

    def test_explicit_equipment_used_when_session_empty(self):
        resolved = resolve(SessionInputs(), None, None, ExplicitFields(equipment=["bench"]))
        assert resolved.equipment == ["bench"]
