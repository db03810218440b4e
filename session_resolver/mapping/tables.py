"""Static lookup tables for session parameter resolution.

Translates the 1-6 wellbeing and intensity scales used by the input panels into
the enumerations understood by the generation service, and translates focus and
profile vocabularies into the workout goal vocabulary.

Every function here is total: unrecognized input returns the table's fallback
instead of raising.
"""

from typing import Literal

from pydantic import BaseModel

StressLevel = Literal["very_high", "high", "moderate", "low"]
EnergyLevel = Literal["very_low", "low", "moderate", "high", "very_high"]
SleepQuality = Literal["poor", "fair", "good", "excellent"]
ExerciseComplexity = Literal["basic", "moderate", "advanced"]
FitnessLevel = Literal["beginner", "intermediate", "advanced"]

FOCUS_VALUES = (
    "fat-burning",
    "muscle-building",
    "endurance",
    "strength",
    "flexibility",
    "general-fitness",
)
ENVIRONMENT_VALUES = ("home", "gym", "outdoors", "travel", "limited-space")
FITNESS_LEVELS = ("beginner", "intermediate", "advanced")

DEFAULT_GOAL = "general-fitness"
DEFAULT_FITNESS_LEVEL: FitnessLevel = "intermediate"

# Mood 1 is "very stressed", mood 5-6 is "great"
MOOD_TO_STRESS: dict[int, StressLevel] = {
    1: "very_high",
    2: "high",
    3: "moderate",
    4: "low",
    5: "low",
    6: "low",
}

ENERGY_TO_LEVEL: dict[int, EnergyLevel] = {
    1: "very_low",
    2: "low",
    3: "moderate",
    4: "high",
    5: "very_high",
    6: "very_high",
}

SLEEP_TO_QUALITY: dict[int, SleepQuality] = {
    1: "poor",
    2: "poor",
    3: "fair",
    4: "good",
    5: "good",
    6: "excellent",
}

FOCUS_TO_GOAL: dict[str, str] = {
    "fat-burning": "lose-weight",
    "muscle-building": "build-muscle",
    "endurance": "improve-endurance",
    "strength": "increase-strength",
    "flexibility": "enhance-flexibility",
    "general-fitness": "general-fitness",
}

FITNESS_TO_INTENSITY: dict[str, int] = {
    "beginner": 2,
    "intermediate": 3,
    "advanced": 4,
}

FITNESS_TO_COMPLEXITY: dict[str, ExerciseComplexity] = {
    "beginner": "basic",
    "intermediate": "moderate",
    "advanced": "advanced",
}

PROFILE_GOAL_TO_GOAL: dict[str, str] = {
    "weight_loss": "lose-weight",
    "muscle_building": "build-muscle",
    "endurance": "improve-endurance",
    "strength": "increase-strength",
    "flexibility": "enhance-flexibility",
    "general_fitness": "general-fitness",
    "sport_specific": "sport-specific",
    # No dedicated workout goal for these two, use the closest option
    "rehabilitation": "general-fitness",
    "custom": "general-fitness",
}

PROFILE_EQUIPMENT_TO_EQUIPMENT: dict[str, str] = {
    "dumbbells": "dumbbells",
    "kettlebells": "kettlebells",
    "resistance_bands": "resistance-bands",
    "pull_up_bar": "pull-up-bar",
    "yoga_mat": "yoga-mat",
    "bench": "bench",
    "barbell": "barbell",
    "trx": "trx",
    "medicine_ball": "medicine-ball",
    "jump_rope": "jump-rope",
    "stability_ball": "stability-ball",
    "none": "none",
    "other": "none",
}

FIELD_TO_PANEL: dict[str, str] = {
    "todays_focus": "WorkoutFocusCard",
    "daily_intensity_level": "IntensityCard",
    "time_constraints_today": "DurationCard",
    "equipment_available_today": "EquipmentCard",
    "health_restrictions_today": "RestrictionsCard",
    "location_today": "LocationCard",
    "environment": "LocationCard",
    "energy_level": "EnergyMoodCard",
    "mood_level": "StressMoodCard",
    "sleep_quality": "SleepQualityCard",
    "workout_customization": "WorkoutCustomizationCard",
    "focus_area": "MuscleGroupCard",
    "muscle_targeting": "MuscleGroupCard",
}


class FrequencyGuidance(BaseModel):
    """Suggested session length for a weekly workout frequency."""

    frequency: str
    suggested_duration: str
    explanation: str


FREQUENCY_GUIDANCE: dict[str, FrequencyGuidance] = {
    "1-2": FrequencyGuidance(
        frequency="1-2 times/week",
        suggested_duration="45-60 minutes",
        explanation="Longer sessions for less frequent workouts",
    ),
    "3-4": FrequencyGuidance(
        frequency="3-4 times/week",
        suggested_duration="30-45 minutes",
        explanation="Balanced duration for regular training",
    ),
    "5+": FrequencyGuidance(
        frequency="5+ times/week",
        suggested_duration="15-30 minutes",
        explanation="Shorter sessions for frequent training",
    ),
    "daily": FrequencyGuidance(
        frequency="Daily",
        suggested_duration="15-30 minutes",
        explanation="Short daily sessions for consistency",
    ),
    "custom": FrequencyGuidance(
        frequency="Custom schedule",
        suggested_duration="30 minutes",
        explanation="Standard duration recommendation",
    ),
}


def map_mood(level: int | None) -> StressLevel:
    """Map a 1-6 mood rating to a stress level.

    Mood and stress run in opposite directions: a low mood rating means high stress.

    Args:
        level: Mood rating from the mood panel

    Returns:
        Stress level, "moderate" for unrecognized ratings
    """
    return MOOD_TO_STRESS.get(level, "moderate") if level is not None else "moderate"


def map_energy(level: int | None) -> EnergyLevel:
    """Map a 1-6 energy rating to an energy level (6 clamps to very_high)."""
    return ENERGY_TO_LEVEL.get(level, "moderate") if level is not None else "moderate"


def map_sleep(level: int | None) -> SleepQuality:
    """Map a 1-6 sleep rating to a sleep quality label."""
    return SLEEP_TO_QUALITY.get(level, "good") if level is not None else "good"


def map_focus_to_goal(focus: str | None) -> str:
    """Map today's focus tag to the goal vocabulary of the generation service."""
    if not focus:
        return DEFAULT_GOAL
    return FOCUS_TO_GOAL.get(focus, DEFAULT_GOAL)


def map_fitness_to_intensity(level: str | None) -> int:
    """Default intensity for a fitness level (beginner 2, intermediate 3, advanced 4)."""
    if not level:
        return 3
    return FITNESS_TO_INTENSITY.get(level, 3)


def map_fitness_to_complexity(level: str | None) -> ExerciseComplexity:
    """Default exercise complexity for a fitness level."""
    if not level:
        return "moderate"
    return FITNESS_TO_COMPLEXITY.get(level, "moderate")


def map_profile_goal(goal: str) -> str:
    return PROFILE_GOAL_TO_GOAL.get(goal, DEFAULT_GOAL)


def map_profile_equipment(items: list[str] | None) -> list[str]:
    """Map profile equipment to workout equipment tags.

    Unknown equipment maps to bodyweight ("none"). Duplicates produced by the
    mapping are dropped, keeping first-seen order.

    Args:
        items: Equipment tags from the profile

    Returns:
        Workout equipment tags, ["none"] when nothing is owned
    """
    if not items:
        return ["none"]

    mapped: list[str] = []
    for item in items:
        tag = PROFILE_EQUIPMENT_TO_EQUIPMENT.get(item, "none")
        if tag not in mapped:
            mapped.append(tag)
    return mapped or ["none"]


def map_frequency_to_duration(frequency: str | None) -> FrequencyGuidance:
    if not frequency:
        return FREQUENCY_GUIDANCE["3-4"]
    return FREQUENCY_GUIDANCE.get(frequency, FREQUENCY_GUIDANCE["3-4"])


def panel_for_field(field: str) -> str:
    """Name of the input panel that owns a session field (for update tracing)."""
    return FIELD_TO_PANEL.get(field, "UnknownCard")
