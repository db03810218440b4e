"""Profile integration.

Derives the profile context used by resolution and the profile-driven defaults
for intensity and exercise complexity. An absent profile is not an error: every
function here falls back to defaults when no profile is loaded.

Fitness level comes from the profile only. Session inputs and explicit form
fields never override it.
"""

from typing import Any

from loguru import logger

from session_resolver.mapping.tables import (
    DEFAULT_FITNESS_LEVEL,
    FITNESS_LEVELS,
    map_fitness_to_complexity,
    map_fitness_to_intensity,
    map_profile_equipment,
    map_profile_goal,
)
from session_resolver.profile.types import ProfileContext, ProfileStatus, UserProfile
from session_resolver.resolution.types import ExplicitFields
from session_resolver.session.types import SessionInputs

REQUIRED_PROFILE_FIELDS = ("fitness_level", "goals", "workout_frequency")
OPTIONAL_PROFILE_FIELDS = ("available_equipment", "preferred_location", "age", "weight", "height")

REQUIRED_WEIGHT = 0.7
OPTIONAL_WEIGHT = 0.3

MISSING_FIELD_LABELS = {
    "fitness_level": "Fitness Level",
    "goals": "Fitness Goals",
    "workout_frequency": "Workout Frequency",
}


def create_profile_context(profile: UserProfile | None) -> ProfileContext | None:
    """Map a loaded profile to the context used for workout generation.

    Args:
        profile: Profile from the profile collaborator, or None if not loaded

    Returns:
        ProfileContext, or None when no profile is loaded (caller falls back to defaults)
    """
    if profile is None:
        return None

    fitness_level = profile.fitness_level if profile.fitness_level in FITNESS_LEVELS else "beginner"

    return ProfileContext(
        fitness_level=fitness_level,
        goals=[map_profile_goal(goal) for goal in profile.goals],
        available_equipment=map_profile_equipment(profile.available_equipment),
        workout_frequency=profile.workout_frequency or "3-4",
        preferred_location=profile.preferred_location or "any",
    )


def effective_fitness_level(context: ProfileContext | None) -> str:
    """Fitness level used for resolution ("intermediate" when no profile)."""
    if context is None or not context.fitness_level:
        return DEFAULT_FITNESS_LEVEL
    return context.fitness_level


def derive_intensity_level(
    session: SessionInputs,
    explicit: ExplicitFields,
    fitness_level: str,
) -> int:
    """Derive intensity level.

    Priority: explicit intensity_level > session daily intensity > legacy
    explicit intensity > fitness-level default.
    """
    if explicit.intensity_level:
        return explicit.intensity_level
    if session.daily_intensity_level:
        return session.daily_intensity_level
    if explicit.intensity:
        return explicit.intensity
    return map_fitness_to_intensity(fitness_level)


def derive_exercise_complexity(explicit: ExplicitFields, fitness_level: str) -> str:
    if explicit.exercise_complexity:
        return explicit.exercise_complexity
    return map_fitness_to_complexity(fitness_level)


def _is_filled(value: Any) -> bool:
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) > 0
    return bool(value)


def profile_completeness(profile: UserProfile | None) -> int:
    """Weighted profile completeness score.

    Required fields (fitness level, goals, workout frequency) carry 70% of the
    score, the five optional fields carry 30%.

    Args:
        profile: Loaded profile, or None

    Returns:
        Integer percentage 0-100 (0 when no profile is loaded)
    """
    if profile is None:
        return 0

    completed_required = sum(1 for name in REQUIRED_PROFILE_FIELDS if _is_filled(getattr(profile, name)))
    completed_optional = sum(1 for name in OPTIONAL_PROFILE_FIELDS if _is_filled(getattr(profile, name)))

    required_score = (completed_required / len(REQUIRED_PROFILE_FIELDS)) * REQUIRED_WEIGHT
    optional_score = (completed_optional / len(OPTIONAL_PROFILE_FIELDS)) * OPTIONAL_WEIGHT

    return round((required_score + optional_score) * 100)


def missing_profile_fields(profile: UserProfile | None) -> list[str]:
    """Labels of required profile fields that are still empty."""
    if profile is None:
        return []
    return [
        MISSING_FIELD_LABELS[name]
        for name in REQUIRED_PROFILE_FIELDS
        if not _is_filled(getattr(profile, name))
    ]


def profile_status(profile: UserProfile | None) -> ProfileStatus:
    context = create_profile_context(profile)
    is_complete = bool(profile and profile.fitness_level and context and context.goals)
    status = ProfileStatus(
        has_profile=profile is not None,
        is_profile_complete=is_complete,
        profile_completeness=profile_completeness(profile),
        missing_profile_fields=missing_profile_fields(profile),
    )
    logger.bind(
        has_profile=status.has_profile,
        completeness=status.profile_completeness,
    ).debug("Computed profile status")
    return status


def profile_defaults(context: ProfileContext | None) -> dict[str, Any]:
    """Profile-based defaults for an empty workout form."""
    if context is None:
        return {}
    return {
        "goals": context.goals[0] if context.goals else "general-fitness",
        "equipment": list(context.available_equipment),
        "difficulty": context.fitness_level or DEFAULT_FITNESS_LEVEL,
        "location": context.preferred_location or "any",
    }


def profile_payload(context: ProfileContext | None) -> dict[str, Any] | None:
    """Flat profile fields included in the generation payload."""
    if context is None:
        return None
    return {
        "profile_goals": list(context.goals),
        "profile_equipment": list(context.available_equipment),
        "profile_fitness_level": context.fitness_level,
        "profile_workout_frequency": context.workout_frequency,
        "profile_preferred_location": context.preferred_location,
    }
