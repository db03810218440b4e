"""Session parameter resolution.

Merges session inputs, the profile context, and the muscle selection into the
canonical ResolvedParameters payload for the generation service.

Resolution order (explicit, no guessing):
1. duration: session time constraint, else explicit duration
2. goals: mapped session focus, else explicit goals
3. fitness_level: profile only ("intermediate" without a profile)
4. intensity_level / exercise_complexity: profile integration priority chains
5. stress / energy / sleep: mapped session rating, else explicit label
6. location: session location, else session environment, else explicit, else "any"
7. custom_notes: explicit notes, session customization, explicit preferences, joined with "; "
8. primary_muscle_focus: explicit, else muscle targeting primary, else first focus area
9. session_context: the structured form of 1-8
10. difficulty: mirror of fitness_level

Pure and referentially transparent: identical inputs give identical output.
"""

from loguru import logger

from session_resolver.config.settings import settings
from session_resolver.mapping.tables import (
    ENVIRONMENT_VALUES,
    map_energy,
    map_focus_to_goal,
    map_mood,
    map_sleep,
)
from session_resolver.muscles.selection import to_targeting
from session_resolver.muscles.types import MuscleSelectionData
from session_resolver.profile.integration import (
    derive_exercise_complexity,
    derive_intensity_level,
    effective_fitness_level,
    profile_payload,
)
from session_resolver.profile.types import ProfileContext
from session_resolver.resolution.debug import log_mapping_results
from session_resolver.resolution.types import (
    CustomizationContext,
    DailyState,
    EnvironmentContext,
    ExplicitFields,
    FocusContext,
    ResolvedParameters,
    SessionContext,
)
from session_resolver.session.types import MuscleTargeting, SessionInputs

NOTES_SEPARATOR = "; "
DEFAULT_LOCATION = "any"
RESOLVED_LOCATIONS = frozenset((*ENVIRONMENT_VALUES, DEFAULT_LOCATION))


def resolve_duration(session: SessionInputs, explicit: ExplicitFields) -> int | None:
    # Session value wins over the explicit field
    return session.time_constraints_today or explicit.duration


def resolve_goals(session: SessionInputs, explicit: ExplicitFields) -> str | None:
    if session.todays_focus:
        return map_focus_to_goal(session.todays_focus)
    return explicit.goals


def resolve_stress_level(session: SessionInputs, explicit: ExplicitFields) -> str | None:
    if session.mood_level:
        return map_mood(session.mood_level)
    return explicit.stress_level


def resolve_energy_level(session: SessionInputs, explicit: ExplicitFields) -> str | None:
    if session.energy_level:
        return map_energy(session.energy_level)
    return explicit.energy_level


def resolve_sleep_quality(session: SessionInputs, explicit: ExplicitFields) -> str | None:
    if session.sleep_quality:
        return map_sleep(session.sleep_quality)
    return explicit.sleep_quality


def resolve_location(session: SessionInputs, explicit: ExplicitFields) -> str:
    """First recognized location tag from session location, environment, explicit field.

    Unrecognized tags are skipped rather than passed through.
    """
    for candidate in (session.location_today, session.environment, explicit.location):
        if candidate and candidate in RESOLVED_LOCATIONS:
            return candidate
    return DEFAULT_LOCATION


def resolve_custom_notes(session: SessionInputs, explicit: ExplicitFields) -> str:
    segments = [explicit.custom_notes, session.workout_customization, explicit.preferences]
    return NOTES_SEPARATOR.join(segment for segment in segments if segment)


def resolve_muscle_targeting(
    session: SessionInputs,
    muscle_selection: MuscleSelectionData | None,
) -> MuscleTargeting | None:
    """Muscle-targeting projection.

    Priority: session muscle_targeting > non-empty muscle selection > focus area.
    """
    if session.muscle_targeting is not None:
        return session.muscle_targeting
    if muscle_selection is not None and not muscle_selection.is_empty:
        return to_targeting(muscle_selection)
    if session.focus_area:
        return MuscleTargeting(
            target_groups=list(session.focus_area),
            specific_muscles={},
            primary_focus=session.focus_area[0],
        )
    return None


def resolve_primary_muscle_focus(
    session: SessionInputs,
    explicit: ExplicitFields,
    targeting: MuscleTargeting | None,
) -> str | None:
    if explicit.primary_muscle_focus:
        return explicit.primary_muscle_focus
    if targeting is not None and targeting.primary_focus:
        return targeting.primary_focus
    if session.focus_area:
        return session.focus_area[0]
    return None


def resolve(
    session_inputs: SessionInputs,
    profile_context: ProfileContext | None,
    muscle_selection: MuscleSelectionData | None,
    explicit: ExplicitFields | None = None,
) -> ResolvedParameters:
    """Resolve the canonical request parameters.

    Args:
        session_inputs: Current per-panel session values
        profile_context: Profile-derived context, None when no profile is loaded
        muscle_selection: Current muscle selection, None if not tracked
        explicit: Directly set form fields (defaults to none)

    Returns:
        ResolvedParameters ready for validation and submission
    """
    explicit = explicit or ExplicitFields()

    duration = resolve_duration(session_inputs, explicit)
    goals = resolve_goals(session_inputs, explicit)
    fitness_level = effective_fitness_level(profile_context)
    intensity_level = derive_intensity_level(session_inputs, explicit, fitness_level)
    exercise_complexity = derive_exercise_complexity(explicit, fitness_level)
    stress_level = resolve_stress_level(session_inputs, explicit)
    energy_level = resolve_energy_level(session_inputs, explicit)
    sleep_quality = resolve_sleep_quality(session_inputs, explicit)
    location = resolve_location(session_inputs, explicit)
    custom_notes = resolve_custom_notes(session_inputs, explicit)
    muscle_targeting = resolve_muscle_targeting(session_inputs, muscle_selection)
    primary_muscle_focus = resolve_primary_muscle_focus(session_inputs, explicit, muscle_targeting)

    equipment = list(session_inputs.equipment_available_today or explicit.equipment or [])
    restrictions = list(session_inputs.health_restrictions_today or [])

    session_context = SessionContext(
        daily_state=DailyState(stress=stress_level, energy=energy_level, sleep=sleep_quality),
        environment=EnvironmentContext(location=location, equipment=equipment),
        focus=FocusContext(
            primary_goal=goals,
            muscle_groups=list(session_inputs.focus_area or []),
            restrictions=restrictions,
        ),
        customization=CustomizationContext(notes=custom_notes, intensity_preference=intensity_level),
    )

    resolved = ResolvedParameters(
        duration=duration,
        goals=goals,
        fitness_level=fitness_level,
        intensity_level=intensity_level,
        exercise_complexity=exercise_complexity,
        stress_level=stress_level,
        energy_level=energy_level,
        sleep_quality=sleep_quality,
        location=location,
        custom_notes=custom_notes,
        primary_muscle_focus=primary_muscle_focus,
        session_context=session_context,
        muscle_targeting=muscle_targeting,
        difficulty=fitness_level,
        equipment=equipment,
        restrictions=restrictions,
        profile_context=profile_payload(profile_context),
    )

    logger.bind(
        has_profile=profile_context is not None,
        goals=goals,
        intensity_level=intensity_level,
        duration=duration,
    ).debug("Resolved session parameters")

    if settings.debug_mapping:
        log_mapping_results(session_inputs, profile_context, resolved)

    return resolved
