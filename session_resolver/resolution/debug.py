"""Parameter-mapping verification metadata.

Builds the debugging block that traces each derived field back to its raw
session value, so a wrong payload can be pinned to a single mapping step.
"""

from typing import Any

from loguru import logger

from session_resolver.profile.types import ProfileContext
from session_resolver.resolution.types import ResolvedParameters
from session_resolver.session.types import SessionInputs


def _chain(raw: Any, mapped: Any, function: str, is_successful: bool) -> dict[str, Any]:
    return {
        "raw": raw,
        "mapped": mapped,
        "mapping_function": function,
        "is_successful": is_successful,
    }


def mapping_debug_info(
    session_inputs: SessionInputs,
    profile_context: ProfileContext | None,
    resolved: ResolvedParameters,
) -> dict[str, Any]:
    """Build the mapping verification block for a resolution.

    Returns:
        Dict with transformation_results, parameter_mapping_chain, and integration_status
    """
    populated = session_inputs.model_dump(exclude_none=True)

    return {
        "transformation_results": {
            "has_profile": profile_context is not None,
            "profile_fitness_level": profile_context.fitness_level if profile_context else None,
            "fitness_level": resolved.fitness_level,
            "intensity_level": resolved.intensity_level,
            "exercise_complexity": resolved.exercise_complexity,
            "daily_state": {
                "stress_level": resolved.stress_level,
                "energy_level": resolved.energy_level,
                "sleep_quality": resolved.sleep_quality,
            },
            "environment": {
                "location": resolved.location,
                "equipment_count": len(resolved.session_context.environment.equipment),
            },
            "customization": {
                "custom_notes_length": len(resolved.custom_notes),
                "primary_muscle_focus": resolved.primary_muscle_focus,
            },
        },
        "parameter_mapping_chain": {
            "stress": _chain(session_inputs.mood_level, resolved.stress_level, "map_mood", bool(resolved.stress_level)),
            "energy": _chain(session_inputs.energy_level, resolved.energy_level, "map_energy", bool(resolved.energy_level)),
            "sleep": _chain(session_inputs.sleep_quality, resolved.sleep_quality, "map_sleep", bool(resolved.sleep_quality)),
            "location": _chain(
                {"location_today": session_inputs.location_today, "environment": session_inputs.environment},
                resolved.location,
                "resolve_location",
                resolved.location != "any",
            ),
            "goals": _chain(session_inputs.todays_focus, resolved.goals, "map_focus_to_goal", bool(resolved.goals)),
        },
        "integration_status": {
            "session_inputs_fields": len(populated),
            "mapped_parameters_count": len(resolved.to_payload()),
            "session_inputs_status": "ACTIVE" if populated else "INACTIVE",
        },
    }


def log_mapping_results(
    session_inputs: SessionInputs,
    profile_context: ProfileContext | None,
    resolved: ResolvedParameters,
) -> None:
    info = mapping_debug_info(session_inputs, profile_context, resolved)
    logger.bind(**info).info("Parameter mapping completed")
