"""Validation over session inputs and resolved parameters.

Every function here is pure: it reads its inputs and returns a fresh result.
Validation errors are surfaced as field-keyed messages and never raised, so the
caller decides whether to block submission.
"""

from typing import Any

from loguru import logger

from session_resolver.config.settings import settings
from session_resolver.mapping.tables import ENVIRONMENT_VALUES, FOCUS_VALUES
from session_resolver.muscles.constants import VALID_GROUPS
from session_resolver.resolution.types import ExplicitFields, ResolvedParameters
from session_resolver.session.types import MAX_CUSTOMIZATION_LENGTH, SessionInputs
from session_resolver.validation.types import ValidationResult

SCALE_MIN = 1
SCALE_MAX = 6
MIN_DURATION_MINUTES = 5

RATING_FIELDS = {
    "daily_intensity_level": "Intensity level",
    "energy_level": "Energy level",
    "mood_level": "Mood level",
    "sleep_quality": "Sleep quality",
}

RESOLVED_LOCATIONS = frozenset((*ENVIRONMENT_VALUES, "any"))

REQUIRED_FIELD_LABELS = {
    "has_duration": "Workout Duration",
    "has_focus": "Fitness Goal",
}


def _in_scale(value: Any) -> bool:
    return isinstance(value, int) and SCALE_MIN <= value <= SCALE_MAX


def validate(session_inputs: SessionInputs, max_groups: int | None = None) -> ValidationResult:
    """Range, membership, and length checks over the raw session inputs.

    Absent fields are not errors; only populated values are checked.

    Args:
        session_inputs: Current session inputs
        max_groups: Focus-area group limit (defaults to the configured limit)

    Returns:
        ValidationResult keyed by session field name
    """
    errors: dict[str, str] = {}

    for field, label in RATING_FIELDS.items():
        value = getattr(session_inputs, field)
        if value is not None and not _in_scale(value):
            errors[field] = f"{label} must be between {SCALE_MIN} and {SCALE_MAX}"

    duration = session_inputs.time_constraints_today
    if duration is not None and duration < MIN_DURATION_MINUTES:
        errors["time_constraints_today"] = f"Duration must be at least {MIN_DURATION_MINUTES} minutes"

    focus = session_inputs.todays_focus
    if focus is not None and focus not in FOCUS_VALUES:
        errors["todays_focus"] = f"Unknown workout focus: {focus}"

    for field in ("location_today", "environment"):
        value = getattr(session_inputs, field)
        if value is not None and value not in ENVIRONMENT_VALUES:
            errors[field] = f"Unknown location: {value}"

    customization = session_inputs.workout_customization
    if customization is not None and len(customization) > MAX_CUSTOMIZATION_LENGTH:
        errors["workout_customization"] = f"Customization must be at most {MAX_CUSTOMIZATION_LENGTH} characters"

    limit = max_groups if max_groups is not None else settings.max_muscle_groups
    focus_area = session_inputs.focus_area or []
    if len(focus_area) > limit:
        errors["focus_area"] = f"Maximum {limit} muscle groups allowed"
    else:
        invalid = [group for group in focus_area if group not in VALID_GROUPS]
        if invalid:
            errors["focus_area"] = f"Invalid muscle groups: {', '.join(invalid)}"

    if errors:
        logger.bind(fields=sorted(errors)).debug("Session input validation failed")

    return ValidationResult(is_valid=not errors, errors=errors)


def validate_resolved(resolved: ResolvedParameters) -> ValidationResult:
    """Checks over the resolved parameter set before submission."""
    errors: dict[str, str] = {}

    if resolved.duration is not None and resolved.duration < MIN_DURATION_MINUTES:
        errors["duration"] = f"Duration must be at least {MIN_DURATION_MINUTES} minutes"
    if not _in_scale(resolved.intensity_level):
        errors["intensity_level"] = f"Intensity level must be between {SCALE_MIN} and {SCALE_MAX}"
    if not resolved.goals:
        errors["goals"] = "A fitness goal is required"
    if resolved.location not in RESOLVED_LOCATIONS:
        errors["location"] = f"Unknown location: {resolved.location}"

    return ValidationResult(is_valid=not errors, errors=errors)


def panel_status(session_inputs: SessionInputs, explicit: ExplicitFields | None = None) -> dict[str, Any]:
    """Per-panel fill status over the eleven input panels.

    A panel counts as filled when its session value or its explicit
    counterpart is non-empty.

    Returns:
        Dict of has_* booleans plus completion_percentage
    """
    explicit = explicit or ExplicitFields()
    s = session_inputs

    status: dict[str, Any] = {
        "has_focus": bool(s.todays_focus or explicit.goals),
        "has_intensity": bool(s.daily_intensity_level or explicit.intensity_level),
        "has_duration": bool(s.time_constraints_today or explicit.duration),
        "has_equipment": bool(s.equipment_available_today or explicit.equipment),
        "has_restrictions": bool(s.health_restrictions_today or explicit.restrictions),
        "has_location": bool(s.location_today or s.environment or explicit.location),
        "has_stress": bool(s.mood_level or explicit.stress_level),
        "has_energy": bool(s.energy_level or explicit.energy_level),
        "has_sleep": bool(s.sleep_quality or explicit.sleep_quality),
        "has_customization": bool(s.workout_customization or explicit.custom_notes),
        "has_muscle_targeting": bool(s.has_muscle_data or explicit.primary_muscle_focus),
    }
    filled = sum(1 for value in status.values() if value)
    status["completion_percentage"] = round(filled / len(status) * 100)
    return status


def completion(session_inputs: SessionInputs, explicit: ExplicitFields | None = None) -> int:
    """Integer percentage of the eleven panels with a value (progress feedback only)."""
    return panel_status(session_inputs, explicit)["completion_percentage"]


def missing_required_fields(session_inputs: SessionInputs, explicit: ExplicitFields | None = None) -> list[str]:
    """Labels of the mandatory panels (duration and focus) still empty.

    Intensity is never listed: it is always derivable from the profile.
    """
    status = panel_status(session_inputs, explicit)
    return [label for key, label in REQUIRED_FIELD_LABELS.items() if not status[key]]


def has_minimum_required_data(session_inputs: SessionInputs, explicit: ExplicitFields | None = None) -> bool:
    return not missing_required_fields(session_inputs, explicit)
