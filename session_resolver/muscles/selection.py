"""Pure operations on a muscle selection.

Every operation returns a new MuscleSelectionData and never mutates its input.
Operations that would break a selection rule (unknown group, group limit,
muscle outside a selected group) return the input unchanged.
"""

from loguru import logger

from session_resolver.muscles.constants import (
    MAX_GROUPS,
    MUSCLE_PRESETS,
    VALID_GROUPS,
    muscles_in_group,
)
from session_resolver.muscles.types import MuscleSelectionData
from session_resolver.session.types import MuscleTargeting
from session_resolver.validation.types import ValidationResult


def add_group(selection: MuscleSelectionData, group: str, max_groups: int = MAX_GROUPS) -> MuscleSelectionData:
    """Add a muscle group with an empty specific-muscle list.

    No-op when the group is unknown, already selected, or the limit is reached.
    """
    group = str(group)
    if group not in VALID_GROUPS:
        logger.bind(group=group).warning("Ignoring unknown muscle group")
        return selection
    if group in selection.selected_groups:
        return selection
    if len(selection.selected_groups) >= max_groups:
        logger.bind(group=group, max_groups=max_groups).debug("Muscle group limit reached")
        return selection

    return MuscleSelectionData(
        selected_groups=[*selection.selected_groups, group],
        selected_muscles={**selection.selected_muscles, group: []},
    )


def remove_group(selection: MuscleSelectionData, group: str) -> MuscleSelectionData:
    group = str(group)
    muscles = {name: list(items) for name, items in selection.selected_muscles.items() if name != group}
    return MuscleSelectionData(
        selected_groups=[g for g in selection.selected_groups if g != group],
        selected_muscles=muscles,
    )


def toggle_muscle(selection: MuscleSelectionData, group: str, muscle: str) -> MuscleSelectionData:
    """Toggle a specific muscle within an already selected group."""
    group = str(group)
    if group not in selection.selected_groups:
        return selection

    current = selection.selected_muscles.get(group, [])
    if muscle in current:
        updated = [m for m in current if m != muscle]
    else:
        if muscle not in muscles_in_group(group):
            logger.bind(group=group, muscle=muscle).warning("Ignoring muscle outside its group")
            return selection
        updated = [*current, muscle]

    return MuscleSelectionData(
        selected_groups=list(selection.selected_groups),
        selected_muscles={**selection.selected_muscles, group: updated},
    )


def apply_preset(preset: str, max_groups: int = MAX_GROUPS) -> MuscleSelectionData:
    """Build a fresh selection from a named preset (upper-body, lower-body, full-body, core-focus)."""
    selection = MuscleSelectionData()
    for group in MUSCLE_PRESETS.get(preset, []):
        selection = add_group(selection, group.value, max_groups)
    return selection


def selection_summary(selection: MuscleSelectionData) -> str:
    """Human-readable summary, e.g. "chest, back (2 specific muscles)"."""
    if not selection.selected_groups:
        return "No muscle groups selected"

    specific_count = sum(len(muscles) for muscles in selection.selected_muscles.values())
    summary = ", ".join(selection.selected_groups)
    if specific_count > 0:
        summary += f" ({specific_count} specific muscles)"
    return summary


def to_targeting(selection: MuscleSelectionData) -> MuscleTargeting | None:
    """Project a selection into the session's muscle-targeting shape.

    Returns:
        MuscleTargeting with the first selected group as primary focus, or None for an empty selection
    """
    if not selection.selected_groups:
        return None
    return MuscleTargeting(
        target_groups=list(selection.selected_groups),
        specific_muscles={group: list(selection.selected_muscles.get(group, [])) for group in selection.selected_groups},
        primary_focus=selection.selected_groups[0],
        selection_summary=selection_summary(selection),
    )


def validate_selection(selection: MuscleSelectionData, max_groups: int = MAX_GROUPS) -> ValidationResult:
    errors: dict[str, str] = {}

    if len(selection.selected_groups) > max_groups:
        errors["selected_groups"] = f"Maximum {max_groups} muscle groups allowed"

    invalid = [group for group in selection.selected_groups if group not in VALID_GROUPS]
    if invalid:
        errors["selected_groups"] = f"Invalid muscle groups: {', '.join(invalid)}"

    for group, muscles in selection.selected_muscles.items():
        unknown = [m for m in muscles if m not in muscles_in_group(group)]
        if unknown:
            errors[f"selected_muscles.{group}"] = f"Unknown muscles for {group}: {', '.join(unknown)}"

    return ValidationResult(is_valid=not errors, errors=errors)
