"""Muscle group data for workout targeting.

Six-group muscle classification with the specific muscles in each group.
"""

from enum import StrEnum


class MuscleGroup(StrEnum):
    """Targetable muscle groups (display order)."""

    BACK = "back"
    CHEST = "chest"
    ARMS = "arms"
    SHOULDERS = "shoulders"
    CORE = "core"
    LEGS = "legs"


MUSCLE_GROUP_DATA: dict[MuscleGroup, list[str]] = {
    MuscleGroup.BACK: ["Lats", "Rhomboids", "Middle Traps", "Lower Traps", "Rear Delts"],
    MuscleGroup.CHEST: ["Upper Chest", "Middle Chest", "Lower Chest"],
    MuscleGroup.ARMS: ["Biceps", "Triceps", "Forearms"],
    MuscleGroup.SHOULDERS: ["Front Delts", "Side Delts", "Rear Delts"],
    MuscleGroup.CORE: ["Upper Abs", "Lower Abs", "Obliques", "Transverse Abdominis"],
    MuscleGroup.LEGS: ["Quadriceps", "Hamstrings", "Glutes", "Calves"],
}

MAX_GROUPS = 3

MUSCLE_PRESETS: dict[str, list[MuscleGroup]] = {
    "upper-body": [MuscleGroup.CHEST, MuscleGroup.BACK],
    "lower-body": [MuscleGroup.LEGS, MuscleGroup.CORE],
    "full-body": [MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.LEGS],
    "core-focus": [MuscleGroup.CORE, MuscleGroup.BACK],
}

VALID_GROUPS = frozenset(group.value for group in MuscleGroup)


def muscles_in_group(group: str) -> list[str]:
    """Specific muscles in a group ([] for unknown groups)."""
    if group not in VALID_GROUPS:
        return []
    return list(MUSCLE_GROUP_DATA[MuscleGroup(group)])
