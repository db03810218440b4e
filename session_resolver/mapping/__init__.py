"""Mapping tables from panel scales and tags to generation-service vocabularies."""

from session_resolver.mapping.tables import (
    map_energy,
    map_fitness_to_complexity,
    map_fitness_to_intensity,
    map_focus_to_goal,
    map_frequency_to_duration,
    map_mood,
    map_profile_equipment,
    map_profile_goal,
    map_sleep,
    panel_for_field,
)

__all__ = [
    "map_energy",
    "map_fitness_to_complexity",
    "map_fitness_to_intensity",
    "map_focus_to_goal",
    "map_frequency_to_duration",
    "map_mood",
    "map_profile_equipment",
    "map_profile_goal",
    "map_sleep",
    "panel_for_field",
]
