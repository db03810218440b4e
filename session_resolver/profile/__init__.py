"""Profile integration: profile context, completeness, and profile-driven defaults."""

from session_resolver.profile.integration import (
    create_profile_context,
    derive_exercise_complexity,
    derive_intensity_level,
    effective_fitness_level,
    missing_profile_fields,
    profile_completeness,
    profile_defaults,
    profile_payload,
    profile_status,
)
from session_resolver.profile.types import ProfileContext, ProfileState, ProfileStatus, UserProfile

__all__ = [
    "ProfileContext",
    "ProfileState",
    "ProfileStatus",
    "UserProfile",
    "create_profile_context",
    "derive_exercise_complexity",
    "derive_intensity_level",
    "effective_fitness_level",
    "missing_profile_fields",
    "profile_completeness",
    "profile_defaults",
    "profile_payload",
    "profile_status",
]
