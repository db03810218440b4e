"""Profile models consumed by the resolution engine.

The profile itself is owned by the profile collaborator. The engine only reads
it and derives a ProfileContext from it; nothing here is mutated.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserProfile(BaseModel):
    """Raw user profile as delivered by the profile collaborator.

    Attributes:
        fitness_level: beginner, intermediate, or advanced
        goals: Profile goal tags in priority order (weight_loss, strength, ...)
        available_equipment: Owned equipment tags
        workout_frequency: Weekly frequency tag (1-2, 3-4, 5+, daily, custom)
        preferred_location: Preferred location tag
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    fitness_level: str | None = None
    goals: list[str] = Field(default_factory=list)
    available_equipment: list[str] = Field(default_factory=list)
    workout_frequency: str | None = None
    preferred_location: str | None = None

    age: int | None = None
    weight: float | None = None
    height: float | None = None
    gender: str | None = None
    limitations: list[str] = Field(default_factory=list)
    limitation_notes: str | None = None


class ProfileState(BaseModel):
    """Profile collaborator state: the profile (if loaded) plus loading/error flags."""

    profile: UserProfile | None = None
    is_loading: bool = False
    error: str | None = None


class ProfileContext(BaseModel):
    """Profile-derived context for workout generation (read-only)."""

    model_config = ConfigDict(frozen=True)

    fitness_level: str
    goals: list[str] = Field(default_factory=list)
    available_equipment: list[str] = Field(default_factory=list)
    workout_frequency: str
    preferred_location: str


class ProfileStatus(BaseModel):
    has_profile: bool
    is_profile_complete: bool
    profile_completeness: int
    missing_profile_fields: list[str] = Field(default_factory=list)
