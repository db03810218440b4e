"""Resolution input/output models.

ExplicitFields are the direct form fields that compete with session inputs.
ResolvedParameters is the canonical payload for the generation service: derived
on demand, never stored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from session_resolver.session.types import MuscleTargeting


class ExplicitFields(BaseModel):
    """Directly set form fields (legacy form and caller overrides).

    Attributes:
        duration: Explicit duration in minutes
        goals: Explicit goal tag
        intensity_level: Explicit intensity level (wins over every other source)
        intensity: Legacy intensity field
        exercise_complexity: Explicit complexity (wins over the fitness-level default)
        stress_level: Explicit stress label, used when no mood rating is present
        energy_level: Explicit energy label, used when no energy rating is present
        sleep_quality: Explicit sleep label, used when no sleep rating is present
        location: Explicit location tag
        custom_notes: Free-text notes
        preferences: Free-text preferences
        primary_muscle_focus: Explicit primary muscle group
        equipment: Explicit equipment tags
        restrictions: Explicit restriction text
    """

    model_config = ConfigDict(frozen=True)

    duration: int | None = None
    goals: str | None = None
    intensity_level: int | None = None
    intensity: int | None = None
    exercise_complexity: str | None = None
    stress_level: str | None = None
    energy_level: str | None = None
    sleep_quality: str | None = None
    location: str | None = None
    custom_notes: str | None = None
    preferences: str | None = None
    primary_muscle_focus: str | None = None
    equipment: list[str] | None = None
    restrictions: str | None = None


class DailyState(BaseModel):
    stress: str | None = None
    energy: str | None = None
    sleep: str | None = None


class EnvironmentContext(BaseModel):
    location: str
    equipment: list[str] = Field(default_factory=list)


class FocusContext(BaseModel):
    primary_goal: str | None = None
    muscle_groups: list[str] = Field(default_factory=list)
    restrictions: list[str] = Field(default_factory=list)


class CustomizationContext(BaseModel):
    notes: str
    intensity_preference: int


class SessionContext(BaseModel):
    """Structured daily selections, the preferred form for the generation API."""

    daily_state: DailyState
    environment: EnvironmentContext
    focus: FocusContext
    customization: CustomizationContext


class ResolvedParameters(BaseModel):
    """Canonical resolved request parameters.

    Every field is traceable to a session input, a profile field, an explicit
    field, or a static default. Flat top-level fields are kept for older payload
    consumers; `session_context` is the structured form.

    Attributes:
        difficulty: Mirror of fitness_level for consumers that predate fitness_level
        profile_context: Flat profile_* fields, None when no profile is loaded
    """

    model_config = ConfigDict(frozen=True)

    duration: int | None = None
    goals: str | None = None
    fitness_level: str
    intensity_level: int
    exercise_complexity: str
    stress_level: str | None = None
    energy_level: str | None = None
    sleep_quality: str | None = None
    location: str
    custom_notes: str
    primary_muscle_focus: str | None = None
    session_context: SessionContext
    muscle_targeting: MuscleTargeting | None = None
    difficulty: str
    equipment: list[str] = Field(default_factory=list)
    restrictions: list[str] = Field(default_factory=list)
    profile_context: dict[str, Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        """JSON-serializable payload for the generation service."""
        payload = self.model_dump(mode="json", exclude={"muscle_targeting", "profile_context"})
        payload["muscleTargeting"] = (
            self.muscle_targeting.model_dump(mode="json", by_alias=True) if self.muscle_targeting else None
        )
        if self.profile_context:
            payload.update(self.profile_context)
        return payload
