"""Session input models.

SessionInputs holds the raw values written by the eleven input panels for the
current editing session. Types are intentionally loose (plain str/int) so that
out-of-range or unknown values are stored as given and reported by the
validation pass instead of being rejected at construction.

Attribute names are snake_case; the camelCase aliases are the wire names used
by the panels and by the snapshot cache.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_CUSTOMIZATION_LENGTH = 500


class SessionField(StrEnum):
    """Session input field names (one or two per input panel)."""

    TODAYS_FOCUS = "todays_focus"
    DAILY_INTENSITY_LEVEL = "daily_intensity_level"
    TIME_CONSTRAINTS_TODAY = "time_constraints_today"
    EQUIPMENT_AVAILABLE_TODAY = "equipment_available_today"
    HEALTH_RESTRICTIONS_TODAY = "health_restrictions_today"
    LOCATION_TODAY = "location_today"
    ENVIRONMENT = "environment"
    ENERGY_LEVEL = "energy_level"
    MOOD_LEVEL = "mood_level"
    SLEEP_QUALITY = "sleep_quality"
    WORKOUT_CUSTOMIZATION = "workout_customization"
    FOCUS_AREA = "focus_area"
    MUSCLE_TARGETING = "muscle_targeting"


class MuscleTargeting(BaseModel):
    """Muscle-targeting projection carried inside the session inputs.

    Attributes:
        target_groups: Selected muscle groups, in selection order
        specific_muscles: Specific muscles selected per group
        primary_focus: Primary muscle group (first selected)
        selection_summary: Human-readable summary of the selection
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    target_groups: list[str] = Field(default_factory=list)
    specific_muscles: dict[str, list[str]] = Field(default_factory=dict)
    primary_focus: str | None = None
    selection_summary: str | None = None


class SessionInputs(BaseModel):
    """Raw per-panel values for the active editing session.

    Attributes:
        todays_focus: Focus tag (fat-burning, muscle-building, endurance, strength, flexibility, general-fitness)
        daily_intensity_level: Intensity for today on a 1-6 scale
        time_constraints_today: Minutes available today (>= 5)
        equipment_available_today: Equipment tags available today
        health_restrictions_today: Health restriction tags for today
        location_today: Where the user works out today
        environment: Alternate location tag written by the same panel
        energy_level: Energy rating 1-6
        mood_level: Mood rating 1-6 (1 = very stressed)
        sleep_quality: Sleep rating 1-6
        workout_customization: Free-text request, at most 500 characters
        focus_area: Muscle groups targeted, first element is the primary group
        muscle_targeting: Structured muscle targeting projection
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    todays_focus: str | None = None
    daily_intensity_level: int | None = None
    time_constraints_today: int | None = None
    equipment_available_today: list[str] | None = None
    health_restrictions_today: list[str] | None = None
    location_today: str | None = None
    environment: str | None = None
    energy_level: int | None = None
    mood_level: int | None = None
    sleep_quality: int | None = None
    workout_customization: str | None = None
    focus_area: list[str] | None = None
    muscle_targeting: MuscleTargeting | None = None

    @property
    def has_muscle_data(self) -> bool:
        """True when any muscle targeting is already present."""
        return bool(self.focus_area) or self.muscle_targeting is not None

    def to_snapshot(self) -> dict:
        """Serialize populated fields using wire (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
