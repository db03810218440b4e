"""Muscle selection models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SyncState(StrEnum):
    """Synchronizer lifecycle state."""

    EMPTY = "empty"
    LOADING = "loading"
    SYNCED = "synced"
    SAVING = "saving"
    ERROR = "error"


class MuscleSelectionData(BaseModel):
    """Muscle-targeting selection, shared by the remote store and the local cache.

    Wire shape: {"selectedGroups": [...], "selectedMuscles": {group: [...]}}.

    Attributes:
        selected_groups: Selected muscle groups in selection order (bounded, default max 3)
        selected_muscles: Specific muscles selected per group
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    selected_groups: list[str] = Field(default_factory=list)
    selected_muscles: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.selected_groups and not any(self.selected_muscles.values())

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
