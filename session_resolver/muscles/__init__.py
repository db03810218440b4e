"""Muscle-targeting selection: data, pure operations, remote client, synchronizer."""

from session_resolver.muscles.client import MuscleSelectionClient
from session_resolver.muscles.constants import MUSCLE_GROUP_DATA, MuscleGroup, muscles_in_group
from session_resolver.muscles.synchronizer import MuscleSelectionSynchronizer
from session_resolver.muscles.types import MuscleSelectionData, SyncState

__all__ = [
    "MUSCLE_GROUP_DATA",
    "MuscleGroup",
    "MuscleSelectionClient",
    "MuscleSelectionData",
    "MuscleSelectionSynchronizer",
    "SyncState",
    "muscles_in_group",
]
