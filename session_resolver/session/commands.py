"""Session input commands and reducer.

Panels never write the session record directly. Each update is a command
dispatched through `reduce_session`, which returns a new record with exactly one
field replaced. Sibling fields are preserved by construction.
"""

from dataclasses import dataclass
from typing import Any

from loguru import logger
from pydantic import ValidationError

from session_resolver.mapping.tables import panel_for_field
from session_resolver.session.types import (
    MAX_CUSTOMIZATION_LENGTH,
    SessionField,
    SessionInputs,
)


@dataclass(frozen=True)
class SetField:
    """Replace a single session field."""

    field: SessionField
    value: Any


@dataclass(frozen=True)
class ClearSession:
    """Drop every session field."""


SessionCommand = SetField | ClearSession


def reduce_session(current: SessionInputs, command: SessionCommand) -> SessionInputs:
    """Apply a command to the session inputs.

    Rules:
    - SetField replaces one field and preserves every other field
    - A workout customization longer than 500 characters is rejected, the
      previous value is kept
    - The value is coerced to the field type ("30" becomes 30, a camelCase
      dict becomes MuscleTargeting); a value that cannot be coerced is
      rejected and the previous value is kept
    - No range or enum checks here, validation is a separate pass

    Args:
        current: Current session inputs (never mutated)
        command: Command to apply

    Returns:
        New SessionInputs, or `current` if the update was rejected
    """
    if isinstance(command, ClearSession):
        return SessionInputs()

    field = SessionField(command.field)
    value = command.value

    if (
        field == SessionField.WORKOUT_CUSTOMIZATION
        and isinstance(value, str)
        and len(value) > MAX_CUSTOMIZATION_LENGTH
    ):
        logger.bind(field=field.value, length=len(value), limit=MAX_CUSTOMIZATION_LENGTH).warning(
            "Rejected session update: workout customization exceeds length limit"
        )
        return current

    try:
        updated = SessionInputs.model_validate({**current.model_dump(), field.value: value})
    except ValidationError as e:
        logger.bind(field=field.value, value=value, errors=e.error_count()).warning(
            "Rejected session update: value does not fit the field type"
        )
        return current

    logger.bind(
        field=field.value,
        panel=panel_for_field(field.value),
        value=getattr(updated, field.value),
    ).debug("Session input updated")

    return updated
