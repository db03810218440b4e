"""Validation result model."""

from pydantic import BaseModel, Field


class ValidationResult(BaseModel):
    """Outcome of a validation pass.

    Produced fresh on each call; validation never mutates its inputs.

    Attributes:
        is_valid: True when no field errors were found
        errors: Field name -> human-readable message
    """

    is_valid: bool
    errors: dict[str, str] = Field(default_factory=dict)
