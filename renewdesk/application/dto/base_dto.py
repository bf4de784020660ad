"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from datetime import datetime
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from renewdesk.infrastructure.validation.validators import DataValidator, SecurityValidator


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        # Reject unknown fields
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    id: str


class CreateRequestDTO(RequestDTO):
    """Base class for creation request DTOs."""
    pass


class UpdateRequestDTO(RequestDTO):
    """
    Base class for partial update request DTOs.
    Only the fields present in the request body are applied. An explicit
    null is accepted only for fields listed in ``NULLABLE_FIELDS``.
    """

    NULLABLE_FIELDS: ClassVar[frozenset] = frozenset()

    @model_validator(mode='before')
    @classmethod
    def reject_null_fields(cls, data):
        if isinstance(data, dict):
            nulls = sorted(
                key for key, value in data.items()
                if value is None and key not in cls.NULLABLE_FIELDS
            )
            if nulls:
                raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return data

    def to_changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class NotesMixin(BaseModel):
    """Mixin for free-text notes."""

    notes: Optional[str] = Field(default=None, max_length=2000, description="Additional notes")

    @field_validator('notes', mode='before')
    @classmethod
    def sanitize_notes(cls, v):
        if v is None:
            return v
        return SecurityValidator.sanitize_html(v).strip() or None


class ErrorResponseDTO(BaseDTO):
    """Error payload returned by the API."""

    error: str
    message: str
    error_code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


def utc_datetime(value: Optional[datetime]) -> Optional[datetime]:
    """Validator helper: naive datetimes are taken to be UTC."""
    if value is None:
        return value
    return DataValidator.as_utc(value)
