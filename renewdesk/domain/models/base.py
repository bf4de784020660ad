"""
Base classes and exceptions for the domain layer.
This module contains the foundational pieces shared by all domain entities.
"""

from dataclasses import asdict, fields
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, Optional


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when entity validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code)
        self.field = field


class InvalidDateError(ValidationError):
    """
    Exception raised when a date cannot be used.
    Covers unparseable values, naive/aware mixing and broken
    start/end/renewal ordering.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, field, code="INVALID_DATE")


class BusinessRuleViolation(DomainException):
    """Exception raised when a business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message, "BUSINESS_RULE_VIOLATION")


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class EntityMixin:
    """
    Shared behaviour for dataclass entities.
    Entities are equal when they share type and id.
    """

    id: str

    # Fields that a partial update may never touch
    IMMUTABLE_FIELDS: frozenset = frozenset({"id"})

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.id))

    @classmethod
    def field_names(cls) -> Iterable[str]:
        return [f.name for f in fields(cls)]

    def _assign(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply a partial update in place.
        Returns the subset of changes that actually modified a value.
        """
        known = set(self.field_names())
        applied = {}

        for key, value in changes.items():
            if key not in known:
                raise ValidationError(f"Unknown field: {key}", key)
            if key in self.IMMUTABLE_FIELDS:
                raise ValidationError(f"Field '{key}' cannot be changed", key)
            if getattr(self, key) != value:
                setattr(self, key, value)
                applied[key] = value

        return applied

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to a JSON-friendly dictionary."""
        return _jsonable(asdict(self))


def _jsonable(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_jsonable(item) for item in value]
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


def ensure_aware(value: Any, field: str) -> datetime:
    """Check that a value is a timezone-aware datetime."""
    if not isinstance(value, datetime):
        raise InvalidDateError(f"{field} must be a datetime, got {type(value).__name__}", field)
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        raise InvalidDateError(f"{field} must be timezone-aware", field)
    return value
