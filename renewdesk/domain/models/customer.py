"""
Customer domain model.
Represents a customer that holds one or more service contracts.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict

from renewdesk.domain.models.base import EntityMixin, ValidationError, ensure_aware


class CustomerStatus(str, Enum):
    """Customer status."""
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass(eq=False)
class Customer(EntityMixin):
    """
    Customer entity.
    The store assigns ``id`` and ``created_at``; neither changes afterwards.
    """

    id: str
    name: str
    contact_person: str
    email: str
    phone: str
    address: str
    created_at: datetime
    status: CustomerStatus = CustomerStatus.ACTIVE

    IMMUTABLE_FIELDS = frozenset({"id", "created_at"})

    def __post_init__(self):
        if isinstance(self.status, str):
            self.status = CustomerStatus(self.status)

    def validate(self) -> None:
        """Validate customer state."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Customer name is required", "name")
        for field_name in ("contact_person", "email", "phone", "address"):
            if not isinstance(getattr(self, field_name), str):
                raise ValidationError(f"{field_name} must be a string", field_name)
        if not isinstance(self.status, CustomerStatus):
            raise ValidationError("Invalid customer status", "status")
        ensure_aware(self.created_at, "created_at")

    @property
    def is_active(self) -> bool:
        return self.status == CustomerStatus.ACTIVE

    def apply_update(self, **changes: Any) -> Dict[str, Any]:
        """Apply a partial update and return what changed."""
        if "status" in changes and isinstance(changes["status"], str):
            changes["status"] = CustomerStatus(changes["status"])
        applied = self._assign(changes)
        if applied:
            self.validate()
        return applied

    def matches(self, term: str) -> bool:
        """Case-insensitive search over name, email and contact person."""
        needle = term.lower()
        return any(
            needle in value.lower()
            for value in (self.name, self.email, self.contact_person)
        )
