"""
Notification domain model.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from renewdesk.domain.models.base import EntityMixin


class NotificationType(str, Enum):
    """Notification categories."""
    CONTRACT_EXPIRING = "contract-expiring"
    CONTRACT_EXPIRED = "contract-expired"
    CUSTOMER_ADDED = "customer-added"
    OTHER = "other"


class RelatedEntityType(str, Enum):
    CUSTOMER = "customer"
    CONTRACT = "contract"


@dataclass(frozen=True)
class RelatedEntity:
    """Reference from a notification to a customer or a contract."""

    type: RelatedEntityType
    id: str

    def __post_init__(self):
        if isinstance(self.type, str):
            object.__setattr__(self, "type", RelatedEntityType(self.type))


@dataclass(eq=False)
class Notification(EntityMixin):
    """In-app notification shown on the dashboard and notifications page."""

    id: str
    type: NotificationType
    message: str
    date: datetime
    read: bool = False
    related_to: Optional[RelatedEntity] = None

    def __post_init__(self):
        if isinstance(self.type, str):
            self.type = NotificationType(self.type)
        if isinstance(self.related_to, dict):
            self.related_to = RelatedEntity(**self.related_to)

    def mark_as_read(self) -> None:
        self.read = True
