"""
Notification DTOs for the application layer.
"""

from datetime import datetime
from typing import List, Optional

from .base_dto import BaseDTO, ResponseDTO
from renewdesk.domain.models.notification import Notification, NotificationType, RelatedEntityType


class RelatedEntityDTO(BaseDTO):
    type: RelatedEntityType
    id: str


class NotificationResponseDTO(ResponseDTO):
    """DTO for notification responses."""

    type: NotificationType
    message: str
    date: datetime
    read: bool
    related_to: Optional[RelatedEntityDTO] = None

    @classmethod
    def from_domain(cls, notification: Notification) -> "NotificationResponseDTO":
        related = None
        if notification.related_to is not None:
            related = RelatedEntityDTO(
                type=notification.related_to.type,
                id=notification.related_to.id,
            )
        return cls(
            id=notification.id,
            type=notification.type,
            message=notification.message,
            date=notification.date,
            read=notification.read,
            related_to=related,
        )


class NotificationListResponseDTO(BaseDTO):
    """Notifications plus the counters shown in the sidebar filters."""

    notifications: List[NotificationResponseDTO]
    total: int
    unread: int
    expiring: int
    expired: int


class UnreadCountResponseDTO(BaseDTO):
    unread: int
