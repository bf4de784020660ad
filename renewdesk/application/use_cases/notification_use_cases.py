"""
Notification use cases for the application layer.
"""

from renewdesk.application.dto.notification_dto import (
    NotificationListResponseDTO,
    NotificationResponseDTO,
    UnreadCountResponseDTO,
)
from renewdesk.application.use_cases.base_use_case import (
    QueryUseCase,
    UpdateUseCase,
)
from renewdesk.domain.models.base import ValidationError
from renewdesk.domain.models.notification import NotificationType
from renewdesk.domain.repositories.notification_repository import NotificationRepository
from renewdesk.domain.services.aggregation import count_unread, filter_notifications


NOTIFICATION_FILTERS = ("all", "read", "unread") + tuple(t.value for t in NotificationType)


class ListNotificationsUseCase(QueryUseCase[str, NotificationListResponseDTO]):
    """
    List notifications for one of the filters in ``NOTIFICATION_FILTERS``.
    Counters always cover the whole collection.
    """

    def __init__(self, notification_repository: NotificationRepository):
        super().__init__()
        self.notification_repository = notification_repository

    async def _validate_request(self, selector: str) -> None:
        if selector is not None and selector not in NOTIFICATION_FILTERS:
            raise ValidationError(
                f"Unknown notification filter '{selector}'. "
                f"Expected one of: {', '.join(NOTIFICATION_FILTERS)}",
                "filter",
            )

    async def _execute_business_logic(self, selector: str) -> NotificationListResponseDTO:
        notifications = await self.notification_repository.list_all()

        return NotificationListResponseDTO(
            notifications=[
                NotificationResponseDTO.from_domain(notification)
                for notification in filter_notifications(notifications, selector or "all")
            ],
            total=len(notifications),
            unread=count_unread(notifications),
            expiring=len(filter_notifications(notifications, NotificationType.CONTRACT_EXPIRING)),
            expired=len(filter_notifications(notifications, NotificationType.CONTRACT_EXPIRED)),
        )


class GetUnreadCountUseCase(QueryUseCase[None, UnreadCountResponseDTO]):
    """Unread badge count."""

    def __init__(self, notification_repository: NotificationRepository):
        super().__init__()
        self.notification_repository = notification_repository

    async def _execute_business_logic(self, request: None) -> UnreadCountResponseDTO:
        return UnreadCountResponseDTO(unread=await self.notification_repository.count_unread())


class MarkNotificationReadUseCase(UpdateUseCase[str, NotificationResponseDTO]):
    """Mark a notification as read. Marking twice is a no-op."""

    def __init__(self, notification_repository: NotificationRepository):
        super().__init__()
        self.notification_repository = notification_repository

    async def _validate_request(self, notification_id: str) -> None:
        if not notification_id or not str(notification_id).strip():
            raise ValidationError("ID is required", "id")

    async def _execute_command_logic(self, notification_id: str) -> NotificationResponseDTO:
        notification = await self.notification_repository.mark_as_read(notification_id)
        return NotificationResponseDTO.from_domain(notification)
