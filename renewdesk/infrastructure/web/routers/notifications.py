"""
Notifications router.
"""

from fastapi import APIRouter, Query

from renewdesk.application.dto.notification_dto import (
    NotificationListResponseDTO,
    NotificationResponseDTO,
    UnreadCountResponseDTO,
)
from renewdesk.application.use_cases.notification_use_cases import (
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkNotificationReadUseCase,
)
from renewdesk.infrastructure.web.dependencies import NotificationRepositoryDep
from renewdesk.infrastructure.web.errors import unwrap


router = APIRouter()


@router.get("", response_model=NotificationListResponseDTO)
async def list_notifications(
    repository: NotificationRepositoryDep,
    filter: str = Query("all", description="all, read, unread or a notification type"),
):
    """
    List notifications.

    - **filter**: all, read, unread, contract-expiring, contract-expired,
      customer-added or other
    """
    use_case = ListNotificationsUseCase(repository)
    return unwrap(await use_case.execute(filter))


@router.get("/unread-count", response_model=UnreadCountResponseDTO)
async def unread_count(repository: NotificationRepositoryDep):
    """Number of unread notifications."""
    use_case = GetUnreadCountUseCase(repository)
    return unwrap(await use_case.execute())


@router.post("/{notification_id}/read", response_model=NotificationResponseDTO)
async def mark_notification_read(notification_id: str, repository: NotificationRepositoryDep):
    """Mark a notification as read."""
    use_case = MarkNotificationReadUseCase(repository)
    return unwrap(await use_case.execute(notification_id))
