"""
Notification repository interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from renewdesk.domain.models.notification import Notification


class NotificationRepository(ABC):
    """Repository interface for Notification entities."""

    @abstractmethod
    async def list_all(self) -> List[Notification]:
        pass

    @abstractmethod
    async def add(self, data: Dict[str, Any]) -> Notification:
        """Insert a notification. The repository assigns ``id``."""
        pass

    @abstractmethod
    async def mark_as_read(self, notification_id: str) -> Notification:
        """
        Flag a notification as read.
        Raises EntityNotFoundError if the id is unknown.
        """
        pass

    @abstractmethod
    async def count_unread(self) -> int:
        pass
