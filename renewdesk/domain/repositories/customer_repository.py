"""
Customer repository interface.
Defines the contract for customer data access.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from renewdesk.domain.models.customer import Customer


class CustomerRepository(ABC):
    """Repository interface for Customer entities."""

    @abstractmethod
    async def list_all(self) -> List[Customer]:
        """Return every customer."""
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Find a customer by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def add(self, data: Dict[str, Any]) -> Customer:
        """
        Insert a customer.
        The repository assigns ``id`` and ``created_at``.
        """
        pass

    @abstractmethod
    async def update(self, customer_id: str, changes: Dict[str, Any]) -> Customer:
        """
        Apply a partial update and return the stored customer.
        Raises EntityNotFoundError if the id is unknown.
        """
        pass
