"""
Contract repository interface.
Defines the contract for contract data access.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from renewdesk.domain.models.contract import Contract


class ContractRepository(ABC):
    """Repository interface for Contract entities."""

    @abstractmethod
    async def list_all(self) -> List[Contract]:
        """Return every contract."""
        pass

    @abstractmethod
    async def get_by_id(self, contract_id: str) -> Optional[Contract]:
        """
        Find a contract by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def list_by_customer(self, customer_id: str) -> List[Contract]:
        """Return the contracts that reference a customer."""
        pass

    @abstractmethod
    async def add(self, data: Dict[str, Any]) -> Contract:
        """Insert a contract. The repository assigns ``id``."""
        pass

    @abstractmethod
    async def update(self, contract_id: str, changes: Dict[str, Any]) -> Contract:
        """
        Apply a partial update and return the stored contract.
        Raises EntityNotFoundError if the id is unknown.
        """
        pass
