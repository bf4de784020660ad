"""
In-memory repository implementations.

Stand-ins for a persistent backend: each repository keeps its records in an
``InMemoryDatabase`` shared by the application and waits a configurable delay
before completing, to mimic network latency. Records are copied on the way in
and out so callers never hold references into the store.
"""

import asyncio
import copy
import itertools
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from renewdesk.domain.models.base import EntityNotFoundError
from renewdesk.domain.models.contract import Contract
from renewdesk.domain.models.customer import Customer
from renewdesk.domain.models.notification import Notification
from renewdesk.domain.repositories.contract_repository import ContractRepository
from renewdesk.domain.repositories.customer_repository import CustomerRepository
from renewdesk.domain.repositories.notification_repository import NotificationRepository


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Latency:
    """Simulated delays in seconds per kind of operation."""

    list: float = 0.0
    get: float = 0.0
    notifications: float = 0.0
    unread_count: float = 0.0
    write: float = 0.0

    @classmethod
    def none(cls) -> "Latency":
        return cls()

    @classmethod
    def from_settings(cls, settings) -> "Latency":
        return cls(
            list=settings.latency_list,
            get=settings.latency_get,
            notifications=settings.latency_notifications,
            unread_count=settings.latency_unread_count,
        )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class InMemoryDatabase:
    """
    Backing collections for the in-memory repositories.
    Created once by the caller and passed to each repository.
    """

    customers: List[Customer] = field(default_factory=list)
    contracts: List[Contract] = field(default_factory=list)
    notifications: List[Notification] = field(default_factory=list)
    _sequences: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)

    def next_id(self, collection: str) -> str:
        """Return the next id for a collection; ids are never reused."""
        if collection not in self._sequences:
            existing = [
                int(record.id) for record in getattr(self, collection)
                if str(record.id).isdigit()
            ]
            self._sequences[collection] = itertools.count(max(existing, default=0) + 1)
        return str(next(self._sequences[collection]))

    def clear(self) -> None:
        self.customers.clear()
        self.contracts.clear()
        self.notifications.clear()
        self._sequences.clear()


class _InMemoryRepository:
    """Shared helpers for the in-memory repositories."""

    collection: str = ""
    entity_type: str = ""

    def __init__(self, db: InMemoryDatabase, latency: Optional[Latency] = None):
        self.db = db
        self.latency = latency or Latency.none()

    @property
    def _records(self) -> list:
        return getattr(self.db, self.collection)

    async def _delay(self, seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)

    def _find(self, entity_id: str):
        for record in self._records:
            if record.id == entity_id:
                return record
        return None

    def _require(self, entity_id: str):
        record = self._find(entity_id)
        if record is None:
            logger.info(f"{self.entity_type} {entity_id} not found")
            raise EntityNotFoundError(self.entity_type, entity_id)
        return record

    def _insert(self, factory: Callable[..., Any], data: Dict[str, Any], **assigned: Any):
        values = dict(data)
        values.update(assigned)
        record = factory(**values)
        self._records.append(record)
        logger.info(f"Added {self.entity_type} {record.id}")
        return copy.deepcopy(record)


class InMemoryCustomerRepository(_InMemoryRepository, CustomerRepository):
    """Customer repository over ``InMemoryDatabase.customers``."""

    collection = "customers"
    entity_type = "Customer"

    def __init__(
        self,
        db: InMemoryDatabase,
        latency: Optional[Latency] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        super().__init__(db, latency)
        self.clock = clock

    async def list_all(self) -> List[Customer]:
        await self._delay(self.latency.list)
        return copy.deepcopy(self._records)

    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        await self._delay(self.latency.get)
        return copy.deepcopy(self._find(customer_id))

    async def add(self, data: Dict[str, Any]) -> Customer:
        await self._delay(self.latency.write)
        data = {k: v for k, v in data.items() if k not in ("id", "created_at")}
        return self._insert(
            Customer,
            data,
            id=self.db.next_id(self.collection),
            created_at=self.clock(),
        )

    async def update(self, customer_id: str, changes: Dict[str, Any]) -> Customer:
        await self._delay(self.latency.write)
        customer = self._require(customer_id)
        staged = copy.deepcopy(customer)
        applied = staged.apply_update(**changes)
        customer.__dict__.update(staged.__dict__)
        logger.info(f"Updated Customer {customer_id}: {sorted(applied)}")
        return copy.deepcopy(customer)


class InMemoryContractRepository(_InMemoryRepository, ContractRepository):
    """Contract repository over ``InMemoryDatabase.contracts``."""

    collection = "contracts"
    entity_type = "Contract"

    async def list_all(self) -> List[Contract]:
        await self._delay(self.latency.list)
        return copy.deepcopy(self._records)

    async def get_by_id(self, contract_id: str) -> Optional[Contract]:
        await self._delay(self.latency.get)
        return copy.deepcopy(self._find(contract_id))

    async def list_by_customer(self, customer_id: str) -> List[Contract]:
        await self._delay(self.latency.get)
        return copy.deepcopy([c for c in self._records if c.customer_id == customer_id])

    async def add(self, data: Dict[str, Any]) -> Contract:
        await self._delay(self.latency.write)
        data = {k: v for k, v in data.items() if k != "id"}
        return self._insert(Contract, data, id=self.db.next_id(self.collection))

    async def update(self, contract_id: str, changes: Dict[str, Any]) -> Contract:
        await self._delay(self.latency.write)
        contract = self._require(contract_id)
        staged = copy.deepcopy(contract)
        applied = staged.apply_update(**changes)
        staged.validate()
        contract.__dict__.update(staged.__dict__)
        logger.info(f"Updated Contract {contract_id}: {sorted(applied)}")
        return copy.deepcopy(contract)


class InMemoryNotificationRepository(_InMemoryRepository, NotificationRepository):
    """Notification repository over ``InMemoryDatabase.notifications``."""

    collection = "notifications"
    entity_type = "Notification"

    async def list_all(self) -> List[Notification]:
        await self._delay(self.latency.notifications)
        return copy.deepcopy(self._records)

    async def add(self, data: Dict[str, Any]) -> Notification:
        await self._delay(self.latency.write)
        data = {k: v for k, v in data.items() if k != "id"}
        return self._insert(Notification, data, id=self.db.next_id(self.collection))

    async def mark_as_read(self, notification_id: str) -> Notification:
        await self._delay(self.latency.write)
        notification = self._require(notification_id)
        notification.mark_as_read()
        return copy.deepcopy(notification)

    async def count_unread(self) -> int:
        await self._delay(self.latency.unread_count)
        return sum(1 for n in self._records if not n.read)
