"""
Shared fixtures for the unit tests.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from renewdesk.domain.models.contract import Contract, ContractStatus, ContractType
from renewdesk.domain.models.customer import Customer, CustomerStatus
from renewdesk.domain.models.notification import Notification, NotificationType
from renewdesk.infrastructure.repositories.in_memory import (
    InMemoryContractRepository,
    InMemoryCustomerRepository,
    InMemoryDatabase,
    InMemoryNotificationRepository,
)
from renewdesk.infrastructure.repositories.seed import seed_demo_data


NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def make_customer(now):
    """Factory for customers with sensible defaults."""
    def factory(**overrides):
        values = dict(
            id="1",
            name="ACME Corporation",
            contact_person="John Doe",
            email="info@acme.com",
            phone="(555) 123-4567",
            address="123 Main St, Anytown, USA",
            created_at=now - timedelta(days=100),
            status=CustomerStatus.ACTIVE,
        )
        values.update(overrides)
        return Customer(**values)
    return factory


@pytest.fixture
def make_contract(now):
    """Factory for contracts; dates default to a running contract."""
    def factory(**overrides):
        values = dict(
            id="1",
            customer_id="1",
            customer_name="ACME Corporation",
            type=ContractType.HOSTING,
            name="Web Hosting Plan",
            start_date=now - timedelta(days=300),
            end_date=now + timedelta(days=60),
            renewal_date=now + timedelta(days=45),
            amount=Decimal("1200"),
            status=ContractStatus.ACTIVE,
            notes=None,
        )
        values.update(overrides)
        return Contract(**values)
    return factory


@pytest.fixture
def make_notification(now):
    def factory(**overrides):
        values = dict(
            id="1",
            type=NotificationType.CONTRACT_EXPIRING,
            message="ACME Corporation domain renewal due in 7 days",
            date=now - timedelta(days=1),
            read=False,
            related_to=None,
        )
        values.update(overrides)
        return Notification(**values)
    return factory


@pytest.fixture
def database():
    return InMemoryDatabase()


@pytest.fixture
def seeded_database(now):
    return seed_demo_data(InMemoryDatabase(), now)


@pytest.fixture
def customer_repository(seeded_database, clock):
    return InMemoryCustomerRepository(seeded_database, clock=clock)


@pytest.fixture
def contract_repository(seeded_database):
    return InMemoryContractRepository(seeded_database)


@pytest.fixture
def notification_repository(seeded_database):
    return InMemoryNotificationRepository(seeded_database)
