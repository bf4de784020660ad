"""
FastAPI dependencies.

Settings, store, latency, clock and status rules live on ``app.state`` and
are set up by ``create_application``. Tests replace any of them through
``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, Request

from renewdesk.application.use_cases.base_use_case import Clock
from renewdesk.config import Settings
from renewdesk.domain.repositories.contract_repository import ContractRepository
from renewdesk.domain.repositories.customer_repository import CustomerRepository
from renewdesk.domain.repositories.notification_repository import NotificationRepository
from renewdesk.domain.services.status_classifier import StatusRules
from renewdesk.infrastructure.repositories.in_memory import (
    InMemoryContractRepository,
    InMemoryCustomerRepository,
    InMemoryDatabase,
    InMemoryNotificationRepository,
    Latency,
)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> InMemoryDatabase:
    return request.app.state.database


def get_latency(request: Request) -> Latency:
    return request.app.state.latency


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def get_status_rules(request: Request) -> StatusRules:
    return request.app.state.status_rules


def get_customer_repository(
    db: Annotated[InMemoryDatabase, Depends(get_database)],
    latency: Annotated[Latency, Depends(get_latency)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> CustomerRepository:
    """Dependency to get customer repository."""
    return InMemoryCustomerRepository(db, latency, clock)


def get_contract_repository(
    db: Annotated[InMemoryDatabase, Depends(get_database)],
    latency: Annotated[Latency, Depends(get_latency)],
) -> ContractRepository:
    """Dependency to get contract repository."""
    return InMemoryContractRepository(db, latency)


def get_notification_repository(
    db: Annotated[InMemoryDatabase, Depends(get_database)],
    latency: Annotated[Latency, Depends(get_latency)],
) -> NotificationRepository:
    """Dependency to get notification repository."""
    return InMemoryNotificationRepository(db, latency)


CustomerRepositoryDep = Annotated[CustomerRepository, Depends(get_customer_repository)]
ContractRepositoryDep = Annotated[ContractRepository, Depends(get_contract_repository)]
NotificationRepositoryDep = Annotated[NotificationRepository, Depends(get_notification_repository)]
ClockDep = Annotated[Clock, Depends(get_clock)]
StatusRulesDep = Annotated[StatusRules, Depends(get_status_rules)]
