"""
Domain models.
"""

from .base import (
    DomainException,
    ValidationError,
    InvalidDateError,
    BusinessRuleViolation,
    EntityNotFoundError,
)
from .customer import Customer, CustomerStatus
from .contract import Contract, ContractStatus, ContractType
from .notification import Notification, NotificationType, RelatedEntity, RelatedEntityType
from .dashboard import (
    CustomerStatusCounts,
    ContractStatusCounts,
    CustomerContractSummary,
    DashboardStats,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "InvalidDateError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "Customer",
    "CustomerStatus",
    "Contract",
    "ContractStatus",
    "ContractType",
    "Notification",
    "NotificationType",
    "RelatedEntity",
    "RelatedEntityType",
    "CustomerStatusCounts",
    "ContractStatusCounts",
    "CustomerContractSummary",
    "DashboardStats",
]
