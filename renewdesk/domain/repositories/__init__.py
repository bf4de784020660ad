"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .customer_repository import CustomerRepository
from .contract_repository import ContractRepository
from .notification_repository import NotificationRepository

__all__ = [
    "CustomerRepository",
    "ContractRepository",
    "NotificationRepository",
]
