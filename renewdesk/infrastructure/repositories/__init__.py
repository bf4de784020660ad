"""
Repository implementations (adapters).
"""

from .in_memory import (
    InMemoryDatabase,
    InMemoryContractRepository,
    InMemoryCustomerRepository,
    InMemoryNotificationRepository,
    Latency,
)
from .seed import seed_demo_data

__all__ = [
    "InMemoryDatabase",
    "InMemoryContractRepository",
    "InMemoryCustomerRepository",
    "InMemoryNotificationRepository",
    "Latency",
    "seed_demo_data",
]
