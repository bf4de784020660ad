"""
Derived, non-persisted aggregates.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from renewdesk.domain.models.contract import Contract
from renewdesk.domain.models.notification import Notification


@dataclass(frozen=True)
class CustomerStatusCounts:
    active: int = 0
    inactive: int = 0


@dataclass(frozen=True)
class ContractStatusCounts:
    active: int = 0
    expired: int = 0
    pending: int = 0


@dataclass(frozen=True)
class CustomerContractSummary:
    """Contract figures for a single customer's detail view."""

    active: int = 0
    expiring: int = 0
    expired: int = 0
    total_value: Decimal = Decimal("0")


@dataclass
class DashboardStats:
    """
    Dashboard aggregate.
    Recomputed on every request; never stored.
    """

    total_customers: int
    active_customers: int
    total_contracts: int
    expiring_contracts: int
    contracts_value: Decimal
    upcoming_renewals: List[Contract] = field(default_factory=list)
    recent_notifications: List[Notification] = field(default_factory=list)
