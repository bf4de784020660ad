"""
Dashboard DTOs for the application layer.
"""

from datetime import datetime
from decimal import Decimal
from typing import List

from .base_dto import BaseDTO
from .contract_dto import ContractResponseDTO
from .notification_dto import NotificationResponseDTO
from renewdesk.domain.models.contract import Contract
from renewdesk.domain.models.dashboard import DashboardStats
from renewdesk.domain.services.status_classifier import (
    DEFAULT_RULES,
    RenewalUrgency,
    StatusRules,
    days_between,
)


class UpcomingRenewalDTO(BaseDTO):
    """A contract in the upcoming renewals list."""

    contract: ContractResponseDTO
    days_until_renewal: int
    renewal_urgency: RenewalUrgency

    @classmethod
    def from_domain(
        cls, contract: Contract, now: datetime, rules: StatusRules = DEFAULT_RULES
    ) -> "UpcomingRenewalDTO":
        return cls(
            contract=ContractResponseDTO.from_domain(contract, now, rules),
            days_until_renewal=days_between(now, contract.renewal_date),
            renewal_urgency=rules.renewal_urgency(contract, now),
        )


class DashboardStatsResponseDTO(BaseDTO):
    """DTO for the dashboard aggregate."""

    total_customers: int
    active_customers: int
    total_contracts: int
    expiring_contracts: int
    contracts_value: Decimal
    upcoming_renewals: List[UpcomingRenewalDTO]
    recent_notifications: List[NotificationResponseDTO]
    generated_at: datetime

    @classmethod
    def from_domain(
        cls, stats: DashboardStats, now: datetime, rules: StatusRules = DEFAULT_RULES
    ) -> "DashboardStatsResponseDTO":
        return cls(
            total_customers=stats.total_customers,
            active_customers=stats.active_customers,
            total_contracts=stats.total_contracts,
            expiring_contracts=stats.expiring_contracts,
            contracts_value=stats.contracts_value,
            upcoming_renewals=[
                UpcomingRenewalDTO.from_domain(contract, now, rules)
                for contract in stats.upcoming_renewals
            ],
            recent_notifications=[
                NotificationResponseDTO.from_domain(notification)
                for notification in stats.recent_notifications
            ],
            generated_at=now,
        )
