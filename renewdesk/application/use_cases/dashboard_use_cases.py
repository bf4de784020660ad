"""
Dashboard use case for the application layer.
"""

import asyncio

from renewdesk.application.dto.dashboard_dto import DashboardStatsResponseDTO
from renewdesk.application.use_cases.base_use_case import Clock, QueryUseCase, utc_now
from renewdesk.application.use_cases.contract_use_cases import resolve_customer_names
from renewdesk.domain.repositories.contract_repository import ContractRepository
from renewdesk.domain.repositories.customer_repository import CustomerRepository
from renewdesk.domain.repositories.notification_repository import NotificationRepository
from renewdesk.domain.services.aggregation import (
    RECENT_NOTIFICATIONS_LIMIT,
    UPCOMING_RENEWALS_DAYS,
    dashboard_snapshot,
)
from renewdesk.domain.services.status_classifier import DEFAULT_RULES, StatusRules


class GetDashboardStatsUseCase(QueryUseCase[None, DashboardStatsResponseDTO]):
    """
    Build the dashboard aggregate.

    The three collections are fetched concurrently, so the call takes about
    as long as the slowest repository.
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        contract_repository: ContractRepository,
        notification_repository: NotificationRepository,
        clock: Clock = utc_now,
        rules: StatusRules = DEFAULT_RULES,
        window_days: int = UPCOMING_RENEWALS_DAYS,
        recent_limit: int = RECENT_NOTIFICATIONS_LIMIT,
    ):
        super().__init__()
        self.customer_repository = customer_repository
        self.contract_repository = contract_repository
        self.notification_repository = notification_repository
        self.clock = clock
        self.rules = rules
        self.window_days = window_days
        self.recent_limit = recent_limit

    async def _execute_business_logic(self, request: None) -> DashboardStatsResponseDTO:
        customers, contracts, notifications = await asyncio.gather(
            self.customer_repository.list_all(),
            self.contract_repository.list_all(),
            self.notification_repository.list_all(),
        )
        now = self.clock()

        stats = dashboard_snapshot(
            customers,
            resolve_customer_names(contracts, customers),
            notifications,
            now,
            window_days=self.window_days,
            recent_limit=self.recent_limit,
            expiring_days=self.rules.expiring_days,
        )
        return DashboardStatsResponseDTO.from_domain(stats, now, self.rules)
