"""
Dashboard router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from renewdesk.application.dto.dashboard_dto import DashboardStatsResponseDTO
from renewdesk.application.use_cases.dashboard_use_cases import GetDashboardStatsUseCase
from renewdesk.config import Settings
from renewdesk.infrastructure.web.dependencies import (
    ClockDep,
    ContractRepositoryDep,
    CustomerRepositoryDep,
    NotificationRepositoryDep,
    StatusRulesDep,
    get_app_settings,
)
from renewdesk.infrastructure.web.errors import unwrap


router = APIRouter()


@router.get("", response_model=DashboardStatsResponseDTO)
async def get_dashboard(
    customers: CustomerRepositoryDep,
    contracts: ContractRepositoryDep,
    notifications: NotificationRepositoryDep,
    clock: ClockDep,
    rules: StatusRulesDep,
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """
    Dashboard figures: customer and contract totals, contracts expiring soon,
    active contract value, upcoming renewals and recent notifications.
    """
    use_case = GetDashboardStatsUseCase(
        customers,
        contracts,
        notifications,
        clock,
        rules,
        window_days=settings.upcoming_renewals_days,
        recent_limit=settings.recent_notifications_limit,
    )
    return unwrap(await use_case.execute())
