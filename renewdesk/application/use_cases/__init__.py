"""
Application layer use cases.
Business logic for the contract tracker.
"""

from .base_use_case import *
from .customer_use_cases import *
from .contract_use_cases import *
from .notification_use_cases import *
from .dashboard_use_cases import *

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "CreateUseCase",
    "UpdateUseCase",
    "GetByIdUseCase",
    "UseCaseResult",
    "Clock",
    "utc_now",

    # Customer Use Cases
    "ListCustomersUseCase",
    "GetCustomerUseCase",
    "CreateCustomerUseCase",
    "UpdateCustomerUseCase",
    "UpdateCustomerCommand",
    "GetCustomerContractsUseCase",

    # Contract Use Cases
    "ListContractsUseCase",
    "GetContractUseCase",
    "GetRenewalTermsUseCase",
    "CreateContractUseCase",
    "UpdateContractUseCase",
    "UpdateContractCommand",
    "RenewContractUseCase",
    "RenewContractCommand",
    "resolve_customer_names",

    # Notification Use Cases
    "ListNotificationsUseCase",
    "GetUnreadCountUseCase",
    "MarkNotificationReadUseCase",
    "NOTIFICATION_FILTERS",

    # Dashboard Use Cases
    "GetDashboardStatsUseCase",
]
