"""
Domain services.
Pure functions over domain models; none of them read the wall clock.
"""

from .status_classifier import (
    DEFAULT_RULES,
    ContractDisplayStatus,
    DisplayStatus,
    RenewalUrgency,
    StatusRules,
    Urgency,
    classify,
    days_between,
    renewal_urgency,
)
from .aggregation import (
    count_contracts_by_status,
    count_customers_by_status,
    count_expiring_soon,
    count_unread,
    dashboard_snapshot,
    filter_notifications,
    recent_notifications,
    search_contracts,
    search_customers,
    summarize_customer_contracts,
    total_active_value,
    upcoming_renewals,
)

__all__ = [
    "DEFAULT_RULES",
    "ContractDisplayStatus",
    "DisplayStatus",
    "RenewalUrgency",
    "StatusRules",
    "Urgency",
    "classify",
    "days_between",
    "renewal_urgency",
    "count_contracts_by_status",
    "count_customers_by_status",
    "count_expiring_soon",
    "count_unread",
    "dashboard_snapshot",
    "filter_notifications",
    "recent_notifications",
    "search_contracts",
    "search_customers",
    "summarize_customer_contracts",
    "total_active_value",
    "upcoming_renewals",
]
