"""
Aggregation functions for the dashboard and list views.
All functions are pure: they work on already-loaded collections and take
``now`` as an argument.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence, Union

from renewdesk.domain.models.contract import Contract, ContractStatus
from renewdesk.domain.models.customer import Customer, CustomerStatus
from renewdesk.domain.models.dashboard import (
    ContractStatusCounts,
    CustomerContractSummary,
    CustomerStatusCounts,
    DashboardStats,
)
from renewdesk.domain.models.notification import Notification, NotificationType
from renewdesk.domain.services.status_classifier import EXPIRING_SOON_DAYS, days_between


UPCOMING_RENEWALS_DAYS = 30
RECENT_NOTIFICATIONS_LIMIT = 3


def count_customers_by_status(customers: Iterable[Customer]) -> CustomerStatusCounts:
    active = inactive = 0
    for customer in customers:
        if customer.status == CustomerStatus.ACTIVE:
            active += 1
        else:
            inactive += 1
    return CustomerStatusCounts(active=active, inactive=inactive)


def count_contracts_by_status(contracts: Iterable[Contract]) -> ContractStatusCounts:
    """Count contracts by their stored status."""
    counts = {status: 0 for status in ContractStatus}
    for contract in contracts:
        counts[contract.status] += 1
    return ContractStatusCounts(
        active=counts[ContractStatus.ACTIVE],
        expired=counts[ContractStatus.EXPIRED],
        pending=counts[ContractStatus.PENDING],
    )


def is_expiring_soon(contract: Contract, now: datetime, window_days: int = EXPIRING_SOON_DAYS) -> bool:
    if contract.status != ContractStatus.ACTIVE:
        return False
    return 0 <= days_between(now, contract.end_date) <= window_days


def count_expiring_soon(
    contracts: Iterable[Contract],
    now: datetime,
    window_days: int = EXPIRING_SOON_DAYS,
) -> int:
    """
    Count stored-active contracts ending within the window.
    Contracts whose end date has already passed are not counted.
    """
    return sum(1 for contract in contracts if is_expiring_soon(contract, now, window_days))


def total_active_value(contracts: Iterable[Contract]) -> Decimal:
    """Exact sum of amounts over stored-active contracts."""
    return sum(
        (contract.amount for contract in contracts if contract.status == ContractStatus.ACTIVE),
        Decimal("0"),
    )


def upcoming_renewals(
    contracts: Iterable[Contract],
    now: datetime,
    window_days: int = UPCOMING_RENEWALS_DAYS,
) -> List[Contract]:
    """
    Contracts whose renewal date falls strictly inside (now, now + window),
    earliest first. Ties are broken by id.
    """
    horizon = now + timedelta(days=window_days)
    due = [c for c in contracts if now < c.renewal_date < horizon]
    return sorted(due, key=lambda c: (c.renewal_date, _id_key(c.id)))


def recent_notifications(
    notifications: Iterable[Notification],
    limit: int = RECENT_NOTIFICATIONS_LIMIT,
) -> List[Notification]:
    """Newest notifications first."""
    ordered = sorted(notifications, key=lambda n: _id_key(n.id))
    ordered.sort(key=lambda n: n.date, reverse=True)
    return ordered[:limit]


def count_unread(notifications: Iterable[Notification]) -> int:
    return sum(1 for notification in notifications if not notification.read)


def dashboard_snapshot(
    customers: Sequence[Customer],
    contracts: Sequence[Contract],
    notifications: Sequence[Notification],
    now: datetime,
    window_days: int = UPCOMING_RENEWALS_DAYS,
    recent_limit: int = RECENT_NOTIFICATIONS_LIMIT,
    expiring_days: int = EXPIRING_SOON_DAYS,
) -> DashboardStats:
    """
    Dashboard figures at ``now``. ``window_days`` bounds the upcoming
    renewals list; ``expiring_days`` bounds the expiring contracts count.
    """
    customer_counts = count_customers_by_status(customers)

    return DashboardStats(
        total_customers=len(customers),
        active_customers=customer_counts.active,
        total_contracts=len(contracts),
        expiring_contracts=count_expiring_soon(contracts, now, expiring_days),
        contracts_value=total_active_value(contracts),
        upcoming_renewals=upcoming_renewals(contracts, now, window_days),
        recent_notifications=recent_notifications(notifications, recent_limit),
    )


def summarize_customer_contracts(
    contracts: Sequence[Contract],
    now: datetime,
    window_days: int = EXPIRING_SOON_DAYS,
) -> CustomerContractSummary:
    counts = count_contracts_by_status(contracts)
    return CustomerContractSummary(
        active=counts.active,
        expiring=count_expiring_soon(contracts, now, window_days),
        expired=counts.expired,
        total_value=total_active_value(contracts),
    )


# Search and filtering for the list views

def search_customers(customers: Iterable[Customer], term: Optional[str]) -> List[Customer]:
    if not term:
        return list(customers)
    return [customer for customer in customers if customer.matches(term)]


def search_contracts(
    contracts: Iterable[Contract],
    term: Optional[str] = None,
    status: Optional[ContractStatus] = None,
) -> List[Contract]:
    result = []
    for contract in contracts:
        if term and not contract.matches(term):
            continue
        if status is not None and contract.status != status:
            continue
        result.append(contract)
    return result


NotificationSelector = Union[str, NotificationType]


def filter_notifications(
    notifications: Iterable[Notification],
    selector: NotificationSelector = "all",
) -> List[Notification]:
    """
    Filter by ``all``, ``read``, ``unread`` or a notification type.
    Unknown selectors raise ``ValueError``.
    """
    if selector == "all":
        return list(notifications)
    if selector == "read":
        return [n for n in notifications if n.read]
    if selector == "unread":
        return [n for n in notifications if not n.read]

    wanted = NotificationType(selector)
    return [n for n in notifications if n.type == wanted]


def _id_key(value: str):
    # Store ids are decimal strings; order them numerically when possible
    return (0, int(value), value) if value.isdigit() else (1, 0, value)
