"""
Contract status classifier.

Derives the display status shown next to a contract from its stored status
and its dates relative to an injected ``now``. The stored status is the
source of truth: a contract stored as active is never reported as expired
just because its end date has passed.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from renewdesk.domain.models.base import InvalidDateError
from renewdesk.domain.models.contract import Contract, ContractStatus


EXPIRING_SOON_DAYS = 30
URGENT_DAYS = 7
RENEWAL_MEDIUM_DAYS = 15

_ONE_DAY = timedelta(days=1)


class DisplayStatus(str, Enum):
    """Presentation status, distinct from ``ContractStatus``."""
    ACTIVE = "active"
    EXPIRING_SOON = "expiring-soon"
    EXPIRED = "expired"
    PENDING = "pending"


class Urgency(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"


class RenewalUrgency(str, Enum):
    """Badge tier for the upcoming renewals list."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ContractDisplayStatus:
    """Result of classifying a contract."""

    status: DisplayStatus
    urgency: Optional[Urgency] = None
    days_remaining: Optional[int] = None

    @property
    def is_overdue(self) -> bool:
        """
        Stored active but already past its end date.
        Reported as expiring-soon/high; surfaced so callers can flag it.
        """
        return self.days_remaining is not None and self.days_remaining < 0


def days_between(now: datetime, when: datetime) -> int:
    """
    Whole days from ``now`` to ``when``, truncated toward zero.
    Negative when ``when`` lies in the past.
    """
    if not isinstance(now, datetime) or not isinstance(when, datetime):
        raise InvalidDateError("days_between expects datetime values")
    if (now.tzinfo is None) != (when.tzinfo is None):
        raise InvalidDateError("Cannot compare naive and timezone-aware datetimes")
    return int((when - now) / _ONE_DAY)


def classify(
    contract: Contract,
    now: datetime,
    expiring_days: int = EXPIRING_SOON_DAYS,
    urgent_days: int = URGENT_DAYS,
) -> ContractDisplayStatus:
    """Derive the display status of a contract at ``now``."""
    if contract.status == ContractStatus.EXPIRED:
        return ContractDisplayStatus(DisplayStatus.EXPIRED)
    if contract.status == ContractStatus.PENDING:
        return ContractDisplayStatus(DisplayStatus.PENDING)

    days_remaining = days_between(now, contract.end_date)

    if days_remaining <= urgent_days:
        return ContractDisplayStatus(DisplayStatus.EXPIRING_SOON, Urgency.HIGH, days_remaining)
    if days_remaining <= expiring_days:
        return ContractDisplayStatus(DisplayStatus.EXPIRING_SOON, Urgency.MEDIUM, days_remaining)
    return ContractDisplayStatus(DisplayStatus.ACTIVE, None, days_remaining)


def renewal_urgency(
    contract: Contract,
    now: datetime,
    urgent_days: int = URGENT_DAYS,
    medium_days: int = RENEWAL_MEDIUM_DAYS,
) -> RenewalUrgency:
    """Tier for how soon a renewal decision is due."""
    days_until_renewal = days_between(now, contract.renewal_date)
    if days_until_renewal <= urgent_days:
        return RenewalUrgency.HIGH
    if days_until_renewal <= medium_days:
        return RenewalUrgency.MEDIUM
    return RenewalUrgency.LOW


@dataclass(frozen=True)
class StatusRules:
    """Configured thresholds for classification."""

    expiring_days: int = EXPIRING_SOON_DAYS
    urgent_days: int = URGENT_DAYS

    def classify(self, contract: Contract, now: datetime) -> ContractDisplayStatus:
        return classify(contract, now, self.expiring_days, self.urgent_days)

    def renewal_urgency(self, contract: Contract, now: datetime) -> RenewalUrgency:
        return renewal_urgency(contract, now, self.urgent_days)


DEFAULT_RULES = StatusRules()
