"""
Contract domain model.
Represents a time-bounded service agreement with a customer.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

from renewdesk.domain.models.base import (
    EntityMixin,
    InvalidDateError,
    ValidationError,
    ensure_aware,
)


class ContractType(str, Enum):
    """Kind of service covered by a contract."""
    DOMAIN = "domain"
    HOSTING = "hosting"
    SUPPORT = "support"
    OTHER = "other"


class ContractStatus(str, Enum):
    """
    Stored contract status.
    Set by the operator; never derived from dates. See the status
    classifier for the display status.
    """
    ACTIVE = "active"
    EXPIRED = "expired"
    PENDING = "pending"


def add_years(value: datetime, years: int) -> datetime:
    """Shift a datetime by whole calendar years, clamping Feb 29."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


def check_contract_dates(start_date: datetime, end_date: datetime, renewal_date: datetime) -> None:
    """Enforce end > start and renewal <= end."""
    ensure_aware(start_date, "start_date")
    ensure_aware(end_date, "end_date")
    ensure_aware(renewal_date, "renewal_date")

    if end_date <= start_date:
        raise InvalidDateError("End date must be after start date", "end_date")
    if renewal_date > end_date:
        raise InvalidDateError("Renewal date must be on or before end date", "renewal_date")


@dataclass(eq=False)
class Contract(EntityMixin):
    """
    Contract entity.

    ``customer_name`` is a display copy of the customer's name taken when the
    contract was written. Readers that need the current name resolve it from
    the customer (see the contract use cases).
    """

    id: str
    customer_id: str
    customer_name: str
    type: ContractType
    name: str
    start_date: datetime
    end_date: datetime
    renewal_date: datetime
    amount: Decimal
    status: ContractStatus = ContractStatus.ACTIVE
    notes: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.type, str):
            self.type = ContractType(self.type)
        if isinstance(self.status, str):
            self.status = ContractStatus(self.status)
        if not isinstance(self.amount, Decimal):
            self.amount = Decimal(str(self.amount))

    def validate(self) -> None:
        """Validate contract state."""
        if not self.customer_id:
            raise ValidationError("Customer is required", "customer_id")
        if not isinstance(self.customer_name, str):
            raise ValidationError("customer_name must be a string", "customer_name")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Contract name is required", "name")
        if not isinstance(self.type, ContractType):
            raise ValidationError("Invalid contract type", "type")
        if not isinstance(self.status, ContractStatus):
            raise ValidationError("Invalid contract status", "status")
        if self.notes is not None and not isinstance(self.notes, str):
            raise ValidationError("notes must be a string", "notes")
        if not isinstance(self.amount, Decimal) or self.amount <= 0:
            raise ValidationError("Amount must be a positive number", "amount")
        check_contract_dates(self.start_date, self.end_date, self.renewal_date)

    @property
    def is_active(self) -> bool:
        return self.status == ContractStatus.ACTIVE

    def is_past_end(self, now: datetime) -> bool:
        return self.end_date < now

    def can_renew(self, now: datetime) -> bool:
        """Renewal is offered once the contract is not running normally."""
        return not self.is_active or self.is_past_end(now)

    def apply_update(self, **changes: Any) -> Dict[str, Any]:
        """Apply a partial update and return what changed."""
        if isinstance(changes.get("type"), str):
            changes["type"] = ContractType(changes["type"])
        if isinstance(changes.get("status"), str):
            changes["status"] = ContractStatus(changes["status"])
        if changes.get("amount") is not None and not isinstance(changes["amount"], Decimal):
            changes["amount"] = Decimal(str(changes["amount"]))
        return self._assign(changes)

    def renew(self, end_date: datetime, renewal_date: datetime, amount: Decimal) -> Dict[str, Any]:
        """Extend the contract; a renewed contract is always active."""
        check_contract_dates(self.start_date, end_date, renewal_date)
        return self.apply_update(
            end_date=end_date,
            renewal_date=renewal_date,
            amount=amount,
            status=ContractStatus.ACTIVE,
        )

    def default_renewal_terms(self) -> Dict[str, Any]:
        """Suggested renew values: same amount, dates one year later."""
        return {
            "end_date": add_years(self.end_date, 1),
            "renewal_date": add_years(self.renewal_date, 1),
            "amount": self.amount,
        }

    def matches(self, term: str) -> bool:
        """Case-insensitive search over name, customer name and type."""
        needle = term.lower()
        return any(
            needle in value.lower()
            for value in (self.name, self.customer_name, self.type.value)
        )
