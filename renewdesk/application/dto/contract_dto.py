"""
Contract DTOs for the application layer.
Data Transfer Objects for contract-related operations.
"""

from datetime import datetime
from decimal import Decimal
from typing import ClassVar, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .base_dto import BaseDTO, CreateRequestDTO, NotesMixin, RequestDTO, ResponseDTO, UpdateRequestDTO, utc_datetime
from renewdesk.domain.models.contract import Contract, ContractStatus, ContractType
from renewdesk.domain.models.dashboard import CustomerContractSummary
from renewdesk.domain.services.status_classifier import (
    DisplayStatus,
    Urgency,
    DEFAULT_RULES,
    StatusRules,
)
from renewdesk.infrastructure.validation.validators import BusinessValidator, DataValidator


class ContractFieldsMixin(BaseModel):
    """Validators shared by contract requests."""

    @field_validator('name', mode='before', check_fields=False)
    @classmethod
    def validate_name(cls, v):
        if v is None:
            return v
        return BusinessValidator.validate_contract_name(v)

    @field_validator('amount', mode='before', check_fields=False)
    @classmethod
    def validate_amount(cls, v):
        if v is None:
            return v
        return DataValidator.validate_decimal_amount(v)

    @field_validator('start_date', 'end_date', 'renewal_date', mode='after', check_fields=False)
    @classmethod
    def validate_dates(cls, v):
        return utc_datetime(v)

    @model_validator(mode='after')
    def check_date_order(self):
        start = getattr(self, 'start_date', None)
        end = getattr(self, 'end_date', None)
        renewal = getattr(self, 'renewal_date', None)

        if start is not None and end is not None and end <= start:
            raise ValueError("End date must be after start date")
        if renewal is not None and end is not None and renewal > end:
            raise ValueError("Renewal date must be on or before end date")
        return self


# Request DTOs
class CreateContractRequestDTO(ContractFieldsMixin, NotesMixin, CreateRequestDTO):
    """DTO for contract creation requests."""

    customer_id: str = Field(min_length=1, description="Customer the contract belongs to")
    type: ContractType = Field(description="Contract type")
    name: str = Field(max_length=255, description="Contract name")
    start_date: datetime
    end_date: datetime
    renewal_date: datetime
    amount: Decimal = Field(description="Contract value")
    status: ContractStatus = Field(default=ContractStatus.ACTIVE)


class UpdateContractRequestDTO(ContractFieldsMixin, NotesMixin, UpdateRequestDTO):
    """
    DTO for partial contract updates.
    The customer of a contract cannot be changed. Sending null for
    ``notes`` clears them.
    """

    NULLABLE_FIELDS: ClassVar[frozenset] = frozenset({"notes"})

    type: Optional[ContractType] = None
    name: Optional[str] = Field(default=None, max_length=255)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    renewal_date: Optional[datetime] = None
    amount: Optional[Decimal] = None
    status: Optional[ContractStatus] = None


class RenewContractRequestDTO(ContractFieldsMixin, RequestDTO):
    """DTO for renewing a contract."""

    end_date: datetime
    renewal_date: datetime
    amount: Decimal


class ListContractsRequestDTO(RequestDTO):
    """Filters for the contract list."""

    search: Optional[str] = Field(default=None, max_length=255)
    status: Optional[ContractStatus] = None


# Response DTOs
class ContractResponseDTO(ResponseDTO):
    """DTO for contract responses, with the derived display status."""

    customer_id: str
    customer_name: str
    type: ContractType
    name: str
    start_date: datetime
    end_date: datetime
    renewal_date: datetime
    amount: Decimal
    status: ContractStatus
    notes: Optional[str] = None

    display_status: DisplayStatus
    urgency: Optional[Urgency] = None
    days_remaining: Optional[int] = None
    is_overdue: bool = False
    can_renew: bool = False

    @classmethod
    def from_domain(
        cls,
        contract: Contract,
        now: datetime,
        rules: StatusRules = DEFAULT_RULES,
    ) -> "ContractResponseDTO":
        display = rules.classify(contract, now)
        return cls(
            id=contract.id,
            customer_id=contract.customer_id,
            customer_name=contract.customer_name,
            type=contract.type,
            name=contract.name,
            start_date=contract.start_date,
            end_date=contract.end_date,
            renewal_date=contract.renewal_date,
            amount=contract.amount,
            status=contract.status,
            notes=contract.notes,
            display_status=display.status,
            urgency=display.urgency,
            days_remaining=display.days_remaining,
            is_overdue=display.is_overdue,
            can_renew=contract.can_renew(now),
        )


class ContractListResponseDTO(BaseDTO):
    """Contract list with the stored-status counts shown above the table."""

    contracts: List[ContractResponseDTO]
    total: int
    active: int
    expiring: int
    expired: int


class ContractSummaryResponseDTO(BaseDTO):
    active: int
    expiring: int
    expired: int
    total_value: Decimal

    @classmethod
    def from_domain(cls, summary: CustomerContractSummary) -> "ContractSummaryResponseDTO":
        return cls(
            active=summary.active,
            expiring=summary.expiring,
            expired=summary.expired,
            total_value=summary.total_value,
        )


class CustomerContractsResponseDTO(BaseDTO):
    """Contracts of one customer plus their summary."""

    customer_id: str
    contracts: List[ContractResponseDTO]
    summary: ContractSummaryResponseDTO


class RenewalTermsResponseDTO(BaseDTO):
    """Suggested values for the renew form."""

    contract_id: str
    end_date: datetime
    renewal_date: datetime
    amount: Decimal
    can_renew: bool
