"""
Customer DTOs for the application layer.
Data Transfer Objects for customer-related operations.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .base_dto import BaseDTO, CreateRequestDTO, ResponseDTO, UpdateRequestDTO
from renewdesk.domain.models.customer import Customer, CustomerStatus
from renewdesk.infrastructure.validation.validators import BusinessValidator, DataValidator


class CustomerFieldsMixin(BaseModel):
    """Validators shared by the create and update requests."""

    @field_validator('name', mode='before', check_fields=False)
    @classmethod
    def validate_name(cls, v):
        if v is None:
            return v
        return BusinessValidator.validate_customer_name(v)

    @field_validator('contact_person', mode='before', check_fields=False)
    @classmethod
    def validate_contact_person(cls, v):
        if v is None:
            return v
        return BusinessValidator.validate_contact_person(v)

    @field_validator('email', mode='before', check_fields=False)
    @classmethod
    def validate_email(cls, v):
        if v is None:
            return v
        return DataValidator.validate_email(v)

    @field_validator('phone', mode='before', check_fields=False)
    @classmethod
    def validate_phone(cls, v):
        if v is None:
            return v
        return DataValidator.validate_phone(v)

    @field_validator('address', mode='before', check_fields=False)
    @classmethod
    def validate_address(cls, v):
        if v is None:
            return v
        return BusinessValidator.validate_address(v)


# Request DTOs
class CreateCustomerRequestDTO(CustomerFieldsMixin, CreateRequestDTO):
    """DTO for customer creation requests."""

    name: str = Field(max_length=255, description="Company name")
    contact_person: str = Field(max_length=255, description="Contact person")
    email: str = Field(max_length=255, description="Contact email")
    phone: str = Field(max_length=32, description="Phone number")
    address: str = Field(max_length=500, description="Postal address")
    status: CustomerStatus = Field(default=CustomerStatus.ACTIVE, description="Customer status")


class UpdateCustomerRequestDTO(CustomerFieldsMixin, UpdateRequestDTO):
    """DTO for partial customer updates."""

    name: Optional[str] = Field(default=None, max_length=255)
    contact_person: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    address: Optional[str] = Field(default=None, max_length=500)
    status: Optional[CustomerStatus] = None


# Response DTOs
class CustomerResponseDTO(ResponseDTO):
    """DTO for customer responses."""

    name: str
    contact_person: str
    email: str
    phone: str
    address: str
    created_at: datetime
    status: CustomerStatus

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerResponseDTO":
        return cls(
            id=customer.id,
            name=customer.name,
            contact_person=customer.contact_person,
            email=customer.email,
            phone=customer.phone,
            address=customer.address,
            created_at=customer.created_at,
            status=customer.status,
        )


class CustomerListResponseDTO(BaseDTO):
    """Customer list with the status counts shown above the table."""

    customers: List[CustomerResponseDTO]
    total: int
    active: int
    inactive: int
