"""
Customer management router.
Handles list, detail, create and update for customer resources.
"""

from typing import Optional

from fastapi import APIRouter, Query, status

from renewdesk.application.dto.contract_dto import CustomerContractsResponseDTO
from renewdesk.application.dto.customer_dto import (
    CreateCustomerRequestDTO,
    CustomerListResponseDTO,
    CustomerResponseDTO,
    UpdateCustomerRequestDTO,
)
from renewdesk.application.use_cases.customer_use_cases import (
    CreateCustomerUseCase,
    GetCustomerContractsUseCase,
    GetCustomerUseCase,
    ListCustomersUseCase,
    UpdateCustomerCommand,
    UpdateCustomerUseCase,
)
from renewdesk.infrastructure.web.dependencies import (
    ClockDep,
    ContractRepositoryDep,
    CustomerRepositoryDep,
    NotificationRepositoryDep,
    StatusRulesDep,
)
from renewdesk.infrastructure.web.errors import unwrap


router = APIRouter()


@router.get("", response_model=CustomerListResponseDTO)
async def list_customers(
    repository: CustomerRepositoryDep,
    search: Optional[str] = Query(None, max_length=255, description="Search by name, email or contact person"),
):
    """
    List customers.

    - **search**: case-insensitive match on name, email or contact person
    """
    use_case = ListCustomersUseCase(repository)
    return unwrap(await use_case.execute(search))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CustomerResponseDTO)
async def create_customer(
    request: CreateCustomerRequestDTO,
    repository: CustomerRepositoryDep,
    notifications: NotificationRepositoryDep,
    clock: ClockDep,
):
    """
    Create a new customer.

    - **name**: Customer name (required)
    - **contact_person**: Contact person
    - **email**: Contact email
    - **phone**: Contact phone
    - **address**: Postal address
    - **status**: active or inactive
    """
    use_case = CreateCustomerUseCase(repository, notifications, clock)
    return unwrap(await use_case.execute(request))


@router.get("/{customer_id}", response_model=CustomerResponseDTO)
async def get_customer(customer_id: str, repository: CustomerRepositoryDep):
    """Get a customer by ID."""
    use_case = GetCustomerUseCase(repository)
    return unwrap(await use_case.execute(customer_id))


@router.patch("/{customer_id}", response_model=CustomerResponseDTO)
async def update_customer(
    customer_id: str,
    request: UpdateCustomerRequestDTO,
    repository: CustomerRepositoryDep,
):
    """Update a customer. Only the fields sent are changed."""
    use_case = UpdateCustomerUseCase(repository)
    return unwrap(await use_case.execute(UpdateCustomerCommand(customer_id, request)))


@router.get("/{customer_id}/contracts", response_model=CustomerContractsResponseDTO)
async def get_customer_contracts(
    customer_id: str,
    repository: CustomerRepositoryDep,
    contracts: ContractRepositoryDep,
    clock: ClockDep,
    rules: StatusRulesDep,
):
    """Contracts of a customer with active, expiring and expired counts."""
    use_case = GetCustomerContractsUseCase(repository, contracts, clock, rules)
    return unwrap(await use_case.execute(customer_id))
