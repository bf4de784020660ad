"""
Contract management router.
Handles list, detail, create, update and renewal of contracts.
"""

from typing import Optional

from fastapi import APIRouter, Query, status

from renewdesk.application.dto.contract_dto import (
    ContractListResponseDTO,
    ContractResponseDTO,
    CreateContractRequestDTO,
    ListContractsRequestDTO,
    RenewContractRequestDTO,
    RenewalTermsResponseDTO,
    UpdateContractRequestDTO,
)
from renewdesk.application.use_cases.contract_use_cases import (
    CreateContractUseCase,
    GetContractUseCase,
    GetRenewalTermsUseCase,
    ListContractsUseCase,
    RenewContractCommand,
    RenewContractUseCase,
    UpdateContractCommand,
    UpdateContractUseCase,
)
from renewdesk.domain.models.contract import ContractStatus
from renewdesk.infrastructure.web.dependencies import (
    ClockDep,
    ContractRepositoryDep,
    CustomerRepositoryDep,
    StatusRulesDep,
)
from renewdesk.infrastructure.web.errors import unwrap


router = APIRouter()


@router.get("", response_model=ContractListResponseDTO)
async def list_contracts(
    repository: ContractRepositoryDep,
    customers: CustomerRepositoryDep,
    clock: ClockDep,
    rules: StatusRulesDep,
    search: Optional[str] = Query(None, max_length=255, description="Search by name, customer or type"),
    status: Optional[ContractStatus] = Query(None, description="Filter by stored status"),
):
    """
    List contracts with their display status.

    - **search**: case-insensitive match on contract name, customer name or type
    - **status**: stored status (active, expired, pending)
    """
    use_case = ListContractsUseCase(repository, customers, clock, rules)
    filters = ListContractsRequestDTO(search=search, status=status)
    return unwrap(await use_case.execute(filters))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ContractResponseDTO)
async def create_contract(
    request: CreateContractRequestDTO,
    repository: ContractRepositoryDep,
    customers: CustomerRepositoryDep,
    clock: ClockDep,
    rules: StatusRulesDep,
):
    """
    Create a contract for an existing customer.

    - **customer_id**: Customer the contract belongs to (required)
    - **type**: domain, hosting, support or other
    - **start_date**, **end_date**, **renewal_date**: end after start, renewal on or before end
    - **amount**: positive, at most two decimals
    """
    use_case = CreateContractUseCase(repository, customers, clock, rules)
    return unwrap(await use_case.execute(request))


@router.get("/{contract_id}", response_model=ContractResponseDTO)
async def get_contract(
    contract_id: str,
    repository: ContractRepositoryDep,
    customers: CustomerRepositoryDep,
    clock: ClockDep,
    rules: StatusRulesDep,
):
    """Get a contract by ID."""
    use_case = GetContractUseCase(repository, customers, clock, rules)
    return unwrap(await use_case.execute(contract_id))


@router.patch("/{contract_id}", response_model=ContractResponseDTO)
async def update_contract(
    contract_id: str,
    request: UpdateContractRequestDTO,
    repository: ContractRepositoryDep,
    customers: CustomerRepositoryDep,
    clock: ClockDep,
    rules: StatusRulesDep,
):
    """Update a contract. Only the fields sent are changed."""
    use_case = UpdateContractUseCase(repository, customers, clock, rules)
    return unwrap(await use_case.execute(UpdateContractCommand(contract_id, request)))


@router.get("/{contract_id}/renewal-terms", response_model=RenewalTermsResponseDTO)
async def get_renewal_terms(
    contract_id: str,
    repository: ContractRepositoryDep,
    customers: CustomerRepositoryDep,
    clock: ClockDep,
    rules: StatusRulesDep,
):
    """Suggested values for the renew form: same amount, dates one year later."""
    use_case = GetRenewalTermsUseCase(repository, customers, clock, rules)
    return unwrap(await use_case.execute(contract_id))


@router.post("/{contract_id}/renew", response_model=ContractResponseDTO)
async def renew_contract(
    contract_id: str,
    request: RenewContractRequestDTO,
    repository: ContractRepositoryDep,
    customers: CustomerRepositoryDep,
    clock: ClockDep,
    rules: StatusRulesDep,
):
    """Renew a contract with a new end date, renewal date and amount."""
    use_case = RenewContractUseCase(repository, customers, clock, rules)
    return unwrap(await use_case.execute(RenewContractCommand(contract_id, request)))
