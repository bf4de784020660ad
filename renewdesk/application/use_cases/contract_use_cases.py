"""
Contract use cases for the application layer.

Contracts keep a ``customer_name`` snapshot. Reads refresh it from the
customer so a renamed customer shows up under its new name; the snapshot is
only returned when the customer cannot be found.
"""

import copy
from dataclasses import dataclass
from typing import Dict, Iterable, List

from renewdesk.application.dto.contract_dto import (
    ContractListResponseDTO,
    ContractResponseDTO,
    CreateContractRequestDTO,
    ListContractsRequestDTO,
    RenewContractRequestDTO,
    RenewalTermsResponseDTO,
    UpdateContractRequestDTO,
)
from renewdesk.application.use_cases.base_use_case import (
    Clock,
    CreateUseCase,
    GetByIdUseCase,
    QueryUseCase,
    UpdateUseCase,
    utc_now,
)
from renewdesk.domain.models.base import EntityNotFoundError
from renewdesk.domain.models.contract import Contract, ContractStatus, check_contract_dates
from renewdesk.domain.models.customer import Customer
from renewdesk.domain.repositories.contract_repository import ContractRepository
from renewdesk.domain.repositories.customer_repository import CustomerRepository
from renewdesk.domain.services.aggregation import (
    count_contracts_by_status,
    count_expiring_soon,
    search_contracts,
)
from renewdesk.domain.services.status_classifier import DEFAULT_RULES, StatusRules


@dataclass
class UpdateContractCommand:
    contract_id: str
    changes: UpdateContractRequestDTO


@dataclass
class RenewContractCommand:
    contract_id: str
    terms: RenewContractRequestDTO


def resolve_customer_names(contracts: Iterable[Contract], customers: Iterable[Customer]) -> List[Contract]:
    """Refresh each contract's display name from its customer."""
    names: Dict[str, str] = {customer.id: customer.name for customer in customers}
    resolved = []
    for contract in contracts:
        if contract.customer_id in names:
            contract.customer_name = names[contract.customer_id]
        resolved.append(contract)
    return resolved


class _ContractUseCaseMixin:
    """Shared wiring for contract use cases."""

    def _setup(
        self,
        contract_repository: ContractRepository,
        customer_repository: CustomerRepository,
        clock: Clock,
        rules: StatusRules,
    ) -> None:
        self.contract_repository = contract_repository
        self.customer_repository = customer_repository
        self.clock = clock
        self.rules = rules

    async def _load(self, contract_id: str) -> Contract:
        contract = await self.contract_repository.get_by_id(contract_id)
        if contract is None:
            raise EntityNotFoundError("Contract", contract_id)
        return contract

    async def _with_current_name(self, contract: Contract) -> Contract:
        customer = await self.customer_repository.get_by_id(contract.customer_id)
        if customer is not None:
            contract.customer_name = customer.name
        return contract

    def _to_dto(self, contract: Contract) -> ContractResponseDTO:
        return ContractResponseDTO.from_domain(contract, self.clock(), self.rules)


class ListContractsUseCase(_ContractUseCaseMixin, QueryUseCase[ListContractsRequestDTO, ContractListResponseDTO]):
    """List contracts with search, a stored-status filter and the list counters."""

    def __init__(
        self,
        contract_repository: ContractRepository,
        customer_repository: CustomerRepository,
        clock: Clock = utc_now,
        rules: StatusRules = DEFAULT_RULES,
    ):
        super().__init__()
        self._setup(contract_repository, customer_repository, clock, rules)

    async def _execute_business_logic(self, request: ListContractsRequestDTO) -> ContractListResponseDTO:
        request = request or ListContractsRequestDTO()
        now = self.clock()

        contracts = resolve_customer_names(
            await self.contract_repository.list_all(),
            await self.customer_repository.list_all(),
        )
        counts = count_contracts_by_status(contracts)
        status = ContractStatus(request.status) if request.status else None

        return ContractListResponseDTO(
            contracts=[
                ContractResponseDTO.from_domain(contract, now, self.rules)
                for contract in search_contracts(contracts, request.search, status)
            ],
            total=len(contracts),
            active=counts.active,
            expiring=count_expiring_soon(contracts, now, self.rules.expiring_days),
            expired=counts.expired,
        )


class GetContractUseCase(_ContractUseCaseMixin, GetByIdUseCase[ContractResponseDTO]):
    """Use case for getting a contract by ID."""

    def __init__(
        self,
        contract_repository: ContractRepository,
        customer_repository: CustomerRepository,
        clock: Clock = utc_now,
        rules: StatusRules = DEFAULT_RULES,
    ):
        super().__init__()
        self._setup(contract_repository, customer_repository, clock, rules)

    async def _execute_business_logic(self, contract_id: str) -> ContractResponseDTO:
        contract = await self._with_current_name(await self._load(contract_id))
        return self._to_dto(contract)


class GetRenewalTermsUseCase(_ContractUseCaseMixin, GetByIdUseCase[RenewalTermsResponseDTO]):
    """Suggested values for renewing a contract."""

    def __init__(
        self,
        contract_repository: ContractRepository,
        customer_repository: CustomerRepository,
        clock: Clock = utc_now,
        rules: StatusRules = DEFAULT_RULES,
    ):
        super().__init__()
        self._setup(contract_repository, customer_repository, clock, rules)

    async def _execute_business_logic(self, contract_id: str) -> RenewalTermsResponseDTO:
        contract = await self._load(contract_id)
        terms = contract.default_renewal_terms()
        return RenewalTermsResponseDTO(
            contract_id=contract.id,
            can_renew=contract.can_renew(self.clock()),
            **terms,
        )


class CreateContractUseCase(_ContractUseCaseMixin, CreateUseCase[CreateContractRequestDTO, ContractResponseDTO]):
    """Use case for creating a contract for an existing customer."""

    def __init__(
        self,
        contract_repository: ContractRepository,
        customer_repository: CustomerRepository,
        clock: Clock = utc_now,
        rules: StatusRules = DEFAULT_RULES,
    ):
        super().__init__()
        self._setup(contract_repository, customer_repository, clock, rules)

    async def _execute_command_logic(self, request: CreateContractRequestDTO) -> ContractResponseDTO:
        customer = await self.customer_repository.get_by_id(request.customer_id)
        if customer is None:
            raise EntityNotFoundError("Customer", request.customer_id)

        check_contract_dates(request.start_date, request.end_date, request.renewal_date)

        data = request.model_dump()
        data["customer_name"] = customer.name
        contract = await self.contract_repository.add(data)
        return self._to_dto(contract)


class UpdateContractUseCase(_ContractUseCaseMixin, UpdateUseCase[UpdateContractCommand, ContractResponseDTO]):
    """
    Use case for a partial contract update.
    Date ordering is checked against the merged result.
    """

    def __init__(
        self,
        contract_repository: ContractRepository,
        customer_repository: CustomerRepository,
        clock: Clock = utc_now,
        rules: StatusRules = DEFAULT_RULES,
    ):
        super().__init__()
        self._setup(contract_repository, customer_repository, clock, rules)

    async def _execute_command_logic(self, command: UpdateContractCommand) -> ContractResponseDTO:
        current = await self._load(command.contract_id)
        changes = command.changes.to_changes()

        merged = copy.deepcopy(current)
        merged.apply_update(**changes)
        merged.validate()

        contract = await self.contract_repository.update(command.contract_id, changes)
        return self._to_dto(await self._with_current_name(contract))


class RenewContractUseCase(_ContractUseCaseMixin, UpdateUseCase[RenewContractCommand, ContractResponseDTO]):
    """
    Use case for renewing a contract.
    New end date, renewal date and amount; the stored status becomes active.
    """

    def __init__(
        self,
        contract_repository: ContractRepository,
        customer_repository: CustomerRepository,
        clock: Clock = utc_now,
        rules: StatusRules = DEFAULT_RULES,
    ):
        super().__init__()
        self._setup(contract_repository, customer_repository, clock, rules)

    async def _execute_command_logic(self, command: RenewContractCommand) -> ContractResponseDTO:
        current = await self._load(command.contract_id)
        terms = command.terms

        changes = current.renew(terms.end_date, terms.renewal_date, terms.amount)
        changes["status"] = ContractStatus.ACTIVE

        contract = await self.contract_repository.update(command.contract_id, changes)
        return self._to_dto(await self._with_current_name(contract))
