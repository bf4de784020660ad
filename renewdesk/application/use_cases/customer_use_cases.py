"""
Customer use cases for the application layer.
"""

from dataclasses import dataclass
from typing import Optional

from renewdesk.application.dto.contract_dto import (
    ContractResponseDTO,
    ContractSummaryResponseDTO,
    CustomerContractsResponseDTO,
)
from renewdesk.application.dto.customer_dto import (
    CreateCustomerRequestDTO,
    CustomerListResponseDTO,
    CustomerResponseDTO,
    UpdateCustomerRequestDTO,
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
from renewdesk.domain.models.notification import NotificationType, RelatedEntity, RelatedEntityType
from renewdesk.domain.repositories.contract_repository import ContractRepository
from renewdesk.domain.repositories.customer_repository import CustomerRepository
from renewdesk.domain.repositories.notification_repository import NotificationRepository
from renewdesk.domain.services.aggregation import (
    count_customers_by_status,
    search_customers,
    summarize_customer_contracts,
)
from renewdesk.domain.services.status_classifier import DEFAULT_RULES, StatusRules


@dataclass
class UpdateCustomerCommand:
    customer_id: str
    changes: UpdateCustomerRequestDTO


class ListCustomersUseCase(QueryUseCase[Optional[str], CustomerListResponseDTO]):
    """List customers, optionally narrowed by a search term."""

    def __init__(self, customer_repository: CustomerRepository):
        super().__init__()
        self.customer_repository = customer_repository

    async def _execute_business_logic(self, search: Optional[str]) -> CustomerListResponseDTO:
        customers = await self.customer_repository.list_all()
        counts = count_customers_by_status(customers)

        return CustomerListResponseDTO(
            customers=[
                CustomerResponseDTO.from_domain(customer)
                for customer in search_customers(customers, search)
            ],
            total=len(customers),
            active=counts.active,
            inactive=counts.inactive,
        )


class GetCustomerUseCase(GetByIdUseCase[CustomerResponseDTO]):
    """Use case for getting a customer by ID."""

    def __init__(self, customer_repository: CustomerRepository):
        super().__init__()
        self.customer_repository = customer_repository

    async def _execute_business_logic(self, customer_id: str) -> CustomerResponseDTO:
        customer = await self.customer_repository.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError("Customer", customer_id)
        return CustomerResponseDTO.from_domain(customer)


class CreateCustomerUseCase(CreateUseCase[CreateCustomerRequestDTO, CustomerResponseDTO]):
    """
    Use case for creating a customer.
    Also records a ``customer-added`` notification.
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        notification_repository: NotificationRepository,
        clock: Clock = utc_now,
    ):
        super().__init__()
        self.customer_repository = customer_repository
        self.notification_repository = notification_repository
        self.clock = clock

    async def _execute_command_logic(self, request: CreateCustomerRequestDTO) -> CustomerResponseDTO:
        customer = await self.customer_repository.add(request.model_dump())

        await self.notification_repository.add({
            "type": NotificationType.CUSTOMER_ADDED,
            "message": f"New customer {customer.name} has been added",
            "related_to": RelatedEntity(RelatedEntityType.CUSTOMER, customer.id),
            "date": self.clock(),
            "read": False,
        })

        return CustomerResponseDTO.from_domain(customer)


class UpdateCustomerUseCase(UpdateUseCase[UpdateCustomerCommand, CustomerResponseDTO]):
    """Use case for a partial customer update."""

    def __init__(self, customer_repository: CustomerRepository):
        super().__init__()
        self.customer_repository = customer_repository

    async def _execute_command_logic(self, command: UpdateCustomerCommand) -> CustomerResponseDTO:
        customer = await self.customer_repository.update(
            command.customer_id, command.changes.to_changes()
        )
        return CustomerResponseDTO.from_domain(customer)


class GetCustomerContractsUseCase(GetByIdUseCase[CustomerContractsResponseDTO]):
    """Contracts of a customer plus the figures for its detail page."""

    def __init__(
        self,
        customer_repository: CustomerRepository,
        contract_repository: ContractRepository,
        clock: Clock = utc_now,
        rules: StatusRules = DEFAULT_RULES,
    ):
        super().__init__()
        self.customer_repository = customer_repository
        self.contract_repository = contract_repository
        self.clock = clock
        self.rules = rules

    async def _execute_business_logic(self, customer_id: str) -> CustomerContractsResponseDTO:
        customer = await self.customer_repository.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError("Customer", customer_id)

        now = self.clock()
        contracts = await self.contract_repository.list_by_customer(customer_id)
        for contract in contracts:
            contract.customer_name = customer.name

        summary = summarize_customer_contracts(contracts, now, self.rules.expiring_days)

        return CustomerContractsResponseDTO(
            customer_id=customer_id,
            contracts=[
                ContractResponseDTO.from_domain(contract, now, self.rules)
                for contract in contracts
            ],
            summary=ContractSummaryResponseDTO.from_domain(summary),
        )
