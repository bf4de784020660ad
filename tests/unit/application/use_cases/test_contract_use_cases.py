"""
Unit tests for contract use cases.
"""

import pytest
from datetime import timedelta
from decimal import Decimal

from renewdesk.application.dto.contract_dto import (
    CreateContractRequestDTO,
    ListContractsRequestDTO,
    RenewContractRequestDTO,
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
from renewdesk.domain.models.contract import add_years


@pytest.fixture
def use_case_args(contract_repository, customer_repository, clock):
    return contract_repository, customer_repository, clock


class TestListContractsUseCase:

    @pytest.mark.asyncio
    async def test_list_all_with_counts(self, use_case_args):
        result = await ListContractsUseCase(*use_case_args).execute()

        data = result.data
        assert len(data.contracts) == 7
        assert (data.total, data.active, data.expiring, data.expired) == (7, 6, 2, 1)

    @pytest.mark.asyncio
    async def test_display_status_attached(self, use_case_args):
        result = await ListContractsUseCase(*use_case_args).execute()

        by_id = {c.id: c for c in result.data.contracts}
        assert by_id["5"].display_status == "expiring-soon"
        assert by_id["5"].urgency == "high"
        assert by_id["7"].urgency == "medium"
        assert by_id["3"].display_status == "expired"
        assert by_id["6"].display_status == "active"

    @pytest.mark.asyncio
    async def test_search_and_status(self, use_case_args):
        use_case = ListContractsUseCase(*use_case_args)

        domains = await use_case.execute(ListContractsRequestDTO(search="domain"))
        expired = await use_case.execute(ListContractsRequestDTO(status="expired"))

        assert [c.id for c in domains.data.contracts] == ["1", "4", "7"]
        assert [c.id for c in expired.data.contracts] == ["3"]
        assert expired.data.total == 7

    @pytest.mark.asyncio
    async def test_customer_rename_is_visible(self, use_case_args, customer_repository):
        await customer_repository.update("1", {"name": "ACME Holdings"})

        result = await ListContractsUseCase(*use_case_args).execute(ListContractsRequestDTO(search="holdings"))

        assert [c.id for c in result.data.contracts] == ["1", "2"]


class TestGetContractUseCase:

    @pytest.mark.asyncio
    async def test_found(self, use_case_args):
        result = await GetContractUseCase(*use_case_args).execute("2")

        assert result.data.name == "Web Hosting Plan"
        assert result.data.customer_name == "ACME Corporation"

    @pytest.mark.asyncio
    async def test_not_found(self, use_case_args):
        result = await GetContractUseCase(*use_case_args).execute("999")

        assert result.is_not_found

    @pytest.mark.asyncio
    async def test_snapshot_name_when_customer_missing(self, use_case_args, seeded_database):
        seeded_database.customers[:] = [c for c in seeded_database.customers if c.id != "2"]

        result = await GetContractUseCase(*use_case_args).execute("3")

        assert result.data.customer_name == "TechCorp Solutions"


class TestCreateContractUseCase:

    def request(self, now, **overrides):
        data = dict(
            customer_id="2",
            type="support",
            name="Support 2024",
            start_date=now,
            end_date=now + timedelta(days=365),
            renewal_date=now + timedelta(days=335),
            amount="5000.00",
        )
        data.update(overrides)
        return CreateContractRequestDTO(**data)

    @pytest.mark.asyncio
    async def test_create(self, use_case_args, contract_repository, now):
        result = await CreateContractUseCase(*use_case_args).execute(self.request(now))

        assert result.success is True
        assert result.data.id == "8"
        assert result.data.customer_name == "TechCorp Solutions"
        assert result.data.amount == Decimal("5000.00")
        assert result.data.display_status == "active"
        assert len(await contract_repository.list_all()) == 8

    @pytest.mark.asyncio
    async def test_unknown_customer(self, use_case_args, contract_repository, now):
        result = await CreateContractUseCase(*use_case_args).execute(self.request(now, customer_id="999"))

        assert result.is_not_found
        assert result.error == "Customer with id 999 not found"
        assert len(await contract_repository.list_all()) == 7


class TestUpdateContractUseCase:

    @pytest.mark.asyncio
    async def test_partial_update_of_end_date(self, use_case_args, contract_repository):
        before = await contract_repository.get_by_id("2")
        new_end = before.end_date + timedelta(days=30)
        command = UpdateContractCommand("2", UpdateContractRequestDTO(end_date=new_end))

        result = await UpdateContractUseCase(*use_case_args).execute(command)
        after = await contract_repository.get_by_id("2")

        assert result.success is True
        assert after.end_date == new_end
        assert after.renewal_date == before.renewal_date
        assert after.amount == before.amount
        assert after.name == before.name

    @pytest.mark.asyncio
    async def test_merged_dates_are_checked(self, use_case_args, contract_repository):
        before = await contract_repository.get_by_id("2")
        command = UpdateContractCommand(
            "2", UpdateContractRequestDTO(end_date=before.start_date - timedelta(days=1))
        )

        result = await UpdateContractUseCase(*use_case_args).execute(command)
        after = await contract_repository.get_by_id("2")

        assert result.success is False
        assert result.error_code == "INVALID_DATE"
        assert after.end_date == before.end_date

    @pytest.mark.asyncio
    async def test_status_change(self, use_case_args):
        command = UpdateContractCommand("1", UpdateContractRequestDTO(status="pending"))

        result = await UpdateContractUseCase(*use_case_args).execute(command)

        assert result.data.status == "pending"
        assert result.data.display_status == "pending"

    @pytest.mark.asyncio
    async def test_not_found(self, use_case_args):
        command = UpdateContractCommand("999", UpdateContractRequestDTO(name="Nothing here"))

        result = await UpdateContractUseCase(*use_case_args).execute(command)

        assert result.is_not_found


class TestRenewContractUseCase:

    @pytest.mark.asyncio
    async def test_renew_expired_contract(self, use_case_args, now):
        terms = RenewContractRequestDTO(
            end_date=now + timedelta(days=365),
            renewal_date=now + timedelta(days=335),
            amount="5500",
        )

        result = await RenewContractUseCase(*use_case_args).execute(RenewContractCommand("3", terms))

        assert result.success is True
        assert result.data.status == "active"
        assert result.data.display_status == "active"
        assert result.data.amount == Decimal("5500")
        assert result.data.can_renew is False

    @pytest.mark.asyncio
    async def test_renew_not_found(self, use_case_args, now):
        terms = RenewContractRequestDTO(
            end_date=now + timedelta(days=365),
            renewal_date=now + timedelta(days=335),
            amount="1",
        )

        result = await RenewContractUseCase(*use_case_args).execute(RenewContractCommand("999", terms))

        assert result.is_not_found


class TestGetRenewalTermsUseCase:

    @pytest.mark.asyncio
    async def test_terms(self, use_case_args, contract_repository):
        contract = await contract_repository.get_by_id("3")

        result = await GetRenewalTermsUseCase(*use_case_args).execute("3")

        assert result.data.contract_id == "3"
        assert result.data.end_date == add_years(contract.end_date, 1)
        assert result.data.renewal_date == add_years(contract.renewal_date, 1)
        assert result.data.amount == Decimal("5000")
        assert result.data.can_renew is True
