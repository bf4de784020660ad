"""
Unit tests for Contract domain model.
"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from renewdesk.domain.models.base import InvalidDateError, ValidationError
from renewdesk.domain.models.contract import (
    Contract,
    ContractStatus,
    ContractType,
    add_years,
    check_contract_dates,
)


class TestContract:
    """Test cases for Contract domain model."""

    def test_create_contract_success(self, make_contract):
        """Test successful contract creation."""
        contract = make_contract()
        contract.validate()

        assert contract.status == ContractStatus.ACTIVE
        assert contract.type == ContractType.HOSTING
        assert contract.amount == Decimal("1200")
        assert contract.is_active

    def test_string_values_are_coerced(self, make_contract):
        """Test that raw values from a store or request are coerced."""
        contract = make_contract(type="domain", status="pending", amount="10.50")

        assert contract.type == ContractType.DOMAIN
        assert contract.status == ContractStatus.PENDING
        assert contract.amount == Decimal("10.50")
        assert not contract.is_active

    def test_end_date_must_be_after_start_date(self, make_contract, now):
        contract = make_contract(start_date=now, end_date=now, renewal_date=now)

        with pytest.raises(InvalidDateError) as exc_info:
            contract.validate()

        assert exc_info.value.field == "end_date"
        assert exc_info.value.code == "INVALID_DATE"

    def test_renewal_date_after_end_date_rejected(self, make_contract, now):
        contract = make_contract(
            end_date=now + timedelta(days=10),
            renewal_date=now + timedelta(days=11),
        )

        with pytest.raises(InvalidDateError, match="Renewal date must be on or before end date"):
            contract.validate()

    def test_renewal_date_equal_to_end_date_allowed(self, make_contract, now):
        contract = make_contract(
            end_date=now + timedelta(days=10),
            renewal_date=now + timedelta(days=10),
        )
        contract.validate()

    def test_naive_dates_rejected(self, make_contract):
        contract = make_contract(start_date=datetime(2023, 1, 1))

        with pytest.raises(InvalidDateError, match="timezone-aware"):
            contract.validate()

    def test_amount_must_be_positive(self, make_contract):
        for amount in (Decimal("0"), Decimal("-5")):
            with pytest.raises(ValidationError, match="Amount must be a positive number"):
                make_contract(amount=amount).validate()

    def test_name_required(self, make_contract):
        with pytest.raises(ValidationError, match="Contract name is required"):
            make_contract(name="   ").validate()

    def test_type_and_status_required(self, make_contract):
        contract = make_contract()
        contract.apply_update(type=None)

        with pytest.raises(ValidationError, match="Invalid contract type"):
            contract.validate()

        contract = make_contract()
        contract.apply_update(status=None)

        with pytest.raises(ValidationError, match="Invalid contract status"):
            contract.validate()

    def test_null_amount_rejected(self, make_contract):
        contract = make_contract()
        contract.apply_update(amount=None)

        with pytest.raises(ValidationError, match="Amount must be a positive number"):
            contract.validate()

    def test_can_renew(self, make_contract, now):
        """Renewal is offered for non-active or overdue contracts."""
        running = make_contract()
        expired = make_contract(status=ContractStatus.EXPIRED)
        pending = make_contract(status=ContractStatus.PENDING)
        overdue = make_contract(
            end_date=now - timedelta(days=2),
            renewal_date=now - timedelta(days=10),
        )

        assert running.can_renew(now) is False
        assert expired.can_renew(now) is True
        assert pending.can_renew(now) is True
        assert overdue.is_past_end(now) is True
        assert overdue.can_renew(now) is True

    def test_apply_update_returns_changed_fields(self, make_contract, now):
        contract = make_contract()
        new_end = now + timedelta(days=90)

        applied = contract.apply_update(end_date=new_end, name=contract.name)

        assert applied == {"end_date": new_end}
        assert contract.end_date == new_end
        assert contract.name == "Web Hosting Plan"

    def test_apply_update_coerces_values(self, make_contract):
        contract = make_contract()

        contract.apply_update(type="support", status="expired", amount="99.99")

        assert contract.type == ContractType.SUPPORT
        assert contract.status == ContractStatus.EXPIRED
        assert contract.amount == Decimal("99.99")

    def test_apply_update_rejects_id_and_unknown_fields(self, make_contract):
        contract = make_contract()

        with pytest.raises(ValidationError, match="cannot be changed"):
            contract.apply_update(id="99")
        with pytest.raises(ValidationError, match="Unknown field"):
            contract.apply_update(colour="red")

    def test_renew_forces_active(self, make_contract, now):
        contract = make_contract(status=ContractStatus.EXPIRED)
        new_end = now + timedelta(days=365)
        new_renewal = now + timedelta(days=335)

        contract.renew(new_end, new_renewal, Decimal("1500"))

        assert contract.status == ContractStatus.ACTIVE
        assert contract.end_date == new_end
        assert contract.renewal_date == new_renewal
        assert contract.amount == Decimal("1500")

    def test_renew_checks_dates(self, make_contract, now):
        contract = make_contract()

        with pytest.raises(InvalidDateError):
            contract.renew(now + timedelta(days=10), now + timedelta(days=20), Decimal("1"))

    def test_default_renewal_terms(self, make_contract):
        contract = make_contract(
            end_date=datetime(2024, 6, 30, tzinfo=timezone.utc),
            renewal_date=datetime(2024, 6, 1, tzinfo=timezone.utc),
            amount=Decimal("120"),
        )

        terms = contract.default_renewal_terms()

        assert terms == {
            "end_date": datetime(2025, 6, 30, tzinfo=timezone.utc),
            "renewal_date": datetime(2025, 6, 1, tzinfo=timezone.utc),
            "amount": Decimal("120"),
        }

    def test_add_years_clamps_leap_day(self):
        leap_day = datetime(2024, 2, 29, tzinfo=timezone.utc)

        assert add_years(leap_day, 1) == datetime(2025, 2, 28, tzinfo=timezone.utc)
        assert add_years(leap_day, 4) == datetime(2028, 2, 29, tzinfo=timezone.utc)

    def test_matches_name_customer_and_type(self, make_contract):
        contract = make_contract()

        assert contract.matches("hosting plan")
        assert contract.matches("acme")
        assert contract.matches("HOSTING")
        assert not contract.matches("globex")

    def test_equality_by_id(self, make_contract):
        assert make_contract(id="1") == make_contract(id="1", name="Renamed")
        assert make_contract(id="1") != make_contract(id="2")
        assert len({make_contract(id="1"), make_contract(id="1")}) == 1

    def test_to_dict(self, make_contract):
        data = make_contract(amount=Decimal("100.50")).to_dict()

        assert data["amount"] == "100.50"
        assert data["type"] == "hosting"
        assert data["status"] == "active"
        assert data["end_date"].startswith("2024-03-01")


class TestCheckContractDates:
    """Test cases for the date ordering rule."""

    def test_valid_ordering(self, now):
        check_contract_dates(now, now + timedelta(days=1), now)

    def test_end_before_start(self, now):
        with pytest.raises(InvalidDateError, match="End date must be after start date"):
            check_contract_dates(now, now - timedelta(days=1), now - timedelta(days=2))

    def test_non_datetime_rejected(self, now):
        with pytest.raises(InvalidDateError, match="must be a datetime"):
            check_contract_dates("2024-01-01", now, now)
