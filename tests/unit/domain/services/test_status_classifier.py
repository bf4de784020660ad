"""
Unit tests for the contract status classifier.
"""

import pytest
from datetime import datetime, timedelta, timezone

from renewdesk.domain.models.base import InvalidDateError
from renewdesk.domain.models.contract import ContractStatus
from renewdesk.domain.services.status_classifier import (
    DEFAULT_RULES,
    DisplayStatus,
    RenewalUrgency,
    StatusRules,
    Urgency,
    classify,
    days_between,
    renewal_urgency,
)


def ending_in(make_contract, now, days, **overrides):
    end = now + timedelta(days=days)
    return make_contract(
        start_date=end - timedelta(days=365),
        end_date=end,
        renewal_date=end,
        **overrides,
    )


class TestDaysBetween:
    """Test cases for days_between."""

    def test_whole_days(self, now):
        assert days_between(now, now + timedelta(days=5)) == 5
        assert days_between(now, now) == 0

    def test_truncates_toward_zero(self, now):
        assert days_between(now, now + timedelta(days=1, hours=23)) == 1
        assert days_between(now, now + timedelta(hours=23)) == 0
        assert days_between(now, now - timedelta(hours=23)) == 0
        assert days_between(now, now - timedelta(days=1, hours=1)) == -1

    def test_rejects_naive_and_aware_mix(self, now):
        with pytest.raises(InvalidDateError):
            days_between(now, datetime(2024, 1, 5))

    def test_rejects_non_datetime(self, now):
        with pytest.raises(InvalidDateError):
            days_between(now, "2024-01-05")


class TestClassify:
    """Test cases for classify."""

    def test_active_far_from_end(self, make_contract, now):
        result = classify(ending_in(make_contract, now, 31), now)

        assert result.status == DisplayStatus.ACTIVE
        assert result.urgency is None
        assert result.days_remaining == 31

    def test_expiring_soon_medium(self, make_contract, now):
        for days in (8, 15, 30):
            result = classify(ending_in(make_contract, now, days), now)

            assert result.status == DisplayStatus.EXPIRING_SOON
            assert result.urgency == Urgency.MEDIUM

    def test_expiring_soon_high(self, make_contract, now):
        for days in (0, 1, 7):
            result = classify(ending_in(make_contract, now, days), now)

            assert result.status == DisplayStatus.EXPIRING_SOON
            assert result.urgency == Urgency.HIGH
            assert result.days_remaining == days

    def test_active_past_end_is_overdue(self, make_contract, now):
        result = classify(ending_in(make_contract, now, -3), now)

        assert result.status == DisplayStatus.EXPIRING_SOON
        assert result.urgency == Urgency.HIGH
        assert result.days_remaining == -3
        assert result.is_overdue is True

    def test_stored_expired_wins_over_dates(self, make_contract, now):
        result = classify(ending_in(make_contract, now, 200, status=ContractStatus.EXPIRED), now)

        assert result.status == DisplayStatus.EXPIRED
        assert result.urgency is None
        assert result.days_remaining is None
        assert result.is_overdue is False

    def test_stored_pending(self, make_contract, now):
        result = classify(ending_in(make_contract, now, 3, status=ContractStatus.PENDING), now)

        assert result.status == DisplayStatus.PENDING
        assert result.urgency is None

    def test_new_year_scenario(self, make_contract):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        contract = make_contract(
            start_date=datetime(2023, 1, 5, tzinfo=timezone.utc),
            end_date=datetime(2024, 1, 5, tzinfo=timezone.utc),
            renewal_date=datetime(2024, 1, 3, tzinfo=timezone.utc),
        )

        result = classify(contract, now)

        assert result.status == DisplayStatus.EXPIRING_SOON
        assert result.urgency == Urgency.HIGH
        assert result.days_remaining == 4

    def test_custom_rules(self, make_contract, now):
        rules = StatusRules(expiring_days=60, urgent_days=14)

        assert rules.classify(ending_in(make_contract, now, 45), now).urgency == Urgency.MEDIUM
        assert rules.classify(ending_in(make_contract, now, 10), now).urgency == Urgency.HIGH
        assert rules.classify(ending_in(make_contract, now, 61), now).status == DisplayStatus.ACTIVE


class TestRenewalUrgency:
    """Test cases for renewal_urgency."""

    @pytest.mark.parametrize("days,expected", [
        (1, RenewalUrgency.HIGH),
        (7, RenewalUrgency.HIGH),
        (8, RenewalUrgency.MEDIUM),
        (15, RenewalUrgency.MEDIUM),
        (16, RenewalUrgency.LOW),
    ])
    def test_tiers(self, make_contract, now, days, expected):
        contract = make_contract(renewal_date=now + timedelta(days=days))

        assert renewal_urgency(contract, now) == expected

    def test_rules_urgent_days_apply(self, make_contract, now):
        contract = make_contract(renewal_date=now + timedelta(days=10))

        assert StatusRules(urgent_days=10).renewal_urgency(contract, now) == RenewalUrgency.HIGH
        assert DEFAULT_RULES.renewal_urgency(contract, now) == RenewalUrgency.MEDIUM
