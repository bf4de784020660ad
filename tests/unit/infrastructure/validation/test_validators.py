"""
Unit tests for input validators.
"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from renewdesk.infrastructure.validation.validators import (
    BusinessValidator,
    DataValidator,
    SecurityValidator,
)


class TestSecurityValidator:

    def test_sanitize_html_strips_tags(self):
        assert SecurityValidator.sanitize_html("<b>Renew</b> before <i>May</i>") == "Renew before May"

    def test_sanitize_html_passes_through_non_strings(self):
        assert SecurityValidator.sanitize_html(None) is None

    def test_check_xss(self):
        with pytest.raises(ValueError, match="unsafe"):
            SecurityValidator.check_xss("<script>alert(1)</script>")
        assert SecurityValidator.check_xss("ACME Corporation") == "ACME Corporation"


class TestDataValidator:

    def test_email_normalised(self):
        assert DataValidator.validate_email("  Info@ACME.com ") == "info@acme.com"

    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "@acme.com"])
    def test_email_invalid(self, email):
        with pytest.raises(ValueError, match="valid email"):
            DataValidator.validate_email(email)

    @pytest.mark.parametrize("phone", ["(555) 123-4567", "+1 555 987 6543", "555-456-7890"])
    def test_phone_valid(self, phone):
        assert DataValidator.validate_phone(phone) == phone

    @pytest.mark.parametrize("phone", ["12", "call me", ""])
    def test_phone_invalid(self, phone):
        with pytest.raises(ValueError, match="valid phone number"):
            DataValidator.validate_phone(phone)

    def test_amount_parsing(self):
        assert DataValidator.validate_decimal_amount("$1,200.50") == Decimal("1200.50")
        assert DataValidator.validate_decimal_amount(95) == Decimal("95")

    @pytest.mark.parametrize("amount,message", [
        ("0", "positive"),
        ("-1", "positive"),
        ("abc", "Invalid amount format"),
        ("1.005", "2 decimal places"),
        ("1000000000", "maximum"),
    ])
    def test_amount_invalid(self, amount, message):
        with pytest.raises(ValueError, match=message):
            DataValidator.validate_decimal_amount(amount)

    def test_as_utc(self):
        naive = datetime(2024, 1, 1, 12, 0)
        offset = datetime(2024, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))

        assert DataValidator.as_utc(naive) == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert DataValidator.as_utc(offset).tzinfo == timezone.utc
        assert DataValidator.as_utc(offset).hour == 12


class TestBusinessValidator:

    def test_min_lengths(self):
        assert BusinessValidator.validate_customer_name("  AB ") == "AB"
        with pytest.raises(ValueError, match="Company name must be at least 2 characters"):
            BusinessValidator.validate_customer_name("A")
        with pytest.raises(ValueError, match="Address must be at least 5 characters"):
            BusinessValidator.validate_address("1 St")
        with pytest.raises(ValueError, match="Contract name must be at least 2 characters"):
            BusinessValidator.validate_contract_name(" ")
