"""
Input validation utilities.
Validators used by the request DTOs to reject malformed input before it
reaches the domain layer.
"""

import re
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

import bleach
import phonenumbers
from phonenumbers import NumberParseException

# Notes are plain text
ALLOWED_HTML_TAGS: List[str] = []
ALLOWED_HTML_ATTRIBUTES = {}

PATTERNS = {
    'xss_basic': re.compile(r'<[^>]*script[^>]*>|javascript:|vbscript:|onload|onerror|eval\(', re.IGNORECASE),
    'email': re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'),
}

MAX_AMOUNT = Decimal('999999999.99')


class SecurityValidator:
    """Security-focused validators for free-text input."""

    @staticmethod
    def check_xss(value: str) -> str:
        """Check for potential XSS patterns."""
        if not isinstance(value, str):
            return value

        if PATTERNS['xss_basic'].search(value):
            raise ValueError("Potentially unsafe script content detected")
        return value

    @staticmethod
    def sanitize_html(value: Optional[str], allowed_tags: Optional[List[str]] = None) -> Optional[str]:
        """Strip markup from free text, keeping only allowed tags."""
        if not isinstance(value, str):
            return value

        if allowed_tags is None:
            allowed_tags = ALLOWED_HTML_TAGS

        return bleach.clean(
            value,
            tags=allowed_tags,
            attributes=ALLOWED_HTML_ATTRIBUTES,
            strip=True
        )


class DataValidator:
    """Validators for common data formats."""

    @staticmethod
    def validate_email(email: str) -> str:
        """Validate email format."""
        if not isinstance(email, str):
            raise ValueError("Email must be a string")

        email = email.strip().lower()

        if not PATTERNS['email'].match(email):
            raise ValueError("Please enter a valid email address.")

        return email

    @staticmethod
    def validate_phone(phone: str, region: str = 'US') -> str:
        """
        Validate a phone number with the phonenumbers library.
        The number is kept as typed; only its shape is checked.
        """
        if not isinstance(phone, str):
            raise ValueError("Phone must be a string")

        phone = phone.strip()
        try:
            parsed = phonenumbers.parse(phone, region)
        except NumberParseException:
            raise ValueError("Please enter a valid phone number.")

        if not phonenumbers.is_possible_number(parsed):
            raise ValueError("Please enter a valid phone number.")
        return phone

    @staticmethod
    def validate_decimal_amount(amount: Union[str, float, int, Decimal]) -> Decimal:
        """Convert to a positive currency amount with at most two decimals."""
        try:
            if isinstance(amount, str):
                amount = re.sub(r'[$€£,\s]', '', amount)
            decimal_amount = Decimal(str(amount))
        except InvalidOperation:
            raise ValueError("Invalid amount format")

        if not decimal_amount.is_finite() or decimal_amount <= 0:
            raise ValueError("Amount must be a positive number.")
        if decimal_amount.as_tuple().exponent < -2:
            raise ValueError("Amount cannot have more than 2 decimal places")
        if decimal_amount > MAX_AMOUNT:
            raise ValueError("Amount exceeds maximum allowed value")

        return decimal_amount

    @staticmethod
    def as_utc(value: datetime) -> datetime:
        """Interpret naive datetimes as UTC and normalise aware ones to UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class BusinessValidator:
    """Field rules taken from the customer and contract forms."""

    @staticmethod
    def validate_min_length(value: str, minimum: int, message: str) -> str:
        if not isinstance(value, str):
            raise ValueError(message)

        value = value.strip()
        if len(value) < minimum:
            raise ValueError(message)

        SecurityValidator.check_xss(value)
        return value

    @staticmethod
    def validate_customer_name(name: str) -> str:
        return BusinessValidator.validate_min_length(
            name, 2, "Company name must be at least 2 characters."
        )

    @staticmethod
    def validate_contact_person(name: str) -> str:
        return BusinessValidator.validate_min_length(
            name, 2, "Contact person must be at least 2 characters."
        )

    @staticmethod
    def validate_address(address: str) -> str:
        return BusinessValidator.validate_min_length(
            address, 5, "Address must be at least 5 characters."
        )

    @staticmethod
    def validate_contract_name(name: str) -> str:
        return BusinessValidator.validate_min_length(
            name, 2, "Contract name must be at least 2 characters."
        )
