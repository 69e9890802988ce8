"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import re
from decimal import Decimal
from uuid import UUID

import pytest

from events.domain import Money, Quantity, TicketCategoryId
from orders.domain import ContactInfo, OrderNumber
from orders.domain.value_objects import to_base36


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("45"))) == "45.00"

    def test_times_multiplies_amount(self):
        """times() returns the price of several units."""
        assert Money(Decimal("45.00")).times(2) == Money(Decimal("90.00"))


class TestQuantity:
    """Tests for Quantity value object."""

    def test_quantity_accepts_zero(self):
        """Quantity can be created with zero."""
        assert Quantity(0).value == 0

    def test_quantity_rejects_negative_value(self):
        """Quantity raises ValueError for negative value."""
        with pytest.raises(ValueError):
            Quantity(-1)


class TestTicketCategoryId:
    """Tests for TicketCategoryId value object."""

    def test_from_string_valid_uuid(self):
        """from_string parses valid UUID."""
        raw = "3f1c6a8e-8a53-4c44-9f0e-0b8f2f0a8d11"
        assert TicketCategoryId.from_string(raw).value == UUID(raw)

    def test_from_string_invalid_uuid(self):
        """from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            TicketCategoryId.from_string("T1")


class TestOrderNumber:
    """Tests for order number generation."""

    def test_base36_encoding(self):
        assert to_base36(0) == "0"
        assert to_base36(35) == "z"
        assert to_base36(36) == "10"

    def test_generated_number_shape(self):
        """Prefix, base36 timestamp and six uppercase characters."""
        number = OrderNumber.generate("BE", now_ms=36)
        assert re.fullmatch(r"BE-10-[0-9A-Z]{6}", number.value)

    def test_generated_numbers_differ(self):
        """Numbers generated in the same millisecond still differ."""
        numbers = {OrderNumber.generate("BE", now_ms=1_700_000_000_000).value for _ in range(50)}
        assert len(numbers) == 50

    def test_rejects_blank_number(self):
        with pytest.raises(ValueError):
            OrderNumber("")

    def test_rejects_number_with_spaces(self):
        with pytest.raises(ValueError):
            OrderNumber("BE 123")


class TestContactInfo:
    """Tests for checkout contact validation."""

    def test_valid_contact_has_no_errors(self):
        assert ContactInfo(name="Ada", email="ada@example.com").field_errors() == {}

    def test_blank_name_is_required(self):
        """A name made of whitespace is missing."""
        errors = ContactInfo(name="   ", email="ada@example.com").field_errors()
        assert errors == {"name": "name required"}

    @pytest.mark.parametrize("email", ["", "not-an-email", "ada@example", "a b@example.com"])
    def test_malformed_email_is_invalid(self, email):
        errors = ContactInfo(name="Ada", email=email).field_errors()
        assert errors == {"email": "invalid email"}

    def test_normalized_trims_fields_and_drops_blank_phone(self):
        contact = ContactInfo(name=" Ada ", email=" ada@example.com ", phone="  ").normalized()
        assert contact == ContactInfo(name="Ada", email="ada@example.com", phone=None)
