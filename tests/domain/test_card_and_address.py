"""Unit tests for the payment instrument and destination types."""

from datetime import date

import pytest

from ecommerce.domain.exceptions import ValidationError
from ecommerce.domain.model.address import AddressInfo
from ecommerce.domain.model.card import Card


def _card(number="4111111111111111", month=6, year=2030):
    return Card(holder="Alice", number=number, expiry_month=month, expiry_year=year)


class TestCard:

    def test_masked_number(self):
        card = _card()
        assert card.last_four == "1111"
        assert card.masked_number == "************1111"

    def test_luhn_valid(self):
        assert _card("4111111111111111").passes_luhn()
        assert _card("5500005555555559").passes_luhn()

    def test_luhn_invalid(self):
        assert not _card("4111111111111112").passes_luhn()

    def test_valid_through_expiry_month(self):
        card = _card(month=6, year=2030)
        assert not card.is_expired(date(2030, 6, 30))
        assert card.is_expired(date(2030, 7, 1))

    def test_non_digit_number_rejected(self):
        with pytest.raises(ValidationError, match="12 to 19 digits"):
            _card("4111-1111-1111-1111")

    def test_bad_month_rejected(self):
        with pytest.raises(ValidationError, match="between 1 and 12"):
            _card(month=13)


class TestAddressInfo:

    def test_one_line(self):
        address = AddressInfo("Alice", "1 Main St", "Springfield", "12345", "US")
        assert address.one_line() == "Alice, 1 Main St, 12345 Springfield, US"

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError, match="postal code is required"):
            AddressInfo("Alice", "1 Main St", "Springfield", "", "US")
