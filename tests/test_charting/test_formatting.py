"""Tests for value formatting."""

from decimal import Decimal

from wallet_history.charting.formatting import format_value
from wallet_history.shared.models import ValueFormat


def test_plain_uses_thousands_separator_and_two_decimals():
    assert format_value(1234.5) == "1,234.50"


def test_currency_appends_symbol():
    assert format_value(Decimal("1234.5"), ValueFormat.CURRENCY) == "1,234.50 CW"


def test_currency_symbol_and_decimals_configurable():
    assert (
        format_value(7, ValueFormat.CURRENCY, currency_symbol="BTC", decimals=4)
        == "7.0000 BTC"
    )


def test_accepts_format_name():
    assert format_value(0, "currency") == "0.00 CW"
    assert format_value(0, "plain") == "0.00"
