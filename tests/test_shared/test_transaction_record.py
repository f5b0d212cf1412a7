"""Tests for TransactionRecord."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from wallet_history.shared.models import TransactionAction, TransactionRecord


@pytest.mark.parametrize(
    ("action", "amount", "effect"),
    [
        ("sent", "5", Decimal(-5)),
        ("sent", "-5", Decimal(-5)),
        ("received", "3", Decimal(3)),
        ("received", "-3", Decimal(3)),
        ("mined", "50", Decimal(50)),
    ],
)
def test_effect_sign_follows_action(action, amount, effect):
    record = TransactionRecord(id="t", action=action, amount=amount)

    assert record.effect == effect


def test_incoming_actions():
    assert not TransactionAction.SENT.is_incoming
    assert TransactionAction.RECEIVED.is_incoming
    assert TransactionAction.MINED.is_incoming


def test_float_amount_keeps_printed_value():
    record = TransactionRecord(id="t", action="received", amount=0.1)

    assert record.amount == Decimal("0.1")


def test_timestamp_parsed_to_utc():
    record = TransactionRecord(
        id="t", action="sent", amount=1, timestamp="2024-06-15T12:00:00Z"
    )

    assert record.timestamp == datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


def test_records_are_frozen():
    record = TransactionRecord(id="t", action="sent", amount=1)

    with pytest.raises(ValidationError):
        record.amount = Decimal(2)
