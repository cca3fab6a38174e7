"""Tests for amount conversion and identifier helpers."""

from decimal import Decimal

import pytest

from src.models.exceptions import InvalidAmountError
from src.utils.ids import decode_shareable_id, encode_shareable_id, new_id
from src.utils.money import format_amount, from_cents, to_cents


@pytest.mark.parametrize(
    "value, expected",
    [
        ("250.00", 25000),
        ("15420.5", 1542050),
        (Decimal("0.01"), 1),
        (250, 25000),
        (8750.25, 875025),
        (" 12.30 ", 1230),
        ("-1420.00", -142000),
    ],
)
def test_to_cents(value, expected):
    assert to_cents(value) == expected


@pytest.mark.parametrize(
    "value", ["abc", "", None, "nan", "inf", float("inf"), float("nan"), True, "1e999999999"]
)
def test_to_cents_rejects_non_numeric(value):
    with pytest.raises(InvalidAmountError):
        to_cents(value)


def test_to_cents_rejects_sub_cent_precision():
    with pytest.raises(InvalidAmountError, match="two decimal places"):
        to_cents("0.001")


def test_from_cents():
    assert from_cents(1542050) == Decimal("15420.50")
    assert from_cents(-5) == Decimal("-0.05")


def test_format_amount():
    assert format_amount(1542050) == "$15,420.50"
    assert format_amount(-142000) == "-$1,420.00"
    assert format_amount(0) == "$0.00"


def test_new_id_is_unique_and_prefixed():
    first = new_id("bank")
    second = new_id("bank")

    assert first.startswith("bank-")
    assert first != second


def test_shareable_id_round_trip():
    shareable = encode_shareable_id("account-chase-001")

    assert shareable != "account-chase-001"
    assert decode_shareable_id(shareable) == "account-chase-001"


@pytest.mark.parametrize("value", ["a", "_w=="])
def test_decode_shareable_id_invalid(value):
    assert decode_shareable_id(value) is None
