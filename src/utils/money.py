"""Conversions between user-facing amounts and integer cents."""

from decimal import Decimal, DecimalException

from src.models.exceptions import InvalidAmountError

CENTS_PLACES = 2


def to_cents(value: Decimal | str | int | float) -> int:
    """
    Convert an amount to integer cents.

    Args:
        value: A Decimal, numeric string, int or float (e.g. "250.00")

    Returns:
        The amount in cents (may be negative)

    Raises:
        InvalidAmountError: If the value is not numeric, not finite, out of
            the decimal range, or has more than two decimal places
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount {value!r} is not a number")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (DecimalException, ValueError, TypeError):
        raise InvalidAmountError(f"Amount {value!r} is not a number")

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount {value!r} is not finite")

    try:
        cents = amount.scaleb(CENTS_PLACES)
        whole = cents.to_integral_value()
    except DecimalException:
        raise InvalidAmountError(f"Amount {value!r} is out of range")
    if cents != whole:
        raise InvalidAmountError(f"Amount {value!r} has more than two decimal places")
    return int(cents)


def from_cents(cents: int) -> Decimal:
    """Convert integer cents to a two-place Decimal."""
    return Decimal(cents).scaleb(-CENTS_PLACES)


def format_amount(cents: int) -> str:
    """Render cents as a dollar string, e.g. -142000 -> '-$1,420.00'."""
    sign = "-" if cents < 0 else ""
    return f"{sign}${from_cents(abs(cents)):,.2f}"
