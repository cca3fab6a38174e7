"""Account data model."""

from dataclasses import dataclass


@dataclass
class Account:
    """Represents a financial account.

    Balances are integer cents. ``available_balance`` and ``current_balance``
    are tracked independently but transfers move both by the same delta;
    pending-settlement lag is not modelled.
    """

    id: str | None
    name: str
    official_name: str
    mask: str
    type: str
    subtype: str
    available_balance: int
    current_balance: int
