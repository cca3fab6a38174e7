"""Bank link data model."""

from dataclasses import dataclass


@dataclass
class Bank:
    """Links one user to one account through payment-network credentials."""

    id: str | None
    account_id: str
    item_id: str
    user_id: str
    access_token: str
    funding_source_url: str
    shareable_id: str
    institution_id: str
