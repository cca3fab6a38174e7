"""Transfer data model."""

from dataclasses import dataclass
from datetime import datetime, timezone

TRANSFER_CATEGORY = "Transfer"
TRANSFER_CHANNEL = "online"


@dataclass
class Transfer:
    """Represents a money movement between two bank links."""

    id: str | None
    name: str
    amount: int
    sender_id: str
    sender_bank_id: str
    receiver_id: str
    receiver_bank_id: str
    email: str
    created_at: datetime
    channel: str = TRANSFER_CHANNEL
    category: str = TRANSFER_CATEGORY

    @classmethod
    def create(
        cls,
        name: str,
        amount: int,
        sender_id: str,
        sender_bank_id: str,
        receiver_id: str,
        receiver_bank_id: str,
        email: str,
        created_at: datetime | None = None,
    ) -> "Transfer":
        """
        Create an unsaved transfer record.

        Args:
            name: Free-text label shown in the history feed
            amount: Unsigned amount in cents
            sender_id: The sending user id
            sender_bank_id: The sending bank link id
            receiver_id: The receiving user id
            receiver_bank_id: The receiving bank link id
            email: Contact email supplied with the transfer
            created_at: Creation timestamp (default: now, UTC)

        Returns:
            A new Transfer with id=None, channel 'online' and category 'Transfer'
        """
        return cls(
            id=None,
            name=name,
            amount=amount,
            sender_id=sender_id,
            sender_bank_id=sender_bank_id,
            receiver_id=receiver_id,
            receiver_bank_id=receiver_bank_id,
            email=email,
            created_at=created_at or datetime.now(timezone.utc),
        )
