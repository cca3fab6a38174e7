"""Transfer repository for database operations."""

import sqlite3
from datetime import datetime, timezone

from src.models.transfer import Transfer
from src.utils.ids import new_id

_COLUMNS = (
    "id, Name, Amount, SenderID, SenderBankID, ReceiverID, ReceiverBankID, "
    "Email, Channel, Category, CreatedAt"
)


def _to_utc(moment: datetime) -> datetime:
    """Naive timestamps are taken to be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


class TransferRepository:
    """Repository for Transfer data access operations.

    Listings are newest first: by creation time, then by insertion order.
    """

    def __init__(self, conn: sqlite3.Connection):
        """
        Initialize the repository with a database connection.

        Args:
            conn: SQLite database connection
        """
        self._conn = conn
        self._conn.row_factory = sqlite3.Row

    def create_table(self) -> None:
        """Create the Transfers table if it doesn't exist."""
        cursor = self._conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS Transfers (
                id TEXT PRIMARY KEY,
                Name TEXT,
                Amount INTEGER,
                SenderID TEXT,
                SenderBankID TEXT REFERENCES Banks(id),
                ReceiverID TEXT,
                ReceiverBankID TEXT REFERENCES Banks(id),
                Email TEXT,
                Channel TEXT,
                Category TEXT,
                CreatedAt TEXT
            )
        """
        )
        self._conn.commit()

    def _from_row(self, row: sqlite3.Row) -> Transfer:
        return Transfer(
            id=row["id"],
            name=row["Name"],
            amount=row["Amount"],
            sender_id=row["SenderID"],
            sender_bank_id=row["SenderBankID"],
            receiver_id=row["ReceiverID"],
            receiver_bank_id=row["ReceiverBankID"],
            email=row["Email"],
            channel=row["Channel"],
            category=row["Category"],
            created_at=datetime.fromisoformat(row["CreatedAt"]),
        )

    def create(self, transfer: Transfer) -> Transfer:
        """
        Append a transfer record.

        CreatedAt is stored in UTC so that listings sort chronologically.

        Args:
            transfer: The Transfer object to create; a fresh id is assigned if id is None

        Returns:
            The stored Transfer
        """
        transfer_id = transfer.id or new_id("transfer")
        cursor = self._conn.cursor()
        cursor.execute(
            f"INSERT INTO Transfers ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (
                transfer_id,
                transfer.name,
                transfer.amount,
                transfer.sender_id,
                transfer.sender_bank_id,
                transfer.receiver_id,
                transfer.receiver_bank_id,
                transfer.email,
                transfer.channel,
                transfer.category,
                _to_utc(transfer.created_at).isoformat(timespec="microseconds"),
            ),
        )
        return self.find_by_id(transfer_id)

    def find_by_id(self, transfer_id: str) -> Transfer | None:
        """
        Find a transfer by id.

        Args:
            transfer_id: The transfer id to search for

        Returns:
            Transfer object if found, None otherwise
        """
        cursor = self._conn.cursor()
        cursor.execute(f"SELECT {_COLUMNS} FROM Transfers WHERE id = ?", (transfer_id,))
        row = cursor.fetchone()

        if row is None:
            return None

        return self._from_row(row)

    def find_by_bank(self, bank_id: str) -> list[Transfer]:
        """
        Find transfers where the bank is sender or receiver.

        Args:
            bank_id: The bank link id to search for

        Returns:
            List of transfers, newest first
        """
        cursor = self._conn.cursor()
        cursor.execute(
            f"""SELECT {_COLUMNS} FROM Transfers
                WHERE SenderBankID = ? OR ReceiverBankID = ?
                ORDER BY CreatedAt DESC, rowid DESC""",
            (bank_id, bank_id),
        )
        return [self._from_row(row) for row in cursor.fetchall()]

    def find_all(self) -> list[Transfer]:
        """Return the whole transfer ledger, newest first."""
        cursor = self._conn.cursor()
        cursor.execute(f"SELECT {_COLUMNS} FROM Transfers ORDER BY CreatedAt DESC, rowid DESC")
        return [self._from_row(row) for row in cursor.fetchall()]

    def count(self) -> int:
        cursor = self._conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM Transfers")
        return cursor.fetchone()[0]
