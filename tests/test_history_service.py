"""Tests for HistoryService merging."""

from datetime import date, datetime, timedelta, timezone

import pytest

from src.data import fixtures
from src.models.transaction import Transaction
from src.models.transfer import Transfer
from src.services.history_service import HistoryService
from src.store import EntityStore

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store():
    """Create an in-memory store loaded with the demo data."""
    store = EntityStore.open(":memory:", institutions=fixtures.INSTITUTIONS)
    fixtures.load_demo_data(store, now=NOW)
    yield store
    store.close()


@pytest.fixture
def empty_store():
    store = EntityStore.open(":memory:", institutions=fixtures.INSTITUTIONS)
    yield store
    store.close()


def add_transaction(store, txn_id, day, amount=-1000, account_id="account-1"):
    with store.transaction():
        store.transactions.create(
            Transaction(
                id=txn_id,
                account_id=account_id,
                name="Target",
                amount=amount,
                date=day,
                category="Shopping",
                payment_channel="in store",
                pending=False,
            )
        )


def add_transfer(store, transfer_id, sender, receiver, created_at, amount=5000):
    with store.transaction():
        store.transfers.create(
            Transfer(
                id=transfer_id,
                name=f"{sender} to {receiver}",
                amount=amount,
                sender_id="user-1",
                sender_bank_id=sender,
                receiver_id="user-2",
                receiver_bank_id=receiver,
                email="x@example.com",
                created_at=created_at,
            )
        )


def test_history_has_every_entry_sorted_newest_first(store):
    history = HistoryService(store).get_history("account-chase-001", "bank-1")

    external = store.transactions.find_by_account("account-chase-001")
    transfers = store.transfers.find_by_bank("bank-1")
    assert len(history) == len(external) + len(transfers)
    dates = [entry.date for entry in history]
    assert dates == sorted(dates, reverse=True)


def test_transfer_sign_follows_queried_bank(empty_store):
    """Sender side sees a debit, receiver side sees a credit."""
    add_transfer(empty_store, "tr-1", "bank-a", "bank-b", NOW, amount=25000)
    history = HistoryService(empty_store)

    (sent,) = history.get_history("account-a", "bank-a")
    (received,) = history.get_history("account-b", "bank-b")

    assert sent.amount == -25000
    assert sent.type == "debit"
    assert received.amount == 25000
    assert received.type == "credit"
    assert sent.category == received.category == "Transfer"
    assert sent.channel == "online"
    assert sent.source == received.source == "transfer"


def test_external_entries_keep_their_sign(empty_store):
    add_transaction(empty_store, "t-out", date(2024, 5, 1), amount=-1999)
    add_transaction(empty_store, "t-in", date(2024, 5, 2), amount=5000)

    entries = {e.id: e for e in HistoryService(empty_store).get_history("account-1", "bank-1")}

    assert entries["t-out"].amount == -1999
    assert entries["t-out"].type == "debit"
    assert entries["t-in"].amount == 5000
    assert entries["t-in"].type == "credit"
    assert entries["t-in"].source == "external"


def test_merge_interleaves_by_date(empty_store):
    add_transaction(empty_store, "t-old", date(2024, 5, 1))
    add_transaction(empty_store, "t-new", date(2024, 5, 20))
    add_transfer(empty_store, "tr-mid", "bank-1", "bank-2", datetime(2024, 5, 10, 9, tzinfo=timezone.utc))

    history = HistoryService(empty_store).get_history("account-1", "bank-1")

    assert [entry.id for entry in history] == ["t-new", "tr-mid", "t-old"]


def test_ties_put_external_entries_first(empty_store):
    midnight = datetime(2024, 5, 10, tzinfo=timezone.utc)
    add_transfer(empty_store, "tr-tie", "bank-1", "bank-2", midnight)
    add_transaction(empty_store, "t-tie", date(2024, 5, 10))

    history = HistoryService(empty_store).get_history("account-1", "bank-1")

    assert [entry.id for entry in history] == ["t-tie", "tr-tie"]


def test_history_of_account_without_activity_is_empty(store):
    assert HistoryService(store).get_history("account-wells-001", "bank-3") == []


def test_sixty_external_and_two_transfers_make_seven_pages(empty_store):
    for n in range(60):
        add_transaction(empty_store, f"t-{n}", date(2024, 5, 31) - timedelta(days=n))
    add_transfer(empty_store, "tr-1", "bank-1", "bank-2", NOW)
    add_transfer(empty_store, "tr-2", "bank-2", "bank-1", NOW - timedelta(days=100))

    history = HistoryService(empty_store).get_history("account-1", "bank-1")

    assert len(history) == 62
    assert [entry.id for entry in history[:2]] == ["tr-1", "t-0"]
    assert [entry.id for entry in history[60:70]] == ["t-59", "tr-2"]


def test_get_transactions_by_access_token(store):
    history = HistoryService(store)

    feed = history.get_transactions("access-token-chase")

    assert len(feed) == len(store.transactions.find_by_account("account-chase-001"))
    assert all(entry.source == "external" for entry in feed)
    assert history.get_transactions("unknown-token") == []
