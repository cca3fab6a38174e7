"""Tests for TransactionRepository."""

import sqlite3
from datetime import date

import pytest

from src.models.transaction import Transaction
from src.repositories.transaction_repo import TransactionRepository


@pytest.fixture
def in_memory_db():
    """Create an in-memory SQLite database for testing."""
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def transaction_repo(in_memory_db):
    """Create a TransactionRepository instance with a fresh database."""
    repo = TransactionRepository(in_memory_db)
    repo.create_table()
    return repo


def make_transaction(txn_id, account_id="account-1", amount=-1250, day=date(2024, 5, 1), pending=False):
    return Transaction(
        id=txn_id,
        account_id=account_id,
        name="Whole Foods",
        amount=amount,
        date=day,
        category="Food and Drink",
        payment_channel="in store",
        pending=pending,
    )


def test_create_and_find(transaction_repo):
    created = transaction_repo.create(make_transaction("t1", pending=True))

    assert created == make_transaction("t1", pending=True)
    assert transaction_repo.find_by_id("t1").pending is True
    assert transaction_repo.find_by_id("t1").date == date(2024, 5, 1)


def test_create_generates_id(transaction_repo):
    created = transaction_repo.create(make_transaction(None))

    assert created.id.startswith("transaction-")


def test_find_missing(transaction_repo):
    assert transaction_repo.find_by_id("nope") is None


def test_find_by_account_filters_and_keeps_stored_order(transaction_repo):
    transaction_repo.create(make_transaction("t1", day=date(2024, 5, 3)))
    transaction_repo.create(make_transaction("t2", account_id="account-2"))
    transaction_repo.create(make_transaction("t3", day=date(2024, 5, 9)))

    found = transaction_repo.find_by_account("account-1")

    assert [txn.id for txn in found] == ["t1", "t3"]


def test_find_by_account_unknown(transaction_repo):
    assert transaction_repo.find_by_account("nope") == []
