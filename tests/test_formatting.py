"""Tests for the chat table renderers."""

from datetime import datetime, timezone

from src.data import fixtures
from src.models.views import AccountsSummary, AccountView, HistoryEntry
from src.utils.formatting import accounts_table, banks_table, history_page


def make_entry(n, amount=-1999, pending=False):
    return HistoryEntry(
        id=f"t-{n}",
        name=f"Merchant {n}",
        amount=amount,
        date=datetime(2024, 5, 1, tzinfo=timezone.utc),
        category="Shopping",
        channel="online",
        pending=pending,
        type="debit" if amount < 0 else "credit",
        source="external",
    )


def test_accounts_table_has_rows_and_totals():
    view = AccountView.build(fixtures.ACCOUNTS[2], fixtures.BANKS[2], fixtures.INSTITUTIONS[2])
    summary = AccountsSummary(accounts=[view], total_banks=1, total_current_balance=-142000)

    text = accounts_table(summary)

    assert "Wells Fargo Credit" in text
    assert "****1234" in text
    assert "$4,580.00" in text
    assert text.endswith("Banks: 1  Total current balance: -$1,420.00")


def test_empty_accounts_table():
    assert accounts_table(AccountsSummary()).endswith("Banks: 0  Total current balance: $0.00")


def test_banks_table_lists_shareable_ids():
    text = banks_table(list(fixtures.BANKS))

    for bank in fixtures.BANKS:
        assert bank.id in text
        assert bank.shareable_id in text


def test_history_page_footer_and_rows():
    entries = [make_entry(n) for n in range(12)]

    first = history_page(entries, 1)
    second = history_page(entries, 2)

    assert first.endswith("Page 1/2")
    assert "Merchant 9" in first
    assert "Merchant 10" not in first
    assert "Merchant 11" in second
    assert "-$19.99" in second


def test_history_page_marks_pending():
    text = history_page([make_entry(1, amount=5000, pending=True)], 1)

    assert "pending" in text
    assert "$50.00" in text
    assert text.endswith("Page 1/1")
