"""Plain-text tables for the chat front end."""

from tabulate import tabulate

from src.models.bank import Bank
from src.models.views import AccountsSummary, HistoryEntry
from src.utils.money import format_amount
from src.utils.pagination import PAGE_SIZE, paginate, total_pages


def accounts_table(summary: AccountsSummary) -> str:
    """Render an account summary with a totals footer."""
    rows = [
        [
            view.bank_id,
            view.name,
            f"****{view.mask}",
            view.subtype,
            format_amount(view.available_balance),
            format_amount(view.current_balance),
        ]
        for view in summary.accounts
    ]
    table = tabulate(
        rows,
        headers=["Bank", "Account", "Number", "Type", "Available", "Current"],
        stralign="right",
        numalign="right",
    )
    return (
        f"{table}\n\n"
        f"Banks: {summary.total_banks}  "
        f"Total current balance: {format_amount(summary.total_current_balance)}"
    )


def banks_table(banks: list[Bank]) -> str:
    rows = [[bank.id, bank.institution_id, bank.shareable_id] for bank in banks]
    return tabulate(rows, headers=["Bank", "Institution", "Shareable ID"])


def history_page(entries: list[HistoryEntry], page: int, page_size: int = PAGE_SIZE) -> str:
    """Render one 1-indexed page of a history feed with a 'Page x/y' footer."""
    rows = [
        [
            entry.date.strftime("%Y-%m-%d"),
            entry.name,
            format_amount(entry.amount),
            entry.category,
            entry.channel,
            "pending" if entry.pending else "",
        ]
        for entry in paginate(entries, page, page_size)
    ]
    table = tabulate(
        rows,
        headers=["Date", "Name", "Amount", "Category", "Channel", "Status"],
        stralign="right",
    )
    return f"{table}\n\nPage {page}/{total_pages(len(entries), page_size)}"
