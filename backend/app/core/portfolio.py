"""Portfolio listing helpers: search/status filtering and per-property balance."""
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from app.schemas.property import PropertyRecord
from app.schemas.transaction import TransactionRecord


@dataclass
class PropertyBalance:
    total_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    balance: Decimal = Decimal("0")
    transaction_count: int = 0


def filter_properties(
    properties: Sequence[PropertyRecord],
    search: str = "",
    status: str | None = None,
) -> list[PropertyRecord]:
    """
    Case-insensitive match of `search` against building name, unit or tenant.
    A status of None or 'all' keeps every status. Input order is preserved.
    """
    needle = search.strip().lower()
    result = []
    for p in properties:
        if status and status != "all" and p.status != status:
            continue
        if needle and not any(needle in value.lower() for value in (p.name, p.unit, p.tenant)):
            continue
        result.append(p)
    return result


def compute_property_balance(transactions: Sequence[TransactionRecord]) -> PropertyBalance:
    """Income minus expenses over the given transactions (caller filters by property)."""
    summary = PropertyBalance(transaction_count=len(transactions))
    for t in transactions:
        amount = Decimal(str(t.amount))
        if t.type == "income":
            summary.total_income += amount
        else:
            summary.total_expenses += amount
    summary.balance = summary.total_income - summary.total_expenses
    return summary
