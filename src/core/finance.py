"""
LifeOS Dashboard — Finance ledger.

A newest-first list of income/expense transactions plus a monthly summary.
Totals are folded from the full ledger on every call; personal-scale data
doesn't need an index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import TypeAdapter

from src.core.base import ListModule
from src.core.datekeys import month_key
from src.core.ids import new_id
from src.core.numbers import parse_number
from src.data.models import Transaction, TransactionForm, TransactionType

logger = logging.getLogger(__name__)


@dataclass
class MonthlyTotals:
    """Income, expense and net for one month-key."""

    income: float = 0.0
    expense: float = 0.0
    net: float = 0.0


class Finance(ListModule):
    key = "life:finance"
    field = "tx"
    adapter = TypeAdapter(list[Transaction])

    def add(self, form: TransactionForm) -> Transaction | None:
        """Record a transaction dated today.

        A zero, blank or non-numeric amount records nothing; resetting the
        form is left to the caller.
        """
        amount = parse_number(form.amount)
        if not amount:
            logger.debug("Rejected transaction with amount %r", form.amount)
            return None
        tx = Transaction(
            id=new_id(self._ids()),
            date=self.today(),
            type=form.type,
            amount=amount,
            category=form.category,
            note=form.note,
        )
        tx = self._prepend(tx)
        logger.info("Transaction added: #%s %s %.2f", tx.id, tx.type.value, amount)
        return tx

    def monthly_totals(self, month: str | None = None) -> MonthlyTotals:
        """Sum the ledger for one month-key (current month if omitted)."""
        month = month or month_key(self.now())
        return summarize(self._items, month)


def summarize(transactions: list[Transaction], month: str = "") -> MonthlyTotals:
    """Fold transactions whose date starts with ``month``; "" matches everything."""
    income = 0.0
    expense = 0.0
    for tx in transactions:
        if not tx.date.startswith(month):
            continue
        if tx.type == TransactionType.INCOME:
            income += tx.amount
        else:
            expense += tx.amount
    return MonthlyTotals(income=income, expense=expense, net=income - expense)
