"""Append-only transaction log for one account."""

import uuid
from datetime import datetime, UTC
from decimal import Decimal
from typing import Iterator

from bankapp.database.base import Database
from bankapp.domain.entities import Transaction, TransactionKind


class TransactionLog:
    """Chronological record of an account's ledger events.

    Entries can only be appended. There is no way to edit or remove one,
    and the signed sum of all entries always equals the account balance.
    """

    def __init__(self, db: Database, account_number: int):
        """Initialize transaction log.

        Args:
            db: Database instance
            account_number: Account the log belongs to
        """
        self.db = db
        self.account_number = account_number

    def append(self, kind: TransactionKind, amount: Decimal, balance_after: Decimal) -> Transaction:
        """Record a new entry.

        The amount is not validated here; the ledger checks it first.

        Args:
            kind: Transaction kind
            amount: Unsigned transaction amount
            balance_after: Account balance once this entry is applied

        Returns:
            The appended transaction
        """
        transaction = Transaction(
            id=str(uuid.uuid4()),
            account_number=self.account_number,
            kind=TransactionKind(kind),
            amount=amount,
            timestamp=datetime.now(UTC),
        )
        self.db.post_transaction(transaction, balance_after)
        return transaction

    def entries(self) -> list[Transaction]:
        """Return all entries in append order."""
        return self.db.list_transactions(self.account_number)

    def total(self) -> Decimal:
        """Signed sum of all entries."""
        return sum((txn.signed_amount for txn in self.entries()), Decimal("0"))

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.entries())

    def __len__(self) -> int:
        return self.db.count_transactions(self.account_number)
