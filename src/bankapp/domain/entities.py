"""Domain model entities for bankapp.

These are pure data classes representing business concepts, independent of
database schema. Services hand out snapshots; all mutation goes through the
ledger services so balances and transaction logs stay consistent.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from bankapp.domain.errors import InvalidAccountTypeError, invalid_account_type


class AccountType(str, Enum):
    """Kind of bank account."""

    SAVINGS = "savings"
    CHECKING = "checking"

    @classmethod
    def parse(cls, value: "str | AccountType") -> "AccountType":
        """Normalize user input into an AccountType.

        Matching ignores case and surrounding whitespace.

        Raises:
            InvalidAccountTypeError: If value is not a known account type
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidAccountTypeError(invalid_account_type(value))


class TransactionKind(str, Enum):
    """Kind of ledger entry."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    INTEREST = "interest"

    @property
    def sign(self) -> int:
        """Direction in which this kind moves the balance."""
        return -1 if self is TransactionKind.WITHDRAWAL else 1

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class User:
    """Registered user domain entity."""

    username: str
    password: str = field(repr=False)
    created_at: datetime


@dataclass(frozen=True)
class Account:
    """Bank account domain entity (a snapshot of the ledger state)."""

    number: int
    owner: str
    holder_name: str
    account_type: AccountType
    balance: Decimal
    opened_at: datetime

    @property
    def is_savings(self) -> bool:
        return self.account_type is AccountType.SAVINGS


@dataclass(frozen=True)
class Transaction:
    """Ledger entry domain entity."""

    id: str
    account_number: int
    kind: TransactionKind
    amount: Decimal
    timestamp: datetime

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign of its effect on the balance."""
        return self.amount * self.kind.sign
