"""Account ledger service: balance rules for a single account."""

from decimal import Decimal, InvalidOperation
from typing import Any

from bankapp.database.base import Database
from bankapp.domain.account_directory import AccountDirectory
from bankapp.domain.entities import Account, AccountType, Transaction, TransactionKind, User
from bankapp.domain.errors import (
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidOperationError,
    account_not_found,
    insufficient_funds,
    interest_not_supported,
    invalid_amount,
    negative_amount,
    not_a_number,
)
from bankapp.domain.transaction_log import TransactionLog
from bankapp.logging import event_fields, get_logger

logger = get_logger(__name__)

ZERO = Decimal("0")


def to_decimal(value: Any, what: str = "Amount") -> Decimal:
    """Convert a numeric value to a finite Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1").

    Raises:
        InvalidAmountError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidAmountError(not_a_number(value, what))
    if isinstance(value, float):
        value = str(value)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmountError(not_a_number(value, what))
    if not amount.is_finite():
        raise InvalidAmountError(not_a_number(value, what))
    return amount


def require_positive(value: Any, what: str = "Amount") -> Decimal:
    """Return value as a Decimal, rejecting zero and negative amounts."""
    amount = to_decimal(value, what)
    if amount <= ZERO:
        raise InvalidAmountError(invalid_amount(amount, what))
    return amount


def require_non_negative(value: Any, what: str = "Amount") -> Decimal:
    """Return value as a Decimal, rejecting negative amounts."""
    amount = to_decimal(value, what)
    if amount < ZERO:
        raise InvalidAmountError(negative_amount(amount, what))
    return amount


class AccountLedger:
    """Balance and transaction log of one account.

    Every mutation appends exactly one entry to the log and updates the
    balance in the same write, so ``balance == log.total()`` always holds.
    """

    def __init__(self, db: Database, account_number: int):
        """Initialize account ledger.

        Args:
            db: Database instance
            account_number: Number of an existing account

        Raises:
            AccountNotFoundError: If the account does not exist
        """
        if db.get_account(account_number) is None:
            raise AccountNotFoundError(account_not_found(account_number))
        self.db = db
        self.account_number = account_number
        self.log = TransactionLog(db, account_number)

    @classmethod
    def open(
        cls,
        db: Database,
        directory: AccountDirectory,
        owner: User,
        holder_name: str,
        account_type: str | AccountType,
        initial_deposit: Any,
    ) -> "AccountLedger":
        """Open a new account for a user.

        The account type and amount are checked first. A number is then
        drawn before the ownership limit is checked, so an attempt refused
        for the limit still uses up its number. The initial deposit is
        recorded once, as the first Deposit entry of the new account's log.

        Args:
            db: Database instance
            directory: Account directory issuing numbers and enforcing limits
            owner: User who will own the account
            holder_name: Name of the account holder
            account_type: "savings" or "checking", case-insensitive
            initial_deposit: Opening balance, zero or more

        Returns:
            Ledger of the new account

        Raises:
            InvalidAccountTypeError: If account_type is unknown
            InvalidAmountError: If initial_deposit is negative or not a number
            AccountLimitExceededError: If the owner already has the maximum accounts
        """
        parsed_type = AccountType.parse(account_type)
        amount = require_non_negative(initial_deposit, "Initial deposit")
        number = directory.next_account_number()
        directory.enforce_limit(owner)

        db.create_account(
            number=number,
            owner=owner.username,
            holder_name=holder_name,
            account_type=parsed_type,
        )
        ledger = cls(db, number)
        ledger.log.append(TransactionKind.DEPOSIT, amount, balance_after=amount)
        logger.info(
            "Opened %s account %d for user %s with initial deposit %s",
            parsed_type.value,
            number,
            owner.username,
            amount,
            extra=event_fields(
                username=owner.username,
                account_number=number,
                kind=TransactionKind.DEPOSIT,
                amount=amount,
                balance=amount,
            ),
        )
        return ledger

    @property
    def account(self) -> Account:
        """Current snapshot of the account."""
        return self.db.get_account(self.account_number)

    @property
    def balance(self) -> Decimal:
        return self.account.balance

    def deposit(self, amount: Any) -> Transaction:
        """Add money to the account.

        Raises:
            InvalidAmountError: If amount is not greater than zero
        """
        amount = require_positive(amount, "Deposit amount")
        new_balance = self.balance + amount
        transaction = self.log.append(TransactionKind.DEPOSIT, amount, balance_after=new_balance)
        logger.info(
            "Deposited %s into account %d",
            amount,
            self.account_number,
            extra=event_fields(
                account_number=self.account_number,
                kind=TransactionKind.DEPOSIT,
                amount=amount,
                balance=new_balance,
            ),
        )
        return transaction

    def withdraw(self, amount: Any) -> bool:
        """Take money out of the account.

        Returns:
            True once the withdrawal is recorded

        Raises:
            InvalidAmountError: If amount is not greater than zero
            InsufficientFundsError: If amount exceeds the balance; nothing is recorded
        """
        amount = require_positive(amount, "Withdrawal amount")
        balance = self.balance
        if amount > balance:
            logger.warning(
                "Rejected withdrawal of %s from account %d (balance %s)",
                amount,
                self.account_number,
                balance,
                extra=event_fields(
                    account_number=self.account_number,
                    kind=TransactionKind.WITHDRAWAL,
                    amount=amount,
                    balance=balance,
                ),
            )
            raise InsufficientFundsError(insufficient_funds(balance, amount))

        new_balance = balance - amount
        self.log.append(TransactionKind.WITHDRAWAL, amount, balance_after=new_balance)
        logger.info(
            "Withdrew %s from account %d",
            amount,
            self.account_number,
            extra=event_fields(
                account_number=self.account_number,
                kind=TransactionKind.WITHDRAWAL,
                amount=amount,
                balance=new_balance,
            ),
        )
        return True

    def calculate_interest(self, rate: Any) -> Decimal:
        """Accrue interest on a savings account.

        The interest is ``balance * rate`` and is recorded even when zero.

        Returns:
            The interest amount added to the balance

        Raises:
            InvalidAmountError: If rate is negative
            InvalidOperationError: If the account is not a savings account
        """
        rate = require_non_negative(rate, "Interest rate")
        account = self.account
        if not account.is_savings:
            raise InvalidOperationError(interest_not_supported(self.account_number))

        interest = account.balance * rate
        new_balance = account.balance + interest
        self.log.append(TransactionKind.INTEREST, interest, balance_after=new_balance)
        logger.info(
            "Added interest of %s to account %d at rate %s",
            interest,
            self.account_number,
            rate,
            extra=event_fields(
                account_number=self.account_number,
                kind=TransactionKind.INTEREST,
                amount=interest,
                balance=new_balance,
            ),
        )
        return interest

    def statement(self) -> list[Transaction]:
        """Return the account's transactions in chronological order."""
        return self.log.entries()

    def reconciled_balance(self) -> Decimal:
        """Balance recomputed from the transaction log."""
        return self.log.total()
