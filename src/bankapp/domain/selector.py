"""Resolve which owned account an operation targets."""

from typing import Sequence

from bankapp.domain.entities import Account
from bankapp.domain.errors import (
    AccountNotFoundError,
    NoAccountsFoundError,
    account_not_found,
    no_accounts_found,
)


def select_account(accounts: Sequence[Account], account_number: str | int) -> Account:
    """Find an account by number among a user's accounts.

    The number is compared as text, exactly, against each account in
    creation order.

    Args:
        accounts: Accounts owned by the user
        account_number: Account number as entered, or an int

    Returns:
        Matching account

    Raises:
        NoAccountsFoundError: If accounts is empty
        AccountNotFoundError: If no account has this number
    """
    if not accounts:
        raise NoAccountsFoundError(no_accounts_found())

    wanted = str(account_number)
    for account in accounts:
        if str(account.number) == wanted:
            return account

    raise AccountNotFoundError(account_not_found(account_number))
