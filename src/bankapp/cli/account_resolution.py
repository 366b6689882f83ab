"""CLI helpers for choosing one of the user's accounts."""

from __future__ import annotations

import click

from bankapp.domain.bank import BankService
from bankapp.domain.entities import Account
from bankapp.domain.errors import NoAccountsFoundError, no_accounts_found
from bankapp.domain.session import UserSession


def prompt_account(bank: BankService, session: UserSession) -> Account:
    """List the session user's accounts and ask which one to use.

    Raises:
        NoAccountsFoundError: If the user has no accounts (nothing is prompted)
        AccountNotFoundError: If the entered number is not one of theirs
    """
    accounts = bank.list_owned_accounts(session.require_user())
    if not accounts:
        raise NoAccountsFoundError(no_accounts_found())

    click.echo("Select an account by number:")
    for acc in accounts:
        click.echo(f"- {acc.number} ({acc.account_type.value}, {acc.holder_name})")

    choice = click.prompt("Account number")
    return bank.select(session, choice.strip())
