"""Interactive banking menu."""

from datetime import datetime
from typing import Callable

import click

from bankapp.cli.account_resolution import prompt_account
from bankapp.cli.error_handling import report_domain_error
from bankapp.cli.params import AMOUNT
from bankapp.domain.bank import BankService
from bankapp.domain.entities import AccountType
from bankapp.domain.errors import DomainError, InvalidAccountTypeError
from bankapp.domain.session import UserSession

Action = Callable[[BankService, UserSession], None]


def format_timestamp(timestamp: datetime) -> str:
    """Render a stored UTC timestamp in the local time zone."""
    return f"{timestamp.astimezone():%Y-%m-%d %H:%M:%S}"


def register_user(bank: BankService, session: UserSession) -> None:
    click.echo("\n--- Register ---")
    username = click.prompt("Enter username")
    password = click.prompt("Enter password", hide_input=True)
    bank.register(session, username, password)
    click.echo("User registered successfully. You are now logged in.")


def login_user(bank: BankService, session: UserSession) -> None:
    click.echo("\n--- Login ---")
    username = click.prompt("Enter username")
    password = click.prompt("Enter password", hide_input=True)
    bank.login(session, username, password)
    click.echo("Login successful.")


def logout_user(bank: BankService, session: UserSession) -> None:
    bank.logout(session)
    click.echo("Logged out successfully.")


def prompt_account_type() -> AccountType:
    """Ask for an account type until a valid one is entered."""
    while True:
        raw = click.prompt("Enter account type (savings/checking)")
        try:
            return AccountType.parse(raw)
        except InvalidAccountTypeError as e:
            report_domain_error(e)


def open_account(bank: BankService, session: UserSession) -> None:
    click.echo("\n--- Open Account ---")
    holder_name = click.prompt("Enter account holder's name")
    account_type = prompt_account_type()
    initial_deposit = click.prompt("Enter initial deposit", type=AMOUNT)
    account = bank.open_account(session, holder_name, account_type, initial_deposit)
    click.echo(f"Account created successfully. Account Number: {account.number}")


def deposit(bank: BankService, session: UserSession) -> None:
    click.echo("\n--- Deposit ---")
    account = prompt_account(bank, session)
    amount = click.prompt("Enter deposit amount", type=AMOUNT)
    balance = bank.deposit(session, account.number, amount)
    click.echo(f"Deposit successful. New balance: {balance}")


def withdraw(bank: BankService, session: UserSession) -> None:
    click.echo("\n--- Withdraw ---")
    account = prompt_account(bank, session)
    amount = click.prompt("Enter withdrawal amount", type=AMOUNT)
    bank.withdraw(session, account.number, amount)
    click.echo(f"Withdrawal successful. New balance: {bank.check_balance(session, account.number)}")


def check_balance(bank: BankService, session: UserSession) -> None:
    click.echo("\n--- Check Balance ---")
    account = prompt_account(bank, session)
    click.echo(f"Current balance: {bank.check_balance(session, account.number)}")


def generate_statement(bank: BankService, session: UserSession) -> None:
    click.echo("\n--- Transaction History ---")
    account = prompt_account(bank, session)
    for txn in bank.generate_statement(session, account.number):
        click.echo(f"{format_timestamp(txn.timestamp)}: {txn.kind.label} of {txn.amount}")


def calculate_interest(bank: BankService, session: UserSession) -> None:
    click.echo("\n--- Calculate Interest ---")
    account = prompt_account(bank, session)
    rate = click.prompt("Enter interest rate (e.g., 0.05 for 5%)", type=AMOUNT)
    interest = bank.calculate_interest(session, account.number, rate)
    click.echo(f"Interest of {interest} added to the account {account.number}.")


def list_accounts(bank: BankService, session: UserSession) -> None:
    accounts = bank.list_owned_accounts(session.require_user())
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 60)
    for acc in accounts:
        click.echo(
            f"{acc.number:6d} | {acc.account_type.value:8s} | {acc.holder_name:20s} | Balance: {acc.balance}"
        )


GUEST_MENU: list[tuple[str, str, Action | None]] = [
    ("1", "Register", register_user),
    ("2", "Login", login_user),
    ("3", "Exit", None),
]

USER_MENU: list[tuple[str, str, Action | None]] = [
    ("1", "Open New Account", open_account),
    ("2", "Deposit", deposit),
    ("3", "Withdraw", withdraw),
    ("4", "Check Balance", check_balance),
    ("5", "Generate Statement", generate_statement),
    ("6", "Calculate Interest", calculate_interest),
    ("7", "Logout", logout_user),
    ("8", "List Accounts", list_accounts),
]


def run_menu(bank: BankService, session: UserSession) -> None:
    """Show menus and dispatch choices until the user exits.

    Domain errors end only the current action; the menu is shown again.
    """
    while True:
        if session.is_authenticated:
            click.echo("\n--- Banking Application Menu ---")
            click.echo(f"Welcome, {session.user.username}")
            menu = USER_MENU
        else:
            click.echo("\n--- Banking Application ---")
            menu = GUEST_MENU

        for key, label, _ in menu:
            click.echo(f"{key}. {label}")

        choice = click.prompt("Choose an option").strip()
        actions = {key: action for key, _, action in menu}
        if choice not in actions:
            click.echo("Invalid option. Try again.")
            continue

        action = actions[choice]
        if action is None:
            return

        try:
            action(bank, session)
        except DomainError as e:
            report_domain_error(e)


@click.command("shell")
@click.pass_context
def shell(ctx):
    """Run the interactive banking menu.

    All data lives in memory and is discarded on exit.
    """
    bank: BankService = ctx.obj["bank"]
    session = bank.new_session()

    try:
        run_menu(bank, session)
    except click.Abort:
        # End of input or Ctrl+C
        click.echo()
    click.echo("Goodbye.")


def register_commands(cli):
    """Register shell command with main CLI."""
    cli.add_command(shell)
