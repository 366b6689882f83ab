"""Tests for the interactive CLI."""

import re
import time
from datetime import datetime, UTC

import pytest

from bankapp.cli.commands.shell import format_timestamp
from bankapp.cli.main import cli


def run(cli_runner, *lines, args=None):
    return cli_runner.invoke(cli, args or [], input="\n".join(lines) + "\n")


def test_help(cli_runner):
    """Test that help lists the shell command."""
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "shell" in result.output


def test_exit_from_guest_menu(cli_runner):
    """Test leaving immediately."""
    result = run(cli_runner, "3")

    assert result.exit_code == 0
    assert "1. Register" in result.output
    assert "Goodbye." in result.output


def test_full_session(cli_runner):
    """Test register, open, deposit, withdraw, balance, statement, interest and logout."""
    result = run(
        cli_runner,
        "1", "alice", "pw1",
        "1", "Alice", "savings", "100",
        "2", "1001", "50",
        "3", "1001", "200",
        "4", "1001",
        "5", "1001",
        "6", "1001", "0.05",
        "7",
        "3",
    )

    assert result.exit_code == 0
    output = result.output
    assert "User registered successfully" in output
    assert "Welcome, alice" in output
    assert "Account created successfully. Account Number: 1001" in output
    assert "Deposit successful. New balance: 150" in output
    assert "Insufficient funds" in output
    assert "Current balance: 150" in output
    assert "Deposit of 100" in output
    assert "Deposit of 50" in output
    assert "Withdrawal of" not in output
    assert "Interest of 7.50 added to the account 1001." in output
    assert "Logged out successfully." in output


def test_account_type_reprompt(cli_runner):
    """Test that an invalid account type is asked again."""
    result = run(
        cli_runner,
        "1", "alice", "pw1",
        "1", "Alice", "business", "Checking", "25",
        "8",
    )

    assert result.exit_code == 0
    assert "Invalid account type 'business'" in result.output
    assert "Account Number: 1001" in result.output
    assert "checking" in result.output


def test_invalid_amount_reprompt(cli_runner):
    """Test that a malformed amount is asked again."""
    result = run(
        cli_runner,
        "1", "alice", "pw1",
        "1", "Alice", "savings", "lots", "10",
    )

    assert "is not a valid amount" in result.output
    assert "Account Number: 1001" in result.output


def test_negative_deposit_reported(cli_runner):
    """Test that domain errors are shown and the menu continues."""
    result = run(
        cli_runner,
        "1", "alice", "pw1",
        "1", "Alice", "savings", "10",
        "2", "1001", "-5",
        "4", "1001",
    )

    assert "Error: Deposit amount must be greater than zero" in result.output
    assert "Current balance: 10" in result.output


def test_interest_on_checking_reported(cli_runner):
    """Test the message for interest on a checking account."""
    result = run(
        cli_runner,
        "1", "alice", "pw1",
        "1", "Alice", "checking", "10",
        "6", "1001", "0.05",
    )

    assert "Interest can only be calculated for savings accounts" in result.output


def test_select_without_accounts(cli_runner):
    """Test selecting when the user has no accounts."""
    result = run(cli_runner, "1", "alice", "pw1", "2")

    assert "Error: No accounts found" in result.output
    assert "Select an account" not in result.output


def test_select_unknown_account(cli_runner):
    """Test entering a number the user does not own."""
    result = run(
        cli_runner,
        "1", "alice", "pw1",
        "1", "Alice", "savings", "10",
        "4", "9999",
    )

    assert "- 1001 (savings, Alice)" in result.output
    assert "Error: Account 9999 not found" in result.output


def test_account_limit(cli_runner):
    """Test that the third account is refused."""
    result = run(
        cli_runner,
        "1", "alice", "pw1",
        "1", "A", "savings", "1",
        "1", "B", "checking", "1",
        "1", "C", "savings", "1",
    )

    assert "Account Number: 1002" in result.output
    assert "Only 2 accounts per user are allowed" in result.output
    assert "Account Number: 1003" not in result.output


def test_login_flow(cli_runner):
    """Test logging out and back in, including a failed attempt."""
    result = run(
        cli_runner,
        "1", "alice", "pw1",
        "7",
        "2", "alice", "wrong",
        "2", "alice", "pw1",
        "7",
        "3",
    )

    assert result.exit_code == 0
    assert "Error: Invalid credentials" in result.output
    assert "Login successful." in result.output


def test_duplicate_registration(cli_runner):
    """Test registering an existing username."""
    result = run(cli_runner, "1", "bob", "pw2", "7", "1", "bob", "pw2", "3")

    assert "User 'bob' already exists" in result.output


def test_invalid_option(cli_runner):
    """Test an unknown menu choice."""
    result = run(cli_runner, "9", "3")

    assert "Invalid option. Try again." in result.output


def test_end_of_input_exits_cleanly(cli_runner):
    """Test that running out of input ends the session."""
    result = run(cli_runner, "1", "alice", "pw1")

    assert result.exit_code == 0
    assert "Goodbye." in result.output


def test_explicit_shell_command(cli_runner):
    """Test running the menu through the shell subcommand."""
    result = run(cli_runner, "3", args=["shell"])

    assert result.exit_code == 0
    assert "Goodbye." in result.output


def test_state_is_not_kept_between_runs(cli_runner):
    """Test that each run starts with an empty bank."""
    run(cli_runner, "1", "alice", "pw1", "3")

    result = run(cli_runner, "2", "alice", "pw1", "3")

    assert "Error: Invalid credentials" in result.output


def test_invalid_env_config(cli_runner, monkeypatch):
    """Test that a bad environment value stops the program."""
    monkeypatch.setenv("BANKAPP_MAX_ACCOUNTS", "0")

    result = run(cli_runner, "3")

    assert result.exit_code == 1
    assert "max_accounts_per_user" in result.output


@pytest.fixture
def utc_plus_two_zone(monkeypatch):
    """Switch the process to a fixed UTC+2 zone for the test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Etc/GMT-2")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_statement_timestamp_is_local(utc_plus_two_zone):
    """Test that statement timestamps are shown in local time."""
    stored = datetime(2024, 1, 15, 10, 0, 5, tzinfo=UTC)

    assert format_timestamp(stored) == "2024-01-15 12:00:05"


def test_statement_line_format(cli_runner):
    """Test the layout of a statement line."""
    result = run(
        cli_runner,
        "1", "alice", "pw1",
        "1", "Alice", "savings", "100",
        "5", "1001",
        "3",
    )

    assert re.search(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}: Deposit of 100$", result.output, re.M)
