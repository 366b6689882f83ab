"""Tests for domain entities."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from bankapp.domain.entities import Account, AccountType, Transaction, TransactionKind, User
from bankapp.domain.errors import InvalidAccountTypeError


class TestAccountType:
    """Tests for AccountType parsing."""

    @pytest.mark.parametrize("raw", ["savings", "Savings", "SAVINGS", "  savings "])
    def test_parse_savings(self, raw):
        """Test that savings input is normalized regardless of case."""
        assert AccountType.parse(raw) is AccountType.SAVINGS

    def test_parse_checking(self):
        """Test parsing checking."""
        assert AccountType.parse("Checking") is AccountType.CHECKING

    def test_parse_member(self):
        """Test that an AccountType passes through unchanged."""
        assert AccountType.parse(AccountType.CHECKING) is AccountType.CHECKING

    @pytest.mark.parametrize("raw", ["", "current", "saving", "checkings"])
    def test_parse_invalid(self, raw):
        """Test that unknown account types are rejected."""
        with pytest.raises(InvalidAccountTypeError, match="savings"):
            AccountType.parse(raw)


class TestTransactionKind:
    """Tests for TransactionKind."""

    def test_signs(self):
        """Test that only withdrawals reduce the balance."""
        assert TransactionKind.DEPOSIT.sign == 1
        assert TransactionKind.INTEREST.sign == 1
        assert TransactionKind.WITHDRAWAL.sign == -1

    def test_label(self):
        """Test display labels."""
        assert TransactionKind.WITHDRAWAL.label == "Withdrawal"


class TestUser:
    """Tests for User entity."""

    def test_password_hidden_from_repr(self):
        """Test that the password is not shown in repr."""
        user = User(username="alice", password="secret", created_at=datetime.now(UTC))
        assert "secret" not in repr(user)
        assert "alice" in repr(user)

    def test_user_immutability(self):
        """Test that User entities are immutable."""
        user = User(username="alice", password="pw", created_at=datetime.now(UTC))
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            user.password = "other"


class TestAccount:
    """Tests for Account entity."""

    def test_is_savings(self):
        """Test the savings flag."""
        account = Account(
            number=1001,
            owner="alice",
            holder_name="Alice",
            account_type=AccountType.SAVINGS,
            balance=Decimal("10"),
            opened_at=datetime.now(UTC),
        )
        assert account.is_savings

    def test_account_immutability(self):
        """Test that Account snapshots are immutable."""
        account = Account(
            number=1001,
            owner="alice",
            holder_name="Alice",
            account_type=AccountType.CHECKING,
            balance=Decimal("10"),
            opened_at=datetime.now(UTC),
        )
        assert not account.is_savings
        with pytest.raises(Exception):
            account.balance = Decimal("1000")


class TestTransaction:
    """Tests for Transaction entity."""

    def test_signed_amount(self):
        """Test that withdrawals have a negative signed amount."""
        now = datetime.now(UTC)
        withdrawal = Transaction("id-1", 1001, TransactionKind.WITHDRAWAL, Decimal("5"), now)
        interest = Transaction("id-2", 1001, TransactionKind.INTEREST, Decimal("0.5"), now)

        assert withdrawal.signed_amount == Decimal("-5")
        assert interest.signed_amount == Decimal("0.5")
