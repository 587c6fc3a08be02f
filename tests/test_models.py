"""Tests for the Account, Transaction, User and Session entities."""

import dataclasses
from decimal import Decimal

import pytest

from console_bank.core.models.entities import (
    Account, AccountType, Session, SessionState, Transaction, TransactionKind, User
)
from console_bank.utils.exceptions import (
    InsufficientFundsException, SessionRequiredException, ValidationException
)


def make_account(account_type: str = "Savings", initial: str = "100.00") -> Account:
    return Account.open(1000, "Alice Smith", account_type, Decimal(initial))


class TestTransaction:

    def test_transaction_is_immutable(self):
        txn = Transaction(TransactionKind.DEPOSIT, Decimal("10.00"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            txn.amount = Decimal("20.00")

    def test_withdrawal_signed_amount_is_negative(self):
        assert Transaction(TransactionKind.WITHDRAWAL, Decimal("5")).signed_amount == Decimal("-5")
        assert Transaction(TransactionKind.DEPOSIT, Decimal("5")).signed_amount == Decimal("5")

    def test_timestamp_is_set_on_creation(self):
        assert Transaction(TransactionKind.DEPOSIT, Decimal("1")).timestamp is not None


class TestAccount:

    def test_open_records_initial_deposit(self):
        account = make_account()

        assert account.balance == Decimal("100.00")
        assert len(account.transactions) == 1
        assert account.transactions[0].kind == TransactionKind.INITIAL_DEPOSIT
        assert account.transactions[0].amount == Decimal("100.00")

    def test_negative_initial_deposit_is_accepted(self):
        account = make_account(initial="-25.00")
        assert account.balance == Decimal("-25.00")
        assert account.ledger_balance() == account.balance

    def test_deposit_increases_balance(self):
        account = make_account()
        txn = account.deposit(Decimal("50.00"))

        assert account.balance == Decimal("150.00")
        assert txn.kind == TransactionKind.DEPOSIT
        assert len(account.transactions) == 2

    @pytest.mark.parametrize("amount", ["0", "-1.00"])
    def test_non_positive_deposit_rejected(self, amount):
        account = make_account()
        with pytest.raises(ValidationException):
            account.deposit(Decimal(amount))

        assert account.balance == Decimal("100.00")
        assert len(account.transactions) == 1

    def test_withdraw_full_balance(self):
        account = make_account()
        account.withdraw(Decimal("100.00"))

        assert account.balance == Decimal("0.00")
        assert account.transactions[-1].kind == TransactionKind.WITHDRAWAL
        assert account.transactions[-1].amount == Decimal("100.00")

    @pytest.mark.parametrize("amount", ["0", "-5"])
    def test_non_positive_withdrawal_is_a_validation_error(self, amount):
        account = make_account()
        with pytest.raises(ValidationException) as exc:
            account.withdraw(Decimal(amount))

        assert exc.value.error_code == "INVALID_AMOUNT"
        assert exc.value.message == "Invalid amount or insufficient funds."
        assert account.balance == Decimal("100.00")
        assert len(account.transactions) == 1

    def test_overdraft_rejected(self):
        account = make_account()
        with pytest.raises(InsufficientFundsException):
            account.withdraw(Decimal("100.01"))

        assert account.balance == Decimal("100.00")
        assert len(account.transactions) == 1

    def test_deposit_beyond_decimal_range_rejected(self):
        account = make_account(initial="9E+999999")
        with pytest.raises(ValidationException) as exc:
            account.deposit(Decimal("9E+999999"))

        assert exc.value.error_code == "AMOUNT_OUT_OF_RANGE"
        assert account.balance == Decimal("9E+999999")
        assert len(account.transactions) == 1

    def test_interest_beyond_decimal_range_rejected(self):
        account = make_account(initial="9E+999999")
        with pytest.raises(ValidationException):
            account.add_monthly_interest(Decimal("5"))

        assert account.balance == Decimal("9E+999999")
        assert len(account.transactions) == 1

    def test_interest_applies_to_savings_case_insensitively(self):
        account = make_account(account_type="sAvInGs")
        txn = account.add_monthly_interest(Decimal("0.10"))

        assert txn.kind == TransactionKind.MONTHLY_INTEREST
        assert txn.amount == Decimal("10.00")
        assert account.balance == Decimal("110.00")

    def test_interest_skips_other_types(self):
        account = make_account(account_type="Checking")

        assert account.add_monthly_interest(Decimal("0.10")) is None
        assert account.balance == Decimal("100.00")
        assert len(account.transactions) == 1

    def test_negative_rate_reduces_balance(self):
        account = make_account()
        account.add_monthly_interest(Decimal("-0.5"))

        assert account.balance == Decimal("50.00")
        assert account.ledger_balance() == account.balance

    def test_balance_matches_ledger_after_mixed_operations(self):
        account = make_account()
        account.deposit(Decimal("20.25"))
        account.withdraw(Decimal("40.10"))
        account.add_monthly_interest(Decimal("0.015"))
        with pytest.raises(InsufficientFundsException):
            account.withdraw(Decimal("1000"))
        account.deposit(Decimal("0.01"))

        assert account.ledger_balance() == account.balance


class TestAccountType:

    @pytest.mark.parametrize("choice,expected", [
        ("1", AccountType.SAVINGS),
        ("2", AccountType.CHECKING),
        ("3", AccountType.BUSINESS),
        ("4", AccountType.STUDENT),
        ("5", AccountType.JOINT),
        ("6", AccountType.FIXED_DEPOSIT),
        ("7", AccountType.OTHER),
    ])
    def test_menu_choices(self, choice, expected):
        assert AccountType.from_choice(choice) == expected

    @pytest.mark.parametrize("choice", ["0", "8", "", "savings", None])
    def test_invalid_choice(self, choice):
        with pytest.raises(ValidationException):
            AccountType.from_choice(choice)


class TestUserAndSession:

    def test_find_account_scans_owned_accounts(self):
        user = User(username="alice", password="x")
        account = make_account()
        user.accounts.append(account)

        assert user.find_account(1000) is account
        assert user.find_account(1001) is None

    def test_session_transitions(self):
        session = Session()
        assert session.state == SessionState.ANONYMOUS

        user = User(username="alice", password="x")
        session.authenticate(user)
        assert session.is_authenticated
        assert session.require_user() is user

        session.clear()
        assert session.state == SessionState.ANONYMOUS
        assert session.user is None

    def test_require_user_without_login(self):
        with pytest.raises(SessionRequiredException) as exc:
            Session().require_user("Please log in to view accounts.")
        assert exc.value.message == "Please log in to view accounts."
