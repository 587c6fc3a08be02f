"""
Data Models for Console Banking System
Dataclasses representing the in-memory banking entities
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, DecimalException
from typing import Optional, List
from enum import Enum

from console_bank.utils.exceptions import (
    ValidationException, InsufficientFundsException, SessionRequiredException
)

class AccountType(Enum):
    SAVINGS = 'Savings'
    CHECKING = 'Checking'
    BUSINESS = 'Business'
    STUDENT = 'Student'
    JOINT = 'Joint'
    FIXED_DEPOSIT = 'Fixed Deposit'
    OTHER = 'Other'

    @classmethod
    def from_choice(cls, choice: str) -> 'AccountType':
        """Map a menu choice "1".."7" to its account type"""
        members = list(cls)
        choice = (choice or "").strip()
        if choice.isdigit() and 1 <= int(choice) <= len(members):
            return members[int(choice) - 1]
        raise ValidationException("Invalid account type selected.", "INVALID_ACCOUNT_TYPE")

class TransactionKind(Enum):
    INITIAL_DEPOSIT = 'Initial Deposit'
    DEPOSIT = 'Deposit'
    WITHDRAWAL = 'Withdrawal'
    MONTHLY_INTEREST = 'Monthly Interest'

class SessionState(Enum):
    ANONYMOUS = 'anonymous'
    AUTHENTICATED = 'authenticated'

@dataclass(frozen=True)
class Transaction:
    """Immutable log entry for one balance-affecting event"""
    kind: TransactionKind
    amount: Decimal
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def signed_amount(self) -> Decimal:
        # withdrawals are stored as the magnitude moved
        if self.kind == TransactionKind.WITHDRAWAL:
            return -self.amount
        return self.amount

@dataclass
class Account:
    """Account entity"""
    account_number: int
    holder_name: str
    account_type: str
    balance: Decimal = Decimal('0.00')
    transactions: List[Transaction] = field(default_factory=list)
    opened_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def open(cls, account_number: int, holder_name: str, account_type: str,
             initial_deposit: Decimal) -> 'Account':
        """Create an account whose first transaction is the initial deposit"""
        account = cls(account_number=account_number, holder_name=holder_name,
                      account_type=account_type, balance=initial_deposit)
        account.transactions.append(Transaction(TransactionKind.INITIAL_DEPOSIT, initial_deposit))
        return account

    @property
    def is_savings(self) -> bool:
        return self.account_type.casefold() == AccountType.SAVINGS.value.casefold()

    def deposit(self, amount: Decimal) -> Transaction:
        if amount <= 0:
            raise ValidationException("Amount must be positive.", "INVALID_AMOUNT")

        self.balance = self._add(self.balance, amount)
        return self._record(TransactionKind.DEPOSIT, amount)

    def withdraw(self, amount: Decimal) -> Transaction:
        """Withdraw money; overdraft is never permitted"""
        if amount <= 0:
            raise ValidationException("Invalid amount or insufficient funds.", "INVALID_AMOUNT")
        if amount > self.balance:
            raise InsufficientFundsException()

        self.balance -= amount
        return self._record(TransactionKind.WITHDRAWAL, amount)

    def add_monthly_interest(self, rate: Decimal) -> Optional[Transaction]:
        """Add balance * rate to a Savings account; other types are skipped"""
        if not self.is_savings:
            return None

        try:
            interest = self.balance * rate
        except DecimalException:
            raise ValidationException("Interest is outside the supported range.", "AMOUNT_OUT_OF_RANGE")
        self.balance = self._add(self.balance, interest)
        return self._record(TransactionKind.MONTHLY_INTEREST, interest)

    def ledger_balance(self) -> Decimal:
        """Balance derived from the transaction log"""
        return sum((t.signed_amount for t in self.transactions), Decimal('0'))

    def _add(self, balance: Decimal, amount: Decimal) -> Decimal:
        try:
            return balance + amount
        except DecimalException:
            raise ValidationException("Amount is outside the supported range.", "AMOUNT_OUT_OF_RANGE")

    def _record(self, kind: TransactionKind, amount: Decimal) -> Transaction:
        transaction = Transaction(kind, amount)
        self.transactions.append(transaction)
        return transaction

@dataclass
class User:
    """User entity holding credentials and owned accounts"""
    username: str = ""
    password: str = ""
    accounts: List[Account] = field(default_factory=list)
    registered_at: datetime = field(default_factory=datetime.now)

    def find_account(self, account_number: int) -> Optional[Account]:
        for account in self.accounts:
            if account.account_number == account_number:
                return account
        return None

@dataclass
class Session:
    """The single logged-in user of a banking service, if any"""
    state: SessionState = SessionState.ANONYMOUS
    user: Optional[User] = None
    login_time: Optional[datetime] = None

    @property
    def is_authenticated(self) -> bool:
        return self.state == SessionState.AUTHENTICATED

    def authenticate(self, user: User):
        self.state = SessionState.AUTHENTICATED
        self.user = user
        self.login_time = datetime.now()

    def clear(self):
        self.state = SessionState.ANONYMOUS
        self.user = None
        self.login_time = None

    def require_user(self, message: str = None) -> User:
        if not self.is_authenticated:
            if message:
                raise SessionRequiredException(message)
            raise SessionRequiredException()
        return self.user
