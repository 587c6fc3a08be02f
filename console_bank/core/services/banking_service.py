"""
Banking Service
Single entry point used by the console layer; owns users, session and the
account number sequence, and reports every outcome as a result dict
"""

import logging
from decimal import Decimal
from functools import wraps
from typing import Dict, Any, Optional, Union

from console_bank.config import BankConfig
from console_bank.db.database import InMemoryDatabase
from console_bank.core.models.entities import AccountType, Session, User
from console_bank.core.repositories.user_repository import UserRepository
from console_bank.core.repositories.audit_repository import AuditRepository
from console_bank.core.services.audit_service import AuditService
from console_bank.core.services.authentication_service import AuthenticationService
from console_bank.core.services.account_service import AccountService
from console_bank.core.services.transaction_service import TransactionService
from console_bank.utils.exceptions import BankingSystemException, WeakPasswordException
from console_bank.utils.helpers import AccountNumberSequence

logger = logging.getLogger(__name__)

def reported(method):
    """Turn a raised BankingSystemException into a failed result dict"""
    @wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except BankingSystemException as e:
            logger.debug(f"{method.__name__} failed: {e.message}")
            result = {'success': False, 'message': e.message, 'error_code': e.error_code}
            if isinstance(e, WeakPasswordException):
                result['unmet_rules'] = e.unmet_rules
            return result
    return wrapper

class BankingService:
    """Facade over authentication, account and transaction services"""

    def __init__(self, config: BankConfig = None, db: InMemoryDatabase = None):
        self.config = config or BankConfig()
        self.db = db or InMemoryDatabase()
        self.session = Session()
        self.sequence = AccountNumberSequence(self.config.account_number_seed)

        self.user_repo = UserRepository(self.db, hash_passwords=self.config.hash_passwords)
        self.audit = AuditService(AuditRepository(self.db))
        self.auth = AuthenticationService(
            self.user_repo, self.session, self.audit,
            keep_session_on_failed_login=self.config.keep_session_on_failed_login
        )
        self.accounts = AccountService(self.session, self.sequence, self.audit)
        self.transactions = TransactionService(self.accounts, self.audit)

    @property
    def current_user(self) -> Optional[User]:
        return self.auth.current_user()

    @reported
    def register(self, username: str, password: str) -> Dict[str, Any]:
        return self.auth.register(username, password)

    @reported
    def login(self, username: str, password: str) -> Dict[str, Any]:
        return self.auth.login(username, password)

    @reported
    def logout(self) -> Dict[str, Any]:
        return self.auth.logout()

    @reported
    def open_account(self, holder_name: str, account_type: Union[AccountType, str],
                     initial_deposit: Decimal, custom_type: str = None) -> Dict[str, Any]:
        return self.accounts.open_account(holder_name, account_type, initial_deposit, custom_type)

    @reported
    def deposit(self, account_number: int, amount: Decimal) -> Dict[str, Any]:
        return self.transactions.deposit(account_number, amount)

    @reported
    def withdraw(self, account_number: int, amount: Decimal) -> Dict[str, Any]:
        return self.transactions.withdraw(account_number, amount)

    @reported
    def process_transaction(self, account_number: int, transaction_type: str,
                            amount: Decimal) -> Dict[str, Any]:
        return self.transactions.process_transaction(account_number, transaction_type, amount)

    @reported
    def generate_statement(self, account_number: int) -> Dict[str, Any]:
        return self.transactions.generate_statement(account_number)

    @reported
    def check_balance(self, account_number: int) -> Dict[str, Any]:
        return self.accounts.check_balance(account_number)

    @reported
    def calculate_interest(self, rate: Decimal) -> Dict[str, Any]:
        return self.accounts.calculate_interest(rate)

    @reported
    def view_all_accounts(self) -> Dict[str, Any]:
        return self.accounts.view_all_accounts()
