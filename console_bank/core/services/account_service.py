"""
Account Service
Business logic for account management operations
"""

from decimal import Decimal
from typing import List, Dict, Any, Optional, Union

from console_bank.core.models.entities import Account, AccountType, Session
from console_bank.core.services.audit_service import AuditService
from console_bank.utils.exceptions import AccountNotFoundException
from console_bank.utils.validators import BankingValidator
from console_bank.utils.helpers import AccountNumberSequence, LoggingUtils

class AccountService:
    """Service class for account management operations"""

    def __init__(self, session: Session, sequence: AccountNumberSequence, audit: AuditService):
        self.session = session
        self.sequence = sequence
        self.audit = audit

    def open_account(self, holder_name: str, account_type: Union[AccountType, str],
                     initial_deposit: Decimal, custom_type: str = None) -> Dict[str, Any]:
        """Open a new account for the logged-in user.

        ``account_type`` is an AccountType or a menu choice "1".."7". For
        AccountType.OTHER the free-text ``custom_type`` becomes the type name.
        Negative initial deposits are accepted as given.
        """
        user = self.session.require_user("Please log in to open an account.")
        try:
            type_name = self._resolve_account_type(account_type, custom_type)
            BankingValidator.validate_amount(initial_deposit)

            account = Account.open(
                account_number=self.sequence.next(),
                holder_name=holder_name,
                account_type=type_name,
                initial_deposit=initial_deposit
            )
            user.accounts.append(account)

            LoggingUtils.log_business_event(
                "account_created",
                "account",
                account.account_number,
                username=user.username,
                details={'account_type': type_name, 'initial_deposit': str(initial_deposit)}
            )
            self.audit.log(
                actor=user.username,
                action='ACCOUNT_CREATE',
                details={'account_number': account.account_number, 'type': type_name}
            )

            return {
                'success': True,
                'message': f"Account created successfully. Account Number: {account.account_number}",
                'account_number': account.account_number,
                'holder_name': account.holder_name,
                'account_type': type_name,
                'balance': account.balance
            }

        except Exception as e:
            LoggingUtils.log_business_event(
                "account_creation_failed",
                "account",
                0,
                username=user.username,
                details={'error': str(e)}
            )
            raise

    def find_account(self, account_number: int) -> Account:
        """Locate an account among the logged-in user's accounts only"""
        user = self.session.require_user()
        account = user.find_account(account_number)
        if account is None:
            raise AccountNotFoundException()
        return account

    def check_balance(self, account_number: int) -> Dict[str, Any]:
        account = self.find_account(account_number)
        return {
            'success': True,
            'message': f"Current Balance for Account {account.account_number}: {account.balance}",
            'account_number': account.account_number,
            'balance': account.balance
        }

    def get_user_accounts(self) -> List[Dict[str, Any]]:
        user = self.session.require_user("Please log in to view accounts.")
        return [self._account_summary(account) for account in user.accounts]

    def view_all_accounts(self) -> Dict[str, Any]:
        accounts = self.get_user_accounts()
        if not accounts:
            return {'success': True, 'message': 'No accounts found for this user.', 'accounts': []}

        return {'success': True, 'message': 'All Accounts:', 'accounts': accounts}

    def calculate_interest(self, rate: Decimal) -> Dict[str, Any]:
        """Apply ``balance * rate`` to every Savings account of the logged-in user"""
        user = self.session.require_user("Please log in to calculate interest.")
        BankingValidator.validate_amount(rate)

        credited = []
        for account in user.accounts:
            transaction = account.add_monthly_interest(rate)
            if transaction is None:
                continue

            credited.append({
                'account_number': account.account_number,
                'interest': transaction.amount,
                'new_balance': account.balance
            })
            LoggingUtils.log_transaction(
                "monthly_interest",
                account.account_number,
                transaction.amount,
                username=user.username,
                details={'rate': str(rate), 'new_balance': str(account.balance)}
            )

        self.audit.log(actor=user.username, action='INTEREST_APPLY',
                       details={'rate': str(rate), 'accounts': len(credited)})

        return {
            'success': True,
            'message': 'Interest calculated for all savings accounts.',
            'rate': rate,
            'credited': credited
        }

    def _resolve_account_type(self, account_type: Union[AccountType, str],
                              custom_type: Optional[str]) -> str:
        if not isinstance(account_type, AccountType):
            account_type = AccountType.from_choice(account_type)

        if account_type == AccountType.OTHER:
            BankingValidator.validate_custom_account_type(custom_type)
            return custom_type

        return account_type.value

    def _account_summary(self, account: Account) -> Dict[str, Any]:
        return {
            'account_number': account.account_number,
            'holder_name': account.holder_name,
            'account_type': account.account_type,
            'balance': account.balance
        }
