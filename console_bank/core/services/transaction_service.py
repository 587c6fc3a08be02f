"""
Transaction Service
Business logic for deposits, withdrawals and statements
"""

from decimal import Decimal
from typing import Dict, Any

from console_bank.core.services.account_service import AccountService
from console_bank.core.services.audit_service import AuditService
from console_bank.utils.exceptions import InvalidTransactionException
from console_bank.utils.validators import BankingValidator
from console_bank.utils.helpers import LoggingUtils

class TransactionService:
    """Service class for transaction processing operations"""

    def __init__(self, account_service: AccountService, audit: AuditService):
        self.account_service = account_service
        self.audit = audit

    def deposit(self, account_number: int, amount: Decimal) -> Dict[str, Any]:
        """Process a deposit transaction"""
        try:
            BankingValidator.validate_amount(amount)
            account = self.account_service.find_account(account_number)
            old_balance = account.balance

            transaction = account.deposit(amount)

            self._log(account.account_number, 'deposit', transaction.amount, account.balance)

            return {
                'success': True,
                'message': f"Amount {amount} deposited successfully.",
                'account_number': account.account_number,
                'txn_type': transaction.kind.value,
                'amount': amount,
                'old_balance': old_balance,
                'new_balance': account.balance,
                'timestamp': transaction.timestamp
            }

        except Exception as e:
            LoggingUtils.log_business_event(
                "deposit_failed",
                "transaction",
                account_number,
                details={'error': str(e), 'amount': str(amount)}
            )
            raise

    def withdraw(self, account_number: int, amount: Decimal) -> Dict[str, Any]:
        """Process a withdrawal transaction"""
        try:
            BankingValidator.validate_amount(amount)
            account = self.account_service.find_account(account_number)
            old_balance = account.balance

            transaction = account.withdraw(amount)

            self._log(account.account_number, 'withdrawal', transaction.amount, account.balance)

            return {
                'success': True,
                'message': f"Amount {amount} withdrawn successfully.",
                'account_number': account.account_number,
                'txn_type': transaction.kind.value,
                'amount': amount,
                'old_balance': old_balance,
                'new_balance': account.balance,
                'timestamp': transaction.timestamp
            }

        except Exception as e:
            LoggingUtils.log_business_event(
                "withdrawal_failed",
                "transaction",
                account_number,
                details={'error': str(e), 'amount': str(amount)}
            )
            raise

    def process_transaction(self, account_number: int, transaction_type: str,
                            amount: Decimal) -> Dict[str, Any]:
        """Dispatch a "deposit" or "withdraw" request by name"""
        kind = (transaction_type or "").lower()
        if kind == 'deposit':
            return self.deposit(account_number, amount)
        if kind == 'withdraw':
            return self.withdraw(account_number, amount)

        # account lookup happens first, as with a named operation
        self.account_service.find_account(account_number)
        raise InvalidTransactionException("Invalid transaction type.")

    def generate_statement(self, account_number: int) -> Dict[str, Any]:
        """Transaction history of one account, oldest first"""
        account = self.account_service.find_account(account_number)

        transactions = [
            {
                'date': txn.timestamp,
                'type': txn.kind.value,
                'amount': txn.amount
            }
            for txn in account.transactions
        ]

        return {
            'success': True,
            'message': f"Transaction history for Account {account.account_number}",
            'account_number': account.account_number,
            'holder_name': account.holder_name,
            'account_type': account.account_type,
            'balance': account.balance,
            'transactions': transactions
        }

    def _log(self, account_number: int, txn_type: str, amount: Decimal, new_balance: Decimal):
        username = self.account_service.session.user.username
        LoggingUtils.log_transaction(
            txn_type,
            account_number,
            amount,
            username=username,
            details={'new_balance': str(new_balance)}
        )
        self.audit.log(
            actor=username,
            action=txn_type.upper(),
            details={'account_number': account_number, 'amount': str(amount)}
        )
