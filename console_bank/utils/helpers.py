"""
Helper Utilities
Common utility functions for banking operations
"""

import threading
import bcrypt
from decimal import Decimal, ROUND_HALF_UP, localcontext
from datetime import datetime
from typing import Dict, Any
import logging

logger = logging.getLogger(__name__)

class NumberUtils:
    """Utility functions for number operations"""

    @staticmethod
    def round_currency(amount: Decimal) -> Decimal:
        """Round amount to 2 decimal places for currency"""
        with localcontext() as ctx:
            # room for every integer digit plus the two decimal places
            ctx.prec = max(28, amount.adjusted() + 3)
            return amount.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)

class AccountNumberSequence:
    """Sequential account number allocator owned by a banking service"""

    def __init__(self, seed: int = 1000):
        self._next_value = seed
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next_value
            self._next_value += 1
            return value

class StringUtils:
    """Utility functions for string operations"""

    @staticmethod
    def format_currency(amount: Decimal, currency_symbol: str = "$") -> str:
        """Format amount as currency string"""
        amount_str = f"{NumberUtils.round_currency(amount):,.2f}"
        if amount_str.startswith("-"):
            return f"-{currency_symbol}{amount_str[1:]}"
        return f"{currency_symbol}{amount_str}"

class SecurityUtils:
    """Security utility functions"""

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash password using bcrypt"""
        salt = bcrypt.gensalt()
        return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')

    @staticmethod
    def verify_password(password: str, hashed: str) -> bool:
        """Verify password against hash"""
        try:
            return bcrypt.checkpw(password.encode('utf-8'), hashed.encode('utf-8'))
        except ValueError:
            # stored value is not a bcrypt hash
            return False

class LoggingUtils:
    """Logging utility functions"""

    @staticmethod
    def log_transaction(transaction_type: str, account_number: int, amount: Decimal,
                        username: str = None, details: Dict[str, Any] = None):
        """Log transaction for audit trail"""
        log_data = {
            'transaction_type': transaction_type,
            'account_number': account_number,
            'amount': str(amount),
            'username': username,
            'timestamp': datetime.now().isoformat(),
            'details': details or {}
        }

        logger.info(f"Transaction: {transaction_type}", extra=log_data)

    @staticmethod
    def log_security_event(event_type: str, username: str = None,
                           details: Dict[str, Any] = None):
        """Log security events"""
        log_data = {
            'event_type': event_type,
            'username': username,
            'timestamp': datetime.now().isoformat(),
            'details': details or {}
        }

        logger.warning(f"Security Event: {event_type}", extra=log_data)

    @staticmethod
    def log_business_event(event_type: str, entity_type: str, entity_id: int,
                           username: str = None, details: Dict[str, Any] = None):
        """Log business events"""
        log_data = {
            'event_type': event_type,
            'entity_type': entity_type,
            'entity_id': entity_id,
            'username': username,
            'timestamp': datetime.now().isoformat(),
            'details': details or {}
        }

        logger.info(f"Business Event: {event_type}", extra=log_data)
