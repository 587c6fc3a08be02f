"""
Input Validation Utilities
Provides validation functions for banking system inputs
"""

import re
from decimal import Decimal
from enum import Enum
from typing import List
from console_bank.utils.exceptions import ValidationException, WeakPasswordException

PASSWORD_MIN_LENGTH = 8
PASSWORD_SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'

class PasswordRule(Enum):
    """Password strength rules, in the order they are checked"""
    MIN_LENGTH = "Password must be at least 8 characters long."
    UPPERCASE = "Password must contain at least one uppercase letter."
    LOWERCASE = "Password must contain at least one lowercase letter."
    DIGIT = "Password must contain at least one digit."
    SPECIAL = "Password must contain at least one special character (e.g., !@#$%^&*)."

    @property
    def message(self) -> str:
        return self.value

class BankingValidator:
    """Validation utilities for banking operations"""

    @staticmethod
    def is_strong_password(password: str) -> List[PasswordRule]:
        """Return the unmet password rules; an empty list means the password is strong"""
        password = password or ""
        unmet = []

        if len(password) < PASSWORD_MIN_LENGTH:
            unmet.append(PasswordRule.MIN_LENGTH)

        if not re.search(r'[A-Z]', password):
            unmet.append(PasswordRule.UPPERCASE)

        if not re.search(r'[a-z]', password):
            unmet.append(PasswordRule.LOWERCASE)

        if not re.search(r'[0-9]', password):
            unmet.append(PasswordRule.DIGIT)

        if not any(c in PASSWORD_SPECIAL_CHARACTERS for c in password):
            unmet.append(PasswordRule.SPECIAL)

        return unmet

    @staticmethod
    def validate_password(password: str) -> bool:
        """Validate password strength"""
        unmet = BankingValidator.is_strong_password(password)
        if unmet:
            raise WeakPasswordException(unmet)

        return True

    @staticmethod
    def validate_username(username: str) -> bool:
        if not username:
            raise ValidationException("Username is required.")

        return True

    @staticmethod
    def validate_amount(amount: Decimal) -> bool:
        """Validate monetary amount"""
        if not isinstance(amount, Decimal):
            raise ValidationException("Amount must be a Decimal")

        if not amount.is_finite():
            raise ValidationException("Amount must be a finite number")

        return True

    @staticmethod
    def validate_custom_account_type(account_type: str) -> bool:
        if account_type is None or not account_type.strip():
            raise ValidationException("Custom account type cannot be empty.", "INVALID_ACCOUNT_TYPE")

        return True
