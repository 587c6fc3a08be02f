"""
Custom Exceptions for Console Banking System
"""

class BankingSystemException(Exception):
    """Base exception for all banking system errors"""
    def __init__(self, message: str, error_code: str = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)

class ValidationException(BankingSystemException):
    """Raised when input validation fails"""
    def __init__(self, message: str, error_code: str = "VALIDATION_ERROR"):
        super().__init__(message, error_code)

class WeakPasswordException(ValidationException):
    """Raised when a password fails one or more strength rules"""
    def __init__(self, unmet_rules: list):
        self.unmet_rules = list(unmet_rules)
        message = " ".join(rule.message for rule in self.unmet_rules)
        super().__init__(message, "WEAK_PASSWORD")

class InsufficientFundsException(BankingSystemException):
    """Raised when account has insufficient funds for operation"""
    def __init__(self, message: str = "Invalid amount or insufficient funds."):
        super().__init__(message, "INSUFFICIENT_FUNDS")

class InvalidTransactionException(BankingSystemException):
    """Raised when transaction is invalid"""
    def __init__(self, message: str, error_code: str = "INVALID_TRANSACTION"):
        super().__init__(message, error_code)

class AccountNotFoundException(BankingSystemException):
    """Raised when referenced account does not exist for the current user"""
    def __init__(self, message: str = "Account not found."):
        super().__init__(message, "ACCOUNT_NOT_FOUND")

class AuthenticationException(BankingSystemException):
    """Raised when authentication fails"""
    def __init__(self, message: str = "Invalid credentials."):
        super().__init__(message, "INVALID_CREDENTIALS")

class DuplicateUserException(BankingSystemException):
    """Raised when registering a username that already exists"""
    def __init__(self, message: str = "Username already exists."):
        super().__init__(message, "DUPLICATE_USER")

class SessionRequiredException(BankingSystemException):
    """Raised when an account operation is attempted without a logged-in user"""
    def __init__(self, message: str = "Please log in to continue."):
        super().__init__(message, "LOGIN_REQUIRED")

class DatabaseException(BankingSystemException):
    """Raised when in-memory table operations fail"""
    pass
