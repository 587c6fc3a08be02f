"""
Authentication Service
Business logic for registration, login and the banking session
"""

from typing import Dict, Any

from console_bank.core.repositories.user_repository import UserRepository
from console_bank.core.models.entities import User, Session
from console_bank.core.services.audit_service import AuditService
from console_bank.utils.exceptions import (
    AuthenticationException, DuplicateUserException
)
from console_bank.utils.validators import BankingValidator
from console_bank.utils.helpers import LoggingUtils

class AuthenticationService:
    """Service class for authentication and session operations"""

    def __init__(self, user_repo: UserRepository, session: Session, audit: AuditService,
                 keep_session_on_failed_login: bool = False):
        self.user_repo = user_repo
        self.session = session
        self.audit = audit
        self.keep_session_on_failed_login = keep_session_on_failed_login

    def register(self, username: str, password: str) -> Dict[str, Any]:
        """Register a new user after uniqueness and password strength checks"""
        try:
            BankingValidator.validate_username(username)

            if self.user_repo.username_exists(username):
                raise DuplicateUserException()

            BankingValidator.validate_password(password)

            user = User(username=username, password=password)
            user_id = self.user_repo.create_user(user)

            LoggingUtils.log_security_event("user_registered", username=username,
                                            details={'user_id': user_id})
            self.audit.log(actor=username, action='USER_REGISTER', details={'user_id': user_id})

            return {
                'success': True,
                'message': 'Registration successful.',
                'user_id': user_id,
                'username': username
            }

        except Exception as e:
            LoggingUtils.log_security_event("registration_failed", username=username,
                                            details={'error': str(e)})
            raise

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """Authenticate user login.

        The session is overwritten by the lookup result, so a failed attempt
        while logged in ends the current session unless
        ``keep_session_on_failed_login`` is set.
        """
        user = self.user_repo.find_by_credentials(username, password)

        if user is None:
            previous = self.session.user.username if self.session.is_authenticated else None
            if not self.keep_session_on_failed_login:
                self.session.clear()

            LoggingUtils.log_security_event(
                "login_failed",
                username=username,
                details={'previous_session': previous,
                         'session_cleared': not self.keep_session_on_failed_login}
            )
            raise AuthenticationException()

        self.session.authenticate(user)

        LoggingUtils.log_security_event("login_success", username=username)
        self.audit.log(actor=username, action='LOGIN')

        return {
            'success': True,
            'message': 'Login successful.',
            'username': user.username,
            'login_time': self.session.login_time
        }

    def logout(self) -> Dict[str, Any]:
        """End the current session, if any"""
        if not self.session.is_authenticated:
            return {'success': False, 'message': 'No user is logged in.'}

        username = self.session.user.username
        self.session.clear()

        LoggingUtils.log_security_event("logout", username=username)
        self.audit.log(actor=username, action='LOGOUT')

        return {'success': True, 'message': 'Logged out successfully.', 'username': username}

    def current_user(self):
        return self.session.user if self.session.is_authenticated else None
