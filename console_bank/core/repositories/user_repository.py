"""
User Repository
Handles in-memory storage for the users table
"""

from typing import Optional

from console_bank.core.repositories.base_repository import BaseRepository
from console_bank.core.models.entities import User
from console_bank.db.database import InMemoryDatabase
from console_bank.utils.exceptions import ValidationException
from console_bank.utils.helpers import SecurityUtils

class UserRepository(BaseRepository):
    """Repository for users table operations"""

    def __init__(self, db: InMemoryDatabase, hash_passwords: bool = False):
        super().__init__(db, 'users', 'user_id')
        self.hash_passwords = hash_passwords

    def create_user(self, user: User) -> int:
        """Store a new user, hashing the password when hashing is enabled"""
        if not user.username or not user.password:
            raise ValidationException("Username and password are required")

        if self.hash_passwords:
            user.password = SecurityUtils.hash_password(user.password)

        user_data = {
            'username': user.username,
            'entity': user,
        }
        return self.create(user_data)

    def find_by_username(self, username: str) -> Optional[User]:
        """Find user by exact, case-sensitive username"""
        if not username:
            return None

        users = self.find_by_field('username', username)
        if not users:
            return None

        return self._row_to_user(users[0])

    def username_exists(self, username: str) -> bool:
        return self.find_by_username(username) is not None

    def find_by_credentials(self, username: str, password: str) -> Optional[User]:
        """Return the user whose username and password both match, or None"""
        user = self.find_by_username(username)
        if user is None or password is None:
            return None

        if self.hash_passwords:
            matched = SecurityUtils.verify_password(password, user.password)
        else:
            matched = user.password == password

        return user if matched else None

    def _row_to_user(self, row: dict) -> User:
        return row['entity']
