"""
Audit Repository
Handles in-memory storage for the audit_logs table
"""
from console_bank.core.repositories.base_repository import BaseRepository
from console_bank.db.database import InMemoryDatabase

class AuditRepository(BaseRepository):
    """Repository for audit_logs table operations"""

    def __init__(self, db: InMemoryDatabase):
        super().__init__(db, 'audit_logs', 'audit_id')

    def log_action(self, actor: str, action: str, details: str = None) -> int:
        """Create a new audit log entry"""
        log_data = {
            'actor': actor or 'anonymous',
            'action': action,
            'details': details
        }
        return self.create(log_data)
