"""
Audit Service
Business logic for system-wide auditing and logging
"""
import json
from typing import Any
from console_bank.core.repositories.audit_repository import AuditRepository

class AuditService:
    """Service class for auditing state-changing banking actions"""

    def __init__(self, repo: AuditRepository):
        self.repo = repo

    def log(self, actor: str, action: str, details: Any = None):
        """Log a system action with optional structured details"""
        details_str = json.dumps(details, default=str) if details else None
        return self.repo.log_action(actor, action, details_str)
