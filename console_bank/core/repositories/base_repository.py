"""
Base Repository Class
Provides common table operations for all repositories
"""

from abc import ABC
from typing import List, Dict, Any
import logging

from console_bank.db.database import InMemoryDatabase
from console_bank.utils.exceptions import ValidationException

logger = logging.getLogger(__name__)

class BaseRepository(ABC):
    """Base repository with common CRUD operations"""

    def __init__(self, db: InMemoryDatabase, table_name: str, primary_key: str = 'id'):
        self.table_name = table_name
        self.primary_key = primary_key
        self.db = db
        self.db.create_table(table_name)

    def create(self, data: Dict[str, Any]) -> int:
        """Create a new record"""
        # Remove None values and the primary key, which is always assigned here
        clean_data = {
            k: v for k, v in data.items()
            if v is not None and k != self.primary_key
        }

        if not clean_data:
            raise ValidationException("No data provided for creation")

        result = self.db.insert(self.table_name, self.primary_key, clean_data)
        logger.info(f"Created record in {self.table_name} with ID: {result}")
        return result

    def find_all(self, limit: int = None, offset: int = 0) -> List[Dict[str, Any]]:
        """Find all records with optional pagination"""
        rows = self.db.select(self.table_name)
        if limit:
            return rows[offset:offset + limit]
        return rows[offset:]

    def find_by_field(self, field_name: str, field_value: Any) -> List[Dict[str, Any]]:
        """Find records by specific field (exact, case-sensitive match)"""
        return self.db.select(self.table_name, lambda row: row.get(field_name) == field_value)

    def count(self) -> int:
        return self.db.count(self.table_name)

