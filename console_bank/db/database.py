"""
In-Memory Database
Process-lifetime table storage for Console Banking System
"""

import logging
from copy import copy
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from console_bank.utils.exceptions import DatabaseException

logger = logging.getLogger(__name__)

class InMemoryDatabase:
    """Named tables of row dictionaries, lost when the process exits"""

    def __init__(self, name: str = 'console_bank'):
        self.name = name
        self._tables: Dict[str, List[Dict[str, Any]]] = {}
        self._sequences: Dict[str, int] = {}
        logger.info(f"In-memory database '{name}' initialized")

    def create_table(self, table_name: str):
        if table_name not in self._tables:
            self._tables[table_name] = []
            self._sequences[table_name] = 0

    def insert(self, table_name: str, primary_key: str, row: Dict[str, Any]) -> int:
        """Append a row and return its auto-incremented primary key"""
        rows = self._get_table(table_name)
        self._sequences[table_name] += 1
        record_id = self._sequences[table_name]

        stored = dict(row)
        stored[primary_key] = record_id
        stored.setdefault('created_at', datetime.now())
        rows.append(stored)
        return record_id

    def select(self, table_name: str,
               where: Optional[Callable[[Dict[str, Any]], bool]] = None) -> List[Dict[str, Any]]:
        """Return shallow copies of matching rows in insertion order"""
        rows = self._get_table(table_name)
        return [copy(row) for row in rows if where is None or where(row)]

    def count(self, table_name: str) -> int:
        return len(self._get_table(table_name))

    def _get_table(self, table_name: str) -> List[Dict[str, Any]]:
        try:
            return self._tables[table_name]
        except KeyError:
            logger.error(f"Table {table_name} does not exist")
            raise DatabaseException(f"Table {table_name} does not exist", "NO_SUCH_TABLE")
