"""
In-memory key-value store with nested transactions.

This package provides:
- get(key) / set(key, value) / unset(key) - resolved against the open transaction
- begin() / commit() / rollback() - nested transaction control
- count_equal_to(value) - O(1) count of keys currently holding a value
"""

from txdb.engine.store import Store
from txdb.models.result import TransactionResult

__all__ = ["Store", "TransactionResult"]
