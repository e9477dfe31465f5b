"""
Data models for the store.
"""

from txdb.models.value import Value, ValueType
from txdb.models.value_index import ValueIndex
from txdb.models.base_table import BaseTable
from txdb.models.overlay import Overlay
from txdb.models.result import TransactionResult
from txdb.models.exceptions import MalformedCommandError

__all__ = [
    "Value",
    "ValueType",
    "ValueIndex",
    "BaseTable",
    "Overlay",
    "TransactionResult",
    "MalformedCommandError",
]
