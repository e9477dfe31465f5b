"""
Outcome of transaction control operations.
"""

from enum import Enum


class TransactionResult(Enum):
    """
    Result of commit/rollback.

    NO_TRANSACTION is a reportable outcome, not an error: it means the call
    was made with no transaction open and nothing changed.
    """

    OK = "OK"
    NO_TRANSACTION = "NO TRANSACTION"

    def __bool__(self) -> bool:
        return self is TransactionResult.OK
