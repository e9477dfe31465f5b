"""
Store - Main transactional key-value API.
"""

import logging

from txdb.interfaces.layer import Layer
from txdb.models.base_table import BaseTable
from txdb.models.overlay import Overlay
from txdb.models.result import TransactionResult
from txdb.models.value import Value
from txdb.models.value_index import ValueIndex

logger = logging.getLogger()


class Store:
    """
    In-memory key-value store with nested transactions.

    Provides:
    - get(key): Effective value of a key
    - set(key, value): Insert/update a key in the active scope
    - unset(key): Remove a key from the active scope
    - begin(), commit(), rollback(): Transaction control
    - count_equal_to(value): Number of keys holding a value

    Architecture:
    - Committed state lives in a BaseTable
    - Each open transaction pushes an Overlay, copied from its parent
    - Reads check the top Overlay first, then the BaseTable
    - A ValueIndex tracks the effective state after every operation, so
      equality counts never have to scan the keys
    """

    def __init__(self) -> None:
        self._base = BaseTable()

        # Open transactions, oldest first
        self._transactions: list[Overlay] = []

        self._index = ValueIndex()

    @property
    def depth(self) -> int:
        return len(self._transactions)

    @property
    def in_transaction(self) -> bool:
        return bool(self._transactions)

    def _top(self) -> Overlay | None:
        return self._transactions[-1] if self._transactions else None

    def _active_layer(self) -> Layer:
        """Layer receiving writes: the innermost transaction, or the base table."""
        top = self._top()
        return top if top is not None else self._base

    def _resolve(self, key: str, overlay: Overlay | None) -> str | None:
        """
        Resolve a key as seen through an overlay.

        Every overlay already carries its parents' entries, so only the given
        overlay and the base table need to be checked.

        Args:
            key: The key to look up.
            overlay: The overlay to read through, or None for the base table only.

        Returns:
            The value if set, None if absent or hidden by a tombstone.
        """
        value = overlay.get(key) if overlay is not None else None
        if value is None:
            value = self._base.get(key)
        if value is None or value.is_tombstone():
            return None
        return value.data

    def _reindex(self, old: str | None, new: str | None) -> None:
        """Move one key's occurrence from its old value to its new one."""
        if old == new:
            return
        if old is not None:
            self._index.decrement(old)
        if new is not None:
            self._index.increment(new)

    def get(self, key: str) -> str | None:
        """
        Retrieve the effective value of a key.

        Args:
            key: The key to look up.

        Returns:
            The value if set, None otherwise.
        """
        return self._resolve(key, self._top())

    def set(self, key: str, value: str) -> None:
        """
        Insert or update a key in the active scope.

        Args:
            key: The key to insert/update.
            value: The value to store.
        """
        self._reindex(self.get(key), value)
        self._active_layer().put(key, Value.regular(value))

    def unset(self, key: str) -> None:
        """
        Remove a key from the active scope.

        Outside a transaction the key is dropped from the base table. Inside
        one a tombstone hides any committed value until commit or rollback.

        Args:
            key: The key to remove.
        """
        self._reindex(self.get(key), None)
        self._active_layer().delete(key)

    def count_equal_to(self, value: str) -> int:
        return self._index.count_equal_to(value)

    def begin(self) -> None:
        """Open a new transaction, nested inside any open one."""
        self._transactions.append(Overlay(parent=self._top()))
        logger.debug(f"BEGIN: depth={self.depth}")

    def commit(self) -> TransactionResult:
        """
        Apply all open transactions to the base table and close them.

        The innermost overlay already holds every pending write of the
        enclosing ones. The index reflects the effective state throughout,
        so it is left untouched.

        Returns:
            TransactionResult.OK, or NO_TRANSACTION if none is open.
        """
        top = self._top()
        if top is None:
            return TransactionResult.NO_TRANSACTION

        closed = self.depth
        applied = self._base.apply(top)
        self._transactions.clear()
        logger.debug(f"COMMIT: closed {closed} transaction(s), applied {applied} entries")
        return TransactionResult.OK

    def rollback(self) -> TransactionResult:
        """
        Discard the innermost transaction.

        Values and index counts return to what they were right before the
        matching begin().

        Returns:
            TransactionResult.OK, or NO_TRANSACTION if none is open.
        """
        if not self._transactions:
            return TransactionResult.NO_TRANSACTION

        discarded = self._transactions.pop()
        parent = self._top()

        # Keys the discarded overlay never touched resolve the same way
        # before and after the pop.
        for key, value in discarded:
            current = None if value.is_tombstone() else value.data
            self._reindex(current, self._resolve(key, parent))

        logger.debug(f"ROLLBACK: discarded {discarded.size()} entries, depth={self.depth}")
        return TransactionResult.OK

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __len__(self) -> int:
        """Number of keys with an effective value."""
        return sum(self._index.snapshot().values())
