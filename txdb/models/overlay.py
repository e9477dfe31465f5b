"""
Overlay - tentative writes and deletes of one open transaction.
"""

from collections.abc import Iterator

from txdb.interfaces.layer import Layer
from txdb.models.value import Value


class Overlay(Layer):
    """
    Transaction layer sitting on top of the base table.

    A nested overlay starts as a copy of its parent, so it always holds
    every key touched by any enclosing open transaction. Resolving a read
    therefore only needs this overlay and the base table beneath it.
    Deletes are recorded as tombstones so they can hide committed values
    until the transaction is resolved.
    """

    def __init__(self, parent: "Overlay | None" = None) -> None:
        """
        Initialize Overlay.

        Args:
            parent: The enclosing transaction's overlay to copy, if any.
        """
        self._entries: dict[str, Value] = dict(parent._entries) if parent else {}

    def put(self, key: str, value: Value) -> None:
        self._entries[key] = value

    def get(self, key: str) -> Value | None:
        return self._entries.get(key)

    def delete(self, key: str) -> None:
        self._entries[key] = Value.tombstone()

    def has(self, key: str) -> bool:
        return key in self._entries

    def size(self) -> int:
        return len(self._entries)

    def keys(self) -> list[str]:
        return list(self._entries)

    def __iter__(self) -> Iterator[tuple[str, Value]]:
        return iter(list(self._entries.items()))
