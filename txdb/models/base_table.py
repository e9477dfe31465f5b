"""
BaseTable - the committed layer at the bottom of the store.
"""

from collections.abc import Iterator

from txdb.interfaces.layer import Layer
from txdb.models.value import Value


class BaseTable(Layer):
    """
    Committed key-value state.

    Holds regular values only: deleting a key removes it outright, and
    applying an overlay turns its tombstones into removals.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Value] = {}

    def put(self, key: str, value: Value) -> None:
        if value.is_tombstone():
            self.delete(key)
            return
        self._entries[key] = value

    def get(self, key: str) -> Value | None:
        return self._entries.get(key)

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def has(self, key: str) -> bool:
        return key in self._entries

    def size(self) -> int:
        return len(self._entries)

    def apply(self, layer: Layer) -> int:
        """
        Merge every entry of another layer into this one.

        Args:
            layer: The layer whose entries win over the current ones.

        Returns:
            Number of entries applied.
        """
        applied = 0
        for key, value in layer:
            self.put(key, value)
            applied += 1
        return applied

    def __iter__(self) -> Iterator[tuple[str, Value]]:
        return iter(list(self._entries.items()))
