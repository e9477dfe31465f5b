"""
Layer abstract base class for key-value storage layers.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class Layer(ABC):
    """
    Abstract base class for a single layer of the store.

    Reads resolve against a stack of layers, newest first. A layer that
    holds a key decides its value; a tombstone hides whatever lies below.

    Implementations:
    - BaseTable: committed state, deletes remove the key
    - Overlay: one open transaction, deletes leave a tombstone
    """

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """
        Insert or update an entry.

        Args:
            key: The key to insert/update.
            value: The entry to associate with the key.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """
        Retrieve the entry for a given key.

        Args:
            key: The key to look up.

        Returns:
            The entry if this layer holds the key (possibly a tombstone),
            None otherwise.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key from the view this layer presents.

        Args:
            key: The key to remove.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """
        Check if this layer holds an entry for the key.

        Args:
            key: The key to check.

        Returns:
            True if an entry (including a tombstone) exists, False otherwise.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the number of entries held by this layer."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[str, Any]]:
        """Return an iterator over (key, entry) pairs."""
        pass
