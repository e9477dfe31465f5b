"""
Value and ValueType for representing entries held by a storage layer.
"""

from dataclasses import dataclass
from enum import IntEnum


class ValueType(IntEnum):
    """Type of entry stored in a layer."""

    REGULAR = 0  # Normal value
    TOMBSTONE = 1  # Deletion marker


@dataclass(frozen=True)
class Value:
    """
    Represents an entry stored in a layer.

    Attributes:
        data: The actual data stored (None for tombstones).
        type: Whether this is a regular value or a tombstone.
    """

    data: str | None
    type: ValueType = ValueType.REGULAR

    @classmethod
    def regular(cls, data: str) -> "Value":
        return cls(data=data, type=ValueType.REGULAR)

    @classmethod
    def tombstone(cls) -> "Value":
        return cls(data=None, type=ValueType.TOMBSTONE)

    def is_tombstone(self) -> bool:
        return self.type == ValueType.TOMBSTONE
