"""
ValueIndex - reverse index from value to the number of keys holding it.
"""


class ValueIndex:
    """
    Occurrence counter keyed by value.

    Only strictly positive counts are stored; a value whose count drops to
    zero is removed. The index has no notion of transactions: the owner is
    responsible for keeping it in step with the effective state.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def increment(self, value: str) -> None:
        self._counts[value] = self._counts.get(value, 0) + 1

    def decrement(self, value: str) -> None:
        """
        Decrease the count for a value, dropping the entry at zero.

        Args:
            value: The value that lost an occurrence. Absent values are ignored.
        """
        count = self._counts.get(value, 0) - 1
        if count > 0:
            self._counts[value] = count
        else:
            self._counts.pop(value, None)

    def count_equal_to(self, value: str) -> int:
        """
        Number of keys currently holding the value.

        Args:
            value: The value to look up.

        Returns:
            The occurrence count, 0 if the value is not held by any key.

        Time complexity: O(1)
        """
        return self._counts.get(value, 0)

    def snapshot(self) -> dict[str, int]:
        return dict(self._counts)

    def __contains__(self, value: object) -> bool:
        return value in self._counts

    def __len__(self) -> int:
        return len(self._counts)
