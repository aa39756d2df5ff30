"""Multi-column sorting for the list views."""

from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

Compare = Callable[[str, str], int]
SortMap = Dict[int, Sequence[Tuple[int, Compare]]]
Row = TypeVar("Row")

_DIGITS = re.compile(r"\d+")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def alpha_compare(a: str, b: str) -> int:
    """Case-insensitive text comparison: -1, 0 or 1."""
    left, right = a.casefold(), b.casefold()
    return (left > right) - (left < right)


def _as_number(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def number_compare(a: str, b: str) -> int:
    """Compare two numeric cells; blank or non-numeric cells sort first."""
    left, right = _as_number(a), _as_number(b)
    if left is None or right is None:
        return (left is not None) - (right is not None)
    return _sign(left - right)


def episode_compare(a: str, b: str) -> int:
    """Compare episode numbers such as ``2-10`` by their numeric parts."""
    left = [int(part) for part in _DIGITS.findall(a)]
    right = [int(part) for part in _DIGITS.findall(b)]
    if left != right:
        return (left > right) - (left < right)
    return alpha_compare(a, b)


class SortContext:
    """Tracks the sort column and direction of a list.

    ``sort_map`` maps a clickable column to the (column, compare) keys it
    sorts by; its first entry is the default order.
    """

    def __init__(self, sort_map: SortMap) -> None:
        if not sort_map:
            raise ValueError("sort map must not be empty")
        self._sort_map = {column: tuple(keys) for column, keys in sort_map.items()}
        self.column = next(iter(self._sort_map))
        self.ascending = True

    def set_sort_column(self, column: int) -> bool:
        """Select ``column``; clicking the current column flips the direction.

        Returns False when the column cannot be sorted on.
        """
        if column not in self._sort_map:
            return False
        if column == self.column:
            self.ascending = not self.ascending
        else:
            self.column = column
            self.ascending = True
        return True

    def sort_rows(self, rows: Sequence[Row]) -> List[Row]:
        """Return ``rows`` sorted by the current column and direction."""
        keys = self._sort_map[self.column]
        direction = 1 if self.ascending else -1

        def compare(left, right) -> int:
            for index, func in keys:
                result = func(left[index], right[index])
                if result:
                    return direction * result
            return 0

        return sorted(rows, key=cmp_to_key(compare))