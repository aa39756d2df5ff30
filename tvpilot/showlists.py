"""The Shows and Archive list views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, List, Tuple

from .sorting import SortContext, SortMap, alpha_compare, number_compare

COL_SHOW_TITLE = 0
COL_SHOW_NUMBER = 1
COL_SHOW_LAST_DATE_STR = 2
COL_SHOW_NEXT_DATE_STR = 3
COL_SHOW_LAST_DATE_SORT = 4
COL_SHOW_NEXT_DATE_SORT = 5

COL_ARCHIVE_TITLE = 0
COL_ARCHIVE_NUMBER = 1
COL_ARCHIVE_LAST_DATE_STR = 2
COL_ARCHIVE_LAST_DATE_SORT = 3


@dataclass
class ShowListEntry:
    """What a list row shows about one show."""

    title: str
    num_episodes: int
    last_airdate_string: str = ""
    next_airdate_string: str = ""
    last_airdate_sort: str = ""
    next_airdate_sort: str = ""
    hash: int = 0


@dataclass(frozen=True)
class _Row:
    cells: Tuple[str, ...]
    hash: int

    def __getitem__(self, column: int) -> str:
        return self.cells[column]


def _show_cells(entry: ShowListEntry) -> Tuple[str, ...]:
    return (
        entry.title,
        str(entry.num_episodes),
        entry.last_airdate_string,
        entry.next_airdate_string,
        entry.last_airdate_sort,
        entry.next_airdate_sort,
    )


def _archive_cells(entry: ShowListEntry) -> Tuple[str, ...]:
    return (
        entry.title,
        str(entry.num_episodes),
        entry.last_airdate_string,
        entry.last_airdate_sort,
    )


class _ListView:
    """Rows plus a sort context; the public API lives on the subclasses."""

    SORT_MAP: ClassVar[SortMap]

    def __init__(self, cells: Callable[[ShowListEntry], Tuple[str, ...]]) -> None:
        self._rows: List[_Row] = []
        self._cells = cells
        self._sorter = SortContext(self.SORT_MAP)

    @property
    def rows(self) -> List[Tuple[str, ...]]:
        """The cell texts of every row, in display order."""
        return [row.cells for row in self._rows]

    def __len__(self) -> int:
        return len(self._rows)

    def sort(self) -> None:
        """Re-sort the rows by the current sort column."""
        self._rows = self._sorter.sort_rows(self._rows)

    def _append(self, entry: ShowListEntry) -> None:
        self._rows.append(_Row(self._cells(entry), entry.hash))

    def _clear(self) -> None:
        self._rows.clear()

    def _column_click(self, column: int) -> bool:
        if not self._sorter.set_sort_column(column):
            return False
        self.sort()
        return True

    def _hash_at(self, index: int) -> int:
        return self._rows[index].hash


class ShowList(_ListView):
    """Active shows: title, episode count, last and next air dates."""

    SORT_MAP: ClassVar[SortMap] = {
        COL_SHOW_TITLE: [(COL_SHOW_TITLE, alpha_compare)],
        COL_SHOW_NUMBER: [(COL_SHOW_NUMBER, number_compare), (COL_SHOW_TITLE, alpha_compare)],
        COL_SHOW_LAST_DATE_STR: [
            (COL_SHOW_LAST_DATE_SORT, number_compare),
            (COL_SHOW_TITLE, alpha_compare),
        ],
        COL_SHOW_NEXT_DATE_STR: [
            (COL_SHOW_NEXT_DATE_SORT, number_compare),
            (COL_SHOW_TITLE, alpha_compare),
        ],
    }

    def __init__(self) -> None:
        super().__init__(_show_cells)

    def append_row(self, entry: ShowListEntry) -> None:
        """Add a row for ``entry`` at the bottom of the list."""
        self._append(entry)

    def clear(self) -> None:
        """Remove every row."""
        self._clear()

    def column_click(self, column: int) -> bool:
        """Sort by ``column``, flipping direction on a repeat click.

        Returns False, leaving the order alone, if the column is not sortable.
        """
        return self._column_click(column)

    def hash_at(self, index: int) -> int:
        """The hash of the show on row ``index``."""
        return self._hash_at(index)


class ArchiveList(_ListView):
    """Archived shows: title, episode count and last air date."""

    SORT_MAP: ClassVar[SortMap] = {
        COL_ARCHIVE_TITLE: [
            (COL_ARCHIVE_TITLE, alpha_compare),
            (COL_ARCHIVE_LAST_DATE_SORT, number_compare),
        ],
        COL_ARCHIVE_NUMBER: [
            (COL_ARCHIVE_NUMBER, number_compare),
            (COL_ARCHIVE_LAST_DATE_SORT, number_compare),
        ],
        COL_ARCHIVE_LAST_DATE_STR: [
            (COL_ARCHIVE_LAST_DATE_SORT, number_compare),
            (COL_ARCHIVE_TITLE, alpha_compare),
        ],
    }

    def __init__(self) -> None:
        super().__init__(_archive_cells)

    def append_row(self, entry: ShowListEntry) -> None:
        """Add a row for ``entry`` at the bottom of the list."""
        self._append(entry)

    def clear(self) -> None:
        """Remove every row."""
        self._clear()

    def column_click(self, column: int) -> bool:
        """Sort by ``column``, flipping direction on a repeat click.

        Returns False, leaving the order alone, if the column is not sortable.
        """
        return self._column_click(column)

    def hash_at(self, index: int) -> int:
        """The hash of the show on row ``index``."""
        return self._hash_at(index)