"""The Schedule list view: episodes airing around today."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Tuple

from .episode import EpisodeFlags
from .sorting import (
    SortContext,
    SortMap,
    alpha_compare,
    episode_compare,
    number_compare,
)

COL_SCHED_SHOW = 0
COL_SCHED_EP_NUM = 1
COL_SCHED_DATE_STR = 2
COL_SCHED_TITLE = 3
COL_SCHED_DATE_SORT = 4
COL_SCHED_EP_FLAGS = 5

Colour = Tuple[int, int, int]

BLACK: Colour = (0, 0, 0)
GOT_COLOUR: Colour = (0, 255, 0)
NOT_GOT_COLOUR: Colour = (255, 0, 0)


def colour_for_flags(flags: EpisodeFlags) -> Colour:
    """The text colour for an episode row with ``flags``."""
    flags = EpisodeFlags(int(flags))
    if flags & EpisodeFlags.GOT:
        return GOT_COLOUR
    if flags & EpisodeFlags.NOT_GOT:
        return NOT_GOT_COLOUR
    return BLACK


@dataclass
class ScheduleEntry:
    """What a schedule row shows about one episode."""

    show_title: str
    episode_number: str
    airdate_string: str
    episode_title: str
    airdate_sort: str
    hash: int = 0
    episode_flags: EpisodeFlags = EpisodeFlags.NONE


@dataclass
class _Row:
    cells: List[str]
    hash: int

    def __getitem__(self, column: int) -> str:
        return self.cells[column]


class ScheduleList:
    """Episodes in the schedule window, with their user flags."""

    SORT_MAP: ClassVar[SortMap] = {
        COL_SCHED_DATE_STR: [
            (COL_SCHED_DATE_SORT, number_compare),
            (COL_SCHED_SHOW, alpha_compare),
            (COL_SCHED_EP_NUM, episode_compare),
        ],
        COL_SCHED_SHOW: [
            (COL_SCHED_SHOW, alpha_compare),
            (COL_SCHED_EP_NUM, episode_compare),
        ],
        COL_SCHED_TITLE: [
            (COL_SCHED_TITLE, alpha_compare),
            (COL_SCHED_SHOW, alpha_compare),
            (COL_SCHED_EP_NUM, episode_compare),
        ],
    }

    def __init__(self) -> None:
        self._rows: List[_Row] = []
        self._sorter = SortContext(self.SORT_MAP)

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> List[Tuple[str, ...]]:
        """The cell texts of every row, in display order."""
        return [tuple(row.cells) for row in self._rows]

    def append_row(self, entry: ScheduleEntry) -> None:
        """Add a row for ``entry`` at the bottom of the list."""
        cells = [
            entry.show_title,
            entry.episode_number,
            entry.airdate_string,
            entry.episode_title,
            entry.airdate_sort,
            str(int(entry.episode_flags)),
        ]
        self._rows.append(_Row(cells, entry.hash))

    def clear(self) -> None:
        """Remove every row."""
        self._rows.clear()

    def sort(self) -> None:
        """Re-sort the rows by the current sort column."""
        self._rows = self._sorter.sort_rows(self._rows)

    def column_click(self, column: int) -> bool:
        """Sort by ``column``, flipping direction on a repeat click.

        Returns False, leaving the order alone, if the column is not sortable.
        """
        if not self._sorter.set_sort_column(column):
            return False
        self.sort()
        return True

    def hash_at(self, index: int) -> int:
        """The hash of the show on row ``index``."""
        return self._rows[index].hash

    def episode_title(self, index: int) -> str:
        """The episode title on row ``index``."""
        return self._rows[index][COL_SCHED_TITLE]

    def flags_at(self, index: int) -> EpisodeFlags:
        """The episode flags stored on row ``index``."""
        return EpisodeFlags(int(self._rows[index][COL_SCHED_EP_FLAGS]))

    def set_flags(self, index: int, flags: EpisodeFlags) -> None:
        """Store new episode flags on row ``index``."""
        self._rows[index].cells[COL_SCHED_EP_FLAGS] = str(int(flags))

    def text_colour(self, index: int) -> Colour:
        """The colour row ``index`` is drawn in."""
        return colour_for_flags(self.flags_at(index))