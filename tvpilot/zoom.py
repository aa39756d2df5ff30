"""The list of every episode of one show."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import ClassVar, List, Tuple

from .episode import Episode
from .show import Show
from .sorting import SortContext, SortMap, alpha_compare, episode_compare, number_compare

COL_EPISODES_TITLE = 0
COL_EPISODES_NUMBER = 1
COL_EPISODES_DATE = 2
COL_EPISODES_DATE_SORT = 3


def format_airdate(day: date) -> str:
    """An air date as DD-Mon-YYYY."""
    simple = Episode(number="", airdate=day, title="").simple_date()
    return simple[-2:] + simple[4:9] + simple[:4]


@dataclass(frozen=True)
class _Row:
    cells: Tuple[str, ...]

    def __getitem__(self, column: int) -> str:
        return self.cells[column]


class EpisodeZoomList:
    """The episodes of ``show``: title, number, air date."""

    SORT_MAP: ClassVar[SortMap] = {
        COL_EPISODES_DATE: [
            (COL_EPISODES_DATE_SORT, number_compare),
            (COL_EPISODES_NUMBER, episode_compare),
        ],
        COL_EPISODES_TITLE: [
            (COL_EPISODES_TITLE, alpha_compare),
            (COL_EPISODES_DATE_SORT, number_compare),
        ],
        COL_EPISODES_NUMBER: [(COL_EPISODES_NUMBER, episode_compare)],
    }

    def __init__(self, show: Show) -> None:
        self.title = show.title
        self._sorter = SortContext(self.SORT_MAP)
        self._rows: List[_Row] = [
            _Row((
                episode.title,
                episode.number,
                format_airdate(episode.airdate),
                str(episode.julian_day()),
            ))
            for episode in show.episodes
        ]

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> List[Tuple[str, ...]]:
        """The cell texts of every row, in display order."""
        return [row.cells for row in self._rows]

    def column_click(self, column: int) -> bool:
        """Sort by ``column``, flipping direction on a repeat click.

        Returns False, leaving the order alone, if the column is not sortable.
        """
        if not self._sorter.set_sort_column(column):
            return False
        self._rows = self._sorter.sort_rows(self._rows)
        return True

    def episode_title(self, index: int) -> str:
        """The episode title on row ``index``."""
        return self._rows[index][COL_EPISODES_TITLE]