from datetime import date

import pytest

from tvpilot.episode import Episode
from tvpilot.show import Show
from tvpilot.zoom import (
    COL_EPISODES_DATE,
    COL_EPISODES_DATE_SORT,
    COL_EPISODES_NUMBER,
    COL_EPISODES_TITLE,
    EpisodeZoomList,
    format_airdate,
)


@pytest.fixture
def show():
    return Show(
        title="Some Show",
        epguides_url="https://epguides.com/someshow/",
        episodes=[
            Episode("1-10", date(2021, 3, 1), "Charlie"),
            Episode("1-2", date(2020, 1, 5), "alpha"),
            Episode("1-9", date(2020, 12, 31), "Bravo"),
        ],
    )


def test_format_airdate():
    assert format_airdate(date(2020, 1, 5)) == "05-Jan-2020"


def test_format_airdate_shape():
    text = format_airdate(date(1999, 12, 31))
    assert text.startswith("31-")
    assert text.endswith("-1999")


def test_rows_in_episode_order(show):
    zoom = EpisodeZoomList(show)
    assert zoom.title == "Some Show"
    assert len(zoom) == 3
    assert [zoom.episode_title(i) for i in range(3)] == ["Charlie", "alpha", "Bravo"]
    first = zoom.rows[1]
    assert first[COL_EPISODES_NUMBER] == "1-2"
    assert first[COL_EPISODES_DATE] == format_airdate(date(2020, 1, 5))
    assert first[COL_EPISODES_DATE_SORT] == str(show.episodes[1].julian_day())


def test_click_date_reverses_default(show):
    zoom = EpisodeZoomList(show)
    assert zoom.column_click(COL_EPISODES_DATE) is True
    assert [zoom.episode_title(i) for i in range(3)] == ["Charlie", "Bravo", "alpha"]
    zoom.column_click(COL_EPISODES_DATE)
    assert [zoom.episode_title(i) for i in range(3)] == ["alpha", "Bravo", "Charlie"]


def test_click_title_is_case_insensitive(show):
    zoom = EpisodeZoomList(show)
    zoom.column_click(COL_EPISODES_TITLE)
    assert [zoom.episode_title(i) for i in range(3)] == ["alpha", "Bravo", "Charlie"]


def test_click_number_sorts_numerically(show):
    zoom = EpisodeZoomList(show)
    zoom.column_click(COL_EPISODES_NUMBER)
    assert [row[COL_EPISODES_NUMBER] for row in zoom.rows] == ["1-2", "1-9", "1-10"]


def test_hidden_column_not_sortable(show):
    zoom = EpisodeZoomList(show)
    before = zoom.rows
    assert zoom.column_click(COL_EPISODES_DATE_SORT) is False
    assert zoom.rows == before