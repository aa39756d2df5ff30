from datetime import date

import pytest

from tvpilot.episode import Episode, EpisodeFlags
from tvpilot.show import Show, ShowFlags, ShowState, read_show, url_hash


def _sample_lines():
    return [
        "Some Show",
        "0",
        "HTTPS://EPGUIDES.COM/SomeShow/",
        "https://www.tvmaze.com/Shows/1",
        "",
        "",
        "2",
        "1x01", "2020-Jan-05", "Pilot", "1",
        "1x02", "2020-Jan-12", "Second", "0",
        "trailing",
    ]


def test_read_show_fields():
    show = read_show(_sample_lines())
    assert show.title == "Some Show"
    assert show.flags == ShowFlags.NONE
    assert show.epguides_url == "https://epguides.com/someshow/"
    assert show.tvmaze_url == "https://www.tvmaze.com/shows/1"
    assert show.state is ShowState.LOADED
    assert [ep.number for ep in show.episodes] == ["1x01", "1x02"]
    assert show.episodes[0].flags == EpisodeFlags.GOT


def test_hash_uses_lowercased_epguides_url():
    show = read_show(_sample_lines())
    assert show.hash == url_hash("https://epguides.com/someshow/")


def test_read_show_leaves_following_lines():
    iterator = iter(_sample_lines())
    read_show(iterator)
    assert next(iterator) == "trailing"


def test_archived_flag():
    lines = _sample_lines()
    lines[1] = str(int(ShowFlags.ARCHIVED))
    assert ShowFlags.ARCHIVED in read_show(lines).flags


def test_round_trip():
    show = Show(
        title="Another",
        flags=ShowFlags.ARCHIVED,
        epguides_url="https://epguides.com/another/",
        tvmaze_url="https://tvmaze.com/shows/2",
        imdb_url="https://imdb.com/title/tt0000000/",
        thetvdb_url="",
        episodes=[Episode("S01E01", date(2021, 5, 1), "Start", EpisodeFlags.NOT_GOT)],
        state=ShowState.LOADED,
    )
    assert read_show(show.to_lines()) == show


def test_to_lines_header_layout():
    show = Show(title="T", epguides_url="https://epguides.com/t/",
                episodes=[Episode("1", date(2020, 1, 1), "a")])
    lines = show.to_lines()
    assert lines[0] == "T"
    assert lines[6] == "1"
    assert len(lines) == 7 + 4


def test_url_hash_is_stable_and_32_bit():
    url = "https://epguides.com/someshow/"
    assert url_hash(url) == url_hash(url)
    assert 0 <= url_hash(url) < 2 ** 32
    assert url_hash(url) != url_hash("https://epguides.com/othershow/")


def test_truncated_episodes_raise():
    with pytest.raises(ValueError):
        read_show(_sample_lines()[:12])


def test_bad_count_raises():
    lines = _sample_lines()
    lines[6] = "many"
    with pytest.raises(ValueError):
        read_show(lines)


def test_negative_count_raises():
    lines = _sample_lines()
    lines[6] = "-1"
    with pytest.raises(ValueError):
        read_show(lines)