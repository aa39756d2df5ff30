"""A show, its episodes and its text record in the data file."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag, auto
from typing import Iterable, List

from .episode import Episode, read_episode

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193


class ShowFlags(IntFlag):
    """Flags stored with a show."""

    NONE = 0
    ARCHIVED = 1


class ShowState(Enum):
    """Where a show's data came from."""

    NEW = auto()
    LOADED = auto()


def url_hash(url: str) -> int:
    """A stable 32-bit hash of a show URL, used as the show's key."""
    value = _FNV_OFFSET
    for byte in url.encode("utf-8"):
        value ^= byte
        value = (value * _FNV_PRIME) & 0xFFFFFFFF
    return value


def _chomp(line: str) -> str:
    return line.rstrip("\r\n")


@dataclass
class Show:
    """A show with its site URLs and its episodes."""

    title: str = ""
    flags: ShowFlags = ShowFlags.NONE
    epguides_url: str = ""
    tvmaze_url: str = ""
    imdb_url: str = ""
    thetvdb_url: str = ""
    episodes: List[Episode] = field(default_factory=list)
    state: ShowState = ShowState.NEW

    @property
    def hash(self) -> int:
        """The show's key: the hash of its epguides URL."""
        return url_hash(self.epguides_url)

    def to_lines(self) -> List[str]:
        """The lines that store this show and all its episodes."""
        lines = [
            self.title,
            str(int(self.flags)),
            self.epguides_url,
            self.tvmaze_url,
            self.imdb_url,
            self.thetvdb_url,
            str(len(self.episodes)),
        ]
        for episode in self.episodes:
            lines.extend(episode.to_lines())
        return lines


def read_show(lines: Iterable[str]) -> Show:
    """Read one show and its episodes from ``lines``.

    URLs are lower-cased so that hashes are consistent.
    """
    iterator = iter(lines)
    try:
        header = [_chomp(next(iterator)) for _ in range(7)]
    except RuntimeError as exc:
        raise ValueError("truncated show record") from exc
    title, flags_text, epguides, tvmaze, imdb, thetvdb, count_text = header

    count = int(count_text.strip())
    if count < 0:
        raise ValueError(f"negative episode count: {count}")

    return Show(
        title=title,
        flags=ShowFlags(int(flags_text.strip())),
        epguides_url=epguides.lower(),
        tvmaze_url=tvmaze.lower(),
        imdb_url=imdb.lower(),
        thetvdb_url=thetvdb.lower(),
        episodes=[read_episode(iterator) for _ in range(count)],
        state=ShowState.LOADED,
    )