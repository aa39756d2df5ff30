"""A single episode of a show and its four-line text record."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import IntFlag
from typing import Iterable, List

_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_MONTH_FULL_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
_MONTH_BY_NAME = {
    **{name.lower(): number for number, name in enumerate(_MONTH_ABBREVIATIONS, 1)},
    **{name: number for number, name in enumerate(_MONTH_FULL_NAMES, 1)},
}

# Julian day number of the day before 0001-01-01 (proleptic Gregorian).
_JULIAN_OFFSET = 1721425

_DATE_PATTERN = re.compile(
    r"^\s*(\d{4})[-/. ]([A-Za-z]+|\d{1,2})[-/. ](\d{1,2})\s*$"
)


class EpisodeFlags(IntFlag):
    """Viewing state the user has marked on an episode."""

    NONE = 0
    GOT = 1
    NOT_GOT = 2


def _chomp(line: str) -> str:
    return line.rstrip("\r\n")


def _parse_date(text: str) -> date:
    match = _DATE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"unrecognised date: {text!r}")
    year_text, month_text, day_text = match.groups()
    if month_text.isdigit():
        month = int(month_text)
    else:
        try:
            month = _MONTH_BY_NAME[month_text.lower()]
        except KeyError:
            raise ValueError(f"unrecognised month: {month_text!r}") from None
    return date(int(year_text), month, int(day_text))


@dataclass
class Episode:
    """One episode: its number, air date, title and user flags."""

    number: str
    airdate: date
    title: str
    flags: EpisodeFlags = EpisodeFlags.NONE

    def simple_date(self) -> str:
        """The air date as YYYY-Mon-DD, the form used in the data file."""
        day = self.airdate
        return f"{day.year:04d}-{_MONTH_ABBREVIATIONS[day.month - 1]}-{day.day:02d}"

    def julian_day(self) -> int:
        """The Julian day number of the air date."""
        return self.airdate.toordinal() + _JULIAN_OFFSET

    def to_lines(self) -> List[str]:
        """The four lines that store this episode."""
        return [self.number, self.simple_date(), self.title, str(int(self.flags))]


def read_episode(lines: Iterable[str]) -> Episode:
    """Read one episode from the next four lines of ``lines``.

    When ``lines`` is an iterator, only those four lines are consumed.
    """
    iterator = iter(lines)
    try:
        number, date_text, title, flags_text = (_chomp(next(iterator)) for _ in range(4))
    except RuntimeError as exc:
        raise ValueError("truncated episode record") from exc
    return Episode(
        number=number,
        airdate=_parse_date(date_text),
        title=title,
        flags=EpisodeFlags(int(flags_text.strip())),
    )