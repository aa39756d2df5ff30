"""Main-window actions: show URLs, context menus and episode flag commands."""

from __future__ import annotations

import re
import webbrowser
from dataclasses import dataclass
from typing import List, Optional

from .episode import EpisodeFlags
from .resources import DialogId, MenuCommand
from .show import Show, ShowFlags

THETVDB_SEARCH_URL = "https://thetvdb.com/search?query="

_SHOW_URL_PATTERN = re.compile(r"^https://(www\.)?epguides\.com/[^/]+(/)?$")


class InvalidShowUrl(ValueError):
    """The text entered is not the URL of a show on epguides.com."""


@dataclass(frozen=True)
class MenuItem:
    """One entry of a context menu; a separator has no command."""

    command: Optional[MenuCommand]
    label: str
    enabled: bool = True

    @property
    def is_separator(self) -> bool:
        """True for a separator line."""
        return self.command is None


SEPARATOR = MenuItem(None, "", False)


def normalise_show_url(url: str) -> str:
    """Lower-case, trim and validate a show URL; it always ends with '/'.

    Returns an empty string when nothing was entered and raises
    InvalidShowUrl when the text is not a show page on epguides.com.
    """
    text = url.lower().strip().replace("www.", "")
    if not text:
        return ""
    if not _SHOW_URL_PATTERN.match(text):
        raise InvalidShowUrl(f"not a valid URL for a show on epguides.com: {url!r}")
    if not text.endswith("/"):
        text += "/"
    return text


def launch_url(show: Show, command: MenuCommand) -> str:
    """The web address a menu command opens for ``show``.

    Returns an empty string when the command opens nothing or the show has
    no address for it.
    """
    command = MenuCommand(command)
    if command is MenuCommand.TVMAZE_GO:
        return show.tvmaze_url
    if command is MenuCommand.EPGUIDES_GO:
        return show.epguides_url
    if command is MenuCommand.IMDB_GO:
        return show.imdb_url
    if command is MenuCommand.THETVDB_GO:
        return show.thetvdb_url
    if command is MenuCommand.THETVDB_SEARCH:
        return (THETVDB_SEARCH_URL + show.title).replace(" ", "+")
    return ""


def context_menu(
    show: Show,
    dialog: DialogId,
    flags: EpisodeFlags = EpisodeFlags.NONE,
) -> List[MenuItem]:
    """The context menu for ``show`` as opened from ``dialog``.

    ``flags`` are the flags of the clicked episode on the Schedule list.
    """
    dialog = DialogId(dialog)
    flags = EpisodeFlags(int(flags))
    archived = bool(show.flags & ShowFlags.ARCHIVED)

    items = [
        MenuItem(MenuCommand.EPGUIDES_GO, "epguides", bool(show.epguides_url)),
        MenuItem(MenuCommand.EPGUIDES_EDIT, "Edit epguides URL"),
        MenuItem(MenuCommand.TVMAZE_GO, "TVmaze", bool(show.tvmaze_url)),
        MenuItem(MenuCommand.TVMAZE_EDIT, "Edit TVmaze URL"),
        MenuItem(MenuCommand.THETVDB_GO, "TheTVDB", bool(show.thetvdb_url)),
        MenuItem(MenuCommand.THETVDB_EDIT, "Edit TheTVDB URL"),
        MenuItem(MenuCommand.THETVDB_SEARCH, "Search TheTVDB"),
        MenuItem(MenuCommand.IMDB_GO, "IMDB", bool(show.imdb_url)),
        MenuItem(MenuCommand.IMDB_EDIT, "Edit IMDB URL"),
    ]

    if dialog is DialogId.SCHEDULE:
        marked = bool(flags & (EpisodeFlags.GOT | EpisodeFlags.NOT_GOT))
        items += [
            MenuItem(MenuCommand.GOT_IT, "&Got It", not flags & EpisodeFlags.GOT),
            MenuItem(MenuCommand.NOT_GOT_IT, "&Not Got It", not flags & EpisodeFlags.NOT_GOT),
            MenuItem(MenuCommand.CLEAR, "&Clear", marked),
            SEPARATOR,
            MenuItem(MenuCommand.REFRESH_SHOW, "Refresh Show"),
            MenuItem(MenuCommand.COPY_SHOW_TITLE, "Copy &Show Title"),
            MenuItem(MenuCommand.COPY_EPISODE_TITLE, "Copy &Episode Title"),
        ]
    elif dialog is DialogId.SHOWS:
        items.append(MenuItem(MenuCommand.ARCHIVE, "Archive", not archived))
    elif dialog is DialogId.ARCHIVE:
        items.append(MenuItem(MenuCommand.UNARCHIVE, "Unarchive", archived))

    return items


def apply_flag_command(flags: EpisodeFlags, command: MenuCommand) -> EpisodeFlags:
    """The episode flags after a Got It, Not Got It or Clear command."""
    flags = EpisodeFlags(int(flags))
    command = MenuCommand(command)
    if command is MenuCommand.CLEAR:
        return EpisodeFlags.NONE
    if command is MenuCommand.GOT_IT:
        return (flags & ~EpisodeFlags.NOT_GOT) | EpisodeFlags.GOT
    if command is MenuCommand.NOT_GOT_IT:
        return (flags & ~EpisodeFlags.GOT) | EpisodeFlags.NOT_GOT
    raise ValueError(f"not an episode flag command: {command!r}")


def open_in_browser(url: str) -> bool:
    """Open ``url`` in the default browser.

    Returns False for an empty address; raises OSError if no browser
    could be started.
    """
    if not url:
        return False
    if not webbrowser.open(url):
        raise OSError(f"can't open web browser for {url}")
    return True