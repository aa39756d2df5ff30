"""Application events, the button states they lead to, and the schedule window."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Dict, List, Tuple

from .resources import ControlId

MIN_SPIN_DAYS = 1
MAX_SPIN_DAYS = 30
DEFAULT_DAYS_PRE = 7
DEFAULT_DAYS_POST = 7


class AppEvent(Enum):
    """Things that happen in the application and change which buttons work."""

    APP_STARTED = auto()
    DOWNLOAD_STARTED = auto()
    DOWNLOAD_OK = auto()
    DOWNLOAD_ABORTED = auto()
    DOWNLOAD_FAILED = auto()
    FILE_LOADED = auto()
    FILE_SAVED = auto()
    FILE_CREATED = auto()
    EP_FLAGS_CHANGED = auto()
    URL_EDITED = auto()
    SHOW_ADDED = auto()
    SHOW_DELETED = auto()
    ARCHIVE_CHANGED = auto()
    TAB_CHANGED = auto()


class Tab(IntEnum):
    """The tabs of the main window, in display order."""

    SHOWS = 0
    SCHEDULE = 1
    ARCHIVE = 2


class Button(IntEnum):
    """The buttons whose enabled state follows application events."""

    LOAD = ControlId.BTN_LOAD
    SAVE = ControlId.BTN_SAVE
    DOWNLOAD = ControlId.BTN_DOWNLOAD
    DELETE_SHOW = ControlId.BTN_DELETE_SHOW
    NEW_SHOW = ControlId.BTN_NEW_SHOW
    ABORT_DOWNLOAD = ControlId.BTN_ABORT_DOWNLOAD


def _all_enabled() -> Dict[Button, bool]:
    return {button: True for button in Button}


@dataclass
class ButtonStates:
    """Which buttons are enabled.

    With ``keep_enabled`` set, buttons that events would normally disable
    stay enabled (the delete button on the Shows and Schedule tabs excepted).
    """

    keep_enabled: bool = False
    enabled: Dict[Button, bool] = field(default_factory=_all_enabled)

    def __getitem__(self, button: Button) -> bool:
        return self.enabled[button]

    def _off(self) -> bool:
        return self.keep_enabled

    def _when(self, condition: bool) -> bool:
        return True if condition else self.keep_enabled

    def apply(
        self,
        event: AppEvent,
        active_shows: int,
        archive_shows: int,
        selected_tab: Tab,
    ) -> List[AppEvent]:
        """Update the buttons for ``event``.

        Events that imply a tab refresh are followed at once by
        ``TAB_CHANGED``. Returns every event handled, in order.
        """
        event = AppEvent(event)
        selected_tab = Tab(selected_tab)
        handled = [event]
        follow_up = False
        states = self.enabled
        have_active = active_shows > 0

        if event is AppEvent.APP_STARTED:
            states[Button.LOAD] = self._off()
            states[Button.SAVE] = self._off()
        elif event is AppEvent.DOWNLOAD_STARTED:
            states[Button.ABORT_DOWNLOAD] = True
            for button in (Button.LOAD, Button.SAVE, Button.DOWNLOAD,
                           Button.NEW_SHOW, Button.DELETE_SHOW):
                states[button] = self._off()
        elif event is AppEvent.DOWNLOAD_OK:
            states[Button.ABORT_DOWNLOAD] = False
            states[Button.LOAD] = self._off()
            states[Button.SAVE] = True
            states[Button.DOWNLOAD] = self._off()
            follow_up = True
        elif event in (AppEvent.DOWNLOAD_ABORTED, AppEvent.DOWNLOAD_FAILED):
            states[Button.ABORT_DOWNLOAD] = False
            states[Button.LOAD] = True
            states[Button.SAVE] = self._off()
            states[Button.DOWNLOAD] = self._when(have_active)
        elif event is AppEvent.FILE_LOADED:
            states[Button.LOAD] = self._off()
            states[Button.SAVE] = self._off()
            states[Button.DOWNLOAD] = True
        elif event is AppEvent.FILE_SAVED:
            states[Button.SAVE] = self._off()
        elif event is AppEvent.FILE_CREATED:
            states[Button.LOAD] = self._off()
            states[Button.SAVE] = self._off()
            states[Button.DOWNLOAD] = self._off()
            states[Button.NEW_SHOW] = True
            states[Button.DELETE_SHOW] = self._off()
        elif event is AppEvent.EP_FLAGS_CHANGED:
            states[Button.LOAD] = True
            states[Button.SAVE] = True
            states[Button.DOWNLOAD] = self._when(have_active)
        elif event in (AppEvent.URL_EDITED, AppEvent.SHOW_ADDED, AppEvent.SHOW_DELETED):
            states[Button.LOAD] = True
            states[Button.SAVE] = True
            states[Button.DOWNLOAD] = self._when(have_active)
            follow_up = True
        elif event is AppEvent.ARCHIVE_CHANGED:
            states[Button.LOAD] = True
            states[Button.SAVE] = True
        elif event is AppEvent.TAB_CHANGED:
            if selected_tab is Tab.SHOWS:
                states[Button.NEW_SHOW] = True
                states[Button.DELETE_SHOW] = False
                states[Button.DOWNLOAD] = self._when(have_active)
            elif selected_tab is Tab.SCHEDULE:
                states[Button.NEW_SHOW] = False
                states[Button.DELETE_SHOW] = False
                states[Button.DOWNLOAD] = self._when(have_active)
            else:
                states[Button.NEW_SHOW] = False
                states[Button.DELETE_SHOW] = True
                states[Button.DOWNLOAD] = self._when(archive_shows > 0)

        if follow_up:
            handled.extend(
                self.apply(AppEvent.TAB_CHANGED, active_shows, archive_shows, selected_tab)
            )
        return handled


@dataclass
class DaysWindow:
    """Days before and after today that the schedule covers."""

    pre: int = DEFAULT_DAYS_PRE
    post: int = DEFAULT_DAYS_POST

    def step(self, which: ControlId, delta: int) -> bool:
        """Move the pre or post count by ``delta``.

        Returns False, leaving the count alone, if it would leave the
        allowed range.
        """
        which = ControlId(which)
        if which not in (ControlId.SPIN_DAYS_PRE, ControlId.SPIN_DAYS_POST):
            raise ValueError(f"not a days spin control: {which!r}")
        current = self.pre if which is ControlId.SPIN_DAYS_PRE else self.post
        new_value = current + delta
        if not MIN_SPIN_DAYS <= new_value <= MAX_SPIN_DAYS:
            return False
        if which is ControlId.SPIN_DAYS_PRE:
            self.pre = new_value
        else:
            self.post = new_value
        return True

    def reset(self) -> None:
        """Return both counts to their defaults."""
        self.pre = DEFAULT_DAYS_PRE
        self.post = DEFAULT_DAYS_POST

    def labels(self) -> Tuple[str, str]:
        """The on-screen texts for the pre and post counts."""
        return f"- {self.pre:2d}", f"+ {self.post:2d}"