"""Numeric identifiers for the application's dialogs, controls and menu commands."""

from enum import IntEnum


class DialogId(IntEnum):
    """Identifiers of the application's dialogs."""

    ARCHIVE = 105
    EPCHECK = 130
    SHOWS = 132
    SCHEDULE = 134
    NEW_SHOW = 135
    MESSAGES = 139
    SHOW_ZOOM = 151
    INPUT_BOX = 154


class ControlId(IntEnum):
    """Identifiers of controls inside the dialogs."""

    TAB1 = 1000
    BTN_LOAD = 1003
    BTN_SAVE = 1004
    BTN_DOWNLOAD = 1005
    BTN_DELETE_SHOW = 1006
    BTN_NEW_SHOW = 1007
    BTN_MESSAGES = 1008
    BTN_BREAK = 1009
    BTN_ABORT_DOWNLOAD = 1010
    BTN_RESET_DAYS = 1011
    BTN_EXPLORER = 1012
    BTN_CLEAR = 1013
    EDT_INPUT = 1020
    INPUT_PROMPT = 1021
    NEW_URL = 1022
    CHK_MISSED_ONLY = 1023
    SPIN_DAYS_POST = 1024
    SPIN_DAYS_PRE = 1025
    LIST_ARCHIVE = 1030
    SCHED_LIST = 1031
    SHOW_LIST = 1032
    EPISODES_LIST = 1033
    MESSAGES = 1040
    STATIC_DAYS_PRE = 1041
    STATIC_DAYS_POST = 1042
    ERR_COUNT = 1043
    PING_COUNT = 1044


class MenuCommand(IntEnum):
    """Commands offered by the context menus."""

    EPGUIDES_GO = 32780
    EPGUIDES_EDIT = 32781
    TVMAZE_GO = 32782
    TVMAZE_EDIT = 32783
    THETVDB_GO = 32784
    THETVDB_EDIT = 32785
    THETVDB_SEARCH = 32786
    IMDB_GO = 32787
    IMDB_EDIT = 32788
    ROOT_UNARCHIVE = 32791
    GOT_IT = 33000
    NOT_GOT_IT = 33001
    CLEAR = 33002
    UNARCHIVE = 33003
    ARCHIVE = 33004
    COPY_SHOW_TITLE = 33005
    COPY_EPISODE_TITLE = 33006
    COPY_EPNAME = 33007
    REFRESH_SHOW = 33008