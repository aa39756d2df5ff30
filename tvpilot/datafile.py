"""Location and creation of the show database file."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Union

import platformdirs

APP_NAME = "TVpilot"
DATAFILE_NAME = "tvpilot.dat"


class DataFileError(Exception):
    """The database file or its folder could not be found or created."""


def default_data_directory(app_name: str = APP_NAME) -> Path:
    """The per-user data folder for the application, created if missing."""
    directory = Path(platformdirs.user_data_dir(app_name, appauthor=False))
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DataFileError(f"cannot create data folder {directory}") from exc
    return directory


class DataFile:
    """The database file path; creates an empty database when none exists.

    ``confirm_create`` is asked before creating a new file; if it returns
    False, DataFileError is raised.
    """

    def __init__(
        self,
        directory: Optional[Union[str, Path]] = None,
        confirm_create: Optional[Callable[[], bool]] = None,
    ) -> None:
        if directory is None:
            folder = default_data_directory()
        else:
            folder = Path(directory)
            try:
                folder.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise DataFileError(f"cannot create data folder {folder}") from exc

        self.path = folder / DATAFILE_NAME
        self.new_data_file = False

        if self.path.exists():
            return

        if confirm_create is not None and not confirm_create():
            raise DataFileError("no database found and none was created")

        try:
            self.path.write_bytes(b"")
        except OSError as exc:
            raise DataFileError(f"cannot create database {self.path}") from exc
        self.new_data_file = True