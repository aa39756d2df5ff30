from unittest import mock

import pytest

from tvpilot.datafile import DATAFILE_NAME, DataFile, DataFileError, default_data_directory


def test_existing_file_is_used(tmp_path):
    (tmp_path / DATAFILE_NAME).write_text("content")
    data = DataFile(tmp_path)
    assert data.path == tmp_path / DATAFILE_NAME
    assert data.new_data_file is False
    assert data.path.read_text() == "content"


def test_missing_file_is_created_empty(tmp_path):
    data = DataFile(tmp_path)
    assert data.new_data_file is True
    assert data.path.read_bytes() == b""


def test_missing_folder_is_created(tmp_path):
    folder = tmp_path / "a" / "b"
    data = DataFile(folder)
    assert folder.is_dir()
    assert data.path.exists()


def test_confirm_called_and_accepted(tmp_path):
    calls = []
    data = DataFile(tmp_path, confirm_create=lambda: calls.append(1) or True)
    assert calls == [1]
    assert data.new_data_file is True


def test_confirm_declined_raises(tmp_path):
    with pytest.raises(DataFileError):
        DataFile(tmp_path, confirm_create=lambda: False)
    assert not (tmp_path / DATAFILE_NAME).exists()


def test_confirm_not_asked_when_file_exists(tmp_path):
    (tmp_path / DATAFILE_NAME).write_text("")
    calls = []
    DataFile(tmp_path, confirm_create=lambda: calls.append(1) or True)
    assert calls == []


def test_folder_that_is_a_file_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(DataFileError):
        DataFile(blocker / "inner")


def test_default_data_directory_created(tmp_path):
    target = tmp_path / "appdata" / "TVpilot"
    with mock.patch("platformdirs.user_data_dir", return_value=str(target)) as patched:
        result = default_data_directory("TVpilot")
    assert result == target
    assert target.is_dir()
    assert patched.call_args[0][0] == "TVpilot"


def test_default_directory_used_when_none_given(tmp_path):
    target = tmp_path / "appdata"
    with mock.patch("platformdirs.user_data_dir", return_value=str(target)):
        data = DataFile()
    assert data.path == target / DATAFILE_NAME
    assert data.path.exists()