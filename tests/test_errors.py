"""Tests for errors.py — error kinds, I/O classification and messages."""

import errno
import pickle
from concurrent.futures import ProcessPoolExecutor
from types import SimpleNamespace

import pytest

from moviehash.errors import ErrorKind, HashError, IoKind
from moviehash.hash import compute


@pytest.mark.parametrize(
    "err, message",
    [
        (HashError.small_size(), "file size is less than 64 KB"),
        (HashError.io(IoKind.NOT_FOUND), "entity not found"),
        (HashError.io(IoKind.INVALID_FILENAME), "invalid filename"),
        (HashError.io(IoKind.PERMISSION_DENIED), "permission denied"),
    ],
)
def test_human_readable_messages(err, message):
    assert str(err) == message
    assert f"{err}" == message


def test_error_kinds_are_closed():
    assert set(ErrorKind) == {ErrorKind.SMALL_SIZE, ErrorKind.IO}


def test_io_kind_str_is_description():
    assert str(IoKind.NOT_FOUND) == "entity not found"
    assert str(IoKind.UNEXPECTED_EOF) == "unexpected end of file"


def test_io_error_requires_io_kind():
    with pytest.raises(ValueError):
        HashError(ErrorKind.IO)
    with pytest.raises(ValueError):
        HashError(ErrorKind.SMALL_SIZE, IoKind.NOT_FOUND)


def test_equality():
    assert HashError.small_size() == HashError.small_size()
    assert HashError.io(IoKind.NOT_FOUND) == HashError.io(IoKind.NOT_FOUND)
    assert HashError.io(IoKind.NOT_FOUND) != HashError.io(IoKind.PERMISSION_DENIED)
    assert HashError.io(IoKind.NOT_FOUND) != HashError.small_size()
    assert len({HashError.small_size(), HashError.small_size()}) == 1


def test_repr():
    assert repr(HashError.small_size()) == "HashError(SMALL_SIZE)"
    assert repr(HashError.io(IoKind.NOT_FOUND)) == "HashError(IO, NOT_FOUND)"


@pytest.mark.parametrize(
    "exc, kind",
    [
        (FileNotFoundError(errno.ENOENT, "No such file"), IoKind.NOT_FOUND),
        (PermissionError(errno.EACCES, "Permission denied"), IoKind.PERMISSION_DENIED),
        (PermissionError(errno.EPERM, "Operation not permitted"), IoKind.PERMISSION_DENIED),
        (IsADirectoryError(errno.EISDIR, "Is a directory"), IoKind.IS_A_DIRECTORY),
        (OSError(errno.ENAMETOOLONG, "File name too long"), IoKind.INVALID_FILENAME),
        (OSError(errno.ESPIPE, "Illegal seek"), IoKind.NOT_SEEKABLE),
        (OSError(errno.EINVAL, "Invalid argument"), IoKind.INVALID_INPUT),
        (OSError("no errno at all"), IoKind.UNCATEGORIZED),
        (OSError(99999, "made up"), IoKind.UNCATEGORIZED),
    ],
)
def test_from_os_error(exc, kind):
    assert IoKind.from_os_error(exc) is kind
    assert HashError.from_os_error(exc) == HashError.io(kind)


def test_from_os_error_prefers_winerror():
    # ERROR_INVALID_NAME arrives as errno EINVAL on Windows
    exc = SimpleNamespace(errno=errno.EINVAL, winerror=123)
    assert IoKind.from_os_error(exc) is IoKind.INVALID_FILENAME


def test_from_os_error_unknown_winerror_falls_back_to_errno():
    exc = SimpleNamespace(errno=errno.ENOENT, winerror=424242)
    assert IoKind.from_os_error(exc) is IoKind.NOT_FOUND


@pytest.mark.parametrize(
    "winerror, kind",
    [
        (80, IoKind.ALREADY_EXISTS),  # ERROR_FILE_EXISTS
        (161, IoKind.INVALID_FILENAME),  # ERROR_BAD_PATHNAME
        (183, IoKind.ALREADY_EXISTS),  # ERROR_ALREADY_EXISTS
        (132, IoKind.NOT_SEEKABLE),  # ERROR_SEEK_ON_DEVICE
    ],
)
def test_from_os_error_windows_codes(winerror, kind):
    # Python translates ERROR_BAD_PATHNAME to ENOENT; the winerror must win
    exc = SimpleNamespace(errno=errno.ENOENT, winerror=winerror)
    assert IoKind.from_os_error(exc) is kind


@pytest.mark.parametrize(
    "err", [HashError.small_size(), HashError.io(IoKind.NOT_FOUND)]
)
def test_pickle_round_trip(err):
    restored = pickle.loads(pickle.dumps(err))
    assert restored == err
    assert str(restored) == str(err)


def test_error_crosses_process_boundary(tmp_path):
    missing = str(tmp_path / "missing.mkv")
    with ProcessPoolExecutor(max_workers=1) as executor:
        future = executor.submit(compute, missing)
        with pytest.raises(HashError) as exc_info:
            future.result()
    assert exc_info.value == HashError.io(IoKind.NOT_FOUND)
