"""
errors.py — Failure taxonomy for movie hash computation.

Exactly two kinds of failure exist:
  - SMALL_SIZE: the file is shorter than one 64 KB window
  - IO:         the filesystem refused an open/stat/seek/read; the cause is
                kept as a portable IoKind rather than a raw errno
"""

from __future__ import annotations

import errno
from enum import Enum
from typing import Dict, Optional

SMALL_SIZE_MESSAGE = "file size is less than 64 KB"


class ErrorKind(str, Enum):
    SMALL_SIZE = "small_size"
    IO = "io"


class IoKind(str, Enum):
    """Portable I/O failure kinds. The value is the standard description."""

    NOT_FOUND = "entity not found"
    PERMISSION_DENIED = "permission denied"
    ALREADY_EXISTS = "entity already exists"
    WOULD_BLOCK = "operation would block"
    NOT_A_DIRECTORY = "not a directory"
    IS_A_DIRECTORY = "is a directory"
    DIRECTORY_NOT_EMPTY = "directory not empty"
    READ_ONLY_FILESYSTEM = "read-only filesystem or storage medium"
    FILESYSTEM_LOOP = "filesystem loop or indirection limit (e.g. symlink loop)"
    STALE_NETWORK_FILE_HANDLE = "stale network file handle"
    INVALID_INPUT = "invalid input parameter"
    INVALID_DATA = "invalid data"
    TIMED_OUT = "timed out"
    STORAGE_FULL = "no storage space"
    NOT_SEEKABLE = "seek on unseekable file"
    QUOTA_EXCEEDED = "filesystem quota exceeded"
    FILE_TOO_LARGE = "file too large"
    RESOURCE_BUSY = "resource busy"
    EXECUTABLE_FILE_BUSY = "executable file busy"
    DEADLOCK = "deadlock"
    CROSSES_DEVICES = "cross-device link or rename"
    TOO_MANY_LINKS = "too many links"
    INVALID_FILENAME = "invalid filename"
    ARGUMENT_LIST_TOO_LONG = "argument list too long"
    INTERRUPTED = "operation interrupted"
    UNSUPPORTED = "unsupported"
    UNEXPECTED_EOF = "unexpected end of file"
    OUT_OF_MEMORY = "out of memory"
    UNCATEGORIZED = "uncategorized error"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_os_error(cls, exc: OSError) -> IoKind:
        winerror = getattr(exc, "winerror", None)
        if winerror is not None and winerror in _WINERROR_KINDS:
            return _WINERROR_KINDS[winerror]
        return _ERRNO_KINDS.get(exc.errno, cls.UNCATEGORIZED)


def _errno_table() -> Dict[int, IoKind]:
    names = {
        "ENOENT": IoKind.NOT_FOUND,
        "EACCES": IoKind.PERMISSION_DENIED,
        "EPERM": IoKind.PERMISSION_DENIED,
        "EEXIST": IoKind.ALREADY_EXISTS,
        "EAGAIN": IoKind.WOULD_BLOCK,
        "EWOULDBLOCK": IoKind.WOULD_BLOCK,
        "ENOTDIR": IoKind.NOT_A_DIRECTORY,
        "EISDIR": IoKind.IS_A_DIRECTORY,
        "ENOTEMPTY": IoKind.DIRECTORY_NOT_EMPTY,
        "EROFS": IoKind.READ_ONLY_FILESYSTEM,
        "ELOOP": IoKind.FILESYSTEM_LOOP,
        "ESTALE": IoKind.STALE_NETWORK_FILE_HANDLE,
        "EINVAL": IoKind.INVALID_INPUT,
        "ETIMEDOUT": IoKind.TIMED_OUT,
        "ENOSPC": IoKind.STORAGE_FULL,
        "ESPIPE": IoKind.NOT_SEEKABLE,
        "EDQUOT": IoKind.QUOTA_EXCEEDED,
        "EFBIG": IoKind.FILE_TOO_LARGE,
        "EBUSY": IoKind.RESOURCE_BUSY,
        "ETXTBSY": IoKind.EXECUTABLE_FILE_BUSY,
        "EDEADLK": IoKind.DEADLOCK,
        "EXDEV": IoKind.CROSSES_DEVICES,
        "EMLINK": IoKind.TOO_MANY_LINKS,
        "ENAMETOOLONG": IoKind.INVALID_FILENAME,
        "E2BIG": IoKind.ARGUMENT_LIST_TOO_LONG,
        "EINTR": IoKind.INTERRUPTED,
        "ENOSYS": IoKind.UNSUPPORTED,
        "ENOMEM": IoKind.OUT_OF_MEMORY,
    }
    # not every errno exists on every platform
    return {
        getattr(errno, name): kind
        for name, kind in names.items()
        if hasattr(errno, name)
    }


_ERRNO_KINDS = _errno_table()

_WINERROR_KINDS: Dict[int, IoKind] = {
    2: IoKind.NOT_FOUND,  # ERROR_FILE_NOT_FOUND
    3: IoKind.NOT_FOUND,  # ERROR_PATH_NOT_FOUND
    5: IoKind.PERMISSION_DENIED,  # ERROR_ACCESS_DENIED
    8: IoKind.OUT_OF_MEMORY,  # ERROR_NOT_ENOUGH_MEMORY
    14: IoKind.OUT_OF_MEMORY,  # ERROR_OUTOFMEMORY
    17: IoKind.CROSSES_DEVICES,  # ERROR_NOT_SAME_DEVICE
    19: IoKind.READ_ONLY_FILESYSTEM,  # ERROR_WRITE_PROTECT
    32: IoKind.RESOURCE_BUSY,  # ERROR_SHARING_VIOLATION
    39: IoKind.STORAGE_FULL,  # ERROR_HANDLE_DISK_FULL
    80: IoKind.ALREADY_EXISTS,  # ERROR_FILE_EXISTS
    87: IoKind.INVALID_INPUT,  # ERROR_INVALID_PARAMETER
    112: IoKind.STORAGE_FULL,  # ERROR_DISK_FULL
    120: IoKind.UNSUPPORTED,  # ERROR_CALL_NOT_IMPLEMENTED
    123: IoKind.INVALID_FILENAME,  # ERROR_INVALID_NAME
    132: IoKind.NOT_SEEKABLE,  # ERROR_SEEK_ON_DEVICE
    145: IoKind.DIRECTORY_NOT_EMPTY,  # ERROR_DIR_NOT_EMPTY
    161: IoKind.INVALID_FILENAME,  # ERROR_BAD_PATHNAME
    170: IoKind.RESOURCE_BUSY,  # ERROR_BUSY
    183: IoKind.ALREADY_EXISTS,  # ERROR_ALREADY_EXISTS
    206: IoKind.INVALID_FILENAME,  # ERROR_FILENAME_EXCED_RANGE
    223: IoKind.FILE_TOO_LARGE,  # ERROR_FILE_TOO_LARGE
    267: IoKind.NOT_A_DIRECTORY,  # ERROR_DIRECTORY
    1131: IoKind.DEADLOCK,  # ERROR_POSSIBLE_DEADLOCK
    1142: IoKind.TOO_MANY_LINKS,  # ERROR_TOO_MANY_LINKS
    1295: IoKind.QUOTA_EXCEEDED,  # ERROR_DISK_QUOTA_EXCEEDED
}


class HashError(Exception):
    """Raised when a movie hash cannot be computed.

    Match on ``kind`` (always one of the two ErrorKind members); for
    ``ErrorKind.IO`` the cause is in ``io_kind``.
    """

    def __init__(self, kind: ErrorKind, io_kind: Optional[IoKind] = None) -> None:
        if (kind is ErrorKind.IO) != (io_kind is not None):
            raise ValueError("io_kind is required for IO errors and only for them")
        self.kind = kind
        self.io_kind = io_kind
        super().__init__(self.message)

    def __reduce__(self):
        return (type(self), (self.kind, self.io_kind))

    @classmethod
    def small_size(cls) -> HashError:
        return cls(ErrorKind.SMALL_SIZE)

    @classmethod
    def io(cls, io_kind: IoKind) -> HashError:
        return cls(ErrorKind.IO, io_kind)

    @classmethod
    def from_os_error(cls, exc: OSError) -> HashError:
        return cls.io(IoKind.from_os_error(exc))

    @property
    def message(self) -> str:
        if self.kind is ErrorKind.SMALL_SIZE:
            return SMALL_SIZE_MESSAGE
        return self.io_kind.value

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self.io_kind is None:
            return f"HashError({self.kind.name})"
        return f"HashError({self.kind.name}, {self.io_kind.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashError):
            return NotImplemented
        return (self.kind, self.io_kind) == (other.kind, other.io_kind)

    def __hash__(self) -> int:
        return hash((self.kind, self.io_kind))
