"""
hash.py — Movie hash: a fast, stable 64-bit fingerprint for media files.

The hash is the file size plus the sum of every little-endian 64-bit word
in the first and the last 64 KB of the file, modulo 2**64. Only 128 KB are
read no matter how large the file is, so it identifies a video independent
of its name without reading the whole thing.

Not a cryptographic hash.
"""

from __future__ import annotations

import os
import string
import struct
from dataclasses import dataclass
from typing import BinaryIO, Union

from moviehash.errors import HashError, IoKind
from moviehash.misc.logger import logger

CHUNK_SIZE = 65_536  # 64 KB
WORD_MASK = 0xFFFFFFFFFFFFFFFF

# CHUNK_SIZE / 8 unsigned 64-bit words, little-endian regardless of host
_WORDS = struct.Struct(f"<{CHUNK_SIZE // 8}Q")

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class MovieHash:
    """An unsigned 64-bit movie hash. Compares and hashes by value."""

    value: int

    def __post_init__(self):
        if not 0 <= self.value <= WORD_MASK:
            raise ValueError(f"movie hash out of 64-bit range: {self.value}")

    @classmethod
    def from_path(cls, path: PathLike) -> MovieHash:
        return compute(path)

    @classmethod
    def from_hex(cls, text: str) -> MovieHash:
        if len(text) != 16 or not all(c in string.hexdigits for c in text):
            raise ValueError(f"movie hash must be 16 hex digits, got {text!r}")
        return cls(int(text, 16))

    def as_hex(self) -> str:
        return f"{self.value:016x}"

    def __str__(self) -> str:
        return self.as_hex()

    def __int__(self) -> int:
        return self.value


def _add_window(accumulator: int, f: BinaryIO) -> int:
    chunk = f.read(CHUNK_SIZE)
    if len(chunk) != CHUNK_SIZE:
        # short read: the file changed under us
        raise HashError.io(IoKind.UNEXPECTED_EOF)
    return (accumulator + sum(_WORDS.unpack(chunk))) & WORD_MASK


def compute(path: PathLike) -> MovieHash:
    """Return the movie hash of the file at ``path``.

    Raises HashError with kind SMALL_SIZE for files under CHUNK_SIZE bytes
    and kind IO for any failure to open, stat, seek or read the file.
    Raises TypeError when ``path`` is not a path (e.g. an int descriptor).
    """
    # rejects int file descriptors
    path = os.fspath(path)
    try:
        f = open(path, "rb")
    except OSError as exc:
        logger.debug(f"Cannot open {path}: {exc}")
        raise HashError.from_os_error(exc) from exc
    except ValueError as exc:
        # embedded NUL byte, rejected before reaching the OS
        logger.debug(f"Cannot open {path!r}: {exc}")
        raise HashError.io(IoKind.INVALID_INPUT) from exc

    with f:
        try:
            file_size = os.fstat(f.fileno()).st_size
            if file_size < CHUNK_SIZE:
                raise HashError.small_size()

            hash_value = _add_window(file_size, f)
            f.seek(file_size - CHUNK_SIZE, os.SEEK_SET)
            hash_value = _add_window(hash_value, f)
        except OSError as exc:
            logger.debug(f"I/O failure while hashing {path}: {exc}")
            raise HashError.from_os_error(exc) from exc
        except HashError as exc:
            logger.debug(f"Cannot hash {path}: {exc}")
            raise

    result = MovieHash(hash_value)
    logger.trace(f"{result} size={file_size} path={path}")
    return result
