"""moviehash — 64-bit movie hash fingerprints for media files."""

from moviehash.errors import ErrorKind, HashError, IoKind
from moviehash.hash import CHUNK_SIZE, MovieHash, compute

__all__ = [
    "CHUNK_SIZE",
    "ErrorKind",
    "HashError",
    "IoKind",
    "MovieHash",
    "compute",
]
