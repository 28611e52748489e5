"""
__main__.py — Print the movie hash of each file given on the command line.

    python -m moviehash movie.mkv other.avi

Output mirrors the coreutils *sum tools: "<hash>  <path>" per line.
Failures are logged and the remaining paths are still hashed.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from moviehash.errors import HashError
from moviehash.hash import compute
from moviehash.misc.logger import configure, logger
from moviehash.models.configuration import Configuration


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="moviehash")
    p.add_argument("paths", nargs="+", metavar="PATH", help="Media file to hash")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = p.parse_args(argv)

    configuration = Configuration()
    if args.verbose:
        configuration.log_level = "DEBUG"
    configure(configuration)

    failed = 0
    for path in args.paths:
        try:
            movie_hash = compute(path)
        except HashError as ex:
            logger.error(f"{path}: {ex}")
            failed += 1
            continue
        print(f"{movie_hash}  {path}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
