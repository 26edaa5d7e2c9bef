"""Download a URL and copy its body to any number of writers."""

from __future__ import annotations

import argparse
import sys
import urllib.error
import urllib.request
from typing import BinaryIO

DEFAULT_URL = "https://example.com/"
CHUNK_SIZE = 32 * 1024


def fetch(url: str, *destinations: BinaryIO) -> int:
    """GET ``url`` and write its body to every destination; return its length.

    An error status still has its body copied; failures to connect raise
    ``urllib.error.URLError``.
    """
    try:
        response = urllib.request.urlopen(url)
    except urllib.error.HTTPError as exc:
        response = exc
    total = 0
    with response:
        while chunk := response.read(CHUNK_SIZE):
            for destination in destinations:
                destination.write(chunk)
            total += len(chunk)
    return total


def main(argv: list[str] | None = None) -> int:
    """Print a URL's body, optionally saving a copy to a file."""
    parser = argparse.ArgumentParser(description="Download a URL.")
    parser.add_argument("url", nargs="?", default=DEFAULT_URL)
    parser.add_argument("output", nargs="?", default=None)
    args = parser.parse_args(argv)

    sys.stdout.flush()
    stdout = sys.stdout.buffer
    try:
        if args.output is None:
            fetch(args.url, stdout)
        else:
            with open(args.output, "wb") as file:
                fetch(args.url, stdout, file)
    except (urllib.error.URLError, OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    finally:
        stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())