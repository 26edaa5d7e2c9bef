"""Word counting over plain text."""

from __future__ import annotations

import argparse
from pathlib import Path

DEFAULT_FILENAME = "gowords.txt"


def count_words(text: str) -> int:
    """Return the number of whitespace-separated words in ``text``."""
    return len(text.split())


def main(argv: list[str] | None = None) -> int:
    """Count the words of a text file and report the total."""
    parser = argparse.ArgumentParser(description="Count the words in a text file.")
    parser.add_argument("filename", nargs="?", default=DEFAULT_FILENAME)
    args = parser.parse_args(argv)

    try:
        text = Path(args.filename).read_text(encoding="utf-8")
    except OSError as exc:
        print("There was an error opening the file:", exc)
        return 1

    print(f"There are {count_words(text)} words in your text. ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())