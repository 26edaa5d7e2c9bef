"""Move records in batches from a source that pulls them to a sink that stores them."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence

DEFAULT_BATCH = 10


@dataclass
class Data:
    """One record travelling through the pipeline."""

    line: str = ""


class Puller(Protocol):
    """Fills a record in place."""

    def pull(self, data: Data) -> None: ...


class Storer(Protocol):
    """Takes a finished record away."""

    def store(self, data: Data) -> None: ...


class BatchError(Exception):
    """A batch stopped part way; ``done`` records were handled before ``error``."""

    def __init__(self, done: int, error: BaseException) -> None:
        super().__init__(f"batch stopped after {done} records: {error}")
        self.done = done
        self.error = error


@dataclass
class Xenia:
    """A flaky source: it yields data, reaches its end, or fails at random."""

    rng: Any = field(default_factory=random.Random)

    def pull(self, data: Data) -> None:
        roll = self.rng.randrange(10)
        if roll in (1, 9):
            raise EOFError("EOF")
        if roll == 5:
            raise OSError("Error reading data from Xenia")
        data.line = "Data"
        print("In:", data.line)


@dataclass
class Pillar:
    """A sink that writes every record to standard output."""

    def store(self, data: Data) -> None:
        print("Out:", data.line)


@dataclass
class System:
    """Pairs a source with a sink, acting as both."""

    puller: Puller = field(default_factory=Xenia)
    storer: Storer = field(default_factory=Pillar)

    def pull(self, data: Data) -> None:
        self.puller.pull(data)

    def store(self, data: Data) -> None:
        self.storer.store(data)


def pull(puller: Puller, batch: Sequence[Data]) -> int:
    """Fill every record of ``batch``; return how many were filled."""
    for done, data in enumerate(batch):
        try:
            puller.pull(data)
        except Exception as exc:
            raise BatchError(done, exc) from exc
    return len(batch)


def store(storer: Storer, batch: Sequence[Data]) -> int:
    """Store every record of ``batch``; return how many were stored."""
    for done, data in enumerate(batch):
        try:
            storer.store(data)
        except Exception as exc:
            raise BatchError(done, exc) from exc
    return len(batch)


def copy_data(system: System, batch: int) -> int:
    """Copy records in batches until the source is exhausted.

    Returns the number of records stored. Any failure other than the end of
    the source is raised once the records pulled before it are stored.
    """
    if batch < 1:
        raise ValueError("batch must be at least 1")
    records = [Data() for _ in range(batch)]
    total = 0
    while True:
        failure: BaseException | None = None
        try:
            count = pull(system, records)
        except BatchError as exc:
            count, failure = exc.done, exc.error

        if count:
            try:
                store(system, records[:count])
            except BatchError as exc:
                raise exc.error from None
            total += count

        if failure is None:
            continue
        if isinstance(failure, EOFError):
            return total
        raise failure


def main(argv: list[str] | None = None) -> int:
    """Copy from a flaky source to standard output until it runs dry."""
    parser = argparse.ArgumentParser(description="Copy records in batches.")
    parser.add_argument("--batch", type=int, default=DEFAULT_BATCH)
    args = parser.parse_args(argv)

    try:
        copy_data(System(), args.batch)
    except OSError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())