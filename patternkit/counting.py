"""Shared counters updated by several threads, with and without protection."""

from __future__ import annotations

import argparse
import threading
import time
from collections import Counter
from typing import Callable, Iterable

DEFAULT_WORKERS = 2
DEFAULT_ITERATIONS = 1000
DEFAULT_DURATION = 3.0
DEFAULT_INTERVAL = 0.25


class AtomicCounter:
    """An integer whose updates and reads never interleave."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def add(self, delta: int = 1) -> int:
        """Add ``delta`` and return the new value."""
        with self._lock:
            self._value += delta
            return self._value

    def load(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value


def _run_workers(workers: int, body: Callable[[], None]) -> None:
    if workers < 1:
        raise ValueError("at least one worker is needed")
    barrier = threading.Barrier(workers)

    def work() -> None:
        barrier.wait()
        body()

    threads = [threading.Thread(target=work) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def race_increment(
    workers: int = DEFAULT_WORKERS, iterations: int = DEFAULT_ITERATIONS
) -> int:
    """Increment an unprotected counter; updates may be lost, so the total can fall short."""
    counter = 0

    def body() -> None:
        nonlocal counter
        for _ in range(iterations):
            value = counter
            time.sleep(0)
            counter = value + 1

    _run_workers(workers, body)
    return counter


def atomic_increment(
    workers: int = DEFAULT_WORKERS, iterations: int = DEFAULT_ITERATIONS
) -> int:
    """Increment an :class:`AtomicCounter`; no update is lost."""
    counter = AtomicCounter()

    def body() -> None:
        for _ in range(iterations):
            counter.add(1)
            time.sleep(0)

    _run_workers(workers, body)
    return counter.load()


def locked_increment(
    workers: int = DEFAULT_WORKERS, iterations: int = DEFAULT_ITERATIONS
) -> int:
    """Increment a counter inside a critical section guarded by a lock."""
    counter = 0
    lock = threading.Lock()

    def body() -> None:
        nonlocal counter
        for _ in range(iterations):
            with lock:
                value = counter
                time.sleep(0)
                counter = value + 1

    _run_workers(workers, body)
    return counter


def work_until_shutdown(
    names: Iterable[str],
    duration: float = DEFAULT_DURATION,
    interval: float = DEFAULT_INTERVAL,
) -> dict[str, int]:
    """Let each named worker work in rounds until ``duration`` has passed.

    Returns how many rounds each worker did.
    """
    shutdown = threading.Event()
    rounds: Counter[str] = Counter()
    lock = threading.Lock()

    def work(name: str) -> None:
        while True:
            print(f"Doing {name} Work")
            with lock:
                rounds[name] += 1
            time.sleep(interval)
            if shutdown.is_set():
                print(f"Shutting {name} Down")
                return

    threads = [threading.Thread(target=work, args=(name,)) for name in names]
    for thread in threads:
        thread.start()
    time.sleep(duration)
    print("Shutdown Now")
    shutdown.set()
    for thread in threads:
        thread.join()
    return dict(rounds)


def main(argv: list[str] | None = None) -> int:
    """Run one of the counter demonstrations, or all of them."""
    parser = argparse.ArgumentParser(description="Update a counter from threads.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("race", "atomic", "mutex", "shutdown", "all"),
        default="all",
    )
    args = parser.parse_args(argv)

    if args.demo in ("race", "all"):
        print("Final Counter:", race_increment())
    if args.demo in ("atomic", "all"):
        print("Final Counter:", atomic_increment())
    if args.demo in ("mutex", "all"):
        print(f"Final Counter: {locked_increment()}")
    if args.demo in ("shutdown", "all"):
        work_until_shutdown(("A", "B"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())