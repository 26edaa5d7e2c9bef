"""A bounded pool of reusable resources that can be shared between threads."""

from __future__ import annotations

import itertools
import logging
import queue
import random
import threading
import time
from dataclasses import dataclass, field
from types import TracebackType
from typing import Callable, Generic, Protocol, TypeVar

log = logging.getLogger(__name__)

MAX_WORKERS = 100
POOLED_RESOURCES = 2


class Closer(Protocol):
    def close(self) -> object: ...


R = TypeVar("R", bound=Closer)


class PoolClosedError(Exception):
    """Raised when a resource is requested from a closed pool."""

    def __init__(self, message: str = "pool has been closed") -> None:
        super().__init__(message)


class Pool(Generic[R]):
    """Keeps up to ``size`` idle resources; creates new ones on demand."""

    def __init__(self, factory: Callable[[], R], size: int) -> None:
        if size <= 0:
            raise ValueError("size value too small")
        self._factory = factory
        self._resources: queue.Queue[R] = queue.Queue(maxsize=size)
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def acquire(self) -> R:
        """Return an idle resource, or a fresh one from the factory."""
        with self._lock:
            if self._closed:
                raise PoolClosedError()
            try:
                resource = self._resources.get_nowait()
            except queue.Empty:
                pass
            else:
                log.info("Acquire: Shared Resource")
                return resource
        log.info("Acquire: New Resource")
        return self._factory()

    def release(self, resource: R) -> None:
        """Put a resource back, closing it if the pool is closed or full."""
        with self._lock:
            if self._closed:
                resource.close()
                return
            try:
                self._resources.put_nowait(resource)
            except queue.Full:
                log.info("Release: Closing")
                resource.close()
            else:
                log.info("Release: In Queue")

    def close(self) -> None:
        """Stop the pool and close every idle resource; repeated calls do nothing."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            while True:
                try:
                    resource = self._resources.get_nowait()
                except queue.Empty:
                    break
                resource.close()

    def __enter__(self) -> Pool[R]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


@dataclass
class DBConnection:
    """A stand-in for a database connection."""

    id: int
    closed: bool = field(default=False, compare=False)

    def close(self) -> None:
        """Mark the connection closed."""
        self.closed = True
        log.info("Close: Connection %d", self.id)


_ids = itertools.count(1)
_ids_lock = threading.Lock()


def connection_factory() -> DBConnection:
    """Create a connection with a new unique id."""
    with _ids_lock:
        conn_id = next(_ids)
    log.info("Create: New Connection %d", conn_id)
    return DBConnection(conn_id)


def _random_pause() -> None:
    time.sleep(random.randrange(1000) / 1_000_000)


def _perform_query(query: int, pool: Pool[DBConnection]) -> None:
    try:
        conn = pool.acquire()
    except PoolClosedError as exc:
        log.error("%s", exc)
        return
    try:
        _random_pause()
        log.info("Query: QID[%d] CID[%d]", query, conn.id)
    finally:
        pool.release(conn)


def main(argv: list[str] | None = None) -> int:
    """Run concurrent queries that share a small pool of connections."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    pool: Pool[DBConnection] = Pool(connection_factory, POOLED_RESOURCES)

    threads = []
    for query in range(MAX_WORKERS):
        _random_pause()
        thread = threading.Thread(target=_perform_query, args=(query, pool))
        thread.start()
        threads.append(thread)
    for thread in threads:
        thread.join()

    log.info("Shutdown Program.")
    pool.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())