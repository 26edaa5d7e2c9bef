"""A counting semaphore and a many-readers, one-writer lock built on it."""

from __future__ import annotations

import logging
import random
import threading
import time

log = logging.getLogger(__name__)

DEFAULT_MAX_PAUSE = 1.0


class Semaphore:
    """A bounded set of slots; acquiring blocks when full, releasing when empty."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._held = 0
        self._cond = threading.Condition()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._cond:
            return self._held

    def acquire(self, buffers: int) -> None:
        """Take ``buffers`` slots one at a time, waiting while none is free."""
        for _ in range(buffers):
            with self._cond:
                self._cond.wait_for(lambda: self._held < self._capacity)
                self._held += 1
                self._cond.notify_all()

    def release(self, buffers: int) -> None:
        """Give back ``buffers`` slots one at a time, waiting while none is held."""
        for _ in range(buffers):
            with self._cond:
                self._cond.wait_for(lambda: self._held > 0)
                self._held -= 1
                self._cond.notify_all()


class ReaderWriter:
    """Guards a shared resource for up to ``max_reads`` readers or one writer."""

    def __init__(
        self,
        name: str,
        max_reads: int,
        max_readers: int,
        max_pause: float = DEFAULT_MAX_PAUSE,
    ) -> None:
        self.name = name
        self.max_reads = max_reads
        self.max_readers = max_readers
        self.max_writers = 1
        self.max_pause = max_pause
        self._reader_control = Semaphore(max_reads)
        self._writes = 0
        self._write_cond = threading.Condition()
        self._shutdown = threading.Event()
        self._reads = 0
        self._reads_lock = threading.Lock()
        self._threads: list[threading.Thread] = []

    @property
    def running(self) -> bool:
        return any(thread.is_alive() for thread in self._threads)

    def read_lock(self) -> None:
        """Wait for any write to finish, then take one read slot."""
        with self._write_cond:
            self._write_cond.wait_for(lambda: self._writes == 0)
        self._reader_control.acquire(1)

    def read_unlock(self) -> None:
        """Give the read slot back."""
        self._reader_control.release(1)

    def write_lock(self) -> None:
        """Block new readers and take every read slot."""
        with self._write_cond:
            self._writes += 1
        self._reader_control.acquire(self.max_reads)

    def write_unlock(self) -> None:
        """Give every read slot back and let readers in again."""
        self._reader_control.release(self.max_reads)
        with self._write_cond:
            self._writes -= 1
            self._write_cond.notify_all()

    def _pause(self) -> None:
        time.sleep(random.uniform(0.0, self.max_pause))

    def _launch(self) -> None:
        self._threads = [
            threading.Thread(target=self._reader, args=(reader,), daemon=True)
            for reader in range(self.max_readers)
        ]
        self._threads.extend(
            threading.Thread(target=self._writer, daemon=True)
            for _ in range(self.max_writers)
        )
        for thread in self._threads:
            thread.start()

    def _reader(self, reader: int) -> None:
        while not self._shutdown.is_set():
            self._perform_read(reader)
        log.info("%s\t: #> Reader Shutdown", self.name)

    def _perform_read(self, reader: int) -> None:
        self.read_lock()
        try:
            with self._reads_lock:
                self._reads += 1
                count = self._reads
            log.info("%s\t: [%d] Start\t- [%d] Reads", self.name, reader, count)
            self._pause()
            with self._reads_lock:
                self._reads -= 1
                count = self._reads
            log.info("%s\t: [%d] Finish\t- [%d] Reads", self.name, reader, count)
        finally:
            self.read_unlock()

    def _writer(self) -> None:
        while not self._shutdown.is_set():
            self._perform_write()
        log.info("%s\t: #> Writer Shutdown", self.name)

    def _perform_write(self) -> None:
        if self._shutdown.wait(random.uniform(0.0, self.max_pause)):
            return
        log.info("%s\t: *****> Writing Pending", self.name)
        self.write_lock()
        try:
            log.info("%s\t: *****> Writing Start", self.name)
            self._pause()
            log.info("%s\t: *****> Writing Finish", self.name)
        finally:
            self.write_unlock()

    def stop(self) -> None:
        """Signal every reader and writer to stop and wait until they have."""
        log.info("%s\t: #####> Stop", self.name)
        self._shutdown.set()
        for thread in self._threads:
            thread.join()
        log.info("%s\t: #####> Stopped", self.name)


def start(name: str, max_reads: int, max_readers: int) -> ReaderWriter:
    """Create a reader/writer and start its reader threads and one writer."""
    rw = ReaderWriter(name, max_reads, max_readers)
    rw._launch()
    return rw


def shutdown(*reader_writers: ReaderWriter) -> None:
    """Stop all the given reader/writers concurrently."""
    stoppers = [threading.Thread(target=rw.stop) for rw in reader_writers]
    for thread in stoppers:
        thread.start()
    for thread in stoppers:
        thread.join()


def main(argv: list[str] | None = None) -> int:
    """Run two reader/writers for two seconds, then shut them down."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    log.info("Starting Process")

    first = start("First", 3, 6)
    second = start("Second", 2, 2)

    time.sleep(2)
    shutdown(first, second)

    log.info("Process Ended")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())