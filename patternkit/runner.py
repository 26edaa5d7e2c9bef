"""Run a sequence of tasks under an overall deadline, stoppable by interrupt."""

from __future__ import annotations

import logging
import queue
import signal
import threading
import time
from typing import Callable

log = logging.getLogger(__name__)

TIMEOUT_SECONDS = 3.0

Task = Callable[[int], object]


class RunnerTimeout(Exception):
    """Raised when the tasks do not finish before the deadline."""

    def __init__(self, message: str = "received timeout") -> None:
        super().__init__(message)


class RunnerInterrupted(Exception):
    """Raised when an interrupt arrives before all tasks have started."""

    def __init__(self, message: str = "received interrupt") -> None:
        super().__init__(message)


class Runner:
    """Runs tasks in order; the timeout counts from construction."""

    def __init__(self, timeout: float) -> None:
        self._deadline = time.monotonic() + timeout
        self._interrupted = threading.Event()
        self._tasks: list[Task] = []

    def add(self, *tasks: Task) -> None:
        """Append tasks; each is called with its position in the list."""
        self._tasks.extend(tasks)

    def interrupt(self) -> None:
        """Ask the runner to stop before the next task starts."""
        self._interrupted.set()

    def start(self) -> None:
        """Run every task, raising on timeout, interrupt or a task's own error."""
        previous = self._install_interrupt_handler()
        outcome: queue.Queue[BaseException | None] = queue.Queue(maxsize=1)

        def execute() -> None:
            try:
                self._run()
            except BaseException as exc:
                outcome.put(exc)
            else:
                outcome.put(None)

        threading.Thread(target=execute, daemon=True).start()
        try:
            remaining = max(0.0, self._deadline - time.monotonic())
            try:
                error = outcome.get(timeout=remaining)
            except queue.Empty:
                raise RunnerTimeout() from None
        finally:
            if previous is not None:
                signal.signal(signal.SIGINT, previous)
        if error is not None:
            raise error

    def _run(self) -> None:
        for task_id, task in enumerate(self._tasks):
            if self._interrupted.is_set():
                raise RunnerInterrupted()
            task(task_id)

    def _install_interrupt_handler(self):
        if threading.current_thread() is not threading.main_thread():
            return None
        return signal.signal(signal.SIGINT, lambda signum, frame: self.interrupt())


def create_task() -> Task:
    """Return a task that sleeps for as many seconds as its id."""

    def task(task_id: int) -> None:
        log.info("Processor - Task #%d.", task_id)
        time.sleep(task_id)

    return task


def main(argv: list[str] | None = None) -> int:
    """Run five sleeping tasks under a three-second deadline."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    log.info("Starting work.")

    runner = Runner(TIMEOUT_SECONDS)
    runner.add(*(create_task() for _ in range(5)))

    try:
        runner.start()
    except RunnerTimeout:
        log.info("Terminating due to timeout.")
        return 1
    except RunnerInterrupted:
        log.info("Terminating due to interrupt.")
        return 2

    log.info("Process ended.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())