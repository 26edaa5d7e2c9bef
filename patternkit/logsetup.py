"""Loggers that write prefixed, timestamped lines to chosen destinations."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from types import TracebackType

DEFAULT_ERROR_PATH = "errors.txt"


class _LineFormatter(logging.Formatter):
    def __init__(
        self, prefix: str, *, microseconds: bool = False, long_file: bool = False
    ) -> None:
        super().__init__()
        self._prefix = prefix
        self._microseconds = microseconds
        self._long_file = long_file

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created)
        when = stamp.strftime("%Y/%m/%d %H:%M:%S")
        if self._microseconds:
            when += f".{stamp.microsecond:06d}"
        where = record.pathname if self._long_file else record.filename
        return f"{self._prefix}{when} {where}:{record.lineno}: {record.getMessage()}"


def _logger(name: str, prefix: str, *handlers: logging.Handler) -> logging.Logger:
    logger = logging.Logger(name)
    logger.propagate = False
    formatter = _LineFormatter(prefix)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


@dataclass
class Loggers:
    """Four loggers of rising importance; use as a context manager to close files."""

    trace: logging.Logger
    info: logging.Logger
    warning: logging.Logger
    error: logging.Logger

    def __enter__(self) -> Loggers:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        for logger in (self.trace, self.info, self.warning, self.error):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)


def configure_loggers(error_path: str | Path = DEFAULT_ERROR_PATH) -> Loggers:
    """Build the loggers; errors are appended to ``error_path`` and standard error.

    Trace messages are discarded; info and warnings go to standard output.
    Raises ``OSError`` if the error file cannot be opened.
    """
    error_file = logging.FileHandler(error_path, mode="a", encoding="utf-8")
    return Loggers(
        trace=_logger("TRACE", "TRACE: ", logging.NullHandler()),
        info=_logger("INFO", "INFO: ", logging.StreamHandler(sys.stdout)),
        warning=_logger("WARNING", "WARNING: ", logging.StreamHandler(sys.stdout)),
        error=_logger(
            "ERROR", "ERROR: ", error_file, logging.StreamHandler(sys.stderr)
        ),
    )


def _standard_logger() -> logging.Logger:
    logger = logging.Logger("STANDARD")
    logger.propagate = False
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_LineFormatter("TRACE: ", microseconds=True, long_file=True))
    logger.addHandler(handler)
    return logger


def main(argv: list[str] | None = None) -> int:
    """Write one message with each kind of logger."""
    parser = argparse.ArgumentParser(description="Write messages to custom loggers.")
    parser.add_argument("--errors", default=DEFAULT_ERROR_PATH)
    args = parser.parse_args(argv)

    _standard_logger().info("message")

    try:
        loggers = configure_loggers(args.errors)
    except OSError as exc:
        print("Failed to open error log file:", exc, file=sys.stderr)
        return 1
    with loggers:
        loggers.trace.info("I have something standard to say")
        loggers.info.info("Special Information")
        loggers.warning.info("There is something you need to know about")
        loggers.error.info("Something has failed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())