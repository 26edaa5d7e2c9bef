"""Concurrency and I/O patterns: resource pools, timed runners, fan-out search and more."""

__version__ = "0.1.0"