"""Frame-stamped logging.

Every line carries the seconds since start and the frame counter of the main
loop, then a component tag: ``[  1.234s F000074] [FILE] Moved a.png -> keep``.
"""

from __future__ import annotations
import sys
import time
from typing import Optional, TextIO


class Logger:
    """Writes tagged lines to a stream (stderr unless one is given)."""

    def __init__(self, stream: Optional[TextIO] = None, verbose: bool = False):
        self.started = time.perf_counter()
        self.frame = 0
        self.verbose = verbose
        self._stream = stream

    @property
    def elapsed(self) -> float:
        return time.perf_counter() - self.started

    def log(self, msg: str) -> None:
        stream = self._stream or sys.stderr
        try:
            stream.write(f"[{self.elapsed:7.3f}s F{self.frame:06d}] {msg}\n")
            stream.flush()
        except (OSError, ValueError):
            # closed or broken stream at interpreter shutdown
            pass

    def debug(self, msg: str) -> None:
        """Like log(), but only in verbose mode."""
        if self.verbose:
            self.log(msg)


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """The process-wide logger, created on first use."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def set_verbose(enabled: bool) -> None:
    get_logger().verbose = enabled


def log(msg: str) -> None:
    get_logger().log(msg)


def debug(msg: str) -> None:
    get_logger().debug(msg)


def get_frame() -> int:
    return get_logger().frame


def increment_frame() -> None:
    get_logger().frame += 1


def now() -> float:
    """Monotonic seconds, the clock status messages are timed with."""
    return time.perf_counter()
