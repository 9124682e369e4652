"""Wall-clock timing for provisioning steps.

- `PerformanceTimer` context manager for timing a block (sync or awaited)
- `format_duration` for human-readable elapsed times
"""

import time
from collections.abc import Callable
from typing import Any

from .scaffold_logging import get_logger


def format_duration(duration_ms: float) -> str:
    """Render a duration the way step progress lines show it."""
    if duration_ms < 1000:
        return f"{duration_ms:.0f} ms"
    return f"{duration_ms / 1000:.1f} s"


class PerformanceTimer:
    """Context manager for timing code blocks.

    The duration is available as an attribute after the context exits.
    Works around awaited code too, since only the enter/exit instants are
    measured.

    Attributes:
        operation_name: Name of the operation being timed.
        auto_log: Whether to automatically log timing.
        duration_ms: Execution time in milliseconds.

    Example:
        >>> with PerformanceTimer("Installing dependencies..") as timer:
        ...     await runner.run(command, cwd)
        >>> print(format_duration(timer.duration_ms))
    """

    def __init__(
        self,
        operation_name: str,
        auto_log: bool = True,
        clock: Callable[[], float] = time.perf_counter,
    ):
        """Initialize the timer.

        Args:
            operation_name: Name of the operation being timed.
            auto_log: Whether to log timing automatically on exit.
            clock: Monotonic clock returning seconds.
        """
        self.operation_name = operation_name
        self.auto_log = auto_log
        self._clock = clock
        self.start_time: float = 0
        self.end_time: float = 0
        self.duration_ms: float = 0

    def __enter__(self) -> "PerformanceTimer":
        """Start timing."""
        self.start_time = self._clock()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Stop timing and optionally log."""
        self.end_time = self._clock()
        self.duration_ms = (self.end_time - self.start_time) * 1000

        if self.auto_log:
            logger = get_logger()
            extra = {
                "duration_ms": self.duration_ms,
                "operation": self.operation_name,
            }
            if exc_type is None:
                logger.debug(
                    f"[PERF] {self.operation_name}: {self.duration_ms:.2f}ms",
                    extra=extra,
                )
            else:
                logger.debug(
                    f"[PERF] {self.operation_name} failed after {self.duration_ms:.2f}ms",
                    extra=extra,
                )


__all__ = ["PerformanceTimer", "format_duration"]
