"""Hot path profiling for the encoder, enabled through JSONEMIT_PROFILE."""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from typing import Any

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "JSONEMIT_PROFILE" in os.environ

_LOGGER = logging.getLogger("jsonemit")


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during encoding."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, chars_to_process: int = 0):
            self.func_name = func_name
            self.chars = chars_to_process
            self.start_time = 0

        def __enter__(self) -> ProfileContext:
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # No-op stand-ins when profiling is disabled
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> ProfileContext:
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


def log_hot_path_stats(logger: logging.Logger | None = None) -> int:
    """
    Reports collected hot path statistics through logging.

    One INFO record is emitted per profiled function, slowest first.
    Returns the number of records written.
    """
    log = logger if logger is not None else _LOGGER
    stats = sorted(
        get_hot_path_stats().values(),
        key=lambda s: s.total_time_ns,
        reverse=True,
    )
    for entry in stats:
        log.info(
            "%s: %d calls, %.3f ms, %d chars",
            entry.function_name,
            entry.call_count,
            entry.total_time_ns / 1_000_000,
            entry.chars_processed,
        )
    return len(stats)
