"""Wall-clock time in milliseconds."""

from __future__ import annotations

import time


def time_ms() -> int:
    """Return the current time since the epoch in whole milliseconds."""
    seconds, nanoseconds = divmod(time.time_ns(), 1_000_000_000)
    microseconds = nanoseconds // 1000
    if microseconds > 2:
        return seconds * 1000 + microseconds // 1000
    return seconds * 1000