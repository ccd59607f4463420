"""Timestamps are integer nanoseconds since the Unix epoch."""

import time


def now_ns() -> int:
    return time.time_ns()
