"""Timing modes for solver time limits."""

from __future__ import annotations

import time
from enum import Enum

__all__ = ["TimingType", "cpu_timing_supported"]


class TimingType(Enum):
    """Clock a solver uses to enforce its time limit."""

    #: Elapsed real time.
    WALL_TIMING = "wall"
    #: CPU time consumed by the solving thread.
    CPU_TIMING = "cpu"


def cpu_timing_supported() -> bool:
    """True when the CPU time of the current thread can be measured."""
    if not hasattr(time, "thread_time"):
        return False
    try:
        time.thread_time()
    except OSError:
        return False
    return True
