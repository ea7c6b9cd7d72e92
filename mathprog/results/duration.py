"""Time spent by a solver."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

__all__ = ["ComputationTime"]


@dataclass(frozen=True)
class ComputationTime:
    """Wall-clock time and, when measured, CPU time of a solve.

    Attributes:
        wall_time: Elapsed real time, non-negative.
        cpu_time: CPU time of the solving thread, non-negative; None when it
            was not measured.
    """

    wall_time: timedelta
    cpu_time: Optional[timedelta] = None

    def __post_init__(self) -> None:
        if not isinstance(self.wall_time, timedelta):
            raise TypeError(f"wall_time must be a timedelta, got {self.wall_time!r}")
        if self.wall_time < timedelta(0):
            raise ValueError(f"wall_time must be non-negative, got {self.wall_time}.")
        if self.cpu_time is not None:
            if not isinstance(self.cpu_time, timedelta):
                raise TypeError(f"cpu_time must be a timedelta, got {self.cpu_time!r}")
            if self.cpu_time < timedelta(0):
                raise ValueError(f"cpu_time must be non-negative, got {self.cpu_time}.")

    @classmethod
    def of_seconds(
        cls, wall_seconds: float, cpu_seconds: Optional[float] = None
    ) -> "ComputationTime":
        """Build from durations in seconds."""
        cpu = None if cpu_seconds is None else timedelta(seconds=cpu_seconds)
        return cls(timedelta(seconds=wall_seconds), cpu)

    def __str__(self) -> str:
        text = f"wall {self.wall_time.total_seconds():.3f}s"
        if self.cpu_time is not None:
            text += f", cpu {self.cpu_time.total_seconds():.3f}s"
        return text
