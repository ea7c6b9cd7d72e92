"""What a solver returns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mathprog.parameters.configuration import Configuration
from mathprog.results.duration import ComputationTime
from mathprog.results.solution import Solution
from mathprog.results.status import ResultStatus

__all__ = ["Result"]


@dataclass(frozen=True)
class Result:
    """Status, duration, configuration and optional solution of a solve.

    The configuration is copied on construction, so later changes to the
    caller's configuration do not show through. Whether a solution must, may
    or must not be present depends on the status (see ``ResultStatus``).

    Attributes:
        status: Outcome of the solve.
        duration: Time spent solving.
        configuration: Parameters the solver ran with.
        solution: Solution found, if any.

    Raises:
        ValueError: If the solution does not fit the status.
    """

    status: ResultStatus
    duration: ComputationTime
    configuration: Configuration
    solution: Optional[Solution] = None

    # Holds a mutable Configuration.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.status, ResultStatus):
            raise TypeError(f"Expected a ResultStatus, got {self.status!r}")
        if not isinstance(self.duration, ComputationTime):
            raise TypeError(f"Expected a ComputationTime, got {self.duration!r}")
        if not isinstance(self.configuration, Configuration):
            raise TypeError(f"Expected a Configuration, got {self.configuration!r}")
        if self.solution is not None and not isinstance(self.solution, Solution):
            raise TypeError(f"Expected a Solution, got {self.solution!r}")
        zero_objective = self.solution is not None and self.solution.mp.objective.is_zero
        self.status.check_solution(self.solution is not None, zero_objective)
        object.__setattr__(self, "configuration", self.configuration.copy())

    @property
    def found_feasible(self) -> bool:
        """True when the status guarantees a feasible solution."""
        return self.status.found_feasible
