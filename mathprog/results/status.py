"""Outcome of a solver run."""

from __future__ import annotations

from enum import Enum

__all__ = ["ResultStatus"]


class ResultStatus(Enum):
    """Status reported by a solver, with the solutions it admits.

    ``OPTIMAL`` and ``FEASIBLE`` require a solution. ``INFEASIBLE`` and
    ``INFEASIBLE_OR_UNBOUNDED`` forbid one. ``UNBOUNDED`` admits one only when
    the program has a non-zero objective (a feasible point was found but the
    objective can be improved without limit). The remaining statuses admit a
    solution or none.
    """

    OPTIMAL = "optimal"
    FEASIBLE = "feasible"
    INFEASIBLE = "infeasible"
    INFEASIBLE_OR_UNBOUNDED = "infeasible_or_unbounded"
    UNBOUNDED = "unbounded"
    TIME_LIMIT_REACHED = "time_limit_reached"
    MEMORY_LIMIT_REACHED = "memory_limit_reached"
    ERROR = "error"

    @property
    def found_feasible(self) -> bool:
        """True when the status guarantees a feasible solution."""
        return self in (ResultStatus.OPTIMAL, ResultStatus.FEASIBLE)

    @property
    def requires_solution(self) -> bool:
        """True when a result with this status must carry a solution."""
        return self.found_feasible

    @property
    def forbids_solution(self) -> bool:
        """True when a result with this status cannot carry a solution."""
        return self in (ResultStatus.INFEASIBLE, ResultStatus.INFEASIBLE_OR_UNBOUNDED)

    def check_solution(self, has_solution: bool, zero_objective: bool) -> None:
        """Check that a solution may (or may not) accompany this status.

        Args:
            has_solution: Whether the result carries a solution.
            zero_objective: Whether the solved program has the zero objective.

        Raises:
            ValueError: If the combination is not admissible.
        """
        if has_solution:
            if self.forbids_solution:
                raise ValueError(f"A result with status {self.name} has no solution.")
            if self is ResultStatus.UNBOUNDED and zero_objective:
                raise ValueError(
                    "An unbounded result with a solution requires a non-zero objective."
                )
        elif self.requires_solution:
            raise ValueError(f"A result with status {self.name} requires a solution.")

    @classmethod
    def from_string(cls, value: str) -> "ResultStatus":
        """Parse a case-insensitive status name ("optimal", "TIME_LIMIT_REACHED").

        Raises:
            ValueError: If the string matches no status.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid result status '{value}'. Valid values are: {valid}"
            ) from None
