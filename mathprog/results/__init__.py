"""Solver results: status, duration, solution and the result itself."""

from mathprog.results.duration import ComputationTime
from mathprog.results.result import Result
from mathprog.results.solution import Solution
from mathprog.results.status import ResultStatus

__all__ = [
    "ResultStatus",
    "ComputationTime",
    "Solution",
    "Result",
]
