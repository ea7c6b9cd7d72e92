"""Exceptions raised by the mathprog model, views and configuration.

All errors are raised synchronously to the caller. Where a Python built-in
exception carries the same meaning, the mathprog error also derives from it so
that callers may catch either.
"""

from __future__ import annotations


class MathProgError(Exception):
    """Base class for all mathprog errors."""


class DuplicateDescriptionError(MathProgError, ValueError):
    """A different variable with the same description already exists in the MP."""


class UnknownVariableError(MathProgError, KeyError):
    """A variable is referenced that is not a member of the MP."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep plain messages readable.
        return str(self.args[0]) if self.args else ""


class VariableInUseError(MathProgError, ValueError):
    """The variable is referenced by the objective or by a constraint."""


class InvalidParameterValueError(MathProgError, ValueError):
    """The value is not meaningful for the solver parameter."""


class ConflictingTimingLimitsError(MathProgError, ValueError):
    """Both a wall time limit and a CPU time limit are set."""


class UnsupportedTimingModeError(MathProgError, RuntimeError):
    """A CPU time limit is set but CPU time cannot be measured."""


class UnsupportedOperationError(MathProgError, TypeError):
    """Mutation attempted on an object that does not support it."""


class SolverError(MathProgError, RuntimeError):
    """The solving engine failed in a way it could not report as a result status."""
