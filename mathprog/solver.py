"""Boundary between the program model and solving engines.

Adapters to concrete engines implement ``Solver``. Nothing in this package
solves programs; it only defines what an adapter receives and returns.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from mathprog.logging import get_logger, program_label
from mathprog.model.base import ReadableMP
from mathprog.model.immutable import MP
from mathprog.model.view import MPView
from mathprog.parameters.configuration import Configuration
from mathprog.results.result import Result

LOGGER = get_logger(__name__)

__all__ = ["Solver", "freeze"]


def freeze(mp: ReadableMP) -> ReadableMP:
    """Return a program that later changes to ``mp`` cannot affect.

    A stack of views is kept as it is and only the innermost program is
    copied with ``MP.copy_of``. What the views report is therefore what the
    engine sees, e.g. a ``BoolToIntView`` still reports integer kinds.
    """
    if isinstance(mp, MPView):
        return mp.with_delegate(freeze(mp.delegate))
    return MP.copy_of(mp)


class Solver(ABC):
    """A solving engine.

    Subclasses implement ``_solve``; ``solve`` freezes the program and
    defaults the configuration before handing over, and logs the outcome.
    """

    @property
    def name(self) -> str:
        """Name of the engine, for logs."""
        return type(self).__name__

    def solve(self, mp: ReadableMP, configuration: Optional[Configuration] = None) -> Result:
        """Solve ``mp`` with the given parameters.

        Args:
            mp: Program to solve; frozen with ``freeze`` first, so later
                changes to a builder do not affect the run. Views over the
                program are kept.
            configuration: Solver parameters; defaults when None.

        Returns:
            The result of the run.

        Raises:
            SolverError: If the engine fails without a result status.
            ConflictingTimingLimitsError: If both time limits are set.
            UnsupportedTimingModeError: If a CPU limit cannot be honoured.
        """
        frozen = freeze(mp)
        config = Configuration() if configuration is None else configuration
        label = program_label(frozen)
        LOGGER.debug("Solving MP %s with %s (%s)", label, self.name, config)
        result = self._solve(frozen, config)
        LOGGER.info(
            "Solved MP %s with %s: %s in %s",
            label,
            self.name,
            result.status.name,
            result.duration,
        )
        return result

    @abstractmethod
    def _solve(self, mp: ReadableMP, configuration: Configuration) -> Result:
        """Run the engine on a frozen program.

        ``mp`` is an ``MP`` or a stack of views over one. Read kinds and
        bounds through ``mp.variable_kind`` and ``mp.variable_bounds``.
        """
