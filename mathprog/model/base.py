"""Read and write contracts shared by every kind of mathematical program.

``ReadableMP`` is implemented by the builder, the immutable ``MP`` and all
views; ``WritableMP`` adds the mutators. Views wrap another ``ReadableMP`` and
delegate to it, so they can be stacked freely.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence, Tuple

from mathprog.errors import UnknownVariableError
from mathprog.model.dimension import MPDimension
from mathprog.model.elements import Constraint, Objective, Variable, VariableKind

__all__ = ["ReadableMP", "WritableMP"]


class ReadableMP(ABC):
    """A mathematical program: name, variables, constraints and objective.

    Every variable used by a constraint or by the objective belongs to the
    variable list, and no two variables share a description.

    Two programs are equal when their names, variable lists, constraint lists
    and objectives are equal. Order matters: it fixes the column and row order
    handed to solvers, although it does not change the feasible set.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this program, possibly empty."""

    @property
    @abstractmethod
    def variables(self) -> Sequence[Variable]:
        """Variables in insertion order, without duplicates."""

    @property
    @abstractmethod
    def constraints(self) -> Sequence[Constraint]:
        """Constraints in insertion order."""

    @property
    @abstractmethod
    def objective(self) -> Objective:
        """Objective, ``Objective.ZERO`` when none is set."""

    @abstractmethod
    def get_variable(self, description: str) -> Optional[Variable]:
        """Return the variable with the given description, or None."""

    def contains_variable(self, description: str) -> bool:
        """True if a variable of this program has the given description."""
        return self.get_variable(description) is not None

    def require_variable(self, variable: Variable) -> Variable:
        """Return ``variable`` if it belongs to this program.

        Raises:
            UnknownVariableError: If it does not.
        """
        if self.get_variable(variable.description) != variable:
            raise UnknownVariableError(
                f"Variable '{variable.description}' is not part of this program."
            )
        return variable

    def variable_kind(self, variable: Variable) -> VariableKind:
        """Kind of ``variable`` as seen through this program.

        Raises:
            UnknownVariableError: If the variable is not part of this program.
        """
        return self.require_variable(variable).kind

    def variable_bounds(self, variable: Variable) -> Tuple[float, float]:
        """(lower, upper) bounds of ``variable`` as seen through this program.

        Raises:
            UnknownVariableError: If the variable is not part of this program.
        """
        return self.require_variable(variable).bounds

    @property
    def dimension(self) -> MPDimension:
        """Counts of variables by kind and of constraints, computed on demand."""
        kinds = (self.variable_kind(variable) for variable in self.variables)
        return MPDimension.of_kinds(kinds, len(self.constraints))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadableMP):
            return NotImplemented
        if other is self:
            return True
        return (
            self.name == other.name
            and list(self.variables) == list(other.variables)
            and list(self.constraints) == list(other.constraints)
            and self.objective == other.objective
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.name,
                tuple(self.variables),
                tuple(self.constraints),
                self.objective,
            )
        )

    def __repr__(self) -> str:
        dim = self.dimension
        return (
            f"{type(self).__name__}(name={self.name!r}, objective={self.objective}, "
            f"bools={dim.bools}, ints={dim.ints}, reals={dim.reals}, "
            f"constraints={dim.constraints})"
        )


class WritableMP(ReadableMP):
    """A program that accepts mutations.

    Mutators return True when the call changed the state of the program.
    """

    # Mutable: equal programs may stop being equal.
    __hash__ = None  # type: ignore[assignment]

    @abstractmethod
    def set_name(self, name: Optional[str]) -> bool:
        """Set the name; None means the empty name."""

    @abstractmethod
    def add_variable(self, variable: Variable) -> bool:
        """Append a variable; False if it is already present."""

    def add_variables(self, variables: Iterable[Variable]) -> bool:
        """Append each variable in turn; True if any was added."""
        changed = False
        for variable in variables:
            changed = self.add_variable(variable) or changed
        return changed

    @abstractmethod
    def remove_variable(self, variable: Variable) -> bool:
        """Remove an unreferenced variable; False if it is absent."""

    @abstractmethod
    def add_constraint(self, constraint: Constraint) -> bool:
        """Append a constraint, adding its new variables first."""

    @abstractmethod
    def remove_constraint(self, constraint: Constraint) -> bool:
        """Remove the first constraint equal to ``constraint``; False if absent."""

    @abstractmethod
    def set_objective(self, objective: Optional[Objective]) -> bool:
        """Replace the objective, adding its new variables first.

        None means ``Objective.ZERO``.
        """

    @abstractmethod
    def clear(self) -> bool:
        """Reset to the empty program; True if anything was removed."""
