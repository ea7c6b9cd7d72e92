"""Mutable builder of mathematical programs.

``MPBuilder`` accumulates variables, constraints and an objective while
enforcing the program invariants at every mutation:

- every variable used by a constraint or by the objective belongs to the
  program (new ones are added implicitly, in first-occurrence order);
- no two variables share a description;
- a variable cannot be removed while it is referenced.

A failed mutation leaves the builder unchanged: all new variables of an
expression are validated before any of them is inserted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

from mathprog.errors import DuplicateDescriptionError, VariableInUseError
from mathprog.logging import get_logger
from mathprog.model.base import ReadableMP, WritableMP
from mathprog.model.elements import Constraint, Objective, Variable

if TYPE_CHECKING:
    from mathprog.model.immutable import MP

LOGGER = get_logger(__name__)

__all__ = ["MPBuilder"]


class MPBuilder(WritableMP):
    """A writable mathematical program.

    Starts empty, with an empty name and the ``Objective.ZERO`` objective.
    ``build()`` freezes the current content into an immutable ``MP``; the
    builder stays usable afterwards.

    Not safe for concurrent mutation.

    Example:
        ```python
        x = Variable.integer("x")
        y = Variable.integer("y")
        builder = MPBuilder("OneFourThree")
        builder.set_objective(Objective.max(143 * x + 60 * y))  # adds x, y
        builder.add_constraint(Constraint.le(x + y, 75, "c3"))
        mp = builder.build()
        ```
    """

    def __init__(self, name: Optional[str] = None) -> None:
        self._name: str = ""
        self._variables: List[Variable] = []
        self._by_description: Dict[str, Variable] = {}
        self._constraints: List[Constraint] = []
        self._objective: Objective = Objective.ZERO
        self.set_name(name)

    @classmethod
    def copy_of(cls, source: ReadableMP) -> "MPBuilder":
        """Return a new builder holding the same data as ``source``.

        The builder is not linked to the source: mutating one does not change
        the other. Variables, constraints and the objective are shared, which
        is safe as they are immutable.
        """
        builder = cls(source.name)
        # Variables first, so that their order is kept exactly.
        builder.add_variables(source.variables)
        builder.set_objective(source.objective)
        for constraint in source.constraints:
            builder.add_constraint(constraint)
        return builder

    @property
    def name(self) -> str:
        return self._name

    @property
    def variables(self) -> Tuple[Variable, ...]:
        return tuple(self._variables)

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return tuple(self._constraints)

    @property
    def objective(self) -> Objective:
        return self._objective

    def get_variable(self, description: str) -> Optional[Variable]:
        return self._by_description.get(description)

    def set_name(self, name: Optional[str]) -> bool:
        """Set the name of this program.

        Args:
            name: New name; None is converted to the empty string.

        Returns:
            True if the name changed.
        """
        new_name = "" if name is None else name
        if not isinstance(new_name, str):
            raise TypeError(f"Name must be a string, got {type(new_name).__name__}")
        if new_name == self._name:
            return False
        self._name = new_name
        return True

    def add_variable(self, variable: Variable) -> bool:
        """Append ``variable`` to the variables of this program.

        Returns:
            True if it was added, False if an equal variable is already present.

        Raises:
            DuplicateDescriptionError: If a different variable with the same
                description is already present.
        """
        if not isinstance(variable, Variable):
            raise TypeError(f"Expected a Variable, got {type(variable).__name__}")
        return bool(self._put_variables(self._stage_variables((variable,))))

    def remove_variable(self, variable: Variable) -> bool:
        """Remove ``variable`` from this program.

        Returns:
            True if it was removed, False if it is not part of this program.

        Raises:
            VariableInUseError: If the objective or a constraint refers to it.
        """
        if self._by_description.get(variable.description) != variable:
            return False

        if variable in self._objective.function.variables:
            raise VariableInUseError(
                f"Can't remove '{variable}' used in objective function "
                f"{self._objective.function}."
            )
        users = [c for c in self._constraints if variable in c.variables]
        if users:
            listed = "; ".join(str(c) for c in users)
            raise VariableInUseError(
                f"Can't remove '{variable}' used in {len(users)} constraint(s): {listed}."
            )

        self._variables.remove(variable)
        del self._by_description[variable.description]
        LOGGER.debug("Removed variable '%s' from MP '%s'", variable, self._name)
        return True

    def add_constraint(self, constraint: Constraint) -> bool:
        """Append ``constraint``, adding its new variables first.

        Returns:
            True (the constraint list always grows).

        Raises:
            DuplicateDescriptionError: If a variable of the constraint clashes
                with a different variable of this program. Nothing is added.
        """
        if not isinstance(constraint, Constraint):
            raise TypeError(f"Expected a Constraint, got {type(constraint).__name__}")
        self._put_variables(self._stage_variables(constraint.variables))
        self._constraints.append(constraint)
        LOGGER.debug("Added constraint '%s' to MP '%s'", constraint, self._name)
        return True

    def remove_constraint(self, constraint: Constraint) -> bool:
        """Remove the first constraint equal to ``constraint``.

        Its variables stay in the program.
        """
        try:
            self._constraints.remove(constraint)
        except ValueError:
            return False
        LOGGER.debug("Removed constraint '%s' from MP '%s'", constraint, self._name)
        return True

    def set_objective(self, objective: Optional[Objective]) -> bool:
        """Set the objective, adding its new variables first.

        Args:
            objective: New objective; None means ``Objective.ZERO``.

        Returns:
            True if the objective or the variables changed.

        Raises:
            DuplicateDescriptionError: If a variable of the objective clashes
                with a different variable of this program. Nothing changes.
        """
        effective = Objective.ZERO if objective is None else objective
        if not isinstance(effective, Objective):
            raise TypeError(f"Expected an Objective, got {type(effective).__name__}")
        added = self._put_variables(self._stage_variables(effective.function.variables))
        changed = bool(added) or effective != self._objective
        self._objective = effective
        return changed

    def clear(self) -> bool:
        """Remove the name, variables, constraints and objective."""
        changed = bool(
            self._name
            or self._variables
            or self._constraints
            or not self._objective.is_zero
        )
        self._name = ""
        self._variables.clear()
        self._by_description.clear()
        self._constraints.clear()
        self._objective = Objective.ZERO
        return changed

    def build(self) -> "MP":
        """Return an immutable program holding the current content."""
        from mathprog.model.immutable import MP

        return MP.copy_of(self)

    def _stage_variables(self, variables: Iterable[Variable]) -> List[Variable]:
        """Return the variables not yet in this program, in first-occurrence order.

        Nothing is modified.

        Raises:
            DuplicateDescriptionError: If one of the variables has the
                description of a different variable, already present or
                staged earlier.
        """
        staged: Dict[str, Variable] = {}
        for variable in variables:
            description = variable.description
            known = self._by_description.get(description)
            if known is None:
                known = staged.get(description)
            if known is None:
                staged[description] = variable
            elif known != variable:
                raise DuplicateDescriptionError(
                    f"This MP already contains the variable {known!r}. It is "
                    f"forbidden to add a different variable with the same "
                    f"description: {variable!r}."
                )
        return list(staged.values())

    def _put_variables(self, new_variables: List[Variable]) -> List[Variable]:
        """Insert staged variables; the only place the variable list grows."""
        for variable in new_variables:
            self._variables.append(variable)
            self._by_description[variable.description] = variable
            LOGGER.debug("Added variable '%s' to MP '%s'", variable, self._name)
        return new_variables
