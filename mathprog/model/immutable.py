"""Immutable snapshot of a mathematical program."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from mathprog.errors import DuplicateDescriptionError, UnknownVariableError
from mathprog.model.base import ReadableMP
from mathprog.model.builder import MPBuilder
from mathprog.model.elements import Constraint, Objective, Variable

__all__ = ["MP"]


def _check_members(
    by_description: Mapping[str, Variable], variables: Iterable[Variable], where: str
) -> None:
    """Raise UnknownVariableError unless every variable is a member."""
    for variable in variables:
        if by_description.get(variable.description) != variable:
            raise UnknownVariableError(
                f"Variable {variable!r} of {where} is not a variable of the MP."
            )


@dataclass(frozen=True, eq=False, repr=False)
class MP(ReadableMP):
    """A mathematical program that never changes.

    Obtain one with ``MP.copy_of`` or ``MPBuilder.build``. Instances are
    hashable and safe to share between threads; equality follows
    ``ReadableMP`` (a builder with the same content compares equal).

    Direct construction copies the given sequences and checks the same
    invariants as the builder: one variable per description, and every
    variable of a constraint or of the objective is a member.

    Raises:
        DuplicateDescriptionError: If two variables share a description.
        UnknownVariableError: If a constraint or the objective uses a
            variable that is not a member.

    Attributes:
        _name: Name of the program.
        _variables: Variables in insertion order.
        _constraints: Constraints in insertion order.
        _objective: Objective of the program.
    """

    _name: str
    _variables: Tuple[Variable, ...]
    _constraints: Tuple[Constraint, ...]
    _objective: Objective
    _by_description: Mapping[str, Variable] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        name = "" if self._name is None else self._name
        if not isinstance(name, str):
            raise TypeError(f"Name must be a string, got {type(name).__name__}")
        if not isinstance(self._objective, Objective):
            raise TypeError(f"Expected an Objective, got {type(self._objective).__name__}")
        variables = tuple(self._variables)
        constraints = tuple(self._constraints)

        by_description: Dict[str, Variable] = {}
        for variable in variables:
            if not isinstance(variable, Variable):
                raise TypeError(f"Expected a Variable, got {type(variable).__name__}")
            known = by_description.get(variable.description)
            if known is not None:
                raise DuplicateDescriptionError(
                    f"MP '{name}' lists {known!r} and {variable!r} under the "
                    f"same description."
                )
            by_description[variable.description] = variable

        for constraint in constraints:
            if not isinstance(constraint, Constraint):
                raise TypeError(f"Expected a Constraint, got {type(constraint).__name__}")
            _check_members(by_description, constraint.variables, f"constraint '{constraint}'")
        _check_members(by_description, self._objective.function.variables, "the objective")

        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_variables", variables)
        object.__setattr__(self, "_constraints", constraints)
        object.__setattr__(self, "_by_description", MappingProxyType(by_description))

    @staticmethod
    def builder(name: Optional[str] = None) -> MPBuilder:
        """Return a new, empty builder."""
        return MPBuilder(name)

    @classmethod
    def copy_of(cls, source: ReadableMP) -> "MP":
        """Return an immutable program holding the same data as ``source``.

        Returns ``source`` itself when it already is an ``MP``. Otherwise the
        data is copied through a builder, so the invariants are checked again
        for arbitrary ``ReadableMP`` implementations. Variables are shared, as
        they are immutable.
        """
        if isinstance(source, MP):
            return source
        checked = source if type(source) is MPBuilder else MPBuilder.copy_of(source)
        return cls(
            checked.name,
            tuple(checked.variables),
            tuple(checked.constraints),
            checked.objective,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def variables(self) -> Tuple[Variable, ...]:
        return self._variables

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return self._constraints

    @property
    def objective(self) -> Objective:
        return self._objective

    def get_variable(self, description: str) -> Optional[Variable]:
        return self._by_description.get(description)
