"""Values found by a solver for a program."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from types import MappingProxyType
from typing import Any, Mapping, Optional

import pandas as pd

from mathprog.config import TOLERANCES
from mathprog.model.base import ReadableMP
from mathprog.model.elements import Constraint, Variable
from mathprog.model.immutable import MP

__all__ = ["Solution"]


def _finite(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{what} must be a real number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{what} must be finite, got {number}.")
    # Normalizes -0.0.
    return number + 0.0


@dataclass(frozen=True, eq=False)
class Solution:
    """Objective value, primal values and dual values for a program.

    The program is frozen with ``MP.copy_of`` on construction. A solution may
    be partial: variables and constraints without a value are simply absent
    from ``values`` and ``dual_values``.

    Attributes:
        mp: The solved program.
        objective_value: Objective value reported by the solver, or None.
            Must be None or 0 when the program has the zero objective.
        values: Value of each valued variable; every key belongs to ``mp``.
        dual_values: Dual value of each valued constraint of ``mp``.

    Raises:
        UnknownVariableError: If a valued variable is not part of ``mp``.
        ValueError: If a valued constraint is not part of ``mp``, or if a
            value is not finite.
    """

    mp: MP
    objective_value: Optional[float] = None
    values: Mapping[Variable, float] = field(default_factory=dict)
    dual_values: Mapping[Constraint, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.mp, ReadableMP):
            raise TypeError(f"Expected a ReadableMP, got {type(self.mp).__name__}")
        mp = MP.copy_of(self.mp)

        objective_value = self.objective_value
        if objective_value is not None:
            objective_value = _finite(objective_value, "Objective value")
            if mp.objective.is_zero and objective_value != 0.0:
                raise ValueError(
                    f"A program with the zero objective has objective value 0, "
                    f"got {objective_value}."
                )

        values = {}
        for variable, value in (self.values or {}).items():
            mp.require_variable(variable)
            values[variable] = _finite(value, f"Value of '{variable}'")

        constraints = set(mp.constraints)
        dual_values = {}
        for constraint, value in (self.dual_values or {}).items():
            if constraint not in constraints:
                raise ValueError(f"Constraint '{constraint}' is not part of the program.")
            dual_values[constraint] = _finite(value, f"Dual value of '{constraint}'")

        object.__setattr__(self, "mp", mp)
        object.__setattr__(self, "objective_value", objective_value)
        object.__setattr__(self, "values", MappingProxyType(values))
        object.__setattr__(self, "dual_values", MappingProxyType(dual_values))

    def value(self, variable: Variable) -> Optional[float]:
        """Value of ``variable``, None if the solver gave none.

        Raises:
            UnknownVariableError: If the variable is not part of the program.
        """
        self.mp.require_variable(variable)
        return self.values.get(variable)

    def dual_value(self, constraint: Constraint) -> Optional[float]:
        """Dual value of ``constraint``, None if the solver gave none."""
        return self.dual_values.get(constraint)

    def _required_value(self, variable: Variable) -> float:
        value = self.value(variable)
        if value is None:
            raise ValueError(f"Variable '{variable}' has no value.")
        return value

    def boolean_value(self, variable: Variable) -> bool:
        """Value of ``variable`` read as a boolean.

        Raises:
            UnknownVariableError: If the variable is not part of the program.
            ValueError: If it has no value, or a value that is not within
                ``TOLERANCES.boolean`` of 0 or 1.
        """
        value = self._required_value(variable)
        if TOLERANCES.is_close_to(value, 0.0, TOLERANCES.boolean):
            return False
        if TOLERANCES.is_close_to(value, 1.0, TOLERANCES.boolean):
            return True
        raise ValueError(f"Variable '{variable}' has a non boolean value: {value}.")

    def integer_value(self, variable: Variable) -> int:
        """Value of ``variable`` rounded to the nearest integer.

        Raises:
            UnknownVariableError: If the variable is not part of the program.
            ValueError: If it has no value, or a value farther than
                ``TOLERANCES.integrality`` from an integer.
        """
        value = self._required_value(variable)
        nearest = round(value)
        if not TOLERANCES.is_close_to(value, nearest, TOLERANCES.integrality):
            raise ValueError(f"Variable '{variable}' has a non integer value: {value}.")
        return int(nearest)

    def computed_objective_value(self) -> float:
        """Evaluate the objective function at the primal values.

        Returns 0 for the zero objective.

        Raises:
            UnknownVariableError: If a variable of the objective has no value.
        """
        return self.mp.objective.function.evaluate(self.values)

    def to_dataframe(self) -> pd.DataFrame:
        """Tabulate the variables of the program with their values.

        Returns:
            DataFrame indexed by description with columns ``kind``, ``lower``,
            ``upper`` and ``value`` (NaN when unvalued), in variable order.
        """
        rows = [
            {
                "description": variable.description,
                "kind": variable.kind.name,
                "lower": variable.lower,
                "upper": variable.upper,
                "value": self.values.get(variable, math.nan),
            }
            for variable in self.mp.variables
        ]
        columns = ["description", "kind", "lower", "upper", "value"]
        return pd.DataFrame(rows, columns=columns).set_index("description")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Solution):
            return NotImplemented
        return (
            self.objective_value == other.objective_value
            and self.mp == other.mp
            and dict(self.values) == dict(other.values)
            and dict(self.dual_values) == dict(other.dual_values)
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.mp,
                self.objective_value,
                frozenset(self.values.items()),
                frozenset(self.dual_values.items()),
            )
        )

    def __str__(self) -> str:
        name = f" '{self.mp.name}'" if self.mp.name else ""
        lines = [f"Solution of program{name}"]
        if self.objective_value is not None:
            lines.append(f"Objective value: {self.objective_value:g}")
        for variable in self.mp.variables:
            if variable in self.values:
                lines.append(f"\t{variable} = {self.values[variable]:g}")
        for constraint, dual in self.dual_values.items():
            lines.append(f"\tdual({constraint}) = {dual:g}")
        return "\n".join(lines)
