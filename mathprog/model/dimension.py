"""Size of a mathematical program: variables by kind and constraints."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from mathprog.model.elements import VariableKind

__all__ = ["MPDimension"]


@dataclass(frozen=True)
class MPDimension:
    """Counts of variables by kind and of constraints in an MP.

    Variable bounds do not count as constraints.

    Attributes:
        bools: Number of boolean variables.
        ints: Number of integer (non-boolean) variables.
        reals: Number of real variables.
        constraints: Number of constraints.
    """

    bools: int = 0
    ints: int = 0
    reals: int = 0
    constraints: int = 0

    def __post_init__(self) -> None:
        for name in ("bools", "ints", "reals", "constraints"):
            if getattr(self, name) < 0:
                raise ValueError(f"Count '{name}' must be non-negative.")

    @classmethod
    def of_kinds(
        cls, kinds: Iterable[VariableKind], constraints: int
    ) -> "MPDimension":
        """Count the given variable kinds.

        Args:
            kinds: Kind of each variable.
            constraints: Number of constraints.
        """
        counts = Counter(kinds)
        return cls(
            bools=counts[VariableKind.BOOL],
            ints=counts[VariableKind.INT],
            reals=counts[VariableKind.REAL],
            constraints=constraints,
        )

    @property
    def variables(self) -> int:
        """Number of variables of all kinds."""
        return self.bools + self.ints + self.reals

    @property
    def integer_domains(self) -> int:
        """Number of variables with an integer domain (booleans included)."""
        return self.bools + self.ints

    def count(self, kind: VariableKind) -> int:
        """Number of variables of the given kind."""
        return {
            VariableKind.BOOL: self.bools,
            VariableKind.INT: self.ints,
            VariableKind.REAL: self.reals,
        }[kind]
