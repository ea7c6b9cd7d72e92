"""Immutable building blocks of a mathematical program.

This module defines the value types an MP is made of: variables, terms, linear
expressions (``SumTerms``), objectives and constraints. All of them are
immutable, hashable and compared by value, so they can be shared freely
between programs, solutions and threads.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import (
    Any,
    ClassVar,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
    overload,
)

from mathprog.errors import UnknownVariableError

__all__ = [
    "VariableKind",
    "Variable",
    "Term",
    "SumTerms",
    "Sense",
    "Objective",
    "ComparisonOperator",
    "Constraint",
]


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _as_float(value: Any, what: str) -> float:
    """Return ``value`` as a float, rejecting booleans and non-numbers."""
    if not _is_number(value):
        raise TypeError(f"{what} must be a real number, got {type(value).__name__}")
    return float(value)


class VariableKind(Enum):
    """Domain restriction of a variable.

    BOOL and INT variables only take integer values within their bounds; BOOL
    variables are further restricted to {0, 1}.
    """

    BOOL = "bool"
    INT = "int"
    REAL = "real"

    @property
    def is_integral(self) -> bool:
        """True for kinds whose feasible values are integers."""
        return self is not VariableKind.REAL

    @classmethod
    def from_string(cls, value: str) -> "VariableKind":
        """Parse a case-insensitive kind name or value ("bool", "INT", ...).

        Raises:
            ValueError: If the string matches no kind.
        """
        key = value.strip().upper()
        for kind in cls:
            if kind.name == key or kind.value.upper() == key:
                return kind
        valid = ", ".join(k.name for k in cls)
        raise ValueError(f"Invalid variable kind '{value}'. Valid values are: {valid}")


@dataclass(frozen=True)
class Variable:
    """A decision variable.

    The description identifies the variable within an MP: two variables of the
    same MP never share a description. The name is for display only. When no
    description is given, it is derived from the name and the references with
    ``default_description``.

    Equality and hashing use the description, the kind and the bounds.

    Attributes:
        name: Display name.
        kind: Domain restriction (boolean, integer or real).
        lower: Lower bound, possibly ``-inf``.
        upper: Upper bound, possibly ``+inf``.
        references: Objects this variable is about (e.g. a product, a period).
        description: Identity of the variable within an MP.

    Example:
        ```python
        x = Variable.integer("x", lower=0)
        cost = Variable.real("cost", "p1", "2024")  # description "cost_p1_2024"
        expr = 3 * x + 2 * cost
        ```
    """

    name: str = field(compare=False)
    kind: VariableKind = VariableKind.REAL
    lower: float = -math.inf
    upper: float = math.inf
    references: Tuple[Any, ...] = field(default=(), compare=False)
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Variable name must be a string, got {self.name!r}")
        if not isinstance(self.kind, VariableKind):
            raise TypeError(f"Variable kind must be a VariableKind, got {self.kind!r}")
        lower = _as_float(self.lower, "Lower bound")
        upper = _as_float(self.upper, "Upper bound")
        if math.isnan(lower) or math.isnan(upper):
            raise ValueError(f"Bounds of '{self.name}' must not be NaN.")
        if lower == math.inf or upper == -math.inf:
            raise ValueError(
                f"Bounds of '{self.name}' leave no feasible value: [{lower}, {upper}]."
            )
        if lower > upper:
            raise ValueError(
                f"Lower bound {lower} exceeds upper bound {upper} for '{self.name}'."
            )
        references = tuple(self.references)
        description = self.description or self.default_description(
            self.name, references
        )
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)
        object.__setattr__(self, "references", references)
        object.__setattr__(self, "description", description)

    @staticmethod
    def default_description(name: str, references: Iterable[Any] = ()) -> str:
        """Build a description from a name and references.

        The references are appended to the name, each preceded by an
        underscore: ``default_description("x", [1, "a"]) == "x_1_a"``.
        """
        parts = [name] + [str(ref) for ref in references]
        return "_".join(parts)

    @classmethod
    def real(
        cls,
        name: str,
        *references: Any,
        lower: float = -math.inf,
        upper: float = math.inf,
    ) -> "Variable":
        """Create a real variable, unbounded unless bounds are given."""
        return cls(name, VariableKind.REAL, lower, upper, references)

    @classmethod
    def integer(
        cls,
        name: str,
        *references: Any,
        lower: float = -math.inf,
        upper: float = math.inf,
    ) -> "Variable":
        """Create an integer variable, unbounded unless bounds are given."""
        return cls(name, VariableKind.INT, lower, upper, references)

    @classmethod
    def boolean(
        cls,
        name: str,
        *references: Any,
        lower: float = 0.0,
        upper: float = 1.0,
    ) -> "Variable":
        """Create a boolean variable, bounded to [0, 1] unless bounds are given."""
        return cls(name, VariableKind.BOOL, lower, upper, references)

    @property
    def bounds(self) -> Tuple[float, float]:
        """The (lower, upper) pair."""
        return (self.lower, self.upper)

    def __mul__(self, coefficient: float) -> "Term":
        if not _is_number(coefficient):
            return NotImplemented
        return Term(coefficient, self)

    __rmul__ = __mul__

    def __neg__(self) -> "Term":
        return Term(-1.0, self)

    def __add__(self, other: Any) -> "SumTerms":
        return SumTerms([Term(1.0, self)]) + other

    def __radd__(self, other: Any) -> "SumTerms":
        return SumTerms([Term(1.0, self)]).__radd__(other)

    def __sub__(self, other: Any) -> "SumTerms":
        return SumTerms([Term(1.0, self)]) - other

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return (
            f"Variable({self.description!r}, {self.kind.name}, "
            f"[{self.lower}, {self.upper}])"
        )


@dataclass(frozen=True)
class Term:
    """A coefficient multiplying a variable.

    Attributes:
        coefficient: Finite real coefficient.
        variable: The variable.
    """

    coefficient: float
    variable: Variable

    def __post_init__(self) -> None:
        coefficient = _as_float(self.coefficient, "Coefficient")
        if not math.isfinite(coefficient):
            raise ValueError(f"Coefficient must be finite, got {coefficient}.")
        if not isinstance(self.variable, Variable):
            raise TypeError(f"Expected a Variable, got {type(self.variable).__name__}")
        object.__setattr__(self, "coefficient", coefficient)

    def __neg__(self) -> "Term":
        return Term(-self.coefficient, self.variable)

    def __mul__(self, factor: float) -> "Term":
        if not _is_number(factor):
            return NotImplemented
        return Term(self.coefficient * float(factor), self.variable)

    __rmul__ = __mul__

    def __add__(self, other: Any) -> "SumTerms":
        return SumTerms([self]) + other

    def __radd__(self, other: Any) -> "SumTerms":
        return SumTerms([self]).__radd__(other)

    def __sub__(self, other: Any) -> "SumTerms":
        return SumTerms([self]) - other

    def __str__(self) -> str:
        if self.coefficient == 1.0:
            return str(self.variable)
        if self.coefficient == -1.0:
            return f"-{self.variable}"
        return f"{self.coefficient:g}*{self.variable}"


class SumTerms(Sequence[Term]):
    """An ordered, immutable linear expression: a sum of terms.

    Insertion order is kept; it matters for equality but not for the value of
    the expression. The same variable may appear in several terms, in which
    case the coefficients add up on evaluation.

    Example:
        ```python
        expr = SumTerms.of(120, x, 210, y)
        expr == 120 * x + 210 * y  # True
        ```
    """

    __slots__ = ("_terms",)

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        collected = tuple(terms)
        for term in collected:
            if not isinstance(term, Term):
                raise TypeError(f"Expected Term instances, got {type(term).__name__}")
        self._terms: Tuple[Term, ...] = collected

    @classmethod
    def of(cls, *coefficients_and_variables: Any) -> "SumTerms":
        """Build from alternating coefficients and variables.

        ``SumTerms.of(143, x, 60, y)`` is ``143 x + 60 y``.

        Raises:
            ValueError: If an odd number of arguments is given.
        """
        if len(coefficients_and_variables) % 2:
            raise ValueError("Expected pairs of coefficient and variable.")
        pairs = zip(coefficients_and_variables[::2], coefficients_and_variables[1::2])
        return cls(Term(coefficient, variable) for coefficient, variable in pairs)

    @property
    def variables(self) -> Tuple[Variable, ...]:
        """Variable of each term, in term order (duplicates kept)."""
        return tuple(term.variable for term in self._terms)

    def evaluate(self, values: Mapping[Variable, float]) -> float:
        """Compute the value of this expression.

        Args:
            values: Value of each variable appearing in the expression.

        Raises:
            UnknownVariableError: If a variable of the expression has no value.
        """
        total = 0.0
        for term in self._terms:
            try:
                value = values[term.variable]
            except KeyError:
                raise UnknownVariableError(
                    f"No value given for variable '{term.variable}'."
                ) from None
            total += term.coefficient * value
        return total

    @overload
    def __getitem__(self, index: int) -> Term: ...

    @overload
    def __getitem__(self, index: slice) -> "SumTerms": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Term, "SumTerms"]:
        if isinstance(index, slice):
            return SumTerms(self._terms[index])
        return self._terms[index]

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SumTerms):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)

    def __add__(self, other: Any) -> "SumTerms":
        if isinstance(other, SumTerms):
            return SumTerms(self._terms + other._terms)
        if isinstance(other, Term):
            return SumTerms(self._terms + (other,))
        if isinstance(other, Variable):
            return SumTerms(self._terms + (Term(1.0, other),))
        return NotImplemented

    def __radd__(self, other: Any) -> "SumTerms":
        # Lets ``sum(terms)`` start from its default 0.
        if isinstance(other, Real) and not isinstance(other, bool) and other == 0:
            return self
        if isinstance(other, Term):
            return SumTerms((other,) + self._terms)
        if isinstance(other, Variable):
            return SumTerms((Term(1.0, other),) + self._terms)
        return NotImplemented

    def __neg__(self) -> "SumTerms":
        return SumTerms(-term for term in self._terms)

    def __sub__(self, other: Any) -> "SumTerms":
        if isinstance(other, (SumTerms, Term, Variable)):
            return self + (-other)
        return NotImplemented

    def __mul__(self, factor: float) -> "SumTerms":
        if not _is_number(factor):
            return NotImplemented
        return SumTerms(term * factor for term in self._terms)

    __rmul__ = __mul__

    def __str__(self) -> str:
        if not self._terms:
            return "0"
        return " + ".join(str(term) for term in self._terms)

    def __repr__(self) -> str:
        return f"SumTerms({str(self)!r})"


def _as_sum_terms(value: Any) -> SumTerms:
    """Coerce a Variable, Term or iterable of Terms to SumTerms."""
    if isinstance(value, SumTerms):
        return value
    if isinstance(value, Term):
        return SumTerms((value,))
    if isinstance(value, Variable):
        return SumTerms((Term(1.0, value),))
    return SumTerms(value)


class Sense(Enum):
    """Optimization direction."""

    MAX = "max"
    MIN = "min"


@dataclass(frozen=True)
class Objective:
    """An objective function with its optimization sense.

    ``Objective.ZERO`` has an empty function and no sense: the program only
    asks for a feasible point. Any other objective has a non-empty function
    and a sense.

    Attributes:
        function: Linear expression to optimize.
        sense: Direction of optimization, None for the zero objective.
    """

    ZERO: ClassVar["Objective"]

    function: SumTerms = SumTerms()
    sense: Optional[Sense] = None

    def __post_init__(self) -> None:
        function = _as_sum_terms(self.function)
        object.__setattr__(self, "function", function)
        if not function and self.sense is not None:
            raise ValueError("An empty objective function has no sense.")
        if function and not isinstance(self.sense, Sense):
            raise ValueError("A non-empty objective function requires a Sense.")

    @classmethod
    def max(cls, function: Any) -> "Objective":
        """Maximize the given non-empty function."""
        return cls.of(function, Sense.MAX)

    @classmethod
    def min(cls, function: Any) -> "Objective":
        """Minimize the given non-empty function."""
        return cls.of(function, Sense.MIN)

    @classmethod
    def of(cls, function: Any, sense: Sense) -> "Objective":
        """Optimize the given non-empty function in the given sense."""
        function = _as_sum_terms(function)
        if not function:
            raise ValueError("Use Objective.ZERO for an empty objective function.")
        return cls(function, sense)

    @property
    def is_zero(self) -> bool:
        """True for the zero objective."""
        return not self.function

    def __str__(self) -> str:
        if self.is_zero:
            return "ZERO"
        return f"{self.sense.name} {self.function}"


Objective.ZERO = Objective()


class ComparisonOperator(Enum):
    """Comparison between the two sides of a constraint."""

    LE = "<="
    GE = ">="
    EQ = "="

    @property
    def symbol(self) -> str:
        """Mathematical symbol of the operator."""
        return {"LE": "≤", "GE": "≥", "EQ": "="}[self.name]

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Constraint:
    """A linear constraint ``lhs operator rhs``.

    The description is an optional label. It is ignored by equality and
    hashing: two constraints with the same lhs, operator and rhs are equal.

    Attributes:
        lhs: Non-empty linear expression.
        operator: Comparison operator.
        rhs: Finite right-hand side.
        description: Optional label, may be empty.
    """

    lhs: SumTerms
    operator: ComparisonOperator
    rhs: float
    description: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        lhs = _as_sum_terms(self.lhs)
        if not lhs:
            raise ValueError("A constraint requires a non-empty left-hand side.")
        if not isinstance(self.operator, ComparisonOperator):
            raise TypeError(
                f"Expected a ComparisonOperator, got {type(self.operator).__name__}"
            )
        rhs = _as_float(self.rhs, "Right-hand side")
        if not math.isfinite(rhs):
            raise ValueError(f"Right-hand side must be finite, got {rhs}.")
        description = "" if self.description is None else self.description
        object.__setattr__(self, "lhs", lhs)
        object.__setattr__(self, "rhs", rhs)
        object.__setattr__(self, "description", description)

    @classmethod
    def le(cls, lhs: Any, rhs: float, description: str = "") -> "Constraint":
        """``lhs <= rhs``."""
        return cls(lhs, ComparisonOperator.LE, rhs, description)

    @classmethod
    def ge(cls, lhs: Any, rhs: float, description: str = "") -> "Constraint":
        """``lhs >= rhs``."""
        return cls(lhs, ComparisonOperator.GE, rhs, description)

    @classmethod
    def eq(cls, lhs: Any, rhs: float, description: str = "") -> "Constraint":
        """``lhs = rhs``."""
        return cls(lhs, ComparisonOperator.EQ, rhs, description)

    @property
    def variables(self) -> Tuple[Variable, ...]:
        """Variables of the left-hand side, in term order."""
        return self.lhs.variables

    def __str__(self) -> str:
        label = f"{self.description}: " if self.description else ""
        return f"{label}{self.lhs} {self.operator} {self.rhs:g}"
