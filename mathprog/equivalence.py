"""Structural and numeric equivalence of programs and solutions.

Structural equivalence compares what a solver would see: expressions,
operators and right-hand sides, kinds and bounds as reported by each program.
Labels (program names, constraint descriptions) are ignored. Numeric
equivalence compares computed values within an absolute tolerance.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Any, Callable, Hashable, Mapping, Optional, Tuple, TypeVar

from mathprog.model.base import ReadableMP
from mathprog.model.elements import Constraint, Objective, SumTerms, Term, _as_sum_terms

if TYPE_CHECKING:
    from mathprog.results.solution import Solution

__all__ = [
    "sum_terms_equivalent",
    "objectives_equivalent",
    "constraints_equivalent",
    "mps_equivalent",
    "values_equivalent",
    "solutions_equivalent",
]

K = TypeVar("K")


def _full_key(term: Term) -> Tuple[Hashable, float]:
    # Variable equality covers description, kind and bounds.
    return (term.variable, term.coefficient)


def _description_key(term: Term) -> Tuple[Hashable, float]:
    return (term.variable.description, term.coefficient)


def _terms_equivalent(
    a: SumTerms, b: SumTerms, key: Callable[[Term], Hashable], ordered: bool = True
) -> bool:
    if len(a) != len(b):
        return False
    keys_a = [key(t) for t in a]
    keys_b = [key(t) for t in b]
    if ordered:
        return keys_a == keys_b
    return Counter(keys_a) == Counter(keys_b)


def sum_terms_equivalent(a: Any, b: Any, ordered: bool = True) -> bool:
    """True when both expressions have the same terms.

    Terms match when their coefficients are equal and their variables are
    equal: same description, kind and bounds. A lone ``Variable`` or ``Term``
    is treated as a one-term expression.

    Args:
        a: First expression.
        b: Second expression.
        ordered: When False, terms are compared as multisets, so
            ``x + y`` is equivalent to ``y + x``.
    """
    return _terms_equivalent(_as_sum_terms(a), _as_sum_terms(b), _full_key, ordered)


def _objectives_match(a: Objective, b: Objective, key: Callable[[Term], Hashable]) -> bool:
    return a.sense == b.sense and _terms_equivalent(a.function, b.function, key)


def _constraints_match(
    a: Constraint, b: Constraint, key: Callable[[Term], Hashable]
) -> bool:
    return (
        a.operator is b.operator
        and float(a.rhs) == float(b.rhs)
        and _terms_equivalent(a.lhs, b.lhs, key)
    )


def objectives_equivalent(a: Objective, b: Objective) -> bool:
    """True when both objectives have the same sense and function."""
    return _objectives_match(a, b, _full_key)


def constraints_equivalent(a: Constraint, b: Constraint) -> bool:
    """True when both constraints have the same lhs, operator and rhs.

    Variables of the lhs must be equal, kinds and bounds included.
    Descriptions are ignored.
    """
    return _constraints_match(a, b, _full_key)


def mps_equivalent(a: ReadableMP, b: ReadableMP) -> bool:
    """True when both programs describe the same problem.

    Compares constraints (in order), objective, variable list (in order) and,
    for each variable, the kind and bounds as reported by each program, so a
    view is compared as seen through it. Names are not compared.
    """
    if a is b:
        return True
    constraints_a, constraints_b = list(a.constraints), list(b.constraints)
    if len(constraints_a) != len(constraints_b):
        return False
    # Terms are matched by description here: each variable's kind and bounds
    # are compared below, as reported by its program.
    if not all(
        _constraints_match(ca, cb, _description_key)
        for ca, cb in zip(constraints_a, constraints_b)
    ):
        return False
    if not _objectives_match(a.objective, b.objective, _description_key):
        return False
    variables_a, variables_b = list(a.variables), list(b.variables)
    if len(variables_a) != len(variables_b):
        return False
    for va, vb in zip(variables_a, variables_b):
        # Variables are matched by description; kinds and bounds come from the programs.
        if va.description != vb.description:
            return False
        if a.variable_kind(va) is not b.variable_kind(vb):
            return False
        if a.variable_bounds(va) != b.variable_bounds(vb):
            return False
    return True


def values_equivalent(x: float, y: float, epsilon: float) -> bool:
    """True when ``|x - y| <= epsilon``.

    Raises:
        ValueError: If ``epsilon`` is negative.
    """
    if epsilon < 0:
        raise ValueError(f"Epsilon must be non-negative, got {epsilon}.")
    return abs(x - y) <= epsilon


def _optional_values_equivalent(
    x: Optional[float], y: Optional[float], epsilon: float
) -> bool:
    if x is None or y is None:
        return x is None and y is None
    return values_equivalent(x, y, epsilon)


def _mappings_equivalent(
    a: Mapping[K, float], b: Mapping[K, float], epsilon: float
) -> bool:
    # A key valued on one side only makes the mappings differ.
    if a.keys() != b.keys():
        return False
    return all(values_equivalent(a[key], b[key], epsilon) for key in a)


def solutions_equivalent(a: "Solution", b: "Solution", epsilon: float = 0.0) -> bool:
    """True when both solutions solve equivalent programs with close values.

    The programs must be structurally equivalent; the objective values, the
    primal values and the dual values must be within ``epsilon`` of each
    other. A value present in one solution only makes them differ.

    Raises:
        ValueError: If ``epsilon`` is negative.
    """
    if epsilon < 0:
        raise ValueError(f"Epsilon must be non-negative, got {epsilon}.")
    return (
        mps_equivalent(a.mp, b.mp)
        and _optional_values_equivalent(a.objective_value, b.objective_value, epsilon)
        and _mappings_equivalent(a.values, b.values, epsilon)
        and _mappings_equivalent(a.dual_values, b.dual_values, epsilon)
    )
