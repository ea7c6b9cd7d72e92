"""Dense matrix form of a mathematical program.

Solver adapters usually want the program as arrays::

    optimize    c' x          (in the direction of ``sense``)
    subject to  row_lower <= A x <= row_upper
                col_lower <= x <= col_upper
                x[j] integer where integrality[j]

Columns follow the variable order of the program and rows follow its
constraint order. Kinds and bounds are read through the program accessors, so
the matrix form of a view reflects the view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from mathprog.model.base import ReadableMP
from mathprog.model.elements import ComparisonOperator, Sense, SumTerms, Variable

__all__ = ["MatrixForm", "to_matrix_form"]


@dataclass(frozen=True)
class MatrixForm:
    """Arrays describing a program, for hand-off to a solver.

    Attributes:
        c: Objective coefficients (length n), zeros for the zero objective.
        A: Constraint matrix (m x n).
        row_lower: Lower bound of each row, ``-inf`` for ``<=`` rows.
        row_upper: Upper bound of each row, ``+inf`` for ``>=`` rows.
        col_lower: Lower bound of each variable.
        col_upper: Upper bound of each variable.
        integrality: True for variables with an integer domain.
        sense: Optimization direction, None for the zero objective.
        variables: Variable of each column.
    """

    c: np.ndarray
    A: np.ndarray
    row_lower: np.ndarray
    row_upper: np.ndarray
    col_lower: np.ndarray
    col_upper: np.ndarray
    integrality: np.ndarray
    sense: Optional[Sense]
    variables: Tuple[Variable, ...]

    @property
    def shape(self) -> Tuple[int, int]:
        """(constraints, variables)."""
        return self.A.shape


def _accumulate(row: np.ndarray, function: SumTerms, column_of: Dict[Variable, int]) -> None:
    # A variable repeated in an expression contributes the sum of its coefficients.
    for term in function:
        row[column_of[term.variable]] += term.coefficient


def to_matrix_form(mp: ReadableMP) -> MatrixForm:
    """Build the dense matrix form of ``mp``.

    Args:
        mp: Program to convert; any ``ReadableMP``, views included.

    Returns:
        MatrixForm with one column per variable and one row per constraint.
    """
    variables = tuple(mp.variables)
    constraints = tuple(mp.constraints)
    column_of = {variable: j for j, variable in enumerate(variables)}
    n, m = len(variables), len(constraints)

    c = np.zeros(n, dtype=np.float64)
    _accumulate(c, mp.objective.function, column_of)

    A = np.zeros((m, n), dtype=np.float64)
    row_lower = np.full(m, -np.inf)
    row_upper = np.full(m, np.inf)
    for i, constraint in enumerate(constraints):
        _accumulate(A[i], constraint.lhs, column_of)
        if constraint.operator is not ComparisonOperator.LE:
            row_lower[i] = constraint.rhs
        if constraint.operator is not ComparisonOperator.GE:
            row_upper[i] = constraint.rhs

    col_lower = np.empty(n, dtype=np.float64)
    col_upper = np.empty(n, dtype=np.float64)
    integrality = np.zeros(n, dtype=bool)
    for j, variable in enumerate(variables):
        col_lower[j], col_upper[j] = mp.variable_bounds(variable)
        integrality[j] = mp.variable_kind(variable).is_integral

    return MatrixForm(
        c=c,
        A=A,
        row_lower=row_lower,
        row_upper=row_upper,
        col_lower=col_lower,
        col_upper=col_upper,
        integrality=integrality,
        sense=mp.objective.sense,
        variables=variables,
    )
