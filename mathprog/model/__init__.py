"""Mathematical program model package.

This package defines the immutable elements of a program (variables, linear
expressions, objectives, constraints), the mutable ``MPBuilder``, the
immutable ``MP`` snapshot and the views that wrap any program.
"""

from mathprog.model.base import ReadableMP, WritableMP
from mathprog.model.builder import MPBuilder
from mathprog.model.describe import describe, variables_frame
from mathprog.model.dimension import MPDimension
from mathprog.model.elements import (
    ComparisonOperator,
    Constraint,
    Objective,
    Sense,
    SumTerms,
    Term,
    Variable,
    VariableKind,
)
from mathprog.model.immutable import MP
from mathprog.model.matrix import MatrixForm, to_matrix_form
from mathprog.model.view import BoolToIntView, MPView, OwnNameView, ReadOnlyView

__all__ = [
    # Elements
    "VariableKind",
    "Variable",
    "Term",
    "SumTerms",
    "Sense",
    "Objective",
    "ComparisonOperator",
    "Constraint",
    # Programs
    "ReadableMP",
    "WritableMP",
    "MPBuilder",
    "MP",
    "MPDimension",
    # Views
    "MPView",
    "ReadOnlyView",
    "OwnNameView",
    "BoolToIntView",
    # Reporting
    "describe",
    "variables_frame",
    "MatrixForm",
    "to_matrix_form",
]
