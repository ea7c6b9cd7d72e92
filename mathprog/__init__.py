"""mathprog: mathematical program modelling library.

mathprog builds and validates linear and mixed-integer programs before they
are handed to a solving engine.

Primary API:
    Variable, Constraint, Objective, SumTerms - Immutable program elements
    MPBuilder - Mutable program enforcing the program invariants
    MP - Immutable snapshot of a program
    ReadOnlyView, OwnNameView, BoolToIntView - Views over a program
    Configuration - Validated solver parameters
    Result, Solution - What a solver returns

Example:
    from mathprog import Constraint, MPBuilder, Objective, Variable

    x = Variable.integer("x")
    y = Variable.integer("y")
    builder = MPBuilder("OneFourThree")
    builder.set_objective(Objective.max(143 * x + 60 * y))
    builder.add_constraint(Constraint.le(x + y, 75, "c3"))
    mp = builder.build()
    mp.dimension  # MPDimension(bools=0, ints=2, reals=0, constraints=1)
"""

from __future__ import annotations

from mathprog import logging
from mathprog.equivalence import (
    constraints_equivalent,
    mps_equivalent,
    solutions_equivalent,
    sum_terms_equivalent,
    values_equivalent,
)
from mathprog.errors import (
    ConflictingTimingLimitsError,
    DuplicateDescriptionError,
    InvalidParameterValueError,
    MathProgError,
    SolverError,
    UnknownVariableError,
    UnsupportedOperationError,
    UnsupportedTimingModeError,
    VariableInUseError,
)
from mathprog.model import (
    MP,
    BoolToIntView,
    ComparisonOperator,
    Constraint,
    MPBuilder,
    MPDimension,
    Objective,
    OwnNameView,
    ReadableMP,
    ReadOnlyView,
    Sense,
    SumTerms,
    Term,
    Variable,
    VariableKind,
    WritableMP,
    describe,
)
from mathprog.parameters import (
    Configuration,
    DoubleParameter,
    IntParameter,
    StringParameter,
    TimingType,
)
from mathprog.results import ComputationTime, Result, ResultStatus, Solution
from mathprog.solver import Solver

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
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
    "ReadOnlyView",
    "OwnNameView",
    "BoolToIntView",
    "describe",
    # Equivalence
    "sum_terms_equivalent",
    "constraints_equivalent",
    "mps_equivalent",
    "values_equivalent",
    "solutions_equivalent",
    # Parameters
    "DoubleParameter",
    "IntParameter",
    "StringParameter",
    "Configuration",
    "TimingType",
    # Results
    "ResultStatus",
    "ComputationTime",
    "Solution",
    "Result",
    "Solver",
    # Errors
    "MathProgError",
    "DuplicateDescriptionError",
    "UnknownVariableError",
    "VariableInUseError",
    "InvalidParameterValueError",
    "ConflictingTimingLimitsError",
    "UnsupportedTimingModeError",
    "UnsupportedOperationError",
    "SolverError",
    # Utilities
    "logging",
]
