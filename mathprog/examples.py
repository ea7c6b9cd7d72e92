"""Small reference programs with their known optimal solutions.

Used in tests and as documentation of the API.
"""

from __future__ import annotations

from mathprog.model.builder import MPBuilder
from mathprog.model.elements import Constraint, Objective, SumTerms, Variable
from mathprog.model.immutable import MP
from mathprog.results.solution import Solution

__all__ = [
    "one_four_three",
    "one_four_three_solution",
    "one_four_three_low_x",
    "one_four_three_low_x_solution",
]


def _one_four_three_builder() -> MPBuilder:
    x = Variable.integer("x")
    y = Variable.integer("y")
    builder = MPBuilder("OneFourThree")
    builder.add_variables([x, y])
    builder.set_objective(Objective.max(SumTerms.of(143, x, 60, y)))
    builder.add_constraint(Constraint.le(SumTerms.of(120, x, 210, y), 15000, "c1"))
    builder.add_constraint(Constraint.le(SumTerms.of(110, x, 30, y), 4000, "c2"))
    builder.add_constraint(Constraint.le(SumTerms.of(1, x, 1, y), 75, "c3"))
    return builder


def one_four_three() -> MP:
    """Integer program "OneFourThree".

    maximize 143 x + 60 y subject to
    120 x + 210 y <= 15000, 110 x + 30 y <= 4000, x + y <= 75,
    with x and y unbounded integers.
    """
    return _one_four_three_builder().build()


def one_four_three_solution() -> Solution:
    """Optimal solution of ``one_four_three``: x = 22, y = 52, value 6266."""
    mp = one_four_three()
    x, y = mp.get_variable("x"), mp.get_variable("y")
    return Solution(mp, 6266.0, {x: 22.0, y: 52.0})


def one_four_three_low_x() -> MP:
    """``one_four_three`` with the extra constraint "low x": x <= 16."""
    builder = _one_four_three_builder()
    x = builder.get_variable("x")
    builder.add_constraint(Constraint.le(SumTerms.of(1, x), 16, "low x"))
    return builder.build()


def one_four_three_low_x_solution() -> Solution:
    """Optimal solution of ``one_four_three_low_x``: x = 16, y = 59, value 5828."""
    mp = one_four_three_low_x()
    x, y = mp.get_variable("x"), mp.get_variable("y")
    return Solution(mp, 5828.0, {x: 16.0, y: 59.0})
