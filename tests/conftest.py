"""Shared fixtures: variables and small reference programs."""

from __future__ import annotations

import pytest

from mathprog.examples import one_four_three, one_four_three_solution
from mathprog.model import Constraint, MPBuilder, Objective, SumTerms, Variable


@pytest.fixture
def x() -> Variable:
    return Variable.integer("x")


@pytest.fixture
def y() -> Variable:
    return Variable.integer("y")


@pytest.fixture
def b() -> Variable:
    return Variable.boolean("b")


@pytest.fixture
def r() -> Variable:
    return Variable.real("r", lower=0.0)


@pytest.fixture
def builder(x: Variable, y: Variable) -> MPBuilder:
    """A builder holding the "OneFourThree" program, built step by step."""
    mp = MPBuilder("OneFourThree")
    mp.set_objective(Objective.max(SumTerms.of(143, x, 60, y)))
    mp.add_constraint(Constraint.le(SumTerms.of(120, x, 210, y), 15000, "c1"))
    mp.add_constraint(Constraint.le(SumTerms.of(110, x, 30, y), 4000, "c2"))
    mp.add_constraint(Constraint.le(SumTerms.of(1, x, 1, y), 75, "c3"))
    return mp


@pytest.fixture
def mixed_builder(x: Variable, b: Variable, r: Variable) -> MPBuilder:
    """A builder with one variable of each kind."""
    mp = MPBuilder("mixed")
    mp.set_objective(Objective.min(SumTerms.of(1, x, 2, b, 3, r)))
    mp.add_constraint(Constraint.ge(SumTerms.of(1, x, 1, b), 1, "cover"))
    mp.add_constraint(Constraint.eq(SumTerms.of(1, r, -1, x), 0, "link"))
    return mp


@pytest.fixture
def example_mp():
    return one_four_three()


@pytest.fixture
def example_solution():
    return one_four_three_solution()
