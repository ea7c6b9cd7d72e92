"""Tests for the dense matrix form."""

import numpy as np

from mathprog.model import BoolToIntView, Constraint, MPBuilder, Sense, Variable, to_matrix_form


def test_example_program_arrays(example_mp):
    form = to_matrix_form(example_mp)
    assert form.shape == (3, 2)
    np.testing.assert_array_equal(form.c, [143.0, 60.0])
    np.testing.assert_array_equal(form.A, [[120.0, 210.0], [110.0, 30.0], [1.0, 1.0]])
    np.testing.assert_array_equal(form.row_upper, [15000.0, 4000.0, 75.0])
    assert np.all(np.isneginf(form.row_lower))
    assert np.all(np.isneginf(form.col_lower))
    assert np.all(np.isposinf(form.col_upper))
    np.testing.assert_array_equal(form.integrality, [True, True])
    assert form.sense is Sense.MAX
    assert form.variables == example_mp.variables


def test_operators_and_repeated_variables():
    x = Variable.real("x", lower=0.0, upper=4.0)
    y = Variable.real("y")
    mp = MPBuilder()
    mp.add_constraint(Constraint.ge(x + 2 * y + 3 * x, 1.0))
    mp.add_constraint(Constraint.eq(y, 2.0))
    form = to_matrix_form(mp)
    np.testing.assert_array_equal(form.A, [[4.0, 2.0], [0.0, 1.0]])
    np.testing.assert_array_equal(form.row_lower, [1.0, 2.0])
    np.testing.assert_array_equal(form.row_upper, [np.inf, 2.0])
    np.testing.assert_array_equal(form.c, [0.0, 0.0])
    np.testing.assert_array_equal(form.col_lower, [0.0, -np.inf])
    np.testing.assert_array_equal(form.col_upper, [4.0, np.inf])
    np.testing.assert_array_equal(form.integrality, [False, False])
    assert form.sense is None


def test_view_bounds_are_used():
    wide = Variable.boolean("wide", lower=-1.0, upper=1.5)
    mp = MPBuilder()
    mp.add_variable(wide)
    form = to_matrix_form(BoolToIntView(mp))
    np.testing.assert_array_equal(form.col_lower, [0.0])
    np.testing.assert_array_equal(form.col_upper, [1.0])
    np.testing.assert_array_equal(form.integrality, [True])


def test_empty_program():
    form = to_matrix_form(MPBuilder())
    assert form.shape == (0, 0)
    assert form.c.size == 0
