"""Tests for MPDimension."""

import pytest

from mathprog.model import MPDimension, Variable, VariableKind


def test_of_kinds_counts_each_kind():
    kinds = [VariableKind.INT, VariableKind.BOOL, VariableKind.INT, VariableKind.REAL]
    dim = MPDimension.of_kinds(kinds, constraints=5)
    assert dim == MPDimension(bools=1, ints=2, reals=1, constraints=5)
    assert dim.variables == 4
    assert dim.integer_domains == 3
    assert dim.count(VariableKind.INT) == 2


def test_empty_dimension():
    dim = MPDimension.of_kinds([], 0)
    assert dim == MPDimension()
    assert dim.variables == 0


def test_negative_count_rejected():
    with pytest.raises(ValueError, match="reals"):
        MPDimension(reals=-1)


def test_dimension_follows_builder_mutations(builder):
    """Dimension is recomputed from the variables, never stored."""
    z = Variable.boolean("z")
    builder.add_variable(z)
    assert builder.dimension.bools == 1
    builder.remove_variable(z)
    assert builder.dimension.bools == 0
    assert builder.dimension.ints == 2
