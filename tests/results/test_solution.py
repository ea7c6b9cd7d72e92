"""Tests for Solution validation and value accessors."""

import math

import pytest

from mathprog.errors import UnknownVariableError
from mathprog.examples import one_four_three_solution
from mathprog.model import MP, Constraint, MPBuilder, Objective, Variable
from mathprog.results import Solution


class TestConstruction:
    """Tests for validation at construction."""

    def test_program_is_frozen(self, builder, x, y):
        solution = Solution(builder, 6266.0, {x: 22.0, y: 52.0})
        assert isinstance(solution.mp, MP)
        builder.add_constraint(Constraint.le(x, 16))
        assert len(solution.mp.constraints) == 3

    def test_values_are_read_only(self, example_solution, x):
        with pytest.raises(TypeError):
            example_solution.values[x] = 1.0  # type: ignore[index]

    def test_unknown_variable_rejected(self, example_mp):
        with pytest.raises(UnknownVariableError):
            Solution(example_mp, 0.0, {Variable.real("z"): 1.0})

    def test_unknown_constraint_rejected(self, example_mp, x):
        with pytest.raises(ValueError):
            Solution(example_mp, dual_values={Constraint.le(x, 3): 1.0})

    def test_non_finite_values_rejected(self, example_mp, x):
        with pytest.raises(ValueError):
            Solution(example_mp, math.inf)
        with pytest.raises(ValueError):
            Solution(example_mp, 1.0, {x: math.nan})

    def test_zero_objective_admits_only_zero(self, x):
        mp = MPBuilder()
        mp.add_variable(x)
        assert Solution(mp, 0.0).objective_value == 0.0
        assert Solution(mp).objective_value is None
        with pytest.raises(ValueError):
            Solution(mp, 1.0)

    def test_negative_zero_normalized(self, x):
        mp = MPBuilder()
        mp.add_variable(x)
        solution = Solution(mp, -0.0, {x: -0.0})
        assert math.copysign(1.0, solution.objective_value) == 1.0
        assert math.copysign(1.0, solution.values[x]) == 1.0

    def test_partial_solution(self, example_mp, x, y):
        solution = Solution(example_mp, None, {x: 22.0})
        assert solution.value(x) == 22.0
        assert solution.value(y) is None


class TestAccessors:
    """Tests for reading values back."""

    def test_value_of_unknown_variable(self, example_solution):
        with pytest.raises(UnknownVariableError):
            example_solution.value(Variable.real("z"))

    def test_boolean_value(self):
        b = Variable.boolean("b")
        c = Variable.boolean("c")
        d = Variable.boolean("d")
        mp = MPBuilder()
        mp.add_variables([b, c, d])
        solution = Solution(mp, values={b: 1.0 - 1e-9, c: 1e-9, d: 0.5})
        assert solution.boolean_value(b) is True
        assert solution.boolean_value(c) is False
        with pytest.raises(ValueError, match="non boolean"):
            solution.boolean_value(d)

    def test_integer_value(self, example_mp, x, y):
        solution = Solution(example_mp, values={x: 21.9999999, y: 52.4})
        assert solution.integer_value(x) == 22
        with pytest.raises(ValueError, match="non integer"):
            solution.integer_value(y)

    def test_missing_value(self, example_mp, x):
        with pytest.raises(ValueError, match="no value"):
            Solution(example_mp).integer_value(x)

    def test_computed_objective_value(self, example_solution):
        assert example_solution.computed_objective_value() == example_solution.objective_value

    def test_computed_objective_value_needs_all_values(self, example_mp, x):
        with pytest.raises(UnknownVariableError):
            Solution(example_mp, values={x: 1.0}).computed_objective_value()

    def test_dual_value(self, example_mp, x, y):
        c3 = Constraint.le(x + y, 75)
        solution = Solution(example_mp, dual_values={c3: 12.5})
        assert solution.dual_value(c3) == 12.5
        assert solution.dual_value(Constraint.le(x + y, 80)) is None

    def test_to_dataframe(self, example_solution):
        df = example_solution.to_dataframe()
        assert list(df.index) == ["x", "y"]
        assert list(df["value"]) == [22.0, 52.0]
        assert list(df["kind"]) == ["INT", "INT"]

    def test_to_dataframe_partial(self, example_mp, x):
        df = Solution(example_mp, values={x: 1.0}).to_dataframe()
        assert math.isnan(df.loc["y", "value"])


class TestEqualityAndText:
    """Tests for equality, hashing and string rendering."""

    def test_equal_solutions(self, example_solution):
        other = one_four_three_solution()
        assert other == example_solution
        assert hash(other) == hash(example_solution)

    def test_different_values(self, example_mp, x, y):
        a = Solution(example_mp, 6266.0, {x: 22.0, y: 52.0})
        b = Solution(example_mp, 6266.0, {x: 22.0, y: 51.0})
        assert a != b

    def test_str(self, example_solution):
        text = str(example_solution)
        assert "OneFourThree" in text
        assert "Objective value: 6266" in text
        assert "\tx = 22" in text

    def test_objective_of_zero_program(self):
        assert Solution(MPBuilder()).computed_objective_value() == 0.0

    def test_objective_with_sense(self, x):
        mp = MPBuilder()
        mp.set_objective(Objective.min(2 * x))
        assert Solution(mp, 4.0, {x: 2.0}).computed_objective_value() == 4.0
