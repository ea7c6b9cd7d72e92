"""Tests for ResultStatus, ComputationTime and Result."""

from datetime import timedelta

import pytest

from mathprog.model import MPBuilder, Variable
from mathprog.parameters import Configuration, IntParameter
from mathprog.results import ComputationTime, Result, ResultStatus, Solution


@pytest.fixture
def duration() -> ComputationTime:
    return ComputationTime.of_seconds(1.5, 1.2)


@pytest.fixture
def zero_objective_solution() -> Solution:
    mp = MPBuilder()
    mp.add_variable(Variable.real("v"))
    return Solution(mp, 0.0)


class TestComputationTime:
    """Tests for ComputationTime."""

    def test_of_seconds(self, duration):
        assert duration.wall_time == timedelta(seconds=1.5)
        assert duration.cpu_time == timedelta(seconds=1.2)
        assert ComputationTime.of_seconds(2).cpu_time is None

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            ComputationTime(timedelta(seconds=-1))
        with pytest.raises(ValueError):
            ComputationTime(timedelta(0), timedelta(seconds=-1))

    def test_type_checked(self):
        with pytest.raises(TypeError):
            ComputationTime(1.5)  # type: ignore[arg-type]

    def test_str(self, duration):
        assert str(duration) == "wall 1.500s, cpu 1.200s"


class TestResultStatus:
    """Tests for the solution policy of each status."""

    def test_found_feasible(self):
        assert ResultStatus.OPTIMAL.found_feasible
        assert ResultStatus.FEASIBLE.found_feasible
        assert not ResultStatus.TIME_LIMIT_REACHED.found_feasible

    def test_from_string(self):
        assert ResultStatus.from_string("time_limit_reached") is ResultStatus.TIME_LIMIT_REACHED
        with pytest.raises(ValueError):
            ResultStatus.from_string("solved")


class TestResult:
    """Tests for Result admissibility and configuration copy."""

    @pytest.mark.parametrize("status", [ResultStatus.OPTIMAL, ResultStatus.FEASIBLE])
    def test_feasible_statuses_require_solution(self, status, duration, example_solution):
        result = Result(status, duration, Configuration(), example_solution)
        assert result.found_feasible
        with pytest.raises(ValueError, match="requires a solution"):
            Result(status, duration, Configuration())

    @pytest.mark.parametrize(
        "status", [ResultStatus.INFEASIBLE, ResultStatus.INFEASIBLE_OR_UNBOUNDED]
    )
    def test_infeasible_statuses_forbid_solution(self, status, duration, example_solution):
        assert Result(status, duration, Configuration()).solution is None
        with pytest.raises(ValueError, match="has no solution"):
            Result(status, duration, Configuration(), example_solution)

    def test_unbounded(self, duration, example_solution, zero_objective_solution):
        assert Result(ResultStatus.UNBOUNDED, duration, Configuration()).solution is None
        result = Result(ResultStatus.UNBOUNDED, duration, Configuration(), example_solution)
        assert result.solution is example_solution
        with pytest.raises(ValueError, match="non-zero objective"):
            Result(ResultStatus.UNBOUNDED, duration, Configuration(), zero_objective_solution)

    @pytest.mark.parametrize(
        "status",
        [
            ResultStatus.TIME_LIMIT_REACHED,
            ResultStatus.MEMORY_LIMIT_REACHED,
            ResultStatus.ERROR,
        ],
    )
    def test_limit_statuses_allow_either(self, status, duration, example_solution):
        Result(status, duration, Configuration())
        Result(status, duration, Configuration(), example_solution)

    def test_configuration_is_copied(self, duration):
        config = Configuration()
        config.set_value(IntParameter.MAX_THREADS, 4)
        result = Result(ResultStatus.INFEASIBLE, duration, config)
        config.set_value(IntParameter.MAX_THREADS, 8)
        assert result.configuration.get_value(IntParameter.MAX_THREADS) == 4
        assert result.configuration is not config

    def test_frozen(self, duration):
        result = Result(ResultStatus.INFEASIBLE, duration, Configuration())
        with pytest.raises(AttributeError):
            result.status = ResultStatus.OPTIMAL  # type: ignore[misc]

    def test_type_checks(self, duration):
        with pytest.raises(TypeError):
            Result("optimal", duration, Configuration())  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Result(ResultStatus.ERROR, duration, {})  # type: ignore[arg-type]
