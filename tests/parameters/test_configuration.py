"""Tests for Configuration and timing-mode resolution."""

import pytest

from mathprog.errors import (
    ConflictingTimingLimitsError,
    InvalidParameterValueError,
    UnsupportedTimingModeError,
)
from mathprog.parameters import (
    Configuration,
    DoubleParameter,
    IntParameter,
    StringParameter,
    TimingType,
    timing,
)


class TestSetValue:
    """Tests for storing and validating values."""

    def test_defaults(self):
        config = Configuration()
        assert config.get_value(DoubleParameter.MAX_WALL_SECONDS) is None
        assert config.get_value(IntParameter.DETERMINISTIC) == 0
        assert config.get_value(StringParameter.WORK_DIR) is None
        assert dict(config.values) == {}

    def test_set_and_get(self):
        config = Configuration()
        assert config.set_value(DoubleParameter.MAX_WALL_SECONDS, 30) is True
        assert config.get_value(DoubleParameter.MAX_WALL_SECONDS) == 30.0
        assert isinstance(config.get_value(DoubleParameter.MAX_WALL_SECONDS), float)
        assert config.set_value(DoubleParameter.MAX_WALL_SECONDS, 30.0) is False
        assert config.set_value(DoubleParameter.MAX_WALL_SECONDS, 40.0) is True

    def test_setting_default_removes_entry(self):
        config = Configuration()
        config.set_value(IntParameter.DETERMINISTIC, 1)
        assert IntParameter.DETERMINISTIC in config.values
        assert config.set_value(IntParameter.DETERMINISTIC, 0) is True
        assert IntParameter.DETERMINISTIC not in config.values
        assert config.is_default(IntParameter.DETERMINISTIC)
        assert config.set_value(IntParameter.DETERMINISTIC, 0) is False

    def test_deterministic_none_means_zero(self):
        config = Configuration()
        config.set_value(IntParameter.DETERMINISTIC, 1)
        assert config.set_value(IntParameter.DETERMINISTIC, None) is True
        assert config.get_value(IntParameter.DETERMINISTIC) == 0

    def test_none_resets_limits(self):
        config = Configuration()
        config.set_value(DoubleParameter.MAX_MEMORY_MB, 512.0)
        assert config.set_value(DoubleParameter.MAX_MEMORY_MB, None) is True
        assert config.get_value(DoubleParameter.MAX_MEMORY_MB) is None

    @pytest.mark.parametrize(
        "parameter,value",
        [
            (DoubleParameter.MAX_WALL_SECONDS, 0.0),
            (DoubleParameter.MAX_CPU_SECONDS, -1.0),
            (DoubleParameter.MAX_TREE_SIZE_MB, float("nan")),
            (DoubleParameter.MAX_MEMORY_MB, "512"),
            (IntParameter.MAX_THREADS, 0),
            (IntParameter.MAX_THREADS, 2.0),
            (IntParameter.MAX_THREADS, True),
            (IntParameter.DETERMINISTIC, 2),
            (StringParameter.WORK_DIR, ""),
            (StringParameter.WORK_DIR, 3),
        ],
    )
    def test_invalid_values_rejected_not_clamped(self, parameter, value):
        config = Configuration()
        with pytest.raises(InvalidParameterValueError):
            config.set_value(parameter, value)
        assert dict(config.values) == {}

    def test_invalid_value_keeps_previous(self):
        config = Configuration()
        config.set_value(IntParameter.MAX_THREADS, 4)
        with pytest.raises(InvalidParameterValueError):
            config.set_value(IntParameter.MAX_THREADS, -4)
        assert config.get_value(IntParameter.MAX_THREADS) == 4

    def test_invalid_value_is_value_error(self):
        with pytest.raises(ValueError):
            Configuration().set_value(IntParameter.MAX_THREADS, 0)


class TestBulkOperations:
    """Tests for copy, set_all, clear and dict conversion."""

    def test_copy_is_independent(self):
        config = Configuration()
        config.set_value(StringParameter.WORK_DIR, "/tmp/work")
        copy = config.copy()
        assert copy == config
        copy.set_value(StringParameter.WORK_DIR, None)
        assert copy != config

    def test_set_all(self):
        source = Configuration()
        source.set_value(IntParameter.MAX_THREADS, 8)
        target = Configuration()
        target.set_value(DoubleParameter.MAX_WALL_SECONDS, 10.0)
        assert target.set_all(source) is True
        assert target == source
        assert target.set_all(source) is False

    def test_clear(self):
        config = Configuration()
        config.set_value(IntParameter.MAX_THREADS, 8)
        assert config.clear() is True
        assert config == Configuration()
        assert config.clear() is False

    def test_dict_round_trip(self):
        config = Configuration()
        config.set_value(IntParameter.MAX_THREADS, 8)
        config.set_value(DoubleParameter.MAX_CPU_SECONDS, 1.5)
        data = config.to_dict()
        assert data == {"max_threads": 8, "max_cpu_seconds": 1.5}
        assert Configuration.from_dict(data) == config

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="Invalid parameter"):
            Configuration.from_dict({"max_speed": 1})

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Configuration())


class TestTimingType:
    """Tests for resolve_timing_type()."""

    def test_both_limits_conflict(self):
        config = Configuration()
        config.set_value(DoubleParameter.MAX_WALL_SECONDS, 10.0)
        config.set_value(DoubleParameter.MAX_CPU_SECONDS, 10.0)
        with pytest.raises(ConflictingTimingLimitsError):
            config.resolve_timing_type(cpu_timing_supported=True)

    @pytest.mark.parametrize("supported", [True, False])
    def test_wall_limit_only(self, supported):
        config = Configuration()
        config.set_value(DoubleParameter.MAX_WALL_SECONDS, 10.0)
        assert config.resolve_timing_type(supported) is TimingType.WALL_TIMING
        assert config.time_limit(TimingType.WALL_TIMING) == 10.0

    def test_cpu_limit_only(self):
        config = Configuration()
        config.set_value(DoubleParameter.MAX_CPU_SECONDS, 5.0)
        assert config.resolve_timing_type(True) is TimingType.CPU_TIMING
        assert config.time_limit(TimingType.CPU_TIMING) == 5.0
        with pytest.raises(UnsupportedTimingModeError):
            config.resolve_timing_type(False)

    def test_no_limit(self):
        config = Configuration()
        assert config.resolve_timing_type(True) is TimingType.CPU_TIMING
        assert config.resolve_timing_type(False) is TimingType.WALL_TIMING
        assert config.time_limit(TimingType.WALL_TIMING) is None

    def test_platform_detection(self, monkeypatch):
        monkeypatch.setattr(timing, "cpu_timing_supported", lambda: False)
        assert Configuration().resolve_timing_type() is TimingType.WALL_TIMING
