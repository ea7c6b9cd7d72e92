"""Typed, validated solver configuration."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from mathprog.errors import (
    ConflictingTimingLimitsError,
    InvalidParameterValueError,
    UnsupportedTimingModeError,
)
from mathprog.logging import get_logger
from mathprog.parameters.definitions import (
    DEFAULT_VALUES,
    DoubleParameter,
    IntParameter,
    Parameter,
    StringParameter,
    default_value,
    is_meaningful,
    parameter_from_string,
)
from mathprog.parameters import timing
from mathprog.parameters.timing import TimingType

LOGGER = get_logger(__name__)

__all__ = ["Configuration"]


class Configuration:
    """Solver parameter values.

    Only values that differ from the defaults are stored: setting a parameter
    to its default removes its entry. Two configurations are equal when they
    store the same values. Configurations are mutable, hence unhashable; use
    ``copy()`` to keep a snapshot.

    Example:
        ```python
        config = Configuration()
        config.set_value(DoubleParameter.MAX_WALL_SECONDS, 30.0)
        config.resolve_timing_type()  # TimingType.WALL_TIMING
        ```
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._values: Dict[Parameter, Any] = {}

    @staticmethod
    def _normalize(parameter: Parameter, value: Any) -> Any:
        """Validate ``value`` and return it in its stored form.

        Raises:
            InvalidParameterValueError: If the value is not meaningful.
        """
        if not isinstance(parameter, (DoubleParameter, IntParameter, StringParameter)):
            raise TypeError(f"Unknown parameter {parameter!r}")
        if not is_meaningful(parameter, value):
            raise InvalidParameterValueError(
                f"The value {value!r} is not meaningful for the parameter "
                f"{parameter.name}."
            )
        if value is None:
            return default_value(parameter) if parameter is IntParameter.DETERMINISTIC else None
        if isinstance(parameter, DoubleParameter):
            return float(value)
        return value

    def set_value(self, parameter: Parameter, value: Any) -> bool:
        """Set the value of ``parameter``.

        Args:
            parameter: Parameter to set.
            value: New value; None or the default value resets the parameter.

        Returns:
            True if the stored values changed.

        Raises:
            InvalidParameterValueError: If the value is of the wrong type or
                outside the valid range of the parameter.
        """
        stored = self._normalize(parameter, value)
        if stored == default_value(parameter):
            changed = parameter in self._values
            self._values.pop(parameter, None)
        else:
            changed = self._values.get(parameter) != stored
            self._values[parameter] = stored
        if changed:
            LOGGER.debug("Parameter %s set to %r", parameter.name, stored)
        return changed

    def get_value(self, parameter: Parameter) -> Any:
        """Return the value of ``parameter``, its default if not set."""
        if parameter in self._values:
            return self._values[parameter]
        return default_value(parameter)

    def is_default(self, parameter: Parameter) -> bool:
        """True when ``parameter`` has its default value."""
        return parameter not in self._values

    @property
    def values(self) -> Mapping[Parameter, Any]:
        """Read-only mapping of the parameters that differ from their defaults."""
        return MappingProxyType(self._values)

    def set_all(self, other: "Configuration") -> bool:
        """Copy every value of ``other`` into this configuration.

        Returns:
            True if this configuration changed.
        """
        changed = False
        for parameter in DEFAULT_VALUES:
            changed = self.set_value(parameter, other.get_value(parameter)) or changed
        return changed

    def clear(self) -> bool:
        """Reset every parameter to its default."""
        changed = bool(self._values)
        self._values.clear()
        return changed

    def copy(self) -> "Configuration":
        """Return an independent configuration with the same values."""
        duplicate = Configuration()
        duplicate._values = dict(self._values)
        return duplicate

    def to_dict(self) -> Dict[str, Any]:
        """Non-default values keyed by parameter value name (``"max_threads"``)."""
        return {parameter.value: value for parameter, value in self._values.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Configuration":
        """Build a configuration from a mapping produced by ``to_dict``.

        Raises:
            ValueError: If a key names no parameter.
            InvalidParameterValueError: If a value is not meaningful.
        """
        config = cls()
        for key, value in data.items():
            config.set_value(parameter_from_string(key), value)
        return config

    def resolve_timing_type(
        self, cpu_timing_supported: Optional[bool] = None
    ) -> TimingType:
        """Choose the clock a solver should use for its time limit.

        Args:
            cpu_timing_supported: Whether CPU time can be measured; detected
                on the current platform when None.

        Returns:
            Wall timing when only the wall limit is set. CPU timing when only
            the CPU limit is set. With no limit, CPU timing when supported and
            wall timing otherwise.

        Raises:
            ConflictingTimingLimitsError: If both time limits are set.
            UnsupportedTimingModeError: If a CPU limit is set but CPU time
                cannot be measured.
        """
        supported = (
            timing.cpu_timing_supported()
            if cpu_timing_supported is None
            else cpu_timing_supported
        )
        wall = self.get_value(DoubleParameter.MAX_WALL_SECONDS)
        cpu = self.get_value(DoubleParameter.MAX_CPU_SECONDS)
        if wall is not None and cpu is not None:
            raise ConflictingTimingLimitsError(
                "Both a wall time limit and a CPU time limit are set; "
                "at most one may be used."
            )
        if wall is not None:
            return TimingType.WALL_TIMING
        if cpu is not None:
            if not supported:
                raise UnsupportedTimingModeError(
                    "A CPU time limit is set but CPU time cannot be measured "
                    "on this platform."
                )
            return TimingType.CPU_TIMING
        return TimingType.CPU_TIMING if supported else TimingType.WALL_TIMING

    def time_limit(self, timing_type: TimingType) -> Optional[float]:
        """Return the limit in seconds for the given clock, or None."""
        if timing_type is TimingType.WALL_TIMING:
            return self.get_value(DoubleParameter.MAX_WALL_SECONDS)
        return self.get_value(DoubleParameter.MAX_CPU_SECONDS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Configuration({self.to_dict()!r})"
