"""Solver parameter identities, defaults and validity rules.

Parameters are grouped by value type. Each has a default value, recorded in
``DEFAULT_VALUES``, and a validity rule checked by ``is_meaningful``. Values
are never clamped: a value outside the rule is rejected.
"""

from __future__ import annotations

import math
from enum import Enum
from numbers import Real
from types import MappingProxyType
from typing import Any, Mapping, Union

__all__ = [
    "DoubleParameter",
    "IntParameter",
    "StringParameter",
    "Parameter",
    "DEFAULT_VALUES",
    "default_value",
    "is_meaningful",
    "parameter_from_string",
]


class DoubleParameter(Enum):
    """Parameters holding a real number, or None for no limit."""

    #: Limit on the wall-clock duration of a solve, in seconds.
    MAX_WALL_SECONDS = "max_wall_seconds"
    #: Limit on the CPU time of a solve, in seconds.
    MAX_CPU_SECONDS = "max_cpu_seconds"
    #: Limit on the branch-and-bound tree size, in megabytes.
    MAX_TREE_SIZE_MB = "max_tree_size_mb"
    #: Limit on the memory used by the solver, in megabytes.
    MAX_MEMORY_MB = "max_memory_mb"


class IntParameter(Enum):
    """Parameters holding an integer."""

    #: Maximal number of threads, None for the solver default.
    MAX_THREADS = "max_threads"
    #: 1 to ask for reproducible runs, 0 otherwise.
    DETERMINISTIC = "deterministic"


class StringParameter(Enum):
    """Parameters holding a string."""

    #: Directory the solver may use for temporary files, None for its default.
    WORK_DIR = "work_dir"


Parameter = Union[DoubleParameter, IntParameter, StringParameter]

DEFAULT_VALUES: Mapping[Parameter, Any] = MappingProxyType(
    {
        DoubleParameter.MAX_WALL_SECONDS: None,
        DoubleParameter.MAX_CPU_SECONDS: None,
        DoubleParameter.MAX_TREE_SIZE_MB: None,
        DoubleParameter.MAX_MEMORY_MB: None,
        IntParameter.MAX_THREADS: None,
        IntParameter.DETERMINISTIC: 0,
        StringParameter.WORK_DIR: None,
    }
)


def default_value(parameter: Parameter) -> Any:
    """Return the default value of ``parameter``."""
    return DEFAULT_VALUES[parameter]


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_meaningful(parameter: Parameter, value: Any) -> bool:
    """True when ``value`` is acceptable for ``parameter``.

    Rules:
        - Double parameters: None, or a number strictly greater than zero.
        - ``MAX_THREADS``: None, or an integer strictly greater than zero.
        - ``DETERMINISTIC``: None, 0 or 1 (None meaning 0).
        - ``WORK_DIR``: None, or a non-empty string.
    """
    if value is None:
        return True
    if isinstance(parameter, DoubleParameter):
        return _is_number(value) and not math.isnan(value) and value > 0
    if isinstance(parameter, IntParameter):
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if parameter is IntParameter.DETERMINISTIC:
            return value in (0, 1)
        return value > 0
    if isinstance(parameter, StringParameter):
        return isinstance(value, str) and value != ""
    raise TypeError(f"Unknown parameter {parameter!r}")


def parameter_from_string(value: str) -> Parameter:
    """Parse a parameter from its name or value ("MAX_THREADS", "max_threads").

    Raises:
        ValueError: If no parameter matches.
    """
    key = value.strip().lower()
    for parameter in DEFAULT_VALUES:
        if parameter.value == key:
            return parameter
    valid = ", ".join(p.value for p in DEFAULT_VALUES)
    raise ValueError(f"Invalid parameter '{value}'. Valid values are: {valid}")
