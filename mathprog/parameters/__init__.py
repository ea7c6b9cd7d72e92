"""Solver parameters: identities, defaults, validation and timing modes."""

from mathprog.parameters.timing import TimingType, cpu_timing_supported
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
from mathprog.parameters.configuration import Configuration

__all__ = [
    "DoubleParameter",
    "IntParameter",
    "StringParameter",
    "Parameter",
    "DEFAULT_VALUES",
    "default_value",
    "is_meaningful",
    "parameter_from_string",
    "Configuration",
    "TimingType",
    "cpu_timing_supported",
]
