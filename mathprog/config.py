"""Configuration classes for mathprog components."""

from dataclasses import dataclass


@dataclass
class ToleranceConfig:
    """Numeric tolerances used when reading values back from a solution."""

    # Maximal distance to 0 or 1 for a value to be read as a boolean
    boolean: float = 1e-6

    # Maximal distance to the nearest integer for a value to be read as an integer
    integrality: float = 1e-6

    def is_close_to(self, value: float, target: float, tolerance: float) -> bool:
        """Return True when ``value`` lies within ``tolerance`` of ``target``."""
        return abs(value - target) <= tolerance


# Global configuration instance
TOLERANCES = ToleranceConfig()
