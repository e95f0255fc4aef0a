"""Square root averaging.

A small Python library for averaging the square roots of the usable values
in a sequence of possibly-missing measurements.
"""

__version__ = "0.1.0"

from .config import Config, ConfigError
from .models import AverageResult, InputValue, format_average
from .processing import SquareRootAverager, aggregate, average_square_root

__all__ = [
    "AverageResult",
    "InputValue",
    "format_average",
    "SquareRootAverager",
    "aggregate",
    "average_square_root",
    "Config",
    "ConfigError",
]
