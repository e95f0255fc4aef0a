"""Domain models for square root averaging results."""

from dataclasses import dataclass
from typing import Optional, Union

# A possibly-missing measurement: None marks an absent value
InputValue = Optional[float]


@dataclass
class AverageResult:
    """Represents the average square root over the values that survived filtering."""

    average: float
    sample_count: int
    skipped_absent: int = 0
    skipped_negative: int = 0
    skipped_undefined: int = 0

    def __post_init__(self):
        """Validate the result data."""
        if self.sample_count < 1:
            raise ValueError(f"Sample count must be at least 1, got {self.sample_count}")
        for name in ("skipped_absent", "skipped_negative", "skipped_undefined"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

    @property
    def skipped_count(self) -> int:
        """Total number of input elements dropped by the filters."""
        return self.skipped_absent + self.skipped_negative + self.skipped_undefined

    @property
    def total_count(self) -> int:
        """Number of input elements visited."""
        return self.sample_count + self.skipped_count

    def to_dict(self) -> dict:
        """
        Convert the result to a dictionary for JSON serialization.

        Returns:
            Dictionary representation
        """
        return {
            "average": self.average,
            "sample_count": self.sample_count,
            "skipped": {
                "absent": self.skipped_absent,
                "negative": self.skipped_negative,
                "undefined": self.skipped_undefined,
            },
        }

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"AverageResult("
            f"average={self.average:.6f}, "
            f"samples={self.sample_count}, "
            f"skipped={self.skipped_count})"
        )


def format_average(result: Union[AverageResult, float, None]) -> str:
    """
    Render an averaging outcome as a single output line.

    Args:
        result: An AverageResult, a bare average, or None for "no data"

    Returns:
        "Average: <value>" or "Average: None"
    """
    if result is None:
        return "Average: None"

    average = result.average if isinstance(result, AverageResult) else float(result)
    return f"Average: {average!r}"
