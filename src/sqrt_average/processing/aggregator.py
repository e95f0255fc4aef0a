"""Square root averaging over sequences of possibly-missing values."""

import logging
import math
from typing import Iterable, Optional

from ..models import AverageResult, InputValue

logger = logging.getLogger(__name__)


def is_present(value: InputValue) -> bool:
    """Return True if the value is not the absent marker."""
    return value is not None


def is_non_negative(value: float) -> bool:
    """Return True for zero and positive values."""
    return not value < 0


def principal_root(value: float) -> float:
    """
    Return the non-negative square root of a non-negative value.

    Integers too large for a float are rooted exactly first; a root that is
    still beyond float range is returned as infinity.
    """
    try:
        return math.sqrt(value)
    except OverflowError:
        if not isinstance(value, int):
            return math.inf
    try:
        return float(math.isqrt(value))
    except OverflowError:
        return math.inf


def is_defined_root(root: float) -> bool:
    """Return True if the root is a real number (NaN input gives a NaN root)."""
    return not math.isnan(root)


class SquareRootAverager:
    """
    Accumulates square roots of values and calculates their average.

    Each value passes through the filter steps in order:
    - skip absent values
    - skip negative values
    - take the principal square root
    - skip roots that are not real numbers
    - accumulate the root
    """

    def __init__(self):
        """Initialize an empty averager."""
        self._root_sum = 0.0
        self._sample_count = 0
        self._skipped_absent = 0
        self._skipped_negative = 0
        self._skipped_undefined = 0

    def add_value(self, value: InputValue) -> bool:
        """
        Run a single value through the filter steps.

        Args:
            value: Value to add, or None if missing

        Returns:
            True if the value's root was accumulated, False if it was skipped
        """
        if not is_present(value):
            self._skipped_absent += 1
            logger.debug("Skipped absent value")
            return False

        if not is_non_negative(value):
            self._skipped_negative += 1
            logger.debug(f"Skipped negative value {value}")
            return False

        root = principal_root(value)

        if not is_defined_root(root):
            self._skipped_undefined += 1
            logger.debug(f"Skipped value {value} with undefined square root")
            return False

        self._root_sum += root
        self._sample_count += 1

        logger.debug(
            f"Added root {root} of {value}, averager now contains {self._sample_count} samples"
        )
        return True

    def add_values(self, values: Iterable[InputValue]) -> int:
        """
        Add every value of a sequence, in order.

        Args:
            values: Values to add

        Returns:
            Number of values accepted
        """
        accepted = 0
        for value in values:
            if self.add_value(value):
                accepted += 1
        return accepted

    def get_aggregated(self) -> Optional[AverageResult]:
        """
        Calculate and return the average square root.

        Returns:
            AverageResult with statistics, or None if no values survived filtering
        """
        if self._sample_count == 0:
            logger.warning(
                f"No data available for averaging ({self.get_skipped_count()} values skipped)"
            )
            return None

        result = AverageResult(
            average=self._root_sum / self._sample_count,
            sample_count=self._sample_count,
            skipped_absent=self._skipped_absent,
            skipped_negative=self._skipped_negative,
            skipped_undefined=self._skipped_undefined,
        )

        logger.debug(f"Calculated {result}")

        return result

    def get_sample_count(self) -> int:
        """
        Get the number of values accumulated so far.

        Returns:
            Number of samples
        """
        return self._sample_count

    def get_skipped_count(self) -> int:
        """
        Get the number of values dropped by the filters so far.

        Returns:
            Number of skipped values
        """
        return self._skipped_absent + self._skipped_negative + self._skipped_undefined

    def clear(self) -> None:
        """Reset all running state."""
        sample_count = self._sample_count
        self._root_sum = 0.0
        self._sample_count = 0
        self._skipped_absent = 0
        self._skipped_negative = 0
        self._skipped_undefined = 0
        logger.debug(f"Cleared averager ({sample_count} samples removed)")

    def __str__(self) -> str:
        """String representation of averager state."""
        return (
            f"SquareRootAverager(samples={self._sample_count}, "
            f"skipped={self.get_skipped_count()})"
        )


def aggregate(values: Iterable[InputValue]) -> Optional[AverageResult]:
    """
    Average the square roots of the present, non-negative values.

    Args:
        values: Sequence of values, None marking missing ones

    Returns:
        AverageResult, or None if no value survived filtering
    """
    averager = SquareRootAverager()
    averager.add_values(values)
    return averager.get_aggregated()


def average_square_root(values: Iterable[InputValue]) -> Optional[float]:
    """Return the average square root of the usable values, or None if there are none."""
    result = aggregate(values)
    return result.average if result is not None else None
