"""Processing layer for square root averaging (filtering, accumulation)."""

from .aggregator import SquareRootAverager, aggregate, average_square_root

__all__ = ["SquareRootAverager", "aggregate", "average_square_root"]
