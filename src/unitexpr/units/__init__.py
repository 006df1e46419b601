"""Dimension vectors and unit values."""

from .dimension import BASE_DIMENSIONS, Dimension
from .unit import Unit

__all__ = ["BASE_DIMENSIONS", "Dimension", "Unit"]
