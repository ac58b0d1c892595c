"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
matrix types in pymatrix.dense.

Key components:
    protocols: Numeric element protocol, ElementType, zero_of
    exceptions: Exception hierarchy
    validation: Index, shape and data-length validators
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.protocols import ElementType, Numeric, zero_of
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    IndexOutOfBoundsError,
)
from pymatrix.core.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Protocols
    "ElementType",
    "Numeric",
    "zero_of",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "IndexOutOfBoundsError",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
