"""
PyMatrix: a generic dense matrix value type for Python.

A correctness-first reference implementation of a row-major dense matrix
over any numeric element type (int, float, complex, Fraction, Decimal,
numpy scalars), with bounds-checked element access, functional mapping
and the algebraic operators +, -, * (matrix product) and ==.

Submodules:
    core: Protocols, exceptions, validators, tolerance tiers
    dense: The Matrix type
"""

__version__ = "0.1.0"

import logging

from pymatrix.dense import Matrix, integral_sqrt
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    IndexOutOfBoundsError,
)

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Matrix",
    "integral_sqrt",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "IndexOutOfBoundsError",
]
