"""
Dense matrix module.

Public API:
    Matrix          - Generic dense row-major matrix value type
    integral_sqrt   - Exact integer square root, or None
"""

from pymatrix.dense.matrix import Matrix
from pymatrix.dense._utils import integral_sqrt

__all__ = [
    "Matrix",
    "integral_sqrt",
]
