"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations for different element types:
- Exact (int, Fraction, Decimal, numpy integers): no tolerance at all
- FP64 (float, complex, numpy float64): a few ulps of double precision
- FP32 (numpy float32/float16): relaxed for single-precision arithmetic

Used by Matrix.allclose(), which compares under the looser tier of its two
operands, and by the test suite.
"""

from dataclasses import dataclass

import numpy as np

from pymatrix.core.protocols import ElementType


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer and rational arithmetic is exact
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic, elements must compare equal',
)

# Double precision, the default for Python floats
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, agreement to ~1e-10 relative',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision, agreement to ~1e-4 relative',
)

# Element type used when a constructor is given none
DEFAULT_ELEMENT_TYPE: ElementType = int


def select_tolerance(element_type: ElementType) -> ToleranceTier:
    """Select the tolerance tier appropriate for an element type."""
    if element_type in (float, complex):
        return FP64
    if isinstance(element_type, type) and issubclass(element_type, np.inexact):
        if np.finfo(element_type).bits >= 64:
            return FP64
        return FP32
    return EXACT


def loosest(*tiers: ToleranceTier) -> ToleranceTier:
    """The most permissive of the given tiers, by (rtol, atol)."""
    return max(tiers, key=lambda tier: (tier.rtol, tier.atol))
