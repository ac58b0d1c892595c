"""
Core protocols for PyMatrix.

These define structural interfaces that matrix elements must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that builtin numbers, Fraction, Decimal and numpy scalars all qualify
without registration.

Design Principles:
    - Minimal contracts: prescribe only what the algorithms use
    - Type-safe: use generics to preserve the element type through operations
"""

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

# Type variable for the matrix element type
T = TypeVar('T', bound='Numeric')


@runtime_checkable
class Numeric(Protocol):
    """
    Minimal protocol for a matrix element.

    Element-wise addition and subtraction need __add__ and __sub__; the
    matrix product needs __mul__ and __add__. The additive identity is not
    part of the protocol because Python numbers carry no class-level zero;
    it is produced by an ElementType callable instead (see below).

    Python numbers are immutable, so the "duplicable without aliasing"
    requirement holds by value semantics.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...


# A callable mapping the integer 0 to the additive identity of the element
# type. int, float, complex, Fraction, Decimal and numpy scalar types all fit.
ElementType = Callable[[int], Any]


def zero_of(element_type: ElementType) -> Any:
    """Additive identity for an element type."""
    return element_type(0)
