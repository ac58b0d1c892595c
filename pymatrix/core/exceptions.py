"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Operation-specific exceptions inherit from the
appropriate base class here.

Two families exist:
    - Faults (IndexOutOfBoundsError, ShapeMismatchError): contract
      violations by the caller. Raised before any mutation or computation,
      never caught inside the library.
    - Construction errors (ValidationError, DimensionError): invalid
      arguments to a constructor, which callers may reasonably validate.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when constructor arguments fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when flat data does not match the declared shape or when
    nested rows are ragged.
    """
    pass


class ShapeMismatchError(PyMatrixError):
    """
    Operand shapes are incompatible for an operation.

    A fault, not a construction error, so it sits outside the
    ValidationError branch.

    Raised by element-wise operations (map_with, +, -) when the operands
    have different shapes, and by the matrix product when the inner
    dimensions disagree.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfBoundsError(PyMatrixError, IndexError):
    """
    Element index lies outside the matrix.

    Also an IndexError, so generic sequence-handling code recognises it.

    Attributes:
        index: The offending (i, j) pair
        shape: (rows, cols) of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape
