"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent. Every check runs before the
operation it guards touches any storage, so a failed check never leaves
a partially mutated matrix behind.

Design principles:
    - No silent coercion of dimensions or indices
    - Negative indices are out of bounds (no wrap-around)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
"""

import logging
from numbers import Integral

from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ShapeMismatchError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def check_dimension(value: object, name: str) -> int:
    """
    Validate a row or column count.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    # bool is an Integral subclass but never a meaningful dimension
    if isinstance(value, bool) or not isinstance(value, Integral):
        logger.debug("%s: invalid dimension %r", name, value)
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        logger.debug("%s: negative dimension %d", name, value)
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_index(i: int, j: int, shape: tuple[int, int]) -> None:
    """
    Verify (i, j) addresses an element of a matrix with the given shape.

    Args:
        i: Row index
        j: Column index
        shape: (rows, cols) of the matrix

    Raises:
        TypeError: If i or j is not an integer (bool included)
        IndexOutOfBoundsError: If i is outside [0, rows) or j outside [0, cols)
    """
    for name, value in (('row', i), ('column', j)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            logger.debug("%s index %r is not an integer", name, value)
            raise TypeError(
                f"{name} index must be an integer, got {type(value).__name__} {value!r}"
            )

    rows, cols = shape
    if not 0 <= i < rows:
        logger.debug("row index %r out of bounds for shape %s", i, shape)
        raise IndexOutOfBoundsError(
            f"row index {i} out of bounds for matrix with {rows} rows",
            index=(i, j),
            shape=shape,
        )
    if not 0 <= j < cols:
        logger.debug("column index %r out of bounds for shape %s", j, shape)
        raise IndexOutOfBoundsError(
            f"column index {j} out of bounds for matrix with {cols} columns",
            index=(i, j),
            shape=shape,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands of an element-wise operation have equal shapes.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if left != right:
        logger.debug("%s: shape mismatch %s vs %s", operation, left, right)
        raise ShapeMismatchError(
            f"{operation}: shapes {left[0]}x{left[1]} and {right[0]}x{right[1]} differ",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the matrix product left @ right is defined.

    Args:
        left: Shape of the left operand (m, n)
        right: Shape of the right operand (n, p)
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If left has a different column count than right has rows
    """
    if left[1] != right[0]:
        logger.debug("%s: inner dimension mismatch %s vs %s", operation, left, right)
        raise ShapeMismatchError(
            f"{operation}: inner dimensions differ "
            f"({left[0]}x{left[1]} times {right[0]}x{right[1]}, "
            f"left cols={left[1]}, right rows={right[0]})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_data_length(length: int, rows: int, cols: int, name: str) -> None:
    """
    Verify flat data holds exactly rows * cols elements.

    Args:
        length: Number of elements supplied
        rows: Declared row count
        cols: Declared column count
        name: Parameter name for error messages

    Raises:
        DimensionError: If length != rows * cols
    """
    expected = rows * cols
    if length != expected:
        logger.debug("%s: got %d elements, expected %d", name, length, expected)
        raise DimensionError(
            f"{name}: expected {expected} elements for a {rows}x{cols} matrix, got {length}"
        )


def check_rectangular(row_lengths: list[int], name: str) -> None:
    """
    Verify every row of a nested sequence has the same length.

    Args:
        row_lengths: Length of each row, in order
        name: Parameter name for error messages

    Raises:
        DimensionError: If any row length differs from the first
    """
    if not row_lengths:
        return

    expected = row_lengths[0]
    ragged = [k for k, length in enumerate(row_lengths) if length != expected]
    if ragged:
        logger.debug("%s: ragged rows at positions %s", name, ragged)
        details = ", ".join(f"row {k}={row_lengths[k]}" for k in ragged)
        raise DimensionError(
            f"{name}: ragged rows, expected {expected} columns but got {details}"
        )
