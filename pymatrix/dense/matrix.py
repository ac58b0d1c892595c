"""
Matrix: generic dense row-major matrix value type.

Stores rows x cols elements in a flat list, row-major: element (i, j)
lives at offset i * cols + j. The element type is anything satisfying the
Numeric protocol; the additive identity comes from an ElementType callable
(int by default).

Construction:
    Matrix(rows, cols)                      zero-filled
    Matrix.from_data(rows, cols, data)      flat row-major data
    Matrix.from_rows([[1, 2], [3, 4]])      nested rows
    Matrix.from_array(ndarray)              2D numpy array
    Matrix.square([1, 2, 3, 4])             square from a flat literal, or None
    Matrix.identity(n)

Contract violations (out-of-bounds indices, incompatible shapes) raise
IndexOutOfBoundsError / ShapeMismatchError before any storage is touched.
Callers are expected to check shapes first; these are programming errors,
not control flow.
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable, Generic, Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.protocols import ElementType, T, zero_of
from pymatrix.core.tolerances import (
    DEFAULT_ELEMENT_TYPE,
    EXACT,
    loosest,
    select_tolerance,
)
from pymatrix.core.validation import (
    check_data_length,
    check_dimension,
    check_index,
    check_inner_dimensions,
    check_rectangular,
    check_same_shape,
)
from pymatrix.dense._utils import integral_sqrt

logger = logging.getLogger(__name__)


class Matrix(Generic[T]):
    """
    Dense rows x cols matrix over a numeric element type.

    Shape is fixed at construction. set() (or item assignment) is the only
    mutator; every other operation returns a new, independent matrix and
    leaves its operands untouched.

    Equality compares the flat row-major storage only. Two matrices whose
    shapes differ but whose flattened elements agree (a 2x3 and a 3x2 with
    the same six values in order) compare equal. Compare .shape as well
    when that matters.
    """

    __slots__ = ('_rows', '_cols', '_data', '_element_type')

    # Mutable, so unhashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        rows: int,
        cols: int,
        element_type: ElementType = DEFAULT_ELEMENT_TYPE,
    ):
        """
        Zero-filled matrix.

        Args:
            rows: Number of rows (may be 0)
            cols: Number of columns (may be 0)
            element_type: Callable mapping 0 to the additive identity

        Raises:
            ValidationError: If rows or cols is not a non-negative integer
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        self._rows = rows
        self._cols = cols
        self._element_type = element_type
        self._data: list[T] = [zero_of(element_type)] * (rows * cols)

    @classmethod
    def _wrap(
        cls,
        rows: int,
        cols: int,
        data: list[T],
        element_type: ElementType,
    ) -> Matrix[T]:
        """Internal builder; takes ownership of an already validated list."""
        instance = cls.__new__(cls)
        instance._rows = rows
        instance._cols = cols
        instance._data = data
        instance._element_type = element_type
        return instance

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def zeros(
        cls,
        rows: int,
        cols: int,
        element_type: ElementType = DEFAULT_ELEMENT_TYPE,
    ) -> Matrix[T]:
        """Zero-filled rows x cols matrix. Same as Matrix(rows, cols)."""
        return cls(rows, cols, element_type)

    @classmethod
    def from_data(
        cls,
        rows: int,
        cols: int,
        data: Iterable[T],
        element_type: ElementType | None = None,
    ) -> Matrix[T]:
        """
        Build a matrix from flat row-major data.

        The data is copied, so later changes to the caller's sequence do
        not reach the matrix.

        Args:
            rows: Number of rows
            cols: Number of columns
            data: rows * cols elements in row-major order
            element_type: Zero-producing callable. Inferred from the values
                when omitted: their common type, promoted the way Python
                arithmetic promotes it (int and float give float; int for
                empty data).

        Raises:
            ValidationError: If rows or cols is invalid
            DimensionError: If len(data) != rows * cols
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        values = list(data)
        check_data_length(len(values), rows, cols, 'data')
        if element_type is None:
            element_type = _infer_element_type(values, DEFAULT_ELEMENT_TYPE)
        return cls._wrap(rows, cols, values, element_type)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Iterable[T]],
        element_type: ElementType | None = None,
    ) -> Matrix[T]:
        """
        Build a matrix from a sequence of rows.

        Raises:
            DimensionError: If the rows have different lengths
        """
        nested = [list(row) for row in rows]
        check_rectangular([len(row) for row in nested], 'rows')
        n_rows = len(nested)
        n_cols = len(nested[0]) if nested else 0
        flat = [value for row in nested for value in row]
        return cls.from_data(n_rows, n_cols, flat, element_type)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix[Any]:
        """
        Build a matrix from a 2D numpy array (or anything np.asarray accepts).

        Elements keep their numpy scalar type, and the array's dtype becomes
        the element type.

        Raises:
            ValidationError: If the data is not numeric
            DimensionError: If the array is not 2D
        """
        arr = np.asarray(array)

        if not np.issubdtype(arr.dtype, np.number):
            raise ValidationError(
                f"array: non-numeric dtype {arr.dtype}, expected numeric data"
            )
        if arr.ndim != 2:
            raise DimensionError(
                f"array: expected 2D array, got {arr.ndim}D with shape {arr.shape}"
            )

        rows, cols = arr.shape
        return cls._wrap(rows, cols, list(arr.ravel(order='C')), arr.dtype.type)

    @classmethod
    def square(
        cls,
        values: Sequence[T],
        element_type: ElementType | None = None,
    ) -> Matrix[T] | None:
        """
        Build an n x n matrix from n * n flat row-major values.

        Convenience for writing small square literals:

            >>> Matrix.square([1, 2, 3, 4]).shape
            (2, 2)
            >>> Matrix.square([1, 2, 3]) is None
            True

        Returns:
            The matrix, or None if len(values) is not a perfect square
        """
        values = list(values)
        side = integral_sqrt(len(values))
        if side is None:
            logger.debug("square: %d values is not a perfect square", len(values))
            return None
        return cls.from_data(side, side, values, element_type)

    @classmethod
    def identity(
        cls,
        n: int,
        element_type: ElementType = DEFAULT_ELEMENT_TYPE,
    ) -> Matrix[T]:
        """n x n identity matrix."""
        result = cls(n, n, element_type)
        one = element_type(1)
        size = result._rows
        for k in range(size):
            result._data[k * size + k] = one
        return result

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        """Total number of elements, rows * cols."""
        return self._rows * self._cols

    @property
    def element_type(self) -> ElementType:
        """Callable producing this matrix's additive identity from 0."""
        return self._element_type

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def index(self, i: int, j: int) -> int:
        """
        Row-major flat offset of element (i, j).

        Pure arithmetic, no bounds check: i * cols + j.
        """
        return i * self._cols + j

    def at(self, i: int, j: int) -> T:
        """
        Element at row i, column j.

        Raises:
            IndexOutOfBoundsError: If i >= rows, j >= cols, or either is negative
        """
        check_index(i, j, self.shape)
        return self._data[self.index(i, j)]

    def set(self, i: int, j: int, value: T) -> None:
        """
        Overwrite element (i, j) in place.

        Raises:
            IndexOutOfBoundsError: If i >= rows, j >= cols, or either is negative
        """
        check_index(i, j, self.shape)
        self._data[self.index(i, j)] = value

    def __getitem__(self, key: tuple[int, int]) -> T:
        i, j = _split_key(key)
        return self.at(i, j)

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        i, j = _split_key(key)
        self.set(i, j, value)

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        """Iterate over rows, each as a tuple."""
        cols = self._cols
        for i in range(self._rows):
            yield tuple(self._data[i * cols:(i + 1) * cols])

    # ------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------

    def map(self, func: Callable[[T], T]) -> Matrix[T]:
        """
        New matrix of the same shape with func applied to every element.

        func must be a pure function of its argument; the order in which
        elements are visited is not part of the contract.
        """
        data = [func(value) for value in self._data]
        return self._wrap(
            self._rows,
            self._cols,
            data,
            _infer_element_type(data, self._element_type),
        )

    def map_with(self, other: Matrix[T], func: Callable[[T, T], T]) -> Matrix[T]:
        """
        New matrix combining self and other element-wise via func(a, b).

        Raises:
            ShapeMismatchError: If self.shape != other.shape
        """
        return self._combine(other, func, 'map_with')

    def _combine(
        self,
        other: Matrix[T],
        func: Callable[[T, T], T],
        operation: str,
    ) -> Matrix[T]:
        if not isinstance(other, Matrix):
            raise TypeError(
                f"{operation}: expected a Matrix operand, got {type(other).__name__}"
            )
        check_same_shape(self.shape, other.shape, operation)
        data = [func(a, b) for a, b in zip(self._data, other._data)]
        return self._wrap(
            self._rows,
            self._cols,
            data,
            _infer_element_type(data, self._element_type),
        )

    def transpose(self) -> Matrix[T]:
        """New cols x rows matrix with element (i, j) moved to (j, i)."""
        rows, cols = self._rows, self._cols
        data = [self._data[i * cols + j] for j in range(cols) for i in range(rows)]
        return self._wrap(cols, rows, data, self._element_type)

    def copy(self) -> Matrix[T]:
        """Independent copy; set() on either matrix leaves the other alone."""
        return self._wrap(self._rows, self._cols, list(self._data), self._element_type)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._combine(other, operator.add, 'add')

    def __sub__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._combine(other, operator.sub, 'subtract')

    def __mul__(self, other: object) -> Matrix[T]:
        """
        Matrix product.

        (m x n) * (n x p) -> (m x p). Each output cell starts from the
        additive identity and accumulates self[i, k] * other[k, j] over k.
        Plain triple loop, no blocking.

        Raises:
            ShapeMismatchError: If self.cols != other.rows
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        check_inner_dimensions(self.shape, other.shape, 'multiply')

        m, n, p = self._rows, self._cols, other._cols
        zero = zero_of(self._element_type)
        left, right = self._data, other._data
        data: list[T] = []

        for i in range(m):
            row_offset = i * n
            for j in range(p):
                acc = zero
                for k in range(n):
                    acc = acc + left[row_offset + k] * right[k * p + j]
                data.append(acc)

        logger.debug("multiply: %dx%d by %dx%d -> %dx%d", m, n, n, p, m, p)
        return self._wrap(m, p, data, _infer_element_type(data, self._element_type))

    def __matmul__(self, other: object) -> Matrix[T]:
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    def allclose(
        self,
        other: Matrix[Any],
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Element-wise approximate equality, for floating-point matrices.

        Unlike ==, shapes must match. Tolerances not given come from the
        looser of the two operands' tiers, so a.allclose(b) and
        b.allclose(a) agree. When both operands are exact (int, Fraction,
        Decimal) and no tolerance is given this is plain equality. Exact
        values compared with a tolerance are converted to float first.

        Raises:
            TypeError: If other is not a Matrix
            ShapeMismatchError: If self.shape != other.shape
        """
        if not isinstance(other, Matrix):
            raise TypeError(
                f"allclose: expected a Matrix operand, got {type(other).__name__}"
            )
        check_same_shape(self.shape, other.shape, 'allclose')

        tier = loosest(
            select_tolerance(self._element_type),
            select_tolerance(other._element_type),
        )
        if tier is EXACT and rtol is None and atol is None:
            return self._data == other._data

        return bool(np.allclose(
            _as_inexact(self._data),
            _as_inexact(other._data),
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        ))

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def tolist(self) -> list[list[T]]:
        """Nested list of rows."""
        return [list(row) for row in self]

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """
        Copy into a 2D numpy array of shape (rows, cols).

        Args:
            dtype: Target dtype. Defaults to the element type when that is
                a numpy scalar type, otherwise numpy infers it.
        """
        element_type = self._element_type
        if dtype is None and isinstance(element_type, type) and issubclass(element_type, np.generic):
            dtype = element_type
        return np.array(self._data, dtype=dtype).reshape(self._rows, self._cols)

    def __repr__(self) -> str:
        return f"Matrix({self._rows}x{self._cols}, {self.tolist()!r})"


def _split_key(key: Any) -> tuple[int, int]:
    """Unpack an m[i, j] subscript."""
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(
            f"Matrix indices must be an (i, j) pair, got {key!r}"
        )
    return key


def _infer_element_type(values: list[Any], fallback: ElementType) -> ElementType:
    """
    Common element type of a list of values.

    Starts from the first value's type and promotes through arithmetic
    whenever a different type appears: [1, 2.5] gives float and
    [1, Fraction(1, 2)] gives Fraction. Empty lists give fallback.
    """
    if not values:
        return fallback
    element_type = type(values[0])
    for value in values[1:]:
        if type(value) is not element_type:
            element_type = type(element_type(0) + value)
    return element_type


def _as_inexact(values: list[Any]) -> NDArray[Any]:
    """Flat numpy array for tolerance comparison; Fraction/Decimal become float64."""
    arr = np.asarray(values)
    if arr.dtype == object:
        arr = np.array([float(value) for value in values], dtype=np.float64)
    return arr
