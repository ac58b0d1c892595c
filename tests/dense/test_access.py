"""
Tests for element access: at, set, index, subscripts, iteration.
"""

import numpy as np
import pytest

from pymatrix import IndexOutOfBoundsError, Matrix


class TestIndex:
    """index(i, j) is the row-major offset i * cols + j."""

    def test_offsets(self):
        mat = Matrix(3, 4)
        assert mat.index(0, 0) == 0
        assert mat.index(0, 3) == 3
        assert mat.index(1, 0) == 4
        assert mat.index(2, 3) == 11

    def test_offsets_cover_storage_exactly_once(self):
        mat = Matrix(3, 5)
        offsets = [mat.index(i, j) for i in range(3) for j in range(5)]
        assert offsets == list(range(15))

    def test_consistent_with_at(self):
        data = list(range(12))
        mat = Matrix.from_data(3, 4, data)
        for i in range(3):
            for j in range(4):
                assert mat.at(i, j) == data[mat.index(i, j)]


class TestSetter:
    """set() overwrites one cell and nothing else."""

    def test_set_then_at(self):
        mat = Matrix(2, 2)
        mat.set(0, 0, 4)
        mat.set(0, 1, 5)
        mat.set(1, 0, 6)
        mat.set(1, 1, 7)

        assert mat.at(0, 0) == 4
        assert mat.at(0, 1) == 5
        assert mat.at(1, 0) == 6
        assert mat.at(1, 1) == 7

    def test_other_cells_unchanged(self, random_int_matrix):
        mat = random_int_matrix(4, 5)
        before = mat.tolist()
        for i in range(4):
            for j in range(5):
                work = mat.copy()
                work.set(i, j, 1000)
                after = work.tolist()
                assert after[i][j] == 1000
                after[i][j] = before[i][j]
                assert after == before

    def test_subscript_forms(self):
        mat = Matrix(2, 3)
        mat[1, 2] = 9
        assert mat[1, 2] == 9
        assert mat.at(1, 2) == 9

    @pytest.mark.parametrize("key", [0, (0,), (0, 1, 2), "a"])
    def test_bad_subscript(self, key):
        mat = Matrix(2, 2)
        with pytest.raises(TypeError, match=r"\(i, j\) pair"):
            mat[key]


class TestBounds:
    """Out-of-range indices fault in at() and set()."""

    @pytest.mark.parametrize("i,j", [(2, 0), (0, 3), (2, 3), (5, 5), (-1, 0), (0, -1)])
    def test_at_out_of_bounds(self, i, j):
        mat = Matrix(2, 3)
        with pytest.raises(IndexOutOfBoundsError):
            mat.at(i, j)

    @pytest.mark.parametrize("i,j", [(2, 0), (0, 3), (2, 3), (5, 5), (-1, 0), (0, -1)])
    def test_set_out_of_bounds(self, i, j):
        mat = Matrix(2, 3)
        with pytest.raises(IndexOutOfBoundsError):
            mat.set(i, j, 1)

    def test_failed_set_leaves_matrix_unchanged(self):
        mat = Matrix.from_data(2, 2, [1, 2, 3, 4])
        # (0, 2) would land on offset 2 if unchecked
        with pytest.raises(IndexOutOfBoundsError):
            mat.set(0, 2, 99)
        assert mat.tolist() == [[1, 2], [3, 4]]

    def test_subscript_out_of_bounds(self):
        mat = Matrix(2, 2)
        with pytest.raises(IndexError):
            mat[2, 0]
        with pytest.raises(IndexError):
            mat[0, 2] = 1

    def test_error_carries_index_and_shape(self):
        mat = Matrix(2, 3)
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            mat.at(1, 3)
        assert exc_info.value.index == (1, 3)
        assert exc_info.value.shape == (2, 3)


class TestIteration:
    """Iterating a matrix yields its rows."""

    def test_rows_as_tuples(self):
        mat = Matrix.from_data(2, 2, [1, 2, 3, 4])
        assert list(mat) == [(1, 2), (3, 4)]

    def test_copy_is_independent(self):
        mat = Matrix.from_data(1, 2, [1, 2])
        clone = mat.copy()
        clone.set(0, 0, 10)
        assert mat.at(0, 0) == 1
        assert clone.at(0, 0) == 10

    def test_repr(self):
        mat = Matrix.from_data(2, 2, [1, 2, 3, 4])
        assert repr(mat) == "Matrix(2x2, [[1, 2], [3, 4]])"


class TestIndexTypes:
    """at/set accept integers only."""

    def test_bool_indices_rejected(self):
        mat = Matrix.square([1, 2, 3, 4])
        with pytest.raises(TypeError, match="got bool"):
            mat.at(True, False)

    def test_float_index_rejected(self):
        mat = Matrix(2, 2)
        with pytest.raises(TypeError, match="row index must be an integer"):
            mat.at(0.5, 0)

    def test_failed_set_leaves_matrix_unchanged(self):
        mat = Matrix.square([1, 2, 3, 4])
        with pytest.raises(TypeError):
            mat[1.0, 0] = 99
        assert mat.tolist() == [[1, 2], [3, 4]]

    def test_numpy_integer_indices(self):
        mat = Matrix.square([1, 2, 3, 4])
        assert mat.at(np.int64(1), np.int64(0)) == 3
