"""
Tests for StridedIterator and the Matrix cursor factories.

Validates:
    - Linear traversal length and row-major order
    - Row cursors: stride 1, row_end - row_begin == cols
    - Column cursors: stride cols, col_end - col_begin == rows
    - Random-access arithmetic, indexing, ordering
    - Const cursors and the mutable-to-const conversion
    - Contract checks on factories and cross-axis comparisons
"""

import numpy as np
import pytest

from pymatrix import ContractViolation, Matrix, ReadOnlyIteratorError, StridedIterator
from pymatrix.core.contracts import contract_checks


def collect(first, last):
    values = []
    it = first.copy()
    while it != last:
        values.append(it.value)
        it.increment()
    return values


@pytest.fixture
def m34():
    return Matrix(np.arange(12).reshape(3, 4))


# ═══════════════════════════════════════════════════════════════════════
# Traversal
# ═══════════════════════════════════════════════════════════════════════


class TestLinear:

    def test_length(self, m34):
        assert m34.end() - m34.begin() == 12

    def test_row_major_order(self, m34):
        expected = [m34[i, j] for i in range(3) for j in range(4)]
        assert collect(m34.begin(), m34.end()) == expected

    def test_python_iteration(self, m34):
        assert list(m34) == list(range(12))

    def test_empty(self):
        m = Matrix()
        assert m.begin() == m.end()
        assert m.end() - m.begin() == 0
        assert list(m) == []

    def test_write_through_cursor(self, m34):
        it = m34.begin()
        it += 5
        it.value = 100
        assert m34[1, 1] == 100


class TestRow:

    def test_length(self, m34):
        for i in range(3):
            assert m34.row_end(i) - m34.row_begin(i) == 4

    def test_contents(self, m34):
        assert collect(m34.row_begin(1), m34.row_end(1)) == [4, 5, 6, 7]
        assert list(m34.iter_row(2)) == [8, 9, 10, 11]

    def test_stride(self, m34):
        assert m34.row_begin(0).stride == 1

    def test_out_of_range(self, m34):
        with pytest.raises(ContractViolation):
            m34.row_begin(3)
        with pytest.raises(ContractViolation):
            m34.row_end(3)


class TestColumn:

    def test_length(self, m34):
        for j in range(4):
            assert m34.col_end(j) - m34.col_begin(j) == 3

    def test_contents(self, m34):
        for j in range(4):
            values = collect(m34.col_begin(j), m34.col_end(j))
            assert values == [m34[i, j] for i in range(3)]

    def test_iter_col(self, m34):
        assert list(m34.iter_col(3)) == [3, 7, 11]

    def test_stride_is_cols(self, m34):
        assert m34.col_begin(2).stride == 4

    def test_indexed_access(self, m34):
        it = m34.col_begin(1)
        assert it[0] == 1
        assert it[2] == 9

    def test_indexed_write(self, m34):
        it = m34.col_begin(2)
        it[1] = -6
        assert m34[1, 2] == -6

    def test_out_of_range(self, m34):
        with pytest.raises(ContractViolation):
            m34.col_begin(4)
        with pytest.raises(ContractViolation):
            m34.col_end(4)

    def test_single_column(self):
        m = Matrix([[1], [2], [3]])
        assert collect(m.col_begin(0), m.col_end(0)) == [1, 2, 3]


# ═══════════════════════════════════════════════════════════════════════
# Random-access arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_increment_decrement(self, m34):
        it = m34.col_begin(1)
        assert it.increment() is it
        assert it.value == 5
        it.decrement()
        assert it.value == 1

    def test_plus_minus_offset(self, m34):
        first = m34.col_begin(0)
        assert (first + 2).value == 8
        assert (2 + first).value == 8
        last = m34.col_end(0)
        assert (last - 1).value == 8

    def test_compound_offset(self, m34):
        it = m34.col_begin(3)
        it += 2
        assert it.value == 11
        it -= 2
        assert it.value == 3

    def test_plus_does_not_move_original(self, m34):
        it = m34.begin()
        _ = it + 3
        assert it.value == 0

    def test_distance_sign(self, m34):
        assert m34.col_begin(0) - m34.col_end(0) == -3

    def test_end_minus_distance_is_begin(self, m34):
        first, last = m34.col_begin(2), m34.col_end(2)
        assert last - (last - first) == first

    def test_copy_is_independent(self, m34):
        it = m34.begin()
        other = it.copy()
        other.increment()
        assert it.value == 0
        assert other.value == 1


class TestOrdering:

    def test_ordering(self, m34):
        first, last = m34.col_begin(1), m34.col_end(1)
        assert first < last
        assert first <= last
        assert last > first
        assert last >= first
        assert first != last
        assert first + 3 == last

    def test_different_columns_violate_contract(self, m34):
        with pytest.raises(ContractViolation) as exc_info:
            m34.col_begin(0) == m34.col_begin(1)
        assert exc_info.value.contract == "iterator_axis"

    def test_different_matrices_violate_contract(self, m34):
        other = m34.copy()
        with pytest.raises(ContractViolation) as exc_info:
            m34.begin() < other.begin()
        assert exc_info.value.contract == "iterator_buffer"

    def test_cross_column_distance_violates_contract(self, m34):
        with pytest.raises(ContractViolation):
            m34.col_end(0) - m34.col_begin(2)

    def test_unchecked_cross_column_compare(self, m34):
        with contract_checks(False):
            assert m34.col_begin(0) == m34.col_begin(1)


# ═══════════════════════════════════════════════════════════════════════
# Const cursors
# ═══════════════════════════════════════════════════════════════════════


class TestConst:

    def test_const_factories_read(self, m34):
        assert m34.cbegin().value == 0
        assert (m34.cend() - m34.cbegin()) == 12
        assert m34.crow_begin(1).value == 4
        assert m34.ccol_begin(2)[2] == 10
        assert m34.ccol_end(2) - m34.ccol_begin(2) == 3
        assert m34.crow_end(0) - m34.crow_begin(0) == 4

    def test_const_rejects_value_write(self, m34):
        it = m34.cbegin()
        with pytest.raises(ReadOnlyIteratorError):
            it.value = 1

    def test_const_rejects_index_write(self, m34):
        with pytest.raises(ReadOnlyIteratorError):
            m34.ccol_begin(0)[1] = 1

    def test_as_const(self, m34):
        it = m34.col_begin(1) + 1
        const = it.as_const()
        assert const.readonly
        assert not it.readonly
        assert const == it
        assert const.value == it.value

    def test_const_compares_with_mutable(self, m34):
        assert m34.cbegin() == m34.begin()
        assert m34.cend() - m34.begin() == 12


class TestSingular:

    def test_default_constructed(self):
        it = StridedIterator()
        assert it.stride == 1
        assert it.position == 0

    def test_default_constructed_dereference(self):
        with pytest.raises(ContractViolation) as exc_info:
            StridedIterator().value
        assert exc_info.value.contract == "singular_iterator"

    def test_dereference_end(self, m34):
        with pytest.raises(ContractViolation) as exc_info:
            m34.end().value
        assert exc_info.value.contract == "iterator_range"

    def test_repr(self, m34):
        assert "stride=4" in repr(m34.ccol_begin(0))
        assert "const" in repr(m34.ccol_begin(0))


class TestOperandTypes:

    def test_ordering_with_non_iterator(self, m34):
        with pytest.raises(TypeError):
            m34.begin() < 3
        with pytest.raises(TypeError):
            m34.begin() >= None

    def test_equality_with_non_iterator(self, m34):
        assert m34.begin() != 0

    def test_float_offset_rejected(self, m34):
        it = m34.begin()
        with pytest.raises(TypeError):
            it += 1.5
        with pytest.raises(TypeError):
            it - 0.5
        assert it.value == 0

    def test_numpy_integer_offset(self, m34):
        it = m34.col_begin(0) + np.int64(2)
        assert it.value == 8
