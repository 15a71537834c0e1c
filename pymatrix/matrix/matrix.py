"""
Matrix: dense two-dimensional container with row-major storage.

A Matrix exclusively owns one contiguous 1D numpy buffer of rows * cols
elements; element (r, c) lives at offset r * cols + c. A matrix with zero
rows or zero columns is normalized to the canonical empty state
(rows = cols = 0, no buffer).

Construction:
    Matrix()                        empty
    Matrix(rows, cols, dtype=...)   zero-initialized
    Matrix([[1, 2], [3, 4]])        from a rectangular literal
    Matrix(other)                   deep copy

Ownership is explicit since Python has no move semantics:
    b = a.copy()      deep copy, a unchanged
    b = a.take()      b owns a's buffer, a becomes empty
    a.move_from(b)    a owns b's buffer, b becomes empty
    a.assign(b)       copy-then-swap assignment
    a.swap(b)         O(1) exchange

Operand shapes are validated for +, - and the matrix product; element
indexes and cursor factories are checked only while contract checks are
enabled (see pymatrix.core.contracts).
"""

from __future__ import annotations

import numbers
import warnings
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.contracts import contract_checks_enabled, require
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import (
    check_dimension,
    check_dtype,
    check_inner_dimensions,
    check_literal,
    check_same_shape,
)
from pymatrix.matrix._algorithms import copy_n, equal, inner_product, iterate
from pymatrix.matrix.iterators import (
    StridedIterator,
    col_iterator,
    linear_iterator,
    row_iterator,
)

DEFAULT_DTYPE = np.dtype(np.float64)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (numbers.Number, np.number, np.bool_))


class Matrix:
    """
    Dense row-major matrix with value semantics.

    Parameters
    ----------
    rows : int, array-like, Matrix, or None
        Row count (with cols), a rectangular 2D literal, another Matrix
        to copy, or None for an empty matrix.
    cols : int or None
        Column count when rows is an int.
    dtype : dtype-like, optional
        Element type. Defaults to float64 for sized and empty matrices,
        to the inferred type for literals, and to the source's type for
        copies.
    """

    __slots__ = ('_data', '_rows', '_cols', '_dtype')

    # keep numpy from broadcasting over a Matrix operand
    __array_ufunc__ = None

    def __init__(
        self,
        rows: int | ArrayLike | Matrix | None = None,
        cols: int | None = None,
        *,
        dtype: DTypeLike | None = None,
    ):
        self._data: NDArray[Any] | None = None
        self._rows = 0
        self._cols = 0
        self._dtype = DEFAULT_DTYPE if dtype is None else check_dtype(dtype, "dtype")

        if rows is None:
            if cols is not None:
                raise ValidationError("rows: required when cols is given")
        elif isinstance(rows, Matrix):
            if cols is not None:
                raise ValidationError("cols: not accepted when copying a Matrix")
            self._init_copy(rows, dtype)
        elif cols is not None:
            self._init_sized(rows, cols)
        else:
            self._init_literal(rows, dtype)

    def _init_sized(self, rows: Any, cols: Any) -> None:
        rows = check_dimension(rows, "rows")
        cols = check_dimension(cols, "cols")
        if rows != 0 and cols != 0:
            data = np.zeros(rows * cols, dtype=self._dtype)
            self._data, self._rows, self._cols = data, rows, cols

    def _init_literal(self, literal: ArrayLike, dtype: DTypeLike | None) -> None:
        array = check_literal(literal, "literal", dtype)
        self._dtype = array.dtype
        rows, cols = array.shape
        if rows == 0 or cols == 0:
            return
        data = np.empty(rows * cols, dtype=array.dtype)
        for i in range(rows):
            copy_n(array[i], cols, row_iterator(data, i, cols))
        self._data, self._rows, self._cols = data, rows, cols

    def _init_copy(self, other: Matrix, dtype: DTypeLike | None) -> None:
        if dtype is None:
            self._dtype = other._dtype
        if other._data is not None:
            data = other._data.astype(self._dtype, copy=True)
            self._data, self._rows, self._cols = data, other._rows, other._cols

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self._data = None
        self._rows = 0
        self._cols = 0

    def copy(self) -> Matrix:
        """Deep copy."""
        return Matrix(self)

    def __copy__(self) -> Matrix:
        return Matrix(self)

    def __deepcopy__(self, memo: dict) -> Matrix:
        return Matrix(self)

    def swap(self, other: Matrix) -> None:
        """Exchange buffers, dimensions and element types in O(1)."""
        self._data, other._data = other._data, self._data
        self._rows, other._rows = other._rows, self._rows
        self._cols, other._cols = other._cols, self._cols
        self._dtype, other._dtype = other._dtype, self._dtype

    def assign(self, other: Matrix) -> Matrix:
        """
        Copy assignment.

        Builds the copy first and swaps it in, so a failed allocation
        leaves self untouched. Assigning a matrix to itself is a no-op.
        """
        if other is not self:
            Matrix(other).swap(self)
        return self

    def take(self) -> Matrix:
        """
        Move construction: return a Matrix owning this buffer.

        self is left in the canonical empty state with its dtype kept.
        """
        result = Matrix(dtype=self._dtype)
        result.swap(self)
        return result

    def move_from(self, other: Matrix) -> Matrix:
        """
        Move assignment: release own buffer and take other's.

        other is left in the canonical empty state. Moving a matrix into
        itself is a no-op.
        """
        if other is not self:
            self._data = other._data
            self._rows = other._rows
            self._cols = other._cols
            self._dtype = other._dtype
            other._reset()
        return self

    def clear(self) -> None:
        """Release the buffer and return to the canonical empty state."""
        self._reset()

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def size(self) -> int:
        """Number of elements, rows * cols."""
        return self._rows * self._cols

    @property
    def empty(self) -> bool:
        return self.size == 0

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def data(self) -> NDArray[Any] | None:
        """
        The owned 1D row-major buffer, or None when empty.

        This is the buffer itself, not a copy: writes are visible through
        the matrix.
        """
        return self._data

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _offset(self, key: Any) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"Matrix indices must be a (row, col) pair, got {key!r}"
            )
        row, col = key
        if contract_checks_enabled():
            require(
                0 <= row < self._rows,
                'row_index',
                f"row {row} out of range for {self._rows} rows",
            )
            require(
                0 <= col < self._cols,
                'col_index',
                f"col {col} out of range for {self._cols} cols",
            )
        return row * self._cols + col

    def __getitem__(self, key: tuple[int, int]) -> Any:
        return self._data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        self._data[self._offset(key)] = value

    def __call__(self, row: int, col: int) -> Any:
        return self._data[self._offset((row, col))]

    def to_numpy(self) -> NDArray[Any]:
        """2D copy of the elements, shape (rows, cols)."""
        if self._data is None:
            return np.zeros((0, 0), dtype=self._dtype)
        return self._data.reshape(self._rows, self._cols).copy()

    def tolist(self) -> list[list[Any]]:
        """Nested list of the elements, one inner list per row."""
        return self.to_numpy().tolist()

    # ------------------------------------------------------------------
    # Iterators
    # ------------------------------------------------------------------

    def begin(self) -> StridedIterator:
        return linear_iterator(self._data, 0)

    def end(self) -> StridedIterator:
        return linear_iterator(self._data, self.size)

    def cbegin(self) -> StridedIterator:
        return linear_iterator(self._data, 0, readonly=True)

    def cend(self) -> StridedIterator:
        return linear_iterator(self._data, self.size, readonly=True)

    def _check_row(self, row_index: int) -> None:
        require(
            0 <= row_index < self._rows,
            'row_index',
            f"row {row_index} out of range for {self._rows} rows",
        )

    def _check_col(self, col_index: int) -> None:
        require(
            0 <= col_index < self._cols,
            'col_index',
            f"col {col_index} out of range for {self._cols} cols",
        )

    def row_begin(self, row_index: int, readonly: bool = False) -> StridedIterator:
        """Cursor at the first element of row row_index."""
        if contract_checks_enabled():
            self._check_row(row_index)
        return row_iterator(self._data, row_index, self._cols, readonly)

    def row_end(self, row_index: int, readonly: bool = False) -> StridedIterator:
        """Cursor one past the last element of row row_index."""
        return self.row_begin(row_index, readonly) + self._cols

    def crow_begin(self, row_index: int) -> StridedIterator:
        return self.row_begin(row_index, readonly=True)

    def crow_end(self, row_index: int) -> StridedIterator:
        return self.row_end(row_index, readonly=True)

    def col_begin(self, col_index: int, readonly: bool = False) -> StridedIterator:
        """Cursor at the top element of column col_index, stride cols."""
        if contract_checks_enabled():
            self._check_col(col_index)
        return col_iterator(self._data, 0, col_index, self._cols, readonly)

    def col_end(self, col_index: int, readonly: bool = False) -> StridedIterator:
        """Cursor one past the bottom element of column col_index."""
        if contract_checks_enabled():
            self._check_col(col_index)
        return col_iterator(self._data, self.size, col_index, self._cols, readonly)

    def ccol_begin(self, col_index: int) -> StridedIterator:
        return self.col_begin(col_index, readonly=True)

    def ccol_end(self, col_index: int) -> StridedIterator:
        return self.col_end(col_index, readonly=True)

    def __iter__(self) -> Iterator[Any]:
        """Elements in row-major order."""
        return iterate(self.cbegin(), self.cend())

    def iter_row(self, row_index: int) -> Iterator[Any]:
        return iterate(self.crow_begin(row_index), self.crow_end(row_index))

    def iter_col(self, col_index: int) -> Iterator[Any]:
        return iterate(self.ccol_begin(col_index), self.ccol_end(col_index))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return equal(self.cbegin(), self.cend(), other.cbegin())

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _coerce_scalar(self, factor: Any) -> Any:
        """Convert a scalar operand to the element type."""
        if self._dtype == object:
            return factor
        try:
            converted = self._dtype.type(factor)
        except (TypeError, ValueError, OverflowError) as e:
            raise ValidationError(
                f"factor: cannot convert {factor!r} to {self._dtype}: {e}"
            ) from e
        lossy_kind = np.issubdtype(self._dtype, np.integer) or self._dtype == np.bool_
        if lossy_kind and converted != factor:
            warnings.warn(
                f"factor {factor!r} converted to {self._dtype} as {converted!r}",
                RuntimeWarning,
                stacklevel=3,
            )
        return converted

    def _elementwise(self, other: Matrix, ufunc: np.ufunc, symbol: str) -> None:
        """Apply ufunc in place over the buffer, keeping this matrix's dtype."""
        check_same_shape(self.shape, other.shape, symbol)
        if self._data is None:
            return
        if not np.can_cast(other._dtype, self._dtype, casting='same_kind'):
            warnings.warn(
                f"{symbol}: {other._dtype} operand converted to {self._dtype}",
                RuntimeWarning,
                stacklevel=3,
            )
        ufunc(self._data, other._data, out=self._data, casting='unsafe')

    def __iadd__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._elementwise(other, np.add, "+=")
        return self

    def __isub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._elementwise(other, np.subtract, "-=")
        return self

    def __imul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.move_from(self._product(other))
        if not _is_scalar(other):
            return NotImplemented
        factor = self._coerce_scalar(other)
        if self._data is not None:
            self._data *= factor
        return self

    def __imatmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.move_from(self._product(other))

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = Matrix(self, dtype=np.result_type(self._dtype, other._dtype))
        result += other
        return result

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = Matrix(self, dtype=np.result_type(self._dtype, other._dtype))
        result -= other
        return result

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self._product(other)
        if not _is_scalar(other):
            return NotImplemented
        result = Matrix(self)
        result *= other
        return result

    def __rmul__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        return self * other

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._product(other)

    def _product(self, right: Matrix) -> Matrix:
        """
        Naive matrix product.

        result[i, j] is the inner product of row i of self (stride 1) and
        column j of right (stride right.cols), accumulated from zero.
        """
        check_inner_dimensions(self.shape, right.shape)
        dtype = np.result_type(self._dtype, right._dtype)
        result = Matrix(self._rows, right._cols, dtype=dtype)
        zero = np.zeros(1, dtype=dtype)[0]
        n = right._cols
        for i in range(self._rows):
            first = self.crow_begin(i)
            last = self.crow_end(i)
            for j in range(n):
                result._data[i * n + j] = inner_product(
                    first, last, right.ccol_begin(j), zero
                )
        return result

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, dtype={self._dtype})"

    def __str__(self) -> str:
        if self._data is None:
            return "[]"
        lines = []
        for i in range(self._rows):
            lines.append(" ".join(str(v) for v in self.iter_row(i)))
        return "\n".join(lines)
