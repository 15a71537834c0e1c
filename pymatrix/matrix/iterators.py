"""
Random-access cursors over a row-major buffer.

A single cursor type, StridedIterator, covers all three traversal axes:

    linear  - stride 1, offset 0, walks every element in row-major order
    row     - stride 1, offset 0, starts at row_index * cols
    column  - stride cols, offset col_index, starts at the buffer start

The raw position always advances in multiples of the stride, and the
element read is buffer[position + offset]. A column cursor therefore
keeps its position on row boundaries (0, cols, 2*cols, ..., size) so that
its end cursor sits at position size for every column. Distance between
two cursors is the raw position difference divided by the stride, which
is only meaningful for cursors sharing buffer, offset and stride.

Externally the cursor behaves like a contiguous random-access iterator:

    it += 1        it - other       it.value
    it -= n        it[n]            it < other
    it + n         n + it           it.as_const()
"""

from __future__ import annotations

import operator
from typing import Any

from numpy.typing import NDArray

from pymatrix.core.contracts import contract_checks_enabled, require
from pymatrix.core.exceptions import ReadOnlyIteratorError


class StridedIterator:
    """
    Random-access cursor with a fixed stride.

    Attributes are read-only after construction except for the position,
    which moves through the arithmetic operators.

    Args:
        buffer: 1D numpy buffer being traversed (None for a singular cursor)
        position: Raw buffer position of the current logical element,
            before the offset is applied
        offset: Constant added to position on every element access
            (the column index for column cursors, 0 otherwise)
        stride: Raw positions per logical step (1 or cols)
        readonly: If True, writes through this cursor raise
            ReadOnlyIteratorError
    """

    __slots__ = ('_buffer', '_position', '_offset', '_stride', '_readonly')

    def __init__(
        self,
        buffer: NDArray[Any] | None = None,
        position: int = 0,
        offset: int = 0,
        stride: int = 1,
        readonly: bool = False,
    ):
        self._buffer = buffer
        self._position = position
        self._offset = offset
        self._stride = stride if stride > 0 else 1
        self._readonly = readonly

    # -- properties --------------------------------------------------------

    @property
    def position(self) -> int:
        """Raw buffer position (without offset)."""
        return self._position

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def stride(self) -> int:
        return self._stride

    @property
    def readonly(self) -> bool:
        return self._readonly

    # -- conversion --------------------------------------------------------

    def copy(self) -> StridedIterator:
        """Independent cursor at the same position."""
        return StridedIterator(
            self._buffer, self._position, self._offset, self._stride, self._readonly
        )

    __copy__ = copy

    def as_const(self) -> StridedIterator:
        """Read-only cursor at the same position (mutable-to-const conversion)."""
        return StridedIterator(
            self._buffer, self._position, self._offset, self._stride, True
        )

    # -- element access ----------------------------------------------------

    def _index(self, n: int) -> int:
        index = self._position + self._stride * n + self._offset
        if contract_checks_enabled():
            require(
                self._buffer is not None,
                'singular_iterator',
                "dereferencing a default-constructed iterator",
            )
            require(
                0 <= index < len(self._buffer),
                'iterator_range',
                f"element {index} outside buffer of {len(self._buffer)} elements",
            )
        return index

    @property
    def value(self) -> Any:
        """The element under the cursor."""
        return self._buffer[self._index(0)]

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._readonly:
            raise ReadOnlyIteratorError("cannot assign through a const iterator")
        self._buffer[self._index(0)] = new_value

    def __getitem__(self, n: int) -> Any:
        return self._buffer[self._index(n)]

    def __setitem__(self, n: int, new_value: Any) -> None:
        if self._readonly:
            raise ReadOnlyIteratorError("cannot assign through a const iterator")
        self._buffer[self._index(n)] = new_value

    # -- movement ----------------------------------------------------------

    def increment(self) -> StridedIterator:
        """Advance one logical step (prefix ++)."""
        self._position += self._stride
        return self

    def decrement(self) -> StridedIterator:
        """Step back one logical step (prefix --)."""
        self._position -= self._stride
        return self

    def __iadd__(self, n: int) -> StridedIterator:
        self._position += self._stride * operator.index(n)
        return self

    def __isub__(self, n: int) -> StridedIterator:
        self._position -= self._stride * operator.index(n)
        return self

    def __add__(self, n: int) -> StridedIterator:
        if isinstance(n, StridedIterator):
            return NotImplemented
        result = self.copy()
        result += n
        return result

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, StridedIterator):
            self._check_compatible(other)
            return (self._position - other._position) // self._stride
        result = self.copy()
        result -= other
        return result

    # -- comparison --------------------------------------------------------

    def _check_compatible(self, other: StridedIterator) -> None:
        if contract_checks_enabled():
            require(
                self._buffer is other._buffer,
                'iterator_buffer',
                "iterators traverse different matrices",
            )
            require(
                self._offset == other._offset and self._stride == other._stride,
                'iterator_axis',
                f"iterators traverse different axes "
                f"(offset {self._offset} vs {other._offset}, "
                f"stride {self._stride} vs {other._stride})",
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StridedIterator):
            return NotImplemented
        self._check_compatible(other)
        return self._position == other._position

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, StridedIterator):
            return NotImplemented
        return not self == other

    def __lt__(self, other: StridedIterator) -> bool:
        if not isinstance(other, StridedIterator):
            return NotImplemented
        self._check_compatible(other)
        return self._position < other._position

    def __le__(self, other: StridedIterator) -> bool:
        if not isinstance(other, StridedIterator):
            return NotImplemented
        self._check_compatible(other)
        return self._position <= other._position

    def __gt__(self, other: StridedIterator) -> bool:
        if not isinstance(other, StridedIterator):
            return NotImplemented
        self._check_compatible(other)
        return self._position > other._position

    def __ge__(self, other: StridedIterator) -> bool:
        if not isinstance(other, StridedIterator):
            return NotImplemented
        self._check_compatible(other)
        return self._position >= other._position

    __hash__ = None

    def __repr__(self) -> str:
        kind = "const " if self._readonly else ""
        return (
            f"StridedIterator({kind}position={self._position}, "
            f"offset={self._offset}, stride={self._stride})"
        )


def linear_iterator(buffer: NDArray[Any] | None, position: int, readonly: bool = False) -> StridedIterator:
    """Cursor over the whole buffer in row-major order."""
    return StridedIterator(buffer, position, 0, 1, readonly)


def row_iterator(
    buffer: NDArray[Any] | None,
    row_index: int,
    cols: int,
    readonly: bool = False,
) -> StridedIterator:
    """Cursor at the first element of a row."""
    return StridedIterator(buffer, row_index * cols, 0, 1, readonly)


def col_iterator(
    buffer: NDArray[Any] | None,
    position: int,
    col_index: int,
    cols: int,
    readonly: bool = False,
) -> StridedIterator:
    """Cursor over one column; position must sit on a row boundary."""
    return StridedIterator(buffer, position, col_index, cols, readonly)
