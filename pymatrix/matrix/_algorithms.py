"""
Generic algorithms over StridedIterator ranges.

Written against the cursor protocol only (value, increment, comparison),
so the same code walks rows (stride 1) and columns (stride cols).
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from pymatrix.matrix.iterators import StridedIterator


def iterate(first: StridedIterator, last: StridedIterator) -> Iterator[Any]:
    """Yield the elements of [first, last) without moving first."""
    it = first.copy()
    while it != last:
        yield it.value
        it.increment()


def inner_product(
    first1: StridedIterator,
    last1: StridedIterator,
    first2: StridedIterator,
    init: Any,
) -> Any:
    """
    Sum of products of [first1, last1) with the range starting at first2.

    The second range must hold at least last1 - first1 elements.
    Accumulation starts from init and proceeds left to right.
    """
    acc = init
    left = first1.copy()
    right = first2.copy()
    while left != last1:
        acc = acc + left.value * right.value
        left.increment()
        right.increment()
    return acc



def equal(
    first1: StridedIterator,
    last1: StridedIterator,
    first2: StridedIterator,
) -> bool:
    """True if [first1, last1) matches the range starting at first2 elementwise."""
    left = first1.copy()
    right = first2.copy()
    while left != last1:
        if not left.value == right.value:
            return False
        left.increment()
        right.increment()
    return True


def copy_n(source: Iterable[Any], n: int, dest: StridedIterator) -> StridedIterator:
    """
    Write the first n values of source through dest.

    Returns:
        Cursor one past the last element written

    Raises:
        ValueError: If source holds fewer than n values
    """
    out = dest.copy()
    values = iter(source)
    for written in range(n):
        try:
            out.value = next(values)
        except StopIteration:
            raise ValueError(f"copy_n: source ended after {written} of {n} values") from None
        out.increment()
    return out
