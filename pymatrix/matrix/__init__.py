"""
Dense matrix container.

Public API:
    Matrix           - row-major dense matrix with value semantics
    StridedIterator  - random-access cursor used for linear, row and
                       column traversal
"""

from pymatrix.matrix.iterators import StridedIterator
from pymatrix.matrix.matrix import Matrix

__all__ = [
    "Matrix",
    "StridedIterator",
]
