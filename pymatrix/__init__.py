"""
pymatrix: dense two-dimensional numeric containers for Python.

A generic row-major matrix over numpy element types, with linear, row
and strided column cursors, elementwise arithmetic and a naive matrix
product built on those cursors.

Submodules:
    matrix: The Matrix container and its cursors
    core: Exceptions, validation and debug-time contract checks
"""

__version__ = "0.1.0"

from pymatrix.core import (
    ContractViolation,
    DimensionError,
    PyMatrixError,
    ReadOnlyIteratorError,
    ValidationError,
    contract_checks,
    contract_checks_enabled,
    set_contract_checks,
)
from pymatrix.matrix import Matrix, StridedIterator

__all__ = [
    "__version__",
    "Matrix",
    "StridedIterator",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ContractViolation",
    "ReadOnlyIteratorError",
    "contract_checks",
    "contract_checks_enabled",
    "set_contract_checks",
]
