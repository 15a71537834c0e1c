"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: negative
    dimensions, non-numeric literals, unsupported element types.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a literal is not a rectangular 2D table, or when the
    operands of an arithmetic operation have incompatible shapes.

    Attributes:
        expected: Shape (or partial shape) the operation required, if known
        actual: Shape that was received, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | None = None,
        actual: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ContractViolation(PyMatrixError, AssertionError):
    """
    A debug-time precondition did not hold.

    Raised only while contract checks are enabled (see
    pymatrix.core.contracts). Covers out-of-range element indexes,
    out-of-range row/column cursor factories, and comparing cursors that
    walk different columns or different matrices. Subclasses AssertionError
    so that it behaves like a failed assert statement.

    Attributes:
        contract: Short identifier of the violated precondition
    """

    def __init__(self, message: str, contract: str | None = None):
        super().__init__(message)
        self.contract = contract


class ReadOnlyIteratorError(PyMatrixError, TypeError):
    """
    Write attempted through a const cursor.

    Raised by StridedIterator when the cursor was obtained from a const
    factory (cbegin, crow_begin, ccol_begin) or from as_const().
    """
    pass
