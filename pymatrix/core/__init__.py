"""
Core infrastructure for pymatrix.

This module provides the shared pieces used by the matrix container.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators for constructors and operands
    contracts: Debug-time precondition checks and their configuration
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    ContractViolation,
    ReadOnlyIteratorError,
)
from pymatrix.core.contracts import (
    contract_checks,
    contract_checks_enabled,
    require,
    set_contract_checks,
)

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ContractViolation",
    "ReadOnlyIteratorError",
    # Contract checks
    "contract_checks",
    "contract_checks_enabled",
    "require",
    "set_contract_checks",
]
