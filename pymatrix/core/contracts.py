"""
Debug-time contract checks.

Element indexes, cursor factories and cursor comparisons have preconditions
that the hot paths do not validate on their own. Those preconditions go
through require(), which costs one flag test when checks are disabled.

Default state:
    Enabled when the interpreter runs without -O (__debug__ is True).
    The PYMATRIX_CONTRACT_CHECKS environment variable overrides this at
    import time ("1", "true", "yes", "on" / "0", "false", "no", "off").

Usage:
    from pymatrix.core.contracts import contract_checks

    with contract_checks(False):
        value = m[i, j]   # no range check inside this block
"""

from __future__ import annotations

import os
import warnings
from contextlib import contextmanager
from typing import Iterator

from pymatrix.core.exceptions import ContractViolation

ENV_VAR = 'PYMATRIX_CONTRACT_CHECKS'

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


def _parse_env(value: str | None, default: bool) -> bool:
    """Interpret the environment override, warning on unknown values."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    warnings.warn(
        f"{ENV_VAR}={value!r} not recognized, "
        f"contract checks stay {'enabled' if default else 'disabled'}",
        RuntimeWarning,
        stacklevel=2,
    )
    return default


_enabled: bool = _parse_env(os.environ.get(ENV_VAR), __debug__)


def contract_checks_enabled() -> bool:
    """True if require() currently validates its condition."""
    return _enabled


def set_contract_checks(enabled: bool) -> bool:
    """
    Turn contract checks on or off for the whole process.

    Args:
        enabled: New state

    Returns:
        The previous state, so callers can restore it
    """
    global _enabled
    previous = _enabled
    _enabled = bool(enabled)
    return previous


@contextmanager
def contract_checks(enabled: bool) -> Iterator[None]:
    """Temporarily set the contract-check state, restoring it on exit."""
    previous = set_contract_checks(enabled)
    try:
        yield
    finally:
        set_contract_checks(previous)


def require(condition: bool, contract: str, message: str) -> None:
    """
    Raise ContractViolation if checks are enabled and condition is false.

    Args:
        condition: Precondition that must hold
        contract: Short identifier, stored on the exception
        message: Human-readable description with the offending values

    Raises:
        ContractViolation: If checks are enabled and condition is False
    """
    if _enabled and not condition:
        raise ContractViolation(f"{contract}: {message}", contract=contract)
