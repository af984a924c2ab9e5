"""Diagnostics for graphst: matrix invariant checks and their runtime switch."""

from .checks import (
    INVARIANTS,
    checking,
    enabled_checks,
    is_check_enabled,
    set_checks,
)
from .core import (
    assert_square,
    assert_symmetric,
    is_square,
    is_symmetric,
)

__all__ = [
    "is_square",
    "is_symmetric",
    "assert_square",
    "assert_symmetric",
    "INVARIANTS",
    "enabled_checks",
    "is_check_enabled",
    "set_checks",
    "checking",
]
