"""
Runtime re-checking of adjacency-matrix invariants.

Graphs validate caller input at construction regardless of this module.
What it controls is the extra verification after each mutation: with
"square" enabled every graph re-checks that its matrix is (n, n), and with
"symmetric" enabled UndirectedGraph also re-checks m[i][j] == m[j][i].
Both are off by default since mutators maintain them by construction.

The initial selection comes from the GRAPHST_CHECKS environment variable:
a comma-separated list of invariant names, or "all" / "1" for every one.
"""

import os
from contextlib import contextmanager
from typing import FrozenSet, Iterable, Iterator, Optional

INVARIANTS: FrozenSet[str] = frozenset({"square", "symmetric"})

_ENV_VAR = "GRAPHST_CHECKS"


def _parse(names: Iterable[str]) -> FrozenSet[str]:
    selected = {name.strip().lower() for name in names if name.strip()}
    if selected & {"all", "1", "true", "yes", "on"}:
        return INVARIANTS
    unknown = selected - INVARIANTS
    if unknown:
        raise ValueError(
            f"Unknown invariant check(s) {sorted(unknown)}; choose from {sorted(INVARIANTS)}"
        )
    return frozenset(selected)


_enabled: FrozenSet[str] = _parse(os.getenv(_ENV_VAR, "").split(","))


def enabled_checks() -> FrozenSet[str]:
    """Return the names of the invariants currently re-checked after mutations."""
    return _enabled


def is_check_enabled(name: str) -> bool:
    """Return True if the named invariant is re-checked after mutations."""
    return name in _enabled


def set_checks(names: Optional[Iterable[str]]) -> None:
    """
    Select which invariants are re-checked after mutations.

    Args:
        names: Invariant names ("square", "symmetric"), "all", or None / an
            empty iterable to turn every check off.

    Raises:
        ValueError: If a name is not a known invariant.
    """
    global _enabled
    if isinstance(names, str):
        names = [names]
    _enabled = _parse(names or ())


@contextmanager
def checking(*names: str) -> Iterator[FrozenSet[str]]:
    """
    Temporarily re-check the given invariants (all of them if none given).

    The previous selection is restored on exit, even if the block raises.

    Example:
        >>> with checking("symmetric"):
        ...     g.add_connection(0, 2)
    """
    global _enabled
    previous = _enabled
    _enabled = _parse(names) if names else INVARIANTS
    try:
        yield _enabled
    finally:
        _enabled = previous
