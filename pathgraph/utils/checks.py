"""Switch for representation-invariant checks.

Core types call ``check_rep()`` after every mutation. The checks are plain
``assert`` statements guarded by :func:`invariant_checks_enabled`, so they
cost nothing when disabled and disappear entirely under ``python -O``.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

_enabled = False


def invariant_checks_enabled() -> bool:
    """Return True if representation invariants are being verified."""
    return _enabled


def set_invariant_checks(enabled: bool) -> bool:
    """Turn invariant checks on or off. Returns the previous setting."""
    global _enabled
    previous = _enabled
    _enabled = bool(enabled)
    return previous


@contextmanager
def invariant_checks(enabled: bool = True) -> Iterator[None]:
    """Temporarily set the invariant-check switch inside a ``with`` block."""
    previous = set_invariant_checks(enabled)
    try:
        yield
    finally:
        set_invariant_checks(previous)
