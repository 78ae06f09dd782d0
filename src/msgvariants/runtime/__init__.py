"""Runtime support for variant resolution.

Exports:
    FallbackPolicy: Deterministic catch-all resolution order
    DEFAULT_FALLBACK: FallbackPolicy() with default settings
    RWLock: Readers-writer lock guarding mutable mappings

Python 3.13+.
"""

from .fallback import DEFAULT_FALLBACK, FallbackPolicy
from .rwlock import RWLock

__all__ = ["DEFAULT_FALLBACK", "FallbackPolicy", "RWLock"]
