"""Reserved words that can never be used as project names.

The set is a process-wide constant: built once on first access and never
mutated afterwards. Names are stored lowercase and matched exactly.
"""

from __future__ import annotations

import threading

RESERVED_WORDS: tuple[str, ...] = (
    "shuttleapp",
    "shuttle",
    "console",
    "unstable",
    "staging",
)

_reserved: frozenset[str] | None = None
_reserved_lock = threading.Lock()


def reserved_words() -> frozenset[str]:
    """Return the reserved-word set, building it on first call.

    Concurrent first callers block on the lock until the set exists;
    later callers read it without locking.
    """
    global _reserved
    if _reserved is None:
        with _reserved_lock:
            if _reserved is None:
                _reserved = frozenset(RESERVED_WORDS)
    return _reserved


def is_reserved(name: str) -> bool:
    """Check whether *name* is exactly one of the reserved words."""
    return name in reserved_words()
