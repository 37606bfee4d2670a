"""
Core type definitions for fallible.

Алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

# ============================================================================
# Type aliases
# ============================================================================

# Option = value or its absence (None)
# NOTE: Ok(None).ok() and Err(...).ok() are indistinguishable.
#       Use isinstance / match when the payload itself may be None.
type Option[T] = T | None

# Thunk = zero-arg callable, deferred sync computation
type Thunk[T] = Callable[[], T]

# AsyncThunk = zero-arg callable producing an awaitable
type AsyncThunk[T] = Callable[[], Awaitable[T]]

__all__ = (
    "Option",
    "Thunk",
    "AsyncThunk",
)
