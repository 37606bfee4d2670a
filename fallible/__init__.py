"""
fallible: Ok / Err result type for Python.

A closed two-variant union with a fluent combinator API for transforming,
inspecting and chaining results without raising, plus adapters turning
exception-based code into Result values.

Architecture:
- Ok / Err variants share one combinator surface (map, and_then, or_else, ...)
- lift.*  - exceptions and Optional -> Result (wrap, async_wrap, ...)
- interop - conversion to and from kungfu's Result / LazyCoroResult

Example:
    from fallible import Err, Ok, Result

    def divide(num: float, denom: float) -> Result[float, str]:
        if denom == 0:
            return Err("cannot divide by 0.")
        return Ok(num / denom)

    divide(20, 1).map(int).unwrap_or(0)  # 20
"""

# Core types
from ._types import AsyncThunk, Option, Thunk
from .result import AsyncResult, Err, Ok, Result, ResultLike

# Lift helpers
from . import lift
from .lift import (
    async_wrap,
    call,
    call_async,
    from_optional,
    lifted,
    lifted_async,
    wrap,
)

# kungfu bridge
from . import interop

# Errors
from ._errors import UnwrapError

__all__ = (
    # Types
    "AsyncResult",
    "AsyncThunk",
    "Err",
    "Ok",
    "Option",
    "Result",
    "ResultLike",
    "Thunk",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "async_wrap",
    "call",
    "call_async",
    "from_optional",
    "lifted",
    "lifted_async",
    "wrap",
    # Interop
    "interop",
    # Errors
    "UnwrapError",
)
