"""
Bridge to kungfu.

Conversions between fallible's Ok / Err and kungfu's Ok / Error, plus
lifting into and running kungfu's LazyCoroResult, so Result values can
cross into combinator pipelines built on kungfu and back.
"""

from __future__ import annotations

import kungfu
from kungfu import LazyCoroResult

from .result import Err, Ok, Result


def from_kungfu[T, E](result: kungfu.Result[T, E]) -> Result[T, E]:
    """
    kungfu.Ok(v) -> Ok(v), kungfu.Error(e) -> Err(e).

    Example:
        from_kungfu(kungfu.Error("boom"))  # Err("boom")
    """
    match result:
        case kungfu.Ok(value):
            return Ok(value)
        case kungfu.Error(error):
            return Err(error)
    raise TypeError(f"expected kungfu.Ok or kungfu.Error, got {result!r}")


def to_kungfu[T, E](result: Result[T, E]) -> kungfu.Result[T, E]:
    """Ok(v) -> kungfu.Ok(v), Err(e) -> kungfu.Error(e)."""
    return result.match(kungfu.Ok, kungfu.Error)


def to_lazy[T, E](result: Result[T, E]) -> LazyCoroResult[T, E]:
    """
    Lift already-computed Result into LazyCoroResult.

    NOTE: This is NOT lazy — result is already computed.
    """
    converted = to_kungfu(result)

    async def run() -> kungfu.Result[T, E]:
        return converted

    return LazyCoroResult(run)


async def run_lazy[T, E](lcr: LazyCoroResult[T, E]) -> Result[T, E]:
    """
    Run LazyCoroResult and return fallible Result.

    Example:
        result = await run_lazy(to_lazy(Ok(42)))  # Ok(42)
    """
    return from_kungfu(await lcr())


__all__ = (
    "from_kungfu",
    "to_kungfu",
    "to_lazy",
    "run_lazy",
)
