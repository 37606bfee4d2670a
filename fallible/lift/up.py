"""
Подъем значений в Result.

Functions turning exception-based code and Optional values into Result.
This is the only place where exceptions are converted into values: the
combinators on Ok / Err never catch anything.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable

from .._types import AsyncThunk, Thunk
from ..result import Err, Ok, Result


@typing.overload
def wrap[T](thunk: Thunk[T], error: None = None) -> Result[T, Exception]: ...


@typing.overload
def wrap[T, E](thunk: Thunk[T], error: E) -> Result[T, E]: ...


def wrap[T, E](
    thunk: Thunk[T],
    error: E | None = None,
) -> Result[T, E] | Result[T, Exception]:
    """
    Call sync thunk, catch exceptions and convert them to Err.

    **When to use:** Bridge between exception-based code (stdlib, third-party
    libraries) and Result-based code.

    Example:
        from fallible import lift as L
        import json

        L.up.wrap(lambda: json.loads('{"a": 1}'))  # Ok({"a": 1})
        L.up.wrap(lambda: json.loads("{"))         # Err(JSONDecodeError(...))
        L.up.wrap(lambda: json.loads("{"), "bad")  # Err("bad")

    **Grammar:** `L.up.wrap(thunk)` reads as "lift up wrapping thunk"

    NOTE: When `error` is given the raised exception is discarded and
          Err(error) is returned instead. `None` means "no override".
    NOTE: Catches Exception subclasses only. KeyboardInterrupt, SystemExit
          and other BaseExceptions propagate.
    NOTE: thunk must be sync. A coroutine function or a thunk returning a
          coroutine raises TypeError, use async_wrap(). Other awaitables
          (Futures, Tasks) are plain values here and come back as Ok.
    """
    if inspect.iscoroutinefunction(thunk):
        raise TypeError("wrap() got a coroutine function, use async_wrap()")

    try:
        value = thunk()
    except Exception as exc:
        return Err(exc if error is None else error)

    if inspect.iscoroutine(value):
        value.close()
        raise TypeError("wrap() thunk returned a coroutine, use async_wrap()")
    return Ok(value)


@typing.overload
async def async_wrap[T](
    thunk: AsyncThunk[T], error: None = None
) -> Result[T, Exception]: ...


@typing.overload
async def async_wrap[T, E](thunk: AsyncThunk[T], error: E) -> Result[T, E]: ...


async def async_wrap[T, E](
    thunk: AsyncThunk[T],
    error: E | None = None,
) -> Result[T, E] | Result[T, Exception]:
    """
    Await async thunk, catch exceptions and convert them to Err.

    **When to use:** Async version of wrap() for code that raises instead of
    returning Result (HTTP clients, database drivers).

    Example:
        from fallible import lift as L

        result = await L.up.async_wrap(lambda: client.get(url))
        match result:
            case Ok(response): ...
            case Err(exc): ...

    **Grammar:** `await L.up.async_wrap(thunk)` reads as "lift up async wrapping thunk"

    NOTE: The returned coroutine never raises because of the thunk's failure,
          everything is folded into the Result.
    NOTE: No timeout, retry or cancellation handling. If the awaitable never
          settles, neither does this. Cancellation propagates as is.
    NOTE: thunk must return an awaitable. A sync thunk returning a plain
          value raises TypeError, use wrap().
    """
    try:
        awaitable = thunk()
    except Exception as exc:
        return Err(exc if error is None else error)

    if not inspect.isawaitable(awaitable):
        raise TypeError("async_wrap() thunk returned a non-awaitable, use wrap()")

    try:
        value = await awaitable
    except Exception as exc:
        return Err(exc if error is None else error)
    return Ok(value)


def from_optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Result[T, E]:
    """
    Convert Optional to Result. None becomes Err(error()).

    **When to use:** dict lookups, cache checks, config reads — anywhere
    you get Optional and need to convert None to an error.

    Example:
        from fallible import lift as L

        L.up.from_optional(users.get(42), error=lambda: NotFound(42))

    NOTE: error is a thunk to avoid building the error when value is present.
    """
    if value is None:
        return Err(error())
    return Ok(value)


__all__ = (
    "wrap",
    "async_wrap",
    "from_optional",
)
