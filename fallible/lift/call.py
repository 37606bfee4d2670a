"""
Вызов функций с автоматическим лифтингом.

Call raising functions with arguments and get a Result back, either at the
call site (`call`, `call_async`) or once at definition (`lifted`,
`lifted_async`).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps

from ..result import Result
from .up import async_wrap, wrap


def call[T, **P](
    func: Callable[P, T],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Result[T, Exception]:
    """
    Call sync function with arguments, exceptions become Err.

    **When to use:** This is the preferred pattern for locality. No lambda
    boilerplate compared to `wrap(lambda: func(...))`.

    Example:
        from fallible import lift as L

        L.call(int, "42")    # Ok(42)
        L.call(int, "nope")  # Err(ValueError(...))

    **Grammar:** `L.call(func, *args, **kwargs)` reads as "call function with args"
    """
    return wrap(lambda: func(*args, **kwargs))


async def call_async[T, **P](
    func: Callable[P, Awaitable[T]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Result[T, Exception]:
    """
    Call async function with arguments, exceptions become Err.

    Example:
        result = await L.call_async(client.get_user, user_id=42)
    """
    return await async_wrap(lambda: func(*args, **kwargs))


def lifted[T, **P](
    func: Callable[P, T],
) -> Callable[P, Result[T, Exception]]:
    """
    Decorator: raising sync function -> Result-returning function.

    Example:
        @L.lifted
        def parse_port(raw: str) -> int:
            port = int(raw)
            if not 0 < port < 65536:
                raise ValueError(f"port out of range: {port}")
            return port

        parse_port("8080")  # Ok(8080)
        parse_port("0")     # Err(ValueError("port out of range: 0"))
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        return call(func, *args, **kwargs)

    return wrapper


def lifted_async[T, **P](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Result[T, Exception]]]:
    """Decorator: raising async function -> Result-returning coroutine function."""
    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        return await call_async(func, *args, **kwargs)

    return wrapper


__all__ = (
    "call",
    "call_async",
    "lifted",
    "lifted_async",
)
