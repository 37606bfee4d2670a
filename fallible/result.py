"""
Result - Ok or Err
==================

Закрытое объединение двух вариантов:
- Ok[T, E]: успешное вычисление, хранит значение T
- Err[T, E]: неудачное вычисление, хранит ошибку E

Both variants expose the same combinator surface, so code never has to
branch on the variant just to transform or chain a result. Narrowing is done
the Python way:

    match divide(20, 0):
        case Ok(quotient):
            ...
        case Err(error):
            ...

or with `isinstance(result, Ok)`.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from ._errors import UnwrapError
from ._types import Option


@typing.runtime_checkable
class ResultLike[T, E](typing.Protocol):
    """Combinator surface shared by Ok and Err."""

    __slots__ = ()

    def is_ok(self) -> bool: ...

    def is_err(self) -> bool: ...

    def unwrap(self) -> T: ...

    def unwrap_err(self) -> E: ...

    def unwrap_or(self, default: T, /) -> T: ...

    def ok(self) -> Option[T]: ...

    def err(self) -> Option[E]: ...

    def map[U](self, f: Callable[[T], U], /) -> Result[U, E]: ...

    def map_err[F](self, f: Callable[[E], F], /) -> Result[T, F]: ...

    def map_or[U](self, default: U, f: Callable[[T], U], /) -> U: ...

    def match[U](self, on_ok: Callable[[T], U], on_err: Callable[[E], U], /) -> U: ...

    def and_[U](self, other: Result[U, E], /) -> Result[U, E]: ...

    def and_then[U](self, op: Callable[[T], Result[U, E]], /) -> Result[U, E]: ...

    def or_[F](self, other: Result[T, F], /) -> Result[T, F]: ...

    def or_else[F](self, op: Callable[[E], Result[T, F]], /) -> Result[T, F]: ...


class Ok[T, E](ResultLike[T, E]):
    """
    Success variant of Result.

    Holds exactly one immutable value. E is carried only at the type level.

    Example:
        x: Result[int, str] = Ok(2)
        x.unwrap()  # 2
    """

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: typing.Any) -> typing.NoReturn:
        raise AttributeError(f"Ok is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> typing.NoReturn:
        raise AttributeError(f"Ok is immutable, cannot delete {name!r}")

    @property
    def value(self) -> T:
        """The success payload."""
        return self._value

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Ok):
            return bool(self._value == other._value)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Ok, self._value))

    def __reduce__(self) -> tuple[type[Ok[T, E]], tuple[T]]:
        return (Ok, (self._value,))

    # ------------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------------

    def is_ok(self) -> bool:
        """
        Whether this is an Ok.

        Example:
            Ok(2).is_ok()   # True
            Err(-1).is_ok() # False
        """
        return True

    def is_err(self) -> bool:
        """
        Whether this is an Err. Always `not self.is_ok()`.

        Example:
            Ok(2).is_err()   # False
            Err(-1).is_err() # True
        """
        return False

    # ------------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------------

    def unwrap(self) -> T:
        """
        Return the success payload.

        Raises UnwrapError when called on an Err.

        Example:
            Ok(2).unwrap()  # 2
        """
        return self._value

    def unwrap_err(self) -> typing.NoReturn:
        """Err-only accessor. Always raises UnwrapError on an Ok."""
        raise UnwrapError("unwrap_err", self)

    def unwrap_or(self, default: T, /) -> T:
        """
        Return the payload, or `default` on an Err.

        Example:
            Ok(2).unwrap_or(0)   # 2
            Err(-1).unwrap_or(0) # 0
        """
        return self._value

    def ok(self) -> Option[T]:
        """
        Payload if Ok, else None.

        NOTE: Ok(None).ok() is None as well. Use match when it matters.
        """
        return self._value

    def err(self) -> Option[E]:
        """Error if Err, else None."""
        return None

    # ------------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------------

    def map[U](self, f: Callable[[T], U], /) -> Result[U, E]:
        """
        Apply `f` to the payload, keep an Err untouched.

        Exceptions raised by `f` are NOT caught (use `wrap` for that).

        Example:
            Ok(2).map(str)   # Ok("2")
            Err(-1).map(str) # Err(-1)
        """
        return Ok(f(self._value))

    def map_err[F](self, f: Callable[[E], F], /) -> Result[T, F]:
        """
        Apply `f` to the error, keep an Ok untouched.

        Example:
            Ok(2).map_err(str)   # Ok(2)
            Err(-1).map_err(str) # Err("-1")
        """
        return Ok(self._value)

    def map_or[U](self, default: U, f: Callable[[T], U], /) -> U:
        """
        `f(payload)` if Ok, otherwise `default`.

        NOTE: `default` is evaluated eagerly by the caller.

        Example:
            Ok("foo").map_or(42, len)  # 3
            Err("bar").map_or(42, len) # 42
        """
        return f(self._value)

    # ------------------------------------------------------------------------
    # Case analysis
    # ------------------------------------------------------------------------

    def match[U](self, on_ok: Callable[[T], U], on_err: Callable[[E], U], /) -> U:
        """
        Apply `on_ok` to the payload if Ok, otherwise `on_err` to the error.

        Exactly one callback runs. Callbacks may return None when used
        for side effects only.

        Example:
            Ok(2).match(lambda v: v, lambda _: 0)   # 2
            Err(-1).match(lambda v: v, lambda _: 0) # 0
        """
        return on_ok(self._value)

    # ------------------------------------------------------------------------
    # Boolean-style composition (Ok ~ True, Err ~ False)
    # ------------------------------------------------------------------------

    def and_[U](self, other: Result[U, E], /) -> Result[U, E]:
        """
        `other` if Ok, otherwise self's Err.

        Example:
            Ok(2).and_(Err("late"))   # Err("late")
            Err("early").and_(Ok(2))  # Err("early")
            Ok(2).and_(Ok(100))       # Ok(100)
        """
        return other

    def and_then[U](self, op: Callable[[T], Result[U, E]], /) -> Result[U, E]:
        """
        Call `op` with the payload if Ok and return its Result.

        On an Err `op` is never called, so chains short-circuit
        at the first failure.

        Example:
            square = lambda x: Ok(x * x)
            Ok(2).and_then(square)   # Ok(4)
            Err(-1).and_then(square) # Err(-1)
        """
        return op(self._value)

    def or_[F](self, other: Result[T, F], /) -> Result[T, F]:
        """
        Self if Ok, otherwise `other`.

        Example:
            Ok(2).or_(Err(-1))     # Ok(2)
            Err(-1).or_(Ok(2))     # Ok(2)
            Err(-1).or_(Err(-100)) # Err(-100)
        """
        return Ok(self._value)

    def or_else[F](self, op: Callable[[E], Result[T, F]], /) -> Result[T, F]:
        """
        Call `op` with the error if Err and return its Result.

        On an Ok `op` is never called.

        Example:
            square = lambda x: Ok(x * x)
            Ok(2).or_else(square)  # Ok(2)
            Err(-2).or_else(square) # Ok(4)
        """
        return Ok(self._value)


class Err[T, E](ResultLike[T, E]):
    """
    Failure variant of Result.

    Holds exactly one immutable error. T is carried only at the type level.

    Example:
        x: Result[int, str] = Err("kaboom")
        x.unwrap_err()  # "kaboom"
    """

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    def __init__(self, error: E) -> None:
        object.__setattr__(self, "_error", error)

    def __setattr__(self, name: str, value: typing.Any) -> typing.NoReturn:
        raise AttributeError(f"Err is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> typing.NoReturn:
        raise AttributeError(f"Err is immutable, cannot delete {name!r}")

    @property
    def error(self) -> E:
        """The failure payload."""
        return self._error

    def __repr__(self) -> str:
        return f"Err({self._error!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Err):
            return bool(self._error == other._error)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Err, self._error))

    def __reduce__(self) -> tuple[type[Err[T, E]], tuple[E]]:
        return (Err, (self._error,))

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> typing.NoReturn:
        """Ok-only accessor. Always raises UnwrapError on an Err."""
        raise UnwrapError("unwrap", self)

    def unwrap_err(self) -> E:
        """Return the failure payload."""
        return self._error

    def unwrap_or(self, default: T, /) -> T:
        return default

    def ok(self) -> Option[T]:
        return None

    def err(self) -> Option[E]:
        return self._error

    def map[U](self, f: Callable[[T], U], /) -> Result[U, E]:
        return Err(self._error)

    def map_err[F](self, f: Callable[[E], F], /) -> Result[T, F]:
        return Err(f(self._error))

    def map_or[U](self, default: U, f: Callable[[T], U], /) -> U:
        return default

    def match[U](self, on_ok: Callable[[T], U], on_err: Callable[[E], U], /) -> U:
        return on_err(self._error)

    def and_[U](self, other: Result[U, E], /) -> Result[U, E]:
        return Err(self._error)

    def and_then[U](self, op: Callable[[T], Result[U, E]], /) -> Result[U, E]:
        return Err(self._error)

    def or_[F](self, other: Result[T, F], /) -> Result[T, F]:
        return other

    def or_else[F](self, op: Callable[[E], Result[T, F]], /) -> Result[T, F]:
        return op(self._error)


# ============================================================================
# Aliases
# ============================================================================

# Result = exactly one of Ok / Err
type Result[T, E] = Ok[T, E] | Err[T, E]

# AsyncResult = awaitable Result, what async_wrap produces
type AsyncResult[T, E] = Awaitable[Result[T, E]]


__all__ = (
    "ResultLike",
    "Ok",
    "Err",
    "Result",
    "AsyncResult",
)
