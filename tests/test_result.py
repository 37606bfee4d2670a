"""Ok / Err variants and their combinators."""

from __future__ import annotations

import copy
import pickle

import pytest

from fallible import Err, Ok, Result, ResultLike, UnwrapError

# =============================================================================
# Helpers
# =============================================================================


class DivisionByZeroError(Exception):
    def __init__(self) -> None:
        super().__init__("cannot divide by 0.")


def divide(num: float, denom: float) -> Result[float, DivisionByZeroError]:
    if denom == 0:
        return Err(DivisionByZeroError())
    return Ok(num / denom)


class Recorder:
    """Callable that records its calls and returns a fixed Result."""

    def __init__(self, result: Result[int, str]) -> None:
        self.result = result
        self.calls: list[object] = []

    def __call__(self, arg: object) -> Result[int, str]:
        self.calls.append(arg)
        return self.result


SAMPLES: list[Result[int, str]] = [Ok(0), Ok(2), Ok(-1), Err(""), Err("err"), Err("boom")]

# =============================================================================
# Classification
# =============================================================================


@pytest.mark.parametrize("result", SAMPLES, ids=repr)
def test_exactly_one_variant(result: Result[int, str]) -> None:
    assert result.is_ok() != result.is_err()
    assert result.is_ok() == isinstance(result, Ok)


def test_pattern_matching_narrows() -> None:
    def describe(result: Result[int, str]) -> str:
        match result:
            case Ok(value):
                return f"ok:{value}"
            case Err(error):
                return f"err:{error}"

    assert describe(Ok(1)) == "ok:1"
    assert describe(Err("x")) == "err:x"


# =============================================================================
# Extraction
# =============================================================================


def test_unwrap_identity() -> None:
    assert Ok(2).unwrap() == 2
    assert Err("e").unwrap_err() == "e"


def test_unwrap_on_err_raises() -> None:
    with pytest.raises(UnwrapError) as exc_info:
        Err("kaboom").unwrap()

    assert exc_info.value.method == "unwrap"
    assert exc_info.value.result == Err("kaboom")
    assert "kaboom" in str(exc_info.value)


def test_unwrap_err_on_ok_raises() -> None:
    with pytest.raises(UnwrapError, match="unwrap_err"):
        Ok(2).unwrap_err()


def test_unwrap_or() -> None:
    assert Ok(2).unwrap_or(0) == 2
    assert Err(-1).unwrap_or(0) == 0


def test_ok_and_err_accessors() -> None:
    assert Ok(2).ok() == 2
    assert Ok(2).err() is None
    assert Err(-1).ok() is None
    assert Err(-1).err() == -1


def test_value_and_error_properties() -> None:
    assert Ok("a").value == "a"
    assert Err("b").error == "b"


# =============================================================================
# Transformation
# =============================================================================


def test_map() -> None:
    assert Ok(2).map(str) == Ok("2")
    assert Err(-1).map(str) == Err(-1)


def test_map_does_not_call_f_on_err() -> None:
    calls: list[int] = []
    Err("e").map(calls.append)
    assert calls == []


def test_map_does_not_catch() -> None:
    def explode(_: int) -> int:
        raise ValueError("inside map")

    with pytest.raises(ValueError, match="inside map"):
        Ok(1).map(explode)


def test_map_err() -> None:
    assert Err(-1).map_err(str) == Err("-1")
    assert Ok(2).map_err(str) == Ok(2)


def test_map_or() -> None:
    assert Ok("foo").map_or(42, len) == 3
    assert Err("bar").map_or(42, len) == 42


# =============================================================================
# Case analysis
# =============================================================================


def test_match_calls_one_branch() -> None:
    seen: list[str] = []

    assert Ok(2).match(lambda v: v * 10, lambda _: 0) == 20
    assert Err(-1).match(lambda v: v * 10, lambda _: 0) == 0

    Ok(1).match(lambda v: seen.append(f"ok {v}"), lambda e: seen.append(f"err {e}"))
    Err(2).match(lambda v: seen.append(f"ok {v}"), lambda e: seen.append(f"err {e}"))
    assert seen == ["ok 1", "err 2"]


# =============================================================================
# Boolean-style composition
# =============================================================================


def test_and() -> None:
    assert Ok(2).and_(Err("err")) == Err("err")
    assert Err("err").and_(Ok(2)) == Err("err")
    assert Ok(2).and_(Ok(100)) == Ok(100)
    assert Err(-1).and_(Err(-100)) == Err(-1)


def test_and_then() -> None:
    assert Ok(2).and_then(lambda x: Ok(x * x)) == Ok(4)
    assert Ok(2).and_then(lambda _: Err("late")) == Err("late")


def test_and_then_skips_op_on_err() -> None:
    op = Recorder(Ok(1))

    assert Err("early").and_then(op) == Err("early")
    assert op.calls == []


def test_and_then_short_circuits_chain() -> None:
    second = Recorder(Ok(3))

    result = divide(20, 0).and_then(lambda q: Ok(int(q))).and_then(second)

    assert result.is_err()
    assert str(result.unwrap_err()) == "cannot divide by 0."
    assert second.calls == []


def test_or() -> None:
    assert Ok(2).or_(Err(-1)) == Ok(2)
    assert Err(-1).or_(Ok(2)) == Ok(2)
    assert Err(-1).or_(Err(-100)) == Err(-100)
    assert Ok(2).or_(Ok(100)) == Ok(2)


def test_or_else() -> None:
    assert Err(-2).or_else(lambda x: Ok(x * x)) == Ok(4)
    assert Err(-2).or_else(lambda x: Err(str(x))) == Err("-2")


def test_or_else_skips_op_on_ok() -> None:
    op = Recorder(Ok(0))

    assert Ok(2).or_else(op) == Ok(2)
    assert op.calls == []


def test_passthrough_returns_new_instance() -> None:
    ok: Result[int, str] = Ok(2)
    err: Result[int, str] = Err("e")

    assert ok.map_err(str) is not ok
    assert err.map(str) is not err
    assert err.and_then(Recorder(Ok(1))) is not err


# =============================================================================
# Value semantics
# =============================================================================


def test_equality_and_hash() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Ok(2)
    assert Ok(1) != Err(1)
    assert Err("a") == Err("a")
    assert hash(Ok(1)) == hash(Ok(1))
    assert len({Ok(1), Ok(1), Err(1)}) == 2


def test_repr() -> None:
    assert repr(Ok("x")) == "Ok('x')"
    assert repr(Err(3)) == "Err(3)"


@pytest.mark.parametrize("result", [Ok(1), Err("e")], ids=repr)
def test_immutable(result: Result[int, str]) -> None:
    with pytest.raises(AttributeError):
        result._value = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        result.extra = 1  # type: ignore[union-attr]
    with pytest.raises(AttributeError):
        del result._error  # type: ignore[union-attr]


@pytest.mark.parametrize("result", [Ok([1, 2]), Err({"code": 3})], ids=repr)
def test_copy_and_pickle(result: Result[list[int], dict[str, int]]) -> None:
    shallow = copy.copy(result)
    deep = copy.deepcopy(result)
    restored = pickle.loads(pickle.dumps(result))

    assert shallow == deep == restored == result
    assert type(shallow) is type(deep) is type(restored) is type(result)
    assert deep.match(lambda v: v, lambda e: e) is not result.match(lambda v: v, lambda e: e)


def test_deepcopy_container_holding_results() -> None:
    state = {"first": Ok(1), "second": Err("e")}

    assert copy.deepcopy(state) == state


@pytest.mark.parametrize("result", [Ok(1), Err("e")], ids=repr)
def test_variants_share_result_surface(result: Result[int, str]) -> None:
    assert isinstance(result, ResultLike)


# =============================================================================
# Scenarios
# =============================================================================


def test_divide_ok() -> None:
    result = divide(20, 1)

    assert result == Ok(20)
    assert result.unwrap() == 20


def test_divide_by_zero() -> None:
    result = divide(20, 0)

    assert result.is_err()
    assert isinstance(result.unwrap_err(), DivisionByZeroError)
    assert result.match(lambda n: f"{n}", lambda e: str(e)) == "cannot divide by 0."
