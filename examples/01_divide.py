from __future__ import annotations

from _infra import banner, run

from fallible import Err, Ok, Result


class DivisionByZeroError(Exception):
    def __init__(self) -> None:
        super().__init__("cannot divide by 0.")


def divide(num: float, denom: float) -> Result[float, DivisionByZeroError]:
    # Expected failure is a value, not a raise.
    if denom == 0:
        return Err(DivisionByZeroError())
    return Ok(num / denom)


async def main() -> None:
    banner("01_divide: Ok / Err, is_ok / is_err, match")

    ok_result = divide(20, 1)
    if ok_result.is_ok():
        print(f"20 / 1 is {ok_result.unwrap()}")

    err_result = divide(20, 0)
    if err_result.is_err():
        print(f"20 / 0 returns an error: {err_result.unwrap_err()}")

    divide(20, -1).match(
        lambda num: print(f"20 / -1 is {num}"),
        lambda err: print(f"20 / -1 returns an error: {err}"),
    )

    match divide(1, 0):
        case Ok(num):
            print(f"1 / 0 is {num}")
        case Err(err):
            print(f"1 / 0 returns an error: {err}")

    # Chaining: divide twice, short-circuits on the first zero
    chained = divide(100, 5).and_then(lambda q: divide(q, 0)).map(round)
    print(f"100 / 5 / 0 -> {chained!r}")


if __name__ == "__main__":
    run(main)
