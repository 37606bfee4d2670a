from __future__ import annotations

import json

from _infra import APIException, FakeHTTPClient, User, banner, run

from fallible import Err, Ok, Result, lift as L


GOOD_JSON = '{"a": 1}'
BAD_JSON = "{"


class FetchError(Exception):
    pass


async def fetch_user(client: FakeHTTPClient, user_id: int) -> Result[User, Exception]:
    return await L.up.async_wrap(lambda: client.get_user(user_id))


async def main() -> None:
    banner("02_wrap: exceptions -> Result")

    print("\n[Demo 1: L.up.wrap for sync code that raises]")
    good = L.up.wrap(lambda: json.loads(GOOD_JSON))
    bad = L.up.wrap(lambda: json.loads(BAD_JSON), "invalid json")
    print(f"  {good!r}")
    print(f"  {bad!r}")
    print(f"  {L.call(int, 'nope')!r}")

    print("\n[Demo 2: L.up.async_wrap for async code that raises]")
    for client in (FakeHTTPClient(), FakeHTTPClient(fail_count=1)):
        match await fetch_user(client, 42):
            case Ok(user):
                print(f"  ✓ Success: {user.name}")
            case Err(err):
                print(f"  ✗ Error: {err!r}")

    print("\n[Demo 3: fallback error replaces the exception]")
    failed = await L.up.async_wrap(
        lambda: FakeHTTPClient(fail_count=1).get_user(7),
        FetchError("user service unavailable"),
    )
    print(f"  {failed!r}")

    print("\n[Demo 4: map_err keeps the exception details]")
    mapped = (await fetch_user(FakeHTTPClient(fail_count=1), 7)).map_err(
        lambda e: e.status if isinstance(e, APIException) else 500
    )
    print(f"  {mapped!r}")


if __name__ == "__main__":
    run(main)
