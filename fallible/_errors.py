from __future__ import annotations

import typing

class UnwrapError(Exception):
    """Accessor called on the wrong Result variant."""

    method: str
    result: typing.Any

    def __init__(self, method: str, result: typing.Any) -> None:
        self.method = method
        self.result = result
        super().__init__(f"called `{method}` on {result!r}")

__all__ = ("UnwrapError",)
