"""
Lift helpers with semantic namespaces.

Supports three import styles:
    from fallible import lift as L   # Recommended
    from fallible import lift        # Explicit
    from fallible import wrap        # Flat

Architecture:
- L.up.*       - подъем исключений и Optional в Result
- L.call()     - вызов функций с лифтингом
- L.lifted     - декораторы

Examples:
    from fallible import lift as L

    # Exceptions -> Result
    config = L.up.wrap(lambda: json.loads(raw))
    user = await L.up.async_wrap(lambda: client.get_user(42))
    cached = L.up.from_optional(cache.get(key), error=lambda: CacheMiss(key))

    # Calling functions
    port = L.call(int, raw_port)
    user = await L.call_async(client.get_user, 42)

    # Decorators
    @L.lifted
    def parse(raw: str) -> Config: ...
"""

from __future__ import annotations

from . import up as up_ns

# From up namespace - подъем
from .up import async_wrap, from_optional, wrap

# From call namespace - вызов функций
from .call import call, call_async, lifted, lifted_async

# L.up.* namespace alias
up = up_ns

__all__ = (
    # Namespaces (L.up.*)
    "up",
    # Up
    "wrap",
    "async_wrap",
    "from_optional",
    # Call
    "call",
    "call_async",
    "lifted",
    "lifted_async",
)
