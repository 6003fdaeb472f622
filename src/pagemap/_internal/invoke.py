"""Awaiting page producers and reload hooks that may or may not be async.

A page mapping built by a host mixes plain values, pending awaitables and
zero-argument producers, and a producer may be ``def`` or ``async def``.
The watcher's reload hook has the same freedom.  ``settle`` collapses a
value that may be awaitable; ``invoke`` calls a producer and settles
what it returns.
"""

import inspect
from collections.abc import Callable
from typing import Any


async def settle(value: Any) -> Any:
    """Return *value*, awaiting it first if it is awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


async def invoke(producer: Callable[[], Any]) -> Any:
    """Call a zero-argument *producer* and settle its result.

    ::

        pages = {
            "../pages/home.tsx": lambda: HomePage,           # plain producer
            "../pages/blog.tsx": load_blog_module,           # async def producer
        }
        component = await invoke(pages["../pages/blog.tsx"])
    """
    return await settle(producer())
