"""Shared type aliases used across pagemap modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Zero-argument page producer, returns the component or an awaitable of it
Producer: TypeAlias = Callable[[], Any]

# Raw mapping entry as supplied by the host: a pending value or a producer
PageEntry: TypeAlias = Any

# Path key -> entry, e.g. {"../pages/home.tsx": load_home}
PageMapping: TypeAlias = Mapping[str, PageEntry]

# Element id -> attribute mapping of that element, or None when absent
ElementLookup: TypeAlias = Callable[[str], Mapping[str, str] | None]
