"""Host environment capability for client-side prop hydration.

After a successful resolve, the resolver asks the host to read the
server-injected page props from the page container element.  Outside a
browser there is nothing to read, so the capability is chosen once at
construction instead of being probed on every call.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from pagemap._internal.types import ElementLookup


@runtime_checkable
class HostEnvironment(Protocol):
    """Reads the page props attribute from the host's container element."""

    def hydrate(self, element_id: str, data_attribute: str) -> str | None: ...


class Headless:
    """No browser context, so hydration is a no-op."""

    __slots__ = ()

    def hydrate(self, element_id: str, data_attribute: str) -> str | None:
        return None


class Browser:
    """Browser-like host with an element lookup capability.

    Usage::

        host = Browser(dom.attributes_of, on_props=store.load_props)
        resolver = PageResolver(host=host)

    Args:
        lookup: Returns the attribute mapping of the element with the
            given id, or ``None`` if no such element exists.
        on_props: Optional receiver for the raw props string.
    """

    __slots__ = ("_lookup", "_on_props")

    def __init__(
        self,
        lookup: ElementLookup,
        on_props: Callable[[str], object] | None = None,
    ) -> None:
        self._lookup = lookup
        self._on_props = on_props

    def hydrate(self, element_id: str, data_attribute: str) -> str | None:
        attributes = self._lookup(element_id)
        if attributes is None:
            return None
        props = attributes.get(data_attribute)
        if not props:
            return None
        if self._on_props is not None:
            self._on_props(props)
        return props
