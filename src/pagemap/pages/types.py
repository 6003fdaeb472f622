"""Data models for page mapping entries and constructed paths.

Mapping entries arrive in two shapes: an already-pending value, or a
zero-argument producer that starts loading when called.  Both are
normalised into a tagged variant once, at configuration time, so the
resolver loads every entry the same way.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any

import anyio

from pagemap._internal.invoke import invoke, settle
from pagemap._internal.types import PageEntry, Producer


@dataclass(slots=True)
class Eager:
    """An entry whose value is already pending (or already available).

    A bare coroutine can only be awaited once.  The first load drives it
    and records the outcome; concurrent and later loads wait on an
    ``anyio.Event`` and share that outcome, so any anyio backend works.
    If the first load is cancelled, later loads raise ``RuntimeError``.

    Attributes:
        value: An awaitable resolving to the page component, or the
            component itself.
    """

    value: Any
    _settled: anyio.Event | None = field(default=None, init=False, repr=False, compare=False)
    _outcome: Any = field(default=None, init=False, repr=False, compare=False)
    _failure: BaseException | None = field(default=None, init=False, repr=False, compare=False)

    async def load(self) -> Any:
        if not inspect.iscoroutine(self.value):
            return await settle(self.value)

        if self._settled is None:
            self._settled = anyio.Event()
            try:
                self._outcome = await self.value
            except Exception as exc:
                self._failure = exc
                raise
            except BaseException:
                self._failure = RuntimeError("Page load was cancelled")
                raise
            finally:
                self._settled.set()
        else:
            await self._settled.wait()

        if self._failure is not None:
            raise self._failure
        return self._outcome


@dataclass(frozen=True, slots=True)
class Lazy:
    """An entry loaded on demand by calling a zero-argument producer.

    Attributes:
        producer: Called once per resolution; may be sync or async.
    """

    producer: Producer

    async def load(self) -> Any:
        return await invoke(self.producer)


Loader = Eager | Lazy


def as_loader(entry: PageEntry) -> Loader:
    """Wrap a raw mapping entry in its loader variant.

    Callables become :class:`Lazy`, anything else :class:`Eager`.
    Entries that are already wrapped pass through unchanged.
    """
    if isinstance(entry, (Eager, Lazy)):
        return entry
    if callable(entry) and not inspect.isawaitable(entry):
        return Lazy(entry)
    return Eager(entry)


@dataclass(frozen=True, slots=True)
class PagePath:
    """Candidate paths built for one page name.

    Attributes:
        primary: The first candidate, reported in diagnostics.
        domain: The effective domain the paths were built for.
        candidates: Every full path to try, in priority order.
    """

    primary: str
    domain: str
    candidates: tuple[str, ...]
