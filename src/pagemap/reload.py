"""Dev-mode page watcher.

Watches source directories for page files being added or removed and
tells the host its page mapping is stale.  Bursts of changes (a branch
checkout, a scaffolding command) collapse into a single reload.

The watcher never rebuilds the mapping itself; ``on_reload`` does that,
typically by re-running the host's glob and calling
``PageResolver.reload_pages()``::

    watcher = PageWatcher(lambda: resolver.reload_pages(build_pages()))
    await watcher.watch("src")

Edits to existing pages are ignored: the mapping's keys only change
when files appear or disappear.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import anyio
from anyio.abc import TaskGroup
from watchfiles import Change, awatch

from pagemap._internal.invoke import invoke

logger = logging.getLogger("pagemap.reload")

DEFAULT_WATCH_EXTENSIONS: tuple[str, ...] = (".tsx", ".jsx", ".vue", ".svelte")

# Name of the event announced on every reload
RELOAD_EVENT = "page-cache-invalidated"


class Debouncer:
    """Delay a call until triggers stop arriving for *delay* seconds.

    Each ``trigger()`` cancels the pending timer and starts a new one in
    *task_group*, so only the last trigger of a burst calls *func*.

    Args:
        func: Sync or async callable, called without arguments.
        task_group: The anyio task group the timers run in.
        delay: Quiet period in seconds.
    """

    __slots__ = ("_delay", "_func", "_scope", "_task_group")

    def __init__(self, func: Callable[[], Any], task_group: TaskGroup, delay: float = 0.25) -> None:
        self._func = func
        self._task_group = task_group
        self._delay = delay
        self._scope: anyio.CancelScope | None = None

    @property
    def pending(self) -> bool:
        return self._scope is not None

    def trigger(self) -> None:
        if self._scope is not None:
            self._scope.cancel()
        scope = anyio.CancelScope()
        self._scope = scope
        self._task_group.start_soon(self._fire, scope)

    async def _fire(self, scope: anyio.CancelScope) -> None:
        with scope:
            await anyio.sleep(self._delay)
        if scope.cancel_called:
            return
        self._scope = None
        try:
            await invoke(self._func)
        except Exception:
            # A failed call must not tear down the task group it runs in
            logger.exception("Debounced call %r failed", self._func)


class PageWatcher:
    """Filters filesystem events down to page additions and removals.

    Args:
        on_reload: Called (sync or async) once per debounced burst of
            relevant changes.
        pages_folder: Folder name a path must contain to count as a page.
        watch_extensions: File suffixes that count as pages.
        delay: Debounce quiet period in seconds.
    """

    def __init__(
        self,
        on_reload: Callable[[], Any],
        *,
        pages_folder: str = "pages",
        watch_extensions: Iterable[str] = DEFAULT_WATCH_EXTENSIONS,
        delay: float = 0.25,
    ) -> None:
        self.on_reload = on_reload
        self.pages_folder = pages_folder
        self.watch_extensions = tuple(watch_extensions)
        self.delay = delay

    def is_watched_page_file(self, path: str | Path) -> bool:
        """True if *path* sits in a pages folder and has a watched suffix."""
        file = Path(path).as_posix()
        return f"/{self.pages_folder}/" in file and file.endswith(self.watch_extensions)

    def handle_change(self, change: Change, path: str) -> bool:
        """Log a relevant change and report whether it warrants a reload."""
        if change not in (Change.added, Change.deleted):
            return False
        if not self.is_watched_page_file(path):
            return False

        relative = os.path.relpath(path)
        if change == Change.added:
            logger.info("New page added: %s", relative)
        else:
            logger.info("Page removed: %s", relative)
        return True

    async def watch(self, *paths: str | Path, stop_event: anyio.Event | None = None) -> None:
        """Watch *paths* until *stop_event* is set, reloading on page changes."""
        async with anyio.create_task_group() as tg:
            debouncer = Debouncer(self._reload, tg, self.delay)
            async for changes in awatch(*paths, stop_event=stop_event):
                relevant = [self.handle_change(change, path) for change, path in changes]
                if any(relevant):
                    debouncer.trigger()

    async def _reload(self) -> None:
        logger.info("Reloading pages (%s)", RELOAD_EVENT)
        try:
            await invoke(self.on_reload)
        except Exception:
            logger.exception("Page reload failed, still watching")
