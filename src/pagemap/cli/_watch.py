"""``pagemap watch`` — report page files being added or removed.

Runs :class:`~pagemap.reload.PageWatcher` in the foreground and logs
each debounced reload.  Stop with Ctrl+C.
"""

import argparse
import logging

import anyio

from pagemap.reload import DEFAULT_WATCH_EXTENSIONS, PageWatcher

logger = logging.getLogger("pagemap.cli")


def run_watch(args: argparse.Namespace) -> None:
    """Watch ``args.paths`` until interrupted."""
    logging.basicConfig(level=logging.INFO, format="  [HMR] %(message)s")

    watcher = PageWatcher(
        lambda: logger.info("Page mapping is stale, rebuild it"),
        pages_folder=args.pages_folder,
        watch_extensions=args.ext or DEFAULT_WATCH_EXTENSIONS,
        delay=args.delay,
    )
    try:
        anyio.run(watcher.watch, *args.paths)
    except KeyboardInterrupt:
        pass
