"""pagemap CLI — inspect a page mapping, dry-run resolution, watch for page changes.

Entry point registered as ``pagemap`` in ``pyproject.toml``::

    [project.scripts]
    pagemap = "pagemap.cli:main"
"""

import argparse
import sys


def _add_resolver_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command that builds a resolver."""
    parser.add_argument("--delimiter", default=None, help="Page path delimiter (default: .)")
    parser.add_argument("--default-domain", default=None, help="Fallback domain (default: main)")
    parser.add_argument("--domain-folder", default=None, help="Domain folder name (default: domains)")
    parser.add_argument("--pages-folder", default=None, help="Pages folder name (default: pages)")
    parser.add_argument("--extension", default=None, help="Page extension, skips auto-detection")
    parser.add_argument(
        "--no-auto-extension",
        action="store_true",
        help="Disable extension auto-detection",
    )
    parser.add_argument("--debug", action="store_true", help="Log resolver diagnostics")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pagemap`` command."""
    parser = argparse.ArgumentParser(
        prog="pagemap",
        description="pagemap — resolve logical page names against a page mapping.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pagemap inspect --------------------------------------------------
    inspect_parser = subparsers.add_parser("inspect", help="Show what the resolver detects")
    inspect_parser.add_argument(
        "pages",
        help="Import string of the page mapping (e.g. myapp.pages:PAGES)",
    )
    _add_resolver_options(inspect_parser)

    # -- pagemap resolve --------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Show which key a page name resolves to")
    resolve_parser.add_argument(
        "pages",
        help="Import string of the page mapping (e.g. myapp.pages:PAGES)",
    )
    resolve_parser.add_argument(
        "names",
        nargs="+",
        help="Page name(s), tried in order (e.g. '[blog]::post.show')",
    )
    _add_resolver_options(resolve_parser)

    # -- pagemap watch ----------------------------------------------------
    watch_parser = subparsers.add_parser("watch", help="Report page files being added or removed")
    watch_parser.add_argument("paths", nargs="+", help="Directories to watch")
    watch_parser.add_argument("--pages-folder", default="pages", help="Pages folder name")
    watch_parser.add_argument(
        "--ext",
        action="append",
        default=None,
        help="Watched page suffix, repeatable (default: .tsx .jsx .vue .svelte)",
    )
    watch_parser.add_argument(
        "--delay",
        type=float,
        default=0.25,
        help="Debounce delay in seconds",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "inspect":
        from pagemap.cli._inspect import run_inspect

        run_inspect(args)
    elif args.command == "resolve":
        from pagemap.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "watch":
        from pagemap.cli._watch import run_watch

        run_watch(args)
