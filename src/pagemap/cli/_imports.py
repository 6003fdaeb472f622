"""Mapping import resolution — resolves ``"module:attribute"`` strings to page mappings.

Shared utility used by ``pagemap inspect`` and ``pagemap resolve`` to
locate a page mapping from a user-supplied import string, and to turn
the shared command-line options into a configured resolver.
"""

import argparse
import importlib
import logging
from collections.abc import Mapping
from typing import Any

from pagemap.pages.resolver import PageResolver


def resolve_pages(import_string: str) -> Mapping[str, Any]:
    """Resolve an import string to a page mapping.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"pages"`` (e.g. ``"myapp"`` resolves to
    ``myapp.pages``).

    Supports factory functions: if the resolved object is callable and
    not a mapping, it will be called (assuming it builds the mapping).

    Args:
        import_string: Dotted module path with optional ``:attribute``
            suffix (e.g. ``"myapp:PAGES"``, ``"myapp.routes:build_pages"``).

    Returns:
        The resolved page mapping.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a mapping or callable.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "pages"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Mapping):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Mapping):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a page mapping"
        raise TypeError(msg)

    return obj


def options_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Translate the shared resolver flags into ``configure()`` options."""
    options: dict[str, Any] = {}
    if args.delimiter is not None:
        options["delimiter"] = args.delimiter
    if args.default_domain is not None:
        options["default_domain"] = args.default_domain
    if args.domain_folder is not None:
        options["domain_folder_name"] = args.domain_folder
    if args.pages_folder is not None:
        options["pages_folder_name"] = args.pages_folder
    if args.extension is not None:
        options["explicit_extension"] = args.extension.lstrip(".")
    if args.no_auto_extension:
        options["auto_detect_extension"] = False
    if args.debug:
        options["debug_logging"] = True
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    return options


def build_resolver(args: argparse.Namespace) -> PageResolver:
    """Import ``args.pages`` and configure a fresh resolver with it."""
    pages = resolve_pages(args.pages)
    return PageResolver().configure(pages, **options_from_args(args))
