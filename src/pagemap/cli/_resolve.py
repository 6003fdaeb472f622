"""``pagemap resolve`` — dry-run resolution of page names.

Prints the mapping key the resolver would load for the given names,
along with the candidate paths it tried for each name.  Nothing is
loaded.  Exits with code 1 if no name resolves.
"""

import argparse
import sys

from pagemap.cli._imports import build_resolver
from pagemap.errors import ConfigurationError, PageMapError


def run_resolve(args: argparse.Namespace) -> None:
    """Locate ``args.names`` in the mapping imported from ``args.pages``."""
    try:
        resolver = build_resolver(args)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        for name in args.names:
            page_path = resolver.build_page_path(name)
            print(f"{name} [{page_path.domain}]: {', '.join(page_path.candidates)}")
        key = resolver.locate(args.names)
    except PageMapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(key)
