"""``pagemap inspect`` — print what the resolver detects in a mapping."""

import argparse
import sys

from pagemap.cli._imports import build_resolver
from pagemap.errors import ConfigurationError


def run_inspect(args: argparse.Namespace) -> None:
    """Configure a resolver with ``args.pages`` and print its view of the mapping."""
    try:
        resolver = build_resolver(args)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Domain mode: {'on' if resolver.domain_mode else 'off'}")
    domains = resolver.detected_domains()
    if domains:
        print(f"Domains: {', '.join(domains)}")
    print(f"Extensions: {', '.join(resolver.detected_extensions()) or '(none)'}")
    print(f"Effective extension: {resolver.effective_extension or '(none)'}")
    pages = resolver.available_pages()
    print(f"Pages ({len(pages)}):")
    for key in sorted(pages):
        print(f"  {key}")
