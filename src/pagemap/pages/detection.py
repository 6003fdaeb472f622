"""Mapping shape detection.

Pure functions over the mapping's path keys: whether the keys follow the
domain folder convention, which file extensions they use, and which
domains they declare.  The resolver calls these once per configuration
and caches the results.
"""

import re
from collections.abc import Iterable

from pagemap.errors import ConfigurationError

# Trailing ".ext": the run of non-slash, non-dot characters after the last dot
_EXTENSION_RE = re.compile(r"\.([^./]+)$")


def detect_domain_mode(keys: Iterable[str], domain_folder: str, pages_folder: str) -> bool:
    """Return True if any key lives under ``../<domain_folder>/.../<pages_folder>/``."""
    domain_marker = f"../{domain_folder}/"
    pages_marker = f"/{pages_folder}/"
    return any(domain_marker in key and pages_marker in key for key in keys)


def detect_extensions(keys: Iterable[str]) -> tuple[str, ...]:
    """Collect the distinct trailing extensions of *keys*.

    Order follows the first key carrying each extension, so candidate
    paths are tried in a stable order.

    Examples::

        detect_extensions(["../pages/a.tsx", "../pages/b.vue", "../pages/c.tsx"])
        -> ("tsx", "vue")
    """
    found: dict[str, None] = {}
    for key in keys:
        match = _EXTENSION_RE.search(key)
        if match:
            found.setdefault(match.group(1), None)
    return tuple(found)


def extract_domains(keys: Iterable[str], domain_folder: str, pages_folder: str) -> frozenset[str]:
    """Collect the ``<domain>`` segment of every ``<domain_folder>/<domain>/<pages_folder>/`` key."""
    domain_re = re.compile(f"{re.escape(domain_folder)}/([^/]+)/{re.escape(pages_folder)}/")
    domains: set[str] = set()
    for key in keys:
        match = domain_re.search(key)
        if match:
            domains.add(match.group(1))
    return frozenset(domains)


def compile_domain_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile and validate a domain pattern.

    The pattern must declare exactly two capturing groups: the domain and
    the page path.  Groups are counted on the compiled pattern, so a
    pattern is accepted or rejected without having to match anything.

    Raises:
        ConfigurationError: If the pattern does not compile or has the
            wrong number of groups.
    """
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        msg = f"Invalid domain pattern: {pattern!r} ({exc})"
        raise ConfigurationError(msg) from exc

    if compiled.groups != 2:
        msg = (
            f"Invalid domain pattern: {compiled.pattern!r}. "
            "Pattern must contain exactly 2 capturing groups (domain and page), "
            f"found {compiled.groups}."
        )
        raise ConfigurationError(msg)
    return compiled


def check_delimiter(delimiter: str) -> str:
    """Reject delimiters that cannot split a page name into segments.

    Raises:
        ConfigurationError: If *delimiter* is not a non-empty string.
    """
    if not isinstance(delimiter, str) or not delimiter:
        msg = f"Invalid delimiter: {delimiter!r}. Delimiter must be a non-empty string."
        raise ConfigurationError(msg)
    return delimiter
