"""Page name to candidate path construction.

Turns a logical page name such as ``"[blog]::posts.show"`` into the
mapping keys that may hold it::

    ../domains/blog/pages/posts/show.tsx

Resolution steps:

1. Split off the domain with the domain pattern (group 1 = domain,
   group 2 = page path).  The pattern is searched, not matched, so it only
   anchors where it says ``^``.  Names that don't match use the default
   domain.
2. Split the page path on the delimiter into folder segments.
3. Keep the domain if it is known, or if it is a multi/wildcard token
   (contains ``,`` or ``*``); otherwise fall back to the default domain.
4. Build the base path, with or without the domain folders.
5. Append extensions: the effective extension, else every detected one,
   else the common front-end fallbacks.
"""

import re
from collections.abc import Collection, Sequence

from pagemap.config import FALLBACK_EXTENSIONS
from pagemap.errors import DomainSyntaxError
from pagemap.pages.types import PagePath


def build_page_path(
    name: str,
    *,
    pattern: re.Pattern[str],
    delimiter: str,
    default_domain: str,
    domains: Collection[str],
    domain_mode: bool,
    domain_folder: str,
    pages_folder: str,
    extension: str | None,
    extensions: Sequence[str],
    auto_detect_extension: bool,
) -> PagePath:
    """Build the candidate paths for *name*.

    Args:
        name: Page name, optionally prefixed with a domain.
        pattern: Compiled two-group domain pattern.
        delimiter: Separator between page path segments.
        default_domain: Domain used when the name has none, or an unknown one.
        domains: Domains declared by the mapping (empty outside domain mode).
        domain_mode: Whether keys follow the domain folder convention.
        domain_folder: Folder holding the domains.
        pages_folder: Folder holding the pages.
        extension: Effective extension, or None.
        extensions: Detected extensions, in detection order.
        auto_detect_extension: Whether detected extensions may be used.

    Returns:
        A :class:`PagePath` with at least one candidate.

    Raises:
        DomainSyntaxError: If *name* matches the pattern but the domain or
            page part is empty.
    """
    raw_domain = default_domain
    page_part = name

    match = pattern.search(name)
    if match:
        domain_group, page_group = match.group(1), match.group(2)
        if not domain_group or not page_group:
            raise DomainSyntaxError(name, delimiter)
        raw_domain = domain_group
        page_part = page_group

    segments = page_part.split(delimiter)

    if raw_domain in domains or "," in raw_domain or "*" in raw_domain:
        domain = raw_domain
    else:
        domain = default_domain

    page_path = "/".join(segments)
    if domain_mode:
        base = f"../{domain_folder}/{domain}/{pages_folder}/{page_path}"
    else:
        base = f"../{pages_folder}/{page_path}"

    if extension:
        suffixes: Sequence[str] = (extension,)
    elif auto_detect_extension and extensions:
        suffixes = extensions
    else:
        suffixes = FALLBACK_EXTENSIONS

    candidates = tuple(f"{base}.{ext}" for ext in suffixes)
    return PagePath(primary=candidates[0], domain=domain, candidates=candidates)
