"""Resolver configuration.

ResolverConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import re
from dataclasses import dataclass

# [domain]::page/path: group 1 is the domain, group 2 the page path.
# The page group may match empty: "[blog]::" is a syntax error, not a page name.
DEFAULT_DOMAIN_PATTERN = r"^\[(.*?)\]::(.*)$"

# Tried in order when neither an explicit nor a detected extension exists
FALLBACK_EXTENSIONS: tuple[str, ...] = ("tsx", "jsx", "vue", "svelte")


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Page resolver configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ResolverConfig(default_domain="shop", delimiter="/")
    """

    # Diagnostics
    debug_logging: bool = False

    # Page names
    delimiter: str = "."
    default_domain: str = "main"
    domain_pattern: str | re.Pattern[str] = DEFAULT_DOMAIN_PATTERN

    # Path conventions: ../<domain_folder_name>/<domain>/<pages_folder_name>/...
    domain_folder_name: str = "domains"
    pages_folder_name: str = "pages"

    # Extensions
    explicit_extension: str | None = None  # Bypasses auto-detection
    auto_detect_extension: bool = True

    # Browser hydration (read after a successful resolve, never used for lookup)
    host_element_id: str = "app"
    host_data_attribute: str = "data-page"
