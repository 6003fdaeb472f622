"""Runtime page resolution against a pre-built page mapping.

The host hands the resolver a mapping of path keys to page loaders
(typically produced by a build-time glob) and asks for pages by logical
name.  The resolver works out which key the name refers to and loads it.

Usage::

    resolver = PageResolver().configure(pages, default_domain="shop")
    component = await resolver.resolve(["checkout.fr", "checkout"])

Configuration runs domain-mode and extension detection once; domain
extraction is lazy and cached.  ``resolve()`` only reads resolver state,
so concurrent resolutions may interleave freely.  ``configure()`` and
``reload_pages()`` are the only writers and must not race in-flight
resolutions.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Sequence
from dataclasses import replace
from types import MappingProxyType
from typing import Any

from pagemap._internal.types import PageMapping
from pagemap.config import ResolverConfig
from pagemap.errors import ConfigurationError, DomainSyntaxError, PageNotFoundError
from pagemap.pages.detection import (
    check_delimiter,
    compile_domain_pattern,
    detect_domain_mode,
    detect_extensions,
    extract_domains,
)
from pagemap.pages.host import Headless, HostEnvironment
from pagemap.pages.paths import build_page_path
from pagemap.pages.types import Loader, PagePath, as_loader

logger = logging.getLogger("pagemap.resolver")


def _as_names(names: str | Sequence[str]) -> tuple[str, ...]:
    if isinstance(names, str):
        return (names,)
    return tuple(names)


class PageResolver:
    """Resolves logical page names to entries of a page mapping.

    Args:
        config: Initial configuration.  ``configure()`` may replace it.
        host: Host environment used for prop hydration after a
            successful resolve.  Defaults to :class:`Headless`.
    """

    __slots__ = (
        "_adopted_extension",
        "_config",
        "_domain_mode",
        "_domains",
        "_extensions",
        "_host",
        "_pages",
        "_pattern",
    )

    def __init__(
        self,
        config: ResolverConfig | None = None,
        *,
        host: HostEnvironment | None = None,
    ) -> None:
        self._config = config or ResolverConfig()
        check_delimiter(self._config.delimiter)
        self._pattern = compile_domain_pattern(self._config.domain_pattern)
        self._host: HostEnvironment = host or Headless()
        self._pages: dict[str, Loader] = {}
        self._domain_mode = False
        # None = not computed yet; caches are never partially filled
        self._domains: frozenset[str] | None = None
        self._extensions: tuple[str, ...] | None = None
        self._adopted_extension: str | None = None

    # -- Configuration --

    def configure(
        self,
        pages: PageMapping,
        config: ResolverConfig | None = None,
        **options: Any,
    ) -> PageResolver:
        """Replace the mapping and configuration.

        Without *config*, options not given keep their current value,
        except ``explicit_extension`` which is reset unless supplied.

        Returns:
            The resolver itself, for ``configure(...).resolve(...)`` chains.

        Raises:
            ConfigurationError: On an unknown option, an empty delimiter or
                an invalid domain pattern.  Nothing is replaced in that case.
        """
        base = config if config is not None else replace(self._config, explicit_extension=None)
        try:
            new_config = replace(base, **options)
        except TypeError as exc:
            msg = f"Unknown resolver option: {exc}"
            raise ConfigurationError(msg) from exc
        check_delimiter(new_config.delimiter)
        pattern = compile_domain_pattern(new_config.domain_pattern)

        self._config = new_config
        self._pattern = pattern
        self._set_pages(pages)
        self.clear_cache()
        self._log_information()
        return self

    def reload_pages(self, pages: PageMapping) -> None:
        """Swap in a new mapping and re-run detection against it."""
        self._set_pages(pages)
        self.clear_cache()
        if self._config.debug_logging:
            logger.info("Pages reloaded and cache cleared")

    def clear_cache(self) -> None:
        """Drop derived data and re-detect domain mode and extensions."""
        self._domains = None
        self._extensions = None
        self._adopted_extension = None
        self._detect_domain_usage()
        self._detect_page_extensions()
        if self._config.debug_logging:
            logger.info("Cache cleared and re-initialized")

    def _set_pages(self, pages: PageMapping) -> None:
        self._pages = {key: as_loader(entry) for key, entry in pages.items()}

    # -- Detection --

    def _detect_domain_usage(self) -> None:
        cfg = self._config
        self._domain_mode = detect_domain_mode(
            self._pages, cfg.domain_folder_name, cfg.pages_folder_name
        )
        if cfg.debug_logging:
            logger.info("Domain mode enabled: %s", self._domain_mode)

    def _detect_page_extensions(self) -> None:
        cfg = self._config
        if not cfg.auto_detect_extension or cfg.explicit_extension:
            if cfg.debug_logging and cfg.explicit_extension:
                logger.info("Using configured page extension: %s", cfg.explicit_extension)
            return

        self._extensions = detect_extensions(self._pages)
        if len(self._extensions) == 1:
            self._adopted_extension = self._extensions[0]

        if cfg.debug_logging:
            logger.info("Auto-detected extensions: %s", ", ".join(self._extensions))
            if self._adopted_extension:
                logger.info("Using default extension: %s", self._adopted_extension)

    def _get_domains(self) -> frozenset[str]:
        debug = self._config.debug_logging
        if not self._domain_mode:
            if debug:
                logger.info("Domain mode disabled, no domains to extract.")
            return frozenset()

        if self._domains is not None:
            if debug:
                logger.info("Using cached domains...")
            return self._domains

        if debug:
            logger.warning("Extracting domains from pages...")
        self._domains = extract_domains(
            self._pages, self._config.domain_folder_name, self._config.pages_folder_name
        )
        if debug:
            logger.info("Found domains: %s", ", ".join(sorted(self._domains)))
        return self._domains

    # -- Path construction --

    def build_page_path(self, name: str) -> PagePath:
        """Build the candidate paths for *name* under the current configuration.

        Raises:
            DomainSyntaxError: If *name* uses the domain syntax with an
                empty domain or page part.
        """
        cfg = self._config
        page_path = build_page_path(
            name,
            pattern=self._pattern,
            delimiter=cfg.delimiter,
            default_domain=cfg.default_domain,
            domains=self._get_domains(),
            domain_mode=self._domain_mode,
            domain_folder=cfg.domain_folder_name,
            pages_folder=cfg.pages_folder_name,
            extension=self.effective_extension,
            extensions=self._extensions or (),
            auto_detect_extension=cfg.auto_detect_extension,
        )
        if cfg.debug_logging:
            logger.debug("Resolved primary path: %s for input: %s", page_path.primary, name)
            logger.debug("Possible paths: %s", ", ".join(page_path.candidates))
        return page_path

    def _find_key(self, name: str) -> str | None:
        page_path = self.build_page_path(name)
        for candidate in page_path.candidates:
            if candidate in self._pages:
                return candidate

        if self._config.debug_logging:
            logger.warning("Page not found: %s", name)
            logger.info("Tried paths: %s", ", ".join(page_path.candidates))
        return None

    # -- Resolution --

    def locate(self, names: str | Sequence[str]) -> str:
        """Return the mapping key ``resolve(names)`` would load, without loading it.

        Raises:
            DomainSyntaxError: On malformed domain syntax in any tried name.
            PageNotFoundError: If no name has a matching key.
        """
        page_names = _as_names(names)
        for name in page_names:
            key = self._find_key(name)
            if key is not None:
                return key
        raise PageNotFoundError(page_names)

    async def resolve(self, names: str | Sequence[str]) -> Any:
        """Load the page component for the first name that resolves.

        Args:
            names: A page name, or alternatives tried in order (for
                example a localized name followed by a generic one).

        Returns:
            Whatever the matching loader produces.

        Raises:
            DomainSyntaxError: Immediately, even if fallbacks remain.
            PageNotFoundError: Once every name has been tried.  Chained to
                the last loader failure, if any.
        """
        page_names = _as_names(names)
        last_error: Exception | None = None

        for name in page_names:
            try:
                key = self._find_key(name)
                if key is None:
                    continue
                cfg = self._config
                self._host.hydrate(cfg.host_element_id, cfg.host_data_attribute)
                return await self._pages[key].load()
            except DomainSyntaxError:
                raise
            except Exception as exc:
                last_error = exc
                if self._config.debug_logging:
                    logger.error("Error resolving page %r: %s", name, exc)

        raise PageNotFoundError(page_names) from last_error

    # -- Introspection --

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def pages(self) -> MappingProxyType[str, Loader]:
        return MappingProxyType(self._pages)

    @property
    def domain_mode(self) -> bool:
        return self._domain_mode

    @property
    def effective_extension(self) -> str | None:
        """The configured extension, else the single auto-detected one."""
        return self._config.explicit_extension or self._adopted_extension

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def detected_domains(self) -> list[str]:
        """Domains declared by the mapping, extracting them on first use."""
        return sorted(self._get_domains())

    def detected_extensions(self) -> list[str]:
        return list(self._extensions or ())

    def available_pages(self) -> list[str]:
        return list(self._pages)

    def _log_information(self) -> None:
        if not self._config.debug_logging:
            return
        domains = self.detected_domains()
        if domains:
            logger.info("Page resolver domains: %s", ", ".join(domains))
        logger.info("Page resolver extensions: %s", ", ".join(self.detected_extensions()))
        logger.info("Page resolver pages: %s", ", ".join(self.available_pages()))


# -- Process-wide default --

_default: PageResolver | None = None
_default_lock = threading.Lock()


def get_resolver() -> PageResolver:
    """Return the process-wide resolver, creating it on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = PageResolver()
        return _default


def reset_resolver() -> None:
    """Forget the process-wide resolver so the next ``get_resolver()`` starts fresh."""
    global _default
    with _default_lock:
        _default = None


async def resolve_page_component(
    names: str | Sequence[str],
    pages: PageMapping,
    **options: Any,
) -> Any:
    """Configure the process-wide resolver and resolve *names* in one call."""
    return await get_resolver().configure(pages, **options).resolve(names)
