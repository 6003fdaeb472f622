"""pagemap — resolve logical page names against a pre-built page mapping.

Picks the right entry out of a build-time ``{path: loader}`` mapping for
names like ``"blog.post"`` or ``"[shop]::cart.summary"``, then loads it.

Basic usage::

    from pagemap import PageResolver

    resolver = PageResolver().configure(pages)
    page = await resolver.resolve(["home.fr", "home"])

Dev watcher::

    from pagemap.reload import PageWatcher
    watcher = PageWatcher(lambda: resolver.reload_pages(build_pages()))
    await watcher.watch("src")
"""

__version__ = "0.1.0"
__all__ = [
    "Browser",
    "ConfigurationError",
    "DomainSyntaxError",
    "Eager",
    "Headless",
    "Lazy",
    "PageMapError",
    "PageNotFoundError",
    "PagePath",
    "PageResolver",
    "ResolverConfig",
    "get_resolver",
    "reset_resolver",
    "resolve_page_component",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pagemap`` fast while providing a clean top-level API.
    """
    if name == "ResolverConfig":
        from pagemap.config import ResolverConfig

        return ResolverConfig

    if name in (
        "Browser",
        "Eager",
        "Headless",
        "Lazy",
        "PagePath",
        "PageResolver",
        "get_resolver",
        "reset_resolver",
        "resolve_page_component",
    ):
        from pagemap import pages as _pages

        return getattr(_pages, name)

    if name in ("ConfigurationError", "DomainSyntaxError", "PageMapError", "PageNotFoundError"):
        from pagemap import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
