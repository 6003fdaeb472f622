"""Page name resolution over a pre-built page mapping.

The host supplies every known page up front, keyed by path; the
resolver maps logical names onto those keys and loads the match.

Usage::

    pages = {
        "../pages/home.tsx": load_home,
        "../pages/blog/post.tsx": load_post,
    }
    resolver = PageResolver().configure(pages)
    post = await resolver.resolve("blog.post")

Conventions:

    ../pages/<segments>.<ext>                           # flat layout
    ../domains/<domain>/pages/<segments>.<ext>          # domain layout

    "blog.post"            -> ../pages/blog/post.tsx
    "[shop]::cart.summary" -> ../domains/shop/pages/cart/summary.tsx
"""

from pagemap.pages.host import Browser, Headless, HostEnvironment
from pagemap.pages.paths import build_page_path
from pagemap.pages.resolver import (
    PageResolver,
    get_resolver,
    reset_resolver,
    resolve_page_component,
)
from pagemap.pages.types import Eager, Lazy, Loader, PagePath, as_loader

__all__ = [
    "Browser",
    "Eager",
    "Headless",
    "HostEnvironment",
    "Lazy",
    "Loader",
    "PagePath",
    "PageResolver",
    "as_loader",
    "build_page_path",
    "get_resolver",
    "reset_resolver",
    "resolve_page_component",
]
