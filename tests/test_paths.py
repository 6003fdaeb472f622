"""Tests for pagemap.pages.paths — candidate path construction."""

import re
from typing import Any

import pytest

from pagemap.config import DEFAULT_DOMAIN_PATTERN
from pagemap.errors import DomainSyntaxError
from pagemap.pages.paths import build_page_path


def _build(name: str, **overrides: Any):
    params: dict[str, Any] = {
        "pattern": re.compile(DEFAULT_DOMAIN_PATTERN),
        "delimiter": ".",
        "default_domain": "main",
        "domains": frozenset(),
        "domain_mode": False,
        "domain_folder": "domains",
        "pages_folder": "pages",
        "extension": "tsx",
        "extensions": ("tsx",),
        "auto_detect_extension": True,
    }
    params.update(overrides)
    return build_page_path(name, **params)


class TestFlatLayout:
    def test_single_segment(self) -> None:
        path = _build("home")
        assert path.candidates == ("../pages/home.tsx",)
        assert path.primary == "../pages/home.tsx"
        assert path.domain == "main"

    def test_delimiter_becomes_folders(self) -> None:
        path = _build("blog.posts.show")
        assert path.primary == "../pages/blog/posts/show.tsx"

    def test_custom_delimiter(self) -> None:
        path = _build("blog/posts", delimiter="/")
        assert path.primary == "../pages/blog/posts.tsx"

    def test_custom_pages_folder(self) -> None:
        path = _build("home", pages_folder="views")
        assert path.primary == "../views/home.tsx"

    def test_domain_prefix_ignored_without_domain_mode(self) -> None:
        path = _build("[blog]::home")
        assert path.primary == "../pages/home.tsx"
        assert path.domain == "main"


class TestDomainLayout:
    def test_known_domain(self) -> None:
        path = _build("[blog]::home", domain_mode=True, domains=frozenset({"blog"}))
        assert path.primary == "../domains/blog/pages/home.tsx"
        assert path.domain == "blog"

    def test_unknown_domain_falls_back(self) -> None:
        path = _build("[shop]::home", domain_mode=True, domains=frozenset({"blog"}))
        assert path.primary == "../domains/main/pages/home.tsx"
        assert path.domain == "main"

    def test_plain_name_uses_default_domain(self) -> None:
        path = _build("cart.summary", domain_mode=True, default_domain="shop")
        assert path.primary == "../domains/shop/pages/cart/summary.tsx"

    @pytest.mark.parametrize("token", ["blog,shop", "*", "blog*"])
    def test_multi_and_wildcard_tokens_pass_through(self, token: str) -> None:
        path = _build(f"[{token}]::home", domain_mode=True, domains=frozenset({"blog"}))
        assert path.domain == token
        assert path.primary == f"../domains/{token}/pages/home.tsx"

    def test_custom_pattern(self) -> None:
        path = _build(
            "blog:posts.show",
            pattern=re.compile(r"^([^:]+):(.+)$"),
            domain_mode=True,
            domains=frozenset({"blog"}),
        )
        assert path.primary == "../domains/blog/pages/posts/show.tsx"

    def test_unanchored_pattern_matches_mid_name(self) -> None:
        path = _build(
            "x@blog/home",
            pattern=re.compile(r"@(\w+)/(.+)"),
            domain_mode=True,
            domains=frozenset({"blog"}),
        )
        assert path.domain == "blog"
        assert path.primary == "../domains/blog/pages/home.tsx"

    def test_default_pattern_stays_anchored(self) -> None:
        path = _build("x[blog]::home", domain_mode=True, domains=frozenset({"blog"}))
        assert path.domain == "main"
        assert path.primary == "../domains/main/pages/x[blog]::home.tsx"


class TestDomainSyntax:
    @pytest.mark.parametrize("name", ["[]::home", "[blog]::", "[]::"])
    def test_empty_parts_raise(self, name: str) -> None:
        with pytest.raises(DomainSyntaxError) as exc_info:
            _build(name, domain_mode=True, domains=frozenset({"blog"}))
        assert exc_info.value.name == name
        assert name in str(exc_info.value)
        assert "domain.page" in str(exc_info.value)

    def test_optional_group_not_participating(self) -> None:
        pattern = re.compile(r"^(?:([a-z]+)@)?(.*)!$")
        with pytest.raises(DomainSyntaxError):
            _build("home!", pattern=pattern)

    def test_message_uses_delimiter(self) -> None:
        with pytest.raises(DomainSyntaxError, match="domain/page"):
            _build("[]::home", delimiter="/")


class TestExtensions:
    def test_effective_extension_wins(self) -> None:
        path = _build("home", extension="jsx", extensions=("tsx", "vue"))
        assert path.candidates == ("../pages/home.jsx",)

    def test_detected_extensions_in_order(self) -> None:
        path = _build("home", extension=None, extensions=("vue", "tsx"))
        assert path.candidates == ("../pages/home.vue", "../pages/home.tsx")
        assert path.primary == "../pages/home.vue"

    def test_detected_extensions_ignored_when_disabled(self) -> None:
        path = _build("home", extension=None, extensions=("vue",), auto_detect_extension=False)
        assert path.candidates == (
            "../pages/home.tsx",
            "../pages/home.jsx",
            "../pages/home.vue",
            "../pages/home.svelte",
        )

    def test_fallback_when_nothing_detected(self) -> None:
        path = _build("home", extension=None, extensions=())
        assert [c.rsplit(".", 1)[1] for c in path.candidates] == ["tsx", "jsx", "vue", "svelte"]
