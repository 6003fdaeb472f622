"""Tests for pagemap.errors — exception hierarchy and error messages."""

import pytest

from pagemap.errors import (
    ConfigurationError,
    DomainSyntaxError,
    PageMapError,
    PageNotFoundError,
)


class TestHierarchy:
    def test_configuration_error_is_pagemap_error(self) -> None:
        assert issubclass(ConfigurationError, PageMapError)

    def test_domain_syntax_error_is_pagemap_error(self) -> None:
        assert issubclass(DomainSyntaxError, PageMapError)

    def test_page_not_found_is_pagemap_error(self) -> None:
        assert issubclass(PageNotFoundError, PageMapError)

    def test_page_not_found_is_lookup_error(self) -> None:
        assert issubclass(PageNotFoundError, LookupError)


class TestDomainSyntaxError:
    def test_attributes(self) -> None:
        err = DomainSyntaxError("[]::home", "/")
        assert err.name == "[]::home"
        assert err.delimiter == "/"

    def test_message_names_input_and_shape(self) -> None:
        err = DomainSyntaxError("[blog]::")
        assert "'[blog]::'" in str(err)
        assert "domain.page" in str(err)

    def test_catchable_as_pagemap_error(self) -> None:
        with pytest.raises(PageMapError):
            raise DomainSyntaxError("[]::home")


class TestPageNotFoundError:
    def test_single_name(self) -> None:
        err = PageNotFoundError(("missing",))
        assert str(err) == "Page not found: missing"
        assert err.names == ("missing",)

    def test_names_joined(self) -> None:
        err = PageNotFoundError(("home.fr", "home"))
        assert str(err) == "Page not found: home.fr, home"


class TestErrorExports:
    """Error types are importable from the top-level pagemap package."""

    def test_import_pagemap_error(self) -> None:
        import pagemap

        assert pagemap.PageMapError is PageMapError

    def test_import_configuration_error(self) -> None:
        import pagemap

        assert pagemap.ConfigurationError is ConfigurationError

    def test_import_domain_syntax_error(self) -> None:
        import pagemap

        assert pagemap.DomainSyntaxError is DomainSyntaxError

    def test_import_page_not_found(self) -> None:
        import pagemap

        assert pagemap.PageNotFoundError is PageNotFoundError
