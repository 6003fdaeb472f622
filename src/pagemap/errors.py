"""pagemap exception hierarchy.

Shared across the resolver, path construction, and the CLI so every
module raises and catches the same types.
"""


class PageMapError(Exception):
    """Base for all pagemap-specific errors."""


class ConfigurationError(PageMapError):
    """Raised when resolver configuration is invalid.

    Always raised from ``PageResolver.configure()`` before any state is
    replaced, so a failed configure leaves the previous setup intact.
    """


class DomainSyntaxError(PageMapError):
    """A page name matched the domain pattern without two non-empty parts.

    Signals malformed caller input.  ``resolve()`` never swallows it and
    never tries the remaining fallback names.
    """

    def __init__(self, name: str, delimiter: str = ".") -> None:
        self.name = name
        self.delimiter = delimiter
        super().__init__(
            f"Invalid domain syntax: {name!r}. "
            f"Expected format: domain{delimiter}page "
            "(both domain and page parts must be non-empty)"
        )


class PageNotFoundError(PageMapError, LookupError):
    """None of the requested page names matched an entry in the mapping."""

    def __init__(self, names: tuple[str, ...]) -> None:
        self.names = names
        super().__init__(f"Page not found: {', '.join(names)}")
