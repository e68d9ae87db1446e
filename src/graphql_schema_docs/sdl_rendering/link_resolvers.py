"""Cross-reference resolvers mapping type references to page locators."""

from __future__ import annotations

from collections.abc import Callable, Collection
from dataclasses import dataclass

from graphql_schema_docs.schema_model.schema_models import TypeRef

LinkResolver = Callable[[TypeRef], str | None]


def no_links(reference: TypeRef) -> str | None:
    """Resolver for outputs without hyperlinks."""
    return None


@dataclass(frozen=True)
class PageLinkResolver:
    """Link every documented named type to its own page.

    The page name is the lowercased type name plus ``suffix`` under
    ``base_url``. When ``documented`` is given, only those names get a link.
    """

    base_url: str = "./"
    suffix: str = ".doc.html"
    documented: Collection[str] | None = None

    def __call__(self, reference: TypeRef) -> str | None:
        name = reference.named_type
        if self.documented is not None and name not in self.documented:
            return None
        return f"{self.base_url}{page_name(name)}{self.suffix}"


def page_name(name: str) -> str:
    return name.lower()
