"""Immutable context threaded through every renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from graphql_schema_docs.schema_model.schema_models import Schema

from .description_formatter import DEFAULT_DESCRIPTION_WIDTH
from .link_resolvers import LinkResolver, no_links
from .markup import Markup, PlainTextMarkup


@dataclass(frozen=True)
class RenderContext:
    """Schema, presentation markup, link resolver and wrap width for one render pass."""

    schema: Schema
    markup: Markup = field(default_factory=PlainTextMarkup)
    link_resolver: LinkResolver = no_links
    width: int = DEFAULT_DESCRIPTION_WIDTH
