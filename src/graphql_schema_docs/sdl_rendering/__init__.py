"""SDL rendering exports."""

from .description_formatter import DEFAULT_DESCRIPTION_WIDTH, WrappedDescription
from .document_sections import SCHEMA_SECTION_TITLE, DocumentSection, build_document_sections
from .link_resolvers import LinkResolver, PageLinkResolver, no_links, page_name
from .markup import HtmlMarkup, Markup, PlainTextMarkup, markup_for
from .render_context import RenderContext
from .sdl_dispatch import UnknownTargetError, render, render_full_schema, render_lines
from .sdl_lines import SdlLine, assemble

__all__ = [
    "DEFAULT_DESCRIPTION_WIDTH",
    "WrappedDescription",
    "SCHEMA_SECTION_TITLE",
    "DocumentSection",
    "build_document_sections",
    "LinkResolver",
    "PageLinkResolver",
    "no_links",
    "page_name",
    "HtmlMarkup",
    "Markup",
    "PlainTextMarkup",
    "markup_for",
    "RenderContext",
    "UnknownTargetError",
    "render",
    "render_full_schema",
    "render_lines",
    "SdlLine",
    "assemble",
]
