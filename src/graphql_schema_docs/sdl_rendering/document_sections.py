"""Documentation page sections built from rendered SDL."""

from __future__ import annotations

from dataclasses import dataclass

from .render_context import RenderContext
from .sdl_dispatch import render

SCHEMA_SECTION_TITLE = "GraphQL Schema definition"


@dataclass(frozen=True)
class DocumentSection:
    """Titled block of page content."""

    title: str
    content: str


def build_document_sections(
    ctx: RenderContext, target_name: str | None = None
) -> tuple[DocumentSection, ...]:
    """Return the schema-definition section for a page, or nothing when there is no code."""
    code = render(ctx, target_name)
    if not code:
        return ()
    return (DocumentSection(title=SCHEMA_SECTION_TITLE, content=ctx.markup.code_block(code)),)
