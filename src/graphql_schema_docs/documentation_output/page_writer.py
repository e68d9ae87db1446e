"""Documentation page writer service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from graphql_schema_docs.sdl_rendering.document_sections import (
    DocumentSection,
    build_document_sections,
)
from graphql_schema_docs.sdl_rendering.link_resolvers import page_name
from graphql_schema_docs.sdl_rendering.render_context import RenderContext

logger = logging.getLogger(__name__)

INDEX_PAGE_NAME = "index"
PLAIN_PAGE_SUFFIX = ".graphql"


class DocumentationOutputError(Exception):
    """Raised when documentation pages cannot be written."""


@dataclass(frozen=True)
class WrittenPage:
    """One page written to the output directory."""

    target_name: str | None
    path: Path


@dataclass(frozen=True)
class DocumentationOutcome:
    """Output contract of one documentation build."""

    output_dir: Path
    pages: tuple[WrittenPage, ...]


def write_documentation(
    ctx: RenderContext,
    output_dir: Path | str,
    *,
    page_suffix: str = PLAIN_PAGE_SUFFIX,
    include_introspection_types: bool = False,
) -> DocumentationOutcome:
    """Write the index page, one page per directive and one per type, in schema order.

    Page file names are the lowercased construct names plus ``page_suffix``,
    matching the locators produced by ``PageLinkResolver``. Constructs whose
    names differ only in case would share a page, so they are rejected before
    anything is written.
    """
    destination = Path(output_dir)
    targets: list[tuple[str | None, str]] = [(None, INDEX_PAGE_NAME)]
    targets.extend((directive.name, page_name(directive.name)) for directive in ctx.schema.directives)
    targets.extend(
        (schema_type.name, page_name(schema_type.name))
        for schema_type in ctx.schema.types
        if include_introspection_types or not schema_type.is_introspection_type
    )
    _reject_colliding_pages(targets)

    try:
        destination.mkdir(parents=True, exist_ok=True)
        pages = tuple(
            _write_page(ctx, destination / f"{file_stem}{page_suffix}", target_name)
            for target_name, file_stem in targets
        )
    except OSError as exc:
        raise DocumentationOutputError(f"Failed to write documentation pages: {exc}") from exc

    logger.info("wrote %d documentation pages to %s", len(pages), destination)
    return DocumentationOutcome(output_dir=destination.resolve(), pages=pages)


def _reject_colliding_pages(targets: list[tuple[str | None, str]]) -> None:
    owners: dict[str, str] = {}
    for target_name, file_stem in targets:
        label = "schema index" if target_name is None else f"'{target_name}'"
        if file_stem in owners:
            raise DocumentationOutputError(
                f"Page name '{file_stem}' is shared by {owners[file_stem]} and {label}."
            )
        owners[file_stem] = label


def _write_page(ctx: RenderContext, path: Path, target_name: str | None) -> WrittenPage:
    sections = build_document_sections(ctx, target_name)
    path.write_text(_page_text(sections), encoding="utf-8")
    logger.debug("wrote page %s", path)
    return WrittenPage(target_name=target_name, path=path.resolve())


def _page_text(sections: tuple[DocumentSection, ...]) -> str:
    return "".join(section.content for section in sections)
