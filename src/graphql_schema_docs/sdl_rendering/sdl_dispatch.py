"""Render entry points: pick the construct behind a name and assemble its SDL text."""

from __future__ import annotations

import logging
from typing import assert_never

from graphql_schema_docs.schema_model.schema_models import SchemaType, TypeKind

from .construct_renderers import (
    render_directive,
    render_enum,
    render_input_object,
    render_interface,
    render_object,
    render_root_schema,
    render_scalar,
    render_union,
)
from .field_rendering import description_lines
from .render_context import RenderContext
from .sdl_lines import BLANK_LINE, SdlLine, assemble

logger = logging.getLogger(__name__)

DIRECTIVE_HEADING = "DIRECTIVE"


class UnknownTargetError(LookupError):
    """Raised when a requested name is neither a directive nor a type of the schema."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown schema target: {name}")
        self.name = name


def render(ctx: RenderContext, target_name: str | None = None) -> str:
    """Render SDL text for a directive or type, or the root schema when no name is given.

    Directives are looked up before types.

    Raises:
      UnknownTargetError: If ``target_name`` matches neither a directive nor a type.
      SchemaPreconditionError: If the schema model is missing data the construct needs.
    """
    return assemble(render_lines(ctx, target_name), ctx.markup)


def render_lines(ctx: RenderContext, target_name: str | None = None) -> tuple[SdlLine, ...]:
    """Structured lines behind ``render``."""
    if target_name is None:
        logger.debug("rendering root schema")
        return render_root_schema(ctx)

    directive = ctx.schema.find_directive(target_name)
    if directive is not None:
        logger.debug("rendering directive @%s", target_name)
        return render_directive(ctx, directive)

    schema_type = ctx.schema.find_type(target_name)
    if schema_type is None:
        raise UnknownTargetError(target_name)
    logger.debug("rendering %s type %s", schema_type.kind.value, target_name)
    return render_type(ctx, schema_type)


def render_type(ctx: RenderContext, schema_type: SchemaType) -> tuple[SdlLine, ...]:
    kind = schema_type.kind
    match kind:
        case TypeKind.SCALAR:
            return render_scalar(ctx, schema_type)
        case TypeKind.OBJECT:
            return render_object(ctx, schema_type)
        case TypeKind.INTERFACE:
            return render_interface(ctx, schema_type)
        case TypeKind.UNION:
            return render_union(ctx, schema_type)
        case TypeKind.ENUM:
            return render_enum(ctx, schema_type)
        case TypeKind.INPUT_OBJECT:
            return render_input_object(ctx, schema_type)
        case _:
            assert_never(kind)


def render_full_schema(ctx: RenderContext, *, include_introspection_types: bool = False) -> str:
    """Whole-schema listing: root schema, every directive, then every type in declared order.

    Each directive and type is introduced by a comment naming its kind,
    followed by its own description.
    """
    blocks: list[tuple[SdlLine, ...]] = [render_root_schema(ctx)]
    for directive in ctx.schema.directives:
        blocks.append(
            (SdlLine(ctx.markup.comment(DIRECTIVE_HEADING)),)
            + description_lines(ctx, directive.description)
            + render_directive(ctx, directive)
        )
    for schema_type in ctx.schema.types:
        if schema_type.is_introspection_type and not include_introspection_types:
            continue
        blocks.append(
            (SdlLine(ctx.markup.comment(schema_type.kind.value)),)
            + description_lines(ctx, schema_type.description)
            + render_type(ctx, schema_type)
        )

    lines: list[SdlLine] = []
    for index, block in enumerate(blocks):
        if index:
            lines.append(BLANK_LINE)
        lines.extend(block)
    return assemble(lines, ctx.markup)
