"""One renderer per GraphQL construct, each returning the lines of a self-contained SDL block."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from graphql_schema_docs.schema_model.schema_models import (
    Directive,
    NamedTypeRef,
    SchemaPreconditionError,
    SchemaType,
)

from .field_rendering import (
    arguments,
    description_lines,
    enum_value_lines,
    field_lines,
    input_value_lines,
    type_reference,
)
from .render_context import RenderContext
from .sdl_lines import BLANK_LINE, SdlLine, indented

_Member = TypeVar("_Member")


def render_scalar(ctx: RenderContext, schema_type: SchemaType) -> tuple[SdlLine, ...]:
    return (SdlLine(f"{ctx.markup.keyword('scalar')} {ctx.markup.identifier(schema_type.name)}"),)


def render_object(ctx: RenderContext, schema_type: SchemaType) -> tuple[SdlLine, ...]:
    interfaces = ", ".join(
        type_reference(ctx, interface)
        for interface in _require(schema_type.interfaces, schema_type, "interfaces")
    )
    implements = f" {ctx.markup.keyword('implements')} {interfaces}" if interfaces else ""
    return _block(ctx, "type", schema_type, implements, _fields_body(ctx, schema_type))


def render_interface(ctx: RenderContext, schema_type: SchemaType) -> tuple[SdlLine, ...]:
    return _block(ctx, "interface", schema_type, "", _fields_body(ctx, schema_type))


def render_union(ctx: RenderContext, schema_type: SchemaType) -> tuple[SdlLine, ...]:
    members = " | ".join(
        type_reference(ctx, member)
        for member in _require(schema_type.possible_types, schema_type, "possible types")
    )
    header = f"{ctx.markup.keyword('union')} {ctx.markup.identifier(schema_type.name)}"
    return (SdlLine(f"{header} = {members}"),)


def render_enum(ctx: RenderContext, schema_type: SchemaType) -> tuple[SdlLine, ...]:
    body: list[SdlLine] = []
    for value in _require(schema_type.enum_values, schema_type, "enum values"):
        body.append(BLANK_LINE)
        body.extend(enum_value_lines(ctx, value))
    return _block(ctx, "enum", schema_type, "", tuple(body))


def render_input_object(ctx: RenderContext, schema_type: SchemaType) -> tuple[SdlLine, ...]:
    body: list[SdlLine] = []
    for value in _require(schema_type.input_fields, schema_type, "input fields"):
        body.extend(input_value_lines(ctx, value))
    return _block(ctx, "input", schema_type, "", tuple(body))


def render_directive(ctx: RenderContext, directive: Directive) -> tuple[SdlLine, ...]:
    locations = " | ".join(ctx.markup.keyword(location) for location in directive.locations)
    return (
        SdlLine(
            f"{ctx.markup.keyword('directive')} {ctx.markup.keyword('@' + directive.name)}"
            f"{arguments(ctx, directive.args)} {ctx.markup.keyword('on')} {locations}"
        ),
    )


def render_root_schema(ctx: RenderContext) -> tuple[SdlLine, ...]:
    """The ``schema { ... }`` block with one entry per defined root operation type.

    The subscription entry takes its locator from the mutation type.
    """
    schema = ctx.schema
    roots = (
        ("query", schema.query_type, schema.query_type),
        ("mutation", schema.mutation_type, schema.mutation_type),
        ("subscription", schema.subscription_type, schema.mutation_type),
    )
    body: list[SdlLine] = []
    for operation, type_name, link_type_name in roots:
        if type_name is None:
            continue
        root_type = schema.resolve(type_name)
        url = None if link_type_name is None else ctx.link_resolver(NamedTypeRef(link_type_name))
        body.append(BLANK_LINE)
        body.extend(description_lines(ctx, root_type.description))
        body.append(
            SdlLine(f"{ctx.markup.property(operation)}: {ctx.markup.type_reference(type_name, url)}")
        )
    return (
        SdlLine(f"{ctx.markup.keyword('schema')} {{"),
        *indented(body),
        SdlLine("}"),
    )


def _fields_body(ctx: RenderContext, schema_type: SchemaType) -> tuple[SdlLine, ...]:
    """A blank line opens the body even when there are no fields; fields are separated by one."""
    body: list[SdlLine] = [BLANK_LINE]
    for index, field in enumerate(_require(schema_type.fields, schema_type, "fields")):
        if index:
            body.append(BLANK_LINE)
        body.extend(field_lines(ctx, field))
    return tuple(body)


def _block(
    ctx: RenderContext,
    keyword: str,
    schema_type: SchemaType,
    header_suffix: str,
    body: tuple[SdlLine, ...],
) -> tuple[SdlLine, ...]:
    header = f"{ctx.markup.keyword(keyword)} {ctx.markup.identifier(schema_type.name)}"
    return (
        SdlLine(f"{header}{header_suffix} {{"),
        *indented(body),
        SdlLine("}"),
    )


def _require(
    members: Sequence[_Member] | None, schema_type: SchemaType, label: str
) -> Sequence[_Member]:
    if members is None:
        raise SchemaPreconditionError(
            f"{schema_type.kind.value} type '{schema_type.name}' has no {label}."
        )
    return members
