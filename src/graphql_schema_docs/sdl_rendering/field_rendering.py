"""Field, argument, input value and enum value rendering shared by the construct renderers."""

from __future__ import annotations

from collections.abc import Sequence

from graphql_schema_docs.schema_model.schema_models import (
    EnumValue,
    Field,
    InputValue,
    TypeRef,
)

from .description_formatter import WrappedDescription
from .render_context import RenderContext
from .sdl_lines import SdlLine

NOT_DOCUMENTED = "[Not documented]"
ARGUMENTS_HEADING = "Arguments"
DEPRECATED_KEYWORD = "@deprecated"


def description_lines(ctx: RenderContext, description: str | None) -> tuple[SdlLine, ...]:
    """Comment lines for a wrapped description; none when the description is absent."""
    return tuple(
        SdlLine(ctx.markup.comment(line)) for line in WrappedDescription(description, ctx.width)
    )


def argument_description_lines(ctx: RenderContext, arg: InputValue) -> tuple[SdlLine, ...]:
    description = NOT_DOCUMENTED if arg.description is None else arg.description
    return description_lines(ctx, f"{arg.name}: {description}")


def arguments_description_lines(
    ctx: RenderContext, args: Sequence[InputValue]
) -> tuple[SdlLine, ...]:
    """The "Arguments" comment block; empty when there are no arguments."""
    if not args:
        return ()
    lines = [SdlLine(ctx.markup.comment(ARGUMENTS_HEADING))]
    for arg in args:
        lines.extend(argument_description_lines(ctx, arg))
    return tuple(lines)


def type_reference(ctx: RenderContext, reference: TypeRef) -> str:
    """Render the wrapped signature, linking only the named type inside it."""
    ctx.schema.resolve(reference)
    name = reference.named_type
    signature = str(reference)
    start = signature.index(name)
    prefix, suffix = signature[:start], signature[start + len(name) :]
    return prefix + ctx.markup.type_reference(name, ctx.link_resolver(reference)) + suffix


def arguments(ctx: RenderContext, args: Sequence[InputValue]) -> str:
    """Inline ``(name: Type, ...)`` list; empty string for no arguments."""
    if not args:
        return ""
    return "(" + ", ".join(input_value_declaration(ctx, arg) for arg in args) + ")"


def deprecation_marker(ctx: RenderContext, item: Field | EnumValue) -> str:
    if not item.is_deprecated:
        return ""
    keyword = ctx.markup.keyword(DEPRECATED_KEYWORD)
    if not item.deprecation_reason:
        return keyword
    quoted_reason = f'"{item.deprecation_reason}"'
    return f"{keyword}(reason: {ctx.markup.value(quoted_reason)})"


def input_value_declaration(ctx: RenderContext, value: InputValue) -> str:
    return f"{ctx.markup.property(value.name)}: {type_reference(ctx, value.type)}"


def field_lines(ctx: RenderContext, field: Field) -> tuple[SdlLine, ...]:
    """Description, argument descriptions and declaration of one field."""
    own_description = description_lines(ctx, field.description)
    args_description = arguments_description_lines(ctx, field.args)
    separator = (SdlLine(ctx.markup.comment("")),) if own_description and args_description else ()

    declaration = (
        f"{ctx.markup.property(field.name)}{arguments(ctx, field.args)}: "
        f"{type_reference(ctx, field.type)}"
    )
    return (
        own_description
        + separator
        + args_description
        + (SdlLine(_with_marker(declaration, deprecation_marker(ctx, field))),)
    )


def input_value_lines(ctx: RenderContext, value: InputValue) -> tuple[SdlLine, ...]:
    return description_lines(ctx, value.description) + (
        SdlLine(input_value_declaration(ctx, value)),
    )


def enum_value_lines(ctx: RenderContext, value: EnumValue) -> tuple[SdlLine, ...]:
    declaration = ctx.markup.property(value.name)
    return description_lines(ctx, value.description) + (
        SdlLine(_with_marker(declaration, deprecation_marker(ctx, value))),
    )


def _with_marker(declaration: str, marker: str) -> str:
    return f"{declaration} {marker}" if marker else declaration
