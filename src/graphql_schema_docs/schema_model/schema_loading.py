"""Schema loading service: introspection results and SDL documents into the schema model."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from graphql import GraphQLError, build_schema, introspection_from_schema

from .schema_models import (
    Directive,
    EnumValue,
    Field,
    InputValue,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    Schema,
    SchemaType,
    TypeKind,
    TypeRef,
)

logger = logging.getLogger(__name__)

SDL_SUFFIXES = (".graphql", ".graphqls", ".gql")


class SchemaLoadError(Exception):
    """Raised when a schema source cannot be turned into the schema model."""


def load_schema_file(path: Path | str) -> Schema:
    """Load an introspection JSON file or an SDL file, chosen by file suffix."""
    schema_path = Path(path)
    if not schema_path.exists():
        raise SchemaLoadError(f"Schema file not found: {schema_path}")
    try:
        text = schema_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaLoadError(f"Failed to read schema file {schema_path}: {exc}") from exc

    logger.debug("loading schema from %s", schema_path)
    if schema_path.suffix.lower() in SDL_SUFFIXES:
        return schema_from_sdl(text)
    if schema_path.suffix.lower() == ".json":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(f"Invalid introspection JSON in {schema_path}: {exc}") from exc
        return schema_from_introspection(payload)
    raise SchemaLoadError(f"Unsupported schema file type: {schema_path.suffix or schema_path.name}")


def schema_from_sdl(text: str) -> Schema:
    """Parse SDL text with graphql-core and build the schema model from its introspection."""
    try:
        graphql_schema = build_schema(text)
    except (GraphQLError, TypeError) as exc:
        raise SchemaLoadError(f"Invalid SDL document: {exc}") from exc
    return schema_from_introspection(introspection_from_schema(graphql_schema))


def schema_from_introspection(payload: Any) -> Schema:
    """Build the schema model from a standard introspection result.

    Accepts the bare ``{"__schema": ...}`` object as well as a full response
    wrapped in ``{"data": ...}``. Declared order of types, fields, arguments,
    enum values and directives is preserved.
    """
    root = _require_mapping(payload, "introspection result")
    if "data" in root and "__schema" not in root:
        root = _require_mapping(root["data"], "data")
    raw_schema = _require_mapping(root.get("__schema"), "__schema")

    types = tuple(
        _parse_type(raw_type) for raw_type in _require_sequence(raw_schema.get("types"), "types")
    )
    directives = tuple(
        _parse_directive(raw_directive)
        for raw_directive in _optional_sequence(raw_schema.get("directives"), "directives")
    )
    _reject_duplicates([schema_type.name for schema_type in types], "type")
    _reject_duplicates([directive.name for directive in directives], "directive")

    schema = Schema(
        types=types,
        directives=directives,
        query_type=_root_type_name(raw_schema.get("queryType"), "queryType"),
        mutation_type=_root_type_name(raw_schema.get("mutationType"), "mutationType"),
        subscription_type=_root_type_name(raw_schema.get("subscriptionType"), "subscriptionType"),
    )
    logger.debug("loaded schema with %d types and %d directives", len(types), len(directives))
    return schema


def _parse_type(value: Any) -> SchemaType:
    raw = _require_mapping(value, "type")
    name = _require_name(raw, "type")
    kind_value = raw.get("kind")
    try:
        kind = TypeKind(kind_value)
    except ValueError as exc:
        raise SchemaLoadError(f"Type '{name}' has unsupported kind: {kind_value}") from exc

    fields = raw.get("fields")
    interfaces = raw.get("interfaces")
    possible_types = raw.get("possibleTypes")
    enum_values = raw.get("enumValues")
    input_fields = raw.get("inputFields")
    return SchemaType(
        name=name,
        kind=kind,
        description=_optional_string(raw.get("description")),
        fields=None if fields is None else tuple(_parse_field(item) for item in fields),
        interfaces=(
            None
            if interfaces is None
            else tuple(NamedTypeRef(_require_name(item, "interface")) for item in interfaces)
        ),
        possible_types=(
            None
            if possible_types is None
            else tuple(NamedTypeRef(_require_name(item, "possible type")) for item in possible_types)
        ),
        enum_values=(
            None if enum_values is None else tuple(_parse_enum_value(item) for item in enum_values)
        ),
        input_fields=(
            None if input_fields is None else tuple(_parse_input_value(item) for item in input_fields)
        ),
    )


def _parse_field(value: Any) -> Field:
    raw = _require_mapping(value, "field")
    return Field(
        name=_require_name(raw, "field"),
        type=_parse_type_ref(raw.get("type")),
        description=_optional_string(raw.get("description")),
        args=tuple(_parse_input_value(arg) for arg in _optional_sequence(raw.get("args"), "args")),
        is_deprecated=bool(raw.get("isDeprecated", False)),
        deprecation_reason=_optional_string(raw.get("deprecationReason")),
    )


def _parse_input_value(value: Any) -> InputValue:
    raw = _require_mapping(value, "input value")
    return InputValue(
        name=_require_name(raw, "input value"),
        type=_parse_type_ref(raw.get("type")),
        description=_optional_string(raw.get("description")),
    )


def _parse_enum_value(value: Any) -> EnumValue:
    raw = _require_mapping(value, "enum value")
    return EnumValue(
        name=_require_name(raw, "enum value"),
        description=_optional_string(raw.get("description")),
        is_deprecated=bool(raw.get("isDeprecated", False)),
        deprecation_reason=_optional_string(raw.get("deprecationReason")),
    )


def _parse_directive(value: Any) -> Directive:
    raw = _require_mapping(value, "directive")
    locations = _optional_sequence(raw.get("locations"), "locations")
    return Directive(
        name=_require_name(raw, "directive"),
        description=_optional_string(raw.get("description")),
        args=tuple(_parse_input_value(arg) for arg in _optional_sequence(raw.get("args"), "args")),
        locations=tuple(str(location) for location in locations),
    )


def _parse_type_ref(value: Any) -> TypeRef:
    raw = _require_mapping(value, "type reference")
    kind = raw.get("kind")
    if kind == "NON_NULL":
        return NonNullTypeRef(_parse_type_ref(raw.get("ofType")))
    if kind == "LIST":
        return ListTypeRef(_parse_type_ref(raw.get("ofType")))
    return NamedTypeRef(_require_name(raw, "type reference"))


def _root_type_name(value: Any, label: str) -> str | None:
    if value is None:
        return None
    return _require_name(_require_mapping(value, label), label)


def _reject_duplicates(names: Sequence[str], label: str) -> None:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise SchemaLoadError(f"Duplicate {label} name detected: {name}")
        seen.add(name)


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SchemaLoadError(f"Introspection {label} must be an object.")
    return value


def _require_sequence(value: Any, label: str) -> Sequence[Any]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise SchemaLoadError(f"Introspection {label} must be a list.")
    return value


def _optional_sequence(value: Any, label: str) -> Sequence[Any]:
    if value is None:
        return ()
    return _require_sequence(value, label)


def _require_name(raw: Mapping[str, Any], label: str) -> str:
    name = raw.get("name") if isinstance(raw, Mapping) else None
    if not isinstance(name, str) or not name:
        raise SchemaLoadError(f"Introspection {label} requires a name.")
    return name


def _optional_string(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
