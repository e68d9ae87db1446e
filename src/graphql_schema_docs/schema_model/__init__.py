"""Schema model exports."""

from .schema_loading import (
    SchemaLoadError,
    load_schema_file,
    schema_from_introspection,
    schema_from_sdl,
)
from .schema_models import (
    Directive,
    EnumValue,
    Field,
    InputValue,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    Schema,
    SchemaPreconditionError,
    SchemaType,
    TypeKind,
    TypeRef,
)

__all__ = [
    "Directive",
    "EnumValue",
    "Field",
    "InputValue",
    "ListTypeRef",
    "NamedTypeRef",
    "NonNullTypeRef",
    "Schema",
    "SchemaPreconditionError",
    "SchemaType",
    "TypeKind",
    "TypeRef",
    "SchemaLoadError",
    "load_schema_file",
    "schema_from_introspection",
    "schema_from_sdl",
]
