"""GraphQL type-system entities."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from enum import Enum


class SchemaPreconditionError(Exception):
    """Raised when the schema model breaks an invariant the renderers rely on."""


class TypeKind(str, Enum):
    """Kind tag of a named schema type."""

    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"


@dataclass(frozen=True)
class NamedTypeRef:
    """Reference to a named type without modifiers."""

    name: str

    @property
    def named_type(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ListTypeRef:
    """List modifier around another type reference."""

    of_type: TypeRef

    @property
    def named_type(self) -> str:
        return self.of_type.named_type

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@dataclass(frozen=True)
class NonNullTypeRef:
    """Non-null modifier around another type reference."""

    of_type: TypeRef

    @property
    def named_type(self) -> str:
        return self.of_type.named_type

    def __str__(self) -> str:
        return f"{self.of_type}!"


TypeRef = NamedTypeRef | ListTypeRef | NonNullTypeRef


@dataclass(frozen=True)
class InputValue:
    """Argument or input-object field."""

    name: str
    type: TypeRef
    description: str | None = None


@dataclass(frozen=True)
class Field:
    """Output field of an object or interface type."""

    name: str
    type: TypeRef
    description: str | None = None
    args: tuple[InputValue, ...] = ()
    is_deprecated: bool = False
    deprecation_reason: str | None = None


@dataclass(frozen=True)
class EnumValue:
    """One value of an enum type."""

    name: str
    description: str | None = None
    is_deprecated: bool = False
    deprecation_reason: str | None = None


@dataclass(frozen=True)
class Directive:
    """Directive definition with its allowed locations."""

    name: str
    description: str | None = None
    args: tuple[InputValue, ...] = ()
    locations: tuple[str, ...] = ()


@dataclass(frozen=True)
class SchemaType:  # pylint: disable=too-many-instance-attributes
    """Named type; kind-specific members are None when the source omitted them."""

    name: str
    kind: TypeKind
    description: str | None = None
    fields: tuple[Field, ...] | None = None
    interfaces: tuple[NamedTypeRef, ...] | None = None
    possible_types: tuple[NamedTypeRef, ...] | None = None
    enum_values: tuple[EnumValue, ...] | None = None
    input_fields: tuple[InputValue, ...] | None = None

    @property
    def is_introspection_type(self) -> bool:
        return self.name.startswith("__")


@dataclass(frozen=True)
class Schema:
    """Root of the type system: root operation types, named types and directives."""

    types: tuple[SchemaType, ...]
    directives: tuple[Directive, ...] = ()
    query_type: str | None = None
    mutation_type: str | None = None
    subscription_type: str | None = None

    def find_type(self, name: str) -> SchemaType | None:
        return self._types_by_name.get(name)

    def find_directive(self, name: str) -> Directive | None:
        return self._directives_by_name.get(name)

    @cached_property
    def _types_by_name(self) -> dict[str, SchemaType]:
        index: dict[str, SchemaType] = {}
        for schema_type in self.types:
            index.setdefault(schema_type.name, schema_type)
        return index

    @cached_property
    def _directives_by_name(self) -> dict[str, Directive]:
        index: dict[str, Directive] = {}
        for directive in self.directives:
            index.setdefault(directive.name, directive)
        return index

    def resolve(self, reference: TypeRef | str) -> SchemaType:
        """Return the named type behind a reference, unwrapping list and non-null modifiers.

        Raises:
          SchemaPreconditionError: If no type with that name exists in the schema.
        """
        name = reference if isinstance(reference, str) else reference.named_type
        schema_type = self.find_type(name)
        if schema_type is None:
            raise SchemaPreconditionError(f"Type reference '{name}' does not resolve to a type.")
        return schema_type
