"""Schema loading service tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from graphql_schema_docs.schema_model.schema_loading import (
    SchemaLoadError,
    load_schema_file,
    schema_from_introspection,
    schema_from_sdl,
)
from graphql_schema_docs.schema_model.schema_models import (
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    SchemaPreconditionError,
    TypeKind,
)


def _named(kind: str, name: str) -> dict[str, Any]:
    return {"kind": kind, "name": name, "ofType": None}


def _introspection() -> dict[str, Any]:
    return {
        "__schema": {
            "queryType": {"name": "Query"},
            "mutationType": None,
            "subscriptionType": None,
            "types": [
                {
                    "kind": "OBJECT",
                    "name": "Query",
                    "description": "Root query.",
                    "fields": [
                        {
                            "name": "dogs",
                            "description": None,
                            "args": [
                                {
                                    "name": "first",
                                    "description": "Page size.",
                                    "type": _named("SCALAR", "Int"),
                                    "defaultValue": "10",
                                }
                            ],
                            "type": {
                                "kind": "NON_NULL",
                                "name": None,
                                "ofType": {
                                    "kind": "LIST",
                                    "name": None,
                                    "ofType": _named("OBJECT", "Dog"),
                                },
                            },
                            "isDeprecated": False,
                            "deprecationReason": None,
                        }
                    ],
                    "inputFields": None,
                    "interfaces": [],
                    "enumValues": None,
                    "possibleTypes": None,
                },
                {
                    "kind": "OBJECT",
                    "name": "Dog",
                    "description": None,
                    "fields": [],
                    "inputFields": None,
                    "interfaces": [_named("INTERFACE", "Pet")],
                    "enumValues": None,
                    "possibleTypes": None,
                },
                {
                    "kind": "INTERFACE",
                    "name": "Pet",
                    "fields": [],
                    "possibleTypes": [_named("OBJECT", "Dog")],
                },
                {
                    "kind": "ENUM",
                    "name": "Status",
                    "enumValues": [
                        {"name": "ACTIVE", "isDeprecated": False, "deprecationReason": None},
                        {
                            "name": "OLD",
                            "description": "Legacy.",
                            "isDeprecated": True,
                            "deprecationReason": "use ACTIVE",
                        },
                    ],
                },
                {"kind": "SCALAR", "name": "Int", "description": None},
            ],
            "directives": [
                {
                    "name": "cached",
                    "description": None,
                    "locations": ["FIELD_DEFINITION", "OBJECT"],
                    "args": [],
                }
            ],
        }
    }


def test_builds_model_from_introspection_preserving_order() -> None:
    schema = schema_from_introspection(_introspection())

    assert [schema_type.name for schema_type in schema.types] == [
        "Query",
        "Dog",
        "Pet",
        "Status",
        "Int",
    ]
    assert schema.query_type == "Query"
    assert schema.mutation_type is None

    query = schema.resolve("Query")
    assert query.kind is TypeKind.OBJECT
    dogs = query.fields[0] if query.fields else None
    assert dogs is not None
    assert dogs.type == NonNullTypeRef(ListTypeRef(NamedTypeRef("Dog")))
    assert str(dogs.type) == "[Dog]!"
    assert dogs.args[0].description == "Page size."

    dog = schema.resolve(NamedTypeRef("Dog"))
    assert dog.interfaces == (NamedTypeRef("Pet"),)

    status = schema.resolve("Status")
    assert status.enum_values is not None
    assert status.enum_values[1].is_deprecated is True
    assert status.enum_values[1].deprecation_reason == "use ACTIVE"
    assert status.fields is None

    directive = schema.find_directive("cached")
    assert directive is not None
    assert directive.locations == ("FIELD_DEFINITION", "OBJECT")


def test_accepts_response_wrapped_in_data() -> None:
    schema = schema_from_introspection({"data": _introspection()})

    assert schema.find_type("Dog") is not None


def test_rejects_duplicate_type_names() -> None:
    payload = _introspection()
    payload["__schema"]["types"].append({"kind": "SCALAR", "name": "Int"})

    with pytest.raises(SchemaLoadError, match="Duplicate type name detected: Int"):
        schema_from_introspection(payload)


def test_rejects_unsupported_type_kind() -> None:
    payload = _introspection()
    payload["__schema"]["types"].append({"kind": "LIST", "name": "Weird"})

    with pytest.raises(SchemaLoadError, match="unsupported kind"):
        schema_from_introspection(payload)


def test_rejects_payload_without_schema() -> None:
    with pytest.raises(SchemaLoadError, match="__schema"):
        schema_from_introspection({"data": {}})


def test_unknown_type_reference_does_not_resolve() -> None:
    schema = schema_from_introspection(_introspection())

    with pytest.raises(SchemaPreconditionError, match="Cat"):
        schema.resolve(NamedTypeRef("Cat"))


def test_builds_model_from_sdl() -> None:
    schema = schema_from_sdl(
        '''
        """Root query."""
        type Query {
          pet(id: ID!): Pet
        }

        interface Node { id: ID! }

        type Pet implements Node {
          id: ID!
          legacy: String @deprecated(reason: "gone")
        }
        '''
    )

    assert schema.query_type == "Query"
    assert schema.resolve("Query").description == "Root query."
    pet = schema.resolve("Pet")
    assert pet.interfaces == (NamedTypeRef("Node"),)
    assert pet.fields is not None
    assert [field.name for field in pet.fields] == ["id", "legacy"]
    assert pet.fields[1].deprecation_reason == "gone"
    assert schema.find_type("__Schema") is not None
    assert schema.find_directive("deprecated") is not None


def test_invalid_sdl_raises_schema_load_error() -> None:
    with pytest.raises(SchemaLoadError, match="Invalid SDL"):
        schema_from_sdl("type Query {")


def test_load_schema_file_dispatches_by_suffix(tmp_path: Path) -> None:
    json_path = tmp_path / "schema.json"
    json_path.write_text(json.dumps(_introspection()), encoding="utf-8")
    sdl_path = tmp_path / "schema.graphql"
    sdl_path.write_text("type Query { ok: Boolean }", encoding="utf-8")

    assert load_schema_file(json_path).find_type("Dog") is not None
    assert load_schema_file(sdl_path).query_type == "Query"


def test_load_schema_file_rejects_missing_and_unknown_files(tmp_path: Path) -> None:
    with pytest.raises(SchemaLoadError, match="not found"):
        load_schema_file(tmp_path / "missing.json")

    text_path = tmp_path / "schema.txt"
    text_path.write_text("type Query { ok: Boolean }", encoding="utf-8")
    with pytest.raises(SchemaLoadError, match="Unsupported schema file type"):
        load_schema_file(text_path)


def test_load_schema_file_rejects_invalid_json(tmp_path: Path) -> None:
    json_path = tmp_path / "schema.json"
    json_path.write_text("{not-json}", encoding="utf-8")

    with pytest.raises(SchemaLoadError, match="Invalid introspection JSON"):
        load_schema_file(json_path)


def test_load_schema_file_rejects_undecodable_bytes(tmp_path: Path) -> None:
    json_path = tmp_path / "schema.json"
    json_path.write_bytes(b'{"__schema": {"types": []}, "note": "\xff\xfe"}')

    with pytest.raises(SchemaLoadError, match="Failed to read schema file"):
        load_schema_file(json_path)
