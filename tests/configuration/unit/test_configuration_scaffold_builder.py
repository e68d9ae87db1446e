"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from graphql_schema_docs.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from graphql_schema_docs.configuration.loader import load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Documentation configuration" in scaffold
    assert "schema:" in scaffold
    assert "rendering:" in scaffold
    assert "links:" in scaffold
    assert "output:" in scaffold
    assert "<REQUIRED>" in scaffold


def test_write_placeholder_configuration_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "docs-config.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert output_path.exists()
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")


def test_filled_in_scaffold_loads_with_documented_defaults(tmp_path: Path) -> None:
    (tmp_path / "schema.graphql").write_text("type Query { ok: Boolean }", encoding="utf-8")
    output_path = tmp_path / "docs-config.yaml"
    write_placeholder_configuration(output_path)
    filled = output_path.read_text(encoding="utf-8").replace("<REQUIRED>", "schema.graphql")
    output_path.write_text(filled, encoding="utf-8")

    configuration = load_configuration(output_path)

    assert configuration.rendering.markup == "plain"
    assert configuration.rendering.width == 80
    assert configuration.links.suffix == ".doc.html"
    assert configuration.output.include_introspection_types is False


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "docs-config.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
