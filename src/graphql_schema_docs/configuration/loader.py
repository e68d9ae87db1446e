"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from graphql_schema_docs.sdl_rendering.description_formatter import DEFAULT_DESCRIPTION_WIDTH
from graphql_schema_docs.sdl_rendering.markup import MARKUPS

from .runtime_settings import (
    Configuration,
    LinkSettings,
    OutputSettings,
    RenderingSettings,
    SchemaSourceConfig,
)

DEFAULT_BASE_URL = "./"
DEFAULT_LINK_SUFFIX = ".doc.html"
DEFAULT_OUTPUT_DIRECTORY = "docs"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    return Configuration(
        path=path,
        schema=_parse_schema_section(parsed.get("schema"), base_path),
        rendering=_parse_rendering_section(parsed.get("rendering")),
        links=_parse_links_section(parsed.get("links")),
        output=_parse_output_section(parsed.get("output"), base_path),
    )


def _parse_schema_section(value: Any, base_path: Path) -> SchemaSourceConfig:
    section = _require_mapping(value, "schema")
    raw_path = _require_non_empty_string(section.get("path"), "schema.path")
    schema_path = _resolve_path(base_path, raw_path)
    if not schema_path.exists():
        raise ConfigurationError(f"Schema file not found: {schema_path}")
    return SchemaSourceConfig(path=schema_path)


def _parse_rendering_section(value: Any) -> RenderingSettings:
    section = _optional_mapping(value, "rendering")
    markup = _require_non_empty_string(section.get("markup", "plain"), "rendering.markup").lower()
    if markup not in MARKUPS:
        supported = ", ".join(sorted(MARKUPS))
        raise ConfigurationError(f"rendering.markup must be one of: {supported}.")
    width = _require_positive_int(
        section.get("width", DEFAULT_DESCRIPTION_WIDTH), "rendering.width"
    )
    return RenderingSettings(markup=markup, width=width)


def _parse_links_section(value: Any) -> LinkSettings:
    section = _optional_mapping(value, "links")
    base_url = _require_string(section.get("base_url", DEFAULT_BASE_URL), "links.base_url")
    suffix = _require_string(section.get("suffix", DEFAULT_LINK_SUFFIX), "links.suffix")
    return LinkSettings(base_url=base_url, suffix=suffix)


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    directory = _require_non_empty_string(
        section.get("directory", DEFAULT_OUTPUT_DIRECTORY), "output.directory"
    )
    include_introspection_types = section.get("include_introspection_types", False)
    if not isinstance(include_introspection_types, bool):
        raise ConfigurationError("output.include_introspection_types must be a boolean.")
    return OutputSettings(
        directory=_resolve_path(base_path, directory),
        include_introspection_types=include_introspection_types,
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    return value.strip()


def _require_non_empty_string(value: Any, field_name: str) -> str:
    stripped = _require_string(value, field_name)
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
