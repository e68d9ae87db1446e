"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaSourceConfig:
    """Location of the schema to document."""

    path: Path


@dataclass(frozen=True)
class RenderingSettings:
    """Markup and description wrapping for rendered SDL."""

    markup: str
    width: int


@dataclass(frozen=True)
class LinkSettings:
    """Page locator settings used for cross-references."""

    base_url: str
    suffix: str


@dataclass(frozen=True)
class OutputSettings:
    """Destination of the written documentation pages."""

    directory: Path
    include_introspection_types: bool


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaSourceConfig
    rendering: RenderingSettings
    links: LinkSettings
    output: OutputSettings
