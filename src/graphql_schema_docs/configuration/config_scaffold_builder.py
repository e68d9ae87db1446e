"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "docs-config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Documentation configuration for graphql-schema-docs.
# Replace the <REQUIRED> placeholder before running build.
# Every other setting shows its default and may be removed.

schema:
  # Introspection result (.json) or SDL document (.graphql, .graphqls, .gql).
  # Relative paths are resolved against this file's directory.
  path: "<REQUIRED>"

rendering:
  # plain writes bare SDL text, html writes highlighted and cross-linked pages.
  markup: "plain"
  # Column width used to wrap descriptions into comment lines.
  width: 80

links:
  # Cross-referenced type names point to <base_url><lowercased name><suffix>.
  base_url: "./"
  suffix: ".doc.html"

output:
  directory: "docs"
  # Also write pages for __Schema, __Type and the other introspection types.
  include_introspection_types: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML documentation configuration with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
