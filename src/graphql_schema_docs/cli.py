"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from graphql_schema_docs.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from graphql_schema_docs.documentation_output import (
    PLAIN_PAGE_SUFFIX,
    DocumentationOutputError,
    write_documentation,
)
from graphql_schema_docs.schema_model import (
    SchemaLoadError,
    SchemaPreconditionError,
    load_schema_file,
)
from graphql_schema_docs.sdl_rendering import (
    PageLinkResolver,
    RenderContext,
    UnknownTargetError,
    markup_for,
    render,
    render_full_schema,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="graphql-schema-docs")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Annotated, cross-linked SDL documentation for GraphQL schemas."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML documentation configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML documentation configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="render")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Introspection JSON or SDL file describing the schema",
)
@click.option(
    "--target",
    "target_name",
    required=False,
    help="Directive or type to render; the root schema block when omitted",
)
@click.option(
    "--markup",
    type=click.Choice(["plain", "html"]),
    default="plain",
    show_default=True,
    help="Presentation markup of the rendered text",
)
@click.option(
    "--base-url",
    default="./",
    show_default=True,
    help="Prefix of cross-reference locators (html markup only)",
)
@click.option(
    "--all",
    "render_all",
    is_flag=True,
    default=False,
    help="Render the root schema followed by every directive and type.",
)
def render_schema(
    schema_path: str,
    target_name: str | None,
    markup: str,
    base_url: str,
    render_all: bool,
) -> None:
    """Print annotated SDL for one schema target to stdout."""
    if render_all and target_name:
        raise click.UsageError("--all cannot be combined with --target.")
    try:
        ctx = RenderContext(
            schema=load_schema_file(schema_path),
            markup=markup_for(markup),
            link_resolver=PageLinkResolver(base_url=base_url),
        )
        text = render_full_schema(ctx) if render_all else render(ctx, target_name)
    except (SchemaLoadError, SchemaPreconditionError, UnknownTargetError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(text, nl=False)


@cli.command(name="build")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON documentation configuration file",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Overrides output.directory from the configuration",
)
def build(config_path: str, output_dir: str | None) -> None:
    """Write one documentation page per directive and type, plus the schema index."""
    try:
        configuration = load_configuration(config_path)
        schema = load_schema_file(configuration.schema.path)
        ctx = RenderContext(
            schema=schema,
            markup=markup_for(configuration.rendering.markup),
            link_resolver=PageLinkResolver(
                base_url=configuration.links.base_url,
                suffix=configuration.links.suffix,
            ),
            width=configuration.rendering.width,
        )
        page_suffix = (
            configuration.links.suffix
            if configuration.rendering.markup == "html"
            else PLAIN_PAGE_SUFFIX
        )
        outcome = write_documentation(
            ctx,
            output_dir or configuration.output.directory,
            page_suffix=page_suffix,
            include_introspection_types=configuration.output.include_introspection_types,
        )
    except (
        ConfigurationError,
        SchemaLoadError,
        SchemaPreconditionError,
        UnknownTargetError,
        DocumentationOutputError,
    ) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_dir))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
