"""Render command for mondrian-schema CLI."""

from __future__ import annotations

from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from mondrian_schema.adapters.mondrian import MondrianGenerator, RenderOptions
from mondrian_schema.cli import RichCommand, format_error
from mondrian_schema.errors import MondrianSchemaError
from mondrian_schema.ingestion import SchemaBuilder

# Diagnostics go to stderr so stdout carries only the document
console = Console(stderr=True)


@click.command(cls=RichCommand)
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Pretty-print with this many spaces per level",
)
@click.option(
    "--no-declaration",
    is_flag=True,
    help="Omit the <?xml ...?> declaration",
)
def render(schema_file: Path, indent: int | None, no_declaration: bool) -> None:
    """Render a schema definition YAML file to stdout.

    ## Examples

        $ ms render schema.yml

        $ ms render schema.yml --indent 2 > schema.xml
    """
    options = RenderOptions(xml_declaration=not no_declaration, indent=indent)

    try:
        schema = SchemaBuilder.from_file(schema_file)
        content = MondrianGenerator(options).render(schema)
    except (yaml.YAMLError, ValidationError, MondrianSchemaError, ValueError) as e:
        console.print(format_error(escape(str(e)), context=f"while rendering {schema_file}"))
        raise click.ClickException(str(e))

    click.echo(content)
