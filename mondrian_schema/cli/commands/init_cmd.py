"""Init command for mondrian-schema CLI."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from mondrian_schema.cli import RichCommand, format_success

console = Console()

CONFIG_TEMPLATE = """\
# mondrian-schema configuration

input: ./schema.yml
output: ./build/schema.xml

# Rendering options (defaults shown)
options:
  xml_declaration: true
  # indent: 2        # Pretty-print; omit for a compact document
  encoding: utf-8
"""

SCHEMA_TEMPLATE = """\
schema:
  name: us_sales
  cubes:
    - name: eastern_sales
      source: eastern_sales
      annotations:
        states: MA,NY
      dimensions:
        - name: Product
          hierarchies:
            - has_all: true
              source: products:select * from products
              levels:
                - name: Product Group
                  column: prod_code
                  name_column: prod_desc
                  unique_members: true
      measures:
        - name: dollars
          column: mea_dollars
          aggregator: sum
          annotations:
            shorthand: in 100k
"""


@click.command(cls=RichCommand)
def init() -> None:
    """Create starter ms.yml and schema.yml files.

    Neither file is overwritten if it already exists.

    ## Examples

        $ ms init
        $ ms build
    """
    config_path = Path("ms.yml")
    schema_path = Path("schema.yml")

    for path in (config_path, schema_path):
        if path.exists():
            console.print(f"[yellow]{path} already exists[/yellow]")
            raise click.ClickException(f"{path} already exists")

    config_path.write_text(CONFIG_TEMPLATE, encoding="utf-8")
    schema_path.write_text(SCHEMA_TEMPLATE, encoding="utf-8")

    console.print(
        format_success(
            f"Created {config_path} and {schema_path}",
            details="Edit the files and run: ms build",
        )
    )
