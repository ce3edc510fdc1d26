"""Build command for mondrian-schema CLI."""

from __future__ import annotations

import traceback
from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from mondrian_schema.adapters.mondrian import MondrianGenerator
from mondrian_schema.cli import RichCommand, build_schema_tree
from mondrian_schema.config import find_config, load_config
from mondrian_schema.errors import MondrianSchemaError
from mondrian_schema.ingestion import SchemaBuilder

console = Console()


def _fail(label: str, error: Exception, debug: bool) -> click.ClickException:
    if debug:
        console.print(traceback.format_exc())
    console.print(f"[red]{label}:[/red] {escape(str(error))}")
    return click.ClickException(str(error))


@click.command(cls=RichCommand)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to ms.yml config file (auto-detected if not specified)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Render the schema without writing the output file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show an outline of the rendered schema",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Show full exception stacktraces for troubleshooting",
)
def build(config: Path | None, dry_run: bool, verbose: bool, debug: bool) -> None:
    """Render a schema definition to Mondrian schema XML.

    Reads ms.yml, builds the schema described by its `input` file and
    writes the XML document to `output`. Relative paths are resolved
    against the directory holding ms.yml.

    Examples:

        # Build using ms.yml in current directory
        ms build

        # Render without writing
        ms build --dry-run

        # Use specific config file
        ms build --config ./configs/ms.yml
    """
    config_path: Path
    try:
        if config:
            config_path = config
        else:
            found_config = find_config()
            if found_config is None:
                console.print("[red]No ms.yml found[/red]")
                console.print("\nCreate one with [bold]ms init[/bold], or write:")
                console.print("""
[dim]input: ./schema.yml
output: ./schema.xml[/dim]
""")
                raise click.ClickException("Config file not found")
            config_path = found_config
        cfg = load_config(config_path).resolve(config_path.resolve().parent)
    except FileNotFoundError as e:
        raise _fail("Config file not found", e, debug)
    except yaml.YAMLError as e:
        raise _fail("YAML parsing error", e, debug)
    except ValidationError as e:
        raise _fail("Config validation error", e, debug)

    console.print()
    console.print("[bold]mondrian-schema[/bold]", highlight=False)
    console.print()
    console.print(f"[dim]Config:[/dim] {config_path}")

    if dry_run:
        console.print("[yellow]Dry run mode[/yellow]")

    try:
        schema = SchemaBuilder.from_file(cfg.input_path)
        generator = MondrianGenerator(cfg.options)
        if dry_run:
            generator.render(schema)
        else:
            generator.generate_and_write(schema, cfg.output_path)
    except FileNotFoundError as e:
        raise _fail("File not found", e, debug)
    except yaml.YAMLError as e:
        raise _fail("YAML parsing error", e, debug)
    except ValidationError as e:
        raise _fail("Schema validation error", e, debug)
    except MondrianSchemaError as e:
        raise _fail("Schema error", e, debug)
    except ValueError as e:
        raise _fail("Invalid schema file", e, debug)

    cubes = len(schema.cubes)
    dimensions = sum(len(c.dimensions) for c in schema.cubes)
    measures = sum(len(c.measures) for c in schema.cubes)

    action = "Would render" if dry_run else "Rendered"
    console.print(
        f"\n[bold green]{action} {cubes} cubes[/bold green] "
        f"[dim]({dimensions} dims, {measures} measures)[/dim]"
    )
    if not dry_run:
        console.print(f"[dim]Output:[/dim] {cfg.output_path}")

    if verbose or dry_run:
        console.print()
        console.print(build_schema_tree(schema))
