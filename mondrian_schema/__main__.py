"""Command-line interface for mondrian-schema."""

from __future__ import annotations

import click

from mondrian_schema.cli import RichGroup
from mondrian_schema.cli.commands import build, init, render


@click.group(cls=RichGroup)
@click.version_option(package_name="mondrian-schema")
def cli() -> None:
    """Build Mondrian OLAP schema XML from YAML definitions.

    Config-driven generation:

        $ ms build

    Or render a single definition to stdout:

        $ ms render schema.yml
    """


# Listed in --help in this order
cli.add_command(init)
cli.add_command(build)
cli.add_command(render)


if __name__ == "__main__":
    cli()
