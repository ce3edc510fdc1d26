"""Rich formatting utilities for CLI output.

Reusable panels and trees so every command reports results the same way.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.tree import Tree

from mondrian_schema.domain import Cube, Schema, Table

PANEL_WIDTH = 78


def _panel(title: str, color: str, message: str, note: str | None) -> Panel:
    body = f"[bold {color}]{message}[/bold {color}]"
    if note:
        body = f"{body}\n\n[dim]{note}[/dim]"
    return Panel(
        body,
        title=f"[bold {color}]{title}[/bold {color}]",
        border_style=color,
        width=PANEL_WIDTH,
        expand=False,
    )


def format_error(message: str, context: str | None = None) -> Panel:
    """Red panel for a failed command; context is shown dimmed below."""
    return _panel("Error", "red", message, context)


def format_success(message: str, details: str | None = None) -> Panel:
    """Green panel for a finished command."""
    return _panel("Success", "green", message, details)


def build_schema_tree(schema: Schema) -> Tree:
    """Build a Rich Tree outlining the cubes of a schema."""
    tree = Tree(f"[bold]{schema.name}[/bold]")
    for cube in schema.cubes:
        _add_cube(tree, cube)
    return tree


def _add_cube(tree: Tree, cube: Cube) -> None:
    if isinstance(cube.source, Table):
        source = cube.source.fully_qualified
    else:
        source = f"view {cube.source.alias}"
    node = tree.add(f"[blue]{cube.name}[/blue] [dim]({source})[/dim]")

    for dimension in cube.dimensions:
        dim_node = node.add(f"[green]{dimension.name}[/green]")
        for hierarchy in dimension.hierarchies:
            levels = ", ".join(level.name for level in hierarchy.levels)
            dim_node.add(f"{hierarchy.name or '(default)'}: [dim]{levels}[/dim]")

    for usage in cube.dimension_usages:
        node.add(f"[green]{usage.name}[/green] [dim]→ {usage.source}[/dim]")

    for measure in cube.measures:
        node.add(f"[yellow]{measure.name}[/yellow] [dim]{measure.aggregator.kind.value}[/dim]")
