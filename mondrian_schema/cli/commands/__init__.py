"""CLI commands for mondrian-schema.

Commands are registered on the group in __main__.py.
"""

from __future__ import annotations

from mondrian_schema.cli.commands.build import build
from mondrian_schema.cli.commands.init_cmd import init
from mondrian_schema.cli.commands.render import render

__all__ = [
    "build",
    "init",
    "render",
]
