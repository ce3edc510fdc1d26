"""CLI utilities for mondrian-schema.

Rich-based formatting helpers and Click help formatters shared by the
commands in mondrian_schema.cli.commands.
"""

from __future__ import annotations

from mondrian_schema.cli.formatting import (
    build_schema_tree,
    format_error,
    format_success,
)
from mondrian_schema.cli.help_formatter import RichCommand, RichGroup

__all__ = [
    "build_schema_tree",
    "format_error",
    "format_success",
    "RichCommand",
    "RichGroup",
]
