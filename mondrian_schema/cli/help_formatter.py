"""Help formatting shared by the ms commands.

Help text is capped at HELP_WIDTH columns so the examples in command
docstrings stay on one line, and the group lists its commands in the order
they were registered (init, build, render) instead of alphabetically.
"""

from __future__ import annotations

from typing import Any

import click

HELP_WIDTH = 88


class _HelpWidthMixin:
    """Cap help output at HELP_WIDTH unless the caller sets its own limit."""

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        extra.setdefault("max_content_width", HELP_WIDTH)
        return super().make_context(info_name, args, parent=parent, **extra)  # type: ignore[misc]


class RichCommand(_HelpWidthMixin, click.Command):
    """Command with the shared help width."""


class RichGroup(_HelpWidthMixin, click.Group):
    """Group with the shared help width and commands in workflow order."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        return list(self.commands)
