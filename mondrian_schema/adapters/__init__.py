"""Adapters: Render domain schemas to destination formats (Mondrian XML)."""

from mondrian_schema.adapters.mondrian import MondrianGenerator, RenderOptions, render_schema

__all__ = [
    "MondrianGenerator",
    "RenderOptions",
    "render_schema",
]
