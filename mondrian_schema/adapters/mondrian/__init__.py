"""Mondrian Adapter: Render domain schemas to Mondrian schema XML."""

from mondrian_schema.adapters.mondrian.generator import MondrianGenerator, render_schema
from mondrian_schema.adapters.mondrian.renderers import (
    CubeRenderer,
    DimensionRenderer,
    MeasureRenderer,
    SchemaRenderer,
    SourceRenderer,
)
from mondrian_schema.adapters.mondrian.types import RenderOptions

__all__ = [
    "CubeRenderer",
    "DimensionRenderer",
    "MeasureRenderer",
    "MondrianGenerator",
    "RenderOptions",
    "SchemaRenderer",
    "SourceRenderer",
    "render_schema",
]
