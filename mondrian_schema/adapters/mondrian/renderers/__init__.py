"""Mondrian renderers - one renderer per entity family."""

from mondrian_schema.adapters.mondrian.renderers.annotations import (
    render_annotations,
    render_bool,
)
from mondrian_schema.adapters.mondrian.renderers.cube import CubeRenderer
from mondrian_schema.adapters.mondrian.renderers.dimension import DimensionRenderer
from mondrian_schema.adapters.mondrian.renderers.measure import (
    AGG_TO_MONDRIAN,
    DATABASE_TO_DIALECT,
    MeasureRenderer,
)
from mondrian_schema.adapters.mondrian.renderers.schema import SchemaRenderer
from mondrian_schema.adapters.mondrian.renderers.source import SourceRenderer

__all__ = [
    "AGG_TO_MONDRIAN",
    "DATABASE_TO_DIALECT",
    "CubeRenderer",
    "DimensionRenderer",
    "MeasureRenderer",
    "SchemaRenderer",
    "SourceRenderer",
    "render_annotations",
    "render_bool",
]
