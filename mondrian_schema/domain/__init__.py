"""Domain layer - Mondrian schema entities.

This layer is output-agnostic: it holds cubes, dimensions, hierarchies,
levels, measures and their annotations. How they become XML lives in
adapters/mondrian, not here.
"""

from mondrian_schema.domain.annotation import AnnotatedEntity, Annotation
from mondrian_schema.domain.cube import Cube, NamedSet
from mondrian_schema.domain.dimension import (
    Dimension,
    DimensionUsage,
    Hierarchy,
    Level,
    Property,
)
from mondrian_schema.domain.measure import (
    Aggregator,
    AggregatorKind,
    CalculatedMember,
    Database,
    Measure,
)
from mondrian_schema.domain.schema import Schema
from mondrian_schema.domain.source import Source, SourceType, Table, View

__all__ = [
    # Annotation
    "AnnotatedEntity",
    "Annotation",
    # Source
    "Source",
    "SourceType",
    "Table",
    "View",
    # Measure
    "Aggregator",
    "AggregatorKind",
    "CalculatedMember",
    "Database",
    "Measure",
    # Dimension
    "Dimension",
    "DimensionUsage",
    "Hierarchy",
    "Level",
    "Property",
    # Cube
    "Cube",
    "NamedSet",
    # Schema
    "Schema",
]
