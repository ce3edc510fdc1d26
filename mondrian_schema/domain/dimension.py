"""Dimension domain - classification axes, their hierarchies and levels."""

from __future__ import annotations

from pydantic import Field

from mondrian_schema.domain.annotation import AnnotatedEntity
from mondrian_schema.domain.source import SourceType


class Property(AnnotatedEntity):
    """A member property read from a column of the level's table."""

    name: str
    column: str


class Level(AnnotatedEntity):
    """
    One rank of a hierarchy.

    ``type`` is carried for completeness but is not part of the rendered
    element; ``level_type`` and ``name_column`` are rendered only when set.
    """

    name: str
    column: str
    name_column: str | None = None
    level_type: str | None = None
    type: str | None = None
    unique_members: bool = False

    # Rendered directly under the Level, after its Annotations
    properties: list[Property] = Field(default_factory=list)

    def add_property(self, prop: Property) -> Property:
        self.properties.append(prop)
        return prop


class Hierarchy(AnnotatedEntity):
    """
    An ordered drill path through a dimension.

    The default hierarchy of a dimension may leave ``name`` unset. Every
    other hierarchy is expected to be named, but this is not checked.
    """

    name: str | None = None
    source: SourceType | None = None
    has_all: bool = True
    levels: list[Level] = Field(default_factory=list)

    def add_level(self, level: Level) -> Level:
        self.levels.append(level)
        return level

    @property
    def is_default(self) -> bool:
        return self.name is None


class Dimension(AnnotatedEntity):
    """A named classification axis made of one or more hierarchies."""

    name: str
    hierarchies: list[Hierarchy] = Field(default_factory=list)

    def add_hierarchy(self, hierarchy: Hierarchy) -> Hierarchy:
        # Permissive: several unnamed hierarchies are accepted
        self.hierarchies.append(hierarchy)
        return hierarchy

    @property
    def default_hierarchy(self) -> Hierarchy | None:
        for hierarchy in self.hierarchies:
            if hierarchy.is_default:
                return hierarchy
        return None

    @property
    def levels(self) -> list[Level]:
        return [level for h in self.hierarchies for level in h.levels]


class DimensionUsage(AnnotatedEntity):
    """
    Links a cube to a dimension defined elsewhere in the schema.

    ``source`` names that dimension; it is not a table or view.
    """

    name: str
    source: str
    foreign_key: str
