"""Cube domain - a fact table exposed with its dimensions and measures."""

from __future__ import annotations

from pydantic import Field

from mondrian_schema.domain.annotation import AnnotatedEntity
from mondrian_schema.domain.dimension import Dimension, DimensionUsage
from mondrian_schema.domain.measure import CalculatedMember, Measure
from mondrian_schema.domain.source import SourceType


class NamedSet(AnnotatedEntity):
    """A named, formula-defined set of members."""

    name: str
    formula: str
    visible: bool = True


class Cube(AnnotatedEntity):
    """
    A cube backed by exactly one table or view.

    Each child list keeps insertion order. The order between different kinds
    of children is fixed at render time, not by the order of ``add_*`` calls.
    """

    name: str
    source: SourceType

    dimensions: list[Dimension] = Field(default_factory=list)
    dimension_usages: list[DimensionUsage] = Field(default_factory=list)
    measures: list[Measure] = Field(default_factory=list)
    calculated_members: list[CalculatedMember] = Field(default_factory=list)
    named_sets: list[NamedSet] = Field(default_factory=list)

    def add_dimension(self, dimension: Dimension) -> Dimension:
        self.dimensions.append(dimension)
        return dimension

    def add_dimension_usage(self, dimension_usage: DimensionUsage) -> DimensionUsage:
        self.dimension_usages.append(dimension_usage)
        return dimension_usage

    def add_measure(self, measure: Measure) -> Measure:
        self.measures.append(measure)
        return measure

    def add_calculated_member(self, calculated_member: CalculatedMember) -> CalculatedMember:
        self.calculated_members.append(calculated_member)
        return calculated_member

    def add_named_set(self, named_set: NamedSet) -> NamedSet:
        self.named_sets.append(named_set)
        return named_set

    def get_measure(self, name: str) -> Measure | None:
        for measure in self.measures:
            if measure.name == name:
                return measure
        return None

    def get_dimension(self, name: str) -> Dimension | None:
        for dim in self.dimensions:
            if dim.name == name:
                return dim
        return None
