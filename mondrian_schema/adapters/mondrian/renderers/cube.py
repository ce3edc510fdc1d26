"""Cube rendering for Mondrian.

Composes the source, dimensions, usages, measures, calculated members and
named sets of a cube into a single <Cube> element.
"""

from xml.etree.ElementTree import Element, SubElement

from mondrian_schema.adapters.mondrian.renderers.annotations import (
    render_annotations,
    render_bool,
)
from mondrian_schema.adapters.mondrian.renderers.dimension import DimensionRenderer
from mondrian_schema.adapters.mondrian.renderers.measure import MeasureRenderer
from mondrian_schema.adapters.mondrian.renderers.source import SourceRenderer
from mondrian_schema.domain import Cube, NamedSet


class CubeRenderer:
    """
    Render cubes to Mondrian XML.

    Children are always written in this order, whatever order they were
    added in: Annotations, Table|View, Dimension*, DimensionUsage*,
    Measure*, CalculatedMember*, NamedSet*.
    """

    def __init__(self) -> None:
        self.source_renderer = SourceRenderer()
        self.dimension_renderer = DimensionRenderer(self.source_renderer)
        self.measure_renderer = MeasureRenderer()

    def render(self, cube: Cube, parent: Element) -> Element:
        element = SubElement(parent, "Cube")
        element.set("name", cube.name)

        render_annotations(element, cube.annotations)

        self.source_renderer.render(cube.source, element)

        for dimension in cube.dimensions:
            self.dimension_renderer.render(dimension, element)

        for usage in cube.dimension_usages:
            self.dimension_renderer.render_usage(usage, element)

        for measure in cube.measures:
            self.measure_renderer.render_measure(measure, element)

        for member in cube.calculated_members:
            self.measure_renderer.render_calculated_member(member, element)

        for named_set in cube.named_sets:
            self.render_named_set(named_set, element)

        return element

    def render_named_set(self, named_set: NamedSet, parent: Element) -> Element:
        element = SubElement(parent, "NamedSet")
        element.set("name", named_set.name)
        element.set("formula", named_set.formula)
        element.set("visible", render_bool(named_set.visible))

        render_annotations(element, named_set.annotations)
        return element
