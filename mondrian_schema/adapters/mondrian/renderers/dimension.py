"""Dimension rendering for Mondrian.

Covers the whole dimension subtree (hierarchies, levels, properties) and
dimension usages, which reference a dimension defined elsewhere.
"""

from xml.etree.ElementTree import Element, SubElement

from mondrian_schema.adapters.mondrian.renderers.annotations import (
    render_annotations,
    render_bool,
)
from mondrian_schema.adapters.mondrian.renderers.source import SourceRenderer
from mondrian_schema.domain import (
    Dimension,
    DimensionUsage,
    Hierarchy,
    Level,
    Property,
)


class DimensionRenderer:
    """
    Render dimensions to Mondrian XML.

    Child order is fixed:
    - Dimension: Annotations, Hierarchy*
    - Hierarchy: Annotations, Table|View (optional), Level*
    - Level: Annotations, Property*
    """

    def __init__(self, source_renderer: SourceRenderer | None = None) -> None:
        self.source_renderer = source_renderer or SourceRenderer()

    def render(self, dimension: Dimension, parent: Element) -> Element:
        element = SubElement(parent, "Dimension")
        element.set("name", dimension.name)

        render_annotations(element, dimension.annotations)

        for hierarchy in dimension.hierarchies:
            self.render_hierarchy(hierarchy, element)

        return element

    def render_hierarchy(self, hierarchy: Hierarchy, parent: Element) -> Element:
        element = SubElement(parent, "Hierarchy")
        element.set("hasAll", render_bool(hierarchy.has_all))

        # Default hierarchy is written without a name attribute
        if hierarchy.name is not None:
            element.set("name", hierarchy.name)

        render_annotations(element, hierarchy.annotations)

        if hierarchy.source is not None:
            self.source_renderer.render(hierarchy.source, element)

        for level in hierarchy.levels:
            self.render_level(level, element)

        return element

    def render_level(self, level: Level, parent: Element) -> Element:
        element = SubElement(parent, "Level")
        element.set("name", level.name)
        element.set("column", level.column)
        element.set("uniqueMembers", render_bool(level.unique_members))

        if level.level_type is not None:
            element.set("levelType", level.level_type)
        if level.name_column is not None:
            element.set("nameColumn", level.name_column)

        render_annotations(element, level.annotations)

        for prop in level.properties:
            self.render_property(prop, element)

        return element

    def render_property(self, prop: Property, parent: Element) -> Element:
        element = SubElement(parent, "Property")
        element.set("name", prop.name)
        element.set("column", prop.column)

        render_annotations(element, prop.annotations)
        return element

    def render_usage(self, usage: DimensionUsage, parent: Element) -> Element:
        element = SubElement(parent, "DimensionUsage")
        element.set("name", usage.name)
        element.set("source", usage.source)
        element.set("foreign_key", usage.foreign_key)

        render_annotations(element, usage.annotations)
        return element
