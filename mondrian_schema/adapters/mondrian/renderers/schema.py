"""Schema rendering for Mondrian: builds the root <Schema> element."""

from xml.etree.ElementTree import Element

from mondrian_schema.adapters.mondrian.renderers.annotations import render_annotations
from mondrian_schema.adapters.mondrian.renderers.cube import CubeRenderer
from mondrian_schema.domain import Schema


class SchemaRenderer:
    """Render a Schema to an in-memory element tree: Annotations, Dimension*, Cube*."""

    def __init__(self) -> None:
        self.cube_renderer = CubeRenderer()
        self.dimension_renderer = self.cube_renderer.dimension_renderer

    def render(self, schema: Schema) -> Element:
        root = Element("Schema")
        root.set("name", schema.name)

        render_annotations(root, schema.annotations)

        # Shared dimensions: only present when passed to the Schema constructor
        for dimension in schema.dimensions:
            self.dimension_renderer.render(dimension, root)

        for cube in schema.cubes:
            self.cube_renderer.render(cube, root)

        return root
