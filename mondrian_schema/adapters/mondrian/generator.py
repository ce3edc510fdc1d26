"""Mondrian Generator - renders a Schema into a schema XML document."""

from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree

from mondrian_schema.adapters.mondrian.renderers.schema import SchemaRenderer
from mondrian_schema.adapters.mondrian.types import XML_DECLARATION, RenderOptions
from mondrian_schema.domain import Schema
from mondrian_schema.errors import RenderError


class MondrianGenerator:
    """
    Generate Mondrian schema XML from a Schema.

    Rendering builds a fresh element tree on every call and never touches the
    model, so rendering an unchanged schema twice gives identical output.
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options or RenderOptions()
        self.schema_renderer = SchemaRenderer()

    def render(self, schema: Schema) -> str:
        """Render the schema to document text."""
        root = self.schema_renderer.render(schema)
        return self._serialize(root, schema.name)

    def render_element(self, schema: Schema) -> ElementTree.Element:
        """Render the schema to an element tree without serializing it."""
        return self.schema_renderer.render(schema)

    def generate_and_write(self, schema: Schema, output: str | Path) -> Path:
        """
        Render the schema and write it to disk.

        Parent directories are created as needed. Returns the written path.
        """
        content = self.render(schema)

        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding=self.options.encoding)

        return output_path

    def _serialize(self, root: ElementTree.Element, schema_name: str) -> str:
        """
        Serialize the element tree.

        TypeError and ValueError from indenting or writing surface as
        RenderError; no partial document is returned.
        """
        try:
            if self.options.indent is not None:
                ElementTree.indent(root, space=self.options.indent)
            body = ElementTree.tostring(root, encoding="unicode")
        except (TypeError, ValueError) as e:
            raise RenderError(
                f"Failed to serialize schema '{schema_name}': {e}",
                schema_name=schema_name,
            ) from e

        if not self.options.xml_declaration:
            return body

        declaration = XML_DECLARATION.format(encoding=self.options.encoding.upper())
        separator = "\n" if self.options.pretty else ""
        return f"{declaration}{separator}{body}"


def render_schema(schema: Schema, options: RenderOptions | None = None) -> str:
    """Render a fully built Schema to Mondrian schema XML."""
    return MondrianGenerator(options).render(schema)
