"""Source rendering: <Table> or <View>."""

from xml.etree.ElementTree import Element, SubElement

from mondrian_schema.adapters.mondrian.renderers.annotations import render_annotations
from mondrian_schema.domain import Table, View


class SourceRenderer:
    """Render the table or view backing a cube or hierarchy."""

    def render(self, source: Table | View, parent: Element) -> Element:
        if isinstance(source, Table):
            element = self._render_table(source, parent)
        elif isinstance(source, View):
            element = self._render_view(source, parent)
        else:
            raise TypeError(f"Unsupported source type: {type(source).__name__}")

        render_annotations(element, source.annotations)
        return element

    def _render_table(self, table: Table, parent: Element) -> Element:
        element = SubElement(parent, "Table")
        element.set("name", table.name)
        if table.schema_name is not None:
            element.set("schema", table.schema_name)
        return element

    def _render_view(self, view: View, parent: Element) -> Element:
        element = SubElement(parent, "View")
        element.set("alias", view.alias)
        element.set("formula", view.formula)
        return element
