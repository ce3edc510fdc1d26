"""Measure and calculated member rendering for Mondrian."""

from xml.etree.ElementTree import Element, SubElement

from mondrian_schema.adapters.mondrian.renderers.annotations import (
    render_annotations,
    render_bool,
)
from mondrian_schema.domain import (
    Aggregator,
    AggregatorKind,
    CalculatedMember,
    Database,
    Measure,
)

# Map AggregatorKind to the Measure "aggregator" attribute.
# Avg renders as "" and Median/Custom as "None"; the formula for those two
# kinds goes in a nested MeasureExpression instead.
AGG_TO_MONDRIAN: dict[AggregatorKind, str] = {
    AggregatorKind.SUM: "sum",
    AggregatorKind.COUNT: "count",
    AggregatorKind.MIN: "min",
    AggregatorKind.MAX: "max",
    AggregatorKind.AVG: "",
    AggregatorKind.DISTINCT_COUNT: "distinct-count",
    AggregatorKind.MEDIAN: "None",
    AggregatorKind.CUSTOM: "None",
}

# Map Database to the SQL "dialect" attribute
DATABASE_TO_DIALECT: dict[Database, str] = {
    Database.POSTGRES: "postgres",
    Database.MONETDB: "monetdb",
}


class MeasureRenderer:
    """Render measures and calculated members to Mondrian XML."""

    def render_measure(self, measure: Measure, parent: Element) -> Element:
        """
        Render a measure.

        Median and Custom aggregators add a <MeasureExpression> holding the
        SQL formula, placed before the measure's Annotations.
        """
        aggregator = measure.aggregator

        element = SubElement(parent, "Measure")
        element.set("name", measure.name)
        element.set("column", measure.column)
        element.set("visible", render_bool(measure.visible))
        element.set("aggregator", AGG_TO_MONDRIAN[aggregator.kind])

        if aggregator.has_formula:
            self._render_expression(aggregator, element)

        render_annotations(element, measure.annotations)
        return element

    def _render_expression(self, aggregator: Aggregator, parent: Element) -> Element:
        expression = SubElement(parent, "MeasureExpression")
        sql = SubElement(expression, "SQL")

        # Only median formulas are tied to a dialect
        if aggregator.kind == AggregatorKind.MEDIAN:
            assert aggregator.database is not None
            sql.set("dialect", DATABASE_TO_DIALECT[aggregator.database])

        sql.text = aggregator.formula
        return expression

    def render_calculated_member(self, member: CalculatedMember, parent: Element) -> Element:
        """Render a calculated member. Its Formula comes before Annotations."""
        element = SubElement(parent, "CalculatedMember")
        element.set("name", member.name)
        element.set("dimension", member.dimension)
        element.set("visible", render_bool(member.visible))

        formula = SubElement(element, "Formula")
        formula.text = member.formula

        render_annotations(element, member.annotations)
        return element
