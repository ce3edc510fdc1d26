"""End-to-end tests for MondrianGenerator and render_schema."""

from pathlib import Path
from xml.etree import ElementTree

import pytest

from mondrian_schema.adapters.mondrian import MondrianGenerator, RenderOptions, render_schema
from mondrian_schema.domain import (
    Aggregator,
    Cube,
    Database,
    Dimension,
    Hierarchy,
    Level,
    Measure,
    Schema,
    Source,
)
from mondrian_schema.errors import RenderError

EXPECTED_US_SALES = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<Schema name="us_sales">'
    '<Cube name="eastern_sales">'
    '<Annotations><Annotation name="states">MA,NY</Annotation></Annotations>'
    '<Table name="eastern_sales" />'
    '<Dimension name="Product">'
    '<Hierarchy hasAll="true">'
    '<View alias="source_alias" formula="sqlformula" />'
    '<Level name="Product Group" column="prod_code" uniqueMembers="true" nameColumn="prod_desc" />'
    "</Hierarchy>"
    "</Dimension>"
    '<Measure name="dollars" column="mea_dollars" visible="true" aggregator="sum">'
    '<Annotations><Annotation name="shorthand">in 100k</Annotation></Annotations>'
    "</Measure>"
    "</Cube>"
    "</Schema>"
)


@pytest.fixture
def us_sales() -> Schema:
    """One cube with a product dimension and a dollars measure."""
    schema = Schema(name="us_sales")

    measure = Measure(
        name="dollars",
        column="mea_dollars",
        aggregator=Aggregator.sum(),
        visible=True,
    )
    measure.add_annotation("shorthand", "in 100k")

    dimension = Dimension(name="Product")
    hierarchy = dimension.add_hierarchy(
        Hierarchy(
            name=None,
            source=Source.new_view("source_alias", "sqlformula"),
            has_all=True,
        )
    )
    hierarchy.add_level(
        Level(
            name="Product Group",
            column="prod_code",
            name_column="prod_desc",
            unique_members=True,
        )
    )

    cube = Cube(name="eastern_sales", source=Source.new_table("eastern_sales"))
    cube.add_annotation("states", "MA,NY")
    cube.add_dimension(dimension)
    cube.add_measure(measure)
    schema.add_cube(cube)

    return schema


def parse(schema: Schema) -> ElementTree.Element:
    return ElementTree.fromstring(render_schema(schema, RenderOptions(xml_declaration=False)))


class TestEndToEnd:
    """Full document rendering."""

    def test_us_sales_document(self, us_sales):
        assert render_schema(us_sales) == EXPECTED_US_SALES

    def test_us_sales_structure(self, us_sales):
        root = parse(us_sales)
        assert root.tag == "Schema"
        assert [c.tag for c in root] == ["Cube"]

        cube = root[0]
        assert [c.tag for c in cube] == ["Annotations", "Table", "Dimension", "Measure"]

        hierarchy = cube.find("Dimension/Hierarchy")
        assert hierarchy is not None
        assert "name" not in hierarchy.attrib
        assert [c.tag for c in hierarchy] == ["View", "Level"]

    def test_rendering_is_idempotent(self, us_sales):
        generator = MondrianGenerator()
        first = generator.render(us_sales)
        second = generator.render(us_sales)
        assert first == second
        assert render_schema(us_sales) == first

    def test_rendering_does_not_mutate_model(self, us_sales):
        before = us_sales.model_dump()
        render_schema(us_sales, RenderOptions(indent="  "))
        assert us_sales.model_dump() == before

    def test_median_measure_document(self):
        schema = Schema(name="s")
        cube = schema.add_cube(Cube(name="c", source=Source.new_table("t")))
        cube.add_measure(
            Measure(name="m", column="x", aggregator=Aggregator.median(Database.POSTGRES, "f"))
        )
        xml = render_schema(schema, RenderOptions(xml_declaration=False))
        assert (
            '<Measure name="m" column="x" visible="true" aggregator="None">'
            '<MeasureExpression><SQL dialect="postgres">f</SQL></MeasureExpression>'
            "</Measure>"
        ) in xml

    def test_avg_renders_empty_aggregator(self):
        schema = Schema(name="s")
        cube = schema.add_cube(Cube(name="c", source=Source.new_table("t")))
        cube.add_measure(Measure(name="m", column="x", aggregator=Aggregator.avg()))
        assert 'aggregator=""' in render_schema(schema)


class TestEscaping:
    """Text and attribute escaping is left to the XML writer."""

    def test_special_characters_round_trip_through_parser(self):
        schema = Schema(name="a & b")
        cube = schema.add_cube(Cube(name="c", source=Source.new_view("v", "select * from t where x < 1")))
        cube.add_annotation("expr", 'x > 1 & y = "z"')

        xml = render_schema(schema, RenderOptions(xml_declaration=False))
        assert "a &amp; b" in xml

        root = ElementTree.fromstring(xml)
        assert root.get("name") == "a & b"
        assert root.find("Cube/View").get("formula") == "select * from t where x < 1"
        assert root.find("Cube/Annotations/Annotation").text == 'x > 1 & y = "z"'


class TestRenderOptions:
    """Serialization options."""

    def test_declaration_by_default(self, us_sales):
        assert render_schema(us_sales).startswith('<?xml version="1.0" encoding="UTF-8"?><Schema')

    def test_without_declaration(self, us_sales):
        assert render_schema(us_sales, RenderOptions(xml_declaration=False)).startswith("<Schema")

    def test_indent(self, us_sales):
        xml = render_schema(us_sales, RenderOptions(indent="  "))
        lines = xml.splitlines()
        assert lines[0] == '<?xml version="1.0" encoding="UTF-8"?>'
        assert lines[1] == '<Schema name="us_sales">'
        assert lines[2] == '  <Cube name="eastern_sales">'

    def test_indent_accepts_number_of_spaces(self):
        assert RenderOptions(indent=4).indent == "    "

    def test_indent_rejects_negative(self):
        with pytest.raises(ValueError):
            RenderOptions(indent=-1)

    def test_pretty_output_parses_to_same_structure(self, us_sales):
        compact = ElementTree.fromstring(render_schema(us_sales, RenderOptions(xml_declaration=False)))
        pretty = ElementTree.fromstring(
            render_schema(us_sales, RenderOptions(xml_declaration=False, indent="\t"))
        )
        assert [e.tag for e in compact.iter()] == [e.tag for e in pretty.iter()]
        assert [e.attrib for e in compact.iter()] == [e.attrib for e in pretty.iter()]


class TestRenderErrors:
    """Writer failures propagate as RenderError."""

    def test_unserializable_value_raises_render_error(self):
        # model_construct skips validation, letting a non-string reach the writer
        schema = Schema.model_construct(name=42, dimensions=[], cubes=[], annotations=[])
        with pytest.raises(RenderError) as exc_info:
            render_schema(schema)
        assert exc_info.value.schema_name == 42
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_pretty_render_failure_raises_render_error(self):
        cube = Cube.model_construct(name=7, source=Source.new_table("t"))
        schema = Schema(name="s", cubes=[cube])
        with pytest.raises(RenderError, match="Failed to serialize schema 's'") as exc_info:
            MondrianGenerator(RenderOptions(indent="  ")).render(schema)
        assert exc_info.value.schema_name == "s"


class TestGenerateAndWrite:
    """Writing the document to disk."""

    def test_writes_file_and_creates_parents(self, us_sales, tmp_path: Path):
        output = tmp_path / "build" / "schema.xml"
        written = MondrianGenerator().generate_and_write(us_sales, output)

        assert written == output
        assert output.read_text(encoding="utf-8") == EXPECTED_US_SALES

    def test_no_parse_back_operation(self):
        # Rendering is one-way
        assert not hasattr(MondrianGenerator, "parse")
        assert not hasattr(Schema, "from_xml")


class TestRenderElement:
    """Rendering to an element tree without serializing."""

    def test_returns_schema_root(self, us_sales):
        root = MondrianGenerator().render_element(us_sales)

        assert root.tag == "Schema"
        assert root.get("name") == "us_sales"
        assert [child.tag for child in root] == ["Cube"]

    def test_matches_serialized_document(self, us_sales):
        root = MondrianGenerator().render_element(us_sales)
        body = EXPECTED_US_SALES.split("?>", 1)[1]

        assert ElementTree.tostring(root, encoding="unicode") == body

    def test_fresh_tree_per_call(self, us_sales):
        generator = MondrianGenerator()
        first = generator.render_element(us_sales)
        second = generator.render_element(us_sales)

        assert first is not second
        assert ElementTree.tostring(first) == ElementTree.tostring(second)
