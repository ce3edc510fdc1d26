"""Tests for error handling with malformed YAML and invalid inputs."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from mondrian_schema.config import MSConfig
from mondrian_schema.errors import MondrianSchemaError, RenderError, SchemaDefinitionError
from mondrian_schema.ingestion import SchemaBuilder


class TestMalformedYAML:
    """Malformed YAML surfaces as yaml.YAMLError."""

    def test_invalid_config_syntax(self) -> None:
        # Missing colon after key
        with pytest.raises(yaml.YAMLError):
            MSConfig.from_yaml("input ./schema.yml\noutput: ./schema.xml\n")

    def test_invalid_schema_syntax(self, tmp_path: Path) -> None:
        path = tmp_path / "schema.yml"
        path.write_text("schema:\n  name: s\n cubes: [\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            SchemaBuilder.from_file(path)


class TestInvalidValues:
    """Invalid config values raise ValidationError; schema documents wrap it with a path."""

    def test_invalid_option_type(self) -> None:
        with pytest.raises(ValidationError):
            MSConfig.from_yaml("input: a\noutput: b\noptions:\n  xml_declaration: maybe\n")

    def test_boolean_indent_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MSConfig.from_yaml("input: a\noutput: b\noptions:\n  indent: true\n")

    def test_non_string_level_name(self) -> None:
        doc = {
            "schema": {
                "name": "s",
                "cubes": [
                    {
                        "name": "c",
                        "source": "t",
                        "dimensions": [
                            {"name": "d", "hierarchies": [{"levels": [{"name": ["x"], "column": "c"}]}]}
                        ],
                    }
                ],
            }
        }
        with pytest.raises(SchemaDefinitionError, match="name: Input should be a valid string") as exc_info:
            SchemaBuilder.from_dict(doc)
        assert exc_info.value.path == "schema.cubes[0].dimensions[0].hierarchies[0].levels[0]"
        assert isinstance(exc_info.value.__cause__, ValidationError)


class TestErrorHierarchy:
    """Library errors share a base class."""

    def test_subclasses(self) -> None:
        assert issubclass(RenderError, MondrianSchemaError)
        assert issubclass(SchemaDefinitionError, MondrianSchemaError)

    def test_definition_error_prefixes_path(self) -> None:
        error = SchemaDefinitionError("missing required key 'name'", "schema.cubes[1]")
        assert str(error) == "schema.cubes[1]: missing required key 'name'"
        assert error.path == "schema.cubes[1]"

    def test_definition_error_without_path(self) -> None:
        assert str(SchemaDefinitionError("boom")) == "boom"
