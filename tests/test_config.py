"""Tests for configuration loading and validation in config.py."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from pydantic import ValidationError

from mondrian_schema.adapters.mondrian import RenderOptions
from mondrian_schema.config import MSConfig, find_config, load_config


class TestMSConfigFromYaml:
    """Tests for MSConfig.from_yaml parsing."""

    def test_minimal_valid_config(self) -> None:
        content = """\
input: ./schema.yml
output: ./schema.xml
"""
        config = MSConfig.from_yaml(content)

        assert config.input == "./schema.yml"
        assert config.output == "./schema.xml"
        assert config.options == RenderOptions()
        assert config.options.xml_declaration is True
        assert config.options.indent is None

    def test_full_config(self) -> None:
        content = """\
input: ./defs/schema.yml
output: ./build/schema.xml

options:
  xml_declaration: false
  indent: 2
  encoding: latin-1
"""
        config = MSConfig.from_yaml(content)

        assert config.options.xml_declaration is False
        assert config.options.indent == "  "
        assert config.options.encoding == "latin-1"
        assert config.input_path == Path("./defs/schema.yml")
        assert config.output_path == Path("./build/schema.xml")

    def test_missing_required_field(self) -> None:
        with pytest.raises(ValidationError):
            MSConfig.from_yaml("input: ./schema.yml\n")

    def test_empty_document(self) -> None:
        with pytest.raises(ValidationError):
            MSConfig.from_yaml("")

    def test_config_is_frozen(self) -> None:
        config = MSConfig.from_yaml("input: a.yml\noutput: b.xml\n")
        with pytest.raises(ValidationError):
            config.input = "other.yml"  # type: ignore[misc]


class TestResolve:
    """Tests for anchoring relative paths at the config directory."""

    def test_relative_paths_anchored(self) -> None:
        config = MSConfig(input="schema.yml", output="out/schema.xml")
        resolved = config.resolve(Path("/project"))
        assert resolved.input_path == Path("/project/schema.yml")
        assert resolved.output_path == Path("/project/out/schema.xml")

    def test_absolute_paths_kept(self) -> None:
        config = MSConfig(input="/abs/schema.yml", output="/abs/schema.xml")
        resolved = config.resolve(Path("/project"))
        assert resolved.input == "/abs/schema.yml"
        assert resolved.output == "/abs/schema.xml"

    def test_options_preserved(self) -> None:
        config = MSConfig(input="a", output="b", options=RenderOptions(indent="\t"))
        assert config.resolve(Path("/x")).options.indent == "\t"


class TestFindConfig:
    """Tests for config discovery."""

    def test_find_in_start_dir(self) -> None:
        with TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "ms.yml"
            config_path.write_text("input: a\noutput: b\n", encoding="utf-8")
            assert find_config(tmpdir) == config_path.resolve()

    def test_find_in_parent_dir(self) -> None:
        with TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / ".ms.yaml"
            config_path.write_text("input: a\noutput: b\n", encoding="utf-8")
            nested = Path(tmpdir) / "a" / "b"
            nested.mkdir(parents=True)
            assert find_config(nested) == config_path.resolve()

    def test_not_found(self) -> None:
        with TemporaryDirectory() as tmpdir:
            result = find_config(tmpdir)
            # An ms.yml above the temp dir may exist on the host; none inside it does
            assert result is None or Path(tmpdir).resolve() not in result.parents


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yml"
        path.write_text("input: a.yml\noutput: b.xml\n", encoding="utf-8")
        assert load_config(path).input == "a.yml"

    def test_load_without_config_raises(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("mondrian_schema.config.find_config", lambda: None)
        with pytest.raises(FileNotFoundError, match="No ms.yml found"):
            load_config()
