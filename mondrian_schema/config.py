"""Configuration schema for mondrian-schema.

Defines the ms.yml configuration file format using Pydantic models.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from mondrian_schema.adapters.mondrian.types import RenderOptions


class MSConfig(BaseModel):
    """
    Root configuration for mondrian-schema.

    This is the schema for ms.yml files.

    Example:
        input: ./schema.yml      # Schema definition YAML
        output: ./build/schema.xml

        options:
          xml_declaration: true
          indent: 2              # Omit for a compact document
          encoding: utf-8
    """

    input: str
    output: str
    options: RenderOptions = Field(default_factory=RenderOptions)

    model_config = {"frozen": True}

    @property
    def input_path(self) -> Path:
        """Get input as Path."""
        return Path(self.input)

    @property
    def output_path(self) -> Path:
        """Get output as Path."""
        return Path(self.output)

    def resolve(self, base_dir: Path) -> MSConfig:
        """Return a copy with relative input/output anchored at base_dir."""
        return self.model_copy(
            update={
                "input": str(_anchor(self.input_path, base_dir)),
                "output": str(_anchor(self.output_path, base_dir)),
            }
        )

    @classmethod
    def from_yaml(cls, content: str) -> MSConfig:
        """Parse config from YAML string."""
        data = yaml.safe_load(content)
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: Path | str) -> MSConfig:
        """Load config from a YAML file."""
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        return cls.from_yaml(content)


def _anchor(path: Path, base_dir: Path) -> Path:
    return path if path.is_absolute() else base_dir / path


# Searched in this order in every directory
CONFIG_FILENAMES = ["ms.yml", "ms.yaml", ".ms.yml", ".ms.yaml"]


def find_config(start_dir: Path | str | None = None) -> Path | None:
    """
    Locate the nearest config file.

    Walks from start_dir (default: the working directory) up to the
    filesystem root and returns the first match, or None.
    """
    directory = Path(start_dir) if start_dir is not None else Path.cwd()
    directory = directory.resolve()

    for candidate_dir in (directory, *directory.parents):
        for filename in CONFIG_FILENAMES:
            candidate = candidate_dir / filename
            if candidate.is_file():
                return candidate

    return None


def load_config(path: Path | str | None = None) -> MSConfig:
    """
    Load an MSConfig from path, or from the nearest discovered config file.

    Raises:
        FileNotFoundError: If no path is given and discovery finds nothing
        pydantic.ValidationError: If the file does not match MSConfig
    """
    if path is None:
        found = find_config()
        if found is None:
            raise FileNotFoundError(
                "No ms.yml found. Run 'ms init' or pass --config"
            )
        return MSConfig.from_file(found)

    return MSConfig.from_file(path)
