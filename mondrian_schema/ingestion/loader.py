"""YamlLoader - loads a schema definition document from a YAML file."""

from pathlib import Path
from typing import Any

import yaml


class YamlLoader:
    """
    Load a schema definition YAML file.

    Returns the raw parsed dict; turning it into domain objects is the
    SchemaBuilder's job.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> dict[str, Any]:
        """Load and parse the file. An empty file yields an empty dict."""
        if not self.path.is_file():
            raise FileNotFoundError(f"File not found: {self.path}")

        with open(self.path, encoding="utf-8") as f:
            content = yaml.safe_load(f)

        if content is None:
            return {}

        if not isinstance(content, dict):
            raise ValueError(
                f"Expected dict at root of {self.path}, got {type(content).__name__}"
            )

        return content
