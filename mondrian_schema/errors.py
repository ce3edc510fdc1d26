"""mondrian-schema exceptions."""

from __future__ import annotations


class MondrianSchemaError(Exception):
    """Base error for mondrian-schema."""


class RenderError(MondrianSchemaError):
    """The XML writer failed to serialize the rendered element tree."""

    def __init__(self, message: str, schema_name: str | None = None) -> None:
        super().__init__(message)
        self.schema_name = schema_name


class SchemaDefinitionError(MondrianSchemaError):
    """A YAML schema document is missing a key or has a malformed section."""

    def __init__(self, message: str, path: str | None = None) -> None:
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path
