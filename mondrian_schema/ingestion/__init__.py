"""Ingestion layer - YAML loading and schema building."""

from mondrian_schema.ingestion.builder import SchemaBuilder
from mondrian_schema.ingestion.loader import YamlLoader

__all__ = ["SchemaBuilder", "YamlLoader"]
