"""Mondrian-specific rendering options.

These describe how the XML document is written, not what the schema
contains, so they live in the adapter layer rather than the domain.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

XML_DECLARATION = '<?xml version="1.0" encoding="{encoding}"?>'


class RenderOptions(BaseModel):
    """Serialization options for the rendered document."""

    xml_declaration: bool = True
    indent: str | None = None  # None writes a compact single-line document
    encoding: str = "utf-8"  # Used when writing to disk

    model_config = {"frozen": True}

    @field_validator("indent", mode="before")
    @classmethod
    def parse_indent(cls, v: object) -> object:
        """Allow an integer number of spaces."""
        if isinstance(v, bool):
            raise ValueError("indent must be a string or a number of spaces")
        if isinstance(v, int):
            if v < 0:
                raise ValueError("indent must not be negative")
            return " " * v
        return v

    @property
    def pretty(self) -> bool:
        return self.indent is not None
