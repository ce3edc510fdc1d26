"""Source domain - the table or view backing a cube or hierarchy."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from mondrian_schema.domain.annotation import AnnotatedEntity


class Source(AnnotatedEntity):
    """
    Base of the two source variants.

    A cube always has exactly one source; a hierarchy may carry its own to
    override the one inherited from the cube.
    """

    @staticmethod
    def new_table(name: str, schema: str | None = None) -> Table:
        return Table(name=name, schema_name=schema)

    @staticmethod
    def new_view(alias: str, formula: str) -> View:
        return View(alias=alias, formula=formula)

    @staticmethod
    def from_str(text: str) -> Table | View:
        """
        Build a source from compact notation.

        - ``"alias:formula"`` → View (split on the first colon)
        - ``"schema.table"`` → Table with schema (split on the last dot)
        - ``"table"`` → Table without schema

        A colon takes precedence, so formulas may contain dots.
        """
        text = text.strip()
        if ":" in text:
            alias, formula = text.split(":", 1)
            return View(alias=alias.strip(), formula=formula.strip())
        if "." in text:
            schema, name = text.rsplit(".", 1)
            return Table(name=name, schema_name=schema)
        return Table(name=text)


class Table(Source):
    """A physical table, optionally qualified with a database schema."""

    kind: Literal["table"] = "table"
    name: str
    schema_name: str | None = Field(None, alias="schema")  # 'schema' is reserved in Pydantic

    model_config = {"populate_by_name": True}

    @property
    def fully_qualified(self) -> str:
        parts = [p for p in [self.schema_name, self.name] if p]
        return ".".join(parts)


class View(Source):
    """An aliased SQL query used in place of a table."""

    kind: Literal["view"] = "view"
    alias: str
    formula: str


SourceType = Annotated[Union[Table, View], Field(discriminator="kind")]
