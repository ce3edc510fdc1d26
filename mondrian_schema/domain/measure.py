"""Measure domain - aggregated fact columns and calculated members."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from mondrian_schema.domain.annotation import AnnotatedEntity


class AggregatorKind(str, Enum):
    """Aggregation functions a measure can apply to its column."""

    SUM = "sum"
    COUNT = "count"
    MIN = "min"
    MAX = "max"
    AVG = "avg"
    DISTINCT_COUNT = "distinct-count"
    MEDIAN = "median"
    CUSTOM = "custom"


class Database(str, Enum):
    """Target databases for embedded median formulas."""

    POSTGRES = "postgres"
    MONETDB = "monetdb"


# Variants that embed a SQL formula instead of naming a built-in function
FORMULA_KINDS = frozenset({AggregatorKind.MEDIAN, AggregatorKind.CUSTOM})


class Aggregator(BaseModel):
    """
    Closed set of aggregator variants.

    Median carries a database and a formula, Custom carries a formula, every
    other variant carries neither.
    """

    kind: AggregatorKind
    database: Database | None = None
    formula: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_payload(self) -> "Aggregator":
        if self.kind == AggregatorKind.MEDIAN:
            if self.database is None or self.formula is None:
                raise ValueError("median aggregator requires 'database' and 'formula'")
        elif self.kind == AggregatorKind.CUSTOM:
            if self.formula is None:
                raise ValueError("custom aggregator requires 'formula'")
            if self.database is not None:
                raise ValueError("custom aggregator does not take 'database'")
        elif self.database is not None or self.formula is not None:
            raise ValueError(f"{self.kind.value} aggregator takes no 'database' or 'formula'")
        return self

    @classmethod
    def sum(cls) -> Aggregator:
        return cls(kind=AggregatorKind.SUM)

    @classmethod
    def count(cls) -> Aggregator:
        return cls(kind=AggregatorKind.COUNT)

    @classmethod
    def min(cls) -> Aggregator:
        return cls(kind=AggregatorKind.MIN)

    @classmethod
    def max(cls) -> Aggregator:
        return cls(kind=AggregatorKind.MAX)

    @classmethod
    def avg(cls) -> Aggregator:
        return cls(kind=AggregatorKind.AVG)

    @classmethod
    def distinct_count(cls) -> Aggregator:
        return cls(kind=AggregatorKind.DISTINCT_COUNT)

    @classmethod
    def median(cls, database: Database | str, formula: str) -> Aggregator:
        return cls(kind=AggregatorKind.MEDIAN, database=Database(database), formula=formula)

    @classmethod
    def custom(cls, formula: str) -> Aggregator:
        return cls(kind=AggregatorKind.CUSTOM, formula=formula)

    @property
    def has_formula(self) -> bool:
        return self.kind in FORMULA_KINDS


class Measure(AnnotatedEntity):
    """A fact column exposed with an aggregation function."""

    name: str
    column: str
    aggregator: Aggregator
    visible: bool = True

    @field_validator("aggregator", mode="before")
    @classmethod
    def parse_aggregator(cls, v: Any) -> Any:
        """Accept plain variant names ("sum", "distinct-count", ...)."""
        if isinstance(v, (str, AggregatorKind)):
            return Aggregator(kind=AggregatorKind(v))
        return v


class CalculatedMember(AnnotatedEntity):
    """A member derived from an MDX formula, attached to a dimension."""

    name: str
    dimension: str
    formula: str
    visible: bool = True
