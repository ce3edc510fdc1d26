"""SchemaBuilder - turns schema definition YAML into a domain Schema."""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any, Callable, TypeVar

from pydantic import ValidationError

from mondrian_schema.domain import (
    Aggregator,
    AggregatorKind,
    AnnotatedEntity,
    CalculatedMember,
    Cube,
    Database,
    Dimension,
    DimensionUsage,
    Hierarchy,
    Level,
    Measure,
    NamedSet,
    Property,
    Schema,
    Source,
    Table,
    View,
)
from mondrian_schema.errors import SchemaDefinitionError
from mondrian_schema.ingestion.loader import YamlLoader

T = TypeVar("T")


def _located(method: Callable[..., T]) -> Callable[..., T]:
    """Report model validation failures as SchemaDefinitionError at the section path."""

    @functools.wraps(method)
    def wrapper(self: SchemaBuilder, data: Any, path: str) -> T:
        try:
            return method(self, data, path)
        except ValidationError as e:
            raise SchemaDefinitionError(_describe(e), path or None) from e

    return wrapper


class SchemaBuilder:
    """
    Build a Schema from a YAML definition.

    The document has a single ``schema`` root::

        schema:
          name: us_sales
          cubes:
            - name: eastern_sales
              source: public.eastern_sales
              annotations:
                states: MA,NY
              dimensions: [...]
              measures:
                - name: dollars
                  column: mea_dollars
                  aggregator: sum

    Objects are assembled through the builder API (``add_*``), so list order
    in the YAML is the order in the rendered document.
    """

    @classmethod
    def from_file(cls, path: str | Path) -> Schema:
        """Load a YAML file and build its schema."""
        data = YamlLoader(path).load()
        return cls().build(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Schema:
        """Build a schema from an already-parsed document."""
        return cls().build(data)

    def build(self, data: dict[str, Any]) -> Schema:
        return self._build_schema(_require(data, "schema", ""), "schema")

    @_located
    def _build_schema(self, data: dict[str, Any], path: str) -> Schema:
        _mapping(data, path)
        schema = Schema(
            name=_require(data, "name", path),
            dimensions=[
                self._build_dimension(d, f"{path}.dimensions[{i}]")
                for i, d in enumerate(_list(data, "dimensions", path))
            ],
        )
        self._apply_annotations(schema, data, path)

        for i, cube_data in enumerate(_list(data, "cubes", path)):
            schema.add_cube(self._build_cube(cube_data, f"{path}.cubes[{i}]"))

        return schema

    @_located
    def _build_cube(self, data: dict[str, Any], path: str) -> Cube:
        _mapping(data, path)
        cube = Cube(
            name=_require(data, "name", path),
            source=self._build_source(_require(data, "source", path), f"{path}.source"),
        )
        self._apply_annotations(cube, data, path)

        for i, d in enumerate(_list(data, "dimensions", path)):
            cube.add_dimension(self._build_dimension(d, f"{path}.dimensions[{i}]"))

        for i, u in enumerate(_list(data, "dimension_usages", path)):
            cube.add_dimension_usage(
                self._build_dimension_usage(u, f"{path}.dimension_usages[{i}]")
            )

        for i, m in enumerate(_list(data, "measures", path)):
            cube.add_measure(self._build_measure(m, f"{path}.measures[{i}]"))

        for i, c in enumerate(_list(data, "calculated_members", path)):
            item_path = f"{path}.calculated_members[{i}]"
            member = CalculatedMember(
                name=_require(c, "name", item_path),
                dimension=_require(c, "dimension", item_path),
                formula=_require(c, "formula", item_path),
                visible=c.get("visible", True),
            )
            self._apply_annotations(member, c, item_path)
            cube.add_calculated_member(member)

        for i, n in enumerate(_list(data, "named_sets", path)):
            item_path = f"{path}.named_sets[{i}]"
            named_set = NamedSet(
                name=_require(n, "name", item_path),
                formula=_require(n, "formula", item_path),
                visible=n.get("visible", True),
            )
            self._apply_annotations(named_set, n, item_path)
            cube.add_named_set(named_set)

        return cube

    @_located
    def _build_source(self, data: Any, path: str) -> Table | View:
        """
        Build a source from either compact notation or a mapping.

        - ``"schema.table"`` / ``"alias:formula"``
        - ``{table: sales, schema: public}``
        - ``{alias: v, formula: "select ..."}``
        """
        if isinstance(data, str):
            return Source.from_str(data)

        if not isinstance(data, dict):
            raise SchemaDefinitionError("source must be a string or a mapping", path)

        source: Table | View
        if "table" in data:
            source = Source.new_table(_require(data, "table", path), data.get("schema"))
        elif "alias" in data:
            source = Source.new_view(data["alias"], _require(data, "formula", path))
        else:
            raise SchemaDefinitionError("source mapping needs 'table' or 'alias'", path)

        self._apply_annotations(source, data, path)
        return source

    @_located
    def _build_dimension(self, data: dict[str, Any], path: str) -> Dimension:
        _mapping(data, path)
        dimension = Dimension(name=_require(data, "name", path))
        self._apply_annotations(dimension, data, path)

        for i, h in enumerate(_list(data, "hierarchies", path)):
            dimension.add_hierarchy(self._build_hierarchy(h, f"{path}.hierarchies[{i}]"))

        return dimension

    @_located
    def _build_hierarchy(self, data: dict[str, Any], path: str) -> Hierarchy:
        _mapping(data, path)
        source = None
        if data.get("source") is not None:
            source = self._build_source(data["source"], f"{path}.source")

        hierarchy = Hierarchy(
            name=data.get("name"),
            source=source,
            has_all=data.get("has_all", True),
        )
        self._apply_annotations(hierarchy, data, path)

        for i, lv in enumerate(_list(data, "levels", path)):
            hierarchy.add_level(self._build_level(lv, f"{path}.levels[{i}]"))

        return hierarchy

    @_located
    def _build_level(self, data: dict[str, Any], path: str) -> Level:
        _mapping(data, path)
        level = Level(
            name=_require(data, "name", path),
            column=_require(data, "column", path),
            name_column=data.get("name_column"),
            level_type=data.get("level_type"),
            type=data.get("type"),
            unique_members=data.get("unique_members", False),
        )
        self._apply_annotations(level, data, path)

        for i, p in enumerate(_list(data, "properties", path)):
            item_path = f"{path}.properties[{i}]"
            prop = Property(
                name=_require(p, "name", item_path),
                column=_require(p, "column", item_path),
            )
            self._apply_annotations(prop, p, item_path)
            level.add_property(prop)

        return level

    @_located
    def _build_dimension_usage(self, data: dict[str, Any], path: str) -> DimensionUsage:
        _mapping(data, path)
        usage = DimensionUsage(
            name=_require(data, "name", path),
            source=_require(data, "source", path),
            foreign_key=_require(data, "foreign_key", path),
        )
        self._apply_annotations(usage, data, path)
        return usage

    @_located
    def _build_measure(self, data: dict[str, Any], path: str) -> Measure:
        _mapping(data, path)
        measure = Measure(
            name=_require(data, "name", path),
            column=_require(data, "column", path),
            aggregator=self._build_aggregator(
                _require(data, "aggregator", path), f"{path}.aggregator"
            ),
            visible=data.get("visible", True),
        )
        self._apply_annotations(measure, data, path)
        return measure

    @_located
    def _build_aggregator(self, data: Any, path: str) -> Aggregator:
        """
        Build an aggregator from a variant name or a mapping.

        - ``sum`` / ``distinct-count`` / ...
        - ``{kind: median, database: postgres, formula: "..."}``
        - ``{kind: custom, formula: "..."}``
        """
        if isinstance(data, str):
            data = {"kind": data}
        if not isinstance(data, dict):
            raise SchemaDefinitionError("aggregator must be a string or a mapping", path)

        kind_str = _require(data, "kind", path)
        try:
            kind = AggregatorKind(kind_str)
        except ValueError:
            valid = [k.value for k in AggregatorKind]
            raise SchemaDefinitionError(
                f"Invalid aggregator '{kind_str}'. Valid: {valid}", path
            )

        if kind == AggregatorKind.MEDIAN:
            db_str = _require(data, "database", path)
            try:
                database = Database(str(db_str).lower())
            except ValueError:
                valid = [d.value for d in Database]
                raise SchemaDefinitionError(
                    f"Invalid database '{db_str}'. Valid: {valid}", path
                )
            return Aggregator.median(database, _require(data, "formula", path))

        if kind == AggregatorKind.CUSTOM:
            return Aggregator.custom(_require(data, "formula", path))

        return Aggregator(kind=kind)

    def _apply_annotations(self, entity: AnnotatedEntity, data: dict[str, Any], path: str) -> None:
        """
        Add annotations from either a mapping or a list of name/value pairs.

        The list form allows repeated names.
        """
        annotations = data.get("annotations")
        if not annotations:
            return

        if isinstance(annotations, dict):
            for name, value in annotations.items():
                entity.add_annotation(str(name), _text(value))
        elif isinstance(annotations, list):
            for i, item in enumerate(annotations):
                item_path = f"{path}.annotations[{i}]"
                if not isinstance(item, dict):
                    raise SchemaDefinitionError("annotation must be a mapping", item_path)
                entity.add_annotation(
                    str(_require(item, "name", item_path)),
                    _text(item.get("value")),
                )
        else:
            raise SchemaDefinitionError("annotations must be a mapping or a list", path)


def _mapping(data: Any, path: str) -> None:
    if not isinstance(data, dict):
        raise SchemaDefinitionError("expected a mapping", path or None)


def _require(data: dict[str, Any], key: str, path: str) -> Any:
    _mapping(data, path)
    if data.get(key) is None:
        raise SchemaDefinitionError(f"missing required key '{key}'", path or None)
    return data[key]


def _list(data: dict[str, Any], key: str, path: str) -> list[Any]:
    items = data.get(key) or []
    if not isinstance(items, list):
        raise SchemaDefinitionError(f"'{key}' must be a list", path)
    return items


def _text(value: Any) -> str:
    """YAML scalars may be numbers or booleans; annotation values are text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _describe(error: ValidationError) -> str:
    """First validation failure as 'field: message'."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    return f"{field}: {first['msg']}" if field else first["msg"]
