"""Schema - the top-level container handed to the renderer."""

from __future__ import annotations

from pydantic import Field

from mondrian_schema.domain.annotation import AnnotatedEntity
from mondrian_schema.domain.cube import Cube
from mondrian_schema.domain.dimension import Dimension


class Schema(AnnotatedEntity):
    """
    A Mondrian schema: an ordered list of cubes.

    ``dimensions`` holds schema-level shared dimensions. It can only be filled
    through the constructor; there is deliberately no ``add_dimension`` here,
    so schemas built with the builder API never render shared dimensions.
    """

    name: str
    dimensions: list[Dimension] = Field(default_factory=list)
    cubes: list[Cube] = Field(default_factory=list)

    def add_cube(self, cube: Cube) -> Cube:
        self.cubes.append(cube)
        return cube

    def get_cube(self, name: str) -> Cube | None:
        for cube in self.cubes:
            if cube.name == name:
                return cube
        return None

    def summary(self) -> str:
        dimensions = sum(len(c.dimensions) for c in self.cubes)
        measures = sum(len(c.measures) for c in self.cubes)
        return (
            f"Schema({self.name}): "
            f"{len(self.cubes)} cubes, "
            f"{dimensions} dimensions, "
            f"{measures} measures"
        )
