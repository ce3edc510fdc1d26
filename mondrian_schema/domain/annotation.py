"""Annotation domain - free-form name/value metadata."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Annotation(BaseModel):
    """A single name/value pair. Rendered as the element text, not an attribute."""

    name: str
    value: str

    model_config = {"frozen": True}


class AnnotatedEntity(BaseModel):
    """
    Base for every entity that carries an ordered annotation list.

    Duplicate names are kept; all of them are rendered in insertion order.
    """

    annotations: list[Annotation] = Field(default_factory=list)

    def add_annotation(self, name: str | Annotation, value: str | None = None) -> Annotation:
        """Append an annotation, given either a name/value pair or an Annotation."""
        if isinstance(name, Annotation):
            annotation = name
        else:
            annotation = Annotation(name=name, value=value or "")
        self.annotations.append(annotation)
        return annotation

    @property
    def has_annotations(self) -> bool:
        return bool(self.annotations)

    model_config = {"frozen": False}
