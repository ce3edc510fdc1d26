"""Annotation rendering shared by every entity renderer."""

from xml.etree.ElementTree import Element, SubElement

from mondrian_schema.domain import Annotation


def render_annotations(parent: Element, annotations: list[Annotation]) -> Element | None:
    """
    Append an <Annotations> block to parent.

    Nothing is appended for an empty list: an empty <Annotations/> element is
    never produced.
    """
    if not annotations:
        return None

    container = SubElement(parent, "Annotations")
    for annotation in annotations:
        element = SubElement(container, "Annotation")
        element.set("name", annotation.name)
        element.text = annotation.value
    return container


def render_bool(value: bool) -> str:
    """Booleans are written as lowercase true/false."""
    return "true" if value else "false"
