"""Pydantic models for the rendered layout template."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from pydantic import BaseModel, Field

from mdpress.errors import LayoutParseError

# wkhtmltopdf options; a None value is a bare flag (pdfkit convention).
PdfRenderConfig = dict[str, str | int | float | None]


class LayoutRegion(BaseModel):
    """A header or footer: inline style plus three text cells."""

    style: str = ""
    left: str = ""
    center: str = ""
    right: str = ""

    @property
    def texts(self) -> list[str]:
        return [self.left, self.center, self.right]

    @property
    def has_content(self) -> bool:
        return bool("".join(self.texts).strip())


class LayoutDescriptor(BaseModel):
    """The ``<page>`` element of a layout template."""

    style: str = ""
    header: LayoutRegion = Field(default_factory=LayoutRegion)
    footer: LayoutRegion = Field(default_factory=LayoutRegion)

    @classmethod
    def from_xml(cls, xml: str, template: str = "<string>") -> LayoutDescriptor:
        try:
            root = ET.fromstring(xml)
        except ET.ParseError as e:
            raise LayoutParseError(template, str(e)) from e
        return cls(
            style=root.get("style", ""),
            header=_region(root.find("header")),
            footer=_region(root.find("footer")),
        )


def _region(node: ET.Element | None) -> LayoutRegion:
    if node is None:
        return LayoutRegion()
    return LayoutRegion(
        style=node.get("style", ""),
        left=_text(node.find("left")),
        center=_text(node.find("center")),
        right=_text(node.find("right")),
    )


def _text(node: ET.Element | None) -> str:
    """All text inside ``node``, including text of nested elements.

    ``<right>Page <b>[page]</b></right>`` gives ``"Page [page]"``, not just the
    element's own leading text.
    """
    if node is None:
        return ""
    return "".join(node.itertext())
