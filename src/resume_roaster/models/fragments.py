"""Render-agnostic display fragments.

Fragments are rebuilt on every render and never persisted. Each carries a
``kind`` tag so a list of them can be validated as a discriminated union.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class TextRun(BaseModel):
    text: str
    emphasized: bool = False


class Heading(BaseModel):
    kind: Literal["heading"] = "heading"
    text: str


class Paragraph(BaseModel):
    kind: Literal["paragraph"] = "paragraph"
    segments: list[TextRun] = []

    @property
    def text(self) -> str:
        return "".join(seg.text for seg in self.segments)

    @classmethod
    def plain(cls, text: str) -> Paragraph:
        return cls(segments=[TextRun(text=text)])


class BulletItem(BaseModel):
    kind: Literal["bullet"] = "bullet"
    text: str


class TableRow(BaseModel):
    kind: Literal["table_row"] = "table_row"
    title: str
    details: list[str] = []


class TagList(BaseModel):
    kind: Literal["tag_list"] = "tag_list"
    tags: list[str]


class HeadingGroup(BaseModel):
    """A critique heading rendered together with its paragraph."""

    kind: Literal["heading_group"] = "heading_group"
    heading: Heading
    body: Paragraph


class ContactCard(BaseModel):
    kind: Literal["contact"] = "contact"
    name: str
    details: list[str] = []


Fragment = Annotated[
    Union[Heading, Paragraph, BulletItem, TableRow, TagList, HeadingGroup, ContactCard],
    Field(discriminator="kind"),
]
