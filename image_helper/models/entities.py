"""Content entities carrying image fields.

Records and media entities store their values under field names, each field
holding an ordered list of items:

    record.fields["field_image"] -> [FieldItem(entity=File(...), alt=..., title=...)]
    record.fields["field_gallery"] -> [FieldItem(entity=Media(...)), ...]

A media entity wraps exactly one file in its own image sub-field
(``field_media_image`` unless configured otherwise).
"""
from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """Any referenced entity the image pipeline has no special handling for."""

    model_config = ConfigDict(extra="allow")

    entity_type: str
    id: str | None = None


class File(BaseModel):
    entity_type: Literal["file"] = "file"
    id: str | None = None
    uri: str  # e.g. public://2024-05/photo.jpg or gs://bucket/key.jpg
    filename: str | None = None
    mime_type: str | None = None


class FieldItem(BaseModel):
    """One value of a reference field, plus the alt/title stored alongside it."""

    entity: File | Media | Entity | None = Field(default=None, union_mode="left_to_right")
    alt: str | None = None
    title: str | None = None


class _Fieldable(BaseModel):
    fields: Dict[str, List[FieldItem]] = {}

    def has_field(self, name: str) -> bool:
        return name in self.fields

    def get_field_values(self, name: str) -> List[FieldItem]:
        return list(self.fields.get(name) or [])


class Media(_Fieldable):
    entity_type: Literal["media"] = "media"
    id: str | None = None
    bundle: str = "image"
    name: str | None = None


class ContentRecord(_Fieldable):
    """A content record (node, block, term...) read by the image helpers."""

    entity_type: str = "node"
    id: str | None = None
    bundle: str | None = None
    label: str | None = None


FieldItem.model_rebuild()
Media.model_rebuild()
ContentRecord.model_rebuild()
