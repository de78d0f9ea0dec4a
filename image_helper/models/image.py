from __future__ import annotations

from pydantic import BaseModel, Field


class ResolvedImage(BaseModel):
    """One image ready for a template: URL plus alt/title text."""

    url: str
    alt: str = ""
    title: str = ""


class ResponsiveDescriptor(BaseModel):
    src: str
    srcset: str  # "url 100w, url 300w"
    sizes_hint: str = Field("100vw", description="Value for the <img sizes> attribute.")
