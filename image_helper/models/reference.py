"""Resolved field references and the failure reasons of the image pipeline."""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel


class ResolutionFailure(str, Enum):
    FIELD_ABSENT = "field_absent"
    FIELD_EMPTY = "field_empty"
    REFERENCE_UNSUPPORTED = "reference_unsupported"
    PROFILE_NOT_FOUND = "profile_not_found"
    TRANSFORM_FAILURE = "transform_failure"


class DirectFile(BaseModel):
    """A file attached directly to the field; alt/title come from the field item."""

    kind: Literal["file"] = "file"
    file_uri: str
    alt: str = ""
    title: str = ""


class MediaWrapped(BaseModel):
    """A file reached through a media entity's image sub-field."""

    kind: Literal["media"] = "media"
    file_uri: str
    alt: str = ""
    title: str = ""


FieldReference = Optional[Union[DirectFile, MediaWrapped]]


class DerivativeResult(BaseModel):
    """Outcome of a derivative lookup: either a URL or the reason there is none."""

    url: str | None = None
    failure: ResolutionFailure | None = None

    @property
    def ok(self) -> bool:
        return self.url is not None
