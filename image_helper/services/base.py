"""Collaborator interfaces consumed by the image pipeline."""
from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence


class FieldItemLike(Protocol):
    entity: Any
    alt: Optional[str]
    title: Optional[str]


class RecordLike(Protocol):
    """Read-only field access on a content record or media entity."""

    def has_field(self, name: str) -> bool: ...

    def get_field_values(self, name: str) -> Sequence[FieldItemLike]: ...


class UrlGenerator(Protocol):
    def absolute(self, file_uri: str) -> str: ...


class ProfileLike(Protocol):
    name: str

    def build_url(self, file_uri: str) -> str: ...


class ProfileRegistryLike(Protocol):
    def load(self, name: str) -> Optional[ProfileLike]: ...
