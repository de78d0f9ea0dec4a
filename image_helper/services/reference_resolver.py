"""Resolve an image field on a record to the file that backs it.

Two storage shapes are supported:

* direct file reference: ``record.field_image -> File``
* media reference: ``record.field_image -> Media.field_media_image -> File``

Entities are told apart by their ``entity_type``: ``"file"`` entities carry a
``uri``, ``"media"`` entities expose ``has_field``/``get_field_values``. The
models in :mod:`image_helper.models` follow this, and so can any other store.

Media indirection is followed one level only. Any other shape resolves to
``None``; nothing in this module raises for unexpected content.
"""
from __future__ import annotations

import logging
from typing import Iterator, Optional

from image_helper.models import (
    DirectFile,
    FieldReference,
    MediaWrapped,
    ResolutionFailure,
)

from .base import FieldItemLike, RecordLike

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_IMAGE_FIELD = "field_media_image"


class ReferenceResolver:
    """Kind detection for image field items, shared by all image services."""

    def __init__(
        self,
        *,
        media_image_field: str = DEFAULT_MEDIA_IMAGE_FIELD,
        log: logging.Logger | None = None,
    ) -> None:
        self._media_image_field = media_image_field
        self._logger = log or logger

    def resolve(self, record: RecordLike, field_name: str) -> FieldReference:
        """Return the reference held by the first value of *field_name*."""

        failure = self._check_field(record, field_name)
        if failure is not None:
            self._logger.debug("Field %s not resolved: %s", field_name, failure.value)
            return None
        return self.resolve_item(record.get_field_values(field_name)[0])

    def iter_references(self, record: RecordLike, field_name: str) -> Iterator[FieldReference]:
        """Yield one reference (or ``None``) per stored value, in stored order."""

        if self._check_field(record, field_name) is not None:
            return
        for item in record.get_field_values(field_name):
            yield self.resolve_item(item)

    def resolve_item(self, item: Optional[FieldItemLike]) -> FieldReference:
        entity = getattr(item, "entity", None)

        kind = entity_kind(entity)
        if kind == "media":
            return self._unwrap_media(entity)

        if kind == "file":
            return DirectFile(
                file_uri=entity.uri,
                alt=getattr(item, "alt", None) or "",
                title=getattr(item, "title", None) or "",
            )

        self._logger.debug(
            "Unsupported reference %r: %s",
            getattr(entity, "entity_type", type(entity).__name__),
            ResolutionFailure.REFERENCE_UNSUPPORTED.value,
        )
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _check_field(record: RecordLike, field_name: str) -> ResolutionFailure | None:
        if not record.has_field(field_name):
            return ResolutionFailure.FIELD_ABSENT
        if not record.get_field_values(field_name):
            return ResolutionFailure.FIELD_EMPTY
        return None

    def _unwrap_media(self, media: RecordLike) -> FieldReference:
        if not media.has_field(self._media_image_field):
            self._logger.debug(
                "Media %s has no %s field", getattr(media, "id", None), self._media_image_field
            )
            return None

        values = media.get_field_values(self._media_image_field)
        if not values or entity_kind(values[0].entity) != "file":
            return None

        # Media -> Media is not followed.
        media_item = values[0]
        return MediaWrapped(
            file_uri=media_item.entity.uri,
            alt=getattr(media_item, "alt", None) or "",
            title=getattr(media_item, "title", None) or "",
        )


def entity_kind(entity: object) -> str | None:
    """``"file"``, ``"media"`` or ``None`` for anything the pipeline cannot use."""

    entity_type = getattr(entity, "entity_type", None)
    if entity_type == "file" and isinstance(getattr(entity, "uri", None), str):
        return "file"
    if entity_type == "media" and callable(getattr(entity, "get_field_values", None)):
        return "media"
    return None
