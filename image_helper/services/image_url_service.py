from __future__ import annotations

from .base import RecordLike
from .derivative_url import DerivativeUrlResolver
from .reference_resolver import ReferenceResolver


class ImageUrlService:
    """Single image URL for a record field, with an optional fallback field."""

    def __init__(self, resolver: ReferenceResolver, derivatives: DerivativeUrlResolver) -> None:
        self._resolver = resolver
        self._derivatives = derivatives

    def get_image_url(
        self,
        record: RecordLike,
        field_name: str,
        profile_name: str | None = None,
        fallback_field_name: str | None = None,
    ) -> str | None:
        ref = self._resolver.resolve(record, field_name)

        # The fallback covers a missing image only, not a failing style.
        if ref is None and fallback_field_name:
            ref = self._resolver.resolve(record, fallback_field_name)

        if ref is None:
            return None
        return self._derivatives.build_url(ref.file_uri, profile_name)
