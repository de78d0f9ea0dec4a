from __future__ import annotations

from typing import List

from image_helper.models import ResolvedImage

from .base import RecordLike
from .derivative_url import DerivativeUrlResolver
from .reference_resolver import ReferenceResolver


class MultiImageService:
    def __init__(self, resolver: ReferenceResolver, derivatives: DerivativeUrlResolver) -> None:
        self._resolver = resolver
        self._derivatives = derivatives

    def get_image_urls(
        self,
        record: RecordLike,
        field_name: str,
        profile_name: str | None = None,
    ) -> List[ResolvedImage]:
        """Return every resolvable image of a multi-value field, in stored order.

        Items that do not resolve to a file, or whose URL cannot be built,
        are left out rather than replaced by placeholders.
        """

        images: List[ResolvedImage] = []
        for ref in self._resolver.iter_references(record, field_name):
            if ref is None:
                continue
            url = self._derivatives.build_url(ref.file_uri, profile_name)
            if url:
                images.append(ResolvedImage(url=url, alt=ref.alt, title=ref.title))
        return images
