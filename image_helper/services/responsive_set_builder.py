from __future__ import annotations

from typing import Iterable, List, Mapping, Tuple, Union

from image_helper.models import ResponsiveDescriptor

from .base import RecordLike
from .derivative_url import DerivativeUrlResolver
from .reference_resolver import ReferenceResolver

DEFAULT_SIZES_HINT = "100vw"

WidthMap = Union[Mapping[str, int], Iterable[Tuple[str, int]]]


class ResponsiveSetBuilder:
    """Builds ``src``/``srcset`` data from a list of (image style, width) pairs."""

    def __init__(
        self,
        resolver: ReferenceResolver,
        derivatives: DerivativeUrlResolver,
        *,
        sizes_hint: str = DEFAULT_SIZES_HINT,
    ) -> None:
        self._resolver = resolver
        self._derivatives = derivatives
        self._sizes_hint = sizes_hint

    def get_responsive_image_data(
        self,
        record: RecordLike,
        field_name: str,
        width_map: WidthMap,
    ) -> ResponsiveDescriptor | None:
        ref = self._resolver.resolve(record, field_name)
        if ref is None:
            return None

        pairs = width_map.items() if isinstance(width_map, Mapping) else width_map

        srcset: List[str] = []
        src: str | None = None
        for profile_name, width in pairs:
            url = self._derivatives.build_url(ref.file_uri, profile_name)
            if not url:
                continue
            srcset.append(f"{url} {width}w")
            if src is None:
                src = url

        if src is None:
            return None

        return ResponsiveDescriptor(
            src=src,
            srcset=", ".join(srcset),
            sizes_hint=self._sizes_hint,
        )
