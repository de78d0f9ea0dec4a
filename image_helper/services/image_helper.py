"""Image helper facade used by templates, share widgets and the HTTP API.

All methods return ``None`` or an empty list when there is nothing to show;
none of them raise for missing fields, unsupported references or broken
image styles.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Sequence

from image_helper.config import Settings, get_settings
from image_helper.models import ResolvedImage, ResponsiveDescriptor

from .base import ProfileRegistryLike, RecordLike, UrlGenerator
from .derivative_url import DerivativeUrlResolver
from .image_url_service import ImageUrlService
from .multi_image_service import MultiImageService
from .reference_resolver import DEFAULT_MEDIA_IMAGE_FIELD, ReferenceResolver
from .responsive_set_builder import DEFAULT_SIZES_HINT, ResponsiveSetBuilder, WidthMap

logger = logging.getLogger(__name__)

DEFAULT_SHARE_IMAGE_FIELDS = ("field_image", "field_media_image", "field_thumbnail")


class ImageHelper:
    def __init__(
        self,
        registry: ProfileRegistryLike,
        url_generator: UrlGenerator,
        *,
        media_image_field: str = DEFAULT_MEDIA_IMAGE_FIELD,
        sizes_hint: str = DEFAULT_SIZES_HINT,
        share_image_fields: Sequence[str] = DEFAULT_SHARE_IMAGE_FIELDS,
        log: logging.Logger | None = None,
    ) -> None:
        log = log or logger
        self.resolver = ReferenceResolver(media_image_field=media_image_field, log=log)
        self.derivatives = DerivativeUrlResolver(registry, url_generator, log=log)
        self._single = ImageUrlService(self.resolver, self.derivatives)
        self._multi = MultiImageService(self.resolver, self.derivatives)
        self._responsive = ResponsiveSetBuilder(
            self.resolver, self.derivatives, sizes_hint=sizes_hint
        )
        self._share_image_fields = tuple(share_image_fields)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        registry: ProfileRegistryLike,
        url_generator: UrlGenerator,
    ) -> "ImageHelper":
        return cls(
            registry,
            url_generator,
            media_image_field=settings.media_image_field,
            sizes_hint=settings.responsive_sizes_hint,
            share_image_fields=settings.share_image_fields,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_image_url(
        self,
        record: RecordLike,
        field_name: str,
        profile_name: str | None = None,
        fallback_field_name: str | None = None,
    ) -> str | None:
        """Return the URL of the first image in *field_name*.

        Parameters
        ----------
        record : RecordLike
            Record holding the image field.
        field_name : str
            Field referencing a file or an image media entity.
        profile_name : str | None
            Image style to apply. Without one the original file URL is returned.
        fallback_field_name : str | None
            Field to read when *field_name* holds no usable image. It is not
            consulted when the image exists but the style fails.
        """

        return self._single.get_image_url(record, field_name, profile_name, fallback_field_name)

    def get_image_urls(
        self,
        record: RecordLike,
        field_name: str,
        profile_name: str | None = None,
    ) -> List[ResolvedImage]:
        return self._multi.get_image_urls(record, field_name, profile_name)

    def get_responsive_image_data(
        self,
        record: RecordLike,
        field_name: str,
        width_map: WidthMap,
    ) -> ResponsiveDescriptor | None:
        return self._responsive.get_responsive_image_data(record, field_name, width_map)

    def get_share_image(
        self,
        record: RecordLike,
        field_names: Sequence[str] | None = None,
    ) -> str | None:
        """Original-size URL of the first populated common image field."""

        for field_name in field_names or self._share_image_fields:
            if record.has_field(field_name) and record.get_field_values(field_name):
                return self.get_image_url(record, field_name)
        return None


@lru_cache()
def get_image_helper() -> ImageHelper:
    # local import: google.cloud is only needed once a helper is built
    from .storage import StorageUrlGenerator
    from .styles import get_profile_registry

    settings = get_settings()
    return ImageHelper.from_settings(
        settings,
        get_profile_registry(),
        StorageUrlGenerator(settings),
    )
