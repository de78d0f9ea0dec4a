"""Derivative (image style) URL lookup.

This is the only place where profile lookups and profile URL builders are
called, so it is also the only place their exceptions are caught. Callers get
a URL or ``None``; the reason for a ``None`` is logged here.
"""
from __future__ import annotations

import logging

from image_helper.models import DerivativeResult, ResolutionFailure

from .base import ProfileRegistryLike, UrlGenerator

logger = logging.getLogger(__name__)


class DerivativeUrlResolver:
    def __init__(
        self,
        registry: ProfileRegistryLike,
        url_generator: UrlGenerator,
        *,
        log: logging.Logger | None = None,
    ) -> None:
        self._registry = registry
        self._url_generator = url_generator
        self._logger = log or logger

    def resolve(self, file_uri: str, profile_name: str | None = None) -> DerivativeResult:
        """Build the URL of *file_uri*, styled by *profile_name* when given."""

        try:
            if not profile_name:
                url = self._url_generator.absolute(file_uri)
            else:
                profile = self._registry.load(profile_name)
                if profile is None:
                    self._logger.warning('Image style "%s" does not exist.', profile_name)
                    return DerivativeResult(failure=ResolutionFailure.PROFILE_NOT_FOUND)
                url = profile.build_url(file_uri)
        except Exception as exc:
            self._logger.error(
                'Error building "%s" URL for %s: %s', profile_name or "original", file_uri, exc
            )
            return DerivativeResult(failure=ResolutionFailure.TRANSFORM_FAILURE)

        if not url:
            self._logger.error('Empty "%s" URL for %s', profile_name or "original", file_uri)
            return DerivativeResult(failure=ResolutionFailure.TRANSFORM_FAILURE)
        return DerivativeResult(url=url)

    def build_url(self, file_uri: str, profile_name: str | None = None) -> str | None:
        return self.resolve(file_uri, profile_name).url
