from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Iterable

from image_helper.config import Settings, get_settings
from image_helper.models import ImageStyleConfig

from .base import DerivativeProfile
from .image_style import ImageStyle

logger = logging.getLogger(__name__)


class ProfileRegistry:
    """Name -> derivative profile lookup. Unknown names load as ``None``."""

    def __init__(self, profiles: Iterable[DerivativeProfile] = ()) -> None:
        self._profiles: Dict[str, DerivativeProfile] = {}
        for profile in profiles:
            self.register(profile)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProfileRegistry":
        return cls.from_configs(
            settings.image_styles,
            files_url=settings.public_files_url,
            token_key=settings.image_style_token_key,
        )

    @classmethod
    def from_configs(
        cls, configs: Iterable[ImageStyleConfig], *, files_url: str, token_key: str
    ) -> "ProfileRegistry":
        return cls(ImageStyle(c, files_url=files_url, token_key=token_key) for c in configs)

    def register(self, profile: DerivativeProfile) -> None:
        if profile.name in self._profiles:
            logger.warning("Replacing image style %s", profile.name)
        self._profiles[profile.name] = profile

    def load(self, name: str) -> DerivativeProfile | None:
        return self._profiles.get(name)

    def names(self) -> list[str]:
        return list(self._profiles)


@lru_cache()
def get_profile_registry() -> ProfileRegistry:
    registry = ProfileRegistry.from_settings(get_settings())
    logger.info("Loaded image styles: %s", ", ".join(registry.names()) or "(none)")
    return registry
