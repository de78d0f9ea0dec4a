from __future__ import annotations

from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from image_helper.models import ImageStyleConfig

# Load environment variables from a .env file if present (local dev only)
load_dotenv()

DEFAULT_IMAGE_STYLES = [
    ImageStyleConfig(name="thumbnail", width=100, height=100),
    ImageStyleConfig(name="medium", width=220, height=220),
    ImageStyleConfig(name="large", width=480, height=480),
    ImageStyleConfig(name="wide", width=1090),
]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Site / public files
    site_base_url: str = Field("http://localhost:8000", validation_alias="SITE_BASE_URL")
    public_files_path: str = Field("/sites/default/files", validation_alias="PUBLIC_FILES_PATH")

    # Cloud Storage
    bucket_name: str = Field("site-images", validation_alias="BUCKET_NAME")
    public_images: bool = Field(
        True,
        validation_alias="PUBLIC_IMAGES",
        description="If false, gs:// files are served through signed URLs instead of public ones.",
    )
    signed_url_ttl_seconds: int = Field(3600, ge=1, validation_alias="SIGNED_URL_TTL_SECONDS")

    # Image styles (derivative profiles)
    image_styles: List[ImageStyleConfig] = Field(
        default_factory=lambda: list(DEFAULT_IMAGE_STYLES),
        validation_alias="IMAGE_STYLES",
        description="JSON list of {name, width, height, effect} objects.",
    )
    image_style_token_key: str = Field("change-me", validation_alias="IMAGE_STYLE_TOKEN_KEY")

    # Field conventions
    media_image_field: str = Field("field_media_image", validation_alias="MEDIA_IMAGE_FIELD")
    responsive_sizes_hint: str = Field("100vw", validation_alias="RESPONSIVE_SIZES_HINT")
    share_image_fields: List[str] = Field(
        default_factory=lambda: ["field_image", "field_media_image", "field_thumbnail"],
        validation_alias="SHARE_IMAGE_FIELDS",
    )

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    @property
    def public_files_url(self) -> str:
        return self.site_base_url.rstrip("/") + "/" + self.public_files_path.strip("/")


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
