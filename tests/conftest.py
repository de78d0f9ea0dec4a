from __future__ import annotations

import pytest

from image_helper.models import ContentRecord, Entity, FieldItem, File, Media
from image_helper.services.image_helper import ImageHelper
from image_helper.services.styles import DerivativeProfile, ProfileRegistry

FILES_URL = "https://files.test"


class FakeUrlGenerator:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def absolute(self, file_uri: str) -> str:
        self.calls.append(file_uri)
        return f"{FILES_URL}/{file_uri.split('://', 1)[1]}"


class FakeProfile(DerivativeProfile):
    def __init__(self, name: str) -> None:
        self.name = name

    def build_url(self, file_uri: str) -> str:
        return f"{FILES_URL}/styles/{self.name}/{file_uri.split('://', 1)[1]}"


class BrokenProfile(DerivativeProfile):
    def __init__(self, name: str) -> None:
        self.name = name

    def build_url(self, file_uri: str) -> str:
        raise OSError("derivative storage unavailable")


def file_item(uri: str, alt: str | None = None, title: str | None = None) -> FieldItem:
    return FieldItem(entity=File(uri=uri), alt=alt, title=title)


def media_item(
    uri: str | None,
    alt: str | None = None,
    title: str | None = None,
    *,
    image_field: str = "field_media_image",
) -> FieldItem:
    fields = {image_field: [file_item(uri, alt, title)]} if uri else {}
    # Alt/title on the referencing item are ignored for media.
    return FieldItem(entity=Media(id="m1", fields=fields), alt="outer alt", title="outer title")


def term_item() -> FieldItem:
    return FieldItem(entity=Entity(entity_type="taxonomy_term", id="7"))


def make_record(**fields: list[FieldItem]) -> ContentRecord:
    return ContentRecord(id="1", fields=fields)


@pytest.fixture()
def url_generator() -> FakeUrlGenerator:
    return FakeUrlGenerator()


@pytest.fixture()
def registry() -> ProfileRegistry:
    return ProfileRegistry(
        [FakeProfile("thumbnail"), FakeProfile("medium"), BrokenProfile("broken")]
    )


@pytest.fixture()
def helper(registry: ProfileRegistry, url_generator: FakeUrlGenerator) -> ImageHelper:
    return ImageHelper(registry, url_generator)
