from __future__ import annotations

from datetime import timedelta

import pytest

from image_helper.config import Settings
from image_helper.services.storage import StorageUrlGenerator


class FakeBlob:
    def __init__(self, bucket: str, name: str) -> None:
        self.bucket = bucket
        self.name = name

    @property
    def public_url(self) -> str:
        return f"https://storage.googleapis.com/{self.bucket}/{self.name}"

    def generate_signed_url(self, **kwargs) -> str:
        return f"{self.public_url}?X-Goog-Signature=abc"


class FakeBucket:
    def __init__(self, name: str) -> None:
        self.name = name

    def blob(self, name: str) -> FakeBlob:
        return FakeBlob(self.name, name)


class FakeClient:
    def bucket(self, name: str) -> FakeBucket:
        return FakeBucket(name)


def _generator(**overrides) -> StorageUrlGenerator:
    settings = Settings(site_base_url="https://example.com", bucket_name="site-images", **overrides)
    return StorageUrlGenerator(settings, client=FakeClient())


def test_public_scheme_maps_under_files_url():
    assert _generator().absolute("public://2024/a b.jpg") == (
        "https://example.com/sites/default/files/2024/a%20b.jpg"
    )


def test_http_uri_passes_through():
    assert _generator().absolute("https://cdn.test/a.jpg") == "https://cdn.test/a.jpg"


def test_gs_uri_public_url():
    assert _generator(public_images=True).absolute("gs://photos/users/1.jpg") == (
        "https://storage.googleapis.com/photos/users/1.jpg"
    )


def test_private_uri_signed_url(monkeypatch):
    captured = {}
    original = FakeBlob.generate_signed_url

    def spy(self, **kwargs):
        captured.update(kwargs)
        return original(self, **kwargs)

    monkeypatch.setattr(FakeBlob, "generate_signed_url", spy)

    url = _generator(public_images=False, signed_url_ttl_seconds=60).absolute("private://doc.jpg")

    assert url == "https://storage.googleapis.com/site-images/doc.jpg?X-Goog-Signature=abc"
    assert captured["expiration"] == timedelta(seconds=60)


@pytest.mark.parametrize("uri", ["no-scheme.jpg", "ftp://host/a.jpg", "gs://bucket-only"])
def test_unsupported_uris_raise(uri):
    with pytest.raises(ValueError):
        _generator().absolute(uri)
