"""Absolute URLs for stored image files.

File URIs come in these shapes:

    public://2024-05/photo.jpg   -> {site}/{files_path}/2024-05/photo.jpg
    gs://{bucket}/{key}          -> Cloud Storage public or signed URL
    private://{key}              -> same, in the configured bucket
    https://cdn.example/a.jpg    -> returned unchanged

Whether Cloud Storage objects get public or signed URLs depends on
``settings.public_images``.
"""
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Tuple
from urllib.parse import quote

from google.cloud import storage

from image_helper.config import Settings

logger = logging.getLogger(__name__)


class StorageUrlGenerator:  # pylint: disable=too-few-public-methods
    """Turns file URIs into URLs a browser can fetch."""

    _PASSTHROUGH_SCHEMES = ("http", "https")

    def __init__(self, settings: Settings, *, client: storage.Client | None = None) -> None:
        self._settings = settings
        self._client = client
        self._files_url = settings.public_files_url

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------

    def absolute(self, file_uri: str) -> str:
        scheme, target = _split_uri(file_uri)

        if scheme in self._PASSTHROUGH_SCHEMES:
            return file_uri
        if scheme == "gs":
            bucket_name, _, blob_name = target.partition("/")
            return self._cloud_storage_url(bucket_name, blob_name)
        if scheme == "private":
            return self._cloud_storage_url(self._settings.bucket_name, target)
        if scheme == "public":
            return f"{self._files_url}/{quote(target)}"
        raise ValueError("Unsupported file URI scheme %r in %s" % (scheme, file_uri))

    # ------------------------------------------------------------------
    # Cloud Storage
    # ------------------------------------------------------------------

    @property
    def client(self) -> storage.Client:
        if self._client is None:
            self._client = storage.Client()
        return self._client

    def _cloud_storage_url(self, bucket_name: str, blob_name: str) -> str:
        if not blob_name:
            raise ValueError("Cloud Storage URI has no object key (bucket %s)" % bucket_name)

        blob = self.client.bucket(bucket_name).blob(blob_name)
        if self._settings.public_images:
            return blob.public_url

        expires = timedelta(seconds=self._settings.signed_url_ttl_seconds)
        url = blob.generate_signed_url(expiration=expires, version="v4")
        logger.debug("Signed URL generated for gs://%s/%s", bucket_name, blob_name)
        return url


# ------------------------------------------------------------------
# Helper functions
# ------------------------------------------------------------------

def _split_uri(file_uri: str) -> Tuple[str, str]:
    scheme, sep, target = file_uri.partition("://")
    if not sep or not scheme:
        raise ValueError("Malformed file URI: %r" % file_uri)
    return scheme.lower(), target.lstrip("/")
