"""Image styles addressed by URL.

Derivatives live under the public files URL:

    {files_url}/styles/{style}/{scheme}/{target}?itok={token}

where ``public://2024/a.jpg`` has scheme ``public`` and target ``2024/a.jpg``.
The ``itok`` token is an HMAC of style name and source URI so derivative URLs
cannot be requested for arbitrary style/source pairs.
"""
from __future__ import annotations

import base64
import hashlib
import hmac
from urllib.parse import quote

from image_helper.models import ImageStyleConfig

from .base import DerivativeProfile

TOKEN_LENGTH = 8


class ImageStyle(DerivativeProfile):
    def __init__(self, config: ImageStyleConfig, *, files_url: str, token_key: str) -> None:
        self.config = config
        self.name = config.name
        self._files_url = files_url.rstrip("/")
        self._token_key = token_key.encode()

    def build_url(self, file_uri: str) -> str:
        scheme, sep, target = file_uri.partition("://")
        if not sep or not scheme or not target:
            raise ValueError("Malformed file URI: %r" % file_uri)

        path = quote(target.lstrip("/"))
        return f"{self._files_url}/styles/{self.name}/{scheme}/{path}?itok={self.token(file_uri)}"

    def token(self, file_uri: str) -> str:
        digest = hmac.new(
            key=self._token_key,
            msg=f"{self.name}:{file_uri}".encode(),
            digestmod=hashlib.sha256,
        ).digest()
        return base64.urlsafe_b64encode(digest).decode()[:TOKEN_LENGTH]

    def __repr__(self) -> str:
        return f"ImageStyle(name={self.name!r}, width={self.config.width}, height={self.config.height})"
