"""Template helpers for image URLs and text teasers.

Register these with the template environment, e.g. for Jinja2:

    env.filters["image_style"] = image_style
    env.filters["truncate_html"] = truncate_html
    env.globals["image_url"] = image_url

    {{ "public://a.jpg"|image_style("thumbnail") }}
    {{ image_url(node, "field_image", "large") }}

None of the helpers raise; they return ``None`` or ``""`` instead.
"""
from __future__ import annotations

import html as html_lib
import re
from typing import Any

from image_helper.models import File
from image_helper.services.base import RecordLike
from image_helper.services.image_helper import ImageHelper, get_image_helper

_TAG_RE = re.compile(r"<[^>]*>")


def image_style(value: Any, style_name: str, *, helper: ImageHelper | None = None) -> str | None:
    """Apply *style_name* to a file URI string or a :class:`File`."""

    if not style_name:
        return None

    if isinstance(value, File):
        file_uri = value.uri
    elif isinstance(value, str) and value:
        file_uri = value
    else:
        return None

    helper = helper or get_image_helper()
    return helper.derivatives.build_url(file_uri, style_name)


def image_url(
    record: RecordLike,
    field_name: str,
    style_name: str | None = None,
    *,
    helper: ImageHelper | None = None,
) -> str | None:
    helper = helper or get_image_helper()
    return helper.get_image_url(record, field_name, style_name)


def truncate_html(html: str | None, length: int = 200, suffix: str = "...") -> str:
    """Shorten *html* to at most *length* characters of text, on a word boundary.

    Markup is kept when the text already fits; otherwise the plain text is
    truncated and returned without tags, with HTML special characters escaped.
    """

    if not html:
        return ""

    text = html_lib.unescape(_TAG_RE.sub("", html))
    if len(text) <= length:
        return html

    truncated = text[:length]
    last_space = truncated.rfind(" ")
    if last_space != -1:
        truncated = truncated[:last_space]
    # Entities were decoded for measuring; encode them again.
    return html_lib.escape(truncated, quote=False) + suffix
