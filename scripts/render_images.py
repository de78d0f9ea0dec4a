#!/usr/bin/env python
"""Print the image descriptors of a content record stored as JSON."""
from __future__ import annotations

import argparse
import json
from pathlib import Path

from image_helper.models import ContentRecord
from image_helper.services.image_helper import get_image_helper


def _parse_size(value: str) -> tuple[str, int]:
    style, _, width = value.partition(":")
    if not style or not width.isdigit():
        raise argparse.ArgumentTypeError("expected STYLE:WIDTH, got %r" % value)
    return style, int(width)


def main() -> None:
    parser = argparse.ArgumentParser(description="Resolve image URLs for a content record")
    parser.add_argument("record", type=Path, help="JSON file holding the record")
    parser.add_argument("--field", default="field_image")
    parser.add_argument("--style", default=None)
    parser.add_argument("--fallback_field", default=None)
    parser.add_argument(
        "--size",
        dest="sizes",
        action="append",
        type=_parse_size,
        default=[],
        help="STYLE:WIDTH pair for the srcset; repeatable",
    )
    args = parser.parse_args()

    record = ContentRecord.model_validate_json(args.record.read_text())
    helper = get_image_helper()

    responsive = helper.get_responsive_image_data(record, args.field, args.sizes) if args.sizes else None
    result = {
        "url": helper.get_image_url(record, args.field, args.style, args.fallback_field),
        "images": [img.model_dump() for img in helper.get_image_urls(record, args.field, args.style)],
        "responsive": responsive.model_dump() if responsive else None,
        "share": helper.get_share_image(record),
    }
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
