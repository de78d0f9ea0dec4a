"""Image descriptor endpoints for render previews and external renderers.

Each endpoint receives a serialized content record and returns the same
descriptors the template helpers produce. Missing images are reported as
``null`` / empty lists, never as errors.
"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from image_helper.models import ContentRecord, ResolvedImage, ResponsiveDescriptor
from image_helper.services.image_helper import ImageHelper, get_image_helper

router = APIRouter(prefix="/images", tags=["images"])
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Request / response bodies
# ---------------------------------------------------------------------------


class ImageRequest(BaseModel):
    record: ContentRecord
    field_name: str = Field(..., min_length=1)
    style: str | None = None


class ImageUrlRequest(ImageRequest):
    fallback_field: str | None = None


class SizeSpec(BaseModel):
    style: str = Field(..., min_length=1)
    width: int = Field(..., ge=1)


class ResponsiveRequest(BaseModel):
    record: ContentRecord
    field_name: str = Field(..., min_length=1)
    sizes: List[SizeSpec]


class ShareImageRequest(BaseModel):
    record: ContentRecord
    fields: List[str] | None = None


class ImageUrlResponse(BaseModel):
    url: str | None


class ImageListResponse(BaseModel):
    images: List[ResolvedImage]


class ResponsiveResponse(BaseModel):
    image: ResponsiveDescriptor | None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post("/url", response_model=ImageUrlResponse)
def image_url(req: ImageUrlRequest, helper: ImageHelper = Depends(get_image_helper)):
    url = helper.get_image_url(req.record, req.field_name, req.style, req.fallback_field)
    logger.debug("image url %s/%s -> %s", req.record.id, req.field_name, url)
    return ImageUrlResponse(url=url)


@router.post("/list", response_model=ImageListResponse)
def image_list(req: ImageRequest, helper: ImageHelper = Depends(get_image_helper)):
    return ImageListResponse(images=helper.get_image_urls(req.record, req.field_name, req.style))


@router.post("/responsive", response_model=ResponsiveResponse)
def responsive_image(req: ResponsiveRequest, helper: ImageHelper = Depends(get_image_helper)):
    width_map = [(size.style, size.width) for size in req.sizes]
    return ResponsiveResponse(
        image=helper.get_responsive_image_data(req.record, req.field_name, width_map)
    )


@router.post("/share", response_model=ImageUrlResponse)
def share_image(req: ShareImageRequest, helper: ImageHelper = Depends(get_image_helper)):
    return ImageUrlResponse(url=helper.get_share_image(req.record, req.fields))
