from .entities import ContentRecord, Entity, FieldItem, File, Media
from .image import ResolvedImage, ResponsiveDescriptor
from .image_style import ImageStyleConfig
from .reference import (
    DerivativeResult,
    DirectFile,
    FieldReference,
    MediaWrapped,
    ResolutionFailure,
)

__all__ = [
    "ContentRecord",
    "Entity",
    "FieldItem",
    "File",
    "Media",
    "ResolvedImage",
    "ResponsiveDescriptor",
    "ImageStyleConfig",
    "DerivativeResult",
    "DirectFile",
    "FieldReference",
    "MediaWrapped",
    "ResolutionFailure",
]
