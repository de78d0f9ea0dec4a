from .base import DerivativeProfile
from .image_style import ImageStyle
from .registry import ProfileRegistry, get_profile_registry

__all__ = [
    "DerivativeProfile",
    "ImageStyle",
    "ProfileRegistry",
    "get_profile_registry",
]
