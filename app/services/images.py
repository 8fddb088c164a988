from typing import Tuple

from app.config import Settings
from app.models.image import CmsImage, ImageSize

# Best quality first; the unsized original is the last resort
FALLBACK_ORDER: Tuple[ImageSize, ...] = ("large", "medium", "small", "thumbnail")


def image_url(settings: Settings, path: str) -> str:
    """Return an absolute URL for an upload *path* returned by the CMS.

    Cloud upload providers already return absolute URLs; those are kept as-is.
    """
    if path.startswith(("http://", "https://", "//")):
        return path
    return f"{settings.image_base_url}{path}"


def best_image_url(image: CmsImage, settings: Settings, preferred: ImageSize = "large") -> str:
    """Return the URL of the *preferred* variant, degrading through :data:`FALLBACK_ORDER`."""
    for size in (preferred, *FALLBACK_ORDER):
        variant = image.formats.get(size)
        if variant is not None:
            return image_url(settings, variant.url)
    return image_url(settings, image.url)
