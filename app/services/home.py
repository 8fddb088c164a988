"""Mapping of the CMS ``home`` single type onto :class:`HomePage`."""

from typing import Any, Dict

from app.config import Settings
from app.models.base import CmsResponse
from app.models.home import Carousel, CarouselImage, CmsHome, Featured, HomePage, Newsletter
from app.models.static import StaticContent
from app.services.cms_client import parse_payload
from app.services.converter import rich_text
from app.services.images import best_image_url

RESOURCE = "home"


def map_home(payload: Dict[str, Any], static: StaticContent, settings: Settings) -> HomePage:
    """Overlay live CMS *payload* on the static home page.

    Raises:
        ShapeMismatch: if *payload* lacks a required field.
    """
    data = parse_payload(payload, CmsResponse[CmsHome]).data
    default = static.home

    images = []
    if data.has_carousel:
        images = [
            CarouselImage(
                id=str(image.id),
                alt=image.alternative_text or "",
                caption=image.caption or "",
                url=best_image_url(image, settings, "large"),
            )
            for image in data.carousel
        ]

    return default.model_copy(
        update={
            "loading": False,
            "headline": data.headline,
            "featured": Featured(
                display=data.has_featured,
                title=data.featured,
                href=default.featured.href,
            ),
            "subline": rich_text(data.sub_line),
            "carousel": Carousel(display=data.has_carousel, images=images),
            "newsletter": Newsletter(
                display=bool(data.has_newsletter),
                title=data.newsletter_title or default.newsletter.title,
                description=data.newsletter_description or default.newsletter.description,
            ),
        }
    )
