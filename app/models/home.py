from typing import List, Optional

from pydantic import Field, field_validator

from app.models.base import CmsModel, NullableList, ViewModel
from app.models.image import CmsImage
from app.models.richtext import RichNode


class CmsHome(CmsModel):
    """``data`` object of ``GET /api/home``."""

    headline: str
    has_featured: bool = Field(alias="hasFeatured")
    featured: str = ""
    sub_line: str = Field(alias="subLine")
    has_carousel: bool = Field(default=False, alias="hasCarousel")
    carousel: NullableList[CmsImage] = Field(default_factory=list)
    has_newsletter: Optional[bool] = Field(default=None, alias="hasNewsletter")
    newsletter_title: Optional[str] = Field(default=None, alias="newsletterTitle")
    newsletter_description: Optional[str] = Field(default=None, alias="newsletterDescription")
    locale: Optional[str] = None

    @field_validator("featured", mode="before")
    @classmethod
    def featured_default(cls, value):
        return "" if value is None else value


class Featured(ViewModel):
    display: bool
    title: str
    href: str


class CarouselImage(ViewModel):
    id: str
    alt: str
    caption: str
    url: str


class Carousel(ViewModel):
    display: bool
    images: List[CarouselImage]


class Newsletter(ViewModel):
    display: bool
    title: str
    description: str


class HomePage(ViewModel):
    path: str
    image: str
    label: str
    title: str
    description: str
    loading: bool
    headline: str
    featured: Featured
    subline: List[RichNode]
    carousel: Carousel
    newsletter: Newsletter
