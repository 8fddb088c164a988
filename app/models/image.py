from typing import Dict, Literal, Optional

from pydantic import Field, field_validator

from app.models.base import CmsModel

ImageSize = Literal["thumbnail", "small", "medium", "large"]


class ImageFormat(CmsModel):
    """One resized variant of an uploaded image."""

    url: str
    width: Optional[int] = None
    height: Optional[int] = None
    mime: Optional[str] = None


class CmsImage(CmsModel):
    id: int
    url: str
    name: Optional[str] = None
    alternative_text: Optional[str] = Field(default=None, alias="alternativeText")
    caption: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    formats: Dict[str, ImageFormat] = Field(default_factory=dict)

    @field_validator("formats", mode="before")
    @classmethod
    def formats_default(cls, value):
        return {} if value is None else value
