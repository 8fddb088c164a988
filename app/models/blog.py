from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from app.models.base import CmsModel, NullableList, ViewModel
from app.models.image import CmsImage
from app.models.richtext import RichNode


class CmsPost(CmsModel):
    """One item of ``GET /api/posts``."""

    id: int
    title: str
    slug: str
    excerpt: str = ""
    content: str = ""
    reading_time: Optional[int] = Field(default=None, alias="readingTime")
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
    portrait_cover_image: Optional[CmsImage] = Field(default=None, alias="portraitCoverImage")
    landscape_cover_image: Optional[CmsImage] = Field(default=None, alias="landscapeCoverImage")
    tags: NullableList[Dict[str, Any]] = Field(default_factory=list)

    @field_validator("excerpt", "content", mode="before")
    @classmethod
    def text_default(cls, value):
        return "" if value is None else value


class PostSummary(ViewModel):
    id: int
    slug: str
    title: str
    summary: str
    published_at: Optional[datetime] = None
    image: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    tag: Optional[str] = None
    reading_time: int
    # Plain text of the body, used for search only
    content_text: str = Field(default="", exclude=True)


class BlogPage(ViewModel):
    path: str
    label: str
    title: str
    description: str
    loading: bool
    posts: List[PostSummary]


class BlogPostPage(ViewModel):
    path: str
    title: str
    description: str
    loading: bool
    post: PostSummary
    content: List[RichNode]
