"""Blog posts: CMS ``posts`` collection mapping plus listing selection."""

import math
from typing import Any, Dict, Iterable, List, Optional

from app.config import Settings
from app.models.base import CmsResponse
from app.models.blog import BlogPage, BlogPostPage, CmsPost, PostSummary
from app.models.static import StaticContent
from app.services.cms_client import parse_payload
from app.services.converter import html_to_text, markdown_to_html, word_count
from app.services.images import best_image_url
from app.services.renderer import render_enhanced

RESOURCE = "posts"
WORDS_PER_MINUTE = 200


def _tag_name(tags: List[Dict[str, Any]]) -> Optional[str]:
    """Return a display name for the first tag, if any."""
    if not tags:
        return None
    first = tags[0]
    for key in ("name", "title", "slug"):
        value = first.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _summary(post: CmsPost, content_html: str, settings: Settings) -> PostSummary:
    content_text = html_to_text(content_html)
    reading_time = post.reading_time
    if not reading_time:
        reading_time = max(1, math.ceil(word_count(content_text) / WORDS_PER_MINUTE))

    return PostSummary(
        id=post.id,
        slug=post.slug,
        title=post.title,
        summary=post.excerpt,
        published_at=post.published_at,
        image=(
            best_image_url(post.portrait_cover_image, settings, "large")
            if post.portrait_cover_image
            else None
        ),
        images=(
            [best_image_url(post.landscape_cover_image, settings, "large")]
            if post.landscape_cover_image
            else []
        ),
        tag=_tag_name(post.tags),
        reading_time=reading_time,
        content_text=content_text,
    )


def map_posts(payload: Dict[str, Any], static: StaticContent, settings: Settings) -> BlogPage:
    """Overlay the live post list on the static blog page.

    Raises:
        ShapeMismatch: if *payload* is not a list of posts.
    """
    posts = parse_payload(payload, CmsResponse[List[CmsPost]]).data
    summaries = [_summary(post, markdown_to_html(post.content), settings) for post in posts]
    return static.blog.model_copy(update={"loading": False, "posts": summaries})


def map_post(payload: Dict[str, Any], settings: Settings) -> Optional[BlogPostPage]:
    """Map a slug-filtered ``posts`` response to a post page, or *None* when nothing matched.

    Raises:
        ShapeMismatch: if *payload* is not a list of posts.
    """
    posts = parse_payload(payload, CmsResponse[List[CmsPost]]).data
    if not posts:
        return None

    post = posts[0]
    content_html = markdown_to_html(post.content)
    return BlogPostPage(
        path=f"/blog/{post.slug}",
        title=post.title,
        description=post.excerpt,
        loading=False,
        post=_summary(post, content_html, settings),
        content=render_enhanced(content_html),
    )


def _matches(post: PostSummary, query: str) -> bool:
    return any(
        query in field.lower()
        for field in (post.title, post.summary, post.tag or "", post.content_text)
    )


def select_posts(
    posts: Iterable[PostSummary],
    query: str = "",
    start: Optional[int] = None,
    end: Optional[int] = None,
    exclude: Iterable[str] = (),
) -> List[PostSummary]:
    """Filter, order and slice *posts* for a listing.

    Posts whose slug is in *exclude* are dropped, then posts not matching
    *query* (case-insensitive, on title, summary, tag and body text). The
    rest are ordered newest first; undated posts go last. *start* and *end*
    are a 1-based inclusive range over the ordered result.
    """
    excluded = set(exclude)
    selected = [post for post in posts if post.slug not in excluded]

    needle = query.strip().lower()
    if needle:
        selected = [post for post in selected if _matches(post, needle)]

    selected.sort(
        key=lambda post: post.published_at.timestamp() if post.published_at else float("-inf"),
        reverse=True,
    )

    first = max((start or 1) - 1, 0)
    return selected[first:end] if end is not None else selected[first:]
