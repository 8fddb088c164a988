import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import Settings, get_settings
from app.models.about import AboutPage
from app.models.blog import BlogPage, BlogPostPage
from app.models.gallery import GalleryPage
from app.models.home import HomePage
from app.services.blog import select_posts
from app.services.locale import LOCALE_COOKIE, negotiate_locale
from app.services.resolver import ContentResolver

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/pages", tags=["Pages"])

PAGE_RATE_LIMIT = "60/minute"


def get_locale(request: Request) -> str:
    """Locale for this request; the router is also mounted under a ``/{lang}`` prefix."""
    return negotiate_locale(
        request.path_params.get("lang"),
        request.cookies.get(LOCALE_COOKIE),
        request.headers.get("accept-language"),
    )


def get_resolver(
    request: Request,
    settings: Settings = Depends(get_settings),
    locale: str = Depends(get_locale),
) -> ContentResolver:
    return ContentResolver(settings, request.app.state.static_content, locale)


@router.get("/home", response_model=HomePage, summary="Home page content")
@limiter.limit(PAGE_RATE_LIMIT)
async def home_page(
    request: Request, resolver: ContentResolver = Depends(get_resolver)
) -> HomePage:
    return await resolver.fetch_safe("home")


@router.get("/about", response_model=AboutPage, summary="About page content")
@limiter.limit(PAGE_RATE_LIMIT)
async def about_page(
    request: Request, resolver: ContentResolver = Depends(get_resolver)
) -> AboutPage:
    return await resolver.fetch_safe("about")


@router.get("/blog", response_model=BlogPage, summary="Blog listing")
@limiter.limit(PAGE_RATE_LIMIT)
async def blog_page(
    request: Request,
    q: str = Query(default="", description="Case-insensitive search over title, summary, tag and body."),
    start: Optional[int] = Query(default=None, ge=1, description="1-based index of the first post."),
    end: Optional[int] = Query(default=None, ge=1, description="1-based index of the last post (inclusive)."),
    exclude: List[str] = Query(default=[], description="Slugs to leave out."),
    resolver: ContentResolver = Depends(get_resolver),
) -> BlogPage:
    """List blog posts newest first, optionally searched and sliced."""
    page = await resolver.fetch_safe("blog")
    posts = select_posts(page.posts, query=q, start=start, end=end, exclude=exclude)
    return page.model_copy(update={"posts": posts})


@router.get("/blog/{slug}", response_model=BlogPostPage, summary="Single blog post")
@limiter.limit(PAGE_RATE_LIMIT)
async def blog_post_page(
    request: Request, slug: str, resolver: ContentResolver = Depends(get_resolver)
) -> BlogPostPage:
    post = await resolver.fetch_post_safe(slug)
    if post is None:
        logger.info("Blog post not found", extra={"slug": slug, "locale": resolver.locale})
        raise HTTPException(status_code=404, detail=f"Post '{slug}' not found.")
    return post


@router.get("/gallery", response_model=GalleryPage, summary="Photo gallery")
@limiter.limit(PAGE_RATE_LIMIT)
async def gallery_page(request: Request) -> GalleryPage:
    return request.app.state.static_content.gallery
