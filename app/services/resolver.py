"""Per-request content resolution with static fallback.

A :class:`ContentResolver` lives for one request. For each page type it makes
at most one CMS call; every failure is logged and answered with the page's
static default, so callers always get a complete view-model.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, Literal, Optional, Tuple, Union

from app.config import Settings
from app.models.about import AboutPage
from app.models.blog import BlogPage, BlogPostPage
from app.models.home import HomePage
from app.models.static import StaticContent
from app.services import about, blog, home
from app.services.cms_client import fetch_resource
from app.services.errors import CmsError

logger = logging.getLogger(__name__)

PageType = Literal["home", "about", "blog"]
PageViewModel = Union[HomePage, AboutPage, BlogPage]

Mapper = Callable[[Dict[str, Any], StaticContent, Settings], PageViewModel]

# page type → (CMS resource, mapper)
_PAGES: Dict[str, Tuple[str, Mapper]] = {
    "home": (home.RESOURCE, home.map_home),
    "about": (about.RESOURCE, about.map_about),
    "blog": (blog.RESOURCE, blog.map_posts),
}


class ContentResolver:
    def __init__(self, settings: Settings, static: StaticContent, locale: str) -> None:
        self.settings = settings
        self.static = static
        self.locale = locale
        self._pending: Dict[str, "asyncio.Future[PageViewModel]"] = {}

    def fallback(self, page_type: PageType) -> PageViewModel:
        return getattr(self.static, page_type)

    async def fetch_safe(self, page_type: PageType) -> PageViewModel:
        """Return live content for *page_type*, or its static default on any failure.

        Concurrent and repeated calls on the same resolver share one fetch.

        Raises:
            ValueError: for an unknown *page_type*.
        """
        if page_type not in _PAGES:
            raise ValueError(f"Unknown page type '{page_type}'")

        pending = self._pending.get(page_type)
        if pending is None:
            pending = asyncio.ensure_future(self._resolve(page_type))
            self._pending[page_type] = pending
        return await pending

    async def _resolve(self, page_type: PageType) -> PageViewModel:
        resource, mapper = _PAGES[page_type]
        try:
            payload = await fetch_resource(self.settings, resource, self.locale)
            return mapper(payload, self.static, self.settings)
        except CmsError as exc:
            logger.warning(
                "CMS content for '%s' unavailable, serving static fallback: %s",
                page_type,
                exc,
                extra={"page_type": page_type, "locale": self.locale, "error": type(exc).__name__},
            )
        except Exception:
            logger.exception(
                "Unexpected error resolving '%s', serving static fallback", page_type
            )
        return self.fallback(page_type)

    async def fetch_post_safe(self, slug: str) -> Optional[BlogPostPage]:
        """Return the post page for *slug*, or *None* if it is missing or the CMS fails."""
        try:
            payload = await fetch_resource(
                self.settings, blog.RESOURCE, self.locale, params={"filters[slug][$eq]": slug}
            )
            return blog.map_post(payload, self.settings)
        except CmsError as exc:
            logger.warning(
                "CMS post '%s' unavailable: %s",
                slug,
                exc,
                extra={"slug": slug, "locale": self.locale, "error": type(exc).__name__},
            )
        except Exception:
            logger.exception("Unexpected error resolving post '%s'", slug)
        return None
