"""Shared CMS payloads and settings for the test suite."""

import copy

import pytest

from app.config import Settings
from app.services.static_content import build_static_content

_IMAGE = {
    "id": 7,
    "documentId": "img7",
    "name": "portrait.jpg",
    "alternativeText": "Portrait",
    "caption": "Me",
    "width": 2000,
    "height": 1500,
    "url": "/uploads/portrait.jpg",
    "formats": {
        "large": {"url": "/uploads/large_portrait.jpg", "width": 1000, "height": 750},
        "medium": {"url": "/uploads/medium_portrait.jpg", "width": 750, "height": 563},
        "small": {"url": "/uploads/small_portrait.jpg", "width": 500, "height": 375},
        "thumbnail": {"url": "/uploads/thumbnail_portrait.jpg", "width": 245, "height": 184},
    },
}

_HOME = {
    "data": {
        "id": 1,
        "documentId": "home1",
        "headline": "Building reliable software",
        "hasFeatured": True,
        "featured": "Payments platform",
        "subLine": "I am a **backend** engineer.",
        "hasCarousel": True,
        "carousel": [_IMAGE],
        "hasNewsletter": True,
        "newsletterTitle": "Join the list",
        "newsletterDescription": "Monthly notes",
        "locale": "en",
    },
    "meta": {},
}

_ABOUT = {
    "data": {
        "id": 1,
        "jobTitle": "Staff Engineer",
        "biography": "Hello, I *build* things.",
        "introductionSectionTitle": "Who I am",
        "experienceSectionTitle": "",
        "educationSectionTitle": None,
        "technicalSkillsSectionTitle": "Skills",
        "profileImage": _IMAGE,
        "languages": [{"id": 1, "name": "Spanish", "level": "Native"}],
        "socialLinks": [
            {"id": 1, "platform": "GitHub", "url": "https://github.com/me", "useIcon": True,
             "cssClass": "github", "icon": None},
            {"id": 2, "platform": "Blog", "url": None, "useIcon": False,
             "cssClass": None, "icon": "/uploads/blog.svg"},
        ],
        "skills": [
            {"id": 1, "name": "Python", "level": "expert", "icon": None, "group": "Languages"},
            {"id": 2, "name": "Go", "level": "Intermediate", "icon": None, "group": "Languages"},
        ],
        "workExperience": [
            {"id": 1, "company": "Acme", "timeframe": "2020 - now", "role": "Engineer",
             "description": "Shipped **things**."},
        ],
        "studies": [
            {"id": 1, "name": "University", "title": "BSc", "timeframe": "2012 - 2016",
             "description": "Computer science"},
        ],
        "seo": {"id": 1, "metaTitle": "About", "metaDescription": "About me, live"},
    },
    "meta": {},
}


def _post(post_id: int, slug: str, title: str, published_at, **extra) -> dict:
    post = {
        "id": post_id,
        "documentId": f"post{post_id}",
        "title": title,
        "slug": slug,
        "excerpt": f"Excerpt of {title}",
        "content": f"Body text about **{slug}**.\n\n- point one\n- point two\n",
        "readingTime": None,
        "publishedAt": published_at,
        "createdAt": published_at,
        "updatedAt": published_at,
        "portraitCoverImage": None,
        "landscapeCoverImage": None,
        "tags": [],
        "technologies": [],
        "author": None,
        "seo": None,
    }
    post.update(extra)
    return post


_POSTS = {
    "data": [
        _post(1, "old-post", "Old post", "2023-01-10T10:00:00.000Z", tags=[{"id": 3, "name": "Python"}]),
        _post(2, "new-post", "New post", "2024-05-01T10:00:00.000Z", readingTime=4,
              portraitCoverImage={**_IMAGE, "formats": {"thumbnail": _IMAGE["formats"]["thumbnail"]}}),
        _post(3, "mid-post", "Mid post", "2023-09-15T10:00:00.000Z", landscapeCoverImage=_IMAGE),
    ],
    "meta": {"pagination": {"page": 1, "pageSize": 25, "pageCount": 1, "total": 3}},
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        cms_api_url="https://cms.example.com",
        cms_api_token="secret-token",
        cms_image_url="https://media.example.com",
    )


@pytest.fixture
def static():
    return build_static_content()


@pytest.fixture
def image_data() -> dict:
    return copy.deepcopy(_IMAGE)


@pytest.fixture
def home_payload() -> dict:
    return copy.deepcopy(_HOME)


@pytest.fixture
def about_payload() -> dict:
    return copy.deepcopy(_ABOUT)


@pytest.fixture
def posts_payload() -> dict:
    return copy.deepcopy(_POSTS)
