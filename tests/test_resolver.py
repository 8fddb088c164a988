"""Tests for ContentResolver: live mapping, static fallback and request-scoped reuse.

``fetch_resource`` is patched with an ``AsyncMock`` so the resolver never
touches the network.
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from app.models.richtext import plain_text
from app.services.about import SKILL_LEVEL_VALUES, skill_level_value
from app.services.errors import ConfigurationMissing, DecodeError, HttpError, NetworkError
from app.services.resolver import ContentResolver

_FETCH = "app.services.resolver.fetch_resource"


def _resolve(resolver, page_type):
    return asyncio.run(resolver.fetch_safe(page_type))


@pytest.fixture
def resolver(settings, static):
    return ContentResolver(settings, static, "en")


class TestSkillLevels:
    def test_exact_values(self):
        assert skill_level_value("beginner") == 25
        assert skill_level_value("intermediate") == 50
        assert skill_level_value("advanced") == 75
        assert skill_level_value("expert") == 100

    def test_case_insensitive(self):
        assert skill_level_value(" Expert ") == 100

    def test_table_has_exactly_four_levels(self):
        assert SKILL_LEVEL_VALUES == {
            "beginner": 25,
            "intermediate": 50,
            "advanced": 75,
            "expert": 100,
        }

    def test_unknown_level_raises(self):
        with pytest.raises(KeyError):
            skill_level_value("guru")


class TestFallback:
    @pytest.mark.parametrize("page_type", ["home", "about", "blog"])
    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationMissing("STRAPI_API_URL is not set"),
            NetworkError("timed out"),
            HttpError(500, "Internal Server Error"),
            DecodeError("bad json"),
        ],
    )
    def test_cms_failure_returns_static_default(self, resolver, static, page_type, error):
        with patch(_FETCH, new=AsyncMock(side_effect=error)):
            page = _resolve(resolver, page_type)
        assert page == getattr(static, page_type)
        assert page.loading is True

    def test_missing_required_home_field_falls_back_entirely(self, resolver, static, home_payload):
        del home_payload["data"]["subLine"]
        with patch(_FETCH, new=AsyncMock(return_value=home_payload)):
            page = _resolve(resolver, "home")
        assert page == static.home

    def test_missing_profile_image_falls_back_entirely(self, resolver, static, about_payload):
        about_payload["data"]["profileImage"] = None
        with patch(_FETCH, new=AsyncMock(return_value=about_payload)):
            page = _resolve(resolver, "about")
        assert page == static.about

    def test_unknown_skill_level_falls_back(self, resolver, static, about_payload):
        about_payload["data"]["skills"][0]["level"] = "guru"
        with patch(_FETCH, new=AsyncMock(return_value=about_payload)):
            page = _resolve(resolver, "about")
        assert page == static.about

    def test_unexpected_error_falls_back(self, resolver, static):
        with patch(_FETCH, new=AsyncMock(side_effect=RuntimeError("boom"))):
            page = _resolve(resolver, "home")
        assert page == static.home

    def test_failure_is_logged(self, resolver, caplog):
        with patch(_FETCH, new=AsyncMock(side_effect=HttpError(503))):
            _resolve(resolver, "home")
        assert any("static fallback" in record.getMessage() for record in caplog.records)

    def test_unknown_page_type_raises(self, resolver):
        with pytest.raises(ValueError):
            _resolve(resolver, "contact")


class TestHomeMapping:
    def test_live_home(self, resolver, home_payload):
        with patch(_FETCH, new=AsyncMock(return_value=home_payload)) as fetch:
            page = _resolve(resolver, "home")

        fetch.assert_awaited_once()
        assert fetch.await_args.args[1:] == ("home", "en")
        assert page.loading is False
        assert page.headline == "Building reliable software"
        assert page.featured.display is True
        assert page.featured.title == "Payments platform"
        assert page.featured.href == "#work"
        assert plain_text(page.subline) == "I am a backend engineer."
        assert page.carousel.display is True
        assert page.carousel.images[0].id == "7"
        assert page.carousel.images[0].url == "https://media.example.com/uploads/large_portrait.jpg"
        assert page.newsletter.title == "Join the list"
        # Untouched static fields survive
        assert page.path == "/"
        assert page.label == "Home"

    def test_carousel_hidden_drops_images(self, resolver, home_payload):
        home_payload["data"]["hasCarousel"] = False
        with patch(_FETCH, new=AsyncMock(return_value=home_payload)):
            page = _resolve(resolver, "home")
        assert page.carousel.display is False
        assert page.carousel.images == []

    def test_optional_newsletter_fields_use_static_values(self, resolver, static, home_payload):
        for key in ("hasNewsletter", "newsletterTitle", "newsletterDescription"):
            del home_payload["data"][key]
        with patch(_FETCH, new=AsyncMock(return_value=home_payload)):
            page = _resolve(resolver, "home")
        assert page.loading is False
        assert page.newsletter.display is False
        assert page.newsletter.title == static.home.newsletter.title
        assert page.newsletter.description == static.home.newsletter.description


class TestAboutMapping:
    def test_live_about(self, resolver, static, about_payload):
        with patch(_FETCH, new=AsyncMock(return_value=about_payload)):
            page = _resolve(resolver, "about")

        assert page.loading is False
        assert page.title == f"Staff Engineer – {static.person.name}"
        assert page.description == "About me, live"
        assert page.avatar.image == "https://media.example.com/uploads/large_portrait.jpg"
        assert page.avatar.alt == "Portrait"
        assert plain_text(page.intro.description) == "Hello, I build things."
        assert page.work.display is True
        assert page.work.experiences[0].company == "Acme"
        assert plain_text(page.work.experiences[0].description) == "Shipped things."
        assert page.studies.institutions[0].title == "BSc"
        assert [(s.title, s.level, s.level_value) for s in page.technical.skills] == [
            ("Python", "expert", 100),
            ("Go", "intermediate", 50),
        ]
        assert page.languages.items[0].name == "Spanish"

    def test_experience_description_keeps_lists(self, resolver, about_payload):
        about_payload["data"]["workExperience"][0]["description"] = "Led the team.\n\n- did x\n- did y\n"
        with patch(_FETCH, new=AsyncMock(return_value=about_payload)):
            page = _resolve(resolver, "about")
        description = page.work.experiences[0].description
        assert [node.kind for node in description] == ["p", "ul"]
        assert [item.text() for item in description[1].children] == ["did x", "did y"]
        assert "<" not in plain_text(description)

    def test_section_titles_fall_back_per_field(self, resolver, static, about_payload):
        with patch(_FETCH, new=AsyncMock(return_value=about_payload)):
            page = _resolve(resolver, "about")
        toc = page.table_of_content
        defaults = static.about.table_of_content
        assert toc.introduction_title == "Who I am"
        assert toc.experience_title == defaults.experience_title
        assert toc.education_title == defaults.education_title
        assert toc.technical_skills_title == "Skills"

    def test_social_links(self, resolver, about_payload):
        with patch(_FETCH, new=AsyncMock(return_value=about_payload)):
            page = _resolve(resolver, "about")
        github, blog = page.social.links
        assert (github.type, github.icon, github.url) == ("icon", "github", "https://github.com/me")
        assert (blog.type, blog.icon_url, blog.url) == ("custom", "/uploads/blog.svg", "")

    def test_empty_collections_hide_sections(self, resolver, about_payload):
        for key in ("workExperience", "studies", "skills", "languages"):
            about_payload["data"][key] = None
        with patch(_FETCH, new=AsyncMock(return_value=about_payload)):
            page = _resolve(resolver, "about")
        assert page.loading is False
        assert page.work.display is False
        assert page.studies.display is False
        assert page.technical.display is False
        assert page.languages.display is False

    def test_missing_seo_keeps_static_description(self, resolver, static, about_payload):
        del about_payload["data"]["seo"]
        with patch(_FETCH, new=AsyncMock(return_value=about_payload)):
            page = _resolve(resolver, "about")
        assert page.loading is False
        assert page.description == static.about.description


class TestRequestScope:
    def test_repeated_calls_fetch_once(self, resolver, home_payload):
        async def run():
            first = await resolver.fetch_safe("home")
            second = await resolver.fetch_safe("home")
            return first, second

        with patch(_FETCH, new=AsyncMock(return_value=home_payload)) as fetch:
            first, second = asyncio.run(run())
        assert fetch.await_count == 1
        assert first is second

    def test_concurrent_calls_share_one_fetch(self, resolver, home_payload):
        async def run():
            return await asyncio.gather(*(resolver.fetch_safe("home") for _ in range(3)))

        with patch(_FETCH, new=AsyncMock(return_value=home_payload)) as fetch:
            pages = asyncio.run(run())
        assert fetch.await_count == 1
        assert all(page is pages[0] for page in pages)

    def test_separate_resolvers_fetch_independently(self, settings, static, home_payload):
        with patch(_FETCH, new=AsyncMock(return_value=home_payload)) as fetch:
            _resolve(ContentResolver(settings, static, "en"), "home")
            _resolve(ContentResolver(settings, static, "en"), "home")
        assert fetch.await_count == 2

    def test_locale_is_passed_to_cms(self, settings, static, home_payload):
        with patch(_FETCH, new=AsyncMock(return_value=home_payload)) as fetch:
            _resolve(ContentResolver(settings, static, "es"), "home")
        assert fetch.await_args.args[2] == "es"


class TestFetchPostSafe:
    def test_found(self, resolver, posts_payload):
        posts_payload["data"] = posts_payload["data"][:1]
        with patch(_FETCH, new=AsyncMock(return_value=posts_payload)) as fetch:
            page = asyncio.run(resolver.fetch_post_safe("old-post"))
        assert fetch.await_args.kwargs["params"] == {"filters[slug][$eq]": "old-post"}
        assert page.path == "/blog/old-post"
        assert page.post.tag == "Python"
        assert [node.kind for node in page.content] == ["p", "ul"]

    def test_not_found(self, resolver):
        with patch(_FETCH, new=AsyncMock(return_value={"data": [], "meta": {}})):
            assert asyncio.run(resolver.fetch_post_safe("nope")) is None

    def test_cms_failure_returns_none(self, resolver):
        with patch(_FETCH, new=AsyncMock(side_effect=NetworkError("down"))):
            assert asyncio.run(resolver.fetch_post_safe("old-post")) is None
