"""Mapping of the CMS ``about`` single type onto :class:`AboutPage`."""

from typing import Any, Dict, Optional

from app.config import Settings
from app.models.about import (
    AboutPage,
    Avatar,
    CmsAbout,
    Experience,
    Institution,
    Intro,
    LanguageEntry,
    Languages,
    Skill,
    Social,
    SocialEntry,
    Studies,
    TableOfContent,
    Technical,
    Work,
)
from app.models.base import CmsResponse
from app.models.static import StaticContent
from app.services.cms_client import parse_payload
from app.services.converter import rich_text
from app.services.images import best_image_url

RESOURCE = "about"

# Progress-bar value for each proficiency level
SKILL_LEVEL_VALUES: Dict[str, int] = {
    "beginner": 25,
    "intermediate": 50,
    "advanced": 75,
    "expert": 100,
}


def skill_level_value(level: str) -> int:
    """Return the 0–100 display value for a proficiency *level*.

    Raises:
        KeyError: for a level outside :data:`SKILL_LEVEL_VALUES`.
    """
    return SKILL_LEVEL_VALUES[level.strip().lower()]


def _title(value: Optional[str], default: str) -> str:
    return value.strip() if value and value.strip() else default


def map_about(payload: Dict[str, Any], static: StaticContent, settings: Settings) -> AboutPage:
    """Overlay live CMS *payload* on the static about page.

    Section titles, the SEO description and list relations are optional and
    fall back field by field; the job title, biography and profile image are
    required.

    Raises:
        ShapeMismatch: if *payload* lacks a required field.
    """
    data = parse_payload(payload, CmsResponse[CmsAbout]).data
    default = static.about
    person = static.person
    toc = default.table_of_content

    table_of_content = TableOfContent(
        display=True,
        sub_items=True,
        introduction_title=_title(data.introduction_section_title, toc.introduction_title),
        experience_title=_title(data.experience_section_title, toc.experience_title),
        education_title=_title(data.education_section_title, toc.education_title),
        technical_skills_title=_title(
            data.technical_skills_section_title, toc.technical_skills_title
        ),
    )

    description = default.description
    if data.seo and data.seo.meta_description:
        description = data.seo.meta_description

    experiences = [
        Experience(
            company=exp.company,
            timeframe=exp.timeframe,
            role=exp.role,
            description=rich_text(exp.description, enhanced=True),
        )
        for exp in data.work_experience
    ]
    institutions = [
        Institution(
            name=study.name,
            title=study.title,
            timeframe=study.timeframe,
            description=rich_text(study.description, enhanced=True),
        )
        for study in data.studies
    ]
    skills = [
        Skill(
            title=skill.name,
            level=skill.level,
            level_value=skill_level_value(skill.level),
            group=skill.group,
        )
        for skill in data.skills
    ]
    links = [
        SocialEntry(
            title=link.platform,
            url=link.url or "",
            type="icon" if link.use_icon else "custom",
            icon=link.css_class or None,
            icon_url=link.icon or None,
        )
        for link in data.social_links
    ]

    return default.model_copy(
        update={
            "loading": False,
            "title": f"{data.job_title} – {person.name}",
            "description": description,
            "table_of_content": table_of_content,
            "avatar": Avatar(
                display=True,
                image=best_image_url(data.profile_image, settings, "large"),
                alt=data.profile_image.alternative_text or f"{person.name} Profile Image",
            ),
            "intro": Intro(
                display=True,
                title=table_of_content.introduction_title,
                description=rich_text(data.biography),
            ),
            "work": Work(
                display=bool(experiences),
                title=table_of_content.experience_title,
                experiences=experiences,
            ),
            "studies": Studies(
                display=bool(institutions),
                title=table_of_content.education_title,
                institutions=institutions,
            ),
            "technical": Technical(
                display=bool(skills),
                title=table_of_content.technical_skills_title,
                skills=skills,
            ),
            "languages": Languages(
                display=bool(data.languages),
                items=[LanguageEntry(name=lang.name, level=lang.level) for lang in data.languages],
            ),
            "social": Social(display=True, links=links),
        }
    )
