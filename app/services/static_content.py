"""Compiled-in page defaults.

:func:`build_static_content` runs once at startup; the result is stored on
``app.state`` and handed to every :class:`~app.services.resolver.ContentResolver`.
"""

from typing import List

from app.models.about import (
    AboutPage,
    Avatar,
    Calendar,
    Intro,
    Languages,
    Social,
    Studies,
    TableOfContent,
    Technical,
    Work,
)
from app.models.blog import BlogPage
from app.models.gallery import GalleryImage, GalleryPage
from app.models.home import Carousel, Featured, HomePage, Newsletter
from app.models.static import Person, SocialProfile, StaticContent

DEFAULT_INTRODUCTION_TITLE = "Introduction"
DEFAULT_EXPERIENCE_TITLE = "Experience"
DEFAULT_EDUCATION_TITLE = "Education"
DEFAULT_TECHNICAL_SKILLS_TITLE = "Technical Skills"

_GALLERY_IMAGES = [
    ("horizontal-1", "horizontal"),
    ("vertical-4", "vertical"),
    ("horizontal-3", "horizontal"),
    ("vertical-1", "vertical"),
    ("vertical-2", "vertical"),
    ("horizontal-2", "horizontal"),
    ("horizontal-4", "horizontal"),
    ("vertical-3", "vertical"),
]


def _person() -> Person:
    return Person(
        first_name="Alex",
        last_name="Morgan",
        name="Alex Morgan",
        role="Software Engineer",
        avatar="/images/avatar.jpg",
        email="hello@example.com",
        location="America/Guatemala",
        languages=["English", "Spanish"],
    )


def _social(person: Person) -> List[SocialProfile]:
    return [
        SocialProfile(name="GitHub", icon="github", link="https://github.com/"),
        SocialProfile(name="LinkedIn", icon="linkedin", link="https://www.linkedin.com/"),
        SocialProfile(name="Email", icon="email", link=f"mailto:{person.email}"),
    ]


def _home(person: Person) -> HomePage:
    return HomePage(
        path="/",
        image="/images/og/home.jpg",
        label="Home",
        title=f"{person.name}'s Portfolio",
        description=f"Portfolio website showcasing my work as a {person.role}",
        loading=True,
        headline="",
        featured=Featured(display=False, title="", href="#work"),
        subline=[],
        carousel=Carousel(display=False, images=[]),
        newsletter=Newsletter(
            display=True,
            title=f"Subscribe to {person.first_name}'s Newsletter",
            description="My weekly newsletter about creativity and engineering",
        ),
    )


def _about(person: Person) -> AboutPage:
    return AboutPage(
        path="/about",
        label="About",
        title=f"About – {person.name}",
        description=f"Meet {person.name}, {person.role} from {person.location}",
        loading=True,
        table_of_content=TableOfContent(
            display=True,
            sub_items=True,
            introduction_title=DEFAULT_INTRODUCTION_TITLE,
            experience_title=DEFAULT_EXPERIENCE_TITLE,
            education_title=DEFAULT_EDUCATION_TITLE,
            technical_skills_title=DEFAULT_TECHNICAL_SKILLS_TITLE,
        ),
        avatar=Avatar(display=True, image=person.avatar, alt=f"{person.name} Avatar"),
        calendar=Calendar(display=False, link=""),
        intro=Intro(display=False, title=DEFAULT_INTRODUCTION_TITLE, description=[]),
        work=Work(display=False, title="Professional Experience", experiences=[]),
        studies=Studies(display=True, title=DEFAULT_EDUCATION_TITLE, institutions=[]),
        technical=Technical(display=True, title=DEFAULT_TECHNICAL_SKILLS_TITLE, skills=[]),
        languages=Languages(display=True, items=[]),
        social=Social(display=True, links=[]),
    )


def _blog(person: Person) -> BlogPage:
    return BlogPage(
        path="/blog",
        label="Blog",
        title="Writing about design and tech...",
        description=f"Read what {person.name} has been up to recently",
        loading=True,
        posts=[],
    )


def _gallery(person: Person) -> GalleryPage:
    return GalleryPage(
        path="/gallery",
        label="Gallery",
        title=f"Photo gallery – {person.name}",
        description=f"A photo collection by {person.name}",
        images=[
            GalleryImage(src=f"/images/gallery/{name}.jpg", alt="image", orientation=orientation)
            for name, orientation in _GALLERY_IMAGES
        ],
    )


def build_static_content() -> StaticContent:
    person = _person()
    return StaticContent(
        person=person,
        social=_social(person),
        home=_home(person),
        about=_about(person),
        blog=_blog(person),
        gallery=_gallery(person),
    )
