from typing import List

from app.models.about import AboutPage
from app.models.base import ViewModel
from app.models.blog import BlogPage
from app.models.gallery import GalleryPage
from app.models.home import HomePage


class Person(ViewModel):
    first_name: str
    last_name: str
    name: str
    role: str
    avatar: str
    email: str
    location: str
    languages: List[str]


class SocialProfile(ViewModel):
    name: str
    icon: str
    link: str


class StaticContent(ViewModel):
    """Compiled-in defaults served whenever live CMS content is unavailable."""

    person: Person
    social: List[SocialProfile]
    home: HomePage
    about: AboutPage
    blog: BlogPage
    gallery: GalleryPage
