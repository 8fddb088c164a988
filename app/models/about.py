from typing import List, Literal, Optional

from pydantic import Field, field_validator

from app.models.base import CmsModel, NullableList, ViewModel
from app.models.image import CmsImage
from app.models.richtext import RichNode

SkillLevel = Literal["beginner", "intermediate", "advanced", "expert"]


class CmsLanguage(CmsModel):
    name: str
    level: str = ""


class CmsSocialLink(CmsModel):
    platform: str
    url: Optional[str] = None
    use_icon: bool = Field(default=False, alias="useIcon")
    css_class: Optional[str] = Field(default=None, alias="cssClass")
    icon: Optional[str] = None


class CmsSkill(CmsModel):
    name: str
    level: SkillLevel
    icon: Optional[str] = None
    group: str = ""

    @field_validator("level", mode="before")
    @classmethod
    def normalise_level(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class CmsWorkExperience(CmsModel):
    company: str
    timeframe: str
    role: str
    description: str = ""


class CmsStudy(CmsModel):
    name: str
    title: str
    timeframe: str
    description: str = ""


class CmsSeo(CmsModel):
    meta_title: Optional[str] = Field(default=None, alias="metaTitle")
    meta_description: Optional[str] = Field(default=None, alias="metaDescription")
    keywords: Optional[str] = None


class CmsAbout(CmsModel):
    """``data`` object of ``GET /api/about``."""

    job_title: str = Field(alias="jobTitle")
    biography: str
    profile_image: CmsImage = Field(alias="profileImage")
    languages: NullableList[CmsLanguage] = Field(default_factory=list)
    social_links: NullableList[CmsSocialLink] = Field(default_factory=list, alias="socialLinks")
    skills: NullableList[CmsSkill] = Field(default_factory=list)
    work_experience: NullableList[CmsWorkExperience] = Field(default_factory=list, alias="workExperience")
    studies: NullableList[CmsStudy] = Field(default_factory=list)
    seo: Optional[CmsSeo] = None
    introduction_section_title: Optional[str] = Field(default=None, alias="introductionSectionTitle")
    experience_section_title: Optional[str] = Field(default=None, alias="experienceSectionTitle")
    education_section_title: Optional[str] = Field(default=None, alias="educationSectionTitle")
    technical_skills_section_title: Optional[str] = Field(
        default=None, alias="technicalSkillsSectionTitle"
    )


class TableOfContent(ViewModel):
    display: bool
    sub_items: bool
    introduction_title: str
    experience_title: str
    education_title: str
    technical_skills_title: str


class Avatar(ViewModel):
    display: bool
    image: str
    alt: str


class Calendar(ViewModel):
    display: bool
    link: str


class Intro(ViewModel):
    display: bool
    title: str
    description: List[RichNode]


class Experience(ViewModel):
    company: str
    timeframe: str
    role: str
    description: List[RichNode]


class Work(ViewModel):
    display: bool
    title: str
    experiences: List[Experience]


class Institution(ViewModel):
    name: str
    title: str
    timeframe: str
    description: List[RichNode]


class Studies(ViewModel):
    display: bool
    title: str
    institutions: List[Institution]


class Skill(ViewModel):
    title: str
    level: SkillLevel
    level_value: int
    group: str


class Technical(ViewModel):
    display: bool
    title: str
    skills: List[Skill]


class LanguageEntry(ViewModel):
    name: str
    level: str


class Languages(ViewModel):
    display: bool
    items: List[LanguageEntry]


class SocialEntry(ViewModel):
    title: str
    url: str
    type: Literal["icon", "custom"]
    icon: Optional[str] = None
    icon_url: Optional[str] = None


class Social(ViewModel):
    display: bool
    links: List[SocialEntry]


class AboutPage(ViewModel):
    path: str
    label: str
    title: str
    description: str
    loading: bool
    table_of_content: TableOfContent
    avatar: Avatar
    calendar: Calendar
    intro: Intro
    work: Work
    studies: Studies
    technical: Technical
    languages: Languages
    social: Social
