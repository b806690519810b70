"""Pydantic models for already-fetched section content.

Content is a closed tagged union keyed on ``type``. Each section kind has a
fixed payload: text sections carry ``data``, list sections carry ``items``.
Every list item has an ``id`` so item overrides can address it.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field, StrictBool, TypeAdapter

from resume_contracts.models.base import ContractModel, DateString


class DateRange(ContractModel):
    start_date: DateString
    end_date: DateString | None = None
    is_current: StrictBool = False


class TextContent(ContractModel):
    content: str


class Basics(ContractModel):
    full_name: str
    job_title: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    website: str | None = None
    linkedin: str | None = None
    github: str | None = None


class SectionItem(ContractModel):
    id: str


class ExperienceItem(SectionItem):
    title: str
    company: str
    location: str | None = None
    date_range: DateRange | None = None
    description: str | None = None
    achievements: list[str] = []
    skills: list[str] = []


class EducationItem(SectionItem):
    institution: str
    degree: str
    field: str | None = None
    location: str | None = None
    date_range: DateRange | None = None
    gpa: str | None = None
    description: str | None = None


class SkillItem(SectionItem):
    name: str
    level: str | None = None
    category: str | None = None


class LanguageItem(SectionItem):
    name: str
    level: str | None = None
    cefr_level: Literal["A1", "A2", "B1", "B2", "C1", "C2"] | None = None


class CertificationItem(SectionItem):
    name: str
    issuer: str
    issue_date: DateString | None = None
    expiry_date: DateString | None = None
    credential_id: str | None = None
    credential_url: str | None = None


class ProjectItem(SectionItem):
    name: str
    description: str | None = None
    url: str | None = None
    date_range: DateRange | None = None
    highlights: list[str] = []
    technologies: list[str] = []


class EntryItem(SectionItem):
    """Generic titled entry used by the simpler list sections."""

    title: str
    subtitle: str | None = None
    date: DateString | None = None
    description: str | None = None
    url: str | None = None


class ItemSectionData(ContractModel):
    """Marker base for section kinds whose content is a list of items."""


class SummaryData(ContractModel):
    type: Literal["summary"]
    data: TextContent


class ObjectiveData(ContractModel):
    type: Literal["objective"]
    data: TextContent


class BasicsData(ContractModel):
    type: Literal["basics"]
    data: Basics


class ExperienceData(ItemSectionData):
    type: Literal["experience"]
    items: list[ExperienceItem] = []


class EducationData(ItemSectionData):
    type: Literal["education"]
    items: list[EducationItem] = []


class SkillsData(ItemSectionData):
    type: Literal["skills"]
    items: list[SkillItem] = []


class LanguagesData(ItemSectionData):
    type: Literal["languages"]
    items: list[LanguageItem] = []


class CertificationsData(ItemSectionData):
    type: Literal["certifications"]
    items: list[CertificationItem] = []


class ProjectsData(ItemSectionData):
    type: Literal["projects"]
    items: list[ProjectItem] = []


class PublicationsData(ItemSectionData):
    type: Literal["publications"]
    items: list[EntryItem] = []


class AwardsData(ItemSectionData):
    type: Literal["awards"]
    items: list[EntryItem] = []


class InterestsData(ItemSectionData):
    type: Literal["interests"]
    items: list[EntryItem] = []


class ReferencesData(ItemSectionData):
    type: Literal["references"]
    items: list[EntryItem] = []


class VolunteerData(ItemSectionData):
    type: Literal["volunteer"]
    items: list[EntryItem] = []


SectionData = Annotated[
    Union[
        SummaryData,
        ObjectiveData,
        BasicsData,
        ExperienceData,
        EducationData,
        SkillsData,
        LanguagesData,
        CertificationsData,
        ProjectsData,
        PublicationsData,
        AwardsData,
        InterestsData,
        ReferencesData,
        VolunteerData,
    ],
    Field(discriminator="type"),
]

SECTION_DATA_ADAPTER: TypeAdapter[SectionData] = TypeAdapter(SectionData)
