"""Pydantic models for section configuration and per-item overrides."""

from __future__ import annotations

from typing import Annotated, Final, Literal

from pydantic import Field, StrictBool, TypeAdapter

from resume_contracts.models.base import ContractModel, SortKey

# Open set: any non-empty string is a valid section id.
SectionId = Annotated[str, Field(min_length=1)]
ColumnId = Literal["main", "sidebar", "full-width"]

FULL_WIDTH_COLUMN: Final = "full-width"

KNOWN_SECTION_IDS: Final = (
    "basics",
    "experience",
    "education",
    "skills",
    "languages",
    "certifications",
    "projects",
    "publications",
    "awards",
    "interests",
    "references",
    "summary",
    "objective",
    "volunteer",
)


class SectionConfig(ContractModel):
    id: SectionId
    visible: StrictBool
    order: SortKey  # sort key only, duplicates allowed
    column: ColumnId


class ItemOverride(ContractModel):
    item_id: str
    visible: StrictBool
    order: SortKey


SectionItemOverrides = dict[SectionId, list[ItemOverride]]

SECTION_CONFIGS_ADAPTER: TypeAdapter[list[SectionConfig]] = TypeAdapter(list[SectionConfig])
ITEM_OVERRIDES_ADAPTER: TypeAdapter[SectionItemOverrides] = TypeAdapter(SectionItemOverrides)
