"""Pydantic model for the complete resume DSL document."""

from __future__ import annotations

from resume_contracts.models.base import ContractModel
from resume_contracts.models.layout import LayoutConfig
from resume_contracts.models.sections import ItemOverride, SectionConfig, SectionId
from resume_contracts.models.tokens import DesignTokens


class ResumeDsl(ContractModel):
    """Abstract, user-facing layout and styling preferences for one resume."""

    version: str  # opaque tag, no semver enforcement
    layout: LayoutConfig
    tokens: DesignTokens
    sections: list[SectionConfig]
    item_overrides: dict[SectionId, list[ItemOverride]] | None = None
