"""Data models for resume layout contracts."""

from resume_contracts.models.layout import LayoutConfig
from resume_contracts.models.resume_ast import (
    AstMeta,
    ColumnDefinition,
    GlobalStyles,
    PageLayout,
    PlacedSection,
    ResolvedBoxStyle,
    ResolvedTypography,
    ResumeAst,
    SectionStyles,
)
from resume_contracts.models.resume_dsl import ResumeDsl
from resume_contracts.models.section_data import (
    SECTION_DATA_ADAPTER,
    ItemSectionData,
    SectionData,
)
from resume_contracts.models.sections import (
    FULL_WIDTH_COLUMN,
    ItemOverride,
    SectionConfig,
    SectionItemOverrides,
)
from resume_contracts.models.tokens import (
    ColorPalette,
    ColorTokens,
    DesignTokens,
    SpacingTokens,
    TypographyTokens,
)

__all__ = [
    "AstMeta",
    "ColorPalette",
    "ColorTokens",
    "ColumnDefinition",
    "DesignTokens",
    "FULL_WIDTH_COLUMN",
    "GlobalStyles",
    "ItemOverride",
    "ItemSectionData",
    "LayoutConfig",
    "PageLayout",
    "PlacedSection",
    "ResolvedBoxStyle",
    "ResolvedTypography",
    "ResumeAst",
    "ResumeDsl",
    "SECTION_DATA_ADAPTER",
    "SectionConfig",
    "SectionData",
    "SectionItemOverrides",
    "SectionStyles",
    "SpacingTokens",
    "TypographyTokens",
]
