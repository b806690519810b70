"""Pydantic models for the resolved, renderer-ready resume layout tree."""

from __future__ import annotations

from typing import Literal

from resume_contracts.models.base import ContractModel, Number
from resume_contracts.models.section_data import SectionData

TextTransform = Literal["none", "uppercase", "lowercase", "capitalize"]
TextDecoration = Literal["none", "underline", "line-through"]


class ResolvedTypography(ContractModel):
    font_family: str  # CSS font stack, e.g. "Inter, sans-serif"
    font_size_px: Number
    line_height: Number
    font_weight: Number
    text_transform: TextTransform
    text_decoration: TextDecoration


class ResolvedBoxStyle(ContractModel):
    background_color: str
    border_color: str
    border_width_px: Number
    border_radius_px: Number
    padding_px: Number
    margin_bottom_px: Number
    shadow: str | None = None  # CSS box-shadow


class ColumnDefinition(ContractModel):
    id: str
    width_percentage: Number
    order: Number


class PageLayout(ContractModel):
    width_mm: Number
    height_mm: Number
    margin_top_mm: Number
    margin_bottom_mm: Number
    margin_left_mm: Number
    margin_right_mm: Number
    columns: list[ColumnDefinition]
    column_gap_mm: Number

    def column_ids(self) -> list[str]:
        return [column.id for column in self.columns]


class SectionStyles(ContractModel):
    container: ResolvedBoxStyle
    title: ResolvedTypography
    content: ResolvedTypography


class PlacedSection(ContractModel):
    section_id: str
    column_id: str  # a page column id or the full-width sentinel
    order: Number
    data: SectionData
    styles: SectionStyles


class AstMeta(ContractModel):
    version: str
    generated_at: str  # ISO-8601


class GlobalStyles(ContractModel):
    background: str
    text_primary: str
    text_secondary: str
    accent: str


class ResumeAst(ContractModel):
    meta: AstMeta
    page: PageLayout
    sections: list[PlacedSection]
    global_styles: GlobalStyles

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
