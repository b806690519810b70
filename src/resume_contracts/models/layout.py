"""Pydantic models for page layout configuration."""

from __future__ import annotations

from typing import Final, Literal

from pydantic import StrictBool

from resume_contracts.models.base import ContractModel

LayoutType = Literal[
    "single-column",
    "two-column",
    "sidebar-left",
    "sidebar-right",
    "magazine",
    "compact",
]
PaperSize = Literal["a4", "letter", "legal"]
MarginSize = Literal["compact", "normal", "relaxed", "wide"]
ColumnDistribution = Literal["50-50", "60-40", "65-35", "70-30"]
PageBreakBehavior = Literal["auto", "section-aware", "manual"]
PageNumberPosition = Literal["bottom-center", "bottom-right", "top-right"]

# Layout types that always render a main and a sidebar column.
MULTI_COLUMN_TYPES: Final = frozenset({"two-column", "sidebar-left", "sidebar-right"})


class LayoutConfig(ContractModel):
    type: LayoutType
    paper_size: PaperSize
    margins: MarginSize
    column_distribution: ColumnDistribution | None = None
    page_break_behavior: PageBreakBehavior
    show_page_numbers: StrictBool | None = None
    page_number_position: PageNumberPosition | None = None

    @property
    def is_multi_column(self) -> bool:
        return self.type in MULTI_COLUMN_TYPES
