"""Lookup tables mapping semantic tokens to concrete values.

Every table is total over the Literal domain of its token type. The
``TABLES`` registry pairs each table with that domain so completeness can be
checked by iterating ``typing.get_args``. Tables are read-only proxies and
are shared by every resolution call.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from resume_contracts.errors import TokenLookupError
from resume_contracts.models.layout import ColumnDistribution, MarginSize, PaperSize
from resume_contracts.models.resume_ast import TextDecoration, TextTransform
from resume_contracts.models.tokens import (
    BorderRadius,
    FontFamily,
    FontSize,
    HeadingStyle,
    Shadow,
    SpacingDensity,
    SpacingSize,
)


@dataclass(frozen=True)
class FontScale:
    """Pixel sizes and line heights for one ``fontSize`` token."""

    title_px: int
    content_px: int
    title_line_height: float
    content_line_height: float


@dataclass(frozen=True)
class HeadingTreatment:
    """How a ``headingStyle`` token shapes section titles."""

    font_weight: int
    text_transform: TextTransform
    text_decoration: TextDecoration
    accent_border: bool = False


PAPER_SIZES_MM: Mapping[PaperSize, tuple[float, float]] = MappingProxyType({
    "a4": (210, 297),
    "letter": (215.9, 279.4),
    "legal": (215.9, 355.6),
})

MARGINS_MM: Mapping[MarginSize, int] = MappingProxyType({
    "compact": 15,
    "normal": 20,
    "relaxed": 25,
    "wide": 30,
})

# (larger share, smaller share); integers so the sum is exactly 100
COLUMN_DISTRIBUTIONS: Mapping[ColumnDistribution, tuple[int, int]] = MappingProxyType({
    "50-50": (50, 50),
    "60-40": (60, 40),
    "65-35": (65, 35),
    "70-30": (70, 30),
})

COLUMN_GAP_MM: Mapping[SpacingDensity, int] = MappingProxyType({
    "compact": 4,
    "comfortable": 5,
    "spacious": 8,
})

FONT_STACKS: Mapping[FontFamily, str] = MappingProxyType({
    "inter": "Inter, sans-serif",
    "merriweather": "Merriweather, serif",
    "roboto": "Roboto, sans-serif",
    "open-sans": "Open Sans, sans-serif",
    "playfair-display": "Playfair Display, serif",
    "source-serif": "Source Serif Pro, serif",
    "lato": "Lato, sans-serif",
    "poppins": "Poppins, sans-serif",
})

FONT_SCALES: Mapping[FontSize, FontScale] = MappingProxyType({
    "sm": FontScale(title_px=14, content_px=12, title_line_height=1.4, content_line_height=1.5),
    "base": FontScale(title_px=16, content_px=14, title_line_height=1.5, content_line_height=1.6),
    "lg": FontScale(title_px=20, content_px=16, title_line_height=1.3, content_line_height=1.7),
})

HEADING_STYLES: Mapping[HeadingStyle, HeadingTreatment] = MappingProxyType({
    "bold": HeadingTreatment(700, "none", "none"),
    "underline": HeadingTreatment(700, "none", "underline"),
    "uppercase": HeadingTreatment(700, "uppercase", "none"),
    "accent-border": HeadingTreatment(700, "none", "none", accent_border=True),
    "minimal": HeadingTreatment(500, "none", "none"),
})

CONTENT_FONT_WEIGHT = 400
ACCENT_BORDER_WIDTH_PX = 2

BORDER_RADIUS_PX: Mapping[BorderRadius, int] = MappingProxyType({
    "none": 0,
    "sm": 2,
    "md": 4,
    "lg": 8,
    "full": 9999,
})

# None means no box-shadow is emitted.
SHADOWS: Mapping[Shadow, str | None] = MappingProxyType({
    "none": None,
    "subtle": "0 1px 3px rgba(0,0,0,0.1)",
    "medium": "0 4px 6px rgba(0,0,0,0.15)",
    "strong": "0 10px 15px rgba(0,0,0,0.2)",
})

PADDING_PX: Mapping[SpacingSize, int] = MappingProxyType({
    "sm": 12,
    "md": 16,
    "lg": 20,
    "xl": 24,
})

SECTION_GAP_PX: Mapping[SpacingSize, int] = MappingProxyType({
    "sm": 16,
    "md": 20,
    "lg": 24,
    "xl": 32,
})

TABLES: Mapping[str, tuple[Mapping[Any, Any], Any]] = MappingProxyType({
    "paper_size": (PAPER_SIZES_MM, PaperSize),
    "margins": (MARGINS_MM, MarginSize),
    "column_distribution": (COLUMN_DISTRIBUTIONS, ColumnDistribution),
    "column_gap": (COLUMN_GAP_MM, SpacingDensity),
    "font_family": (FONT_STACKS, FontFamily),
    "font_size": (FONT_SCALES, FontSize),
    "heading_style": (HEADING_STYLES, HeadingStyle),
    "border_radius": (BORDER_RADIUS_PX, BorderRadius),
    "shadow": (SHADOWS, Shadow),
    "content_padding": (PADDING_PX, SpacingSize),
    "section_gap": (SECTION_GAP_PX, SpacingSize),
})


def lookup(table_name: str, key: Any) -> Any:
    """Fetch ``key`` from a registered table.

    Raises TokenLookupError when the key is missing, which means a schema
    value has no table entry.
    """
    table, _domain = TABLES[table_name]
    try:
        return table[key]
    except KeyError as exc:
        raise TokenLookupError(table_name, key) from exc
