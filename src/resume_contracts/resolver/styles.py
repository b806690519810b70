"""Token -> concrete style resolution for section titles, content and containers."""

from __future__ import annotations

from resume_contracts.models.resume_ast import (
    GlobalStyles,
    ResolvedBoxStyle,
    ResolvedTypography,
    SectionStyles,
)
from resume_contracts.models.tokens import (
    ColorTokens,
    DesignTokens,
    TypographyTokens,
)
from resume_contracts.resolver.tables import (
    ACCENT_BORDER_WIDTH_PX,
    CONTENT_FONT_WEIGHT,
    lookup,
)


def resolve_title_typography(typography: TypographyTokens) -> ResolvedTypography:
    """Combine heading font, ``fontSize`` scale and ``headingStyle`` treatment."""
    scale = lookup("font_size", typography.font_size)
    treatment = lookup("heading_style", typography.heading_style)
    return ResolvedTypography(
        font_family=lookup("font_family", typography.font_family.heading),
        font_size_px=scale.title_px,
        line_height=scale.title_line_height,
        font_weight=treatment.font_weight,
        text_transform=treatment.text_transform,
        text_decoration=treatment.text_decoration,
    )


def resolve_content_typography(typography: TypographyTokens) -> ResolvedTypography:
    scale = lookup("font_size", typography.font_size)
    return ResolvedTypography(
        font_family=lookup("font_family", typography.font_family.body),
        font_size_px=scale.content_px,
        line_height=scale.content_line_height,
        font_weight=CONTENT_FONT_WEIGHT,
        text_transform="none",
        text_decoration="none",
    )


def resolve_container_style(tokens: DesignTokens) -> ResolvedBoxStyle:
    """Box model for a section container.

    The ``accent-border`` heading style draws an accent-colored border
    around the container; every other style leaves it borderless.
    """
    palette = tokens.colors.colors
    treatment = lookup("heading_style", tokens.typography.heading_style)
    if treatment.accent_border:
        border_color, border_width = palette.text.accent, ACCENT_BORDER_WIDTH_PX
    else:
        border_color, border_width = palette.border, 0
    return ResolvedBoxStyle(
        background_color=palette.background,
        border_color=border_color,
        border_width_px=border_width,
        border_radius_px=lookup("border_radius", tokens.colors.border_radius),
        padding_px=lookup("content_padding", tokens.spacing.content_padding),
        margin_bottom_px=lookup("section_gap", tokens.spacing.section_gap),
        shadow=lookup("shadow", tokens.colors.shadows),
    )


def resolve_section_styles(tokens: DesignTokens) -> SectionStyles:
    return SectionStyles(
        container=resolve_container_style(tokens),
        title=resolve_title_typography(tokens.typography),
        content=resolve_content_typography(tokens.typography),
    )


def resolve_global_styles(colors: ColorTokens) -> GlobalStyles:
    palette = colors.colors
    return GlobalStyles(
        background=palette.background,
        text_primary=palette.text.primary,
        text_secondary=palette.text.secondary,
        accent=palette.text.accent,
    )
