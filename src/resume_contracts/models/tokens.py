"""Pydantic models for design tokens (semantic style choices)."""

from __future__ import annotations

from typing import Literal

from pydantic import StrictBool

from resume_contracts.models.base import ContractModel

FontFamily = Literal[
    "inter",
    "merriweather",
    "roboto",
    "open-sans",
    "playfair-display",
    "source-serif",
    "lato",
    "poppins",
]
FontSize = Literal["sm", "base", "lg"]
HeadingStyle = Literal["bold", "underline", "uppercase", "accent-border", "minimal"]
BorderRadius = Literal["none", "sm", "md", "lg", "full"]
Shadow = Literal["none", "subtle", "medium", "strong"]
GradientDirection = Literal["to-right", "to-left", "to-bottom", "to-top", "diagonal"]
SpacingDensity = Literal["compact", "comfortable", "spacious"]
SpacingSize = Literal["sm", "md", "lg", "xl"]


class FontFamilyTokens(ContractModel):
    heading: FontFamily
    body: FontFamily


class TypographyTokens(ContractModel):
    font_family: FontFamilyTokens
    font_size: FontSize
    heading_style: HeadingStyle


class TextColors(ContractModel):
    primary: str
    secondary: str
    accent: str


class ColorPalette(ContractModel):
    # Any CSS color string is accepted; format is not enforced.
    primary: str
    secondary: str
    background: str
    surface: str
    text: TextColors
    border: str
    divider: str


class GradientTokens(ContractModel):
    enabled: StrictBool
    direction: GradientDirection


class ColorTokens(ContractModel):
    colors: ColorPalette
    border_radius: BorderRadius
    shadows: Shadow
    gradients: GradientTokens | None = None


class SpacingTokens(ContractModel):
    density: SpacingDensity
    section_gap: SpacingSize
    item_gap: SpacingSize
    content_padding: SpacingSize


class DesignTokens(ContractModel):
    typography: TypographyTokens
    colors: ColorTokens
    spacing: SpacingTokens
