"""Shared test fixtures."""

from __future__ import annotations

import copy
import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

FIXED_MOMENT = datetime(2026, 1, 2, 12, 0, 0, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "2026-01-02T12:00:00.000Z"


@pytest.fixture
def valid_tokens() -> dict:
    return {
        "typography": {
            "fontFamily": {"heading": "inter", "body": "roboto"},
            "fontSize": "base",
            "headingStyle": "bold",
        },
        "colors": {
            "colors": {
                "primary": "#2563eb",
                "secondary": "#64748b",
                "background": "#ffffff",
                "surface": "#f8fafc",
                "text": {"primary": "#0f172a", "secondary": "#475569", "accent": "#2563eb"},
                "border": "#e2e8f0",
                "divider": "#cbd5e1",
            },
            "borderRadius": "md",
            "shadows": "subtle",
            "gradients": {"enabled": True, "direction": "to-right"},
        },
        "spacing": {
            "density": "comfortable",
            "sectionGap": "lg",
            "itemGap": "md",
            "contentPadding": "md",
        },
    }


@pytest.fixture
def minimal_tokens() -> dict:
    return {
        "typography": {
            "fontFamily": {"heading": "merriweather", "body": "merriweather"},
            "fontSize": "sm",
            "headingStyle": "minimal",
        },
        "colors": {
            "colors": {
                "primary": "#000000",
                "secondary": "#666666",
                "background": "#ffffff",
                "surface": "#ffffff",
                "text": {"primary": "#000000", "secondary": "#666666", "accent": "#000000"},
                "border": "#cccccc",
                "divider": "#e0e0e0",
            },
            "borderRadius": "none",
            "shadows": "none",
        },
        "spacing": {
            "density": "compact",
            "sectionGap": "sm",
            "itemGap": "sm",
            "contentPadding": "sm",
        },
    }


@pytest.fixture
def single_column_layout() -> dict:
    return {
        "type": "single-column",
        "paperSize": "a4",
        "margins": "normal",
        "pageBreakBehavior": "auto",
        "showPageNumbers": False,
    }


@pytest.fixture
def two_column_layout() -> dict:
    return {
        "type": "two-column",
        "paperSize": "letter",
        "margins": "compact",
        "columnDistribution": "70-30",
        "pageBreakBehavior": "section-aware",
        "showPageNumbers": True,
        "pageNumberPosition": "bottom-right",
    }


@pytest.fixture
def sidebar_left_layout() -> dict:
    return {
        "type": "sidebar-left",
        "paperSize": "a4",
        "margins": "relaxed",
        "columnDistribution": "60-40",
        "pageBreakBehavior": "manual",
        "showPageNumbers": True,
        "pageNumberPosition": "bottom-center",
    }


@pytest.fixture
def magazine_layout() -> dict:
    return {
        "type": "magazine",
        "paperSize": "letter",
        "margins": "wide",
        "columnDistribution": "50-50",
        "pageBreakBehavior": "auto",
        "showPageNumbers": False,
    }


@pytest.fixture
def section_configs() -> list[dict]:
    return [
        {"id": "summary", "visible": True, "order": 0, "column": "full-width"},
        {"id": "experience", "visible": True, "order": 1, "column": "main"},
        {"id": "education", "visible": True, "order": 2, "column": "main"},
        {"id": "skills", "visible": True, "order": 0, "column": "sidebar"},
        {"id": "languages", "visible": True, "order": 1, "column": "sidebar"},
        {"id": "certifications", "visible": False, "order": 3, "column": "main"},
    ]


@pytest.fixture
def item_overrides() -> dict:
    return {
        "experience": [
            {"itemId": "exp-1", "visible": True, "order": 0},
            {"itemId": "exp-2", "visible": True, "order": 1},
            {"itemId": "exp-3", "visible": False, "order": 2},
        ],
        "education": [
            {"itemId": "edu-1", "visible": True, "order": 0},
            {"itemId": "edu-2", "visible": True, "order": 1},
        ],
    }


@pytest.fixture
def complete_dsl(two_column_layout, valid_tokens, section_configs, item_overrides) -> dict:
    return {
        "version": "1.0.0",
        "layout": two_column_layout,
        "tokens": valid_tokens,
        "sections": section_configs,
        "itemOverrides": item_overrides,
    }


@pytest.fixture
def minimal_dsl(single_column_layout, minimal_tokens) -> dict:
    return {
        "version": "1.0.0",
        "layout": single_column_layout,
        "tokens": minimal_tokens,
        "sections": [
            {"id": "summary", "visible": True, "order": 0, "column": "full-width"},
            {"id": "experience", "visible": True, "order": 1, "column": "main"},
        ],
    }


@pytest.fixture
def section_content() -> dict:
    return {
        "summary": {
            "type": "summary",
            "data": {"content": "Engineer who builds scalable applications."},
        },
        "experience": {
            "type": "experience",
            "items": [
                {
                    "id": "exp-1",
                    "title": "Senior Engineer",
                    "company": "Tech Corp",
                    "dateRange": {"startDate": "2020-01-01", "isCurrent": True},
                    "achievements": ["Built the billing platform"],
                    "skills": ["Python", "PostgreSQL"],
                },
                {
                    "id": "exp-2",
                    "title": "Engineer",
                    "company": "Start Inc",
                    "dateRange": {"startDate": "2017-03", "endDate": "2019-12"},
                },
                {
                    "id": "exp-3",
                    "title": "Intern",
                    "company": "Lab Co",
                },
            ],
        },
        "education": {
            "type": "education",
            "items": [
                {"id": "edu-1", "institution": "State University", "degree": "BSc", "field": "CS"},
                {"id": "edu-2", "institution": "City College", "degree": "AA"},
            ],
        },
        "skills": {
            "type": "skills",
            "items": [
                {"id": "skill-1", "name": "Python", "level": "expert"},
                {"id": "skill-2", "name": "Go", "category": "backend"},
            ],
        },
        "languages": {
            "type": "languages",
            "items": [{"id": "lang-1", "name": "English", "cefrLevel": "C2"}],
        },
        "certifications": {
            "type": "certifications",
            "items": [{"id": "cert-1", "name": "CKA", "issuer": "CNCF", "issueDate": "2022-05"}],
        },
    }


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_MOMENT


@pytest.fixture
def section_styles() -> dict:
    return {
        "container": {
            "backgroundColor": "#ffffff",
            "borderColor": "#e2e8f0",
            "borderWidthPx": 0,
            "borderRadiusPx": 4,
            "paddingPx": 16,
            "marginBottomPx": 24,
            "shadow": "0 1px 3px rgba(0,0,0,0.1)",
        },
        "title": {
            "fontFamily": "Inter, sans-serif",
            "fontSizePx": 16,
            "lineHeight": 1.5,
            "fontWeight": 700,
            "textTransform": "none",
            "textDecoration": "none",
        },
        "content": {
            "fontFamily": "Roboto, sans-serif",
            "fontSizePx": 14,
            "lineHeight": 1.6,
            "fontWeight": 400,
            "textTransform": "none",
            "textDecoration": "none",
        },
    }


@pytest.fixture
def complete_ast(section_styles) -> dict:
    return {
        "meta": {"version": "1.0.0", "generatedAt": FIXED_TIMESTAMP},
        "page": {
            "widthMm": 210,
            "heightMm": 297,
            "marginTopMm": 15,
            "marginBottomMm": 15,
            "marginLeftMm": 15,
            "marginRightMm": 15,
            "columns": [
                {"id": "main", "widthPercentage": 70, "order": 0},
                {"id": "sidebar", "widthPercentage": 30, "order": 1},
            ],
            "columnGapMm": 5,
        },
        "sections": [
            {
                "sectionId": "summary",
                "columnId": "full-width",
                "order": 0,
                "data": {"type": "summary", "data": {"content": "Summary content"}},
                "styles": copy.deepcopy(section_styles),
            },
            {
                "sectionId": "experience",
                "columnId": "main",
                "order": 1,
                "data": {
                    "type": "experience",
                    "items": [
                        {
                            "id": "exp-1",
                            "title": "Senior Engineer",
                            "company": "Tech Corp",
                            "achievements": ["Built cool stuff"],
                            "skills": ["React"],
                        }
                    ],
                },
                "styles": copy.deepcopy(section_styles),
            },
        ],
        "globalStyles": {
            "background": "#ffffff",
            "textPrimary": "#0f172a",
            "textSecondary": "#475569",
            "accent": "#2563eb",
        },
    }


@pytest.fixture
def write_json(tmp_path):
    def _write(name: str, payload) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def generated_at() -> str:
    return FIXED_TIMESTAMP
