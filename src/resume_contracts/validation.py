"""Validation of untrusted payloads against the contract schemas.

Validators never raise for bad input. They return a ``ValidationResult``
holding either the parsed model or a list of ``ValidationIssue`` entries
(dotted path, message, machine-readable kind). ``validate_or_raise`` is the
throwing variant for callers that prefer exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from resume_contracts.errors import SchemaValidationError, ValidationIssue
from resume_contracts.models.layout import LayoutConfig
from resume_contracts.models.resume_dsl import ResumeDsl
from resume_contracts.models.section_data import SECTION_DATA_ADAPTER, SectionData
from resume_contracts.models.sections import (
    ITEM_OVERRIDES_ADAPTER,
    SECTION_CONFIGS_ADAPTER,
    SectionConfig,
    SectionItemOverrides,
)
from resume_contracts.models.tokens import DesignTokens

T = TypeVar("T")

Schema = Union[type[BaseModel], TypeAdapter]


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of validating one payload."""

    success: bool
    data: T | None = None
    errors: tuple[ValidationIssue, ...] = ()

    def unwrap(self) -> T:
        if not self.success:
            raise SchemaValidationError(self.errors)
        return self.data


def issues_from_pydantic(exc: PydanticValidationError, prefix: str = "") -> list[ValidationIssue]:
    """Flatten a pydantic error into dotted-path issues."""
    issues = []
    for err in exc.errors():
        parts = [prefix] if prefix else []
        parts.extend(str(part) for part in err["loc"])
        issues.append(
            ValidationIssue(path=".".join(parts), message=err["msg"], kind=err["type"])
        )
    return issues


def validate(schema: Schema, data: Any, prefix: str = "") -> ValidationResult:
    """Validate ``data`` against a model class or a TypeAdapter."""
    try:
        if isinstance(schema, TypeAdapter):
            parsed = schema.validate_python(data)
        else:
            parsed = schema.model_validate(data)
    except PydanticValidationError as exc:
        return ValidationResult(success=False, errors=tuple(issues_from_pydantic(exc, prefix)))
    return ValidationResult(success=True, data=parsed)


def validate_or_raise(schema: Schema, data: Any, prefix: str = ""):
    """Validate and return the parsed value, raising SchemaValidationError on failure."""
    return validate(schema, data, prefix).unwrap()


def layout_issues(layout: LayoutConfig, prefix: str = "") -> list[ValidationIssue]:
    """Cross-field layout rules the plain schema does not enforce."""
    base = f"{prefix}." if prefix else ""
    issues = []
    if layout.is_multi_column and layout.column_distribution is None:
        issues.append(
            ValidationIssue(
                path=f"{base}columnDistribution",
                message=f"columnDistribution is required for layout type {layout.type!r}",
                kind="missing_column_distribution",
            )
        )
    if layout.show_page_numbers and layout.page_number_position is None:
        issues.append(
            ValidationIssue(
                path=f"{base}pageNumberPosition",
                message="pageNumberPosition is required when showPageNumbers is true",
                kind="missing_page_number_position",
            )
        )
    return issues


def validate_tokens(data: Any) -> ValidationResult[DesignTokens]:
    return validate(DesignTokens, data)


def validate_sections(data: Any) -> ValidationResult[list[SectionConfig]]:
    return validate(SECTION_CONFIGS_ADAPTER, data)


def validate_item_overrides(data: Any) -> ValidationResult[SectionItemOverrides]:
    return validate(ITEM_OVERRIDES_ADAPTER, data)


def validate_section_content(data: Any, prefix: str = "") -> ValidationResult[SectionData]:
    return validate(SECTION_DATA_ADAPTER, data, prefix)


def validate_layout(data: Any, *, strict_layout: bool = False) -> ValidationResult[LayoutConfig]:
    result = validate(LayoutConfig, data)
    if result.success and strict_layout:
        issues = layout_issues(result.data)
        if issues:
            return ValidationResult(success=False, errors=tuple(issues))
    return result


def validate_dsl(data: Any, *, strict_layout: bool = False) -> ValidationResult[ResumeDsl]:
    """Validate a complete DSL document.

    With ``strict_layout`` the layout must also pass ``layout_issues``.
    """
    result = validate(ResumeDsl, data)
    if result.success and strict_layout:
        issues = layout_issues(result.data.layout, prefix="layout")
        if issues:
            return ValidationResult(success=False, errors=tuple(issues))
    return result
