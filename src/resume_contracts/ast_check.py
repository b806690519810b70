"""Boundary validation of resolved layout trees.

An AST may be built by one service and rendered by another, so it is
checked again before a renderer sees it: first structurally against
``ResumeAst``, then for internal integrity (column widths and references).
"""

from __future__ import annotations

from typing import Any

from resume_contracts.errors import SchemaValidationError, ValidationIssue
from resume_contracts.models.resume_ast import ResumeAst
from resume_contracts.models.sections import FULL_WIDTH_COLUMN
from resume_contracts.validation import ValidationResult, validate


def integrity_issues(ast: ResumeAst) -> list[ValidationIssue]:
    issues = []
    column_ids = ast.page.column_ids()

    if len(set(column_ids)) != len(column_ids):
        issues.append(
            ValidationIssue(
                path="page.columns",
                message=f"Duplicate column ids: {column_ids}",
                kind="duplicate_column",
            )
        )

    total = sum(column.width_percentage for column in ast.page.columns)
    if total != 100:
        issues.append(
            ValidationIssue(
                path="page.columns",
                message=f"Column widths sum to {total}, expected 100",
                kind="width_sum",
            )
        )

    placeable = set(column_ids) | {FULL_WIDTH_COLUMN}
    for index, section in enumerate(ast.sections):
        if section.column_id not in placeable:
            issues.append(
                ValidationIssue(
                    path=f"sections.{index}.columnId",
                    message=f"Column {section.column_id!r} is not declared on the page",
                    kind="unknown_column",
                )
            )
    return issues


def check_ast(data: Any) -> ValidationResult[ResumeAst]:
    """Structural then integrity validation of an AST payload."""
    result = validate(ResumeAst, data)
    if not result.success:
        return result
    issues = integrity_issues(result.data)
    if issues:
        return ValidationResult(success=False, errors=tuple(issues))
    return result


def ensure_valid_ast(ast: ResumeAst) -> ResumeAst:
    """Re-validate an AST from its wire form; raises SchemaValidationError."""
    result = check_ast(ast.to_wire())
    if not result.success:
        raise SchemaValidationError(result.errors, "Resolved AST failed boundary validation")
    return ast
