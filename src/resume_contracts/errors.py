"""Exception hierarchy for contract validation and layout resolution.

Two families live here:

- Caller errors (``SchemaValidationError``, ``ResolutionError`` subclasses).
  These describe bad input and are turned into structured results by
  ``ResumeResolver.run``.
- Programmer errors (``TokenLookupError``, ``GeometryInvariantError``).
  These mean the lookup tables and the schemas drifted apart and are never
  caught by the resolver.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class ValidationIssue:
    """One field-level violation."""

    path: str
    message: str
    kind: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class ContractError(Exception):
    """Base exception for all resume contract errors."""

    code = "CONTRACT_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class SchemaValidationError(ContractError, ValueError):
    """Raised when a payload does not match its schema."""

    code = "VALIDATION_ERROR"

    def __init__(self, issues: Iterable[ValidationIssue], message: str | None = None):
        self.issues = list(issues)
        if message is None:
            message = _summarize(self.issues)
        super().__init__(message, {"issues": [i.to_dict() for i in self.issues]})


def _summarize(issues: list[ValidationIssue]) -> str:
    if not issues:
        return "Validation failed"
    first = issues[0]
    where = first.path or "<root>"
    more = f" (+{len(issues) - 1} more)" if len(issues) > 1 else ""
    return f"Validation failed at {where}: {first.message}{more}"


class ResolutionError(ContractError):
    """Input is well-formed but its parts do not reference each other correctly."""

    code = "RESOLUTION_ERROR"
    path = ""

    @property
    def issue(self) -> ValidationIssue:
        return ValidationIssue(path=self.path, message=self.message, kind=self.code)


class ColumnReferenceError(ResolutionError):
    """A visible section points at a column the page does not declare."""

    code = "UNKNOWN_COLUMN"

    def __init__(
        self,
        section_id: str,
        column_id: str,
        declared: Iterable[str],
        index: int | None = None,
    ):
        self.section_id = section_id
        self.column_id = column_id
        self.declared = list(declared)
        self.path = f"sections.{index}.column" if index is not None else "sections"
        super().__init__(
            f"Section {section_id!r} references column {column_id!r}, "
            f"but the layout only declares {self.declared}",
            {"sectionId": section_id, "columnId": column_id, "declared": self.declared},
        )


class SectionContentMismatchError(ResolutionError):
    """Content supplied for a section is of a different section kind."""

    code = "SECTION_CONTENT_MISMATCH"

    def __init__(self, section_id: str, content_type: str):
        self.section_id = section_id
        self.content_type = content_type
        self.path = f"content.{section_id}.type"
        super().__init__(
            f"Content for section {section_id!r} has type {content_type!r}",
            {"sectionId": section_id, "contentType": content_type},
        )


class TokenLookupError(ContractError, LookupError):
    """A token value has no entry in its resolution table."""

    code = "TOKEN_TABLE_MISS"

    def __init__(self, table: str, key: Any):
        self.table = table
        self.key = key
        super().__init__(
            f"No entry for {key!r} in resolution table {table!r}",
            {"table": table, "key": key},
        )


class GeometryInvariantError(ContractError, RuntimeError):
    """Resolved page geometry broke an internal invariant."""

    code = "GEOMETRY_INVARIANT"
