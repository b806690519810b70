"""DSL -> AST resolution engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from resume_contracts.ast_check import ensure_valid_ast
from resume_contracts.config import AppConfig
from resume_contracts.errors import (
    ResolutionError,
    SchemaValidationError,
    SectionContentMismatchError,
    ValidationIssue,
)
from resume_contracts.models.layout import ColumnDistribution
from resume_contracts.models.resume_ast import AstMeta, PlacedSection, ResumeAst
from resume_contracts.models.resume_dsl import ResumeDsl
from resume_contracts.models.section_data import SectionData
from resume_contracts.resolver.geometry import DEFAULT_DISTRIBUTION, resolve_page
from resume_contracts.resolver.placement import apply_item_overrides, place_sections
from resume_contracts.resolver.styles import resolve_global_styles, resolve_section_styles
from resume_contracts.validation import validate_dsl, validate_section_content

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def _section_content(section_id: str, raw: Any) -> SectionData:
    result = validate_section_content(raw, prefix=f"content.{section_id}")
    data = result.unwrap()
    if data.type != section_id:
        raise SectionContentMismatchError(section_id, data.type)
    return data


def resolve_resume(
    dsl: ResumeDsl,
    content: Mapping[str, Any],
    *,
    clock: Clock = utc_now,
    default_distribution: ColumnDistribution = DEFAULT_DISTRIBUTION,
) -> ResumeAst:
    """Resolve a validated DSL plus fetched section content into an AST.

    Args:
        dsl: Validated DSL document.
        content: Section id -> section content (model or raw mapping).
        clock: Source of ``meta.generatedAt``; the only non-pure input.
        default_distribution: Used when a multi-column layout omits one.

    Raises:
        ColumnReferenceError: A visible section targets an undeclared column.
        SectionContentMismatchError: Content kind differs from its section id.
        SchemaValidationError: Supplied content is malformed.
    """
    page = resolve_page(dsl.layout, dsl.tokens.spacing, default_distribution)
    styles = resolve_section_styles(dsl.tokens)
    overrides = dsl.item_overrides or {}

    placed = []
    for _index, section in place_sections(dsl.sections, page):
        raw = content.get(section.id)
        if raw is None:
            logger.warning("No content supplied for visible section %s; omitting it", section.id)
            continue
        data = apply_item_overrides(_section_content(section.id, raw), overrides.get(section.id))
        placed.append(
            PlacedSection(
                section_id=section.id,
                column_id=section.column,
                order=section.order,
                data=data,
                styles=styles,
            )
        )
        logger.debug("Placed %s in %s (order %d)", section.id, section.column, section.order)

    return ResumeAst(
        meta=AstMeta(version=dsl.version, generated_at=format_timestamp(clock())),
        page=page,
        sections=placed,
        global_styles=resolve_global_styles(dsl.tokens.colors),
    )


@dataclass
class ResolutionResult:
    """Outcome of one resolution pass."""

    ast: ResumeAst | None = None
    errors: list[ValidationIssue] = field(default_factory=list)
    error_kind: str | None = None  # "validation" | "reference"

    @property
    def ok(self) -> bool:
        return self.ast is not None


class ResumeResolver:
    """Validates input, resolves it and checks the output at the boundary.

    Caller errors come back as a ``ResolutionResult``; lookup-table misses
    and geometry or output-validation failures propagate.
    """

    def __init__(
        self,
        *,
        strict_layout: bool = False,
        default_distribution: ColumnDistribution = DEFAULT_DISTRIBUTION,
        validate_output: bool = True,
        clock: Clock = utc_now,
    ):
        self.strict_layout = strict_layout
        self.default_distribution = default_distribution
        self.validate_output = validate_output
        self.clock = clock

    @classmethod
    def from_config(cls, config: AppConfig, *, clock: Clock = utc_now) -> ResumeResolver:
        return cls(
            strict_layout=config.validation.strict_layout,
            default_distribution=config.resolver.default_distribution,
            validate_output=config.resolver.validate_output,
            clock=clock,
        )

    def run(self, dsl: ResumeDsl | Mapping[str, Any], content: Mapping[str, Any]) -> ResolutionResult:
        checked = validate_dsl(dsl, strict_layout=self.strict_layout)
        if not checked.success:
            logger.info("DSL rejected with %d issue(s)", len(checked.errors))
            return ResolutionResult(errors=list(checked.errors), error_kind="validation")

        try:
            ast = resolve_resume(
                checked.data,
                content,
                clock=self.clock,
                default_distribution=self.default_distribution,
            )
        except SchemaValidationError as exc:
            return ResolutionResult(errors=exc.issues, error_kind="validation")
        except ResolutionError as exc:
            logger.info("Resolution failed: %s", exc.message)
            return ResolutionResult(errors=[exc.issue], error_kind="reference")

        if self.validate_output:
            ensure_valid_ast(ast)
        return ResolutionResult(ast=ast)
