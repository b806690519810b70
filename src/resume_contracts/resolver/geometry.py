"""Page geometry: paper size, margins and column arrangement."""

from __future__ import annotations

import logging

from resume_contracts.errors import GeometryInvariantError
from resume_contracts.models.layout import ColumnDistribution, LayoutConfig
from resume_contracts.models.resume_ast import ColumnDefinition, PageLayout
from resume_contracts.models.tokens import SpacingTokens
from resume_contracts.resolver.tables import lookup

logger = logging.getLogger(__name__)

DEFAULT_DISTRIBUTION: ColumnDistribution = "70-30"


def resolve_columns(
    layout: LayoutConfig,
    default_distribution: ColumnDistribution = DEFAULT_DISTRIBUTION,
) -> list[ColumnDefinition]:
    """Ordered column list for a layout; widths always sum to 100.

    ``single-column`` is always one column. ``compact`` and ``magazine`` are
    one column unless a distribution is given. The multi-column types fall
    back to ``default_distribution`` when none is given. Main takes the
    larger share; ``sidebar-left`` puts the sidebar first.
    """
    distribution = layout.column_distribution
    if layout.type == "single-column":
        if distribution is not None:
            logger.debug("Ignoring columnDistribution %s for single-column layout", distribution)
        distribution = None
    elif layout.is_multi_column and distribution is None:
        logger.warning(
            "Layout %s has no columnDistribution; using %s",
            layout.type, default_distribution,
        )
        distribution = default_distribution

    if distribution is None:
        return [ColumnDefinition(id="main", width_percentage=100, order=0)]

    main_share, sidebar_share = lookup("column_distribution", distribution)
    if layout.type == "sidebar-left":
        arrangement = [("sidebar", sidebar_share), ("main", main_share)]
    else:
        arrangement = [("main", main_share), ("sidebar", sidebar_share)]
    return [
        ColumnDefinition(id=column_id, width_percentage=share, order=position)
        for position, (column_id, share) in enumerate(arrangement)
    ]


def check_column_widths(columns: list[ColumnDefinition]) -> None:
    total = sum(column.width_percentage for column in columns)
    if total != 100:
        raise GeometryInvariantError(
            f"Column widths sum to {total}, expected 100",
            {"columns": [column.to_wire() for column in columns]},
        )


def resolve_page(
    layout: LayoutConfig,
    spacing: SpacingTokens,
    default_distribution: ColumnDistribution = DEFAULT_DISTRIBUTION,
) -> PageLayout:
    width_mm, height_mm = lookup("paper_size", layout.paper_size)
    margin_mm = lookup("margins", layout.margins)
    columns = resolve_columns(layout, default_distribution)
    check_column_widths(columns)
    column_gap_mm = lookup("column_gap", spacing.density) if len(columns) > 1 else 0
    return PageLayout(
        width_mm=width_mm,
        height_mm=height_mm,
        margin_top_mm=margin_mm,
        margin_bottom_mm=margin_mm,
        margin_left_mm=margin_mm,
        margin_right_mm=margin_mm,
        columns=columns,
        column_gap_mm=column_gap_mm,
    )
