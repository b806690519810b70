"""Section visibility, ordering and per-item overrides."""

from __future__ import annotations

import logging
from typing import Sequence

from resume_contracts.errors import ColumnReferenceError
from resume_contracts.models.resume_ast import PageLayout
from resume_contracts.models.section_data import ItemSectionData, SectionData
from resume_contracts.models.sections import FULL_WIDTH_COLUMN, ItemOverride, SectionConfig

logger = logging.getLogger(__name__)


def column_ranks(page: PageLayout) -> dict[str, int]:
    """Rank of each placeable column; full-width sorts before declared columns."""
    ranks = {FULL_WIDTH_COLUMN: -1}
    for column in page.columns:
        ranks[column.id] = column.order
    return ranks


def place_sections(
    sections: Sequence[SectionConfig],
    page: PageLayout,
) -> list[tuple[int, SectionConfig]]:
    """Visible sections as ``(input_index, config)`` in render order.

    Order is (column rank, ``order``, input index). Raises
    ColumnReferenceError when a visible section targets an undeclared column.
    """
    ranks = column_ranks(page)
    visible = []
    for index, section in enumerate(sections):
        if not section.visible:
            logger.debug("Skipping hidden section %s", section.id)
            continue
        if section.column not in ranks:
            raise ColumnReferenceError(section.id, section.column, page.column_ids(), index=index)
        visible.append((index, section))
    return sorted(visible, key=lambda pair: (ranks[pair[1].column], pair[1].order, pair[0]))


def apply_item_overrides(
    data: SectionData,
    overrides: Sequence[ItemOverride] | None,
) -> SectionData:
    """Filter and reorder list items by their overrides.

    Hidden items are dropped. Items without an override stay visible. The
    sort key is ``(override.order, index)`` for overridden items and
    ``(index, index)`` for the rest, so both share one numeric scale: with
    items ``[a, b, c]`` and ``c`` at order 0 the result is ``[a, c, b]``,
    not ``c`` first. Text sections are returned unchanged.
    """
    if not overrides or not isinstance(data, ItemSectionData):
        return data

    by_id = {override.item_id: override for override in overrides}
    known = {item.id for item in data.items}
    for item_id in sorted(by_id.keys() - known):
        logger.warning("Override for unknown item %s in section %s", item_id, data.type)

    ranked = []
    for index, item in enumerate(data.items):
        override = by_id.get(item.id)
        if override is None:
            ranked.append(((index, index), item))
        elif override.visible:
            ranked.append(((override.order, index), item))
    ranked.sort(key=lambda pair: pair[0])
    return data.model_copy(update={"items": [item for _, item in ranked]})
