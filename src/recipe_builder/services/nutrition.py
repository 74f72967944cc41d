"""Scaling and aggregation of per-100g nutrient data."""

import logging
from collections.abc import Iterable, Mapping
from uuid import UUID

from recipe_builder.domain.nutrients import (
    NUTRIENT_COLUMNS,
    NutrientRecord,
    parse_or_zero,
)
from recipe_builder.domain.recipes import (
    IngredientLine,
    RecipeTotals,
    ScaledIngredientRow,
)

_REFERENCE_GRAMS = 100.0

_logger = logging.getLogger(__name__)


def scale_nutrients(
    nutrients: Mapping[str, object], quantity_g: float
) -> dict[str, float]:
    """Scale per-100g nutrient values to a quantity in grams."""
    factor = quantity_g / _REFERENCE_GRAMS
    return {
        column: parse_or_zero(nutrients.get(column)) * factor
        for column in NUTRIENT_COLUMNS
    }


def index_records(records: Iterable[NutrientRecord]) -> dict[str, NutrientRecord]:
    """Index records by food code, keeping the first record for a repeated code."""
    index: dict[str, NutrientRecord] = {}
    for record in records:
        index.setdefault(record.code, record)
    return index


def aggregate_ingredients(
    lines: Iterable[IngredientLine],
    lookup: Mapping[str, NutrientRecord],
    recipe_id: UUID,
    timestamp: str,
) -> tuple[RecipeTotals, list[ScaledIngredientRow]]:
    """Sum scaled nutrients across ingredient lines.

    Lines whose food code has no record are skipped. Rows come back in
    input order, one per matched line.
    """
    total = RecipeTotals()
    rows: list[ScaledIngredientRow] = []
    for line in lines:
        record = lookup.get(line.code)
        if record is None:
            _logger.debug("Skipping unknown food code: code=%s", line.code)
            continue
        scaled = scale_nutrients(record.nutrients, line.quantity_g)
        total = total.plus(scaled)
        rows.append(
            ScaledIngredientRow(
                timestamp=timestamp,
                recipe_id=recipe_id,
                line_no=line.line_no,
                code=line.code,
                name=line.name,
                quantity_g=line.quantity_g,
                nutrients=scaled,
            )
        )
    return total, rows
