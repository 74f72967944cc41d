"""Rounding and per-serving formatting of recipe totals."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from recipe_builder.domain.nutrients import NUTRIENT_FIELDS
from recipe_builder.domain.recipes import RecipeResult, RecipeTotals

PER_SERVING_ATTRS: tuple[str, ...] = ("energy", "protein", "fat", "carbs", "fiber")

# Magnitudes from here up render in exponent form instead of fixed point.
_EXPONENT_THRESHOLD = 1e21


def to_fixed(value: float, decimals: int = 2) -> str:
    """Render a number with a fixed count of decimals.

    Halves round away from zero on the exact binary value, and non-finite
    values render as ``Infinity``, ``-Infinity`` or ``NaN``. Magnitudes of
    1e21 and above use the shortest round-trip exponent form (``"1e+21"``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= _EXPONENT_THRESHOLD:
        return repr(float(value))
    if value == 0:
        value = 0.0
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as context:
        context.prec = max(exact.adjusted(), 0) + decimals + 2
        return str(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def divide(total: float, servings: int) -> float:
    """Divide a total by a serving count without raising on zero servings."""
    if servings == 0:
        if total == 0 or math.isnan(total):
            return math.nan
        return math.copysign(math.inf, total)
    return total / servings


def omega_ratio(omega3: float, omega6: float) -> str | int:
    """Omega-3 to omega-6 ratio, or 0 when there is no omega-6."""
    if omega6 > 0:
        return to_fixed(omega3 / omega6, 2)
    return 0


def format_result(totals: RecipeTotals, servings: int) -> RecipeResult:
    """Round totals per nutrient and derive per-serving values."""
    formatted = {
        nutrient.key: to_fixed(getattr(totals, nutrient.attr), nutrient.decimals)
        for nutrient in NUTRIENT_FIELDS
    }
    keys = {nutrient.attr: nutrient.key for nutrient in NUTRIENT_FIELDS}
    per_serving = {
        keys[attr]: to_fixed(divide(getattr(totals, attr), servings), 2)
        for attr in PER_SERVING_ATTRS
    }
    return RecipeResult(
        totals=formatted,
        per_serving=per_serving,
        omega3_to_6_ratio=omega_ratio(totals.omega3, totals.omega6),
    )
