"""Derived nutrient formulas."""

_D2_CODE_RANGE = ("A001", "L004")
_D3_CODE_RANGE = ("M001", "S010")
_D3_EQUIVALENCE_FACTOR = 5


def vitamin_d(food_code: str, chocal: float, oh25d3: float) -> float:
    """Vitamin D in µg for a food code.

    Codes are compared as strings, so the ranges only hold for the fixed
    one-letter, three-digit code format.
    """
    if _D2_CODE_RANGE[0] <= food_code <= _D2_CODE_RANGE[1]:
        return chocal
    if _D3_CODE_RANGE[0] <= food_code <= _D3_CODE_RANGE[1]:
        return chocal + _D3_EQUIVALENCE_FACTOR * oh25d3
    return 0


def vitamin_a(retinol: float, beta_carotene: float, alpha_carotene: float) -> float:
    """Retinol activity equivalent."""
    return retinol + beta_carotene / 12 + alpha_carotene / 24


def omega3_veg(c18_3n3: float) -> float:
    """Omega-3 for plant foods (ALA only)."""
    return c18_3n3


def omega6_veg(c18_2n6: float) -> float:
    """Omega-6 for plant foods (LA only)."""
    return c18_2n6


def omega3_non_veg(
    c18_3n3: float, c20_5n3: float, c22_6n3: float, c22_5n3: float = 0
) -> float:
    """Omega-3 for animal foods: ALA + EPA + DHA + DPA."""
    return c18_3n3 + c20_5n3 + c22_6n3 + c22_5n3


def omega6_non_veg(c18_2n6: float, c20_4n6: float, c18_3n6: float = 0) -> float:
    """Omega-6 for animal foods: LA + AA + GLA."""
    return c18_2n6 + c20_4n6 + c18_3n6
