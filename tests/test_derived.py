"""Tests for derived nutrient formulas."""

import pytest

from recipe_builder.services.derived import (
    omega3_non_veg,
    omega3_veg,
    omega6_non_veg,
    omega6_veg,
    vitamin_a,
    vitamin_d,
)


def test_vitamin_d_uses_d2_value_in_first_code_range() -> None:
    assert vitamin_d("B002", 10, 2) == 10


def test_vitamin_d_adds_d3_equivalents_in_second_code_range() -> None:
    assert vitamin_d("P005", 10, 2) == 20


def test_vitamin_d_is_zero_outside_code_ranges() -> None:
    assert vitamin_d("Z999", 10, 2) == 0


@pytest.mark.parametrize(
    ("code", "expected"),
    [("A001", 10), ("L004", 10), ("L005", 0), ("M001", 20), ("S010", 20), ("S011", 0)],
)
def test_vitamin_d_range_bounds_are_inclusive(code: str, expected: float) -> None:
    assert vitamin_d(code, 10, 2) == expected


def test_vitamin_d_compares_codes_as_strings() -> None:
    # "L0041" sorts after "L004", "L00" sorts before it.
    assert vitamin_d("L0041", 10, 2) == 0
    assert vitamin_d("L00", 10, 2) == 10


def test_vitamin_a_retinol_equivalents() -> None:
    assert vitamin_a(12, 24, 48) == 16


def test_omega_veg_pass_through() -> None:
    assert omega3_veg(1.5) == 1.5
    assert omega6_veg(7.25) == 7.25


def test_omega_non_veg_sums_with_optional_fields() -> None:
    assert omega3_non_veg(1, 2, 3) == 6
    assert omega3_non_veg(1, 2, 3, 4) == 10
    assert omega6_non_veg(5, 1) == 6
    assert omega6_non_veg(5, 1, 0.5) == 6.5
