"""Discount — tests for the validated discount value.

Tests cover:
    - Percentage bounds [0, 100] enforced at construction
    - apply_discount math without rounding
    - label rendering ("10%", "12.5%")
"""

import pytest

from dvdshop.core.discount import Discount, NO_DISCOUNT, apply_discount
from dvdshop.core.errors import InvalidDiscountError, ErrorCategory


@pytest.mark.parametrize("percentage", [0, 10, 50, 100])
def test_valid_percentages(percentage):
    assert Discount("d", percentage, "desc").percentage == percentage


@pytest.mark.parametrize("percentage", [-1, -0.01, 100.5, 150])
def test_out_of_range_percentage_raises(percentage):
    with pytest.raises(InvalidDiscountError) as exc_info:
        Discount("d", percentage, "desc")
    assert exc_info.value.category == ErrorCategory.CONFIGURATION
    assert str(percentage) in exc_info.value.message


def test_no_discount_is_zero_percent():
    assert NO_DISCOUNT.percentage == 0
    assert apply_discount(45, NO_DISCOUNT) == 45


def test_apply_discount():
    assert apply_discount(30, Discount("d", 10, "")) == 27
    assert apply_discount(45, Discount("d", 20, "")) == 36
    assert apply_discount(45, Discount("d", 10, "")) == 40.5
    assert apply_discount(45, Discount("d", 100, "")) == 0


def test_label_drops_trailing_zero():
    assert Discount("d", 10, "").label == "10%"
    assert Discount("d", 20.0, "").label == "20%"
    assert Discount("d", 12.5, "").label == "12.5%"
