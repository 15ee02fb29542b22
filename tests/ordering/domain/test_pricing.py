"""Tests for the order pricing calculator."""

from decimal import Decimal

import pytest
from storefront.ordering.pricing import SHIPPING_FLAT_RATE, TAX_RATE, calculate_pricing


class TestCalculatePricing:
    def test_single_line_example(self):
        pricing = calculate_pricing([(Decimal("10.00"), 2), (Decimal("5.00"), 1)])

        assert pricing.subtotal == Decimal("25.00")
        assert pricing.shipping == Decimal("9.99")
        assert pricing.tax == Decimal("2.00")
        assert pricing.total == Decimal("36.99")

    def test_float_prices_do_not_drift(self):
        pricing = calculate_pricing([(79.99, 3)])

        assert pricing.subtotal == Decimal("239.97")
        assert pricing.tax == Decimal("19.20")
        assert pricing.total == Decimal("269.16")

    def test_tax_rounds_half_up(self):
        # 0.5625 * 0.08 = 0.045 -> 0.05
        pricing = calculate_pricing([("0.5625", 1)])
        assert pricing.tax == Decimal("0.05")

    def test_total_is_sum_of_rounded_parts(self):
        pricing = calculate_pricing([("3.33", 7), ("0.07", 3)])
        assert pricing.total == pricing.subtotal + pricing.shipping + pricing.tax

    def test_shipping_is_flat(self):
        small = calculate_pricing([("1.00", 1)])
        large = calculate_pricing([("1000.00", 10)])

        assert small.shipping == large.shipping == SHIPPING_FLAT_RATE

    def test_tax_rate(self):
        pricing = calculate_pricing([("100.00", 1)])
        assert pricing.tax == Decimal("100.00") * TAX_RATE

    def test_no_lines_still_charges_shipping(self):
        pricing = calculate_pricing([])

        assert pricing.subtotal == Decimal("0.00")
        assert pricing.total == Decimal("9.99")

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValueError):
            calculate_pricing([("1.00", -1)])

    def test_as_strings(self):
        pricing = calculate_pricing([("25.00", 1)])
        assert pricing.as_strings() == {
            "subtotal": "25.00",
            "shipping": "9.99",
            "tax": "2.00",
            "total": "36.99",
        }
