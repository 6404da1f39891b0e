"""Unit tests for the invoice line classifier

Tests cover:
- Category per item type and rule precedence
- Amount-based fallback for other and unknown item types
- Sum of rows contributing to the total
"""

import pytest
from decimal import Decimal

from src.app.services.line_classifier import (
    LineCategory,
    classify_item,
    classify_items,
    contributing_total,
)
from src.domain.invoice_line import InvoiceItemType, InvoiceLineItem


def make_item(item_type, total_price="0.00", description="row"):
    return InvoiceLineItem(description=description, item_type=item_type, total_price=Decimal(total_price))


class TestClassifyItemCategories:
    """Test category assignment per item type"""

    @pytest.mark.parametrize("item_type", ["meter_info", "charging_header"])
    def test_headers(self, item_type):
        line = classify_item(make_item(item_type))

        assert line.category == LineCategory.HEADER
        assert line.contributes_to_total is False
        assert line.spans_columns is True
        assert line.show_amount is False

    @pytest.mark.parametrize(
        "item_type",
        [
            "meter_reading_from",
            "meter_reading_to",
            "total_consumption",
            "charging_session_from",
            "charging_session_to",
            "total_charged",
        ],
    )
    def test_info_rows(self, item_type):
        line = classify_item(make_item(item_type))

        assert line.category == LineCategory.INFO
        assert line.contributes_to_total is False

    def test_separator(self):
        line = classify_item(make_item("separator"))

        assert line.category == LineCategory.SEPARATOR
        assert line.contributes_to_total is False

    @pytest.mark.parametrize(
        "item_type, highlight",
        [
            ("solar_power", "solar"),
            ("normal_power", "normal"),
            ("car_charging_normal", "charging"),
            ("car_charging_priority", "charging_priority"),
        ],
    )
    def test_highlighted_tiers(self, item_type, highlight):
        line = classify_item(make_item(item_type, "12.30"))

        assert line.category == LineCategory.COSTED_HIGHLIGHTED
        assert line.contributes_to_total is True
        assert line.highlight == highlight
        assert line.show_amount is True
        assert line.amount == Decimal("12.30")

    def test_highlighted_tier_with_zero_amount_does_not_contribute(self):
        line = classify_item(make_item("solar_power", "0.00"))

        assert line.category == LineCategory.COSTED_HIGHLIGHTED
        assert line.contributes_to_total is False
        assert line.amount == Decimal("0")

    def test_other_type_with_amount_is_costed_plain(self):
        line = classify_item(make_item("custom_item", "25.00"))

        assert line.category == LineCategory.COSTED_PLAIN
        assert line.contributes_to_total is True
        assert line.highlight is None

    def test_other_type_without_amount_is_zero_amount_info(self):
        line = classify_item(make_item("custom_item_header", "0.00"))

        assert line.category == LineCategory.ZERO_AMOUNT_INFO
        assert line.contributes_to_total is False
        assert line.show_amount is False

    def test_accepts_enum_item_type(self):
        line = classify_item(make_item(InvoiceItemType.NORMAL_POWER, "5.00"))

        assert line.category == LineCategory.COSTED_HIGHLIGHTED


class TestClassifyItemPrecedence:
    """Type rules are checked before the amount fallback"""

    def test_header_with_amount_stays_header(self):
        line = classify_item(make_item("meter_info", "99.00"))

        assert line.category == LineCategory.HEADER
        assert line.contributes_to_total is False

    def test_info_with_amount_stays_info(self):
        line = classify_item(make_item("total_consumption", "500.00"))

        assert line.category == LineCategory.INFO
        assert line.contributes_to_total is False

    def test_separator_with_amount_stays_separator(self):
        line = classify_item(make_item("separator", "1.00"))

        assert line.category == LineCategory.SEPARATOR


class TestClassifyUnknownTypes:
    """Unknown item types never fail"""

    def test_unknown_type_with_amount_is_costed_plain(self):
        line = classify_item(make_item("heat_pump_tier", "40.00"))

        assert line.category == LineCategory.COSTED_PLAIN
        assert line.contributes_to_total is True

    def test_unknown_type_without_amount_is_zero_amount_info(self):
        line = classify_item(make_item("heat_pump_tier", "0.00"))

        assert line.category == LineCategory.ZERO_AMOUNT_INFO

    def test_negative_amount_is_not_summed(self):
        line = classify_item(make_item("custom_item", "-10.00"))

        assert line.category == LineCategory.ZERO_AMOUNT_INFO
        assert line.contributes_to_total is False

    def test_empty_type(self):
        line = classify_item(make_item("", "3.00"))

        assert line.category == LineCategory.COSTED_PLAIN


class TestContributingTotal:

    def test_sum_of_contributing_rows(self):
        """
        Given: header, info, solar 100.00, charging 50.00 and a zero-amount row
        When: the rows are classified and summed
        Then: The total is 150.00
        """
        # Arrange
        items = [
            make_item("meter_info"),
            make_item("total_consumption"),
            make_item("solar_power", "100.00"),
            make_item("car_charging_normal", "50.00"),
            make_item("custom_item", "0.00"),
        ]

        # Act
        lines = classify_items(items)
        total = contributing_total(lines)

        # Assert
        assert total == Decimal("150.00")

    def test_classify_items_keeps_order(self, sample_items):
        lines = classify_items(sample_items)

        assert [line.item for line in lines] == sample_items

    def test_sample_invoice_rows_sum_to_stored_total(self, sample_invoice):
        lines = classify_items(sample_invoice.items)

        assert contributing_total(lines) == sample_invoice.total_amount

    def test_empty_items_sum_to_zero(self):
        assert contributing_total([]) == Decimal("0")

    def test_plain_and_highlighted_rows_are_summed(self):
        lines = classify_items([
            make_item("normal_power", "10.10"),
            make_item("car_charging_priority", "20.20"),
            make_item("shared_meter_charge", "5.05"),
            make_item("meter_reading_to", "999.00"),
        ])

        assert contributing_total(lines) == Decimal("35.35")
