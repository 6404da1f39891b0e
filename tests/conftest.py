import pytest
from datetime import date
from decimal import Decimal

from src.domain import Banking, Debtor, Invoice, InvoiceLineItem, InvoiceStatus, Sender


@pytest.fixture
def sample_debtor():
    """Billed user living in Zurich"""
    return Debtor(
        id=12,
        first_name="Anna",
        last_name="Muster",
        email="anna.muster@example.ch",
        address_street="Seestrasse 5",
        address_zip="8001",
        address_city="Zürich",
        address_country="CH",
    )


@pytest.fixture
def sample_sender():
    """Building administration sending the invoice"""
    return Sender(
        name="Verwaltung AG",
        address="Bahnhofstrasse 1",
        zip="8000",
        city="Zürich",
        country="CH",
    )


@pytest.fixture
def sample_banking():
    """Swiss creditor account"""
    return Banking(
        name="Zürcher Kantonalbank",
        iban="CH93 0076 2011 6238 5295 7",
        holder="Verwaltung AG",
    )


@pytest.fixture
def sample_items():
    """Energy and charging rows as produced by the billing engine"""
    return [
        InvoiceLineItem(description="Apartment meter", item_type="meter_info"),
        InvoiceLineItem(description="Reading from: 1200 kWh", item_type="meter_reading_from"),
        InvoiceLineItem(description="Reading to: 1700 kWh", item_type="meter_reading_to"),
        InvoiceLineItem(description="Consumption: 500 kWh", item_type="total_consumption"),
        InvoiceLineItem(
            description="Solar power 400 kWh x 0.25 CHF",
            item_type="solar_power",
            quantity=Decimal("400"),
            unit_price=Decimal("0.25"),
            total_price=Decimal("100.00"),
        ),
        InvoiceLineItem(item_type="separator"),
        InvoiceLineItem(description="EV charging", item_type="charging_header"),
        InvoiceLineItem(
            description="Car charging normal 200 kWh x 0.25 CHF",
            item_type="car_charging_normal",
            quantity=Decimal("200"),
            unit_price=Decimal("0.25"),
            total_price=Decimal("50.00"),
        ),
        InvoiceLineItem(description="Meter rent included", item_type="custom_item", total_price=Decimal("0.00")),
    ]


@pytest.fixture
def sample_invoice(sample_debtor, sample_items):
    """Issued invoice 2024-001 over CHF 150.00"""
    return Invoice(
        id=1,
        invoice_number="2024-001",
        building_id=3,
        user_id=12,
        user=sample_debtor,
        period_start=date(2024, 1, 1),
        period_end=date(2024, 3, 31),
        currency="CHF",
        total_amount=Decimal("150.00"),
        status=InvoiceStatus.ISSUED,
        items=sample_items,
    )
