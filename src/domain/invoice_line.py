"""Invoice Line Item Domain Entity

Tracks individual rows within a generated invoice.
"""

from decimal import Decimal
from typing import Optional
from enum import Enum
from pydantic import Field
from src.domain.base import FrozenModel


class InvoiceItemType(str, Enum):
    """Item type tags emitted by the billing engine"""
    # Section headers
    METER_INFO = "meter_info"
    CHARGING_HEADER = "charging_header"

    # Informational rows
    METER_READING_FROM = "meter_reading_from"
    METER_READING_TO = "meter_reading_to"
    TOTAL_CONSUMPTION = "total_consumption"
    CHARGING_SESSION_FROM = "charging_session_from"
    CHARGING_SESSION_TO = "charging_session_to"
    TOTAL_CHARGED = "total_charged"

    SEPARATOR = "separator"

    # Energy and charging tiers
    SOLAR_POWER = "solar_power"
    NORMAL_POWER = "normal_power"
    CAR_CHARGING_NORMAL = "car_charging_normal"
    CAR_CHARGING_PRIORITY = "car_charging_priority"

    # Classified by amount only
    CUSTOM_ITEM = "custom_item"
    CUSTOM_ITEM_HEADER = "custom_item_header"
    SHARED_METER_INFO = "shared_meter_info"
    SHARED_METER_DETAIL = "shared_meter_detail"
    SHARED_METER_CHARGE = "shared_meter_charge"
    METER_READING_COMPACT = "meter_reading_compact"
    CHARGING_SESSION_COMPACT = "charging_session_compact"
    PRORATION_NOTICE = "proration_notice"


class InvoiceLineItem(FrozenModel):
    """
    Invoice Line Item - One row of a generated invoice

    Domain Rules:
    - item_type is a free tag; unknown tags are accepted so newer billing
      engines can add row types without breaking older readers
    - total_price may be zero (informational rows)
    - Immutable once the invoice is generated
    """

    id: Optional[int] = Field(
        default=None,
        description="Line item identifier"
    )

    description: str = Field(
        default="",
        description="Display text (e.g., 'Solar power 120.5 kWh x 0.20 CHF')"
    )

    item_type: str = Field(
        default=InvoiceItemType.CUSTOM_ITEM.value,
        description="Item type tag (see InvoiceItemType)"
    )

    quantity: Decimal = Field(
        default=Decimal("0"),
        description="Quantity (kWh, sessions, units)"
    )

    unit_price: Decimal = Field(
        default=Decimal("0"),
        description="Price per unit"
    )

    total_price: Decimal = Field(
        default=Decimal("0"),
        description="Row amount in invoice currency"
    )
