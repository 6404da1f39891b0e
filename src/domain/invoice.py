"""Invoice Domain Entity

Generated building-energy invoice, read-only input to the QR-bill encoder.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from pydantic import ConfigDict, Field
from src.domain.base import BaseModel
from src.domain.debtor import Debtor
from src.domain.invoice_line import InvoiceLineItem


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    DRAFT = "draft"
    PENDING = "pending"
    ISSUED = "issued"
    PAID = "paid"
    ARCHIVED = "archived"


class Invoice(BaseModel):
    """
    Invoice - Billing invoice for one building user and period

    Domain Rules:
    - total_amount is authoritative and is the amount embedded in the QR payload
    - total_amount must equal the sum of the line items that contribute to
      the total (verified by VerifyInvoiceTotal, never recomputed)
    - items keep the order produced by the billing engine
    """

    id: Optional[int] = Field(
        default=None,
        description="Invoice identifier"
    )

    invoice_number: str = Field(
        description="Invoice number (e.g., 2024-001)"
    )

    building_id: Optional[int] = Field(
        default=None,
        description="Building reference"
    )

    user_id: Optional[int] = Field(
        default=None,
        description="Billed user reference"
    )

    user: Optional[Debtor] = Field(
        default=None,
        description="Resolved debtor; None when the user cannot be found"
    )

    period_start: date = Field(
        description="Billing period start date"
    )

    period_end: date = Field(
        description="Billing period end date"
    )

    currency: str = Field(
        default="CHF",
        max_length=3,
        description="Currency code (ISO 4217)"
    )

    total_amount: Decimal = Field(
        description="Total invoice amount (2 decimals)"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Invoice status (draft, pending, issued, paid, archived)"
    )

    is_vzev: bool = Field(
        default=False,
        description="Invoice belongs to a virtual ZEV (shared grid connection)"
    )

    items: List[InvoiceLineItem] = Field(
        default_factory=list,
        description="Ordered line items"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "invoice_number": "2024-001",
                "building_id": 3,
                "user_id": 12,
                "period_start": "2024-01-01",
                "period_end": "2024-03-31",
                "currency": "CHF",
                "total_amount": "150.00",
                "status": "issued",
                "items": [
                    {"description": "Solar power", "item_type": "solar_power", "total_price": "100.00"},
                    {"description": "Car charging", "item_type": "car_charging_normal", "total_price": "50.00"},
                ],
            }
        }
    )
