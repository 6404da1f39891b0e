"""Data Transfer Objects for Billing Use Cases

Pydantic models returned by the QR-bill and total verification use cases.
"""

from decimal import Decimal
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class EncodeErrorCode(str, Enum):
    """Error codes returned by BuildSwissQrPayload"""
    MISSING_BANKING_DETAILS = "MISSING_BANKING_DETAILS"
    UNSUPPORTED_IBAN = "UNSUPPORTED_IBAN"
    MISSING_DEBTOR = "MISSING_DEBTOR"
    STRUCTURAL_MISMATCH = "STRUCTURAL_MISMATCH"


class VerificationErrorCode(str, Enum):
    """Error codes returned by VerifyInvoiceTotal"""
    TOTAL_MISMATCH = "TOTAL_MISMATCH"


class QrPayloadDTO(BaseModel):
    """
    Response DTO for Swiss QR-bill payload generation

    Returned by BuildSwissQrPayload. `payload` is embedded verbatim in the
    QR symbol by the renderer.
    """

    payload: str = Field(
        ...,
        description="SPC payload, 31 elements joined by CRLF"
    )

    iban: str = Field(
        ...,
        description="Normalized creditor IBAN"
    )

    amount: str = Field(
        ...,
        description="Amount as encoded (two decimals, '.' separator)"
    )

    currency: str = Field(
        ...,
        description="Currency code as encoded"
    )

    element_count: int = Field(
        ...,
        description="Number of CRLF-separated elements (always 31)"
    )

    @property
    def elements(self) -> List[str]:
        return self.payload.split("\r\n")

    model_config = {
        "json_schema_extra": {
            "example": {
                "payload": "SPC\r\n0200\r\n1\r\nCH9300762011623852957\r\n...\r\nEPD",
                "iban": "CH9300762011623852957",
                "amount": "150.00",
                "currency": "CHF",
                "element_count": 31,
            }
        }
    }


class ClassifiedLineDTO(BaseModel):
    """One classified invoice row"""

    description: str = Field(..., description="Display text")
    item_type: str = Field(..., description="Item type tag")
    category: str = Field(..., description="Line category (header, info, ...)")
    total_price: Decimal = Field(..., description="Row amount as stored")
    contributes_to_total: bool = Field(..., description="Row amount counts towards the total")
    highlight: Optional[str] = Field(default=None, description="Highlight key for tinted rows")


class InvoiceTotalVerificationDTO(BaseModel):
    """
    Response DTO for invoice total verification

    Returned by VerifyInvoiceTotal. The stored total is never modified.
    """

    invoice_number: str = Field(
        ...,
        description="Invoice number"
    )

    stored_total: Decimal = Field(
        ...,
        description="Invoice total as generated by the billing engine"
    )

    calculated_total: Decimal = Field(
        ...,
        description="Sum of rows that contribute to the total"
    )

    difference: Decimal = Field(
        ...,
        description="stored_total - calculated_total"
    )

    matches: bool = Field(
        ...,
        description="True when the difference is within tolerance"
    )

    lines: List[ClassifiedLineDTO] = Field(
        default_factory=list,
        description="Classified rows in invoice order"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "invoice_number": "2024-001",
                "stored_total": "150.00",
                "calculated_total": "150.00",
                "difference": "0.00",
                "matches": True,
                "lines": [],
            }
        }
    }
