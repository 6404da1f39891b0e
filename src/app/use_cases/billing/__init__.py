"""Billing domain use cases"""
from .build_swiss_qr_payload import BuildSwissQrPayload
from .verify_invoice_total import VerifyInvoiceTotal
from .dtos import (
    EncodeErrorCode,
    VerificationErrorCode,
    QrPayloadDTO,
    ClassifiedLineDTO,
    InvoiceTotalVerificationDTO,
)

__all__ = [
    "BuildSwissQrPayload",
    "VerifyInvoiceTotal",
    "EncodeErrorCode",
    "VerificationErrorCode",
    "QrPayloadDTO",
    "ClassifiedLineDTO",
    "InvoiceTotalVerificationDTO",
]
