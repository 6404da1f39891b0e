"""BuildSwissQrPayload Use Case

Encodes an invoice as a Swiss Payments Code (SPC 0200) QR-bill payload.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List
from libs.result import Result, Return, Error
from config import ApplicationConfig
from src.app.services.address_splitter import split_address, truncate
from src.app.services.country import resolve_country_code
from src.app.services.iban import normalize_iban, is_supported_iban
from src.domain.invoice import Invoice
from src.domain.payment_party import Banking, Sender
from .dtos import EncodeErrorCode, QrPayloadDTO

logger = logging.getLogger(__name__)

SEPARATOR = "\r\n"
ELEMENT_COUNT = 31

QR_TYPE = "SPC"
VERSION = "0200"
CODING_TYPE = "1"  # UTF-8
ADDRESS_TYPE_STRUCTURED = "S"
REFERENCE_TYPE_NONE = "NON"
TRAILER = "EPD"

NAME_MAX_LENGTH = 70
POSTAL_CODE_MAX_LENGTH = 16
TOWN_MAX_LENGTH = 35
CURRENCY_MAX_LENGTH = 3
ADDITIONAL_INFO_MAX_LENGTH = 140

CENTS = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Two decimals, '.' separator, no grouping, independent of locale"""
    quantized = Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"{quantized:f}"


def _single_line(value: str) -> str:
    """Replace line breaks typed into free-text fields, keeping the length"""
    return value.replace("\r", " ").replace("\n", " ")


class BuildSwissQrPayload:
    """
    Use Case: Build the Swiss QR-bill payload for an invoice

    Business Rules:
    1. Banking IBAN and account holder are required
    2. Creditor IBAN must be a CH or LI account
    3. The invoice must have a debtor
    4. Fields are truncated to their maximum length, never rejected
    5. The payload has exactly 31 CRLF-separated elements

    Flow:
    1. Check banking details
    2. Normalize and validate IBAN
    3. Check debtor
    4. Build creditor, amount, debtor and reference blocks
    5. Verify element count and return payload

    Pure function of (invoice, sender, banking): no time, randomness or locale
    is used, so identical inputs produce an identical payload.
    """

    def __init__(
        self,
        default_country: str = None,
        default_currency: str = None,
    ):
        """
        Args:
            default_country: ISO-2 code for addresses without country
                (defaults to ApplicationConfig.QR_DEFAULT_COUNTRY)
            default_currency: Currency for invoices without one
                (defaults to ApplicationConfig.QR_DEFAULT_CURRENCY)
        """
        self.default_country = default_country or ApplicationConfig.QR_DEFAULT_COUNTRY
        self.default_currency = default_currency or ApplicationConfig.QR_DEFAULT_CURRENCY

    def execute(self, invoice: Invoice, sender: Sender, banking: Banking) -> Result[QrPayloadDTO]:
        """
        Execute payload generation

        Args:
            invoice: Generated invoice (total_amount is encoded as is)
            sender: Creditor address
            banking: Creditor account

        Returns:
            Result[QrPayloadDTO]: Payload or one of the EncodeErrorCode errors
        """
        # Step 1: Banking details
        if not banking.has_payment_details:
            return Return.err(
                Error(
                    code=EncodeErrorCode.MISSING_BANKING_DETAILS.value,
                    message="IBAN and account holder are required for a QR-bill",
                    reason="Banking details are missing or incomplete",
                )
            )

        # Step 2: IBAN
        iban = normalize_iban(banking.iban)
        if not is_supported_iban(iban):
            logger.warning(f"Unsupported IBAN for invoice {invoice.invoice_number}: {iban}")
            return Return.err(
                Error(
                    code=EncodeErrorCode.UNSUPPORTED_IBAN.value,
                    message=f"IBAN {iban} is not a Swiss (CH) or Liechtenstein (LI) IBAN",
                    reason="QR-bills only accept CH or LI creditor accounts",
                )
            )

        # Step 3: Debtor
        debtor = invoice.user
        if debtor is None:
            return Return.err(
                Error(
                    code=EncodeErrorCode.MISSING_DEBTOR.value,
                    message=f"Invoice {invoice.invoice_number} has no billed user",
                    reason="An invoice without a debtor is not billable",
                )
            )

        # Step 4: Elements
        amount = format_amount(invoice.total_amount)
        currency = truncate(invoice.currency or self.default_currency, CURRENCY_MAX_LENGTH)
        creditor_street, creditor_house_number = split_address(sender.address)
        debtor_street, debtor_house_number = split_address(debtor.address_street)

        elements: List[str] = [
            QR_TYPE,
            VERSION,
            CODING_TYPE,
            iban,
            # Creditor
            ADDRESS_TYPE_STRUCTURED,
            truncate(banking.holder, NAME_MAX_LENGTH),
            creditor_street,
            creditor_house_number,
            truncate(sender.zip, POSTAL_CODE_MAX_LENGTH),
            truncate(sender.city, TOWN_MAX_LENGTH),
            resolve_country_code(sender.country, self.default_country),
            # Ultimate creditor (unused)
            "", "", "", "", "", "", "",
            # Amount
            amount,
            currency,
            # Debtor
            ADDRESS_TYPE_STRUCTURED,
            truncate(debtor.full_name, NAME_MAX_LENGTH),
            debtor_street,
            debtor_house_number,
            truncate(debtor.address_zip, POSTAL_CODE_MAX_LENGTH),
            truncate(debtor.address_city, TOWN_MAX_LENGTH),
            resolve_country_code(debtor.address_country, self.default_country),
            # Reference
            REFERENCE_TYPE_NONE,
            "",
            truncate(f"Invoice {invoice.invoice_number}", ADDITIONAL_INFO_MAX_LENGTH),
            TRAILER,
        ]

        payload = SEPARATOR.join(_single_line(element) for element in elements)

        # Step 5: Structure check on the joined string, not the list
        element_count = len(payload.split(SEPARATOR))
        if element_count != ELEMENT_COUNT:
            logger.error(
                f"Invalid QR payload structure for invoice {invoice.invoice_number}: "
                f"expected {ELEMENT_COUNT} elements, got {element_count}"
            )
            return Return.err(
                Error(
                    code=EncodeErrorCode.STRUCTURAL_MISMATCH.value,
                    message=f"Expected {ELEMENT_COUNT} payload elements, got {element_count}",
                    reason="QR payload builder produced a malformed payload",
                )
            )

        logger.info(
            f"Generated Swiss QR payload for invoice {invoice.invoice_number} "
            f"({currency} {amount})"
        )

        return Return.ok(
            QrPayloadDTO(
                payload=payload,
                iban=iban,
                amount=amount,
                currency=currency,
                element_count=element_count,
            )
        )
