"""VerifyInvoiceTotal Use Case

Checks that the stored invoice total matches the sum of its costed rows.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from libs.result import Result, Return, Error
from config import ApplicationConfig
from src.app.services.line_classifier import classify_items, contributing_total
from src.domain.invoice import Invoice
from .dtos import ClassifiedLineDTO, InvoiceTotalVerificationDTO, VerificationErrorCode

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
MISMATCH_POLICIES = ("warn", "error")


class VerifyInvoiceTotal:
    """
    Use Case: Verify an invoice total against its line items

    Business Rules:
    1. The stored total is authoritative and is never rewritten
    2. Only rows classified as contributing are summed
    3. Totals are compared at currency precision (2 decimals)
    4. A mismatch is always logged; with policy "error" it is also returned
       as TOTAL_MISMATCH

    Read-only: the invoice passed in is not modified.
    """

    def __init__(
        self,
        mismatch_policy: str = None,
        tolerance: Decimal = None,
    ):
        """
        Args:
            mismatch_policy: "warn" or "error"
                (defaults to ApplicationConfig.TOTAL_MISMATCH_POLICY)
            tolerance: Accepted absolute difference
                (defaults to ApplicationConfig.TOTAL_TOLERANCE)
        """
        policy = mismatch_policy or ApplicationConfig.TOTAL_MISMATCH_POLICY
        if policy not in MISMATCH_POLICIES:
            raise ValueError(f"Unknown mismatch policy '{policy}', expected one of {MISMATCH_POLICIES}")
        self.mismatch_policy = policy
        self.tolerance = Decimal(tolerance if tolerance is not None else ApplicationConfig.TOTAL_TOLERANCE)

    def execute(self, invoice: Invoice) -> Result[InvoiceTotalVerificationDTO]:
        """
        Execute total verification

        Args:
            invoice: Generated invoice with its line items

        Returns:
            Result[InvoiceTotalVerificationDTO]: Comparison details, or
            TOTAL_MISMATCH when the policy is "error"
        """
        lines = classify_items(invoice.items)

        stored_total = invoice.total_amount.quantize(CENTS, rounding=ROUND_HALF_UP)
        calculated_total = contributing_total(lines).quantize(CENTS, rounding=ROUND_HALF_UP)
        difference = stored_total - calculated_total
        matches = abs(difference) <= self.tolerance

        if not matches:
            logger.warning(
                f"Total mismatch for invoice {invoice.invoice_number}: "
                f"stored_total={stored_total}, "
                f"calculated_total={calculated_total}, "
                f"difference={difference}"
            )
            if self.mismatch_policy == "error":
                return Return.err(
                    Error(
                        code=VerificationErrorCode.TOTAL_MISMATCH.value,
                        message=f"Invoice {invoice.invoice_number} total {stored_total} "
                                f"does not match line items sum {calculated_total}",
                        reason="Stored total diverges from the costed line items",
                    )
                )

        line_dtos = [
            ClassifiedLineDTO(
                description=line.item.description,
                item_type=line.item.item_type,
                category=line.category.value,
                total_price=line.item.total_price,
                contributes_to_total=line.contributes_to_total,
                highlight=line.highlight,
            )
            for line in lines
        ]

        return Return.ok(
            InvoiceTotalVerificationDTO(
                invoice_number=invoice.invoice_number,
                stored_total=stored_total,
                calculated_total=calculated_total,
                difference=difference,
                matches=matches,
                lines=line_dtos,
            )
        )
