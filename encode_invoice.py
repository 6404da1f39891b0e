"""Command line entry point

Reads an invoice, sender and banking record from a JSON file and prints the
Swiss QR-bill payload, or the error that prevented it.

    python encode_invoice.py invoice.json [--verify-total]

The JSON document has the keys "invoice", "sender" and "banking".
"""

import argparse
import json
import logging
import sys

from config import ApplicationConfig
from src.app.use_cases.billing import BuildSwissQrPayload, VerifyInvoiceTotal
from src.domain import Banking, Invoice, Sender
from src.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build a Swiss QR-bill payload for an invoice")
    parser.add_argument("path", help="JSON file with invoice, sender and banking")
    parser.add_argument("--verify-total", action="store_true", help="check the total against the line items first")
    parser.add_argument("--log-level", default=ApplicationConfig.LOG_LEVEL)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    with open(args.path, "r", encoding="utf-8") as r_file:
        data = json.load(r_file)

    invoice = Invoice.model_validate(data["invoice"])
    sender = Sender.model_validate(data.get("sender") or {})
    banking = Banking.model_validate(data.get("banking") or {})

    if args.verify_total:
        verification = VerifyInvoiceTotal().execute(invoice)
        if verification.is_err():
            logger.error(f"{verification.error.code}: {verification.error.message}")
            return 1

    result = BuildSwissQrPayload().execute(invoice, sender, banking)
    if result.is_err():
        logger.error(f"{result.error.code}: {result.error.message}")
        return 1

    sys.stdout.write(result.value.payload)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
